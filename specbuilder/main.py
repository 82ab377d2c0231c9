#!/usr/bin/env python3
"""
Function Compute Spec Builder

Generate a Function Compute deployment template from f.yml.

Usage:
    python -m specbuilder.main [options]

Options:
    --spec PATH         Abstract spec path (default: $SPEC_PATH or f.yml)
    --output PATH       Output path (default: $OUTPUT_PATH or template.yml)
    --variant NAME      ros | component (default: $OUTPUT_VARIANT or ros)
    --dry-run           Print the template instead of writing it
    --verbose           Verbose output
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Mapping, Optional

from .builder import BUILDERS, build_template
from .config import SpecBuilderConfig
from .core.env import filter_user_defined_env
from .exceptions import SpecBuilderError
from .loader import dump_template, load_spec_file
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def generate_template(
    spec_path: Path,
    output_path: Path,
    variant: str = "ros",
    environ: Optional[Mapping[str, str]] = None,
    user_env_prefix: str = "UDEV_",
    access: str = "default",
    dry_run: bool = False,
) -> Any:
    """
    Build the template for spec_path and write it to output_path.

    Args:
        spec_path: f.yml path
        output_path: generated template path
        variant: output variant name
        environ: environment to pick user-defined variables from (default: os.environ)
        user_env_prefix: prefix of user-defined variables
        access: credential alias used when the provider names none
        dry_run: when True, print instead of writing
    """
    if environ is None:
        environ = os.environ

    logger.info(f"Loading spec: {spec_path}")
    origin_data = load_spec_file(spec_path)

    user_env = filter_user_defined_env(environ, user_env_prefix)
    if user_env:
        logger.info(f"Injecting {len(user_env)} user-defined env var(s)")

    template = build_template(
        origin_data, variant=variant, user_env=user_env, default_access=access
    )
    content = dump_template(template)

    if dry_run:
        print(f"\n[DryRun] Target: {output_path}")
        print("-" * 60)
        print(content.strip())
        print("-" * 60)
    else:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)
        logger.info(f"Generated {variant} template: {output_path}")

    return template


def main(argv=None):
    config = SpecBuilderConfig()

    parser = argparse.ArgumentParser(description="Generate a Function Compute template from f.yml")
    parser.add_argument("--spec", default=config.SPEC_PATH, help="Abstract spec path")
    parser.add_argument("--output", default=config.OUTPUT_PATH, help="Output template path")
    parser.add_argument(
        "--variant",
        default=config.OUTPUT_VARIANT,
        choices=sorted(BUILDERS),
        help="Output variant",
    )
    parser.add_argument(
        "--dry-run", action="store_true", help="Show what would be generated without writing files"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    args = parser.parse_args(argv)

    setup_logging(config.LOG_CONFIG_PATH, level="DEBUG" if args.verbose else config.LOG_LEVEL)

    try:
        generate_template(
            Path(args.spec),
            Path(args.output),
            variant=args.variant,
            user_env_prefix=config.USER_ENV_PREFIX,
            access=config.ACCESS,
            dry_run=args.dry_run,
        )
    except SpecBuilderError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
