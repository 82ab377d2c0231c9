"""
f.yml loading and template dumping.
"""

from pathlib import Path
from typing import Any, Dict

import yaml

from .exceptions import SpecFormatError, SpecNotFoundError


def parse_spec(content: str, source: str = "<string>") -> Dict[str, Any]:
    """Parse f.yml content into a raw mapping."""
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SpecFormatError(source, e) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SpecFormatError(source, TypeError(f"top level must be a mapping, got {type(data).__name__}"))
    return data


def load_spec_file(path: Path) -> Dict[str, Any]:
    """Read and parse an f.yml file."""
    if not path.exists():
        raise SpecNotFoundError(path)

    with open(path, encoding="utf-8") as f:
        return parse_spec(f.read(), source=str(path))


def dump_template(template: Any) -> str:
    """Render a built template as YAML, keeping key order."""
    return yaml.safe_dump(template, sort_keys=False, allow_unicode=True, default_flow_style=False)
