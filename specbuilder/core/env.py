"""
User-defined environment variables.

Variables exported as `UDEV_<NAME>` at build time are injected into every
function as `<NAME>`. The builder never reads os.environ itself; callers run
this once and pass the result in.
"""

from typing import Dict, Mapping

DEFAULT_PREFIX = "UDEV_"


def filter_user_defined_env(environ: Mapping[str, str], prefix: str = DEFAULT_PREFIX) -> Dict[str, str]:
    """Return prefixed variables with the prefix stripped, in input order."""
    if not prefix:
        return {}

    env = {}
    for key, value in environ.items():
        if key.startswith(prefix) and len(key) > len(prefix):
            env[key[len(prefix):]] = value
    return env
