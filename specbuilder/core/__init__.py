"""
Core logic package.

Method normalization, event mapping, assembly, custom domains and object helpers.
"""

from .assembler import assemble, resolve_default
from .domain import resolve_custom_domain
from .env import filter_user_defined_env
from .event_mapper import map_events
from .methods import ALL_METHODS, normalize_methods
from .utils import lowercase_object_key, remove_empty_attributes, uppercase_object_key
