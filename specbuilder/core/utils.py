"""
Object helpers shared by the serializers.

Key casing conversion and empty-attribute pruning over plain dict/list trees.
"""

from typing import Any


def _convert_keys(obj: Any, convert) -> Any:
    if isinstance(obj, dict):
        return {convert(str(key)): _convert_keys(value, convert) for key, value in obj.items()}
    if isinstance(obj, list):
        return [_convert_keys(item, convert) for item in obj]
    return obj


def uppercase_object_key(obj: Any) -> Any:
    """Recursively upper-case the first character of every mapping key."""
    return _convert_keys(obj, lambda key: key[:1].upper() + key[1:])


def lowercase_object_key(obj: Any) -> Any:
    """Recursively lower-case the first character of every mapping key."""
    return _convert_keys(obj, lambda key: key[:1].lower() + key[1:])


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, (dict, list)) and not value)


def remove_empty_attributes(obj: Any) -> Any:
    """
    Recursively drop None values, empty dicts and empty lists.

    Children are pruned first, so a dict holding only empty values disappears
    as well. Key order of the surviving attributes is kept. False, 0 and
    strings are values, not empties.
    """
    if isinstance(obj, dict):
        pruned = {}
        for key, value in obj.items():
            value = remove_empty_attributes(value)
            if not _is_empty(value):
                pruned[key] = value
        return pruned
    if isinstance(obj, list):
        pruned_items = [remove_empty_attributes(item) for item in obj]
        return [item for item in pruned_items if not _is_empty(item)]
    return obj
