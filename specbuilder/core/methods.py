"""
Where: specbuilder/core/methods.py
What: Normalize HTTP trigger method specifications.
Why: Function Compute only accepts a fixed set of methods on HTTP triggers.
"""

from typing import List, Sequence, Union

# ref: https://help.aliyun.com/document_detail/71229.html
ALL_METHODS = ("GET", "PUT", "POST", "DELETE", "HEAD", "PATCH")

_WILDCARDS = {"any", "all"}


def normalize_methods(methods: Union[str, Sequence[str], None]) -> List[str]:
    """
    Canonicalize a method specification.

    Supported inputs:
    - None / empty list, `any`, `all` -> every method in ALL_METHODS order
    - a single method (`get`)
    - a list of methods (`["get", "POST"]`)

    Unknown methods are dropped; input order is kept.
    """
    if isinstance(methods, str):
        if methods.lower() in _WILDCARDS:
            return list(ALL_METHODS)
        methods = [methods]
    elif not methods:
        return list(ALL_METHODS)

    normalized: List[str] = []
    for method in methods:
        upper = str(method).upper()
        if upper in ALL_METHODS and upper not in normalized:
            normalized.append(upper)
    return normalized
