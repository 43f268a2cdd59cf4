"""Pure comparators used by filter dispatch.

Every comparator answers "does this instance attribute satisfy the filter?".
A missing attribute (``None``) never satisfies a present filter.
"""

from __future__ import annotations

from collections.abc import Collection


def is_within_range(value: float | None, lower: float | None, upper: float | None) -> bool:
    """Inclusive bound check; a ``None`` bound leaves that side open."""
    if value is None:
        return False
    if lower is not None and value < lower:
        return False
    if upper is not None and value > upper:
        return False
    return True


def is_supported_from_strings(values: Collection[str] | None, target: str) -> bool:
    # case-sensitive membership, "x86_64" != "X86_64"
    if not values:
        return False
    return target in values


def is_supported_from_string(value: str | None, target: str) -> bool:
    if value is None:
        return False
    return value == target


def is_supported_with_bool(value: bool | None, target: bool) -> bool:
    if value is None:
        return False
    return value == target
