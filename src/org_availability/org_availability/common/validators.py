from __future__ import annotations

from collections.abc import Mapping, Sequence

from ..core.exceptions import ValidationError


def require_sequence(value, field_name: str) -> Sequence:
    """Accept lists/tuples of records; reject mappings, strings and scalars."""
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Sequence):
        raise ValidationError(f"{field_name} must be a list, got {type(value).__name__}")
    return value


def require_mapping(value, field_name: str) -> Mapping:
    if not isinstance(value, Mapping):
        raise ValidationError(f"{field_name} must be an object, got {type(value).__name__}")
    return value
