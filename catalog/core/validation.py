"""Presence checks shared by services and repositories."""
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from catalog.core.exceptions import ValidationError


def is_blank(value: Any) -> bool:
    """Return True for None and for strings that are empty once stripped."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def find_missing(fields: Mapping[str, Any], required: Iterable[str]) -> list[str]:
    """List the required field names that are absent or blank in ``fields``."""
    return [name for name in required if is_blank(fields.get(name))]


def ensure_required(
    resource: str,
    fields: Mapping[str, Any],
    required: Iterable[str],
) -> None:
    """Raise ValidationError naming every missing required field."""
    missing = find_missing(fields, required)
    if missing:
        raise ValidationError.missing_fields(resource, missing)


def ensure_not_blank(
    resource: str,
    fields: Mapping[str, Any],
    required: Iterable[str],
) -> None:
    """Reject required fields that were supplied but left blank."""
    supplied = [name for name in required if name in fields]
    ensure_required(resource, fields, supplied)


def ensure_valid_id(resource: str, entity_id: Any) -> int:
    """Return ``entity_id`` if it is a positive integer, else raise."""
    if entity_id is None:
        raise ValidationError(f"{resource} ID is required", field="id")
    if isinstance(entity_id, bool) or not isinstance(entity_id, int) or entity_id < 1:
        raise ValidationError(
            f"{resource} ID must be a positive integer", field="id"
        )
    return entity_id


def coerce_choices(
    resource: str,
    fields: Mapping[str, Any],
    choices: Mapping[str, type[Enum]],
) -> dict[str, Any]:
    """Return ``fields`` with enumerated values converted to their members.

    Absent and None values are left for the presence checks.
    """
    coerced = dict(fields)
    for name, enum_type in choices.items():
        value = coerced.get(name)
        if value is None:
            continue
        try:
            coerced[name] = enum_type(value)
        except ValueError:
            allowed = ", ".join(member.value for member in enum_type)
            raise ValidationError(
                f"{resource} {name} must be one of: {allowed}", field=name
            ) from None
    return coerced
