from __future__ import annotations

from enum import Enum
from typing import Type, TypeVar

from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)


def require_non_empty(value: str, field_name: str) -> str:
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text", {field_name: ["Expected text."]})
    if not value or not value.strip():
        raise ValidationError(f"{field_name} cannot be empty", {field_name: ["This field is required."]})
    return value.strip()


def parse_choice(value, enum_cls: Type[E], field_name: str) -> E:
    """Coerce a raw value into ``enum_cls`` or fail with a field-level error."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(str(m.value) for m in enum_cls)
        raise ValidationError(
            f"Invalid {field_name}",
            {field_name: [f"Expected one of: {allowed}."]},
        )


def field_errors(exc: PydanticValidationError) -> dict[str, list[str]]:
    """Flatten a pydantic error into ``{field: [messages]}``."""
    errors: dict[str, list[str]] = {}
    for err in exc.errors():
        name = str(err["loc"][0]) if err.get("loc") else "__all__"
        errors.setdefault(name, []).append(err["msg"])
    return errors
