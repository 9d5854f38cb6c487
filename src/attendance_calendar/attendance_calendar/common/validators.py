from __future__ import annotations

import re

from ..core.constants import EMPLOYEE_SEQUENCE_DIGITS
from ..core.enums import Role
from ..core.exceptions import ValidationError

_EMPLOYEE_ID = re.compile(rf"^[A-Z]+\d{{{EMPLOYEE_SEQUENCE_DIGITS}}}$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} must not be empty")
    return str(value).strip()


def require_employee_id(value: str) -> str:
    """Employee ids look like ``DRV00001``: an uppercase prefix plus 5 digits."""
    value = require_non_empty(value, "employee id")
    if not _EMPLOYEE_ID.match(value):
        raise ValidationError(f"employee id {value!r} is not <PREFIX><{EMPLOYEE_SEQUENCE_DIGITS} digits>")
    return value


def require_role(value: str) -> Role:
    value = require_non_empty(value, "role")
    try:
        return Role(value.lower())
    except ValueError:
        raise ValidationError(f"unknown role {value!r}") from None
