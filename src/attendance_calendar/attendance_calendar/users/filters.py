from __future__ import annotations

from typing import Iterable, Optional, Union

from ..attendance.model import Employee
from ..core.enums import Role

ROLE_OPTIONS = ("Manager", "EMT", "Driver")


def filter_employees(
    employees: Iterable[Employee],
    name_query: str = "",
    role: Optional[Union[Role, str]] = None,
) -> list[Employee]:
    """Narrow the roster by name substring and exact role, keeping order."""
    needle = (name_query or "").strip().lower()
    wanted = role.value if isinstance(role, Role) else (role or "").strip().lower()

    out = []
    for emp in employees:
        if needle and needle not in emp.name.lower():
            continue
        if wanted and emp.role.value != wanted:
            continue
        out.append(emp)
    return out


def filter_role_options(query: str = "") -> list[str]:
    needle = (query or "").lower()
    return [r for r in ROLE_OPTIONS if needle in r.lower()]
