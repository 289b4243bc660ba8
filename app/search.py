from typing import Iterable, List
from app.normalizers.types import Employee

SEARCH_FIELDS = ("Title", "Code", "Department", "Email")


def matches(emp: Employee, query: str | None) -> bool:
    """Case-insensitive substring match on name, employee code, department or email. Blank query matches all."""
    if not query or not query.strip():
        return True
    q = query.lower()
    return any(q in (getattr(emp, f) or "").lower() for f in SEARCH_FIELDS)


def filter_employees(employees: Iterable[Employee], query: str | None) -> List[Employee]:
    return [e for e in employees if matches(e, query)]
