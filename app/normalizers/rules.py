from typing import Any, Optional
from .base import Normalizer
from .extract import coerce_id, extract_string
from .names import find_human_name
from .types import Employee, ManagerRef, RawRecord

class RuleNormalizer(Normalizer):
    """
    Rule-based normalizer:
    takes a raw SharePoint list item (whatever columns this deployment has)
    and builds the canonical Employee the rest of the service works with.
    """
    def normalize_record(self, rec: RawRecord) -> Employee:
        return normalize(rec)


def normalize(rec: RawRecord) -> Employee:
    """Total and deterministic: same raw item, same Employee. No I/O."""
    emp_id = coerce_id(rec)
    raw_title = extract_string(rec.get("Title"))
    title = find_human_name(rec) or raw_title or f"#{emp_id}"
    return Employee(
        Id=emp_id,
        Title=title,
        Code=raw_title if raw_title and raw_title != title else "",
        JobTitle=first_string(rec, "JobTitle", "Position"),
        Department=first_string(rec, "Department", "Dept"),
        Email=first_string(rec, "Email", "EMail"),
        Phone=first_string(rec, "Phone", "ContactNumber"),
        Status=first_string(rec, "Status"),
        JoiningDate=first_string(rec, "JoiningDate"),
        Manager=manager_ref(rec.get("Manager")),
    )


# --- Field helpers ---

def first_string(rec: RawRecord, *keys: str) -> str:
    """First extractable value among `keys`, else empty string."""
    for key in keys:
        s = extract_string(rec.get(key))
        if s is not None:
            return s
    return ""

def manager_ref(value: Any) -> Optional[ManagerRef]:
    """Snapshot an expanded Manager lookup; None when it wasn't expanded."""
    if isinstance(value, list):
        value = value[0] if value else None
    if not isinstance(value, dict):
        return None
    return ManagerRef(Id=coerce_id(value), Title=extract_string(value) or "")


def get_default_normalizer() -> Normalizer:
    """Factory for the normalizer routes and the fetcher use."""
    return RuleNormalizer()
