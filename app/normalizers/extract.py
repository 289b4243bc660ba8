# app/normalizers/extract.py
import re
from typing import Any, Mapping, Optional

# Sub-keys probed on person/lookup objects, in priority order
NAME_SUBKEYS = ("Title", "Name", "DisplayName", "FullName", "Label", "Email")

ID_KEYS = ("Id", "ID", "id")

_CODE_PATTERNS = (
    re.compile(r"[A-Za-z]{1,4}\d{2,6}", re.ASCII),  # EMP001, AB1234
    re.compile(r"[Ee][-_]\d+", re.ASCII),          # E-12, e_7
    re.compile(r"\d{3,6}", re.ASCII),              # 12345
)


def extract_string(value: Any) -> Optional[str]:
    """
    Pull one display string out of whatever SharePoint handed us.
    Returns None when there is nothing usable; never raises.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        s = value.strip()
        return s or None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else str(value)
    if isinstance(value, (list, tuple)):
        return extract_string(value[0]) if value else None
    if isinstance(value, Mapping):
        for key in NAME_SUBKEYS:
            sub = value.get(key)
            if isinstance(sub, str) and sub.strip():
                return sub.strip()
        return None
    return None


def looks_like_code(value: Optional[str]) -> bool:
    """True for employee-code shaped strings (EMP001, E-12, 12345)."""
    if not value:
        return False
    s = value.strip()
    return any(p.fullmatch(s) for p in _CODE_PATTERNS)


def coerce_id(rec: Mapping[str, Any]) -> int:
    """First non-null of Id/ID/id as an int; 0 when missing or not numeric."""
    for key in ID_KEYS:
        raw = rec.get(key)
        if raw is None or isinstance(raw, bool):
            continue
        if isinstance(raw, int):
            return raw
        try:
            num = float(str(raw).strip())
        except ValueError:
            return 0
        return int(num) if num.is_integer() else 0
    return 0
