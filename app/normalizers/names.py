# app/normalizers/names.py
import re
from typing import Optional

from .extract import ID_KEYS, extract_string, looks_like_code
from .types import RawRecord

# Known good name columns. Order matters: the first usable one wins.
PRIORITY_KEYS = (
    "FullName",
    "Full_x0020_Name",
    "EmployeeName",
    "Employee_x0020_Name",
    "DisplayName",
    "PreferredName",
    "Name",
    "Title",
    "Employee",
    "Person",
    "Author",
    "Editor",
    "CreatedBy",
    "ModifiedBy",
)

NAME_KEY_PATTERN = re.compile(r"name|fullname|display|preferred|employee|person|contact", re.IGNORECASE)


def _is_metadata_key(key: str) -> bool:
    return key in ID_KEYS or key == "__metadata" or key.startswith(("odata.", "@odata."))


def find_human_name(rec: RawRecord) -> Optional[str]:
    """
    Best human-readable name in a raw list item, or None.

    1. priority keys in fixed order
    2. any other key whose name looks name-ish
    3. any value longer than one character
    Employee codes are rejected at every step.
    """
    for key in PRIORITY_KEYS:
        if key in rec:
            s = extract_string(rec[key])
            if s and not looks_like_code(s):
                return s

    for key, value in rec.items():
        if key in PRIORITY_KEYS or _is_metadata_key(key):
            continue
        if NAME_KEY_PATTERN.search(key):
            s = extract_string(value)
            if s and not looks_like_code(s):
                return s

    for key, value in rec.items():
        if _is_metadata_key(key):
            continue
        s = extract_string(value)
        if s and len(s) > 1 and not looks_like_code(s):
            return s

    return None
