# app/normalizers/types.py
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict

# One SharePoint list item exactly as the store returned it.
RawRecord = Dict[str, Any]


class ManagerRef(BaseModel):
    """Snapshot of an expanded Manager lookup. Not a live relation."""
    model_config = ConfigDict(frozen=True)

    Id: int = 0
    Title: str = ""


class Employee(BaseModel):
    """Canonical employee record. Rebuilt from the raw item on every fetch."""
    model_config = ConfigDict(frozen=True)

    Id: int = 0
    Title: str                      # always non-empty
    Code: str = ""                  # raw Title when it holds an employee code, not the name
    JobTitle: str = ""
    Department: str = ""
    Email: str = ""
    Phone: str = ""
    Status: str = ""
    JoiningDate: str = ""           # ISO text as stored
    Manager: Optional[ManagerRef] = None
