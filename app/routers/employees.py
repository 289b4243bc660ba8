import logging
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse

from app.display import avatar_color, initials_from_name, status_color
from app.fetcher import PagedFetcher, fetch_employees
from app.normalizers import Employee, get_default_normalizer
from app.search import filter_employees
from app.sources import RecordNotFound, RecordSource, SourceError, get_source

log = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["employees"])

# -------------------------------------------------------------------
# Serializer: Employee plus the avatar values the UI renders
# -------------------------------------------------------------------
def _employee_to_dict(e: Employee) -> Dict[str, Any]:
    out = e.model_dump()
    out["avatar_color"] = avatar_color(e.Title)
    out["initials"] = initials_from_name(e.Title)
    out["status_color"] = status_color(e.Status)
    return out

# -------------------------------------------------------------------
# Roster
# -------------------------------------------------------------------
@router.get("/employees")
def list_employees(
    q: Optional[str] = Query(None, description="Name, department or email contains, case-insensitive"),
    source: RecordSource = Depends(get_source),
):
    """
    Fetch the whole list, normalize every item, filter by `q`.

    On a failed fetch the body still has the usual shape, with an empty
    `items` list and the error message, so the UI can show both.
    """
    result = fetch_employees(PagedFetcher(source), get_default_normalizer())
    if not result.ok:
        return JSONResponse(
            status_code=502,
            content={"ok": False, "count": 0, "items": [], "error": result.error},
        )
    items = [_employee_to_dict(e) for e in filter_employees(result.records, q)]
    return {"ok": True, "count": len(items), "items": items}


@router.get("/employees/{employee_id}")
def get_employee(employee_id: int, source: RecordSource = Depends(get_source)) -> Dict[str, Any]:
    """Single list item by id, normalized."""
    try:
        raw = source.get_item(employee_id)
    except RecordNotFound:
        raise HTTPException(404, "Employee not found")
    except SourceError as e:
        log.error("employee lookup failed: id=%s error=%s", employee_id, e)
        raise HTTPException(502, str(e))
    return {"ok": True, "item": _employee_to_dict(get_default_normalizer().normalize_record(raw))}

# -------------------------------------------------------------------
# Normalize without fetching (schema debugging for new deployments)
# -------------------------------------------------------------------
@router.post("/normalize")
def normalize_records(payload: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Normalize raw list items posted by the caller. Nothing is stored.

    Returns:
        {"ok": True, "count": <n>, "items": [ ...employee dicts... ]}
    """
    if not payload:
        raise HTTPException(400, "Payload must be a non-empty JSON array")
    normalizer = get_default_normalizer()
    items = [_employee_to_dict(normalizer.normalize_record(r)) for r in payload]
    return {"ok": True, "count": len(items), "items": items}
