# app/sources/sharepoint.py
import logging
from typing import Any, Dict, Iterator, List, Optional, Sequence

import requests

from app.normalizers.types import RawRecord
from .base import RecordNotFound, SourceFetchError, SourcePageError

log = logging.getLogger(__name__)

DEFAULT_SELECT = (
    "Id", "Title", "EmployeeName", "JobTitle", "Department", "Email", "Phone",
    "Status", "JoiningDate", "Manager/Id", "Manager/Title",
)
DEFAULT_EXPAND = ("Manager",)

NEXT_LINK_KEYS = ("odata.nextLink", "@odata.nextLink")


def _next_link(body: Dict[str, Any]) -> Optional[str]:
    for key in NEXT_LINK_KEYS:
        if body.get(key):
            return body[key]
    return None


class SharePointListSource:
    """
    Reads items of one SharePoint list over the REST API.

    Authentication is not handled here: pass a session that already carries
    credentials, or a bearer token.
    """

    def __init__(
        self,
        site_url: str,
        list_name: str,
        session: Optional[requests.Session] = None,
        access_token: Optional[str] = None,
        select: Sequence[str] = DEFAULT_SELECT,
        expand: Sequence[str] = DEFAULT_EXPAND,
        bulk_top: int = 5000,
        timeout: float = 30,
    ):
        self.site_url = site_url.rstrip("/")
        self.list_name = list_name
        self.select = list(select)
        self.expand = list(expand)
        self.bulk_top = bulk_top
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json;odata=nometadata"})
        if access_token:
            self.session.headers["Authorization"] = f"Bearer {access_token}"

    @property
    def items_url(self) -> str:
        name = self.list_name.replace("'", "''")
        return f"{self.site_url}/_api/web/lists/getbytitle('{name}')/items"

    def _params(self, top: Optional[int] = None) -> Dict[str, Any]:
        p: Dict[str, Any] = {}
        if self.select:
            p["$select"] = ",".join(self.select)
        if self.expand:
            p["$expand"] = ",".join(self.expand)
        if top:
            p["$top"] = top
        return p

    def _get(self, url: str, params: Optional[Dict[str, Any]], error_cls, what: str, single: bool = False) -> Dict[str, Any]:
        try:
            r = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            log.warning("%s request failed: list=%s error=%s", what, self.list_name, e)
            raise error_cls(f"Failed to fetch {what}: {e}") from e
        if single and r.status_code == 404:
            raise RecordNotFound(f"{what} not found")
        if not r.ok:
            log.warning("%s request rejected: list=%s status=%s", what, self.list_name, r.status_code)
            raise error_cls(f"Failed to fetch {what}: {r.status_code} {r.reason}")
        try:
            body = r.json()
        except ValueError as e:
            raise error_cls(f"Failed to fetch {what}: invalid JSON") from e
        if not isinstance(body, dict):
            log.warning("%s response is not an object: list=%s type=%s", what, self.list_name, type(body).__name__)
            raise error_cls(f"Failed to fetch {what}: unexpected response body")
        return body

    def get_all(self) -> List[RawRecord]:
        body = self._get(self.items_url, self._params(top=self.bulk_top), SourceFetchError, "employees")
        if _next_link(body):
            # more rows than one response holds; treat as a failed bulk read
            raise SourceFetchError(f"Bulk read truncated at {len(body.get('value') or [])} items")
        return list(body.get("value") or [])

    def iter_pages(self, page_size: int) -> Iterator[List[RawRecord]]:
        url: Optional[str] = self.items_url
        params: Optional[Dict[str, Any]] = self._params(top=page_size)
        while url:
            body = self._get(url, params, SourcePageError, "employees page")
            yield list(body.get("value") or [])
            url = _next_link(body)
            params = None  # next link already carries the query

    def get_item(self, item_id: int) -> RawRecord:
        url = f"{self.items_url}({int(item_id)})"
        return self._get(url, self._params(), SourceFetchError, f"employee {item_id}", single=True)

    def close(self):
        self.session.close()
