import logging
import threading
from typing import List, Optional

from pydantic import BaseModel

from app import settings
from app.normalizers import Employee, Normalizer, RawRecord, get_default_normalizer
from app.sources.base import RecordSource, SourceError

log = logging.getLogger(__name__)


class FetchCancelled(SourceError):
    pass


class FetchResult(BaseModel):
    records: List[RawRecord] = []
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class EmployeeFetchResult(BaseModel):
    records: List[Employee] = []
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class PagedFetcher:
    """
    Reads every raw item from a record source.

    Two fixed steps, not a retry loop:
      1. one bulk read; if it works, that's the whole list
      2. otherwise walk the source's pages in order and concatenate them
    If the paged read fails too, the result is an error with no records,
    never a partial list.
    """
    def __init__(self, source: RecordSource, page_size: int | None = None):
        self.source = source
        self.page_size = page_size or settings.PAGE_SIZE

    def fetch_all(self, cancel: threading.Event | None = None) -> FetchResult:
        try:
            records = list(self.source.get_all())
            log.info("bulk read returned %d items", len(records))
            return FetchResult(records=records)
        except SourceError as e:
            log.warning("bulk read failed, falling back to paged read (page_size=%d): %s",
                        self.page_size, e)

        try:
            records = self._fetch_paged(cancel)
        except SourceError as e:
            log.error("paged read failed: %s", e)
            return FetchResult(error=str(e))
        log.info("paged read returned %d items", len(records))
        return FetchResult(records=records)

    def _fetch_paged(self, cancel: threading.Event | None) -> List[RawRecord]:
        out: List[RawRecord] = []
        pages = self.source.iter_pages(self.page_size)
        try:
            for n, page in enumerate(pages, start=1):
                out.extend(page)
                log.debug("page %d: %d items (total %d)", n, len(page), len(out))
                if cancel is not None and cancel.is_set():
                    raise FetchCancelled("fetch cancelled")
        finally:
            close = getattr(pages, "close", None)
            if close:
                close()
        return out


def fetch_employees(
    fetcher: PagedFetcher,
    normalizer: Normalizer | None = None,
    cancel: threading.Event | None = None,
) -> EmployeeFetchResult:
    """Fetch everything and normalize each item. Errors pass through untouched."""
    normalizer = normalizer or get_default_normalizer()
    result = fetcher.fetch_all(cancel)
    if not result.ok:
        return EmployeeFetchResult(error=result.error)
    return EmployeeFetchResult(records=[normalizer.normalize_record(r) for r in result.records])
