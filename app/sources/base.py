# app/sources/base.py
from typing import Iterator, List, Protocol
from app.normalizers.types import RawRecord


class SourceError(Exception):
    """Anything the record source reports as a failed read."""


class SourceFetchError(SourceError):
    """The bulk read (or a single-item read) failed."""


class SourcePageError(SourceError):
    """One page of the paged read failed."""


class RecordNotFound(SourceFetchError):
    pass


class RecordSource(Protocol):
    def get_all(self) -> List[RawRecord]:
        """Every item in one request. Raises SourceFetchError."""
        ...

    def iter_pages(self, page_size: int) -> Iterator[List[RawRecord]]:
        """Lazy, forward-only pages of at most `page_size` items. Raises SourcePageError."""
        ...

    def get_item(self, item_id: int) -> RawRecord:
        """One item by list id. Raises RecordNotFound / SourceFetchError."""
        ...
