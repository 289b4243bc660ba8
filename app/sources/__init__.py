from app import settings
from .base import (
    RecordNotFound,
    RecordSource,
    SourceError,
    SourceFetchError,
    SourcePageError,
)
from .sharepoint import SharePointListSource

__all__ = [
    "get_source",
    "RecordNotFound",
    "RecordSource",
    "SourceError",
    "SourceFetchError",
    "SourcePageError",
    "SharePointListSource",
]


def get_source():
    """FastAPI dependency: one SharePoint source per request, session closed after."""
    source = SharePointListSource(
        settings.SP_SITE_URL,
        settings.SP_LIST_NAME,
        access_token=settings.SP_ACCESS_TOKEN,
        bulk_top=settings.BULK_TOP,
        timeout=settings.REQUEST_TIMEOUT,
    )
    try:
        yield source
    finally:
        source.close()
