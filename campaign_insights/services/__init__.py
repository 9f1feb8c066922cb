from .report_service import (
    CACHE_KEY,
    ReportService,
    has_valid_link,
    is_image_link,
    overlay_upstream,
)
from .store import InMemoryReportStore, JsonFileStore, ReportStore

__all__ = [
    "CACHE_KEY",
    "InMemoryReportStore",
    "JsonFileStore",
    "ReportService",
    "ReportStore",
    "has_valid_link",
    "is_image_link",
    "overlay_upstream",
]
