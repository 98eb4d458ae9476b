"""Record sources for the five Kursverwaltung collections."""

from .base import InMemoryRecordSource, RecordSource
from .workbook import WorkbookRecordSource, load_collection

__all__ = [
    "RecordSource",
    "InMemoryRecordSource",
    "WorkbookRecordSource",
    "load_collection",
]
