from typing import Any


class DashboardError(Exception):
    """Base dashboard exception."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class CollectionLoadError(DashboardError):
    """One of the record collections could not be fetched."""

    def __init__(self, collection: str, cause: BaseException | None = None):
        message = f"Failed to load collection '{collection}'"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message=message, details={"collection": collection})
        self.collection = collection


class RecordSourceError(DashboardError):
    """Record source is missing or unreadable (file, sheet, header)."""

    def __init__(self, message: str, source: str | None = None):
        details = {"source": source} if source else {}
        super().__init__(message=message, details=details)
