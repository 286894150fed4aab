"""Data-layer exceptions for an unreadable or malformed catalog."""


class AccessorFailure(Exception):
    """Raised when the catalog itself cannot be read or parsed (never a plain miss)."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class InvalidRecordError(AccessorFailure):
    """Raised when a catalog record is missing fields or carries out-of-range values."""

    def __init__(
        self,
        message: str,
        *,
        index: int | None = None,
        fields: list[str] | None = None,
        path: str | None = None,
    ) -> None:
        super().__init__(message, path=path)
        self.index = index
        self.fields = fields or []
