"""Typed outcomes of the comparator and projections. The core raises these and never logs."""

NOT_FOUND_MESSAGE = "Superhero not found"


class ValidationError(Exception):
    """Raised when an identifier is missing or not a valid number (caller's fault)."""

    def __init__(self, message: str, fields: list[str] | None = None) -> None:
        super().__init__(message)
        self.fields = fields or []


class NotFoundError(Exception):
    """Raised when a well-formed identifier has no entity in the catalog."""

    def __init__(self, message: str = NOT_FOUND_MESSAGE) -> None:
        super().__init__(message)
