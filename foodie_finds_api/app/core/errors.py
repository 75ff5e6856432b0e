"""Exceptions raised by the store layer."""


class StoreUnavailableError(RuntimeError):
    """Raised when a query is attempted before the store has been opened."""

    def __init__(self, message: str = "Database connection is not open") -> None:
        super().__init__(message)
