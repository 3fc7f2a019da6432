"""Error types shared across mtputils."""


class MTPUtilsError(Exception):
    """Base error carrying a status code and a user-facing message."""

    status = 500

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status


class MissingListingError(MTPUtilsError):
    """Raised when the captured listing file does not exist."""

    status = 412


class NoMatchError(MTPUtilsError):
    """Raised when a fetch resolves to no files."""

    status = 412


class GetfileNotFoundError(MTPUtilsError):
    """Raised when the retrieval command is not installed."""

    status = 412
