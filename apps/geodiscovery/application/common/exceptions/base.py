"""Application exception base class."""


class ApplicationError(Exception):
    """Base class for every application error."""

    def __init__(self, message: str = "Application error occurred") -> None:
        self.message = message
        super().__init__(message)
