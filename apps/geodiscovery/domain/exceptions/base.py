"""Domain exception base class."""


class DomainError(Exception):
    """Base class for every domain error."""

    def __init__(self, message: str = "Domain error occurred") -> None:
        self.message = message
        super().__init__(message)
