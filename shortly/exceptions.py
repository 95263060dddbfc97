"""Domain errors raised by the identifier generator, link store and services."""


class ShortenerError(Exception):
    """Base class for every error raised by the shortly core."""


class NotFoundError(ShortenerError, LookupError):
    """Raised when no link record exists for an identifier."""

    def __init__(self, link_id: str):
        self.link_id = link_id
        super().__init__(f"no link record found for id '{link_id}'")


class GenerationError(ShortenerError):
    """Raised when a short identifier cannot be generated."""


class EncodingError(GenerationError):
    """Raised when the underlying encoder rejects its input."""


class StorageError(ShortenerError):
    """Raised when a storage backend fails to persist a record."""
