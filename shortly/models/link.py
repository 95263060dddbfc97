from dataclasses import dataclass


@dataclass(frozen=True)
class LinkRecord:
    """
    A stored mapping from a short identifier to its original URL.
    
    Frozen: once created a record is never updated, so the same instance
    can be handed to any number of readers.
    """
    id: str
    original_url: str
    short_url: str


@dataclass(frozen=True)
class ShortenInput:
    """What the shortening service needs to build a new record."""
    original_url: str
    host: str
    scheme: str = "http"
