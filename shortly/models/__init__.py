"""
Domain models for the URL shortener.

Link records are plain immutable value objects held in memory by the link
store. There is no ORM layer: records never outlive the process.
"""

from .link import LinkRecord, ShortenInput

__all__ = ["LinkRecord", "ShortenInput"]
