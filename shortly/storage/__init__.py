"""
Link storage module.

Implements the Strategy Pattern for pluggable link stores.
"""

from .strategies import LinkStoreStrategy, InMemoryLinkStore
from .factory import LinkStoreFactory, LinkStoreBackend

__all__ = [
    "LinkStoreStrategy",
    "InMemoryLinkStore",
    "LinkStoreFactory",
    "LinkStoreBackend",
]
