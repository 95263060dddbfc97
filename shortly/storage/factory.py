"""
Factory for creating link store instances.
Simple, clean factory with singleton caching.
"""

import logging
from enum import Enum
from typing import Optional

from .strategies import LinkStoreStrategy, InMemoryLinkStore

logger = logging.getLogger(__name__)


class LinkStoreBackend(Enum):
    """Available link store backends"""
    MEMORY = "memory"

    @classmethod
    def from_setting(cls, value: str) -> "LinkStoreBackend":
        """Map a configured backend name, falling back to memory for unknown names"""
        try:
            return cls(value.lower())
        except ValueError:
            logger.warning("unknown storage backend '%s', falling back to memory", value)
            return cls.MEMORY


class LinkStoreFactory:
    """
    Simple factory for creating link store instances.
    
    Uses Singleton Pattern - creates instance once, reuses it, so the
    shortening and resolution services always share one store.
    """
    
    _instance: Optional[LinkStoreStrategy] = None
    
    @classmethod
    def create(cls, backend: LinkStoreBackend) -> LinkStoreStrategy:
        """
        Create or return cached link store instance.
        
        Args:
            backend: Type of storage backend (from enum)
            
        Returns:
            Singleton link store instance
        """
        if cls._instance is not None:
            return cls._instance
        
        if backend == LinkStoreBackend.MEMORY:
            cls._instance = InMemoryLinkStore()
            logger.info("in-memory link store initialized")
        else:
            raise ValueError(f"Unknown storage backend: {backend}")
        
        return cls._instance
    
    @classmethod
    def clear_instance(cls):
        """Clear cached instance (for testing)"""
        cls._instance = None
