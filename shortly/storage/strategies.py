"""
Link storage strategies using Strategy Pattern.

Only an in-memory store exists today, but services depend on the
LinkStoreStrategy interface so another backend can be dropped in.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from readerwriterlock import rwlock

from shortly.exceptions import NotFoundError
from shortly.models.link import LinkRecord


class LinkStoreStrategy(ABC):
    """
    Abstract base class for link stores.
    
    The store is a dumb key-value map: it does not deduplicate by URL.
    Keeping one record per original URL is the shortening service's job.
    """
    
    @abstractmethod
    def set(self, link_id: str, record: LinkRecord) -> bool:
        """
        Insert or overwrite the record stored at link_id.
        
        Returns:
            True if the record was stored
        """
        pass
    
    @abstractmethod
    def get(self, link_id: str) -> LinkRecord:
        """
        Fetch the record stored at link_id.
        
        Raises:
            NotFoundError: If nothing is stored at link_id
        """
        pass
    
    @abstractmethod
    def exists_by_url(self, original_url: str) -> Optional[LinkRecord]:
        """Return the first record whose original_url matches, or None"""
        pass
    
    @abstractmethod
    def count(self) -> int:
        """Number of stored records"""
        pass


class InMemoryLinkStore(LinkStoreStrategy):
    """
    Dict-backed link store guarded by a reader/writer lock.
    
    Reads (get, exists_by_url, count) share the lock and never block each
    other; set holds it exclusively. Records are immutable and inserted with
    a single assignment, so a reader sees either the old state or the new
    record, never a partial one.
    
    exists_by_url is a linear scan: fine for a single in-memory process,
    not indexed for large volumes.
    """
    
    def __init__(self):
        self._links: Dict[str, LinkRecord] = {}
        self._lock = rwlock.RWLockFair()
    
    def set(self, link_id: str, record: LinkRecord) -> bool:
        with self._lock.gen_wlock():
            self._links[link_id] = record
        # Assigning into a dict cannot fail
        return True
    
    def get(self, link_id: str) -> LinkRecord:
        with self._lock.gen_rlock():
            record = self._links.get(link_id)
        if record is None:
            raise NotFoundError(link_id)
        return record
    
    def exists_by_url(self, original_url: str) -> Optional[LinkRecord]:
        with self._lock.gen_rlock():
            for record in self._links.values():
                if record.original_url == original_url:
                    return record
        return None
    
    def count(self) -> int:
        with self._lock.gen_rlock():
            return len(self._links)
