import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from shortly.exceptions import StorageError
from shortly.models.link import LinkRecord, ShortenInput
from shortly.services.identifier_factory import IdentifierFactory
from shortly.services.identifier_strategies import IdentifierStrategy
from shortly.storage.strategies import LinkStoreStrategy

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ShorteningService:
    """
    Create-or-reuse shortening on top of a link store and an identifier strategy.
    
    Both collaborators are injected so tests (and other backends) can swap them.
    """
    
    def __init__(
        self,
        store: LinkStoreStrategy,
        generator: Optional[IdentifierStrategy] = None,
        clock: Callable[[], datetime] = utc_now
    ):
        """
        Args:
            store: Link store shared with the resolution service
            generator: Identifier strategy (defaults to the configured one)
            clock: Source of the creation instant
        """
        self.store = store
        self.generator = generator or IdentifierFactory.create_strategy()
        self.clock = clock

    def create_short_url(self, data: ShortenInput) -> LinkRecord:
        """Return the record for data.original_url, creating it if needed.
        
        Process:
        1. Reuse an existing record for the same original URL
        2. Otherwise generate an id salted with the URL at the current instant
        3. Build the short URL and store the record under the id
        
        The existence check and the write are separate steps: two concurrent
        calls for the same URL can both create a record.
        
        Raises:
            GenerationError: If the identifier cannot be generated
            StorageError: If the store refuses the record
        """
        existing = self.store.exists_by_url(data.original_url)
        if existing is not None:
            logger.info("id %s already exists for URL: %s", existing.id, existing.original_url)
            return existing

        link_id = self.generator.generate(data.original_url, self.clock())

        record = LinkRecord(
            id=link_id,
            original_url=data.original_url,
            short_url=f"{data.scheme}://{data.host}/{link_id}",
        )

        if not self.store.set(link_id, record):
            raise StorageError(f"failed to store result for id {link_id}")

        logger.info("created short URL %s for %s", record.short_url, record.original_url)
        return record
