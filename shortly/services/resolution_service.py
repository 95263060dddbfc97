import logging

from shortly.exceptions import NotFoundError
from shortly.models.link import LinkRecord
from shortly.storage.strategies import LinkStoreStrategy

logger = logging.getLogger(__name__)


class ResolutionService:
    """Looks up link records for redirection."""

    def __init__(self, store: LinkStoreStrategy):
        self.store = store

    def resolve(self, link_id: str) -> LinkRecord:
        """Return the record stored at link_id.

        Raises:
            NotFoundError: If no record exists for link_id
        """
        try:
            return self.store.get(link_id)
        except NotFoundError:
            logger.info("no short URL for the given id: %s", link_id)
            raise
