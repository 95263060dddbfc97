"""
FastAPI dependencies for dependency injection.

This module provides the singleton link store and identifier strategy,
and builds the two services on top of them for the routes.

Pattern: Dependency Injection
- Routes depend on services, services depend on the store and generator
- Tests swap any of them through app.dependency_overrides
"""

from functools import lru_cache

from fastapi import Depends

from shortly.config import settings
from shortly.services.identifier_factory import IdentifierFactory
from shortly.services.identifier_strategies import IdentifierStrategy
from shortly.services.resolution_service import ResolutionService
from shortly.services.shortening_service import ShorteningService
from shortly.storage.factory import LinkStoreFactory, LinkStoreBackend
from shortly.storage.strategies import LinkStoreStrategy


@lru_cache()
def get_link_store() -> LinkStoreStrategy:
    """
    Get link store instance (singleton).
    
    Unknown backend names fall back to the in-memory store.
    """
    backend = LinkStoreBackend.from_setting(settings.storage_backend)
    return LinkStoreFactory.create(backend)


@lru_cache()
def get_identifier_generator() -> IdentifierStrategy:
    """
    Get identifier strategy instance (singleton).
    
    Unknown strategy names fall back to hashids.
    """
    return IdentifierFactory.create_strategy()


def get_shortening_service(
    store: LinkStoreStrategy = Depends(get_link_store),
    generator: IdentifierStrategy = Depends(get_identifier_generator)
) -> ShorteningService:
    return ShorteningService(store=store, generator=generator)


def get_resolution_service(
    store: LinkStoreStrategy = Depends(get_link_store)
) -> ResolutionService:
    return ResolutionService(store=store)
