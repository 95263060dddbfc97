"""
Factory for creating identifier generation strategies.
Uses caching to avoid creating multiple instances.
"""

import logging
from enum import Enum
from typing import Dict, Optional

from shortly.services.identifier_strategies import (
    IdentifierStrategy,
    HashidsIdentifierStrategy,
)
from shortly.config import settings

logger = logging.getLogger(__name__)


class IdentifierStrategyType(Enum):
    """Available identifier generation strategies"""
    HASHIDS = "hashids"

    @classmethod
    def from_setting(cls, value: str) -> "IdentifierStrategyType":
        """Map a configured strategy name, falling back to hashids for unknown names"""
        try:
            return cls(value.lower())
        except ValueError:
            logger.warning("unknown identifier strategy '%s', falling back to hashids", value)
            return cls.HASHIDS


class IdentifierFactory:
    """Factory for creating identifier generation strategies with caching"""
    
    _instances: Dict[IdentifierStrategyType, IdentifierStrategy] = {}
    
    @classmethod
    def create_strategy(
        cls,
        strategy_type: Optional[IdentifierStrategyType] = None
    ) -> IdentifierStrategy:
        """
        Create or return cached identifier generation strategy.
        
        Args:
            strategy_type: Type of strategy to create.
                          If None, uses value from settings.
        
        Returns:
            A cached instance of an IdentifierStrategy
        """
        if strategy_type is None:
            strategy_type = IdentifierStrategyType.from_setting(settings.identifier_strategy)
        
        if strategy_type not in cls._instances:
            # HASHIDS is the only strategy so far
            cls._instances[strategy_type] = HashidsIdentifierStrategy(
                min_length=settings.identifier_min_length
            )
        
        return cls._instances[strategy_type]
    
    @classmethod
    def clear_instances(cls):
        """Clear cached instances (for testing)"""
        cls._instances.clear()
