"""
Identifier generation strategies for the URL shortener.
Uses Strategy Pattern so the encoding library can be swapped out.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from hashids import Hashids

from shortly.exceptions import EncodingError


class IdentifierStrategy(ABC):
    """Abstract base class for identifier generation strategies"""
    
    @abstractmethod
    def generate(self, seed: str, instant: datetime) -> str:
        """
        Generate a short identifier.
        
        Args:
            seed: Salt that varies the output (the original URL)
            instant: Moment of creation, encoded as a Unix timestamp
            
        Returns:
            A short alphanumeric identifier
            
        Raises:
            EncodingError: If the input cannot be encoded
        """
        pass


class HashidsIdentifierStrategy(IdentifierStrategy):
    """
    Hashids encoding of the creation timestamp, salted with the original URL.
    
    The salt shuffles the alphabet, so one instant gives different ids for
    different URLs and one URL gives different ids at different instants.
    
    Pros: Short, URL-safe, no lookups needed
    Cons: Collisions are not detected; a colliding id overwrites the
          earlier record in the store
    """
    
    def __init__(self, min_length: int = 0):
        self.min_length = min_length
    
    def generate(self, seed: str, instant: datetime) -> str:
        try:
            hasher = Hashids(salt=seed, min_length=self.min_length)
        except (TypeError, ValueError) as e:
            raise EncodingError(f"failed to create new hash: {e}") from e
        
        timestamp = int(instant.timestamp())
        identifier = hasher.encode(timestamp)
        
        # Hashids signals unencodable input (e.g. negative numbers) with ''
        if not identifier:
            raise EncodingError(f"failed to encode hash for timestamp {timestamp}")
        
        return identifier
