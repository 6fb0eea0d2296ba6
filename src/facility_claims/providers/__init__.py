"""Identity providers."""

from .base import BaseIdentityProvider
from .firebase import FirebaseIdentityProvider
from .mock import InMemoryIdentityProvider

__all__ = [
    "BaseIdentityProvider",
    "FirebaseIdentityProvider",
    "InMemoryIdentityProvider",
]
