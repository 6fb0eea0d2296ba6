"""Base identity provider interface."""

from abc import ABC, abstractmethod
from typing import Any


class BaseIdentityProvider(ABC):
    """
    Base interface for identity providers.

    All identity providers (Firebase, in-memory, etc.) must implement this interface
    so the claims manager behaves the same regardless of the backing service.
    """

    @abstractmethod
    async def set_custom_claims(self, uid: str, claims: dict[str, Any] | None) -> None:
        """
        Replace the custom claims of an identity.

        Claims are always fully replaced, never merged. ``None`` clears them.

        Args:
            uid: Identity ID
            claims: Complete claims object, or None to remove all claims

        Raises:
            ProviderError: If the uid is invalid or the call fails
        """
        pass

    @abstractmethod
    async def get_custom_claims(self, uid: str) -> dict[str, Any] | None:
        """
        Get the custom claims of an identity.

        Args:
            uid: Identity ID

        Returns:
            Claims dict, or None if no claims are set

        Raises:
            ProviderError: If the identity does not exist or the call fails
        """
        pass
