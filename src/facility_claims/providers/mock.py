"""In-memory identity provider for development and testing.

Behaves like Firebase Authentication for custom claims: claims are replaced as
a whole, ``None`` clears them, and unknown uids are rejected.
"""

import copy
from typing import Any

from ..exceptions import ProviderError
from .base import BaseIdentityProvider


class InMemoryIdentityProvider(BaseIdentityProvider):
    """
    In-memory identity provider.

    Example usage:
        provider = InMemoryIdentityProvider(uids=["staff_uid_12345"])
        await provider.set_custom_claims("staff_uid_12345", {"role": "admin"})

    Every call is appended to ``calls`` as ``(method, uid)`` so tests can
    assert call order.
    """

    def __init__(self, uids: list[str] | None = None):
        """
        Initialize in-memory provider.

        Args:
            uids: Identities that exist up front (without claims)
        """
        self.claims: dict[str, dict[str, Any] | None] = {uid: None for uid in uids or []}
        self.calls: list[tuple[str, str]] = []

    def add_user(self, uid: str, claims: dict[str, Any] | None = None) -> None:
        """Register an identity, optionally with existing claims."""
        self.claims[uid] = copy.deepcopy(claims)

    async def set_custom_claims(self, uid: str, claims: dict[str, Any] | None) -> None:
        self.calls.append(("set_custom_claims", uid))
        if uid not in self.claims:
            raise ProviderError(f"No user record found for uid '{uid}'", uid=uid)
        self.claims[uid] = copy.deepcopy(claims) if claims else None

    async def get_custom_claims(self, uid: str) -> dict[str, Any] | None:
        self.calls.append(("get_custom_claims", uid))
        if uid not in self.claims:
            raise ProviderError(f"User '{uid}' not found", uid=uid)
        return copy.deepcopy(self.claims[uid])
