"""Firebase Authentication identity provider.

Wraps the firebase_admin auth API. The Admin SDK is blocking, so each call
runs in a worker thread.
"""

import asyncio
from typing import Any

from firebase_admin import auth
from firebase_admin import exceptions as firebase_exceptions

from ..exceptions import ProviderError
from .base import BaseIdentityProvider


class FirebaseIdentityProvider(BaseIdentityProvider):
    """
    Firebase Authentication provider.

    Example usage:
        settings = ClaimsSettings()
        provider = FirebaseIdentityProvider(settings.get_firebase_app())

        await provider.set_custom_claims(uid, {"role": "admin", "facilityId": "f1", "type": "staff"})
        claims = await provider.get_custom_claims(uid)
    """

    def __init__(self, app=None):
        """
        Initialize Firebase provider.

        Args:
            app: firebase_admin App (None uses the default App)
        """
        self.app = app

    async def set_custom_claims(self, uid: str, claims: dict[str, Any] | None) -> None:
        try:
            await asyncio.to_thread(auth.set_custom_user_claims, uid, claims, app=self.app)
        except (firebase_exceptions.FirebaseError, ValueError) as e:
            raise ProviderError(f"Failed to set custom claims for '{uid}': {e}", uid=uid) from e

    async def get_custom_claims(self, uid: str) -> dict[str, Any] | None:
        try:
            user = await asyncio.to_thread(auth.get_user, uid, app=self.app)
        except auth.UserNotFoundError as e:
            raise ProviderError(f"User '{uid}' not found", uid=uid) from e
        except (firebase_exceptions.FirebaseError, ValueError) as e:
            raise ProviderError(f"Failed to get user '{uid}': {e}", uid=uid) from e
        return user.custom_claims
