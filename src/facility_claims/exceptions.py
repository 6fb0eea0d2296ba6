"""Errors raised by the identity provider and role store clients."""


class ClaimsError(Exception):
    """Base class for claims manager errors."""

    def __init__(self, message: str, uid: str | None = None):
        super().__init__(message)
        self.uid = uid


class ProviderError(ClaimsError):
    """An identity provider call failed (invalid uid, permission or transport error)."""


class StoreError(ClaimsError):
    """A role mirror database call failed (permission or transport error)."""
