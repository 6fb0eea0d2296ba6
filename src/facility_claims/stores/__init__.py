"""Role mirror stores."""

from .base import BaseRoleStore
from .firestore import FirestoreRoleStore
from .memory import InMemoryRoleStore

__all__ = [
    "BaseRoleStore",
    "FirestoreRoleStore",
    "InMemoryRoleStore",
]
