"""
Clients for the store API.
"""

from .account_client import AuthClient, ProfileClient
from .entry_client import DashboardData, EntryStoreClient
from .store_client import StoreClient, validate_payload


class AssetsManagerClient(AuthClient, EntryStoreClient, ProfileClient):
    """One client sharing a session and token across all endpoint groups."""


__all__ = [
    "AssetsManagerClient",
    "AuthClient",
    "DashboardData",
    "EntryStoreClient",
    "ProfileClient",
    "StoreClient",
    "validate_payload",
]
