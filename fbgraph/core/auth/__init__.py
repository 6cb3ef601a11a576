"""
Authentication entities.

OAuth2Client and the login helpers live in ``auth.oauth2_client`` and
``auth.helpers``; they depend on the request layer, which itself depends
on AccessToken.
"""
from .access_token import AccessToken
from .access_token_metadata import AccessTokenMetadata
from .persistent_data import PersistentDataHandler, MemoryPersistentData
from .signed_request import SignedRequest

__all__ = [
    'AccessToken',
    'AccessTokenMetadata',
    'PersistentDataHandler',
    'MemoryPersistentData',
    'SignedRequest',
]
