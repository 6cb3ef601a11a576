"""
Hashing utilities.
"""
from .hmac_signer import HmacSigner

__all__ = [
    'HmacSigner',
]
