"""Crypto helpers: URL-safe base64, HMAC-SHA256 and random strings."""
from .utils import Base64Encoder
from .hashing import HmacSigner
from .random import RandomStringGenerator, RandomStringGeneratorProtocol

_signer = HmacSigner()


def app_secret_proof(access_token: str, app_secret: str) -> str:
    """Computes the ``appsecret_proof`` sent alongside an access token."""
    return _signer.hexdigest(access_token, app_secret)


__all__ = [
    'Base64Encoder',
    'HmacSigner',
    'RandomStringGenerator',
    'RandomStringGeneratorProtocol',
    'app_secret_proof',
]
