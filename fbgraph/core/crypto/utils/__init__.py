"""Crypto utilities."""
from .encoding import Base64Encoder

__all__ = [
    'Base64Encoder',
]
