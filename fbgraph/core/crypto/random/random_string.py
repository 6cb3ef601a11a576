"""Cryptographically secure pseudo-random strings."""
from typing import Protocol, runtime_checkable

from Crypto.Random import get_random_bytes

from ...exceptions import SDKError


@runtime_checkable
class RandomStringGeneratorProtocol(Protocol):
    """Protocol for pseudo-random string generators (CSRF state, file keys)."""

    def get_pseudo_random_string(self, length: int) -> str:
        """Returns a random string of exactly ``length`` characters."""
        ...


class RandomStringGenerator:
    """Hex random strings backed by pycryptodome's CSPRNG."""

    def get_pseudo_random_string(self, length: int) -> str:
        """
        Generate a random hex string.

        Args:
            length: Number of characters to return

        Returns:
            Hex string of the requested length

        Raises:
            SDKError: If length is not a positive integer
        """
        if not isinstance(length, int) or length < 1:
            raise SDKError('get_pseudo_random_string() expects a positive integer length')
        raw = get_random_bytes((length + 1) // 2)
        return raw.hex()[:length]
