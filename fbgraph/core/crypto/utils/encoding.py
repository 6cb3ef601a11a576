"""Encoding utilities."""
import base64
import binascii

from ...exceptions import SignedRequestError


class Base64Encoder:
    """Base64 URL-safe encoder/decoder."""

    @staticmethod
    def encode(data: bytes) -> str:
        """Encodes bytes to Base64 URL-safe without padding."""
        encoded = base64.b64encode(data).decode()
        encoded = encoded.replace('+', '-').replace('/', '_')
        encoded = encoded.rstrip('=')
        return encoded

    @staticmethod
    def decode(data: str) -> bytes:
        """
        Decodes Base64 URL-safe (with or without padding).

        Raises:
            SignedRequestError: If the input is not valid base64
        """
        data = data.replace('-', '+').replace('_', '/')
        padding = len(data) % 4
        if padding:
            data += '=' * (4 - padding)
        try:
            return base64.b64decode(data, validate=True)
        except (binascii.Error, ValueError) as e:
            raise SignedRequestError(f"Invalid base64 payload: {e}") from e
