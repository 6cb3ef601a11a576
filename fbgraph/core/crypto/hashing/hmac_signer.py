"""HMAC-SHA256 signing used for app secret proofs and signed requests."""
from Crypto.Hash import HMAC, SHA256


class HmacSigner:
    """Computes and verifies HMAC-SHA256 digests keyed with an app secret."""

    def digest(self, message: str | bytes, secret: str | bytes) -> bytes:
        """Returns the raw HMAC-SHA256 digest of message."""
        if isinstance(message, str):
            message = message.encode()
        if isinstance(secret, str):
            secret = secret.encode()
        return HMAC.new(secret, msg=message, digestmod=SHA256).digest()

    def hexdigest(self, message: str | bytes, secret: str | bytes) -> str:
        """Returns the hex HMAC-SHA256 digest of message."""
        return self.digest(message, secret).hex()

    def verify(self, message: str | bytes, secret: str | bytes, signature: bytes) -> bool:
        """
        Checks signature against the HMAC of message in constant time.

        Args:
            message: Signed message
            secret: Signing key
            signature: Raw signature bytes to check

        Returns:
            True if the signature matches
        """
        if isinstance(message, str):
            message = message.encode()
        if isinstance(secret, str):
            secret = secret.encode()
        mac = HMAC.new(secret, msg=message, digestmod=SHA256)
        try:
            mac.verify(signature)
        except ValueError:
            return False
        return True
