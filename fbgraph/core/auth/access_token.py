"""Access token entity."""
import time
from datetime import datetime, timezone
from typing import Optional

from ..crypto import app_secret_proof

# Tokens living longer than this are considered long-lived
LONG_LIVED_THRESHOLD = 60 * 60 * 2


class AccessToken:
    """
    An access token plus its optional expiration time.

    Attributes:
        value: Raw token string
    """

    def __init__(self, value: str, expires_at: int = 0):
        """
        Initialize the token.

        Args:
            value: Raw token string
            expires_at: Expiration as Unix timestamp (0 means unknown)
        """
        self.value = value
        self._expires_at: Optional[datetime] = None
        if expires_at:
            self._expires_at = datetime.fromtimestamp(int(expires_at), tz=timezone.utc)

    def get_value(self) -> str:
        return self.value

    def get_expires_at(self) -> Optional[datetime]:
        return self._expires_at

    def get_app_secret_proof(self, app_secret: str) -> str:
        """Generates the HMAC-SHA256 proof of this token keyed by the app secret."""
        return app_secret_proof(self.value, app_secret)

    def is_app_access_token(self) -> bool:
        """App tokens have the form ``app_id|app_secret``."""
        return '|' in self.value

    def is_long_lived(self) -> bool:
        if self._expires_at is not None:
            return self._expires_at.timestamp() > time.time() + LONG_LIVED_THRESHOLD
        return self.is_app_access_token()

    def is_expired(self) -> Optional[bool]:
        """
        Check whether the token has expired.

        Returns:
            True/False when known, None when the expiry is unknown
        """
        if self._expires_at is not None:
            return self._expires_at.timestamp() < time.time()
        if self.is_app_access_token():
            return False
        return None

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"AccessToken({self.value[:8]}..., expires_at={self._expires_at})"

    def __eq__(self, other) -> bool:
        if isinstance(other, AccessToken):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)
