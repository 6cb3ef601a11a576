"""Access token metadata returned by ``/debug_token``."""
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ..exceptions import SDKError

# Code Graph SDKs use for token validation failures
TOKEN_ERROR_CODE = 401


class AccessTokenMetadata:
    """
    Inspection data of an access token.

    ``expires_at`` and ``issued_at`` are cast to aware datetimes.
    """

    DATE_PROPERTIES = ('expires_at', 'issued_at')

    def __init__(self, metadata: Dict[str, Any]):
        """
        Args:
            metadata: Decoded ``/debug_token`` body

        Raises:
            SDKError: If the body has no ``data`` object
        """
        if not isinstance(metadata, dict) or not isinstance(metadata.get('data'), dict):
            raise SDKError('Unexpected debug token response data.', TOKEN_ERROR_CODE)
        self.metadata = dict(metadata['data'])
        self._cast_timestamps_to_datetime()

    def _cast_timestamps_to_datetime(self) -> None:
        for key in self.DATE_PROPERTIES:
            value = self.metadata.get(key)
            if value:
                self.metadata[key] = datetime.fromtimestamp(int(value), tz=timezone.utc)

    def get_field(self, field: str, default: Any = None) -> Any:
        return self.metadata.get(field, default)

    def get_child_property(self, parent_field: str, field: str, default: Any = None) -> Any:
        parent = self.metadata.get(parent_field)
        if not isinstance(parent, dict):
            return default
        return parent.get(field, default)

    def get_error_property(self, field: str, default: Any = None) -> Any:
        return self.get_child_property('error', field, default)

    def get_metadata_property(self, field: str, default: Any = None) -> Any:
        return self.get_child_property('metadata', field, default)

    def get_app_id(self) -> Optional[str]:
        app_id = self.get_field('app_id')
        return str(app_id) if app_id is not None else None

    def get_application(self) -> Optional[str]:
        return self.get_field('application')

    def is_error(self) -> bool:
        return self.get_field('error') is not None

    def get_error_code(self) -> Optional[int]:
        return self.get_error_property('code')

    def get_error_message(self) -> Optional[str]:
        return self.get_error_property('message')

    def get_error_subcode(self) -> Optional[int]:
        return self.get_error_property('subcode')

    def get_expires_at(self) -> Optional[datetime]:
        value = self.get_field('expires_at')
        return value if isinstance(value, datetime) else None

    def get_is_valid(self) -> Optional[bool]:
        return self.get_field('is_valid')

    def get_issued_at(self) -> Optional[datetime]:
        value = self.get_field('issued_at')
        return value if isinstance(value, datetime) else None

    def get_metadata(self) -> Optional[Dict[str, Any]]:
        return self.get_field('metadata')

    def get_sso(self) -> Optional[str]:
        return self.get_metadata_property('sso')

    def get_auth_type(self) -> Optional[str]:
        return self.get_metadata_property('auth_type')

    def get_auth_nonce(self) -> Optional[str]:
        return self.get_metadata_property('auth_nonce')

    def get_profile_id(self) -> Optional[str]:
        return self.get_field('profile_id')

    def get_scopes(self) -> List[str]:
        return self.get_field('scopes') or []

    def get_user_id(self) -> Optional[str]:
        user_id = self.get_field('user_id')
        return str(user_id) if user_id is not None else None

    def validate_app_id(self, app_id: str) -> None:
        if self.get_app_id() != str(app_id):
            raise SDKError('Access token metadata contains unexpected app ID.', TOKEN_ERROR_CODE)

    def validate_user_id(self, user_id: str) -> None:
        if self.get_user_id() != str(user_id):
            raise SDKError('Access token metadata contains unexpected user ID.', TOKEN_ERROR_CODE)

    def validate_expiration(self) -> None:
        expires_at = self.get_expires_at()
        if expires_at is None:
            return
        if expires_at.timestamp() < time.time():
            raise SDKError('Inspection of access token metadata shows that the access token has expired.',
                           TOKEN_ERROR_CODE)
