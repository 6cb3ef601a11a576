"""Page tab apps: signed request parsing and page data."""
from typing import Any, Dict, Optional

from ..access_token import AccessToken
from ..oauth2_client import OAuth2Client
from ..signed_request import SignedRequest


class PageTabHelper:
    """
    Reads the signed request a page tab receives.

    The raw signed request is the ``signed_request`` POST field (or the
    ``fbsr_<app id>`` cookie) of the incoming request.
    """

    def __init__(self, app, client, raw_signed_request: Optional[str] = None, graph_version: Optional[str] = None):
        self.app = app
        self.oauth_client = OAuth2Client(app, client, graph_version)
        self.signed_request: Optional[SignedRequest] = None
        self.page_data: Dict[str, Any] = {}
        if raw_signed_request:
            self.signed_request = SignedRequest(app, raw_signed_request)
            self.page_data = self.signed_request.get('page') or {}

    def get_access_token(self) -> Optional[AccessToken]:
        """
        Token from the signed request, exchanging its ``code`` when no
        ``oauth_token`` is present.
        """
        if self.signed_request is None or not self.signed_request.has_oauth_data():
            return None
        code = self.signed_request.get('code')
        token = self.signed_request.get('oauth_token')
        if code and not token:
            return self.oauth_client.get_access_token_from_code(code)
        return AccessToken(token, self.signed_request.get('expires', 0))

    def get_user_id(self) -> Optional[str]:
        return self.signed_request.get_user_id() if self.signed_request else None

    def get_page_data(self, key: str, default: Any = None) -> Any:
        return self.page_data.get(key, default)

    def is_admin(self) -> bool:
        return self.get_page_data('admin') is True

    def get_page_id(self) -> Optional[str]:
        return self.get_page_data('id')
