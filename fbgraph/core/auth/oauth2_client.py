"""OAuth 2.0 flows against Graph."""
import time
from typing import Any, Dict, List, Optional, Union

from ...version import __version__
from ..config import DEFAULT_GRAPH_VERSION
from ..exceptions import SDKError
from ..logging import get_logger
from ..api.request.graph_request import GraphRequest
from ..api.request.url import build_query
from .access_token import AccessToken
from .access_token_metadata import AccessTokenMetadata, TOKEN_ERROR_CODE

logger = get_logger('fbgraph.auth.oauth2')


class OAuth2Client:
    """
    Builds authorization URLs and exchanges codes and tokens.

    Attributes:
        last_request: The most recent GraphRequest sent
    """

    BASE_AUTHORIZATION_URL = 'https://www.facebook.com'

    def __init__(self, app, client, graph_version: Optional[str] = None):
        """
        Args:
            app: GraphApp
            client: GraphClient
            graph_version: Graph version for the dialog URL and requests
        """
        self.app = app
        self.client = client
        self.graph_version = graph_version or DEFAULT_GRAPH_VERSION
        self.last_request: Optional[GraphRequest] = None

    def debug_token(self, access_token: Union[str, AccessToken]) -> AccessTokenMetadata:
        """Inspect a token with the app token."""
        if isinstance(access_token, AccessToken):
            access_token = access_token.get_value()
        self.last_request = GraphRequest(
            self.app,
            self.app.get_access_token(),
            'GET',
            '/debug_token',
            {'input_token': access_token},
            None,
            self.graph_version,
        )
        response = self.client.send_request(self.last_request)
        return AccessTokenMetadata(response.get_decoded_body())

    def get_authorization_url(self, redirect_url: str, state: str, scope: Optional[List[str]] = None,
                              params: Optional[Dict[str, Any]] = None, separator: str = '&') -> str:
        """URL of the login dialog. Explicit params win over the defaults."""
        query = {
            'client_id': self.app.get_id(),
            'state': state,
            'response_type': 'code',
            'sdk': f'fbgraph-{__version__}',
            'redirect_uri': redirect_url,
            'scope': ','.join(scope or []),
        }
        query.update(params or {})
        encoded = build_query(query)
        if separator != '&':
            encoded = encoded.replace('&', separator)
        return f"{self.BASE_AUTHORIZATION_URL}/{self.graph_version}/dialog/oauth?{encoded}"

    def get_access_token_from_code(self, code: str, redirect_uri: str = '') -> AccessToken:
        return self._request_an_access_token({
            'code': code,
            'redirect_uri': redirect_uri,
        })

    def get_long_lived_access_token(self, access_token: Union[str, AccessToken]) -> AccessToken:
        if isinstance(access_token, AccessToken):
            access_token = access_token.get_value()
        return self._request_an_access_token({
            'grant_type': 'fb_exchange_token',
            'fb_exchange_token': access_token,
        })

    def get_code_from_long_lived_access_token(self, access_token: Union[str, AccessToken],
                                              redirect_uri: str = '') -> str:
        """
        Raises:
            SDKError: If Graph does not return a code
        """
        response = self._send_request_with_client_params('/oauth/client_code', {'redirect_uri': redirect_uri},
                                                         access_token)
        data = response.get_decoded_body()
        if not isinstance(data, dict) or 'code' not in data:
            raise SDKError('Code was not returned from Graph.', TOKEN_ERROR_CODE)
        return data['code']

    def _request_an_access_token(self, params: Dict[str, Any]) -> AccessToken:
        response = self._send_request_with_client_params('/oauth/access_token', params)
        data = response.get_decoded_body()
        if not isinstance(data, dict) or 'access_token' not in data:
            raise SDKError('Access token was not returned from Graph.', TOKEN_ERROR_CODE)

        # Graph names the lifetime "expires" for exchanges and "expires_in" for codes
        expires_at = 0
        if data.get('expires'):
            expires_at = int(time.time()) + int(data['expires'])
        elif data.get('expires_in'):
            expires_at = int(time.time()) + int(data['expires_in'])

        logger.debug(f"Obtained access token (expires_at={expires_at or 'unknown'})")
        return AccessToken(data['access_token'], expires_at)

    def _send_request_with_client_params(self, endpoint: str, params: Dict[str, Any],
                                         access_token: Union[str, AccessToken, None] = None):
        params = {**params, **self._get_client_params()}
        self.last_request = GraphRequest(
            self.app,
            access_token or self.app.get_access_token(),
            'GET',
            endpoint,
            params,
            None,
            self.graph_version,
        )
        return self.client.send_request(self.last_request)

    def _get_client_params(self) -> Dict[str, str]:
        return {
            'client_id': self.app.get_id(),
            'client_secret': self.app.get_secret(),
        }
