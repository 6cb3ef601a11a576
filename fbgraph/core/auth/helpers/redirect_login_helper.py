"""Server-side login through the OAuth redirect flow."""
import hmac
from typing import Any, Dict, List, Optional, Union

from ...crypto import RandomStringGenerator, RandomStringGeneratorProtocol
from ...exceptions import SDKError
from ...api.request.url import build_query, get_params_as_dict, remove_params_from_url
from ..access_token import AccessToken
from ..oauth2_client import OAuth2Client
from ..persistent_data import MemoryPersistentData, PersistentDataHandler

CSRF_LENGTH = 32
LOGOUT_URL = 'https://www.facebook.com/logout.php'
# Params Graph appends to the callback that must not reach the token exchange
CALLBACK_PARAMS = ('code', 'enforce_https', 'state')


class RedirectLoginHelper:
    """
    Builds login/logout URLs and completes the login from the callback URL.

    A random ``state`` is stored in persistent data when the login URL is
    built and checked when the user comes back.
    """

    def __init__(self, oauth_client: OAuth2Client,
                 persistent_data: Optional[PersistentDataHandler] = None,
                 random_generator: Optional[RandomStringGeneratorProtocol] = None):
        self.oauth_client = oauth_client
        self.persistent_data = persistent_data or MemoryPersistentData()
        self.random_generator = random_generator or RandomStringGenerator()

    def _make_url(self, redirect_url: str, scope: Optional[List[str]], params: Dict[str, Any],
                  separator: str) -> str:
        state = self.persistent_data.get('state') or self.random_generator.get_pseudo_random_string(CSRF_LENGTH)
        self.persistent_data.set('state', state)
        return self.oauth_client.get_authorization_url(redirect_url, state, scope or [], params, separator)

    def get_login_url(self, redirect_url: str, scope: Optional[List[str]] = None, separator: str = '&') -> str:
        return self._make_url(redirect_url, scope, {}, separator)

    def get_re_request_url(self, redirect_url: str, scope: Optional[List[str]] = None, separator: str = '&') -> str:
        """Login URL asking again for declined permissions."""
        return self._make_url(redirect_url, scope, {'auth_type': 'rerequest'}, separator)

    def get_re_authentication_url(self, redirect_url: str, scope: Optional[List[str]] = None,
                                  separator: str = '&') -> str:
        return self._make_url(redirect_url, scope, {'auth_type': 'reauthenticate'}, separator)

    def get_logout_url(self, access_token: Union[str, AccessToken], next_url: str, separator: str = '&') -> str:
        """
        Raises:
            SDKError: If given an app access token
        """
        if not isinstance(access_token, AccessToken):
            access_token = AccessToken(access_token)
        if access_token.is_app_access_token():
            raise SDKError('Cannot generate a logout URL with an app access token.', 722)
        query = build_query({'next': next_url, 'access_token': access_token.get_value()})
        if separator != '&':
            query = query.replace('&', separator)
        return f"{LOGOUT_URL}?{query}"

    def get_access_token(self, callback_url: str) -> Optional[AccessToken]:
        """
        Exchange the ``code`` in the callback URL for an access token.

        Returns:
            The token, or None when the callback carries no code

        Raises:
            SDKError: If the CSRF state check fails
        """
        params = get_params_as_dict(callback_url)
        code = params.get('code')
        if not code:
            return None

        self._validate_csrf(params.get('state'))
        self.persistent_data.set('state', None)

        redirect_url = remove_params_from_url(callback_url, CALLBACK_PARAMS)
        return self.oauth_client.get_access_token_from_code(code, redirect_url)

    def _validate_csrf(self, state: Optional[str]) -> None:
        if not state:
            raise SDKError('Cross-site request forgery validation failed. Required GET param "state" missing.')
        saved_state = self.persistent_data.get('state')
        if not saved_state:
            raise SDKError('Cross-site request forgery validation failed. '
                           'Required param "state" missing from persistent data.')
        if not hmac.compare_digest(str(saved_state), str(state)):
            raise SDKError('Cross-site request forgery validation failed. '
                           'The "state" param from the URL and session do not match.')

    @staticmethod
    def get_error(callback_url: str) -> Optional[str]:
        return get_params_as_dict(callback_url).get('error')

    @staticmethod
    def get_error_code(callback_url: str) -> Optional[str]:
        return get_params_as_dict(callback_url).get('error_code')

    @staticmethod
    def get_error_reason(callback_url: str) -> Optional[str]:
        return get_params_as_dict(callback_url).get('error_reason')

    @staticmethod
    def get_error_description(callback_url: str) -> Optional[str]:
        return get_params_as_dict(callback_url).get('error_description')
