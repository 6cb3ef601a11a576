"""A single Graph API request."""
from typing import Dict, Any, Optional, Union

from ....version import __version__
from ...exceptions import SDKError
from ...config import DEFAULT_GRAPH_VERSION
from ...auth.access_token import AccessToken
from ...file import GraphFile, GraphVideo
from .request_body import RequestBodyUrlEncoded, RequestBodyMultipart
from .url import (
    get_params_as_dict,
    remove_params_from_url,
    append_params_to_url,
    force_slash_prefix,
)

ALLOWED_METHODS = ('GET', 'POST', 'DELETE')
# Never accepted from callers; always derived from the request's token
AUTH_PARAMS = ('access_token', 'appsecret_proof')


class GraphRequest:
    """
    Everything needed to send one request to Graph.

    The access token may arrive through the constructor, the endpoint's
    query string or the params; all of them must agree.
    """

    def __init__(
        self,
        app=None,
        access_token: Union[str, AccessToken, None] = None,
        method: Optional[str] = None,
        endpoint: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None,
        etag: Optional[str] = None,
        graph_version: Optional[str] = None,
    ):
        """
        Args:
            app: GraphApp the request is sent on behalf of
            access_token: Token string or AccessToken
            method: HTTP method (GET, POST or DELETE)
            endpoint: Graph endpoint, e.g. ``/me``
            params: Request parameters; GraphFile values become file parts
            etag: ETag sent as ``If-None-Match``
            graph_version: Graph version, e.g. ``v2.10``
        """
        self.app = app
        self._access_token: Optional[str] = None
        self.method: Optional[str] = None
        self.endpoint: str = ''
        self._headers: Dict[str, str] = {}
        self.params: Dict[str, Any] = {}
        self.files: Dict[str, GraphFile] = {}

        self.set_access_token(access_token)
        self.set_method(method)
        self.set_endpoint(endpoint)
        self.set_params(params or {})
        self.etag = etag
        self.graph_version = graph_version or DEFAULT_GRAPH_VERSION

    # Access token

    @property
    def access_token(self) -> Optional[str]:
        return self._access_token

    def set_access_token(self, access_token: Union[str, AccessToken, None]) -> 'GraphRequest':
        if isinstance(access_token, AccessToken):
            access_token = access_token.get_value()
        self._access_token = access_token
        return self

    def set_access_token_from_params(self, access_token: str) -> 'GraphRequest':
        """
        Adopt a token found in the endpoint or params.

        Raises:
            SDKError: If a different token is already set
        """
        if not self._access_token:
            self.set_access_token(access_token)
        elif access_token != self._access_token:
            raise SDKError(
                'Access token mismatch. The access token provided in the GraphRequest '
                'and the one provided in the URL or POST params do not match.'
            )
        return self

    def get_access_token_entity(self) -> Optional[AccessToken]:
        return AccessToken(self._access_token) if self._access_token else None

    def get_app_secret_proof(self) -> Optional[str]:
        entity = self.get_access_token_entity()
        if entity is None or self.app is None:
            return None
        return entity.get_app_secret_proof(self.app.get_secret())

    def validate_access_token(self) -> None:
        if not self._access_token:
            raise SDKError('You must provide an access token.')

    # Method and endpoint

    def set_method(self, method: Optional[str]) -> None:
        if method is not None:
            self.method = method.upper()

    def validate_method(self) -> None:
        if not self.method:
            raise SDKError('HTTP method not specified.')
        if self.method not in ALLOWED_METHODS:
            raise SDKError('Invalid HTTP method specified.')

    def set_endpoint(self, endpoint: Optional[str]) -> 'GraphRequest':
        if endpoint is None:
            return self
        params = get_params_as_dict(endpoint)
        if 'access_token' in params:
            self.set_access_token_from_params(params['access_token'])
        self.endpoint = remove_params_from_url(endpoint, AUTH_PARAMS)
        return self

    # Headers

    @classmethod
    def default_headers(cls) -> Dict[str, str]:
        return {
            'User-Agent': f'fbgraph-{__version__}',
            'Accept-Encoding': '*',
        }

    def get_headers(self) -> Dict[str, str]:
        headers = dict(self._headers)
        headers.update(self.default_headers())
        if self.etag:
            headers['If-None-Match'] = self.etag
        return headers

    def set_headers(self, headers: Dict[str, str]) -> None:
        self._headers.update(headers)

    # Params and files

    def set_params(self, params: Dict[str, Any]) -> 'GraphRequest':
        params = dict(params)
        if params.get('access_token'):
            self.set_access_token_from_params(params['access_token'])
        for key in AUTH_PARAMS:
            params.pop(key, None)
        params = self.sanitize_file_params(params)
        self.dangerously_set_params(params)
        return self

    def dangerously_set_params(self, params: Dict[str, Any]) -> 'GraphRequest':
        """Merge params without token or file sanitising."""
        self.params.update(params)
        return self

    def sanitize_file_params(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """Move GraphFile values into the request files."""
        for key in [k for k, v in params.items() if isinstance(v, GraphFile)]:
            self.add_file(key, params.pop(key))
        return params

    def add_file(self, key: str, graph_file: GraphFile) -> None:
        self.files[key] = graph_file

    def reset_files(self) -> None:
        self.files = {}

    def contains_file_uploads(self) -> bool:
        return bool(self.files)

    def contains_video_uploads(self) -> bool:
        return any(isinstance(f, GraphVideo) for f in self.files.values())

    def get_params(self) -> Dict[str, Any]:
        """Params including ``access_token`` and ``appsecret_proof``."""
        params = dict(self.params)
        if self._access_token:
            params['access_token'] = self._access_token
            params['appsecret_proof'] = self.get_app_secret_proof()
        return params

    def get_post_params(self) -> Dict[str, Any]:
        if self.method == 'POST':
            return self.get_params()
        return {}

    def get_url_encoded_body(self) -> RequestBodyUrlEncoded:
        return RequestBodyUrlEncoded(self.get_post_params())

    def get_multipart_body(self) -> RequestBodyMultipart:
        return RequestBodyMultipart(self.get_post_params(), self.files)

    def get_url(self) -> str:
        """
        Relative URL ``/<version>/<endpoint>``.

        Non-POST requests carry their params in the query string.
        """
        self.validate_method()
        url = force_slash_prefix(self.graph_version) + (force_slash_prefix(self.endpoint) or '')
        if self.method != 'POST':
            url = append_params_to_url(url, self.get_params())
        return url

    def __copy__(self) -> 'GraphRequest':
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone.params = dict(self.params)
        clone.files = dict(self.files)
        clone._headers = dict(self._headers)
        return clone

    def __repr__(self) -> str:
        return f"GraphRequest({self.method} {self.endpoint!r}, version={self.graph_version})"
