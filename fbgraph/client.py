"""
GraphAPI - High-level client for the Graph API.

Example:
    >>> fb = GraphAPI(GraphConfig(app_id='123', app_secret='foo_secret'))
    >>> response = fb.get('/me?fields=id,name', 'user-token')
    >>> user = response.get_graph_user()
    >>> user.name
    'Foo McBar'
"""
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .core.app import GraphApp
from .core.config import GraphConfig
from .core.exceptions import SDKError
from .core.file import GraphFile, GraphVideo
from .core.logging import get_logger
from .core.api.client import GraphClient
from .core.api.http import RequestsHttpClient
from .core.api.request import GraphRequest, BatchRequest
from .core.api.response import GraphResponse, BatchResponse
from .core.auth.access_token import AccessToken
from .core.auth.oauth2_client import OAuth2Client
from .core.auth.persistent_data import MemoryPersistentData
from .core.auth.helpers import RedirectLoginHelper, PageTabHelper
from .core.crypto import RandomStringGenerator
from .core.nodes import GraphEdge
from .core.upload import ResumableUploader, UploadCoordinator

logger = get_logger('fbgraph.client')

TokenLike = Union[str, AccessToken, None]


class GraphAPI:
    """
    Entry point of the SDK.

    Holds the app credentials, the transport and the defaults (graph
    version, access token) applied to every request it builds.
    """

    def __init__(self, config: Optional[GraphConfig] = None, **kwargs):
        """
        Args:
            config: SDK configuration; keyword arguments build one when omitted

        Raises:
            SDKError: If the app id or secret cannot be found
        """
        self.config = config or GraphConfig(**kwargs)
        self.config.validate()

        self.app = GraphApp(self.config.app_id, self.config.app_secret)
        http_client = self.config.http_client or RequestsHttpClient(config=self.config)
        self.client = GraphClient(http_client, self.config.enable_beta_mode, self.config.timeout)
        self.persistent_data = self.config.persistent_data or MemoryPersistentData()
        self.random_string_generator = self.config.random_string_generator or RandomStringGenerator()
        self.default_graph_version = self.config.default_graph_version

        self.default_access_token: Optional[AccessToken] = None
        if self.config.default_access_token:
            self.set_default_access_token(self.config.default_access_token)

        self.last_response: Optional[Union[GraphResponse, BatchResponse]] = None
        self._oauth2_client: Optional[OAuth2Client] = None

    # Accessors

    def get_app(self) -> GraphApp:
        return self.app

    def get_client(self) -> GraphClient:
        return self.client

    def get_last_response(self) -> Optional[Union[GraphResponse, BatchResponse]]:
        return self.last_response

    def get_default_graph_version(self) -> str:
        return self.default_graph_version

    def get_default_access_token(self) -> Optional[AccessToken]:
        return self.default_access_token

    def set_default_access_token(self, access_token: Union[str, AccessToken]) -> None:
        """
        Raises:
            TypeError: If the token is neither a string nor an AccessToken
        """
        if isinstance(access_token, str):
            access_token = AccessToken(access_token)
        if not isinstance(access_token, AccessToken):
            raise TypeError('The default access token must be of type "str" or AccessToken')
        self.default_access_token = access_token

    def get_oauth2_client(self) -> OAuth2Client:
        if self._oauth2_client is None:
            self._oauth2_client = OAuth2Client(self.app, self.client, self.default_graph_version)
        return self._oauth2_client

    # Helpers

    def get_redirect_login_helper(self) -> RedirectLoginHelper:
        return RedirectLoginHelper(
            self.get_oauth2_client(),
            self.persistent_data,
            self.random_string_generator,
        )

    def get_page_tab_helper(self, raw_signed_request: Optional[str] = None) -> PageTabHelper:
        return PageTabHelper(self.app, self.client, raw_signed_request, self.default_graph_version)

    # Requests

    def get(self, endpoint: str, access_token: TokenLike = None, etag: Optional[str] = None,
            graph_version: Optional[str] = None) -> GraphResponse:
        return self.send_request('GET', endpoint, {}, access_token, etag, graph_version)

    def post(self, endpoint: str, params: Optional[Dict[str, Any]] = None, access_token: TokenLike = None,
             etag: Optional[str] = None, graph_version: Optional[str] = None) -> GraphResponse:
        return self.send_request('POST', endpoint, params, access_token, etag, graph_version)

    def delete(self, endpoint: str, params: Optional[Dict[str, Any]] = None, access_token: TokenLike = None,
               etag: Optional[str] = None, graph_version: Optional[str] = None) -> GraphResponse:
        return self.send_request('DELETE', endpoint, params, access_token, etag, graph_version)

    def request(self, method: str, endpoint: str, params: Optional[Dict[str, Any]] = None,
                access_token: TokenLike = None, etag: Optional[str] = None,
                graph_version: Optional[str] = None) -> GraphRequest:
        """Build a GraphRequest with this instance's defaults filled in."""
        return GraphRequest(
            self.app,
            access_token or self.default_access_token,
            method,
            endpoint,
            params,
            etag,
            graph_version or self.default_graph_version,
        )

    def send_request(self, method: str, endpoint: str, params: Optional[Dict[str, Any]] = None,
                     access_token: TokenLike = None, etag: Optional[str] = None,
                     graph_version: Optional[str] = None) -> GraphResponse:
        """
        Build and send a request.

        Raises:
            ResponseError: If Graph returned an error
            SDKError: If no access token is available or the transport fails
        """
        request = self.request(method, endpoint, params, access_token, etag, graph_version)
        self.last_response = self.client.send_request(request)
        return self.last_response

    def new_batch_request(self, access_token: TokenLike = None,
                          graph_version: Optional[str] = None) -> BatchRequest:
        return BatchRequest(
            self.app,
            [],
            access_token or self.default_access_token,
            graph_version or self.default_graph_version,
            self.random_string_generator,
        )

    def send_batch_request(self, requests: Union[List[GraphRequest], Dict[str, GraphRequest]],
                           access_token: TokenLike = None,
                           graph_version: Optional[str] = None) -> BatchResponse:
        """Send up to 50 requests as one batch."""
        batch = BatchRequest(
            self.app,
            requests,
            access_token or self.default_access_token,
            graph_version or self.default_graph_version,
            self.random_string_generator,
        )
        self.last_response = self.client.send_batch_request(batch)
        return self.last_response

    # Pagination

    def next(self, edge: GraphEdge) -> Optional[GraphEdge]:
        return self.get_pagination_results(edge, 'next')

    def previous(self, edge: GraphEdge) -> Optional[GraphEdge]:
        return self.get_pagination_results(edge, 'previous')

    def get_pagination_results(self, edge: GraphEdge, direction: str) -> Optional[GraphEdge]:
        """
        Fetch the sibling page of an edge, cast to the edge's variant.

        Returns:
            The page, or None when there is none or it is empty
        """
        page_request = edge.get_pagination_request(direction)
        if page_request is None:
            return None

        self.last_response = self.client.send_request(page_request)
        page = self.last_response.get_graph_edge(edge.variant)
        return page if len(page) > 0 else None

    # Uploads

    def file_to_upload(self, path: Union[str, Path]) -> GraphFile:
        return GraphFile(path)

    def video_to_upload(self, path: Union[str, Path]) -> GraphVideo:
        return GraphVideo(path)

    def upload_video(self, target: Union[str, int], path: Union[str, Path],
                     metadata: Optional[Dict[str, Any]] = None, access_token: TokenLike = None,
                     max_transfer_tries: Optional[int] = None,
                     graph_version: Optional[str] = None) -> Dict[str, Any]:
        """
        Upload a video in chunks to ``/<target>/videos``.

        Args:
            target: User, page, group or event id (or ``me``)
            path: Local video file
            metadata: Video fields (title, description, ...) sent on finish
            access_token: Token; the default token when omitted
            max_transfer_tries: Attempts per chunk; from RetryConfig when omitted
            graph_version: Graph version; the default version when omitted

        Returns:
            ``{'video_id': ..., 'success': ...}``
        """
        access_token = access_token or self.default_access_token
        if access_token is None:
            raise SDKError('You must provide an access token.')
        graph_version = graph_version or self.default_graph_version
        max_tries = max_transfer_tries or self.config.retry.max_transfer_tries

        uploader = ResumableUploader(self.app, self.client, access_token, graph_version)
        coordinator = UploadCoordinator(uploader, retry_config=self.config.retry)
        endpoint = f"/{target}/videos"

        logger.info(f"Uploading {path} to {endpoint}")
        result = coordinator.upload_resumable(endpoint, self.video_to_upload(path), metadata, max_tries)
        return result.to_dict()

    def __repr__(self) -> str:
        return f"GraphAPI(app_id={self.app.id!r}, graph_version={self.default_graph_version!r})"
