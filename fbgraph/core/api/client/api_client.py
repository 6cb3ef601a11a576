"""Graph API client: turns GraphRequests into HTTP calls."""
from typing import Dict, Optional, Tuple, Union

from ...config import TimeoutConfig
from ...logging import get_logger
from ..http import HttpClient, RequestsHttpClient
from ..request import GraphRequest, BatchRequest
from ..response import GraphResponse, BatchResponse

logger = get_logger('fbgraph.api.client')


class GraphClient:
    """
    Sends GraphRequests over an HttpClient.

    Requests carrying a GraphVideo go to the video host. Error responses
    are raised as classified ResponseError subclasses.
    """

    BASE_GRAPH_URL = 'https://graph.facebook.com'
    BASE_GRAPH_VIDEO_URL = 'https://graph-video.facebook.com'
    BASE_GRAPH_URL_BETA = 'https://graph.beta.facebook.com'
    BASE_GRAPH_VIDEO_URL_BETA = 'https://graph-video.beta.facebook.com'

    def __init__(self, http_client: Optional[HttpClient] = None, enable_beta_mode: bool = False,
                 timeouts: Optional[TimeoutConfig] = None):
        """
        Args:
            http_client: Transport; a RequestsHttpClient when omitted
            enable_beta_mode: Use the beta Graph hosts
            timeouts: Per-request-kind timeouts
        """
        self.http_client = http_client or RequestsHttpClient()
        self.enable_beta_mode = enable_beta_mode
        self.timeouts = timeouts or TimeoutConfig()
        self.request_count = 0

    def get_base_graph_url(self, post_to_video_url: bool = False) -> str:
        if post_to_video_url:
            return self.BASE_GRAPH_VIDEO_URL_BETA if self.enable_beta_mode else self.BASE_GRAPH_VIDEO_URL
        return self.BASE_GRAPH_URL_BETA if self.enable_beta_mode else self.BASE_GRAPH_URL

    def prepare_request_message(self, request: GraphRequest) -> Tuple[str, str, Dict[str, str], Union[str, bytes]]:
        """
        Build the URL, method, headers and body for a request.

        Requests with files are sent as ``multipart/form-data``, all others
        as url-encoded forms.
        """
        url = self.get_base_graph_url(request.contains_video_uploads()) + request.get_url()

        if request.contains_file_uploads():
            body = request.get_multipart_body()
        else:
            body = request.get_url_encoded_body()
        request.set_headers({'Content-Type': body.content_type})

        return url, request.method, request.get_headers(), body.get_body()

    def get_timeout(self, request: GraphRequest) -> float:
        if request.contains_video_uploads():
            return self.timeouts.video_upload
        if request.contains_file_uploads():
            return self.timeouts.file_upload
        return self.timeouts.request

    def send_request(self, request: GraphRequest) -> GraphResponse:
        """
        Send a request and decode the response.

        Raises:
            SDKError: If the request has no token or the transport fails
            ResponseError: If Graph returned an error
        """
        if type(request) is GraphRequest:
            request.validate_access_token()

        url, method, headers, body = self.prepare_request_message(request)
        timeout = self.get_timeout(request)

        logger.debug(f"Sending {method} {request.endpoint or '/'} (timeout {timeout}s)")
        raw_response = self.http_client.send(url, method, body, headers, timeout)
        self.request_count += 1

        response = GraphResponse(
            request,
            raw_response.body,
            raw_response.http_status_code,
            raw_response.headers,
        )
        if response.is_error():
            raise response.thrown_exception
        return response

    def send_batch_request(self, request: BatchRequest) -> BatchResponse:
        request.prepare_requests_for_batch()
        response = self.send_request(request)
        return BatchResponse(request, response)
