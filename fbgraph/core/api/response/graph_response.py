"""Decoded Graph API responses."""
import json
from typing import Dict, Any, Optional
from urllib.parse import parse_qsl

from ..errors.api_errors import ResponseError


class GraphResponse:
    """
    A response from Graph, decoded and checked for errors.

    The decoded body is a dict for node responses and a list for raw
    batch results. A body with an ``error`` key makes ``is_error()`` true
    and ``thrown_exception`` holds the classified ResponseError.
    """

    def __init__(self, request, body: Optional[str] = None,
                 http_status_code: Optional[int] = None,
                 headers: Optional[Dict[str, str]] = None):
        """
        Args:
            request: GraphRequest that produced this response
            body: Raw response body
            http_status_code: HTTP status
            headers: Response headers
        """
        self.request = request
        self.body = body if body not in (None, '') else None
        self.http_status_code = int(http_status_code) if http_status_code is not None else None
        self.headers = headers or {}
        self.decoded_body: Any = {}
        self.thrown_exception: Optional[ResponseError] = None
        self.decode_body()

    def get_request(self):
        return self.request

    def get_app(self):
        return self.request.app if self.request is not None else None

    def get_access_token(self) -> Optional[str]:
        return self.request.access_token if self.request is not None else None

    def get_app_secret_proof(self) -> Optional[str]:
        return self.request.get_app_secret_proof() if self.request is not None else None

    def get_http_status_code(self) -> Optional[int]:
        return self.http_status_code

    def get_headers(self) -> Dict[str, str]:
        return self.headers

    def get_header(self, name: str) -> Optional[str]:
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return None

    def get_body(self) -> Optional[str]:
        return self.body

    def get_decoded_body(self) -> Any:
        return self.decoded_body

    def get_etag(self) -> Optional[str]:
        return self.get_header('ETag')

    def get_graph_version(self) -> Optional[str]:
        return self.get_header('Facebook-API-Version')

    def is_error(self) -> bool:
        return isinstance(self.decoded_body, dict) and 'error' in self.decoded_body

    def throw_exception(self) -> None:
        if self.thrown_exception is not None:
            raise self.thrown_exception

    def decode_body(self) -> None:
        """
        Decode the raw body.

        JSON objects and lists are kept as is, ``true``/``false`` becomes
        ``{'success': ...}``, a bare number becomes ``{'id': ...}``, and
        non-JSON bodies are parsed as url-encoded pairs.
        """
        if self.body is None:
            self.decoded_body = {}
            return

        try:
            decoded = json.loads(self.body)
        except ValueError:
            decoded = dict(parse_qsl(self.body, keep_blank_values=True))

        if isinstance(decoded, bool):
            decoded = {'success': decoded}
        elif isinstance(decoded, (int, float)) or (isinstance(decoded, str) and decoded.isdigit()):
            decoded = {'id': decoded}
        elif not isinstance(decoded, (dict, list)):
            decoded = {}

        self.decoded_body = decoded
        if self.is_error():
            self.thrown_exception = ResponseError.create(self)

    # Node accessors

    def _node_factory(self):
        from ...nodes.factory import NodeFactory
        return NodeFactory(self)

    def get_graph_node(self, variant=None):
        return self._node_factory().make_graph_node(variant)

    def get_graph_edge(self, variant=None, auto_prefix: bool = True):
        return self._node_factory().make_graph_edge(variant, auto_prefix)

    def get_graph_user(self):
        return self._node_factory().make_graph_user()

    def get_graph_page(self):
        return self._node_factory().make_graph_page()

    def get_graph_album(self):
        return self._node_factory().make_graph_album()

    def get_graph_event(self):
        return self._node_factory().make_graph_event()

    def get_graph_group(self):
        return self._node_factory().make_graph_group()

    def get_graph_session_info(self):
        return self._node_factory().make_graph_session_info()

    def __repr__(self) -> str:
        return f"GraphResponse(status={self.http_status_code}, error={self.is_error()})"
