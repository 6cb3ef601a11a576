"""Graph edges: paginated lists of nodes."""
import copy
import json
from typing import Any, Callable, Dict, List, Optional

from ..exceptions import DecodingError
from ..api.request.url import base_graph_url_endpoint, append_params_to_url
from .collection import Collection
from .node import GraphNode, uncast_value

# Code used when pagination is attempted on a non-GET request
PAGINATION_ERROR_CODE = 720

_CURSOR_DIRECTIONS = {'next': 'after', 'previous': 'before'}


class GraphEdge(Collection):
    """
    A list of nodes plus the paging/summary metadata Graph sent with it.

    Attributes:
        request: The GraphRequest that produced the edge
        meta_data: Every top-level key except ``data`` (paging, summary, ...)
        parent_edge_endpoint: ``/<node id>/<field>`` for edges nested in a node
        variant: Node class the items were cast to
    """

    def __init__(self, request, data: Optional[List[Any]] = None,
                 meta_data: Optional[Dict[str, Any]] = None,
                 parent_edge_endpoint: Optional[str] = None,
                 variant: Optional[type] = None):
        super().__init__(list(data or []))
        self.request = request
        self.meta_data = meta_data or {}
        self.parent_edge_endpoint = parent_edge_endpoint
        self.variant = variant or GraphNode

    def get_parent_graph_edge(self) -> Optional[str]:
        return self.parent_edge_endpoint

    def get_meta_data(self) -> Dict[str, Any]:
        return self.meta_data

    def get_cursor(self, direction: str) -> Optional[str]:
        """Cursor from ``paging.cursors.<direction>`` (after or before)."""
        cursors = (self.meta_data.get('paging') or {}).get('cursors') or {}
        return cursors.get(direction)

    def get_next_cursor(self) -> Optional[str]:
        return self.get_cursor('after')

    def get_previous_cursor(self) -> Optional[str]:
        return self.get_cursor('before')

    def validate_for_pagination(self) -> None:
        if self.request is None or self.request.method != 'GET':
            raise DecodingError('You can only paginate on a GET request.', PAGINATION_ERROR_CODE)

    def get_pagination_url(self, direction: str) -> Optional[str]:
        """
        Endpoint of the next or previous page.

        Uses the paging URL Graph sent, reduced to its path and query.
        Without one, nested edges fall back to their parent endpoint plus
        the cursor.

        Raises:
            DecodingError: If the edge came from a non-GET request
        """
        self.validate_for_pagination()

        paging = self.meta_data.get('paging') or {}
        page_url = paging.get(direction)
        if page_url:
            return base_graph_url_endpoint(page_url)

        cursor_name = _CURSOR_DIRECTIONS.get(direction)
        cursor = self.get_cursor(cursor_name) if cursor_name else None
        if self.parent_edge_endpoint and cursor:
            return append_params_to_url(self.parent_edge_endpoint, {cursor_name: cursor})
        return None

    def get_pagination_request(self, direction: str):
        """A copy of the original request pointed at the next or previous page."""
        page_url = self.get_pagination_url(direction)
        if not page_url:
            return None
        new_request = copy.copy(self.request)
        new_request.set_endpoint(page_url)
        return new_request

    def get_next_page_request(self):
        return self.get_pagination_request('next')

    def get_previous_page_request(self):
        return self.get_pagination_request('previous')

    def get_total_count(self) -> Optional[int]:
        """``summary.total_count`` when Graph was asked for a summary."""
        summary = self.meta_data.get('summary') or {}
        return summary.get('total_count')

    def map(self, callback: Callable[[Any, int], Any]) -> 'GraphEdge':
        return type(self)(
            self.request,
            [callback(item, index) for index, item in enumerate(self.items)],
            self.meta_data,
            self.parent_edge_endpoint,
            self.variant,
        )

    def as_list(self) -> List[Any]:
        return self.as_native()

    def uncast_items(self) -> List[Any]:
        return uncast_value(self.as_native())

    def as_json(self, **kwargs) -> str:
        kwargs.setdefault('separators', (',', ':'))
        return json.dumps(self.uncast_items(), **kwargs)

    def __repr__(self) -> str:
        return f"GraphEdge({len(self.items)} x {self.variant.__name__}, parent={self.parent_edge_endpoint!r})"
