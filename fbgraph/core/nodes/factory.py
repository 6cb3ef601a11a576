"""
Casting decoded Graph responses to nodes and edges.

Lists become GraphEdges, mappings become GraphNodes of the requested
variant. Fields named in a variant's ``graph_object_map`` are cast to
their own variant; any other nested mapping or list is cast generically.
"""
from typing import Any, Dict, Optional, Union

from ..exceptions import DecodingError
from ..logging import get_logger
from .edge import GraphEdge
from .node import GraphNode
from .registry import registry, DECODING_ERROR_CODE
from . import catalog

logger = get_logger('fbgraph.nodes.factory')

Variant = Union[type, str, None]


class NodeFactory:
    """Builds typed nodes and edges from a GraphResponse."""

    def __init__(self, response):
        """
        Args:
            response: GraphResponse (anything with get_decoded_body() and get_request())
        """
        self.response = response
        self.decoded_body = response.get_decoded_body()

    # Entry points

    def make_graph_node(self, variant: Variant = None) -> GraphNode:
        """
        Cast the response to a single node.

        Args:
            variant: Node class, registered variant name or dotted import path

        Raises:
            DecodingError: If the response looks like an edge or the variant is invalid
        """
        self.validate_response_as_array()
        self.validate_castable_as_node()
        variant_class = self.resolve_variant(variant)
        return self.cast_as_node_or_edge(self.decoded_body, variant_class)

    decode_as_node = make_graph_node

    def make_graph_edge(self, variant: Variant = None, auto_prefix: bool = True) -> GraphEdge:
        """
        Cast the response to an edge.

        Args:
            variant: Node class for the items, or a variant name
            auto_prefix: Resolve a string variant by registered name; when
                False it must be a dotted import path

        Raises:
            DecodingError: If the response does not look like an edge or the variant is invalid
        """
        self.validate_response_as_array()
        self.validate_castable_as_edge()
        variant_class = self.resolve_variant(variant, auto_prefix)
        return self.cast_as_node_or_edge(self.decoded_body, variant_class)

    decode_as_edge = make_graph_edge

    def make_graph_user(self):
        return self.make_graph_node(catalog.GraphUser)

    def make_graph_page(self):
        return self.make_graph_node(catalog.GraphPage)

    def make_graph_album(self):
        return self.make_graph_node(catalog.GraphAlbum)

    def make_graph_achievement(self):
        return self.make_graph_node(catalog.GraphAchievement)

    def make_graph_location(self):
        return self.make_graph_node(catalog.GraphLocation)

    def make_graph_event(self):
        return self.make_graph_node(catalog.GraphEvent)

    def make_graph_group(self):
        return self.make_graph_node(catalog.GraphGroup)

    def make_graph_application(self):
        return self.make_graph_node(catalog.GraphApplication)

    def make_graph_session_info(self):
        return self.make_graph_node(catalog.GraphSessionInfo)

    def make_graph_picture(self):
        return self.make_graph_node(catalog.GraphPicture)

    # Validation

    def validate_response_as_array(self) -> None:
        if not isinstance(self.decoded_body, (dict, list)):
            raise DecodingError('Unable to get response from Graph as array.', DECODING_ERROR_CODE)

    def validate_castable_as_node(self) -> None:
        body = self.decoded_body
        if isinstance(body, list) or (
            isinstance(body, dict) and 'data' in body and self.is_castable_as_edge(body['data'])
        ):
            raise DecodingError(
                'Unable to convert response from Graph to a GraphNode because the response '
                'looks like a GraphEdge. Try using NodeFactory.make_graph_edge() instead.',
                DECODING_ERROR_CODE,
            )

    def validate_castable_as_edge(self) -> None:
        body = self.decoded_body
        if isinstance(body, list):
            return
        if not ('data' in body and self.is_castable_as_edge(body['data'])):
            raise DecodingError(
                'Unable to convert response from Graph to a GraphEdge because the response '
                'does not look like a GraphEdge. Try using NodeFactory.make_graph_node() instead.',
                DECODING_ERROR_CODE,
            )

    @staticmethod
    def is_castable_as_edge(value: Any) -> bool:
        """
        Lists and empty mappings are castable; a mapping is castable only
        when its keys are exactly 0..n-1.
        """
        if isinstance(value, list):
            return True
        if not isinstance(value, dict):
            return False
        return all((type(k) is int and k == i) or k == str(i) for i, k in enumerate(value))

    @staticmethod
    def validate_subclass(variant: Any) -> None:
        """
        Raises:
            DecodingError: If variant is not GraphNode or one of its subclasses
        """
        if isinstance(variant, type) and issubclass(variant, GraphNode):
            return
        raise DecodingError(
            f'The given subclass "{variant}" is not valid. Cannot cast to an object '
            f'that is not a GraphNode subclass.',
            DECODING_ERROR_CODE,
        )

    @classmethod
    def resolve_variant(cls, variant: Variant, auto_prefix: bool = True) -> type:
        if variant is None:
            return GraphNode
        if isinstance(variant, str):
            if auto_prefix and '.' not in variant:
                variant = registry.resolve(variant)
            else:
                variant = registry.import_variant(variant)
        cls.validate_subclass(variant)
        return variant

    # Casting

    def cast_as_node_or_edge(self, data: Any, variant: Optional[type] = None,
                             parent_key: Optional[str] = None,
                             parent_node_id: Optional[str] = None):
        """Cast a list or mapping to an edge or node."""
        if isinstance(data, list):
            return self.safely_make_graph_edge({'data': data}, variant, parent_key, parent_node_id)

        if 'data' in data:
            if self.is_castable_as_edge(data['data']):
                return self.safely_make_graph_edge(data, variant, parent_key, parent_node_id)
            if isinstance(data['data'], dict):
                # Graph sometimes nests a single node under "data"
                outer = {k: v for k, v in data.items() if k != 'data'}
                data = {**outer, **data['data']}

        return self.safely_make_graph_node(data, variant)

    def safely_make_graph_node(self, data: Dict[str, Any], variant: Optional[type] = None) -> GraphNode:
        variant = variant or GraphNode
        self.validate_subclass(variant)

        parent_node_id = data.get('id')
        object_map = variant.get_object_map()
        items = {}
        for key, value in data.items():
            if isinstance(value, (dict, list)):
                items[key] = self.cast_as_node_or_edge(value, object_map.get(key), key, parent_node_id)
            else:
                items[key] = value
        return variant(items)

    def safely_make_graph_edge(self, data: Dict[str, Any], variant: Optional[type] = None,
                               parent_key: Optional[str] = None,
                               parent_node_id: Optional[str] = None) -> GraphEdge:
        if 'data' not in data:
            raise DecodingError('Cannot cast data to GraphEdge. Expected a "data" key.', DECODING_ERROR_CODE)

        raw_items = data['data']
        if isinstance(raw_items, dict):
            raw_items = [raw_items[k] for k in sorted(raw_items, key=int)]

        items = []
        for item in raw_items:
            if isinstance(item, dict):
                items.append(self.safely_make_graph_node(item, variant))
            elif isinstance(item, list):
                items.append(self.cast_as_node_or_edge(item, variant))
            else:
                items.append(item)

        meta_data = {k: v for k, v in data.items() if k != 'data'}
        parent_edge_endpoint = None
        if parent_node_id and parent_key:
            parent_edge_endpoint = f"/{parent_node_id}/{parent_key}"

        logger.debug(f"Cast edge of {len(items)} items as {(variant or GraphNode).__name__}")
        return GraphEdge(self.response.get_request(), items, meta_data, parent_edge_endpoint, variant)
