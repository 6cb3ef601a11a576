"""
Typed decoding of Graph responses.

Example:
    >>> factory = NodeFactory(response)
    >>> user = factory.make_graph_user()
    >>> user.name
    'Foo McBar'
"""
from .collection import Collection
from .birthday import Birthday
from .registry import VariantRegistry, registry, node_field
from .node import GraphNode
from .edge import GraphEdge
from .catalog import (
    GraphUser,
    GraphPage,
    GraphAlbum,
    GraphAchievement,
    GraphApplication,
    GraphLocation,
    GraphPicture,
    GraphCoverPhoto,
    GraphEvent,
    GraphGroup,
    GraphSessionInfo,
)
from .factory import NodeFactory

__all__ = [
    'Collection',
    'Birthday',
    'VariantRegistry',
    'registry',
    'node_field',
    'GraphNode',
    'GraphEdge',
    'GraphUser',
    'GraphPage',
    'GraphAlbum',
    'GraphAchievement',
    'GraphApplication',
    'GraphLocation',
    'GraphPicture',
    'GraphCoverPhoto',
    'GraphEvent',
    'GraphGroup',
    'GraphSessionInfo',
    'NodeFactory',
]
