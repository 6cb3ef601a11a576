"""Graph responses."""
from .graph_response import GraphResponse
from .batch_response import BatchResponse

__all__ = [
    'GraphResponse',
    'BatchResponse',
]
