"""Graph API client."""
from .api_client import GraphClient

__all__ = [
    'GraphClient',
]
