"""HTTP transport."""
from .http_client import HttpClient, RawResponse, RequestsHttpClient

__all__ = [
    'HttpClient',
    'RawResponse',
    'RequestsHttpClient',
]
