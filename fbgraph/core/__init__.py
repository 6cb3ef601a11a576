"""Core components of the Graph SDK."""
from .exceptions import SDKError, ProtocolError, DecodingError, FileError, SignedRequestError
from .config import GraphConfig, TimeoutConfig, RetryConfig, SSLConfig, ProxyConfig
from .app import GraphApp
from .file import GraphFile, GraphVideo

__all__ = [
    'SDKError',
    'ProtocolError',
    'DecodingError',
    'FileError',
    'SignedRequestError',
    'GraphConfig',
    'TimeoutConfig',
    'RetryConfig',
    'SSLConfig',
    'ProxyConfig',
    'GraphApp',
    'GraphFile',
    'GraphVideo',
]
