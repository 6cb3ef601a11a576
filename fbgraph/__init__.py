"""
fbgraph - Python client for the Graph API.

Usage:
    >>> from fbgraph import GraphAPI
    >>>
    >>> fb = GraphAPI(app_id='123', app_secret='foo_secret', default_access_token='token')
    >>> me = fb.get('/me?fields=id,name').get_graph_user()
    >>> print(me.name)
"""
import logging

from .version import __version__
from .client import GraphAPI

# Configuration
from .core import (
    GraphConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
    RetryConfig,
    GraphApp,
    GraphFile,
    GraphVideo,
)

# Errors
from .core.exceptions import SDKError, ProtocolError, DecodingError, FileError, SignedRequestError
from .core.api.errors import (
    ResponseError,
    AuthenticationError,
    AuthorizationError,
    ClientError,
    ServerError,
    ThrottleError,
    OtherError,
    ResumableUploadError,
)

# Requests and responses
from .core.api import GraphClient, GraphRequest, BatchRequest, GraphResponse, BatchResponse, RawResponse

# Authentication
from .core.auth import AccessToken, AccessTokenMetadata, SignedRequest, MemoryPersistentData
from .core.auth.oauth2_client import OAuth2Client
from .core.auth.helpers import RedirectLoginHelper, PageTabHelper

# Nodes
from .core.nodes import (
    GraphNode,
    GraphEdge,
    Birthday,
    NodeFactory,
    GraphUser,
    GraphPage,
    GraphAlbum,
    GraphEvent,
    GraphGroup,
    GraphSessionInfo,
)

# Uploads
from .core.upload import ResumableUploader, UploadCoordinator, UploadResult


def setup_logging(level=logging.INFO):
    """
    Configure logging for fbgraph modules.

    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'fbgraph',
        'fbgraph.client',
        'fbgraph.api',
        'fbgraph.upload',
        'fbgraph.auth',
        'fbgraph.nodes',
        'fbgraph.file',
    ]

    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    '__version__',
    'GraphAPI',
    'GraphConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'RetryConfig',
    'GraphApp',
    'GraphFile',
    'GraphVideo',
    'SDKError',
    'ProtocolError',
    'DecodingError',
    'FileError',
    'SignedRequestError',
    'ResponseError',
    'AuthenticationError',
    'AuthorizationError',
    'ClientError',
    'ServerError',
    'ThrottleError',
    'OtherError',
    'ResumableUploadError',
    'GraphClient',
    'GraphRequest',
    'BatchRequest',
    'GraphResponse',
    'BatchResponse',
    'RawResponse',
    'AccessToken',
    'AccessTokenMetadata',
    'SignedRequest',
    'MemoryPersistentData',
    'OAuth2Client',
    'RedirectLoginHelper',
    'PageTabHelper',
    'GraphNode',
    'GraphEdge',
    'Birthday',
    'NodeFactory',
    'GraphUser',
    'GraphPage',
    'GraphAlbum',
    'GraphEvent',
    'GraphGroup',
    'GraphSessionInfo',
    'ResumableUploader',
    'UploadCoordinator',
    'UploadResult',
    'setup_logging',
]
