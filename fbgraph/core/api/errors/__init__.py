"""Graph API errors and their classification."""
from .api_errors import (
    ResponseError,
    AuthenticationError,
    AuthorizationError,
    ClientError,
    ServerError,
    ThrottleError,
    OtherError,
    ResumableUploadError,
)

__all__ = [
    'ResponseError',
    'AuthenticationError',
    'AuthorizationError',
    'ClientError',
    'ServerError',
    'ThrottleError',
    'OtherError',
    'ResumableUploadError',
]
