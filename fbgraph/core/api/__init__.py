"""Graph API transport: requests, responses, errors and the client."""
from .errors import ResponseError, ResumableUploadError
from .http import HttpClient, RawResponse, RequestsHttpClient
from .request import GraphRequest, BatchRequest
from .response import GraphResponse, BatchResponse
from .client import GraphClient

__all__ = [
    'ResponseError',
    'ResumableUploadError',
    'HttpClient',
    'RawResponse',
    'RequestsHttpClient',
    'GraphRequest',
    'BatchRequest',
    'GraphResponse',
    'BatchResponse',
    'GraphClient',
]
