"""Graph request construction."""
from .graph_request import GraphRequest
from .batch_request import BatchRequest, MAX_BATCH_REQUESTS
from .request_body import RequestBodyUrlEncoded, RequestBodyMultipart

__all__ = [
    'GraphRequest',
    'BatchRequest',
    'MAX_BATCH_REQUESTS',
    'RequestBodyUrlEncoded',
    'RequestBodyMultipart',
]
