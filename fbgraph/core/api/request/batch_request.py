"""Batch requests: up to 50 Graph requests in a single HTTP call."""
import json
from typing import Dict, Any, Iterator, List, Optional, Union

from ...exceptions import SDKError
from ...crypto import RandomStringGenerator, RandomStringGeneratorProtocol
from .graph_request import GraphRequest

MAX_BATCH_REQUESTS = 50


class BatchRequest(GraphRequest):
    """
    A POST to the root endpoint carrying many requests.

    Each entry is a dict with ``name``, ``request``, ``attached_files`` and
    ``options``. Requests without an app or token inherit the batch's.
    """

    def __init__(self, app=None, requests=None, access_token=None, graph_version: Optional[str] = None,
                 random_generator: Optional[RandomStringGeneratorProtocol] = None):
        super().__init__(app, access_token, 'POST', '', {}, None, graph_version)
        self.requests: List[Dict[str, Any]] = []
        self._random = random_generator or RandomStringGenerator()
        if requests:
            self.add(requests)

    def add(self, request, options: Union[str, Dict[str, Any], None] = None) -> 'BatchRequest':
        """
        Add a request, a list of requests or a name => request mapping.

        Args:
            request: GraphRequest, list of them or dict keyed by name
            options: Request name, or a dict of batch options including ``name``

        Raises:
            TypeError: If request is not a GraphRequest
        """
        if isinstance(request, (list, tuple)):
            for item in request:
                self.add(item)
            return self
        if isinstance(request, dict):
            for name, item in request.items():
                self.add(item, name)
            return self
        if not isinstance(request, GraphRequest):
            raise TypeError('Argument for add() must be of type list, dict or GraphRequest.')

        if options is None:
            options = {}
        elif not isinstance(options, dict):
            options = {'name': options}
        else:
            options = dict(options)

        self.add_fallback_defaults(request)
        attached_files = self.extract_file_attachments(request)
        name = options.pop('name', None)

        self.requests.append({
            'name': name,
            'request': request,
            'attached_files': attached_files,
            'options': options,
        })
        return self

    def add_fallback_defaults(self, request: GraphRequest) -> None:
        """
        Give the request this batch's app and token when it has none.

        Raises:
            SDKError: If neither the request nor the batch has them
        """
        if request.app is None:
            if self.app is None:
                raise SDKError('Missing GraphApp on BatchRequest and no fallback detected on GraphRequest.')
            request.app = self.app

        if not request.access_token:
            if not self.access_token:
                raise SDKError('Missing access token on BatchRequest and no fallback detected on GraphRequest.')
            request.set_access_token(self.access_token)

    def extract_file_attachments(self, request: GraphRequest) -> Optional[str]:
        """Move the request's files onto the batch under random names."""
        if not request.contains_file_uploads():
            return None
        names = []
        for graph_file in request.files.values():
            name = self._random.get_pseudo_random_string(16)
            self.add_file(name, graph_file)
            names.append(name)
        request.reset_files()
        return ','.join(names)

    def validate_batch_request_count(self) -> None:
        count = len(self.requests)
        if count == 0:
            raise SDKError('There are no batch requests to send.')
        if count > MAX_BATCH_REQUESTS:
            raise SDKError(f'You cannot send more than {MAX_BATCH_REQUESTS} batch requests at a time.')

    def prepare_requests_for_batch(self) -> None:
        """Set the ``batch`` and ``include_headers`` params."""
        self.validate_batch_request_count()
        self.set_params({
            'batch': self.convert_requests_to_json(),
            'include_headers': True,
        })

    def convert_requests_to_json(self) -> str:
        entries = []
        for entry in self.requests:
            options = {}
            if entry['name'] is not None:
                options['name'] = entry['name']
            options.update(entry['options'])
            entries.append(self.request_entity_to_batch_array(entry['request'], options, entry['attached_files']))
        return json.dumps(entries, separators=(',', ':'))

    @staticmethod
    def request_entity_to_batch_array(request: GraphRequest, options=None,
                                      attached_files: Optional[str] = None) -> Dict[str, Any]:
        """Render one request as a batch entry."""
        if options is None:
            options = {}
        elif not isinstance(options, dict):
            options = {'name': options}

        batch: Dict[str, Any] = {
            'headers': [f"{name}: {value}" for name, value in request.get_headers().items()],
            'method': request.method,
            'relative_url': request.get_url(),
        }
        body = request.get_url_encoded_body().get_body()
        if body:
            batch['body'] = body
        batch.update(options)
        if attached_files:
            batch['attached_files'] = attached_files
        return batch

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        return iter(self.requests)

    def __len__(self) -> int:
        return len(self.requests)

    def __getitem__(self, index: int) -> Dict[str, Any]:
        return self.requests[index]
