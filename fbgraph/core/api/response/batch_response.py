"""Responses of a batch request."""
from typing import Dict, Any, Iterator, List, Optional

from .graph_response import GraphResponse


class BatchResponse(GraphResponse):
    """
    A batch response split into one GraphResponse per sub-request.

    Sub-responses are keyed by the sub-request's name, or by its position
    when it has none.
    """

    def __init__(self, batch_request, response: GraphResponse):
        self.batch_request = batch_request
        self.responses: Dict[Any, GraphResponse] = {}
        super().__init__(response.get_request(), response.get_body(),
                         response.get_http_status_code(), response.get_headers())
        results = response.get_decoded_body()
        if isinstance(results, list):
            self.set_responses(results)

    def get_responses(self) -> Dict[Any, GraphResponse]:
        return self.responses

    def set_responses(self, responses: List[Optional[Dict[str, Any]]]) -> None:
        self.responses = {}
        for key, response in enumerate(responses):
            self.add_response(key, response)

    def add_response(self, key: int, response: Optional[Dict[str, Any]]) -> None:
        entry = self.batch_request[key] if key < len(self.batch_request) else {}
        name = entry.get('name')
        if name is None:
            name = key
        response = response or {}
        headers = self._normalize_batch_headers(response.get('headers') or [])
        self.responses[name] = GraphResponse(
            entry.get('request'),
            response.get('body'),
            response.get('code'),
            headers,
        )

    @staticmethod
    def _normalize_batch_headers(batch_headers: List[Dict[str, str]]) -> Dict[str, str]:
        return {header['name']: header['value'] for header in batch_headers if 'name' in header}

    def __iter__(self) -> Iterator:
        return iter(self.responses.items())

    def __len__(self) -> int:
        return len(self.responses)

    def __getitem__(self, key) -> GraphResponse:
        return self.responses[key]

    def __contains__(self, key) -> bool:
        return key in self.responses
