"""HTTP client abstraction and the default requests-based implementation."""
from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol, Union, runtime_checkable

import requests

from ...exceptions import SDKError
from ...logging import get_logger
from ...config import GraphConfig
from ..session import SessionFactory

logger = get_logger('fbgraph.api.http')


@dataclass
class RawResponse:
    """Raw HTTP response: status, headers and undecoded body."""
    http_status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: str = ''

    def get_header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup."""
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return None


@runtime_checkable
class HttpClient(Protocol):
    """Transport used by GraphClient to talk to Graph."""

    def send(self, url: str, method: str, body: Union[str, bytes],
             headers: Dict[str, str], timeout: float) -> RawResponse:
        ...


class RequestsHttpClient:
    """
    HttpClient backed by a ``requests.Session``.

    Transport failures are wrapped in SDKError.
    """

    def __init__(self, session: Optional[requests.Session] = None,
                 config: Optional[GraphConfig] = None):
        config = config or GraphConfig()
        self.connect_timeout = config.timeout.connect
        self.session = session or SessionFactory.create_sync_session(
            user_agent=config.user_agent,
            ssl=config.ssl,
            proxy=config.proxy,
        )

    def send(self, url: str, method: str, body: Union[str, bytes],
             headers: Dict[str, str], timeout: float) -> RawResponse:
        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(
                method,
                url,
                data=body if body else None,
                headers=headers,
                timeout=(self.connect_timeout, timeout),
            )
        except requests.RequestException as e:
            raise SDKError(str(e)) from e

        return RawResponse(
            http_status_code=response.status_code,
            headers=dict(response.headers),
            body=response.text,
        )

    def close(self) -> None:
        self.session.close()
