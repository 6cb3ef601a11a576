"""Session factory using Factory Pattern."""
from typing import Optional

import requests
from requests.adapters import HTTPAdapter, Retry

from ...config import SSLConfig, ProxyConfig


class SessionFactory:
    """Factory for creating HTTP sessions."""

    @staticmethod
    def create_sync_session(
        user_agent: Optional[str] = None,
        ssl: Optional[SSLConfig] = None,
        proxy: Optional[ProxyConfig] = None,
        connection_retries: int = 2,
    ) -> requests.Session:
        """
        Creates a synchronous HTTP session with connection-level retries.

        Only connection errors are retried here; POSTs are never replayed.
        """
        session = requests.Session()
        retries = Retry(total=connection_retries, backoff_factor=0.5, allowed_methods=frozenset(['GET', 'DELETE']))
        session.mount('http://', HTTPAdapter(max_retries=retries))
        session.mount('https://', HTTPAdapter(max_retries=retries))

        if user_agent:
            session.headers['User-Agent'] = user_agent
        if ssl is not None:
            session.verify = ssl.to_requests_verify()
            session.cert = ssl.to_requests_cert()
        if proxy is not None:
            proxies = proxy.to_requests_proxies()
            if proxies:
                session.proxies.update(proxies)
        return session
