"""
SDK configuration module.

Provides configuration for the Graph API client.
Open for extension through custom configurations.
"""
import os
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Tuple, Union

from .exceptions import SDKError

APP_ID_ENV_NAME = 'FACEBOOK_APP_ID'
APP_SECRET_ENV_NAME = 'FACEBOOK_APP_SECRET'
DEFAULT_GRAPH_VERSION = 'v2.10'


@dataclass
class ProxyConfig:
    """
    Proxy configuration.

    Supports HTTP, HTTPS, and SOCKS proxies.
    """
    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

    def to_requests_proxies(self) -> Optional[Dict[str, str]]:
        """Convert to the ``proxies`` mapping used by requests."""
        if not self.url:
            return None

        url = self.url
        if self.username and self.password and '://' in url:
            protocol, rest = url.split('://', 1)
            url = f"{protocol}://{self.username}:{self.password}@{rest}"

        return {'http': url, 'https': url}


@dataclass
class SSLConfig:
    """
    SSL/TLS configuration.

    Allows customization of SSL behavior for security requirements.
    """
    verify: bool = True
    cert_file: Optional[str] = None
    key_file: Optional[str] = None
    ca_file: Optional[str] = None

    def to_requests_verify(self) -> Union[bool, str]:
        """Value for the requests ``verify`` argument."""
        if not self.verify:
            return False
        return self.ca_file or True

    def to_requests_cert(self) -> Optional[Union[str, Tuple[str, str]]]:
        """Value for the requests ``cert`` argument."""
        if not self.cert_file:
            return None
        if self.key_file:
            return (self.cert_file, self.key_file)
        return self.cert_file


@dataclass
class TimeoutConfig:
    """
    Timeout configuration in seconds.

    Uploads get longer timeouts than ordinary requests.
    """
    request: float = 60.0
    file_upload: float = 3600.0
    video_upload: float = 7200.0
    connect: float = 10.0


@dataclass
class RetryConfig:
    """
    Retry configuration for resumable video transfers.

    The upload protocol specifies no delay between attempts, so the
    default base delay is zero.
    """
    max_transfer_tries: int = 5
    base_delay: float = 0.0
    max_delay: float = 16.0
    exponential_base: float = 2.0

    def calculate_delay(self, attempt: int) -> float:
        """Calculate delay before the given retry attempt (0-based)."""
        if self.base_delay <= 0:
            return 0.0
        delay = self.base_delay * (self.exponential_base ** attempt)
        return min(delay, self.max_delay)


@dataclass
class GraphConfig:
    """
    Complete SDK configuration.

    Centralizes all configuration options for the Graph API client.
    App credentials fall back to the FACEBOOK_APP_ID and
    FACEBOOK_APP_SECRET environment variables.
    """
    app_id: Optional[str] = None
    app_secret: Optional[str] = None
    default_graph_version: str = DEFAULT_GRAPH_VERSION
    default_access_token: Optional[Any] = None
    enable_beta_mode: bool = False

    user_agent: Optional[str] = None

    # Sub-configurations
    proxy: Optional[ProxyConfig] = None
    ssl: SSLConfig = field(default_factory=SSLConfig)
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)
    retry: RetryConfig = field(default_factory=RetryConfig)

    # Injectable collaborators
    http_client: Optional[Any] = None
    persistent_data: Optional[Any] = None
    random_string_generator: Optional[Any] = None

    def __post_init__(self):
        if self.app_id is None:
            self.app_id = os.environ.get(APP_ID_ENV_NAME)
        if self.app_secret is None:
            self.app_secret = os.environ.get(APP_SECRET_ENV_NAME)
        if self.app_id is not None:
            self.app_id = str(self.app_id)

    def validate(self) -> None:
        """
        Validate required settings.

        Raises:
            SDKError: If app id, app secret or graph version is missing
        """
        if not self.app_id:
            raise SDKError(
                f'Required "app_id" key not supplied in config and could not find '
                f'fallback environment variable "{APP_ID_ENV_NAME}"'
            )
        if not self.app_secret:
            raise SDKError(
                f'Required "app_secret" key not supplied in config and could not find '
                f'fallback environment variable "{APP_SECRET_ENV_NAME}"'
            )
        if not self.default_graph_version:
            raise SDKError('Required "default_graph_version" key not supplied')

    @classmethod
    def with_proxy(cls, proxy_url: str, **kwargs) -> 'GraphConfig':
        """Create configuration with proxy."""
        return cls(proxy=ProxyConfig(url=proxy_url), **kwargs)

    @classmethod
    def insecure(cls, **kwargs) -> 'GraphConfig':
        """Create configuration with SSL verification disabled."""
        return cls(ssl=SSLConfig(verify=False), **kwargs)
