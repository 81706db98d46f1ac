"""
Requester configuration module.

Provides configuration for the requester and its default aiohttp transport.
"""
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Union
import ssl

from yarl import URL

from .types import CachePolicy


@dataclass
class ProxyConfig:
    """
    Proxy configuration.

    Supports HTTP, HTTPS, and SOCKS proxies.
    """
    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

    def to_aiohttp_proxy(self) -> Optional[str]:
        """Convert to aiohttp proxy format."""
        if not self.url:
            return None

        url = URL(self.url)
        if self.username and self.password:
            url = url.with_user(self.username).with_password(self.password)
        return str(url)


@dataclass
class SSLConfig:
    """SSL/TLS configuration handed to the transport as-is."""
    verify: bool = True
    cert_file: Optional[str] = None
    key_file: Optional[str] = None
    ca_file: Optional[str] = None
    check_hostname: bool = True

    def create_ssl_context(self) -> Union[ssl.SSLContext, bool]:
        """Create SSL context from configuration."""
        if not self.verify:
            return False

        context = ssl.create_default_context()

        if self.ca_file:
            context.load_verify_locations(self.ca_file)

        if self.cert_file:
            context.load_cert_chain(self.cert_file, keyfile=self.key_file)

        context.check_hostname = self.check_hostname

        return context


@dataclass
class TimeoutConfig:
    """
    Timeout configuration.

    The total timeout of a call comes from the request itself; these
    values bound the individual connection phases.
    """
    connect: Optional[float] = 30.0
    sock_read: Optional[float] = None
    sock_connect: Optional[float] = 30.0

    def to_aiohttp_timeout(self, total: Optional[float]):
        """Convert to aiohttp ClientTimeout."""
        import aiohttp
        return aiohttp.ClientTimeout(
            total=total,
            connect=self.connect,
            sock_read=self.sock_read,
            sock_connect=self.sock_connect
        )


@dataclass
class RequesterConfig:
    """
    Complete requester configuration.

    Holds the per-call defaults used by Requester and the session
    settings used by AiohttpTransport.
    """
    # Per-call defaults
    default_timeout: float = 60.0
    default_cache_policy: CachePolicy = CachePolicy.USE_PROTOCOL_CACHE_POLICY

    # User agent sent by the transport session, None to use aiohttp's own
    user_agent: Optional[str] = None

    # Sub-configurations
    proxy: Optional[ProxyConfig] = None
    ssl: SSLConfig = field(default_factory=SSLConfig)
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)

    # Headers added to every request by the transport session
    extra_headers: Dict[str, str] = field(default_factory=dict)

    # Level for the requester logger, None to leave it untouched
    log_level: Optional[int] = None

    # Connector settings
    limit_per_host: int = 10
    limit: int = 100

    @classmethod
    def default(cls) -> 'RequesterConfig':
        """Create default configuration."""
        return cls()

    @classmethod
    def with_proxy(cls, proxy_url: str, **kwargs) -> 'RequesterConfig':
        """Create configuration with proxy."""
        return cls(proxy=ProxyConfig(url=proxy_url), **kwargs)

    @classmethod
    def insecure(cls, **kwargs) -> 'RequesterConfig':
        """Create configuration with SSL verification disabled."""
        return cls(ssl=SSLConfig(verify=False, check_hostname=False), **kwargs)

    def get_connector_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp TCPConnector."""
        return {
            'limit': self.limit,
            'limit_per_host': self.limit_per_host,
            'ssl': self.ssl.create_ssl_context(),
        }

    def get_session_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp ClientSession."""
        headers = dict(self.extra_headers)
        if self.user_agent:
            headers['User-Agent'] = self.user_agent

        return {
            'headers': headers,
            'timeout': self.timeout.to_aiohttp_timeout(self.default_timeout),
        }
