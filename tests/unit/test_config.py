"""Tests for requester configuration."""
import ssl
import pytest

import aiohttp

from netrequest.core.config import ProxyConfig, RequesterConfig, SSLConfig, TimeoutConfig
from netrequest.core.types import CachePolicy


class TestProxyConfig:
    """Test suite for ProxyConfig."""

    def test_no_url(self):
        assert ProxyConfig().to_aiohttp_proxy() is None

    def test_plain_url(self):
        assert ProxyConfig(url='http://proxy:3128').to_aiohttp_proxy() == 'http://proxy:3128'

    def test_credentials_inserted(self):
        proxy = ProxyConfig(url='http://proxy:3128', username='u', password='p')

        assert proxy.to_aiohttp_proxy() == 'http://u:p@proxy:3128'


class TestSSLConfig:
    """Test suite for SSLConfig."""

    def test_verify_disabled(self):
        assert SSLConfig(verify=False).create_ssl_context() is False

    def test_default_context(self):
        context = SSLConfig().create_ssl_context()

        assert isinstance(context, ssl.SSLContext)
        assert context.check_hostname is True


class TestTimeoutConfig:
    """Test suite for TimeoutConfig."""

    def test_total_from_request(self):
        timeout = TimeoutConfig().to_aiohttp_timeout(12.0)

        assert isinstance(timeout, aiohttp.ClientTimeout)
        assert timeout.total == 12.0
        assert timeout.connect == 30.0


class TestRequesterConfig:
    """Test suite for RequesterConfig."""

    def test_defaults(self):
        config = RequesterConfig.default()

        assert config.default_timeout == 60.0
        assert config.default_cache_policy is CachePolicy.USE_PROTOCOL_CACHE_POLICY
        assert config.proxy is None

    def test_with_proxy(self):
        config = RequesterConfig.with_proxy('http://proxy:3128', default_timeout=5.0)

        assert config.proxy.url == 'http://proxy:3128'
        assert config.default_timeout == 5.0

    def test_insecure(self):
        config = RequesterConfig.insecure()

        assert config.get_connector_kwargs()['ssl'] is False

    def test_session_kwargs(self):
        config = RequesterConfig(user_agent='app/1.0', extra_headers={'X-Client': 'tests'})

        kwargs = config.get_session_kwargs()

        assert kwargs['headers'] == {'X-Client': 'tests', 'User-Agent': 'app/1.0'}
        assert kwargs['timeout'].total == 60.0

    def test_session_kwargs_without_user_agent(self):
        assert 'User-Agent' not in RequesterConfig().get_session_kwargs()['headers']
