"""Session factory using Factory Pattern."""
import aiohttp

from ..config import RequesterConfig


class SessionFactory:
    """Factory for creating aiohttp sessions from configuration."""

    @staticmethod
    def create_connector(config: RequesterConfig) -> aiohttp.TCPConnector:
        """Creates a connector with the configured limits and SSL context."""
        return aiohttp.TCPConnector(**config.get_connector_kwargs())

    @staticmethod
    def create_session(config: RequesterConfig) -> aiohttp.ClientSession:
        """Creates an asynchronous HTTP session that owns its connector."""
        return aiohttp.ClientSession(
            connector=SessionFactory.create_connector(config),
            **config.get_session_kwargs()
        )
