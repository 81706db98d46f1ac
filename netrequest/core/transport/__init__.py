"""HTTP transports."""
from .aiohttp_transport import AiohttpTransport
from .session_factory import SessionFactory

__all__ = [
    'AiohttpTransport',
    'SessionFactory',
]
