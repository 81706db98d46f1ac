"""
Header policies and header merging.

DefaultHeaderPolicy provides content negotiation, user agent and bearer
authorization headers for every request. Explicit per-call headers
override any of them.
"""
from typing import Callable, Dict, Mapping, Optional, Union

from multidict import CIMultiDict

from .types import AuthorizationType, HTTPMethod, RequestAcceptType, RequestContentType

ValueProvider = Union[str, Callable[[], Optional[str]]]


def _resolve(provider: Optional[ValueProvider]) -> Optional[str]:
    if provider is None:
        return None
    if callable(provider):
        return provider()
    return provider


class DefaultHeaderPolicy:
    """
    Header policy for JSON APIs with bearer authorization.

    Example:
        >>> policy = DefaultHeaderPolicy(
        ...     access_token_provider=lambda: session.token,
        ...     user_agent='my-app/1.0',
        ... )
        >>> requester = Requester(header_policy=policy)
    """

    def __init__(
        self,
        access_token_provider: Optional[ValueProvider] = None,
        user_agent: Optional[ValueProvider] = None,
    ):
        """
        Args:
            access_token_provider: Token string or callable returning it
            user_agent: User agent string or callable returning it
        """
        self._access_token_provider = access_token_provider
        self._user_agent = user_agent

    def compute_headers(
        self,
        content_type: RequestContentType,
        accept_type: RequestAcceptType,
        authorization_type: AuthorizationType,
        url: str,
        method: HTTPMethod,
    ) -> Dict[str, str]:
        headers = {
            'Content-Type': content_type.value,
            'Accept': accept_type.value,
        }

        user_agent = _resolve(self._user_agent)
        if user_agent:
            headers['User-Agent'] = user_agent

        if authorization_type is AuthorizationType.BEARER:
            token = _resolve(self._access_token_provider)
            if token:
                headers['Authorization'] = f"Bearer {token}"

        return headers


def merge_headers(
    defaults: Optional[Mapping[str, str]],
    overrides: Optional[Mapping[str, str]],
) -> Dict[str, str]:
    """
    Merge explicit headers over defaults, last write wins per key.

    Keys compare case-insensitively, within defaults as well as across
    defaults and overrides. The winning write keeps its own spelling.
    """
    merged = CIMultiDict()
    for source in (defaults, overrides):
        for name, value in (source or {}).items():
            if name in merged:
                del merged[name]
            merged[name] = value
    return {str(name): value for name, value in merged.items()}
