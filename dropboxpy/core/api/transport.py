"""
HTTP transport layer.

The uploader talks to the network only through ``HTTPTransport``; the
default implementation is backed by a ``requests`` session.
"""
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Protocol, Union

import requests
from requests.structures import CaseInsensitiveDict

from .config import UploaderConfig
from .session_factory import SessionFactory
from ..logging import get_logger


@dataclass
class HTTPResponse:
    """
    Final response of a single request.

    Attributes:
        status: Numeric status code
        reason: Reason phrase ("OK", "Found", ...)
        headers: Case-insensitive response headers
        text: Decoded response body
    """
    status: int
    reason: str = ''
    headers: Mapping[str, str] = field(default_factory=CaseInsensitiveDict)
    text: str = ''

    @property
    def location(self) -> Optional[str]:
        """Redirect target, if any."""
        return self.headers.get('Location')

    @property
    def set_cookie(self) -> Optional[str]:
        """Raw Set-Cookie header value, if any."""
        return self.headers.get('Set-Cookie')

    @property
    def is_success(self) -> bool:
        """True for 2xx and 3xx statuses."""
        return str(self.status)[:1] in ('2', '3')


class HTTPTransport(Protocol):
    """
    Protocol for HTTP transports.

    Implementations must not follow redirects and must report the final
    status, reason and all headers of the response.
    """

    def request(
        self,
        method: str,
        url: str,
        headers: Optional[Mapping[str, str]] = None,
        data: Union[bytes, str, Any, None] = None
    ) -> HTTPResponse:
        """
        Send one request and wait for its complete response.

        Args:
            method: HTTP method
            url: Absolute URL
            headers: Request headers
            data: Body; bytes, str, or a readable stream with a known length

        Returns:
            The response
        """
        ...

    def close(self) -> None:
        """Release connections."""
        ...


class RequestsTransport:
    """HTTP transport backed by ``requests.Session``."""

    def __init__(
        self,
        config: Optional[UploaderConfig] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize transport.

        Args:
            config: Uploader configuration (TLS, timeout, user agent)
            session: Pre-built session (created from config if omitted)
        """
        self._config = config or UploaderConfig.default()
        self._session = session or SessionFactory.create_sync_session(
            self._config.user_agent
        )
        self._logger = get_logger('dropboxpy.transport')

    def request(
        self,
        method: str,
        url: str,
        headers: Optional[Mapping[str, str]] = None,
        data: Union[bytes, str, Any, None] = None
    ) -> HTTPResponse:
        """Send request and return the final (non-followed) response."""
        self._logger.debug(f"{method} {url}")
        response = self._session.request(
            method,
            url,
            headers=dict(headers or {}),
            data=data,
            allow_redirects=False,
            verify=self._config.ssl.verify_value(),
            timeout=self._config.timeout,
        )
        self._logger.debug(f"{method} {url} -> {response.status_code} {response.reason}")
        return HTTPResponse(
            status=response.status_code,
            reason=response.reason or '',
            headers=response.headers,
            text=response.text,
        )

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()
