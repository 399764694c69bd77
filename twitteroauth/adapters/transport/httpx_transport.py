"""httpx transport adapter.

Satisfies the :class:`~twitteroauth.core.protocols.transport.Transport` protocol
with a blocking ``httpx.Client``. A fresh client is opened per call so that
proxy and timeout changes apply to the next request.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from twitteroauth.core.exceptions import TransportError
from twitteroauth.core.logging import logger
from twitteroauth.core.shared_models import TransportOptions, TransportRequest, TransportResponse


class HttpxTransport:
    """Sends signed requests with httpx.

    Usage::

        transport = HttpxTransport()
        response = transport.execute(request, TransportOptions())
    """

    def __init__(self, transport: Optional[httpx.BaseTransport] = None) -> None:
        """Initialize the adapter.

        Args:
            transport: Optional low-level httpx transport, e.g.
                ``httpx.MockTransport`` in tests. When given, proxy settings
                are not applied.
        """
        self._transport = transport
        self._logger = logger.with_prefix("[HttpxTransport] ")

    def client_kwargs(self, options: TransportOptions) -> Dict[str, Any]:
        """Keyword arguments for ``httpx.Client`` derived from ``options``."""
        kwargs: Dict[str, Any] = {
            "timeout": httpx.Timeout(options.timeout, connect=options.connection_timeout),
            "headers": {"User-Agent": options.user_agent},
        }
        if self._transport is not None:
            kwargs["transport"] = self._transport
        elif options.proxy is not None:
            kwargs["proxy"] = options.proxy.url
        return kwargs

    def execute(self, request: TransportRequest, options: TransportOptions) -> TransportResponse:
        """Send the request and return the raw response.

        Raises:
            TransportError: On connection failures and timeouts.
        """
        try:
            with httpx.Client(**self.client_kwargs(options)) as client:
                response = client.request(
                    request.method,
                    request.url,
                    params=request.params or None,
                    data=request.data or None,
                    files=request.files or None,
                    headers=request.headers,
                )
        except httpx.TimeoutException as e:
            self._logger.warning(f"Timed out after {options.timeout}s: {request.url}")
            raise TransportError(f"Request timed out: {e}", url=request.url) from e
        except httpx.TransportError as e:
            self._logger.warning(f"Connection error for {request.url}: {e}")
            raise TransportError(f"Connection failed: {e}", url=request.url) from e

        return TransportResponse(
            status_code=response.status_code,
            body=response.text,
            content_type=response.headers.get("content-type", ""),
            headers=dict(response.headers),
        )
