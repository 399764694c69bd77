"""Transport protocol for executing signed requests.

The API client only prepares and signs requests. Sending them is delegated to
a transport, which owns sockets, TLS and proxies.

Usage:
    transport: Transport = HttpxTransport()
    response = transport.execute(request, TransportOptions(timeout=25))
    if response.is_success:
        ...
"""

from typing import Protocol, runtime_checkable

from twitteroauth.core.shared_models import TransportOptions, TransportRequest, TransportResponse


@runtime_checkable
class Transport(Protocol):
    """Protocol for sending a single HTTP request.

    Implementations must not raise on non-2xx responses; the status code is
    returned to the caller. Connection and timeout failures are raised as
    :class:`~twitteroauth.core.exceptions.TransportError`.
    """

    def execute(self, request: TransportRequest, options: TransportOptions) -> TransportResponse:
        """Send ``request`` and block until a response or a failure.

        Args:
            request: Signed request (method, URL, headers, query, form, files).
            options: Timeouts, proxy and user agent for this call.

        Returns:
            The status code, decoded body text, content type and headers.
        """
        ...
