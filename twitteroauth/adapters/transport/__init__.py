"""Transport adapters."""

from twitteroauth.adapters.transport.fake import FakeTransport
from twitteroauth.adapters.transport.httpx_transport import HttpxTransport

__all__ = ["HttpxTransport", "FakeTransport"]
