"""Fake transport for testing.

Records every request and replays seeded responses without touching the
network.
"""

from typing import List, Optional, Tuple

from twitteroauth.core.shared_models import TransportOptions, TransportRequest, TransportResponse


class FakeTransport:
    """Test implementation of Transport.

    Responses are returned in the order they were seeded; when the queue is
    empty the default response (200, ``{}``) is used.

    Usage:
        fake = FakeTransport()
        fake.seed_json(200, '{"id": 1}')
        client = TwitterOAuth("ck", "cs", transport=fake)
        client.get("account/verify_credentials")

        assert fake.call_count == 1
        assert fake.last_request.method == "GET"
    """

    def __init__(self) -> None:
        """Initialize with empty state."""
        self._responses: List[TransportResponse] = []
        self._should_raise: Optional[Exception] = None
        self.calls: List[Tuple[TransportRequest, TransportOptions]] = []
        # Snapshot of each uploaded file taken while the handle was open.
        self.uploaded: List[Tuple[str, str, bytes]] = []

    # -- seeding helpers --

    def seed(self, response: TransportResponse) -> None:
        self._responses.append(response)

    def seed_json(self, status_code: int, body: str, headers: Optional[dict] = None) -> None:
        self.seed(
            TransportResponse(
                status_code=status_code,
                body=body,
                content_type="application/json; charset=utf-8",
                headers=headers or {},
            )
        )

    def seed_form(self, status_code: int, body: str) -> None:
        self.seed(
            TransportResponse(
                status_code=status_code,
                body=body,
                content_type="application/x-www-form-urlencoded",
            )
        )

    def set_error(self, error: Exception) -> None:
        self._should_raise = error

    def clear_error(self) -> None:
        self._should_raise = None

    # -- Transport protocol --

    def execute(self, request: TransportRequest, options: TransportOptions) -> TransportResponse:
        """Record the request, then raise the seeded error or pop a response."""
        self.calls.append((request, options))
        for name, (filename, handle, _content_type) in request.files:
            self.uploaded.append((name, filename, handle.read()))
        if self._should_raise is not None:
            raise self._should_raise
        if self._responses:
            return self._responses.pop(0)
        return TransportResponse(status_code=200, body="{}", content_type="application/json")

    # -- test helpers --

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def last_request(self) -> TransportRequest:
        return self.calls[-1][0]

    @property
    def last_options(self) -> TransportOptions:
        return self.calls[-1][1]

    def clear(self) -> None:
        """Reset all state."""
        self._responses.clear()
        self._should_raise = None
        self.calls.clear()
        self.uploaded.clear()
