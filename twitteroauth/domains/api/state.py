"""Outcome of the most recent call made by a client instance."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from twitteroauth.domains.api.decoding import ParsedResponse, ResponseKind


@dataclass
class LastResult:
    """Mutable holder owned by exactly one client.

    ``http_code`` 0, empty ``api_path`` / ``http_method`` and an empty list
    ``response`` mean "no call recorded".
    """

    http_code: int = 0
    api_path: str = ""
    http_method: str = ""
    response: Any = field(default_factory=list)
    response_kind: ResponseKind = ResponseKind.EMPTY
    body: str = ""
    x_headers: Dict[str, str] = field(default_factory=dict)

    def reset(self) -> None:
        """Clear back to the unset values."""
        self.http_code = 0
        self.api_path = ""
        self.http_method = ""
        self.response = []
        self.response_kind = ResponseKind.EMPTY
        self.body = ""
        self.x_headers = {}

    def start(self, api_path: str, http_method: str) -> None:
        """Begin recording a new call."""
        self.reset()
        self.api_path = api_path
        self.http_method = http_method

    def record_http(
        self, http_code: int, body: str, headers: Optional[Dict[str, str]] = None
    ) -> None:
        self.http_code = http_code
        self.body = body
        self.x_headers = {
            k.lower(): v for k, v in (headers or {}).items() if k.lower().startswith("x-")
        }

    def record_response(self, parsed: ParsedResponse) -> None:
        self.response = parsed.data
        self.response_kind = parsed.kind
