"""Public API client domain."""

from twitteroauth.domains.api.client import TwitterOAuth
from twitteroauth.domains.api.decoding import ParsedResponse, ResponseKind
from twitteroauth.domains.api.state import LastResult

__all__ = ["TwitterOAuth", "ParsedResponse", "ResponseKind", "LastResult"]
