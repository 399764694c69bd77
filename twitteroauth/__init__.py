"""OAuth 1.0a signed client for the Twitter REST API."""

from twitteroauth.core.constants import __version__
from twitteroauth.core.exceptions import (
    AuthenticationError,
    ResponseDecodeError,
    SignatureError,
    TransportError,
    TwitterOAuthException,
)
from twitteroauth.domains.api.client import TwitterOAuth
from twitteroauth.domains.api.decoding import ParsedResponse, ResponseKind
from twitteroauth.domains.oauth1.types import Credentials

__all__ = [
    "__version__",
    "TwitterOAuth",
    "Credentials",
    "ParsedResponse",
    "ResponseKind",
    "TwitterOAuthException",
    "SignatureError",
    "AuthenticationError",
    "TransportError",
    "ResponseDecodeError",
]
