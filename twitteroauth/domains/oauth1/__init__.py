"""OAuth 1.0a signing domain."""

from twitteroauth.domains.oauth1.request_builder import RequestBuilder
from twitteroauth.domains.oauth1.types import Credentials, FilePart, SignedRequest

__all__ = ["RequestBuilder", "Credentials", "FilePart", "SignedRequest"]
