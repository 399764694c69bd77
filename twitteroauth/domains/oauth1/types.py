"""Value types for the OAuth1 domain.

These live in a separate module to avoid circular imports between the
signature engine, the request builder and the API client.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from twitteroauth.domains.oauth1.signature import build_authorization_header


@dataclass(frozen=True, slots=True)
class Credentials:
    """Consumer credentials plus an optional token pair.

    Without a token the client signs two-legged requests, which is how
    ``oauth/request_token`` is called.
    """

    consumer_key: str
    consumer_secret: str
    token: Optional[str] = None
    token_secret: Optional[str] = None

    @property
    def has_token(self) -> bool:
        return bool(self.token)

    def __repr__(self) -> str:
        return (
            f"Credentials(consumer_key={self.consumer_key!r}, "
            f"token={self.token!r}, secrets=<redacted>)"
        )


@dataclass(frozen=True, slots=True)
class FilePart:
    """A local file sent as one multipart part."""

    name: str
    path: str
    filename: str
    content_type: str


@dataclass(slots=True)
class SignedRequest:
    """Output of the request builder.

    ``oauth_params`` carries the protocol parameters including
    ``oauth_signature``; ``params`` carries the signed call parameters and
    ``files`` the unsigned upload payloads.
    """

    method: str
    url: str
    oauth_params: Dict[str, str]
    params: Dict[str, str] = field(default_factory=dict)
    files: List[FilePart] = field(default_factory=list)

    @property
    def signature(self) -> str:
        return self.oauth_params["oauth_signature"]

    @property
    def merged_params(self) -> Dict[str, str]:
        """OAuth and call parameters as one mapping, for header or body encoding."""
        merged = dict(self.params)
        merged.update(self.oauth_params)
        return merged

    @property
    def authorization_header(self) -> str:
        return build_authorization_header(self.oauth_params)

    @property
    def is_multipart(self) -> bool:
        return bool(self.files)
