"""HMAC-SHA1 request signing per RFC 5849 (OAuth 1.0a).

All functions are pure: identical inputs always give identical outputs, and
sorting is by code point so results do not depend on the platform locale.

Reference: RFC 5849 - The OAuth 1.0 Protocol, section 3.4
"""

import base64
import hashlib
import hmac
from typing import Any, Iterable, Mapping, Optional, Tuple
from urllib.parse import quote, urlsplit, urlunsplit

from twitteroauth.core.exceptions import SignatureError

_DEFAULT_PORTS = {"http": 80, "https": 443}


def percent_encode(value: Any) -> str:
    """Percent-encode a value according to RFC 3986.

    Encodes all characters except unreserved: A-Z, a-z, 0-9, -, ., _, ~
    """
    if isinstance(value, bytes):
        return quote(value, safe="~")
    return quote(str(value), safe="~")


def normalize_url(url: str) -> str:
    """Build the base string URI (RFC 5849 section 3.4.1.2).

    Scheme and host are lower-cased, default ports dropped, and the query and
    fragment removed.
    """
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    host = (parts.hostname or "").lower()
    port = parts.port
    netloc = host if port is None or port == _DEFAULT_PORTS.get(scheme) else f"{host}:{port}"
    return urlunsplit((scheme, netloc, parts.path or "/", "", ""))


def normalize_parameters(params: Iterable[Tuple[str, Any]]) -> str:
    """Encode, sort and join parameters (RFC 5849 section 3.4.1.3.2).

    Pairs are sorted by encoded name, then by encoded value.
    """
    encoded = sorted((percent_encode(k), percent_encode(v)) for k, v in params)
    return "&".join(f"{k}={v}" for k, v in encoded)


def build_base_string(method: str, url: str, params: Mapping[str, Any]) -> str:
    """Build the signature base string.

    Format: HTTP_METHOD&URL&NORMALIZED_PARAMS
    """
    parts = [
        method.upper(),
        percent_encode(normalize_url(url)),
        percent_encode(normalize_parameters(params.items())),
    ]
    return "&".join(parts)


def signing_key(consumer_secret: str, token_secret: Optional[str] = None) -> str:
    """Signing key: percent_encode(consumer_secret)&percent_encode(token_secret)."""
    return f"{percent_encode(consumer_secret)}&{percent_encode(token_secret or '')}"


def sign_hmac_sha1(
    base_string: str, consumer_secret: str, token_secret: Optional[str] = None
) -> str:
    """Sign a base string and return the base64 encoded HMAC-SHA1 digest.

    Raises:
        SignatureError: If the key or base string cannot be encoded.
    """
    try:
        key = signing_key(consumer_secret, token_secret).encode("utf-8")
        digest = hmac.new(key, base_string.encode("utf-8"), hashlib.sha1).digest()
    except (TypeError, ValueError) as e:
        raise SignatureError(f"Failed to compute HMAC-SHA1 signature: {e}") from e
    return base64.b64encode(digest).decode("ascii")


def sign(
    method: str,
    base_url: str,
    params: Mapping[str, Any],
    consumer_secret: str,
    token_secret: Optional[str] = None,
) -> str:
    """Compute the ``oauth_signature`` for a request.

    Args:
        method: HTTP method, any case.
        base_url: Request URL; its query string is not read here, callers
            merge query parameters into ``params``.
        params: OAuth protocol parameters plus signable call parameters.
        consumer_secret: Consumer secret.
        token_secret: Token secret, empty or None in two-legged mode.

    Returns:
        Base64 encoded signature.
    """
    try:
        base_string = build_base_string(method, base_url, params)
    except (TypeError, ValueError) as e:
        raise SignatureError(f"Failed to build signature base string: {e}") from e
    return sign_hmac_sha1(base_string, consumer_secret, token_secret)


def build_authorization_header(oauth_params: Mapping[str, Any]) -> str:
    """Build OAuth1 Authorization header.

    Format: OAuth oauth_consumer_key="...", oauth_nonce="...", ...
    """
    param_strings = [
        f'{percent_encode(k)}="{percent_encode(v)}"' for k, v in sorted(oauth_params.items())
    ]
    return "OAuth " + ", ".join(param_strings)
