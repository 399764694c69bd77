"""Builds signed OAuth 1.0a requests for arbitrary endpoints.

Every build draws a fresh nonce and timestamp, splits the call parameters into
signable values and file payloads, and signs the OAuth protocol parameters
together with the signable values.
"""

import errno
import mimetypes
import os
import secrets
import string
import time
from typing import Any, Callable, Collection, Dict, Mapping, Optional, Tuple
from urllib.parse import parse_qsl, urlsplit

from twitteroauth.core import constants
from twitteroauth.core.logging import logger
from twitteroauth.domains.oauth1 import signature
from twitteroauth.domains.oauth1.types import Credentials, FilePart, SignedRequest

NONCE_LENGTH = 32
_NONCE_ALPHABET = string.ascii_letters + string.digits


def generate_nonce(length: int = NONCE_LENGTH) -> str:
    """Generate a cryptographically secure alphanumeric nonce."""
    return "".join(secrets.choice(_NONCE_ALPHABET) for _ in range(length))


def generate_timestamp() -> str:
    """Get current Unix timestamp as string."""
    return str(int(time.time()))


def stringify(value: Any) -> str:
    """Convert a call parameter value to its wire form."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


class RequestBuilder:
    """Assembles and signs OAuth 1.0a requests.

    Usage::

        builder = RequestBuilder()
        signed = builder.build("GET", url, credentials, {"q": "twitter"})
        headers = {"Authorization": signed.authorization_header}
    """

    def __init__(
        self,
        nonce_factory: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], str]] = None,
    ) -> None:
        """Initialize the builder.

        Args:
            nonce_factory: Returns a new nonce per call. Defaults to a
                32 character random alphanumeric string.
            clock: Returns the Unix timestamp as a string. Defaults to the
                current time.
        """
        self._nonce_factory = nonce_factory or generate_nonce
        self._clock = clock or generate_timestamp
        self._logger = logger.with_prefix("[RequestBuilder] ")

    def oauth_params(self, credentials: Credentials) -> Dict[str, str]:
        """Protocol parameters for one request, without the signature."""
        params = {
            "oauth_consumer_key": credentials.consumer_key,
            "oauth_nonce": self._nonce_factory(),
            "oauth_signature_method": constants.SIGNATURE_METHOD,
            "oauth_timestamp": self._clock(),
            "oauth_version": constants.OAUTH_VERSION,
        }
        if credentials.has_token:
            params["oauth_token"] = credentials.token
        return params

    def build(
        self,
        method: str,
        url: str,
        credentials: Credentials,
        params: Optional[Mapping[str, Any]] = None,
        *,
        file_fields: Collection[str] = (),
    ) -> SignedRequest:
        """Build and sign a request.

        Args:
            method: HTTP method.
            url: Endpoint URL. Query parameters already on the URL are signed.
            credentials: Consumer and optional token credentials.
            params: Call parameters. ``None`` values are dropped. Names
                starting with ``oauth_`` join the OAuth parameter set.
            file_fields: Parameter names holding local file paths to upload.

        Returns:
            SignedRequest with OAuth params (including ``oauth_signature``),
            signable call params and file parts.

        Raises:
            FileNotFoundError: If a file field does not name a readable file.
            SignatureError: If the signature cannot be computed.
        """
        method = method.upper()
        oauth_params = self.oauth_params(credentials)
        call_params, files = self._split_params(params or {}, file_fields)

        for name in [k for k in call_params if k.startswith("oauth_")]:
            oauth_params[name] = call_params.pop(name)

        to_sign: Dict[str, str] = dict(parse_qsl(urlsplit(url).query, keep_blank_values=True))
        to_sign.update(call_params)
        to_sign.update(oauth_params)

        oauth_params["oauth_signature"] = signature.sign(
            method, url, to_sign, credentials.consumer_secret, credentials.token_secret
        )

        self._logger.debug(
            f"Signed {method} {signature.normalize_url(url)} "
            f"({len(call_params)} params, {len(files)} files)"
        )
        return SignedRequest(
            method=method,
            url=url,
            oauth_params=oauth_params,
            params=call_params,
            files=files,
        )

    def _split_params(
        self, params: Mapping[str, Any], file_fields: Collection[str]
    ) -> Tuple[Dict[str, str], list]:
        call_params: Dict[str, str] = {}
        files = []
        for name, value in params.items():
            if value is None:
                continue
            if name in file_fields:
                files.append(self._file_part(name, value))
            else:
                call_params[name] = stringify(value)
        return call_params, files

    @staticmethod
    def _file_part(name: str, value: Any) -> FilePart:
        path = os.fspath(value)
        if not os.path.isfile(path) or not os.access(path, os.R_OK):
            raise FileNotFoundError(
                errno.ENOENT, "Upload source does not exist or is not readable", path
            )
        filename = os.path.basename(path)
        content_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
        return FilePart(name=name, path=path, filename=filename, content_type=content_type)
