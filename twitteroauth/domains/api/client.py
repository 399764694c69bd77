"""Public API client.

``TwitterOAuth`` signs every call with OAuth 1.0a, hands the request to a
transport and records the outcome so callers can inspect it afterwards.

Usage::

    twitter = TwitterOAuth(consumer_key, consumer_secret, token, token_secret)
    user = twitter.get("account/verify_credentials")
    if twitter.last_http_code != 200:
        ...
"""

from contextlib import ExitStack
from typing import Any, Collection, Dict, List, Mapping, Optional
from urllib.parse import quote, urlencode

from twitteroauth.adapters.transport.httpx_transport import HttpxTransport
from twitteroauth.core import constants
from twitteroauth.core.config import Settings
from twitteroauth.core.config import settings as default_settings
from twitteroauth.core.exceptions import AuthenticationError, TransportError
from twitteroauth.core.logging import LoggerConfigurator
from twitteroauth.core.protocols.transport import Transport
from twitteroauth.core.shared_models import (
    FileUpload,
    ProxyConfig,
    TransportOptions,
    TransportRequest,
    TransportResponse,
)
from twitteroauth.domains.api.decoding import (
    ParsedResponse,
    ResponseKind,
    decode_form,
    decode_response,
)
from twitteroauth.domains.api.state import LastResult
from twitteroauth.domains.oauth1.request_builder import RequestBuilder, stringify
from twitteroauth.domains.oauth1.types import Credentials


class TwitterOAuth:
    """OAuth 1.0a client for the Twitter REST API.

    Each instance owns its credentials, transport options and last-result
    state; instances share nothing and can be used side by side.
    """

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str,
        oauth_token: Optional[str] = None,
        oauth_token_secret: Optional[str] = None,
        *,
        transport: Optional[Transport] = None,
        settings: Optional[Settings] = None,
        request_builder: Optional[RequestBuilder] = None,
    ) -> None:
        """Create a client.

        Args:
            consumer_key: Application consumer key.
            consumer_secret: Application consumer secret.
            oauth_token: Access or request token. Omit for two-legged calls
                such as ``oauth/request_token``.
            oauth_token_secret: Secret matching ``oauth_token``.
            transport: Sends requests. Defaults to :class:`HttpxTransport`.
            settings: Hosts, API version and initial transport options.
            request_builder: Signs requests. Injectable for deterministic tests.
        """
        self._settings = settings or default_settings
        self._credentials = Credentials(
            consumer_key=consumer_key,
            consumer_secret=consumer_secret,
            token=oauth_token,
            token_secret=oauth_token_secret,
        )
        self._transport: Transport = transport or HttpxTransport()
        self._builder = request_builder or RequestBuilder()
        self._options = self._settings.transport_options()
        self._last = LastResult()
        self._logger = LoggerConfigurator.configure_logger(
            "twitteroauth.client", prefix="[TwitterOAuth] ", level=self._settings.log_level
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs: Any) -> "TwitterOAuth":
        """Create a client from configured credentials.

        Raises:
            ValueError: If the consumer key or secret is not configured.
        """
        settings = settings or default_settings
        if not settings.consumer_key or not settings.consumer_secret:
            raise ValueError("consumer_key and consumer_secret must be configured")
        return cls(
            settings.consumer_key,
            settings.consumer_secret.get_secret_value(),
            settings.access_token,
            (
                settings.access_token_secret.get_secret_value()
                if settings.access_token_secret
                else None
            ),
            settings=settings,
            **kwargs,
        )

    # ------------------------------------------------------------------
    # Credentials and transport options
    # ------------------------------------------------------------------

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    def set_oauth_token(self, oauth_token: str, oauth_token_secret: str) -> None:
        """Switch to the token pair returned by the OAuth handshake."""
        self._credentials = Credentials(
            consumer_key=self._credentials.consumer_key,
            consumer_secret=self._credentials.consumer_secret,
            token=oauth_token,
            token_secret=oauth_token_secret,
        )

    @property
    def transport_options(self) -> TransportOptions:
        return self._options

    def set_proxy(
        self, host: str, port: Optional[int] = None, user_password: Optional[str] = None
    ) -> None:
        """Route subsequent calls through an HTTP proxy."""
        proxy = ProxyConfig(host=host, port=port, user_password=user_password)
        self._options = self._options.model_copy(update={"proxy": proxy})

    def clear_proxy(self) -> None:
        self._options = self._options.model_copy(update={"proxy": None})

    def set_connection_timeout(self, seconds: float) -> None:
        """Set the connection-establishment timeout for subsequent calls."""
        self._options = self._options.model_copy(update={"connection_timeout": _positive(seconds)})

    def set_timeout(self, seconds: float) -> None:
        """Set the total request timeout for subsequent calls."""
        self._options = self._options.model_copy(update={"timeout": _positive(seconds)})

    def set_user_agent(self, user_agent: str) -> None:
        self._options = self._options.model_copy(update={"user_agent": user_agent})

    # ------------------------------------------------------------------
    # Last result
    # ------------------------------------------------------------------

    @property
    def last_http_code(self) -> int:
        return self._last.http_code

    @property
    def last_api_path(self) -> str:
        return self._last.api_path

    @property
    def last_http_method(self) -> str:
        return self._last.http_method

    @property
    def last_response(self) -> Any:
        return self._last.response

    @property
    def last_response_kind(self) -> ResponseKind:
        return self._last.response_kind

    @property
    def last_body(self) -> str:
        return self._last.body

    @property
    def last_x_headers(self) -> Dict[str, str]:
        """``x-*`` headers of the last response, e.g. ``x-rate-limit-remaining``."""
        return dict(self._last.x_headers)

    def reset_last_result(self) -> None:
        self._last.reset()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def url(self, path: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Build an unsigned URL, e.g. to send a user to ``oauth/authorize``.

        Query parameters keep their insertion order.
        """
        url = f"{self._settings.api_host}/{path.lstrip('/')}"
        if not params:
            return url
        query = {k: stringify(v) for k, v in params.items() if v is not None}
        return f"{url}?{urlencode(query, quote_via=quote)}"

    def oauth(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, str]:
        """Call an OAuth handshake endpoint (``oauth/request_token``, ``oauth/access_token``).

        Returns:
            The form-encoded response as a dict.

        Raises:
            AuthenticationError: If the endpoint answers with a non-2xx status.
        """
        url = f"{self._settings.api_host}/{path.lstrip('/')}"
        response = self._request("POST", url, path, params)
        if not response.is_success:
            error = AuthenticationError.from_response(response.status_code, response.body)
            self._logger.with_context(api_path=path).warning(
                f"OAuth handshake rejected with HTTP {response.status_code}: {error.message}"
            )
            raise error
        parsed = decode_form(response.body)
        self._last.record_response(parsed)
        return parsed.data

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Signed GET against ``{api_host}/{api_version}/{path}.json``."""
        response = self._request("GET", self._api_url(self._settings.api_host, path), path, params)
        return self._decode(response).data

    def post(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Signed form-encoded POST against ``{api_host}/{api_version}/{path}.json``."""
        response = self._request("POST", self._api_url(self._settings.api_host, path), path, params)
        return self._decode(response).data

    def upload(self, path: str, params: Mapping[str, Any]) -> Any:
        """Signed multipart POST against ``{upload_host}/{api_version}/{path}.json``.

        ``params["media"]`` must name a readable local file.

        Raises:
            FileNotFoundError: Before any network activity, if the file is
                missing or unreadable.
        """
        url = self._api_url(self._settings.upload_host, path)
        response = self._request(
            "POST", url, path, params, file_fields=constants.DEFAULT_FILE_FIELDS
        )
        return self._decode(response).data

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _api_url(self, host: str, path: str) -> str:
        return f"{host}/{self._settings.api_version}/{path.strip('/')}.json"

    def _request(
        self,
        method: str,
        url: str,
        path: str,
        params: Optional[Mapping[str, Any]],
        *,
        file_fields: Collection[str] = (),
    ) -> TransportResponse:
        signed = self._builder.build(
            method, url, self._credentials, params, file_fields=file_fields
        )
        self._last.start(path, signed.method)
        request_logger = self._logger.with_context(api_path=path, method=signed.method)

        with ExitStack() as stack:
            files: List[FileUpload] = []
            for part in signed.files:
                handle = stack.enter_context(open(part.path, "rb"))
                files.append((part.name, (part.filename, handle, part.content_type)))
            request = TransportRequest(
                method=signed.method,
                url=signed.url,
                headers={"Authorization": signed.authorization_header},
                params=signed.params if signed.method == "GET" else {},
                data={} if signed.method == "GET" else signed.params,
                files=files,
            )
            request_logger.debug(f"Sending request to {signed.url}")
            try:
                response = self._transport.execute(request, self._options)
            except TransportError as e:
                request_logger.warning(f"Transport failure: {e}")
                raise

        self._last.record_http(response.status_code, response.body, response.headers)
        request_logger.info(f"HTTP {response.status_code}")
        return response

    def _decode(self, response: TransportResponse) -> ParsedResponse:
        parsed = decode_response(response.body, response.content_type)
        self._last.record_response(parsed)
        return parsed


def _positive(seconds: float) -> float:
    if seconds <= 0:
        raise ValueError(f"Timeout must be positive, got {seconds}")
    return float(seconds)
