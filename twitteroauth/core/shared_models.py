"""Value types shared between the API client and transport adapters."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field

from twitteroauth.core import constants

# (field name, (filename, file object, content type)), the shape httpx accepts for `files=`.
FileUpload = Tuple[str, Tuple[str, Any, str]]


class ProxyConfig(BaseModel):
    """Outbound proxy settings."""

    model_config = ConfigDict(frozen=True)

    host: str
    port: Optional[int] = Field(None, ge=1, le=65535)
    user_password: Optional[str] = Field(
        None, repr=False, description="Credentials as 'user:password'"
    )

    @property
    def url(self) -> str:
        """Proxy URL in the ``scheme://[user:password@]host[:port]`` form."""
        host = self.host if "://" in self.host else f"http://{self.host}"
        scheme, _, netloc = host.partition("://")
        if self.user_password:
            user, _, password = self.user_password.partition(":")
            credentials = quote(user, safe="")
            if password:
                credentials = f"{credentials}:{quote(password, safe='')}"
            netloc = f"{credentials}@{netloc}"
        if self.port is not None:
            netloc = f"{netloc}:{self.port}"
        return f"{scheme}://{netloc}"


class TransportOptions(BaseModel):
    """Per-call transport configuration handed to the transport collaborator."""

    model_config = ConfigDict(frozen=True)

    connection_timeout: float = Field(constants.DEFAULT_CONNECTION_TIMEOUT, gt=0)
    timeout: float = Field(constants.DEFAULT_TIMEOUT, gt=0)
    proxy: Optional[ProxyConfig] = None
    user_agent: str = constants.DEFAULT_USER_AGENT


@dataclass
class TransportRequest:
    """A fully signed request ready to go on the wire."""

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    params: Dict[str, str] = field(default_factory=dict)
    data: Dict[str, str] = field(default_factory=dict)
    files: List[FileUpload] = field(default_factory=list)


@dataclass(frozen=True)
class TransportResponse:
    """Raw outcome of a request."""

    status_code: int
    body: str = ""
    content_type: str = ""
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        """True for 2xx status codes."""
        return 200 <= self.status_code < 300
