"""Client settings with defaults.

Uses Pydantic Settings for automatic env var loading:
    TWITTER_OAUTH_CONSUMER_KEY=...
    TWITTER_OAUTH_TIMEOUT=25
"""

from typing import Optional

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from twitteroauth.core import constants
from twitteroauth.core.shared_models import ProxyConfig, TransportOptions


class Settings(BaseSettings):
    """Hosts, timeouts, proxy and optional credentials for the API client."""

    model_config = SettingsConfigDict(
        env_prefix="TWITTER_OAUTH_",
        extra="ignore",
    )

    api_host: str = Field(constants.DEFAULT_API_HOST, description="REST and OAuth host")
    upload_host: str = Field(constants.DEFAULT_UPLOAD_HOST, description="Media upload host")
    api_version: str = Field(
        constants.DEFAULT_API_VERSION, description="Version segment of REST URLs"
    )
    user_agent: str = Field(constants.DEFAULT_USER_AGENT)

    connection_timeout: float = Field(
        constants.DEFAULT_CONNECTION_TIMEOUT, gt=0, description="Connect timeout in seconds"
    )
    timeout: float = Field(
        constants.DEFAULT_TIMEOUT, gt=0, description="Total request timeout in seconds"
    )

    proxy_host: Optional[str] = None
    proxy_port: Optional[int] = None
    proxy_user_password: Optional[SecretStr] = None

    consumer_key: Optional[str] = None
    consumer_secret: Optional[SecretStr] = None
    access_token: Optional[str] = None
    access_token_secret: Optional[SecretStr] = None

    log_level: Optional[str] = None

    @model_validator(mode="after")
    def validate_config_logic(self):
        """Reject half-configured proxies and tokens."""
        if self.proxy_port is not None and not self.proxy_host:
            raise ValueError("proxy_port is set but proxy_host is missing")
        if bool(self.access_token) != bool(self.access_token_secret):
            raise ValueError("access_token and access_token_secret must be set together")
        if self.connection_timeout > self.timeout:
            raise ValueError("connection_timeout cannot exceed the total timeout")
        return self

    def proxy(self) -> Optional[ProxyConfig]:
        """Proxy configuration, or None when no proxy host is configured."""
        if not self.proxy_host:
            return None
        user_password = (
            self.proxy_user_password.get_secret_value() if self.proxy_user_password else None
        )
        return ProxyConfig(host=self.proxy_host, port=self.proxy_port, user_password=user_password)

    def transport_options(self) -> TransportOptions:
        """Initial transport options for a new client."""
        return TransportOptions(
            connection_timeout=self.connection_timeout,
            timeout=self.timeout,
            proxy=self.proxy(),
            user_agent=self.user_agent,
        )
