"""Logging helpers.

Thin layer over the standard library ``logging`` module that lets callers bind
contextual dimensions (client id, endpoint, ...) to a logger once and have them
rendered on every record.

Usage:
    from twitteroauth.core.logging import logger

    request_logger = logger.with_context(api_path="statuses/update")
    request_logger.info("Sending request")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, MutableMapping, Optional, Tuple

ROOT_LOGGER_NAME = "twitteroauth"

# Library code never configures handlers for the host application.
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter carrying a message prefix and key/value dimensions.

    Dimensions are appended to the message as ``[key=value ...]`` and are also
    exposed on the record through ``extra`` for structured handlers.
    """

    def __init__(
        self,
        logger: logging.Logger,
        prefix: str = "",
        dimensions: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            logger: Underlying stdlib logger.
            prefix: Text prepended to every message.
            dimensions: Context rendered after every message.
        """
        super().__init__(logger, dict(dimensions or {}))
        self.prefix = prefix
        self.dimensions: Dict[str, Any] = dict(dimensions or {})

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> Tuple[Any, MutableMapping[str, Any]]:
        """Render prefix and dimensions into the message."""
        extra = dict(self.dimensions)
        extra.update(kwargs.get("extra") or {})
        kwargs["extra"] = extra

        message = f"{self.prefix}{msg}"
        if self.dimensions:
            rendered = " ".join(f"{k}={v}" for k, v in self.dimensions.items())
            message = f"{message} [{rendered}]"
        return message, kwargs

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a new logger with additional dimensions."""
        merged = dict(self.dimensions)
        merged.update(dimensions)
        return ContextualLogger(self.logger, prefix=self.prefix, dimensions=merged)

    def with_prefix(self, prefix: str) -> "ContextualLogger":
        """Return a new logger with ``prefix`` prepended to the current one."""
        return ContextualLogger(
            self.logger, prefix=f"{self.prefix}{prefix}", dimensions=self.dimensions
        )


class LoggerConfigurator:
    """Factory for contextual loggers."""

    @staticmethod
    def configure_logger(
        name: str,
        prefix: str = "",
        dimensions: Optional[Dict[str, Any]] = None,
        level: Optional[str] = None,
    ) -> ContextualLogger:
        """Create a contextual logger.

        Args:
            name: Dotted logger name, usually under ``twitteroauth``.
            prefix: Text prepended to every message.
            dimensions: Context rendered after every message.
            level: Optional level name applied to the underlying logger.

        Returns:
            A ContextualLogger bound to the named stdlib logger.
        """
        base = logging.getLogger(name)
        if level:
            base.setLevel(level.upper())
        return ContextualLogger(base, prefix=prefix, dimensions=dimensions)


logger = LoggerConfigurator.configure_logger(ROOT_LOGGER_NAME)
