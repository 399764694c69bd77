"""Shared exceptions module."""

import json
import re
from typing import Optional

_XML_ERROR = re.compile(r"<error[^>]*>(.*?)</error>", re.DOTALL)


class TwitterOAuthException(Exception):
    """Base exception for the twitteroauth client."""

    pass


class SignatureError(TwitterOAuthException):
    """Exception raised when an OAuth signature cannot be computed.

    This indicates a programming error (e.g. secrets that cannot be encoded),
    never a server-side rejection.
    """

    def __init__(self, message: Optional[str] = "Failed to compute OAuth signature"):
        """Create a new SignatureError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class AuthenticationError(TwitterOAuthException):
    """Exception raised when an OAuth handshake endpoint rejects a request."""

    def __init__(self, message: str, status_code: int = 0, body: str = ""):
        """Create a new AuthenticationError instance.

        Args:
        ----
            message (str): The message reported by the server.
            status_code (int): HTTP status code of the rejected request.
            body (str): Raw response body.

        """
        self.message = message
        self.status_code = status_code
        self.body = body
        super().__init__(self.message)

    @classmethod
    def from_response(cls, status_code: int, body: str) -> "AuthenticationError":
        """Build the error from a raw handshake response body."""
        return cls(extract_error_message(body), status_code=status_code, body=body)


class TransportError(TwitterOAuthException):
    """Exception raised when the request never produced an HTTP response."""

    def __init__(self, message: str, url: Optional[str] = None):
        """Create a new TransportError instance.

        Args:
        ----
            message (str): Description of the connection or timeout failure.
            url (str, optional): The URL that was being requested.

        """
        self.message = message
        self.url = url
        super().__init__(self.message)


class ResponseDecodeError(TwitterOAuthException):
    """Exception raised when a body does not match its declared content type."""

    def __init__(self, message: str, content_type: str = "", body: str = ""):
        """Create a new ResponseDecodeError instance.

        Args:
        ----
            message (str): The error message.
            content_type (str): Declared content type of the response.
            body (str): Raw response body.

        """
        self.message = message
        self.content_type = content_type
        self.body = body
        super().__init__(self.message)


def extract_error_message(body: str) -> str:
    """Pull the human readable error out of a Twitter error body.

    Handles the JSON ``{"errors": [{"message": ...}]}`` shape, the legacy XML
    ``<hash><error>...</error></hash>`` shape and falls back to the raw text.
    """
    text = body.strip()
    if not text:
        return "Empty response from server"

    if text.startswith("{"):
        try:
            payload = json.loads(text)
        except ValueError:
            payload = None
        if isinstance(payload, dict):
            errors = payload.get("errors")
            if isinstance(errors, list) and errors and isinstance(errors[0], dict):
                message = errors[0].get("message")
                if message:
                    return str(message)
            if isinstance(payload.get("error"), str):
                return payload["error"]

    match = _XML_ERROR.search(text)
    if match:
        return match.group(1).strip()

    return text
