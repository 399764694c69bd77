"""Response body decoding.

The shape of the decoded body is chosen from the declared content type, not by
inspecting the body: JSON bodies become objects or arrays, the OAuth handshake
endpoints answer with ``application/x-www-form-urlencoded`` key/value pairs.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any
from urllib.parse import parse_qsl

from twitteroauth.core.exceptions import ResponseDecodeError

JSON_CONTENT_TYPES = ("application/json", "text/javascript")
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class ResponseKind(str, Enum):
    """Variant tag of a decoded body."""

    OBJECT = "object"
    ARRAY = "array"
    FORM = "form"
    TEXT = "text"
    EMPTY = "empty"


@dataclass(frozen=True, slots=True)
class ParsedResponse:
    """A decoded body tagged with its variant."""

    kind: ResponseKind
    data: Any

    @classmethod
    def empty(cls) -> "ParsedResponse":
        return cls(ResponseKind.EMPTY, [])


def media_type(content_type: str) -> str:
    """Strip parameters such as ``charset`` from a Content-Type value."""
    return content_type.split(";", 1)[0].strip().lower()


def decode_json(body: str, content_type: str = "application/json") -> ParsedResponse:
    """Decode a JSON body into an OBJECT or ARRAY variant.

    A bare array of primitives keeps its list shape.
    """
    if not body.strip():
        return ParsedResponse.empty()
    try:
        data = json.loads(body)
    except ValueError as e:
        raise ResponseDecodeError(
            f"Malformed JSON response: {e}", content_type=content_type, body=body
        ) from e
    if isinstance(data, list):
        return ParsedResponse(ResponseKind.ARRAY, data)
    return ParsedResponse(ResponseKind.OBJECT, data)


def decode_form(body: str) -> ParsedResponse:
    """Decode an ``application/x-www-form-urlencoded`` body into a FORM variant."""
    if not body.strip():
        return ParsedResponse(ResponseKind.FORM, {})
    return ParsedResponse(ResponseKind.FORM, dict(parse_qsl(body.strip(), keep_blank_values=True)))


def decode_response(body: str, content_type: str) -> ParsedResponse:
    """Decode a body according to its declared content type."""
    kind = media_type(content_type)
    if kind in JSON_CONTENT_TYPES or kind.endswith("+json"):
        return decode_json(body, content_type)
    if kind == FORM_CONTENT_TYPE:
        return decode_form(body)
    if not body:
        return ParsedResponse.empty()
    return ParsedResponse(ResponseKind.TEXT, body)
