"""Unit tests for RequestBuilder."""

import base64
import re

import pytest

from twitteroauth.domains.oauth1 import signature
from twitteroauth.domains.oauth1.request_builder import (
    RequestBuilder,
    generate_nonce,
    generate_timestamp,
    stringify,
)
from twitteroauth.domains.oauth1.types import Credentials

REQUEST_TOKEN_URL = "https://api.twitter.com/oauth/request_token"
UPDATE_URL = "https://api.twitter.com/1.1/statuses/update.json"

THREE_LEGGED = Credentials("ck", "cs", "at", "ats")
TWO_LEGGED = Credentials("ck", "cs")

REQUIRED_TWO_LEGGED_FIELDS = {
    "oauth_consumer_key",
    "oauth_nonce",
    "oauth_signature",
    "oauth_signature_method",
    "oauth_timestamp",
    "oauth_version",
}


def _header_fields(header: str) -> dict:
    assert header.startswith("OAuth ")
    return dict(re.findall(r'(\w+)="([^"]*)"', header))


# ===========================================================================
# nonce / timestamp
# ===========================================================================


def test_nonce_is_32_alphanumerics():
    nonce = generate_nonce()
    assert len(nonce) == 32
    assert nonce.isalnum()


def test_nonce_uniqueness():
    nonces = {generate_nonce() for _ in range(100)}
    assert len(nonces) == 100


def test_timestamp_is_unix_seconds():
    assert generate_timestamp().isdigit()


def test_consecutive_builds_never_reuse_nonce():
    builder = RequestBuilder()
    first = builder.build("GET", UPDATE_URL, THREE_LEGGED)
    second = builder.build("GET", UPDATE_URL, THREE_LEGGED)
    assert first.oauth_params["oauth_nonce"] != second.oauth_params["oauth_nonce"]
    assert first.signature != second.signature


# ===========================================================================
# OAuth parameter set
# ===========================================================================


def test_oauth_params_three_legged(fixed_builder):
    signed = fixed_builder.build("POST", UPDATE_URL, THREE_LEGGED, {"status": "hi"})
    assert signed.oauth_params["oauth_consumer_key"] == "ck"
    assert signed.oauth_params["oauth_token"] == "at"
    assert signed.oauth_params["oauth_signature_method"] == "HMAC-SHA1"
    assert signed.oauth_params["oauth_version"] == "1.0"
    assert signed.oauth_params["oauth_nonce"] == "fixednonce"
    assert signed.oauth_params["oauth_timestamp"] == "1318622958"
    assert signed.params == {"status": "hi"}


def test_two_legged_request_token_with_empty_params():
    signed = RequestBuilder().build("POST", REQUEST_TOKEN_URL, TWO_LEGGED, {})

    fields = _header_fields(signed.authorization_header)
    assert set(fields) == REQUIRED_TWO_LEGGED_FIELDS
    assert "oauth_token" not in signed.oauth_params

    raw = signed.oauth_params["oauth_signature"]
    assert len(base64.b64decode(raw, validate=True)) == 20  # SHA-1 digest size
    assert fields["oauth_signature"] == signature.percent_encode(raw)


def test_signature_covers_oauth_and_call_params(fixed_builder):
    signed = fixed_builder.build("POST", UPDATE_URL, THREE_LEGGED, {"status": "hi"})

    unsigned = {k: v for k, v in signed.oauth_params.items() if k != "oauth_signature"}
    expected = signature.sign("POST", UPDATE_URL, {**unsigned, "status": "hi"}, "cs", "ats")
    assert signed.signature == expected


def test_builder_is_deterministic_with_fixed_nonce_and_clock(fixed_builder):
    a = fixed_builder.build("GET", UPDATE_URL, THREE_LEGGED, {"count": 5})
    b = fixed_builder.build("GET", UPDATE_URL, THREE_LEGGED, {"count": 5})
    assert a.signature == b.signature


def test_url_query_params_are_signed():
    builder = RequestBuilder(nonce_factory=lambda: "kllo9940pd9333jh", clock=lambda: "1191242096")
    credentials = Credentials(
        "dpf43f3p2l4k3l03", "kd94hf93k423kf44", "nnch734d00sl2jdk", "pfkkdhi9sl3r4s00"
    )

    signed = builder.build(
        "GET", "http://photos.example.net/photos?file=vacation.jpg&size=original", credentials
    )

    assert signed.signature == "tR3+Ty81lMeYAr/Fid0kMTYa/WM="


def test_oauth_prefixed_call_params_join_oauth_set(fixed_builder):
    signed = fixed_builder.build(
        "POST", REQUEST_TOKEN_URL, TWO_LEGGED, {"oauth_callback": "https://app.example/cb"}
    )
    assert signed.oauth_params["oauth_callback"] == "https://app.example/cb"
    assert signed.params == {}
    assert 'oauth_callback="https%3A%2F%2Fapp.example%2Fcb"' in signed.authorization_header


def test_merged_params_contains_everything(fixed_builder):
    signed = fixed_builder.build("GET", UPDATE_URL, THREE_LEGGED, {"q": "twitter"})
    merged = signed.merged_params
    assert merged["q"] == "twitter"
    assert merged["oauth_signature"] == signed.signature
    assert set(signed.oauth_params) <= set(merged)


def test_none_values_are_dropped_and_scalars_stringified(fixed_builder):
    signed = fixed_builder.build(
        "GET", UPDATE_URL, THREE_LEGGED, {"count": 5, "trim_user": True, "max_id": None}
    )
    assert signed.params == {"count": "5", "trim_user": "true"}


def test_method_uppercased(fixed_builder):
    assert fixed_builder.build("post", UPDATE_URL, THREE_LEGGED).method == "POST"


@pytest.mark.parametrize(
    "value, expected",
    [(True, "true"), (False, "false"), (12, "12"), (b"bytes", "bytes"), ("text", "text")],
)
def test_stringify(value, expected):
    assert stringify(value) == expected


# ===========================================================================
# file payloads
# ===========================================================================


def test_file_fields_are_split_out_and_not_signed(fixed_builder, tmp_path):
    image = tmp_path / "kitten.jpg"
    image.write_bytes(b"\xff\xd8\xff")

    signed = fixed_builder.build(
        "POST",
        "https://upload.twitter.com/1.1/media/upload.json",
        THREE_LEGGED,
        {"media": str(image), "media_category": "tweet_image"},
        file_fields={"media"},
    )

    assert signed.is_multipart
    assert signed.params == {"media_category": "tweet_image"}
    [part] = signed.files
    assert part.name == "media"
    assert part.filename == "kitten.jpg"
    assert part.content_type == "image/jpeg"

    unsigned = {k: v for k, v in signed.oauth_params.items() if k != "oauth_signature"}
    expected = signature.sign(
        "POST",
        "https://upload.twitter.com/1.1/media/upload.json",
        {**unsigned, "media_category": "tweet_image"},
        "cs",
        "ats",
    )
    assert signed.signature == expected


def test_unknown_extension_falls_back_to_octet_stream(fixed_builder, tmp_path):
    blob = tmp_path / "payload.unknownext"
    blob.write_bytes(b"data")

    signed = fixed_builder.build(
        "POST", UPDATE_URL, THREE_LEGGED, {"media": blob}, file_fields={"media"}
    )

    assert signed.files[0].content_type == "application/octet-stream"


def test_missing_file_raises_file_not_found(fixed_builder, tmp_path):
    missing = tmp_path / "nope.png"
    with pytest.raises(FileNotFoundError) as exc_info:
        fixed_builder.build(
            "POST", UPDATE_URL, THREE_LEGGED, {"media": str(missing)}, file_fields={"media"}
        )
    assert exc_info.value.filename == str(missing)


def test_directory_is_not_an_upload_source(fixed_builder, tmp_path):
    with pytest.raises(FileNotFoundError):
        fixed_builder.build(
            "POST", UPDATE_URL, THREE_LEGGED, {"media": str(tmp_path)}, file_fields={"media"}
        )


def test_media_is_plain_param_without_file_fields(fixed_builder):
    signed = fixed_builder.build("POST", UPDATE_URL, THREE_LEGGED, {"media": "not-a-path"})
    assert signed.params == {"media": "not-a-path"}
    assert signed.files == []
