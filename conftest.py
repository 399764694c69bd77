"""Root conftest for pytest configuration and shared fixtures.

Loaded before the colocated test packages under twitteroauth/, so the fakes
below are available to every test module.
"""

import os

import pytest

# ---------------------------------------------------------------------------
# Environment variables: must be cleared before any twitteroauth module import.
# Clear anything a developer shell might export so settings stay predictable.
# ---------------------------------------------------------------------------
for _name in list(os.environ):
    if _name.startswith("TWITTER_OAUTH_"):
        del os.environ[_name]


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def settings():
    """Settings with default hosts and no proxy or credentials."""
    from twitteroauth.core.config import Settings

    return Settings()


@pytest.fixture
def fake_transport():
    """Fake Transport that records requests and replays seeded responses."""
    from twitteroauth.adapters.transport.fake import FakeTransport

    return FakeTransport()


@pytest.fixture
def fixed_builder():
    """RequestBuilder with a constant nonce and timestamp."""
    from twitteroauth.domains.oauth1.request_builder import RequestBuilder

    return RequestBuilder(nonce_factory=lambda: "fixednonce", clock=lambda: "1318622958")


@pytest.fixture
def client(fake_transport, settings):
    """Three-legged client wired to the fake transport."""
    from twitteroauth.domains.api.client import TwitterOAuth

    return TwitterOAuth("ck", "cs", "at", "ats", transport=fake_transport, settings=settings)


@pytest.fixture
def two_legged_client(fake_transport, settings):
    """Client without a token, as used for oauth/request_token."""
    from twitteroauth.domains.api.client import TwitterOAuth

    return TwitterOAuth("ck", "cs", transport=fake_transport, settings=settings)
