"""Protocol and API constants."""

__version__ = "0.1.0"

OAUTH_VERSION = "1.0"
SIGNATURE_METHOD = "HMAC-SHA1"

DEFAULT_API_HOST = "https://api.twitter.com"
DEFAULT_UPLOAD_HOST = "https://upload.twitter.com"
DEFAULT_API_VERSION = "1.1"
DEFAULT_USER_AGENT = f"twitteroauth-python/{__version__}"

DEFAULT_CONNECTION_TIMEOUT = 3.0
DEFAULT_TIMEOUT = 10.0

# Form fields that carry a local file path on upload endpoints.
DEFAULT_FILE_FIELDS = frozenset({"media"})
