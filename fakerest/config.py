"""Configuration management."""
import logging
import os
from dataclasses import dataclass, fields

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

# Endpoints
BOOKS_ENDPOINT = "/Books"
AUTHORS_ENDPOINT = "/Authors"

# HTTP response codes
HTTP_200_OK = 200
HTTP_201_CREATED = 201
HTTP_204_NO_CONTENT = 204
HTTP_400_BAD_REQUEST = 400
HTTP_404_NOT_FOUND = 404
HTTP_500_INTERNAL_SERVER_ERROR = 500

CONTENT_TYPE_JSON = "application/json"


@dataclass(frozen=True)
class ApiConfig:
    """Connection settings for the catalog API."""
    base_url: str = "https://fakerestapi.azurewebsites.net"
    api_version: str = "/api/v1"
    request_timeout_ms: int = 5000
    connection_timeout_ms: int = 5000
    content_type: str = CONTENT_TYPE_JSON

    @property
    def timeout(self):
        """(connect, read) timeout tuple in seconds, as requests expects it."""
        return (self.connection_timeout_ms / 1000, self.request_timeout_ms / 1000)

    def endpoint_url(self, endpoint: str) -> str:
        """
        Build the fully-qualified URL of an API endpoint.

        Args:
            endpoint: Endpoint path, e.g. BOOKS_ENDPOINT

        Returns:
            Base URL + API version + endpoint
        """
        return f"{self.base_url.rstrip('/')}{self.api_version}{endpoint}"

    @property
    def books_url(self) -> str:
        """Books collection URL."""
        return self.endpoint_url(BOOKS_ENDPOINT)

    @property
    def authors_url(self) -> str:
        """Authors collection URL."""
        return self.endpoint_url(AUTHORS_ENDPOINT)

    def book_url(self, book_id) -> str:
        """URL of a single book; the id is not validated."""
        return f"{self.books_url}/{book_id}"

    def author_url(self, author_id) -> str:
        """URL of a single author; the id is not validated."""
        return f"{self.authors_url}/{author_id}"


def load_config() -> ApiConfig:
    """
    Build the API configuration once from the environment.

    Unset variables fall back to the public FakeRestAPI defaults. Any value
    that differs from its default is logged as a warning.

    Returns:
        Immutable ApiConfig
    """
    defaults = ApiConfig()
    config = ApiConfig(
        base_url=os.getenv("FAKEREST_BASE_URL", defaults.base_url),
        request_timeout_ms=int(os.getenv("FAKEREST_REQUEST_TIMEOUT_MS", str(defaults.request_timeout_ms))),
        connection_timeout_ms=int(os.getenv("FAKEREST_CONNECTION_TIMEOUT_MS", str(defaults.connection_timeout_ms))),
    )

    for field in fields(ApiConfig):
        value = getattr(config, field.name)
        default = getattr(defaults, field.name)
        if value != default:
            logger.warning(f"Config override: {field.name}={value!r} (default {default!r})")

    return config
