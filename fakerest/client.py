"""HTTP request helper for the catalog API."""
import json
import logging
from typing import Optional, Any
from urllib.parse import quote

import requests

from fakerest.config import ApiConfig

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


class ApiRequestHelper:
    """Issues single JSON requests against the catalog API. No retries."""

    def __init__(self, config: ApiConfig, session: Optional[requests.Session] = None):
        """
        Initialize the request helper.

        Args:
            config: API configuration (timeouts, content type)
            session: Optional pre-built session, mostly for tests
        """
        self.config = config

        # Create session for connection pooling
        self.session = session or requests.Session()
        self.session.headers.update({
            "Content-Type": config.content_type,
            "Accept": config.content_type,
        })

    def get(self, url: str) -> requests.Response:
        return self._request("GET", url)

    def get_with_param(self, url: str, name: str, value: Any) -> requests.Response:
        """
        GET a URL containing a ``{name}`` path template.

        Args:
            url: URL template, e.g. ".../Books/{id}"
            name: Template parameter name
            value: Value substituted (URL-quoted) into the template
        """
        placeholder = "{" + name + "}"
        if placeholder not in url:
            raise ValueError(f"URL {url} has no path parameter '{name}'")

        logger.info(f"Making GET request to: {url} with param {name}={value}")
        return self._send("GET", url.replace(placeholder, quote(str(value), safe="")))

    def post(self, url: str, body: Any = None) -> requests.Response:
        return self._request("POST", url, body)

    def put(self, url: str, body: Any = None) -> requests.Response:
        return self._request("PUT", url, body)

    def delete(self, url: str) -> requests.Response:
        return self._request("DELETE", url)

    def patch(self, url: str, body: Any = None) -> requests.Response:
        return self._request("PATCH", url, body)

    def _request(self, method: str, url: str, body: Any = None) -> requests.Response:
        if body is None:
            logger.info(f"Making {method} request to: {url}")
        else:
            logger.info(f"Making {method} request to: {url} with body")
        return self._send(method, url, body)

    def _send(self, method: str, url: str, body: Any = None) -> requests.Response:
        """
        Send one request; transport errors propagate to the caller.

        Args:
            method: HTTP method
            url: Fully-qualified URL
            body: Book/Author model, plain JSON value, or None for no body

        Returns:
            Raw response, whatever its status code
        """
        payload = body.to_payload() if hasattr(body, "to_payload") else body

        try:
            return self.session.request(
                method,
                url,
                json=payload,
                timeout=self.config.timeout
            )
        except requests.exceptions.Timeout:
            logger.error(f"Timeout on {method} {url}")
            raise
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Connection error on {method} {url}: {e}")
            raise

    @staticmethod
    def log_response(response: requests.Response):
        """Log status code and body of a response."""
        logger.info(f"Response Status Code: {response.status_code}")
        logger.info(f"Response Body: {response.text}")

    @staticmethod
    def pretty_print_response(response: requests.Response) -> str:
        """
        Render the response body as indented JSON.

        Falls back to the raw text when the body is not JSON.
        """
        try:
            rendered = json.dumps(response.json(), indent=2)
        except ValueError:
            rendered = response.text
        print(rendered)
        return rendered

    def close(self):
        """Close the session."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
