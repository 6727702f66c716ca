"""Shared pytest configuration."""
from datetime import timedelta

import pytest
import requests


def pytest_addoption(parser):
    parser.addoption(
        "--live",
        action="store_true",
        default=False,
        help="Run tests that call the real catalog API",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--live"):
        return

    skip_live = pytest.mark.skip(reason="needs --live to call the real API")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


@pytest.fixture
def make_response():
    """Factory for canned requests.Response objects."""
    def _make(status_code=200, body=b"", headers=None, elapsed_ms=0):
        response = requests.Response()
        response.status_code = status_code
        response._content = body.encode("utf-8") if isinstance(body, str) else body
        response.headers.update(headers or {})
        response.elapsed = timedelta(milliseconds=elapsed_ms)
        response.encoding = "utf-8"
        return response

    return _make
