"""Response assertions that fail the current test with a readable message."""
import logging
from typing import Iterable

import requests

from fakerest.config import (
    HTTP_200_OK,
    HTTP_201_CREATED,
    HTTP_204_NO_CONTENT,
    HTTP_404_NOT_FOUND,
)

logger = logging.getLogger(__name__)


def elapsed_ms(response: requests.Response) -> float:
    """Time between sending the request and parsing the response headers."""
    return response.elapsed.total_seconds() * 1000


def assert_status_code(response: requests.Response, expected_status_code: int, message: str):
    """
    Assert the response carries exactly the expected status code.

    Args:
        response: Response to check
        expected_status_code: Required HTTP status
        message: Failure message prefix

    Raises:
        AssertionError: on any other status code
    """
    actual = response.status_code
    if actual != expected_status_code:
        raise AssertionError(f"{message} - expected [{expected_status_code}] but found [{actual}]")
    logger.info(f"✓ Status code {expected_status_code} assertion passed")


def assert_status_code_200(response: requests.Response, message: str):
    """Assert HTTP 200 OK."""
    assert_status_code(response, HTTP_200_OK, message)


def assert_status_code_201(response: requests.Response, message: str):
    """Assert HTTP 201 Created."""
    assert_status_code(response, HTTP_201_CREATED, message)


def assert_status_code_204(response: requests.Response, message: str):
    """Assert HTTP 204 No Content."""
    assert_status_code(response, HTTP_204_NO_CONTENT, message)


def assert_status_code_404(response: requests.Response, message: str):
    """Assert HTTP 404 Not Found."""
    assert_status_code(response, HTTP_404_NOT_FOUND, message)


def assert_status_code_in(response: requests.Response, expected_codes: Iterable[int], message: str):
    """Pass if the status code is any of expected_codes (tolerant API checks)."""
    expected = sorted(set(expected_codes))
    actual = response.status_code
    if actual not in expected:
        raise AssertionError(f"{message} - expected one of {expected} but found [{actual}]")
    logger.info(f"✓ Status code {actual} is one of {expected}")


def assert_response_contains(response: requests.Response, text: str, message: str):
    """
    Assert the raw body contains text.

    Args:
        response: Response to check
        text: Substring looked up in the body
        message: Failure message
    """
    if text not in response.text:
        raise AssertionError(message)
    logger.info(f"✓ Response contains '{text}' assertion passed")


def assert_response_not_contains(response: requests.Response, text: str, message: str):
    """Assert the raw body does not contain text."""
    if text in response.text:
        raise AssertionError(message)
    logger.info(f"✓ Response does not contain '{text}' assertion passed")


def assert_header_present(response: requests.Response, header_name: str, message: str):
    """Assert the response carries header_name, whatever its value."""
    # requests headers are case-insensitive
    if response.headers.get(header_name) is None:
        raise AssertionError(message)
    logger.info(f"✓ Header '{header_name}' is present")


def assert_header_value(response: requests.Response, header_name: str, expected_value: str, message: str):
    """
    Assert a header equals expected_value exactly.

    Args:
        response: Response to check
        header_name: Header name (case-insensitive)
        expected_value: Required header value
        message: Failure message prefix
    """
    actual = response.headers.get(header_name)
    if actual != expected_value:
        raise AssertionError(f"{message} - expected [{expected_value}] but found [{actual}]")
    logger.info(f"✓ Header '{header_name}' has value '{expected_value}'")


def assert_response_time(response: requests.Response, max_time_ms: float, message: str):
    """
    Assert the response arrived strictly under max_time_ms.

    Args:
        response: Response to check
        max_time_ms: Exclusive upper bound in milliseconds
        message: Failure message prefix
    """
    response_time = elapsed_ms(response)
    if response_time >= max_time_ms:
        raise AssertionError(
            f"{message} - Expected < {max_time_ms}ms but got {response_time:.1f}ms"
        )
    logger.info(f"✓ Response time {response_time:.1f} ms is within limit of {max_time_ms} ms")
