"""Parse catalog API payloads into resource models."""
import logging
from typing import Dict, Any, List, Optional

from fakerest.models import Book, Author

logger = logging.getLogger(__name__)


def _as_int(value: Any) -> int:
    if value is None:
        return 0
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Malformed integer field: {value!r}") from e


def _as_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    # scalars only; nested JSON is not a string field
    if isinstance(value, (dict, list)):
        raise ValueError(f"Malformed string field: {value!r}")
    return str(value)


def parse_book(data: Dict[str, Any]) -> Book:
    """
    Parse a single book object from the API.

    Keys the model does not know about are ignored.

    Args:
        data: Decoded JSON object

    Returns:
        Book object

    Raises:
        ValueError: if data is not a JSON object or a field has the wrong shape
    """
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object for Book, got {type(data).__name__}")

    return Book(
        id=_as_int(data.get("id")),
        title=_as_str(data.get("title")),
        description=_as_str(data.get("description")),
        page_count=_as_int(data.get("pageCount")),
        excerpt=_as_str(data.get("excerpt")),
        publish_date=_as_str(data.get("publishDate")),
    )


def parse_author(data: Dict[str, Any]) -> Author:
    """
    Parse a single author object from the API.

    Args:
        data: Decoded JSON object

    Returns:
        Author object

    Raises:
        ValueError: if data is not a JSON object or a field has the wrong shape
    """
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object for Author, got {type(data).__name__}")

    return Author(
        id=_as_int(data.get("id")),
        # idBook is a weak reference; the API sends it as a number
        id_book=_as_str(data.get("idBook")),
        first_name=_as_str(data.get("firstName")),
        last_name=_as_str(data.get("lastName")),
    )


def _parse_list(payload: Any, parse_item, kind: str) -> list:
    if not isinstance(payload, list):
        raise ValueError(f"Expected a JSON array of {kind} objects, got {type(payload).__name__}")

    items = []
    for item in payload:
        if not isinstance(item, dict):
            logger.warning(f"Skipping non-object {kind} entry: {item!r}")
            continue
        items.append(parse_item(item))

    return items


def parse_books_response(payload: Any) -> List[Book]:
    """
    Parse the Books collection response.

    Args:
        payload: Decoded JSON array

    Returns:
        List of Book objects (empty if the collection is empty)
    """
    return _parse_list(payload, parse_book, "Book")


def parse_authors_response(payload: Any) -> List[Author]:
    """Parse the Authors collection response."""
    return _parse_list(payload, parse_author, "Author")
