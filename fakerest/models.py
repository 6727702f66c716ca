"""Data models for catalog resources."""
from dataclasses import dataclass
from typing import Optional, Dict, Any


@dataclass(frozen=True)
class Book:
    """Book resource as exchanged with the catalog API."""
    id: int = 0
    title: Optional[str] = None
    description: Optional[str] = None
    page_count: int = 0
    excerpt: Optional[str] = None
    publish_date: Optional[str] = None

    def is_valid(self) -> bool:
        """True if the book has a server-assigned id and a title."""
        return self.id > 0 and bool(self.title)

    def has_minimal_fields(self) -> bool:
        """True if the book carries enough fields to attempt creation."""
        return bool(self.title) and self.page_count > 0

    def to_payload(self) -> Dict[str, Any]:
        """Render the JSON body the API expects."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "pageCount": self.page_count,
            "excerpt": self.excerpt,
            "publishDate": self.publish_date,
        }

    def __str__(self) -> str:
        return (
            f"Book{{id={self.id}, title='{self.title}', description='{self.description}', "
            f"pageCount={self.page_count}, publishDate='{self.publish_date}'}}"
        )


@dataclass(frozen=True)
class Author:
    """Author resource as exchanged with the catalog API."""
    id: int = 0
    id_book: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @property
    def full_name(self) -> str:
        """First and last name separated by a single space."""
        return f"{self.first_name} {self.last_name}"

    def is_valid(self) -> bool:
        """True if the author has a server-assigned id and both names."""
        return self.id > 0 and self.has_minimal_fields()

    def has_minimal_fields(self) -> bool:
        """True if both names are set, enough to attempt creation."""
        return bool(self.first_name) and bool(self.last_name)

    def to_payload(self) -> Dict[str, Any]:
        """Render the JSON body the API expects."""
        return {
            "id": self.id,
            "idBook": self.id_book,
            "firstName": self.first_name,
            "lastName": self.last_name,
        }

    def __str__(self) -> str:
        return (
            f"Author{{id={self.id}, firstName='{self.first_name}', "
            f"lastName='{self.last_name}', idBook='{self.id_book}'}}"
        )
