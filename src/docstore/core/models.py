"""Value models for stored documents and search criteria"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from docstore.core.utils.timestamps import to_utc


class Author(BaseModel):
    """Who wrote a document. Ids are not required to be unique across authors."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class Document(BaseModel):
    """A stored record; compared by value, replaced wholesale on save."""
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None        # unset or empty: the store assigns one on save
    title: str
    content: str
    author: Author
    created: datetime               # always an aware UTC instant

    @field_validator("created")
    @classmethod
    def _created_utc(cls, value: datetime) -> datetime:
        return to_utc(value)

    def with_id(self, doc_id: str) -> "Document":
        """Return a copy of this document carrying doc_id."""
        return self.model_copy(update={"id": doc_id})


class SearchRequest(BaseModel):
    """Optional filter bundle: AND across fields, OR within each field's values.

    An empty tuple (or None) for a list field and None for a bound impose no constraint.
    The created range is open at both ends.
    """
    model_config = ConfigDict(frozen=True)

    title_prefixes: tuple[str, ...] = ()
    contains_contents: tuple[str, ...] = ()
    author_ids: tuple[str, ...] = ()
    created_from: Optional[datetime] = None
    created_to: Optional[datetime] = None

    @field_validator("title_prefixes", "contains_contents", "author_ids", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return () if value is None else value

    @field_validator("created_from", "created_to")
    @classmethod
    def _bounds_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return None if value is None else to_utc(value)
