"""Entity: Book."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Book(BaseModel):
    """Book entity representing a book in the catalogue.

    Both fields are optional at the model level so that a payload with a
    missing or null ``id``/``name`` still parses; the service validation
    rules are what reject such books.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str | None = Field(default=None, description="Unique identifier")
    name: str | None = Field(default=None, description="Name")

    def __eq__(self, other: Any) -> bool:
        """Compare books by business attributes."""
        if not isinstance(other, Book):
            return False

        return (
            self.id == other.id
            and self.name == other.name
        )

    def __hash__(self) -> int:
        """Hash based on business attributes."""
        return hash((
            self.id,
            self.name,
        ))
