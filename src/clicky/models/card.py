"""Card domain model."""

from datetime import datetime

from pydantic import BaseModel, Field

from ..utils import now_utc


class Card(BaseModel):
    """A unit of work on the board.

    Cards are created through ``Board.create_card`` only. Setters overwrite
    the field and refresh ``updated_at``; they do not validate, empty-title
    rejection belongs to the service layer.
    """

    id: str  # e.g. "MYP-001"
    title: str
    description: str | None = None
    column_id: str
    assignee: str | None = None
    created_at: datetime = Field(default_factory=now_utc)
    updated_at: datetime = Field(default_factory=now_utc)

    @classmethod
    def new(cls, card_id: str, title: str, column_id: str) -> "Card":
        """Create a card with both timestamps set to now."""
        now = now_utc()
        return cls(id=card_id, title=title, column_id=column_id, created_at=now, updated_at=now)

    def move_to(self, column_id: str) -> None:
        self.column_id = column_id
        self.updated_at = now_utc()

    def set_title(self, title: str) -> None:
        self.title = title
        self.updated_at = now_utc()

    def set_description(self, description: str | None) -> None:
        self.description = description
        self.updated_at = now_utc()

    def set_assignee(self, assignee: str | None) -> None:
        self.assignee = assignee
        self.updated_at = now_utc()
