"""Board aggregate."""

from __future__ import annotations

import logging
from datetime import datetime

from pydantic import BaseModel, Field

from ..errors import ColumnAlreadyExistsError, ColumnNotFoundError
from ..utils import card_id_prefix, now_utc
from .card import Card
from .column import Column

logger = logging.getLogger(__name__)

DEFAULT_COLUMN_ID = "todo"


def default_columns() -> list[Column]:
    """Create the standard three columns."""
    return [
        Column(id="todo", name="To Do", order=0),
        Column(id="in_progress", name="In Progress", order=1),
        Column(id="done", name="Done", order=2),
    ]


class Board(BaseModel):
    """Top-level aggregate owning all columns and cards for one project.

    Every mutation of ``cards`` or ``Column.cards`` goes through the methods
    here so that each card's ``column_id`` and the owning column's ordered
    ``cards`` list never disagree.
    """

    id: str
    name: str
    card_id_prefix: str
    next_card_number: int = 1
    columns: list[Column] = Field(default_factory=default_columns)
    cards: list[Card] = Field(default_factory=list)  # No ordering guarantee
    created_at: datetime = Field(default_factory=now_utc)
    updated_at: datetime = Field(default_factory=now_utc)

    @classmethod
    def new(cls, board_id: str, name: str) -> Board:
        """Create a board with the default columns."""
        now = now_utc()
        return cls(
            id=board_id,
            name=name,
            card_id_prefix=card_id_prefix(board_id),
            next_card_number=1,
            columns=default_columns(),
            created_at=now,
            updated_at=now,
        )

    def touch(self) -> None:
        """Refresh ``updated_at``."""
        self.updated_at = now_utc()

    # --- Cards ---

    def generate_card_id(self) -> str:
        """Consume the next card number and format it as a card ID.

        The number is never reused, so only call this on a committed
        creation path.
        """
        card_id = f"{self.card_id_prefix}-{self.next_card_number:03d}"
        self.next_card_number += 1
        self.touch()
        return card_id

    def create_card(
        self,
        title: str,
        description: str | None = None,
        assignee: str | None = None,
        column_id: str | None = None,
    ) -> str:
        """
        Create a card at the end of a column.

        Args:
            title: Card title (not validated here)
            description: Optional description
            assignee: Optional assignee
            column_id: Target column (defaults to "todo")

        Returns:
            The new card's ID.

        Raises:
            ColumnNotFoundError: If the column does not exist. Raised before
                an ID is generated, so no card number is consumed.
        """
        target_column_id = column_id if column_id is not None else DEFAULT_COLUMN_ID
        column = self.get_column(target_column_id)
        if column is None:
            raise ColumnNotFoundError(target_column_id)

        card = Card.new(self.generate_card_id(), title, target_column_id)
        card.description = description
        card.assignee = assignee

        column.add_card(card.id)
        self.cards.append(card)
        self.touch()

        logger.debug("Card created on board %s: %s -> %s", self.id, card.id, target_column_id)
        return card.id

    def move_card(self, card_id: str, target_column_id: str) -> bool:
        """
        Move a card to the end of another column.

        Returns:
            False (no mutation) if the card or target column is unknown.
        """
        target = self.get_column(target_column_id)
        card = self.get_card(card_id)
        if target is None or card is None:
            return False

        source = self.get_column(card.column_id)
        if source is not None:
            source.remove_card(card_id)
        target.add_card(card_id)

        card.move_to(target_column_id)
        self.touch()
        return True

    def get_card(self, card_id: str) -> Card | None:
        """Find a card by ID."""
        for card in self.cards:
            if card.id == card_id:
                return card
        return None

    def delete_card(self, card_id: str) -> bool:
        """Remove a card from its column and from the board."""
        card = self.get_card(card_id)
        if card is None:
            return False

        column = self.get_column(card.column_id)
        if column is not None:
            column.remove_card(card_id)

        self.cards.remove(card)
        self.touch()
        return True

    def get_cards_in_column(self, column_id: str) -> list[Card]:
        """Cards whose column_id matches, in ``cards`` iteration order.

        This is not the manual column order; use ``ordered_cards`` for that.
        """
        return [card for card in self.cards if card.column_id == column_id]

    def ordered_cards(self, column_id: str) -> list[Card]:
        """Cards of a column resolved in the column's manual order."""
        column = self.get_column(column_id)
        if column is None:
            return []
        by_id = {card.id: card for card in self.cards}
        return [by_id[card_id] for card_id in column.cards if card_id in by_id]

    # --- Columns ---

    def get_column(self, column_id: str) -> Column | None:
        """Find a column by ID."""
        for column in self.columns:
            if column.id == column_id:
                return column
        return None

    def column_index(self, column_id: str) -> int | None:
        """Position of a column in display order, or None."""
        for idx, column in enumerate(self.columns):
            if column.id == column_id:
                return idx
        return None

    def add_column(self, column_id: str, name: str, order: int) -> None:
        """
        Add a column and re-sort columns by ``order``.

        The sort is stable, so columns with equal order keep insertion order.

        Raises:
            ColumnAlreadyExistsError: If the ID is already used.
        """
        if self.get_column(column_id) is not None:
            raise ColumnAlreadyExistsError(column_id)

        self.columns.append(Column(id=column_id, name=name, order=order))
        self.columns.sort(key=lambda c: c.order)
        self.touch()

    def remove_column(self, column_id: str) -> bool:
        """
        Remove a column, relocating its cards first.

        Cards go to the first other column in sequence order and land at its
        end, in their previous relative order.

        Returns:
            False if the column is unknown or is the last one.
        """
        if len(self.columns) <= 1:
            return False

        column = self.get_column(column_id)
        if column is None:
            return False

        destination = next(c for c in self.columns if c.id != column_id)
        for card_id in list(column.cards):
            self.move_card(card_id, destination.id)

        self.columns.remove(column)
        self.touch()
        logger.debug(
            "Column removed from board %s: %s (cards -> %s)", self.id, column_id, destination.id
        )
        return True
