"""Service for card CRUD operations."""

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import CardNotFoundError, ColumnNotFoundError, InvalidInputError
from ..models import Card, FieldUpdate
from .board_service import BoardService

logger = logging.getLogger(__name__)


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


class CardService:
    """Service for card CRUD operations.

    Each call is a load-mutate-save round trip through ``BoardService``.
    """

    def __init__(self, board_service: BoardService | None = None) -> None:
        self.board_service = board_service if board_service is not None else BoardService()

    def create_card(
        self,
        base_path: Path,
        title: str,
        description: str | None = None,
        assignee: str | None = None,
        column_id: str | None = None,
    ) -> Card:
        """
        Create a new card.

        The title is validated and the column checked before a card number
        is consumed. Blank description/assignee are stored as unset.

        Raises:
            InvalidInputError: If the title is empty.
            ColumnNotFoundError: If column_id does not exist.
        """
        if not title.strip():
            raise InvalidInputError("Title is required")

        board = self.board_service.load(base_path)

        if column_id is not None and board.get_column(column_id) is None:
            raise ColumnNotFoundError(column_id)

        card_id = board.create_card(
            title.strip(),
            _blank_to_none(description),
            _blank_to_none(assignee),
            column_id,
        )
        self.board_service.save(board, base_path)

        card = board.get_card(card_id)
        if card is None:
            raise CardNotFoundError(card_id)
        logger.info("Card created: %s (column=%s)", card.id, card.column_id)
        return card

    def move_card(self, base_path: Path, card_id: str, column_id: str) -> Card:
        """
        Move a card to the end of another column.

        Raises:
            CardNotFoundError: If the card is unknown.
            ColumnNotFoundError: If the column is unknown.
        """
        board = self.board_service.load(base_path)

        card = board.get_card(card_id)
        if card is None:
            raise CardNotFoundError(card_id)
        if board.get_column(column_id) is None:
            raise ColumnNotFoundError(column_id)

        old_column = card.column_id
        if not board.move_card(card_id, column_id):
            raise CardNotFoundError(card_id)

        self.board_service.save(board, base_path)
        logger.info("Card moved: %s (%s -> %s)", card_id, old_column, column_id)
        return card

    def update_card(
        self,
        base_path: Path,
        card_id: str,
        title: str | None = None,
        description: FieldUpdate | None = None,
        assignee: FieldUpdate | None = None,
    ) -> Card:
        """
        Update any subset of a card's title, description and assignee.

        Args:
            title: New title, or None to leave it
            description: Directive for the description (default: leave)
            assignee: Directive for the assignee (default: leave)

        Raises:
            CardNotFoundError: If the card is unknown.
            InvalidInputError: If the new title is empty.
        """
        description = description or FieldUpdate.leave()
        assignee = assignee or FieldUpdate.leave()

        if title is not None and not title.strip():
            raise InvalidInputError("Title is required")

        board = self.board_service.load(base_path)
        card = board.get_card(card_id)
        if card is None:
            raise CardNotFoundError(card_id)

        if title is not None:
            card.set_title(title.strip())
        if description.changes:
            card.set_description(description.apply(card.description))
        if assignee.changes:
            card.set_assignee(assignee.apply(card.assignee))

        board.touch()
        self.board_service.save(board, base_path)
        logger.info("Card updated: %s", card_id)
        return card

    def delete_card(self, base_path: Path, card_id: str) -> None:
        """Delete a card by ID."""
        board = self.board_service.load(base_path)
        if not board.delete_card(card_id):
            raise CardNotFoundError(card_id)

        self.board_service.save(board, base_path)
        logger.info("Card deleted: %s", card_id)

    def get_card(self, base_path: Path, card_id: str) -> Card:
        """Get a card by ID."""
        board = self.board_service.load(base_path)
        card = board.get_card(card_id)
        if card is None:
            raise CardNotFoundError(card_id)
        return card

    def list_cards(
        self,
        base_path: Path,
        column_id: str | None = None,
        assignee: str | None = None,
    ) -> list[Card]:
        """
        List cards in display order (columns left to right, manual order within).

        Args:
            column_id: Only cards in this column
            assignee: Only cards with exactly this assignee

        Raises:
            ColumnNotFoundError: If the column filter names an unknown column.
        """
        board = self.board_service.load(base_path)
        if column_id is not None and board.get_column(column_id) is None:
            raise ColumnNotFoundError(column_id)

        cards: list[Card] = []
        for column in board.columns:
            if column_id is not None and column.id != column_id:
                continue
            for card in board.ordered_cards(column.id):
                if assignee is None or card.assignee == assignee:
                    cards.append(card)
        return cards
