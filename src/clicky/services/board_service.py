"""Service for board-level operations."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from ..errors import (
    BoardAlreadyExistsError,
    BoardNotFoundError,
    CardNotFoundError,
    ColumnNotFoundError,
    EdgeOfSequenceError,
    InvalidInputError,
)
from ..models import Board
from ..repositories import BoardStoreProtocol, JsonBoardRepository
from ..utils import board_id_from_name

logger = logging.getLogger(__name__)


class MoveDirection(str, Enum):
    """Direction to move a card within its column."""

    UP = "up"
    DOWN = "down"


class BoardService:
    """Service for board-level operations.

    Every mutating call loads the full board, changes it in memory and saves
    the whole document back. There is no locking: concurrent writers to the
    same board file are not supported.
    """

    def __init__(self, repository: BoardStoreProtocol | None = None) -> None:
        self.repository = repository if repository is not None else JsonBoardRepository()

    def initialize(self, base_path: Path, name: str | None = None) -> Board:
        """
        Create a new board under base_path.

        Args:
            base_path: Project root where the board directory is created
            name: Board name (defaults to the directory name)

        Raises:
            BoardAlreadyExistsError: If a board already exists there.
        """
        if self.repository.exists(base_path):
            raise BoardAlreadyExistsError()

        board_name = name or base_path.resolve().name or "board"
        board_id = board_id_from_name(board_name)
        if not board_id:
            raise InvalidInputError(f"Invalid board name: {board_name!r}")

        board = Board.new(board_id, board_name)
        self.repository.save(board, base_path)

        logger.info("Board initialized: %s (%s) at %s", board.name, board.id, base_path)
        return board

    def load(self, base_path: Path) -> Board:
        """Load the board under base_path."""
        if not self.repository.exists(base_path):
            raise BoardNotFoundError()
        return self.repository.load(base_path)

    def find_and_load(self, start_path: Path) -> tuple[Board, Path]:
        """
        Search upward from start_path for a board and load it.

        Returns:
            (board, project_root)
        """
        root = self.repository.find_board_root(start_path)
        if root is None:
            raise BoardNotFoundError()
        return self.repository.load(root), root

    def save(self, board: Board, base_path: Path) -> None:
        """Persist the board under base_path."""
        self.repository.save(board, base_path)

    def delete(self, base_path: Path) -> None:
        """Delete the board under base_path."""
        self.repository.delete(base_path)
        logger.info("Board deleted at %s", base_path)

    def exists(self, base_path: Path) -> bool:
        """Check whether a board exists under base_path."""
        return self.repository.exists(base_path)

    def reorder_card(self, base_path: Path, card_id: str, direction: MoveDirection) -> Board:
        """
        Move a card up or down within its own column.

        Raises:
            CardNotFoundError: If the card is unknown.
            EdgeOfSequenceError: If the card is already at the top/bottom.
        """
        board = self.load(base_path)

        card = board.get_card(card_id)
        if card is None:
            logger.debug("reorder_card: card not found: %s", card_id)
            raise CardNotFoundError(card_id)

        column = board.get_column(card.column_id)
        moved = False
        if column is not None:
            if direction == MoveDirection.UP:
                moved = column.move_card_up(card_id)
            else:
                moved = column.move_card_down(card_id)

        if not moved:
            logger.debug("reorder_card: at boundary, cannot move %s: %s", direction.value, card_id)
            raise EdgeOfSequenceError(f"Card {card_id} is already at the {_edge(direction)}")

        board.touch()
        self.repository.save(board, base_path)
        logger.debug("Card reordered %s: %s", direction.value, card_id)
        return board

    def add_column(
        self, base_path: Path, column_id: str, name: str, order: int | None = None
    ) -> Board:
        """
        Add a column to the board.

        Args:
            order: Display order (defaults to after the last column)
        """
        if not column_id.strip() or not name.strip():
            raise InvalidInputError("Column id and name are required")

        board = self.load(base_path)
        if order is None:
            order = max((c.order for c in board.columns), default=-1) + 1

        board.add_column(column_id, name, order)
        self.repository.save(board, base_path)

        logger.info("Column added: %s (%s, order=%d)", column_id, name, order)
        return board

    def remove_column(self, base_path: Path, column_id: str) -> Board:
        """
        Remove a column, relocating its cards to the first other column.

        Raises:
            ColumnNotFoundError: If the column is unknown.
            InvalidInputError: If it is the last column.
        """
        board = self.load(base_path)
        if board.get_column(column_id) is None:
            raise ColumnNotFoundError(column_id)
        if not board.remove_column(column_id):
            raise InvalidInputError("Cannot remove the last column")

        self.repository.save(board, base_path)
        logger.info("Column removed: %s", column_id)
        return board


def _edge(direction: MoveDirection) -> str:
    return "top" if direction == MoveDirection.UP else "bottom"
