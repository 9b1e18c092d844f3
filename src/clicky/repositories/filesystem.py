"""JSON file repository for board storage."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from ..errors import BoardNotFoundError, StorageError
from ..models import Board

logger = logging.getLogger(__name__)


class JsonBoardRepository:
    """
    Repository for boards stored as JSON documents on the filesystem.

    Each board lives at ``<base_path>/<board_dir>/<board_file>``
    (by default ``.clicky/board.json``).
    """

    def __init__(self, board_dir: str = ".clicky", board_file: str = "board.json") -> None:
        """
        Initialize repository.

        Args:
            board_dir: Directory name created inside each project root
            board_file: Board document filename inside board_dir
        """
        self.board_dir = board_dir
        self.board_file = board_file

    # --- Paths ---

    def board_path(self, base_path: Path) -> Path:
        """Path to the board document for a project root."""
        return base_path / self.board_dir / self.board_file

    def find_board_root(self, start_path: Path) -> Path | None:
        """
        Search upward from start_path for a directory holding a board.

        Returns:
            The project root containing the board, or None at filesystem root.
        """
        current = start_path.resolve()
        for candidate in (current, *current.parents):
            if self.board_path(candidate).exists():
                logger.debug("Board found at %s (searched from %s)", candidate, start_path)
                return candidate
        return None

    # --- Board Operations ---

    def load(self, base_path: Path) -> Board:
        """Load and validate the board document."""
        path = self.board_path(base_path)
        if not path.exists():
            raise BoardNotFoundError()

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Cannot read board file {path}: {e}") from e

        try:
            return Board.model_validate_json(content)
        except ValidationError as e:
            raise StorageError(f"Invalid board data in {path}: {e}") from e

    def save(self, board: Board, base_path: Path) -> None:
        """Write the full board document as indented JSON."""
        path = self.board_path(base_path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(board.model_dump_json(indent=2) + "\n", encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Cannot write board file {path}: {e}") from e
        logger.debug("Board saved: %s (%d cards)", path, len(board.cards))

    def exists(self, base_path: Path) -> bool:
        """Check for a board document under a project root."""
        return self.board_path(base_path).exists()

    def delete(self, base_path: Path) -> None:
        """Remove the board document."""
        path = self.board_path(base_path)
        if not path.exists():
            raise BoardNotFoundError()
        try:
            path.unlink()
        except OSError as e:
            raise StorageError(f"Cannot delete board file {path}: {e}") from e
