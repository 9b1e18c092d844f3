"""Repository protocol for board storage backends."""

from pathlib import Path
from typing import Protocol

from ..models import Board


class BoardStoreProtocol(Protocol):
    """Interface for board storage backends.

    A board is addressed by its project root directory. Stores persist the
    whole board document; there are no partial or field-level writes.
    """

    def load(self, base_path: Path) -> Board:
        """Load the board stored under a project root.

        Raises:
            BoardNotFoundError: If no board exists there.
            StorageError: If the stored document cannot be read or parsed.
        """
        ...

    def save(self, board: Board, base_path: Path) -> None:
        """Persist the full board under a project root.

        Raises:
            StorageError: If the document cannot be written.
        """
        ...

    def exists(self, base_path: Path) -> bool:
        """Whether a board is stored under a project root."""
        ...

    def delete(self, base_path: Path) -> None:
        """Delete the board stored under a project root.

        Raises:
            BoardNotFoundError: If no board exists there.
        """
        ...

    def find_board_root(self, start_path: Path) -> Path | None:
        """Search upward from start_path for the nearest project root with a board."""
        ...
