"""Board-level commands: init, info and column management."""

from pathlib import Path

from ..errors import BoardAlreadyExistsError
from ..services import BoardService
from ..utils import format_timestamp
from .output import detail, header, info, success


def run_init(base_path: Path, board_service: BoardService, name: str | None = None) -> int:
    """Initialize a board in base_path."""
    if board_service.exists(base_path):
        raise BoardAlreadyExistsError(
            "Board already initialized in this directory. Use 'clicky info' to view it."
        )

    board = board_service.initialize(base_path, name)

    success(f"Initialized board '{board.name}' in {base_path}")
    detail("Card ID prefix", board.card_id_prefix, width=15)
    detail("Columns", ", ".join(column.name for column in board.columns), width=15)
    return 0


def run_info(base_path: Path, board_service: BoardService) -> int:
    """Show board metadata, falling back to a board in a parent directory."""
    if not board_service.exists(base_path):
        _, root = board_service.find_and_load(base_path)
        info(f"Board found in parent directory: {root}")
        info(f"Run 'clicky --path {root} info' to view it.")
        return 0

    board = board_service.load(base_path)

    header(f"Board: {board.name}")
    detail("ID", board.id, width=15)
    detail("Card ID prefix", board.card_id_prefix, width=15)
    detail("Created", format_timestamp(board.created_at), width=15)
    print()
    header("Columns:")
    for column in board.columns:
        count = len(board.get_cards_in_column(column.id))
        print(f"  {column.name} ({column.id}): {count} cards")
    print()
    print(f"Total cards: {len(board.cards)}")
    return 0


def run_column_add(
    base_path: Path,
    board_service: BoardService,
    column_id: str,
    name: str,
    order: int | None = None,
) -> int:
    """Add a column to the board."""
    board = board_service.add_column(base_path, column_id, name, order)
    success(f"Added column {name} ({column_id})")
    detail("Columns", ", ".join(column.name for column in board.columns))
    return 0


def run_column_remove(base_path: Path, board_service: BoardService, column_id: str) -> int:
    """Remove a column; its cards move to the first remaining column."""
    board = board_service.remove_column(base_path, column_id)
    success(f"Removed column {column_id}")
    detail("Columns", ", ".join(column.name for column in board.columns))
    return 0
