"""Interactive line-prompt wizards for the CLI commands.

Each wizard collects the arguments of one command through prompts and then
runs the same handler the flag-based command uses.
"""

from pathlib import Path

from ..models import Board, Card, FieldUpdate
from ..services import BoardService, CardService
from . import board as board_commands
from . import card as card_commands
from .output import header, info
from .prompts import ask, ask_required, choose, confirm

ALL = "__all__"


def card_option(card: Card, board: Board | None = None) -> tuple[str, str]:
    """Menu entry for a card, with its column name when a board is given."""
    if board is not None:
        column = board.get_column(card.column_id)
        name = column.name if column else card.column_id
        return card.id, f"{card.id} [{name}]: {card.title}"
    return card.id, f"{card.id}: {card.title}"


def choose_card(board: Board, label: str) -> str | None:
    """Pick a card from a numbered menu, or None if the board has no cards."""
    if not board.cards:
        info("No cards found on this board.")
        return None
    options = [
        card_option(card, board)
        for column in board.columns
        for card in board.ordered_cards(column.id)
    ]
    return choose(label, options)


def choose_column(board: Board, label: str, exclude: str | None = None) -> str:
    options = [(column.id, column.name) for column in board.columns if column.id != exclude]
    return choose(label, options)


def _ask_field_update(label: str, current: str | None) -> FieldUpdate:
    """Ask whether to change or clear an optional field."""
    if not confirm(f"Update {label}?"):
        return FieldUpdate.leave()
    if current:
        if confirm(f"Clear {label}?"):
            return FieldUpdate.clear()
        return FieldUpdate.from_input(ask(f"New {label}", current))
    value = ask(f"Add {label}")
    return FieldUpdate.set(value) if value.strip() else FieldUpdate.leave()


def init_wizard(base_path: Path, board_service: BoardService) -> int:
    header("Initialize a board")
    default_name = base_path.resolve().name or "board"
    name = ask("Board name", default_name)
    return board_commands.run_init(base_path, board_service, name)


def create_wizard(base_path: Path, card_service: CardService) -> int:
    header("Create a card")
    board = card_service.board_service.load(base_path)

    title = ask_required("Title")
    description = ask("Description (optional)")
    assignee = ask("Assignee (optional)")
    column_id = choose_column(board, "Column")

    return card_commands.run_create(
        base_path,
        card_service,
        title,
        description or None,
        assignee or None,
        column_id,
    )


def move_wizard(base_path: Path, card_service: CardService) -> int:
    header("Move a card")
    board = card_service.board_service.load(base_path)

    card_id = choose_card(board, "Select card to move")
    if card_id is None:
        return 0
    card = board.get_card(card_id)
    column_id = choose_column(board, "Move to column", exclude=card.column_id if card else None)

    return card_commands.run_move(base_path, card_service, card_id, column_id)


def show_wizard(base_path: Path, card_service: CardService) -> int:
    board = card_service.board_service.load(base_path)
    card_id = choose_card(board, "Select card to show")
    if card_id is None:
        return 0
    return card_commands.run_show(base_path, card_service, card_id)


def list_wizard(base_path: Path, card_service: CardService) -> int:
    header("List cards")
    board = card_service.board_service.load(base_path)

    options = [(ALL, "All columns")] + [(column.id, column.name) for column in board.columns]
    column_id = choose("Column", options)
    assignee = ask("Assignee filter (optional)")

    return card_commands.run_list(
        base_path,
        card_service,
        column_id=None if column_id == ALL else column_id,
        assignee=assignee or None,
    )


def update_wizard(base_path: Path, card_service: CardService) -> int:
    header("Update a card")
    board = card_service.board_service.load(base_path)

    card_id = choose_card(board, "Select card to update")
    if card_id is None:
        return 0
    card = board.get_card(card_id)
    if card is None:
        return 0
    print(f"\nSelected: {card.title}\n")

    title = None
    if confirm("Update title?"):
        title = ask_required("New title", card.title)
    description = _ask_field_update("description", card.description)
    assignee = _ask_field_update("assignee", card.assignee)

    if title is None and not description.changes and not assignee.changes:
        info("No changes made.")
        return 0

    return card_commands.run_update(
        base_path,
        card_service,
        card_id,
        title=title,
        description=description,
        assignee=assignee,
    )


def delete_wizard(base_path: Path, card_service: CardService) -> int:
    header("Delete a card")
    board = card_service.board_service.load(base_path)

    card_id = choose_card(board, "Select card to delete")
    if card_id is None:
        return 0
    return card_commands.run_delete(base_path, card_service, card_id, force=False)
