"""Card commands: create, move, show, list, update, delete and reorder."""

from pathlib import Path

from ..models import FieldUpdate
from ..services import CardService, MoveDirection
from ..utils import format_timestamp
from .output import detail, dim, header, info, success
from .prompts import confirm


def run_create(
    base_path: Path,
    card_service: CardService,
    title: str,
    description: str | None = None,
    assignee: str | None = None,
    column_id: str | None = None,
) -> int:
    """Create a card."""
    card = card_service.create_card(base_path, title, description, assignee, column_id)
    success(f"Created card {card.id}")
    detail("Title", card.title, width=6)
    return 0


def run_move(base_path: Path, card_service: CardService, card_id: str, column_id: str) -> int:
    """Move a card to the end of another column."""
    card = card_service.move_card(base_path, card_id, column_id)
    board = card_service.board_service.load(base_path)
    column = board.get_column(column_id)

    success(f"Moved {card_id} to {column.name if column else column_id}")
    detail("Title", card.title, width=6)
    return 0


def run_show(base_path: Path, card_service: CardService, card_id: str) -> int:
    """Show every field of a card."""
    card = card_service.get_card(base_path, card_id)
    board = card_service.board_service.load(base_path)
    column = board.get_column(card.column_id)

    header(f"Card: {card.id}")
    detail("Title", card.title)
    if card.description:
        detail("Description", card.description)
    detail("Column", f"{column.name if column else card.column_id} ({card.column_id})")
    if card.assignee:
        detail("Assignee", card.assignee)
    detail("Created", format_timestamp(card.created_at))
    detail("Updated", format_timestamp(card.updated_at))
    return 0


def run_list(
    base_path: Path,
    card_service: CardService,
    column_id: str | None = None,
    assignee: str | None = None,
) -> int:
    """List cards grouped by column, in manual order."""
    cards = card_service.list_cards(base_path, column_id=column_id, assignee=assignee)
    board = card_service.board_service.load(base_path)

    header(f"Board: {board.name} ({board.id})")
    print(f"Total cards: {len(board.cards)}")

    for column in board.columns:
        if column_id is not None and column.id != column_id:
            continue

        column_cards = [card for card in cards if card.column_id == column.id]
        title = f"{column.name} ({column.id})"
        print()
        header(title)
        print("─" * len(title))

        if not column_cards:
            dim("  (no cards)")
            continue
        for card in column_cards:
            assignee_str = f" [@{card.assignee}]" if card.assignee else ""
            print(f"  {card.id}: {card.title}{assignee_str}")
    return 0


def run_update(
    base_path: Path,
    card_service: CardService,
    card_id: str,
    title: str | None = None,
    description: FieldUpdate | None = None,
    assignee: FieldUpdate | None = None,
) -> int:
    """Update a card's title, description and/or assignee."""
    card = card_service.update_card(
        base_path,
        card_id,
        title=title,
        description=description,
        assignee=assignee,
    )
    success(f"Updated {card_id}")
    detail("Title", card.title, width=6)
    return 0


def run_delete(
    base_path: Path,
    card_service: CardService,
    card_id: str,
    force: bool = False,
) -> int:
    """Delete a card, asking first unless force is set."""
    if not force and not confirm(f"Are you sure you want to delete {card_id}?"):
        info("Cancelled.")
        return 0

    card_service.delete_card(base_path, card_id)
    success(f"Deleted {card_id}")
    return 0


def run_reorder(
    base_path: Path,
    card_service: CardService,
    card_id: str,
    direction: MoveDirection,
) -> int:
    """Move a card up or down within its column."""
    board = card_service.board_service.reorder_card(base_path, card_id, direction)
    card = board.get_card(card_id)
    position = board.ordered_cards(card.column_id).index(card) + 1 if card else 0

    success(f"Moved {card_id} {direction.value}")
    detail("Position", str(position), width=9)
    return 0
