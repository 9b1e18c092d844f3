"""Integration tests for CardService."""

from pathlib import Path

import pytest

from clicky.errors import (
    BoardNotFoundError,
    CardNotFoundError,
    ColumnNotFoundError,
    InvalidInputError,
)
from clicky.models import FieldUpdate
from clicky.services import BoardService, CardService


@pytest.fixture
def board_service() -> BoardService:
    return BoardService()


@pytest.fixture
def card_service(board_service: BoardService) -> CardService:
    return CardService(board_service)


@pytest.fixture
def project(tmp_path: Path, board_service: BoardService) -> Path:
    board_service.initialize(tmp_path, "myproject")
    return tmp_path


class TestCreateCard:
    """Tests for card creation."""

    def test_create_persists(self, card_service: CardService, board_service: BoardService, project: Path):
        card = card_service.create_card(project, "  Write docs  ", "Some text", "alice")

        assert card.id == "MYP-001"
        assert card.title == "Write docs"
        assert card.column_id == "todo"

        board = board_service.load(project)
        assert board.get_card("MYP-001").assignee == "alice"
        assert board.get_column("todo").cards == ["MYP-001"]
        assert board.next_card_number == 2

    def test_blank_optionals_are_unset(self, card_service: CardService, project: Path):
        card = card_service.create_card(project, "Title", description="  ", assignee="")
        assert card.description is None
        assert card.assignee is None

    def test_empty_title_consumes_no_id(
        self, card_service: CardService, board_service: BoardService, project: Path
    ):
        with pytest.raises(InvalidInputError):
            card_service.create_card(project, "   ")

        assert board_service.load(project).next_card_number == 1

    def test_unknown_column_consumes_no_id(
        self, card_service: CardService, board_service: BoardService, project: Path
    ):
        with pytest.raises(ColumnNotFoundError):
            card_service.create_card(project, "Title", column_id="nowhere")

        board = board_service.load(project)
        assert board.next_card_number == 1
        assert board.cards == []

    def test_no_board(self, card_service: CardService, tmp_path: Path):
        with pytest.raises(BoardNotFoundError):
            card_service.create_card(tmp_path / "empty", "Title")


class TestMoveCard:
    """Tests for moving cards between columns."""

    def test_round_trip(self, card_service: CardService, board_service: BoardService, project: Path):
        card_id = card_service.create_card(project, "Travel").id

        assert card_service.move_card(project, card_id, "in_progress").column_id == "in_progress"
        assert card_service.move_card(project, card_id, "done").column_id == "done"

        board = board_service.load(project)
        assert board.get_column("todo").cards == []
        assert board.get_column("in_progress").cards == []
        assert board.get_column("done").cards == [card_id]

    def test_unknown_card(self, card_service: CardService, project: Path):
        with pytest.raises(CardNotFoundError):
            card_service.move_card(project, "MYP-404", "done")

    def test_unknown_column(self, card_service: CardService, project: Path):
        card_id = card_service.create_card(project, "Stay").id
        with pytest.raises(ColumnNotFoundError):
            card_service.move_card(project, card_id, "nowhere")


class TestUpdateCard:
    """Tests for tri-state card updates."""

    @pytest.fixture
    def card_id(self, card_service: CardService, project: Path) -> str:
        return card_service.create_card(project, "Original", "Desc", "alice").id

    def test_leave_keeps_fields(self, card_service: CardService, project: Path, card_id: str):
        card = card_service.update_card(project, card_id, title="Renamed")
        assert card.title == "Renamed"
        assert card.description == "Desc"
        assert card.assignee == "alice"

    def test_clear_fields(self, card_service: CardService, project: Path, card_id: str):
        card_service.update_card(
            project,
            card_id,
            description=FieldUpdate.clear(),
            assignee=FieldUpdate.clear(),
        )
        card = card_service.get_card(project, card_id)
        assert card.title == "Original"
        assert card.description is None
        assert card.assignee is None

    def test_set_fields(self, card_service: CardService, project: Path, card_id: str):
        card_service.update_card(project, card_id, assignee=FieldUpdate.set("bob"))
        card = card_service.get_card(project, card_id)
        assert card.assignee == "bob"
        assert card.description == "Desc"

    def test_updated_at_bumped(self, card_service: CardService, project: Path, card_id: str):
        before = card_service.get_card(project, card_id).updated_at
        card = card_service.update_card(project, card_id, title="New")
        assert card.updated_at >= before

    def test_empty_title_rejected(self, card_service: CardService, project: Path, card_id: str):
        with pytest.raises(InvalidInputError):
            card_service.update_card(project, card_id, title=" ")
        assert card_service.get_card(project, card_id).title == "Original"

    def test_unknown_card(self, card_service: CardService, project: Path):
        with pytest.raises(CardNotFoundError):
            card_service.update_card(project, "MYP-404", title="X")


class TestDeleteAndQuery:
    """Tests for delete, get and list."""

    def test_delete(self, card_service: CardService, project: Path):
        card_id = card_service.create_card(project, "Gone").id
        card_service.delete_card(project, card_id)

        with pytest.raises(CardNotFoundError):
            card_service.get_card(project, card_id)
        with pytest.raises(CardNotFoundError):
            card_service.delete_card(project, card_id)

    def test_list_in_display_order(self, card_service: CardService, board_service: BoardService, project: Path):
        """Cards are listed column by column in manual order."""
        done = card_service.create_card(project, "Done", column_id="done").id
        first = card_service.create_card(project, "First").id
        second = card_service.create_card(project, "Second").id

        board = board_service.load(project)
        board.get_column("todo").move_card_up(second)
        board_service.save(board, project)

        assert [c.id for c in card_service.list_cards(project)] == [second, first, done]

    def test_list_filters(self, card_service: CardService, project: Path):
        card_service.create_card(project, "A", assignee="alice")
        card_service.create_card(project, "B", assignee="bob")
        card_service.create_card(project, "C", assignee="alice", column_id="done")

        assert [c.title for c in card_service.list_cards(project, assignee="alice")] == ["A", "C"]
        assert [c.title for c in card_service.list_cards(project, column_id="done")] == ["C"]
        assert card_service.list_cards(project, column_id="in_progress") == []

    def test_list_unknown_column(self, card_service: CardService, project: Path):
        with pytest.raises(ColumnNotFoundError):
            card_service.list_cards(project, column_id="nowhere")
