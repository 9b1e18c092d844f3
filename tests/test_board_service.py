"""Integration tests for BoardService."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from clicky.errors import (
    BoardAlreadyExistsError,
    BoardNotFoundError,
    CardNotFoundError,
    ColumnAlreadyExistsError,
    ColumnNotFoundError,
    EdgeOfSequenceError,
    InvalidInputError,
)
from clicky.repositories import JsonBoardRepository
from clicky.services import BoardService, CardService, MoveDirection


@pytest.fixture
def board_service() -> BoardService:
    return BoardService(JsonBoardRepository())


@pytest.fixture
def card_service(board_service: BoardService) -> CardService:
    return CardService(board_service)


@pytest.fixture
def project(tmp_path: Path, board_service: BoardService) -> Path:
    """A project directory with an initialized board."""
    root = tmp_path / "myproject"
    root.mkdir()
    board_service.initialize(root)
    return root


class TestInitialize:
    """Tests for board initialization."""

    def test_name_defaults_to_directory(self, board_service: BoardService, tmp_path: Path):
        root = tmp_path / "My Project"
        root.mkdir()

        board = board_service.initialize(root)

        assert board.name == "My Project"
        assert board.id == "my-project"
        assert board.card_id_prefix == "MYP"
        assert board_service.exists(root)

    def test_explicit_name_is_sanitized(self, board_service: BoardService, tmp_path: Path):
        board = board_service.initialize(tmp_path, "Team_Board 2!")
        assert board.name == "Team_Board 2!"
        assert board.id == "team-board-2"

    def test_already_initialized(self, board_service: BoardService, project: Path):
        with pytest.raises(BoardAlreadyExistsError):
            board_service.initialize(project)

    def test_unusable_name(self, board_service: BoardService, tmp_path: Path):
        with pytest.raises(InvalidInputError):
            board_service.initialize(tmp_path, "!!!")
        assert not board_service.exists(tmp_path)


class TestLoad:
    """Tests for loading and locating boards."""

    def test_load_missing(self, board_service: BoardService, tmp_path: Path):
        with pytest.raises(BoardNotFoundError):
            board_service.load(tmp_path)

    def test_find_and_load_from_subdirectory(self, board_service: BoardService, project: Path):
        nested = project / "a" / "b"
        nested.mkdir(parents=True)

        board, root = board_service.find_and_load(nested)

        assert board.id == "myproject"
        assert root == project.resolve()

    def test_find_and_load_nothing(self, board_service: BoardService, tmp_path: Path):
        with pytest.raises(BoardNotFoundError):
            board_service.find_and_load(tmp_path)

    def test_delete(self, board_service: BoardService, project: Path):
        board_service.delete(project)
        assert not board_service.exists(project)

    def test_uses_injected_repository(self, tmp_path: Path):
        """The service talks only to its repository."""
        repo = MagicMock()
        repo.exists.return_value = False
        service = BoardService(repo)

        with pytest.raises(BoardNotFoundError):
            service.load(tmp_path)
        repo.exists.assert_called_once_with(tmp_path)
        repo.load.assert_not_called()


class TestReorderCard:
    """Tests for manual ordering within a column."""

    def test_reorder_scenario(
        self, board_service: BoardService, card_service: CardService, project: Path
    ):
        """[A,B,C]: down(A) -> [B,A,C]; up(C) -> [B,C,A]."""
        a, b, c = (card_service.create_card(project, t).id for t in ("A", "B", "C"))

        board = board_service.reorder_card(project, a, MoveDirection.DOWN)
        assert board.get_column("todo").cards == [b, a, c]

        board = board_service.reorder_card(project, c, MoveDirection.UP)
        assert board.get_column("todo").cards == [b, c, a]

        # Persisted
        assert board_service.load(project).get_column("todo").cards == [b, c, a]

    def test_edges_raise_without_mutation(
        self, board_service: BoardService, card_service: CardService, project: Path
    ):
        a = card_service.create_card(project, "A").id
        b = card_service.create_card(project, "B").id

        with pytest.raises(EdgeOfSequenceError):
            board_service.reorder_card(project, a, MoveDirection.UP)
        with pytest.raises(EdgeOfSequenceError):
            board_service.reorder_card(project, b, MoveDirection.DOWN)

        assert board_service.load(project).get_column("todo").cards == [a, b]

    def test_unknown_card(self, board_service: BoardService, project: Path):
        with pytest.raises(CardNotFoundError):
            board_service.reorder_card(project, "MYP-999", MoveDirection.UP)


class TestColumns:
    """Tests for column management."""

    def test_add_column_defaults_to_last(self, board_service: BoardService, project: Path):
        board = board_service.add_column(project, "review", "Review")
        assert [c.id for c in board.columns][-1] == "review"
        assert board.get_column("review").order == 3

    def test_add_column_with_order(self, board_service: BoardService, project: Path):
        board = board_service.add_column(project, "backlog", "Backlog", order=-1)
        assert board.columns[0].id == "backlog"
        assert board_service.load(project).columns[0].id == "backlog"

    def test_add_duplicate_column(self, board_service: BoardService, project: Path):
        with pytest.raises(ColumnAlreadyExistsError):
            board_service.add_column(project, "todo", "Again")

    def test_add_blank_column(self, board_service: BoardService, project: Path):
        with pytest.raises(InvalidInputError):
            board_service.add_column(project, " ", "Name")

    def test_remove_column_relocates_cards(
        self, board_service: BoardService, card_service: CardService, project: Path
    ):
        card = card_service.create_card(project, "Doing", column_id="in_progress")

        board = board_service.remove_column(project, "in_progress")

        assert [c.id for c in board.columns] == ["todo", "done"]
        assert board.get_card(card.id).column_id == "todo"

    def test_remove_unknown_column(self, board_service: BoardService, project: Path):
        with pytest.raises(ColumnNotFoundError):
            board_service.remove_column(project, "nowhere")

    def test_remove_last_column(self, board_service: BoardService, project: Path):
        board_service.remove_column(project, "todo")
        board_service.remove_column(project, "in_progress")

        with pytest.raises(InvalidInputError):
            board_service.remove_column(project, "done")
