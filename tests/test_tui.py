"""Smoke tests for the Textual app driving the board controller."""

from pathlib import Path

import pytest

from clicky.app import ClickyApp
from clicky.config import Settings
from clicky.services import BoardService, CardService
from clicky.ui.state import BoardView, CardDetailView, HelpView, Highlighted, Selected
from clicky.ui.widgets import CardDetailPanel, CardWidget, HelpPanel, KanbanColumn, StatusBar


@pytest.fixture
def project(tmp_path: Path) -> Path:
    board_service = BoardService()
    board_service.initialize(tmp_path, "tui")
    card_service = CardService(board_service)
    card_service.create_card(tmp_path, "First")
    card_service.create_card(tmp_path, "Second", column_id="done")
    return tmp_path


@pytest.fixture
def app(project: Path) -> ClickyApp:
    return ClickyApp(Settings(project_root=project))


@pytest.mark.asyncio
async def test_renders_columns_and_cards(app: ClickyApp):
    """One column widget per board column, cards inside."""
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.pause()
        columns = list(app.screen.query(KanbanColumn))
        assert [c.column_id for c in columns] == ["todo", "in_progress", "done"]
        assert [w.card.id for w in columns[0].query(CardWidget)] == ["TUI-001"]


@pytest.mark.asyncio
async def test_keys_drive_controller(app: ClickyApp):
    """Key presses reach the controller and the view is redrawn."""
    async with app.run_test() as pilot:
        await pilot.press("j")
        assert app.controller.view == BoardView(0, Highlighted(0, 0))

        await pilot.press("enter")
        assert app.controller.view == BoardView(0, Selected("TUI-001"))

        await pilot.press("enter")
        assert app.controller.view == CardDetailView("TUI-001")
        assert app.screen.query_one(CardDetailPanel).has_class("-active")

        await pilot.press("escape")
        assert not app.screen.query_one(CardDetailPanel).has_class("-active")


@pytest.mark.asyncio
async def test_help_overlay(app: ClickyApp):
    async with app.run_test() as pilot:
        await pilot.press("question_mark")
        assert isinstance(app.controller.view, HelpView)
        assert app.screen.query_one(HelpPanel).has_class("-active")

        await pilot.press("escape")
        assert not app.screen.query_one(HelpPanel).has_class("-active")


@pytest.mark.asyncio
async def test_missing_board_shows_error(tmp_path: Path):
    app = ClickyApp(Settings(project_root=tmp_path))
    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.controller.error_message is not None
        assert app.screen.query_one(StatusBar).has_class("-error")


@pytest.mark.asyncio
async def test_q_quits(app: ClickyApp):
    async with app.run_test() as pilot:
        await pilot.press("q")
        await pilot.pause()
        assert app.controller.should_quit


@pytest.mark.asyncio
async def test_column_name_with_markup(project: Path):
    """Column names are shown literally, brackets included."""
    BoardService().add_column(project, "x", "[/bold] review")
    app = ClickyApp(Settings(project_root=project))

    async with app.run_test() as pilot:
        await pilot.press("l")
        await pilot.pause()
        column = app.screen.query_one("#column-x", KanbanColumn)
        assert column.title == "[/bold] review"
        assert app.controller.view == BoardView(1)
