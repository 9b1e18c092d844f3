"""clicky TUI Application."""

import logging

from textual.app import App

from .config import Settings
from .repositories import JsonBoardRepository
from .services import BoardService, CardService
from .ui.controller import BoardController
from .ui.screens.board import BoardScreen

logger = logging.getLogger(__name__)


class ClickyApp(App):
    """clicky - Terminal Kanban TUI."""

    TITLE = "clicky"

    CSS_PATH = "ui/styles.tcss"

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self._init_services()

    def _init_services(self) -> None:
        """Initialize repository, services and the view controller."""
        self.repository = JsonBoardRepository(self.settings.board_dir, self.settings.board_file)
        self.board_service = BoardService(self.repository)
        self.card_service = CardService(self.board_service)
        self.controller = BoardController(
            self.settings.project_root,
            self.board_service,
            self.card_service,
        )

    def on_mount(self) -> None:
        """Called when app is mounted."""
        logger.info("TUI started for %s", self.settings.project_root)
        self.push_screen(BoardScreen(self.controller))


def run(settings: Settings | None = None) -> None:
    """Run the clicky TUI application."""
    app = ClickyApp(settings=settings)
    app.run()
