"""Main kanban board screen."""

from __future__ import annotations

import logging

from textual import events
from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import Screen
from textual.widgets import Header

from ..controller import BoardController
from ..state import (
    BoardView,
    CardDetailView,
    CardFormView,
    ConfirmDeleteView,
    CreateMode,
    HelpView,
    Highlighted,
    InputMode,
    MoveCardView,
    Selected,
    View,
)
from ..widgets import (
    CardDetailPanel,
    CardFormPanel,
    ConfirmDeleteDialog,
    HelpPanel,
    KanbanColumn,
    MoveCardDialog,
    StatusBar,
)
from ..widgets.column import css_id

logger = logging.getLogger(__name__)

BOARD_HINTS = "h/l: column  j/k: card  Enter: select  n: new  m: move  K/J: reorder  ?: help  q: quit"
SELECTED_HINTS = "h/l: move card  Enter: details  K/J: reorder  m: move  Esc: deselect  ?: help"
DETAIL_HINTS = "e: edit  m: move  d: delete  Esc: back  ?: help"
FORM_NORMAL_HINTS = "Type to edit  Tab: next field  Enter: save  Esc: cancel"
FORM_EDITING_HINTS = "Editing  Enter: next field  Esc: stop editing"
MOVE_HINTS = "h/l: choose column  Enter: move  Esc: cancel"
DELETE_HINTS = "y: delete  n/Esc: cancel"
HELP_HINTS = "?/Esc: close help"


def hints_for(view: View) -> str:
    """Footer hints for the active view."""
    if isinstance(view, HelpView):
        return HELP_HINTS
    if isinstance(view, BoardView):
        return SELECTED_HINTS if isinstance(view.selection, Selected) else BOARD_HINTS
    if isinstance(view, CardDetailView):
        return DETAIL_HINTS
    if isinstance(view, CardFormView):
        if view.form.input_mode == InputMode.EDITING:
            return FORM_EDITING_HINTS
        return FORM_NORMAL_HINTS
    if isinstance(view, MoveCardView):
        return MOVE_HINTS
    return DELETE_HINTS


class BoardScreen(Screen, inherit_bindings=False):
    """Kanban board with overlays driven by the controller's view state.

    Nothing on this screen takes focus: every key press goes to the
    controller and the screen is redrawn from the resulting state.
    """

    LAYERS = ["base", "overlay"]

    DEFAULT_CSS = """
    BoardScreen #columns {
        layer: base;
        height: 1fr;
    }

    BoardScreen #overlay {
        layer: overlay;
        width: 100%;
        height: 100%;
        align: center middle;
        display: none;
    }

    BoardScreen #overlay.-visible {
        display: block;
    }

    BoardScreen #overlay > * {
        display: none;
    }

    BoardScreen #overlay > .-active {
        display: block;
    }
    """

    def __init__(self, controller: BoardController, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.controller = controller
        self._column_ids: list[str] = []

    def compose(self) -> ComposeResult:
        yield Header()
        yield Horizontal(id="columns")
        with Container(id="overlay"):
            yield CardDetailPanel(id="card-detail")
            yield CardFormPanel(id="card-form")
            yield MoveCardDialog(id="move-card")
            yield ConfirmDeleteDialog(id="confirm-delete")
            yield HelpPanel(id="help")
        yield StatusBar(id="status-bar")

    async def on_mount(self) -> None:
        """Load the board when the screen mounts."""
        self.controller.load_board()
        await self.render_view()

    async def on_key(self, event: events.Key) -> None:
        """Forward the key to the controller and redraw."""
        event.stop()
        event.prevent_default()

        self.controller.handle_key(event.key, event.character)
        if self.controller.should_quit:
            self.app.exit()
            return
        await self.render_view()

    async def render_view(self) -> None:
        """Redraw the board, the active overlay and the footer."""
        controller = self.controller
        if controller.board is not None:
            self.app.sub_title = controller.board.name

        await self._sync_columns()
        self._render_columns()
        self._render_overlay(controller.view)

        status = self.query_one(StatusBar)
        status.show_status(hints_for(controller.view), controller.error_message)

    async def _sync_columns(self) -> None:
        """Rebuild the column widgets when the board's columns changed."""
        column_ids = [column.id for column in self.controller.columns]
        if column_ids == self._column_ids:
            return

        container = self.query_one("#columns", Horizontal)
        await container.remove_children()
        await container.mount_all(
            KanbanColumn(
                title=column.name,
                column_id=column.id,
                id=f"column-{css_id(column.id)}",
            )
            for column in self.controller.columns
        )
        self._column_ids = column_ids
        logger.debug("Columns rebuilt: %s", column_ids)

    def _render_columns(self) -> None:
        controller = self.controller
        board_view = controller.base_view()
        current_index = board_view.selected_column if isinstance(board_view, BoardView) else None
        selection = board_view.selection if isinstance(board_view, BoardView) else None

        for index, widget in enumerate(self.query(KanbanColumn)):
            widget.set_class(index == current_index, "-current")

            highlighted = None
            if isinstance(selection, Highlighted) and selection.column == index:
                highlighted = selection.card_index
            selected_id = selection.card_id if isinstance(selection, Selected) else None

            widget.set_cards(controller.column_cards(index), highlighted, selected_id)

    def _render_overlay(self, view: View) -> None:
        controller = self.controller
        overlay = self.query_one("#overlay", Container)
        for child in overlay.children:
            child.remove_class("-active")

        active = None
        if isinstance(view, HelpView):
            active = self.query_one(HelpPanel)
        elif isinstance(view, CardDetailView):
            card = controller.get_card(view.card_id)
            if card is not None and controller.board is not None:
                column = controller.board.get_column(card.column_id)
                active = self.query_one(CardDetailPanel)
                active.show_card(card, column.name if column else card.column_id)
        elif isinstance(view, CardFormView):
            if isinstance(view.mode, CreateMode):
                column = controller.board.get_column(view.mode.column_id) if controller.board else None
                heading = f"New card in {column.name if column else view.mode.column_id}"
            else:
                heading = f"Edit {view.mode.card_id}"
            active = self.query_one(CardFormPanel)
            active.show_form(heading, view.form)
        elif isinstance(view, MoveCardView):
            card = controller.get_card(view.card_id)
            if card is not None:
                active = self.query_one(MoveCardDialog)
                active.show_target(card, controller.columns, view.target_column_index)
        elif isinstance(view, ConfirmDeleteView):
            card = controller.get_card(view.card_id)
            if card is not None:
                active = self.query_one(ConfirmDeleteDialog)
                active.show_card(card)

        if active is not None:
            active.add_class("-active")
        overlay.set_class(active is not None, "-visible")
