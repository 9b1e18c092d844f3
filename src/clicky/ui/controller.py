"""View state machine for the TUI.

``BoardController`` owns the cached board, the active ``View`` and the last
error message. Each key press advances the view by one transition. Every
mutating action is a service round trip followed by a reload, so the cached
board always matches what was just persisted. Rendering reads the controller
and never changes it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import ClickyError, EdgeOfSequenceError
from ..models import Board, Card, Column, FieldUpdate
from ..services import BoardService, CardService, MoveDirection
from .state import (
    BoardView,
    CardDetailView,
    CardFormData,
    CardFormView,
    ConfirmDeleteView,
    CreateMode,
    EditMode,
    HelpView,
    Highlighted,
    InputMode,
    MoveCardView,
    NoSelection,
    Selected,
    View,
)

logger = logging.getLogger(__name__)

LEFT_KEYS = {"left", "h"}
RIGHT_KEYS = {"right", "l"}
UP_KEYS = {"up", "k"}
DOWN_KEYS = {"down", "j"}
HELP_KEYS = {"?", "question_mark"}


class BoardController:
    """Board cache plus the unified view state of the TUI."""

    def __init__(
        self,
        base_path: Path,
        board_service: BoardService | None = None,
        card_service: CardService | None = None,
    ) -> None:
        self.base_path = base_path
        self.board_service = board_service or BoardService()
        self.card_service = card_service or CardService(self.board_service)
        self.board: Board | None = None
        self.view: View = BoardView()
        self.error_message: str | None = None
        self.should_quit = False

    # --- Board cache ---

    def load_board(self) -> bool:
        """(Re)load the board from storage. Returns False on failure."""
        try:
            self.board = self.board_service.load(self.base_path)
        except ClickyError as e:
            logger.debug("load_board failed: %s", e)
            self.error_message = str(e)
            return False
        self.error_message = None
        return True

    def reload(self) -> None:
        """Reload after a mutation and drop view state that no longer resolves."""
        if self.load_board():
            self.view = self._revalidate(self.view)

    @property
    def columns(self) -> list[Column]:
        return self.board.columns if self.board else []

    def column_cards(self, column_index: int) -> list[Card]:
        """Cards of a column in manual order."""
        if self.board is None or not 0 <= column_index < len(self.board.columns):
            return []
        return self.board.ordered_cards(self.board.columns[column_index].id)

    def get_card(self, card_id: str) -> Card | None:
        return self.board.get_card(card_id) if self.board else None

    def card_position(self, card_id: str) -> tuple[int, int] | None:
        """(column_index, card_index) of a card, or None."""
        for col_idx in range(len(self.columns)):
            for card_idx, card in enumerate(self.column_cards(col_idx)):
                if card.id == card_id:
                    return col_idx, card_idx
        return None

    @property
    def current_column(self) -> Column | None:
        """Column under the board cursor."""
        view = self.base_view()
        if isinstance(view, BoardView) and 0 <= view.selected_column < len(self.columns):
            return self.columns[view.selected_column]
        return None

    @property
    def current_card_id(self) -> str | None:
        """Card the active view refers to, if any."""
        view = self.base_view()
        if isinstance(view, BoardView):
            if isinstance(view.selection, Selected):
                return view.selection.card_id
            if isinstance(view.selection, Highlighted):
                cards = self.column_cards(view.selection.column)
                if 0 <= view.selection.card_index < len(cards):
                    return cards[view.selection.card_index].id
            return None
        if isinstance(view, CardFormView):
            return view.mode.card_id if isinstance(view.mode, EditMode) else None
        return view.card_id

    @property
    def current_card(self) -> Card | None:
        card_id = self.current_card_id
        return self.get_card(card_id) if card_id else None

    # --- Input dispatch ---

    def handle_key(self, key: str, character: str | None = None) -> None:
        """
        Apply one key press to the active view.

        Args:
            key: Key name (e.g. "left", "enter", "k", "shift+up")
            character: Printable character for the key, if any
        """
        if character is None and len(key) == 1:
            character = key
        self.error_message = None

        view = self.view
        if isinstance(view, HelpView):
            if key in HELP_KEYS or character == "?" or key in {"escape", "q"}:
                self.toggle_help()
        elif isinstance(view, CardFormView):
            self._handle_form_key(view, key, character)
        elif key in HELP_KEYS or character == "?":
            self.toggle_help()
        elif isinstance(view, BoardView):
            self._handle_board_key(key)
        elif isinstance(view, CardDetailView):
            self._handle_detail_key(key)
        elif isinstance(view, MoveCardView):
            self._handle_move_key(key)
        elif isinstance(view, ConfirmDeleteView):
            self._handle_confirm_delete_key(key)

    def _handle_board_key(self, key: str) -> None:
        if key in LEFT_KEYS:
            self.navigate_column(-1)
        elif key in RIGHT_KEYS:
            self.navigate_column(1)
        elif key in UP_KEYS:
            self.navigate_card(-1)
        elif key in DOWN_KEYS:
            self.navigate_card(1)
        elif key in {"g", "home"}:
            self.navigate_to_card(0)
        elif key in {"G", "end"}:
            self.navigate_to_card(-1)
        elif key in {"K", "shift+up"}:
            self.reorder_card(MoveDirection.UP)
        elif key in {"J", "shift+down"}:
            self.reorder_card(MoveDirection.DOWN)
        elif key == "enter":
            self.confirm_selection()
        elif key == "escape":
            self.clear_selection()
        elif key in {"n", "c"}:
            self.start_create_card()
        elif key == "m":
            self.start_move_card()
        elif key == "r":
            self.reload()
        elif key == "q":
            self.should_quit = True

    def _handle_detail_key(self, key: str) -> None:
        if key == "e":
            self.start_edit_card()
        elif key == "d":
            self.request_delete()
        elif key == "m":
            self.start_move_card()
        elif key in {"escape", "q"}:
            self.close_detail()

    def _handle_form_key(self, view: CardFormView, key: str, character: str | None) -> None:
        form = view.form
        if form.input_mode == InputMode.EDITING:
            if key == "enter":
                form.input_mode = InputMode.NORMAL
                self.next_form_field()
            elif key == "escape":
                form.input_mode = InputMode.NORMAL
            elif key == "tab":
                self.next_form_field()
            elif key == "shift+tab":
                self.previous_form_field()
            elif key == "backspace":
                self.form_backspace()
            elif character and character.isprintable():
                self.form_type(character)
            return

        if key in {"down", "tab"}:
            self.next_form_field()
        elif key in {"up", "shift+tab"}:
            self.previous_form_field()
        elif key == "enter":
            self.submit_form()
        elif key == "escape":
            self.cancel_form()
        elif key in HELP_KEYS or character == "?":
            self.toggle_help()
        elif key == "backspace":
            self.form_backspace()
        elif character and character.isprintable():
            self.form_type(character)

    def _handle_move_key(self, key: str) -> None:
        if key in LEFT_KEYS:
            self.move_target(-1)
        elif key in RIGHT_KEYS:
            self.move_target(1)
        elif key == "enter":
            self.confirm_move_card()
        elif key == "escape":
            self.cancel_move_card()

    def _handle_confirm_delete_key(self, key: str) -> None:
        if key in {"y", "Y"}:
            self.confirm_delete()
        elif key in {"n", "N", "escape"}:
            self.cancel_delete()

    # --- Board view ---

    def navigate_column(self, delta: int) -> None:
        """Move the column cursor, or quick-move the selected card."""
        view = self.view
        if not isinstance(view, BoardView):
            return
        if isinstance(view.selection, Selected):
            self.quick_move_card(delta)
            return
        if not self.columns:
            return

        new_column = max(0, min(view.selected_column + delta, len(self.columns) - 1))
        if new_column != view.selected_column:
            # Highlight does not survive a column change
            self.view = BoardView(selected_column=new_column)

    def navigate_card(self, delta: int) -> None:
        """Move the card cursor within the current column."""
        view = self.view
        if not isinstance(view, BoardView):
            return
        count = len(self.column_cards(view.selected_column))
        if count == 0:
            return

        selection = view.selection
        if isinstance(selection, NoSelection):
            index = 0 if delta > 0 else count - 1
        elif isinstance(selection, Highlighted):
            index = max(0, min(selection.card_index + delta, count - 1))
        else:
            position = self.card_position(selection.card_id)
            current = position[1] if position else 0
            index = max(0, min(current + delta, count - 1))

        self.view = BoardView(view.selected_column, Highlighted(view.selected_column, index))

    def navigate_to_card(self, index: int) -> None:
        """Highlight a card by index in the current column (-1 for last)."""
        view = self.view
        if not isinstance(view, BoardView):
            return
        count = len(self.column_cards(view.selected_column))
        if count == 0:
            return
        index = count - 1 if index < 0 else min(index, count - 1)
        self.view = BoardView(view.selected_column, Highlighted(view.selected_column, index))

    def confirm_selection(self) -> None:
        """Enter: highlight the first card, select it, then open its details."""
        view = self.view
        if not isinstance(view, BoardView):
            return

        selection = view.selection
        if isinstance(selection, NoSelection):
            if self.column_cards(view.selected_column):
                self.view = BoardView(view.selected_column, Highlighted(view.selected_column, 0))
        elif isinstance(selection, Highlighted):
            card_id = self.current_card_id
            if card_id is not None:
                self.view = BoardView(view.selected_column, Selected(card_id))
        else:
            self.open_card_detail()

    def clear_selection(self) -> None:
        """Escape: selected -> highlighted -> nothing."""
        view = self.view
        if not isinstance(view, BoardView):
            return
        if isinstance(view.selection, Selected):
            position = self.card_position(view.selection.card_id)
            if position is not None:
                self.view = BoardView(position[0], Highlighted(*position))
                return
        self.view = BoardView(view.selected_column)

    def open_card_detail(self) -> None:
        """Open the detail view of the selected card."""
        view = self.view
        if isinstance(view, BoardView) and isinstance(view.selection, Selected):
            self.view = CardDetailView(view.selection.card_id)

    def quick_move_card(self, delta: int) -> None:
        """Move the selected card to the adjacent column, keeping it selected."""
        view = self.view
        if not isinstance(view, BoardView) or not isinstance(view.selection, Selected):
            return

        card_id = view.selection.card_id
        card = self.get_card(card_id)
        source_index = self.board.column_index(card.column_id) if self.board and card else None
        if source_index is None:
            return

        target_index = source_index + delta
        if not 0 <= target_index < len(self.columns):
            return

        try:
            self.card_service.move_card(self.base_path, card_id, self.columns[target_index].id)
        except ClickyError as e:
            self.error_message = f"Failed to move card: {e}"
            return

        self.view = BoardView(target_index, Selected(card_id))
        self.reload()

    def reorder_card(self, direction: MoveDirection) -> None:
        """Move the highlighted or selected card up/down within its column."""
        view = self.view
        card_id = self.current_card_id
        if not isinstance(view, BoardView) or card_id is None:
            return

        try:
            self.board_service.reorder_card(self.base_path, card_id, direction)
        except EdgeOfSequenceError:
            return
        except ClickyError as e:
            self.error_message = f"Failed to reorder card: {e}"
            return

        self.reload()
        if isinstance(view.selection, Highlighted):
            # Cursor follows the card
            position = self.card_position(card_id)
            if position is not None:
                self.view = BoardView(position[0], Highlighted(*position))

    # --- Card detail ---

    def close_detail(self) -> None:
        """Back to the board on the card's column, with nothing selected."""
        view = self.view
        if isinstance(view, CardDetailView):
            self.view = self._board_view_for(view.card_id)

    # --- Card form ---

    def start_create_card(self) -> None:
        """Open an empty form creating a card in the current column."""
        column = self.current_column
        if column is None:
            return
        self.view = CardFormView(CreateMode(column.id))

    def start_edit_card(self) -> None:
        """Open the form pre-filled with the current card."""
        card = self.current_card
        if card is None:
            return
        form = CardFormData(
            title=card.title,
            description=card.description or "",
            assignee=card.assignee or "",
        )
        self.view = CardFormView(EditMode(card.id), form)

    def next_form_field(self) -> None:
        if isinstance(self.view, CardFormView):
            form = self.view.form
            form.current_field = form.current_field.next()

    def previous_form_field(self) -> None:
        if isinstance(self.view, CardFormView):
            form = self.view.form
            form.current_field = form.current_field.previous()

    def form_type(self, character: str) -> None:
        """Append a character to the focused field, entering edit mode."""
        if isinstance(self.view, CardFormView):
            form = self.view.form
            form.input_mode = InputMode.EDITING
            form.current_value += character

    def form_backspace(self) -> None:
        if isinstance(self.view, CardFormView):
            form = self.view.form
            form.input_mode = InputMode.EDITING
            form.current_value = form.current_value[:-1]

    def submit_form(self) -> None:
        """
        Save the form through the card service.

        An empty title or a failing service call leaves the form and its data
        in place with an error message.
        """
        view = self.view
        if not isinstance(view, CardFormView):
            return

        form = view.form
        title = form.title.strip()
        if not title:
            self.error_message = "Title is required"
            return

        try:
            if isinstance(view.mode, CreateMode):
                card = self.card_service.create_card(
                    self.base_path,
                    title,
                    description=form.description,
                    assignee=form.assignee,
                    column_id=view.mode.column_id,
                )
            else:
                card = self.card_service.update_card(
                    self.base_path,
                    view.mode.card_id,
                    title=title,
                    description=FieldUpdate.from_input(form.description),
                    assignee=FieldUpdate.from_input(form.assignee),
                )
        except ClickyError as e:
            self.error_message = f"Failed to save card: {e}"
            return

        self.reload()
        self.view = self._board_view_for(card.id)

    def cancel_form(self) -> None:
        """Discard the form and return to the board."""
        view = self.view
        if not isinstance(view, CardFormView):
            return
        if isinstance(view.mode, EditMode):
            self.view = self._board_view_for(view.mode.card_id)
        else:
            index = self.board.column_index(view.mode.column_id) if self.board else None
            self.view = BoardView(index or 0)

    # --- Move dialog ---

    def start_move_card(self) -> None:
        """Open the move dialog targeting the card's current column."""
        card = self.current_card
        if card is None or self.board is None:
            return
        index = self.board.column_index(card.column_id)
        self.view = MoveCardView(card.id, index or 0)

    def move_target(self, delta: int) -> None:
        """Shift the pending target column, clamped to the board."""
        view = self.view
        if not isinstance(view, MoveCardView) or not self.columns:
            return
        target = max(0, min(view.target_column_index + delta, len(self.columns) - 1))
        self.view = MoveCardView(view.card_id, target)

    def confirm_move_card(self) -> None:
        """Commit the move and show the card's details."""
        view = self.view
        if not isinstance(view, MoveCardView):
            return
        if not 0 <= view.target_column_index < len(self.columns):
            return

        card = self.get_card(view.card_id)
        target = self.columns[view.target_column_index]
        if card is not None and card.column_id != target.id:
            try:
                self.card_service.move_card(self.base_path, view.card_id, target.id)
            except ClickyError as e:
                self.error_message = f"Failed to move card: {e}"
                return
            self.reload()

        self.view = CardDetailView(view.card_id)

    def cancel_move_card(self) -> None:
        view = self.view
        if isinstance(view, MoveCardView):
            self.view = CardDetailView(view.card_id)

    # --- Delete confirmation ---

    def request_delete(self) -> None:
        view = self.view
        if isinstance(view, CardDetailView):
            self.view = ConfirmDeleteView(view.card_id)

    def confirm_delete(self) -> None:
        """Delete the card and return to the board."""
        view = self.view
        if not isinstance(view, ConfirmDeleteView):
            return

        board_view = self._board_view_for(view.card_id)
        try:
            self.card_service.delete_card(self.base_path, view.card_id)
        except ClickyError as e:
            self.error_message = f"Failed to delete: {e}"
            return

        self.view = board_view
        self.reload()

    def cancel_delete(self) -> None:
        view = self.view
        if isinstance(view, ConfirmDeleteView):
            self.view = CardDetailView(view.card_id)

    # --- Help ---

    def toggle_help(self) -> None:
        """Show help over the current view, or restore the view under it."""
        if isinstance(self.view, HelpView):
            self.view = self.view.previous
        else:
            self.view = HelpView(self.view)

    # --- Helpers ---

    def base_view(self) -> View:
        """The active view, looking through the help overlay."""
        view = self.view
        while isinstance(view, HelpView):
            view = view.previous
        return view

    def _board_view_for(self, card_id: str) -> BoardView:
        """Board view on the column holding card_id, nothing selected."""
        card = self.get_card(card_id)
        index = self.board.column_index(card.column_id) if self.board and card else None
        if index is None:
            current = self.base_view()
            index = current.selected_column if isinstance(current, BoardView) else 0
        return BoardView(self._clamp_column(index))

    def _clamp_column(self, index: int) -> int:
        return max(0, min(index, len(self.columns) - 1))

    def _revalidate(self, view: View) -> View:
        """Adjust a view so its indices and card IDs resolve on the current board."""
        if isinstance(view, HelpView):
            return HelpView(self._revalidate(view.previous))

        if isinstance(view, BoardView):
            column = self._clamp_column(view.selected_column)
            selection = view.selection
            if isinstance(selection, Selected):
                position = self.card_position(selection.card_id)
                if position is None:
                    return BoardView(column)
                # Selection is anchored to the card, follow it
                return BoardView(position[0], selection)
            if isinstance(selection, Highlighted):
                count = len(self.column_cards(column))
                if count == 0:
                    return BoardView(column)
                return BoardView(column, Highlighted(column, min(selection.card_index, count - 1)))
            return BoardView(column)

        if isinstance(view, CardFormView):
            if isinstance(view.mode, EditMode) and self.get_card(view.mode.card_id) is None:
                return BoardView()
            return view

        if self.get_card(view.card_id) is None:
            return BoardView()
        if isinstance(view, MoveCardView):
            return MoveCardView(view.card_id, self._clamp_column(view.target_column_index))
        return view
