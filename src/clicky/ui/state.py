"""TUI view state.

The active view is exactly one of the ``View`` variants below. Selection,
form data and pending move targets live inside the variant that owns them,
so combinations such as "editing a form while a card is selected on the
board" cannot be expressed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# --- Board selection ---


@dataclass(frozen=True)
class NoSelection:
    """No card is highlighted."""


@dataclass(frozen=True)
class Highlighted:
    """Tentative cursor on a card, addressed by position in its column."""

    column: int
    card_index: int


@dataclass(frozen=True)
class Selected:
    """Confirmed selection anchored to a card ID."""

    card_id: str


Selection = NoSelection | Highlighted | Selected


# --- Card form ---


class FormField(str, Enum):
    """Fields of the card form, in focus order."""

    TITLE = "title"
    DESCRIPTION = "description"
    ASSIGNEE = "assignee"

    def next(self) -> FormField:
        members = list(FormField)
        return members[(members.index(self) + 1) % len(members)]

    def previous(self) -> FormField:
        members = list(FormField)
        return members[(members.index(self) - 1) % len(members)]

    @property
    def label(self) -> str:
        return self.value.capitalize()


class InputMode(str, Enum):
    """Whether keystrokes navigate the form or edit the focused field."""

    NORMAL = "normal"
    EDITING = "editing"


@dataclass
class CardFormData:
    """In-progress values of the card form."""

    title: str = ""
    description: str = ""
    assignee: str = ""
    current_field: FormField = FormField.TITLE
    input_mode: InputMode = InputMode.NORMAL

    def get(self, form_field: FormField) -> str:
        return getattr(self, form_field.value)

    def set(self, form_field: FormField, value: str) -> None:
        setattr(self, form_field.value, value)

    @property
    def current_value(self) -> str:
        return self.get(self.current_field)

    @current_value.setter
    def current_value(self, value: str) -> None:
        self.set(self.current_field, value)


@dataclass(frozen=True)
class CreateMode:
    """Form creates a new card in a column."""

    column_id: str


@dataclass(frozen=True)
class EditMode:
    """Form edits an existing card."""

    card_id: str


FormMode = CreateMode | EditMode


# --- Views ---


@dataclass(frozen=True)
class BoardView:
    """Browsing the board."""

    selected_column: int = 0
    selection: Selection = field(default_factory=NoSelection)


@dataclass(frozen=True)
class CardDetailView:
    """Viewing one card's details."""

    card_id: str


@dataclass(frozen=True)
class CardFormView:
    """Creating or editing a card. ``form`` is mutated while typing."""

    mode: FormMode
    form: CardFormData = field(default_factory=CardFormData)


@dataclass(frozen=True)
class MoveCardView:
    """Choosing a destination column; nothing is committed until confirm."""

    card_id: str
    target_column_index: int


@dataclass(frozen=True)
class ConfirmDeleteView:
    """Waiting for a yes/no on deleting a card."""

    card_id: str


@dataclass(frozen=True)
class HelpView:
    """Help overlay; ``previous`` is restored verbatim on close."""

    previous: View


View = BoardView | CardDetailView | CardFormView | MoveCardView | ConfirmDeleteView | HelpView
