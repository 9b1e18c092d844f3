"""Card widget."""

from __future__ import annotations

from rich.markup import escape
from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import Static

from ...models import Card


class CardWidget(Widget):
    """A card displayed in a column.

    Highlight and selection come from the view state and are shown with the
    ``-highlighted`` and ``-selected`` classes.
    """

    DEFAULT_CSS = """
    CardWidget {
        height: auto;
        padding: 0 1;
        margin-bottom: 1;
        border: round $primary-darken-2;
    }

    CardWidget.-highlighted {
        border: round $accent;
    }

    CardWidget.-selected {
        border: double $warning;
        background: $boost;
    }

    CardWidget .card-id {
        color: $text-muted;
    }

    CardWidget .card-assignee {
        color: $success;
    }
    """

    def __init__(
        self,
        card_data: Card,
        highlighted: bool = False,
        selected: bool = False,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self._card_data = card_data
        self.set_class(highlighted, "-highlighted")
        self.set_class(selected, "-selected")

    @property
    def card(self) -> Card:
        """Get the card for this widget."""
        return self._card_data

    def compose(self) -> ComposeResult:
        """Create card layout."""
        yield Static(self._card_data.id, classes="card-id")
        yield Static(escape(self._truncate(self._card_data.title, 40)), classes="card-title")
        if self._card_data.assignee:
            yield Static(f"@{escape(self._card_data.assignee)}", classes="card-assignee")

    def _truncate(self, text: str, max_len: int) -> str:
        """Truncate text with ellipsis."""
        if len(text) <= max_len:
            return text
        return text[: max_len - 1] + "…"
