"""Kanban column widget."""

import re

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.css.query import NoMatches
from textual.widget import Widget
from textual.widgets import Static

from ...models import Card
from .card import CardWidget


def css_id(identifier: str) -> str:
    """Generate a CSS-safe ID from a card or column identifier."""
    safe_id = re.sub(r"[^a-zA-Z0-9\-]", "-", identifier)
    safe_id = safe_id.strip("-").lower()
    return safe_id or "item"


class CardListScroll(VerticalScroll, can_focus=False):
    """Scrollable card list that never takes focus.

    Keys then reach the board screen, which hands them to the controller.
    """


class EmptyColumnMessage(Static):
    """Displayed when a column has no cards."""

    pass


class KanbanColumn(Widget):
    """A single column in the kanban board."""

    DEFAULT_CSS = """
    KanbanColumn {
        width: 1fr;
        height: 100%;
        border: solid $primary-darken-3;
        margin: 0 1;
    }

    KanbanColumn.-current {
        border: solid $accent;
    }

    KanbanColumn .column-header {
        width: 100%;
        text-align: center;
        text-style: bold;
        background: $primary-darken-2;
    }

    KanbanColumn EmptyColumnMessage {
        color: $text-muted;
        text-align: center;
        padding: 1;
    }
    """

    def __init__(self, title: str, column_id: str, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.title = title
        self.column_id = column_id
        self._cards: list[Card] = []
        self._highlighted: int | None = None
        self._selected_id: str | None = None

    @property
    def _column_css_id(self) -> str:
        return css_id(self.column_id)

    def compose(self) -> ComposeResult:
        """Create column layout."""
        yield Static(self._header_text, classes="column-header", id=f"header-{self._column_css_id}")
        yield CardListScroll(classes="column-content", id=f"content-{self._column_css_id}")

    @property
    def _header_text(self) -> str:
        """Header text with styled card count."""
        return f"{escape(self.title)} [dim]({len(self._cards)})[/]"

    def set_cards(
        self,
        cards: list[Card],
        highlighted: int | None = None,
        selected_id: str | None = None,
    ) -> None:
        """
        Set the cards for this column.

        Args:
            cards: Cards in manual column order
            highlighted: Index of the highlighted card, if any
            selected_id: ID of the selected card, if it is in this column
        """
        self._cards = cards
        self._highlighted = highlighted
        self._selected_id = selected_id
        self.call_after_refresh(self._refresh_cards)

    async def _refresh_cards(self) -> None:
        """Rebuild the card widgets in this column."""
        content_id = f"#content-{self._column_css_id}"
        try:
            content = self.query_one(content_id, CardListScroll)
        except NoMatches as e:
            self.log.error(f"Cannot find {content_id}: {e}")
            return

        await content.remove_children()

        if not self._cards:
            await content.mount(EmptyColumnMessage("No cards"))
        else:
            active_widget = None
            for index, card in enumerate(self._cards):
                widget = CardWidget(
                    card,
                    highlighted=index == self._highlighted,
                    selected=card.id == self._selected_id,
                )
                await content.mount(widget)
                if index == self._highlighted or card.id == self._selected_id:
                    active_widget = widget
            if active_widget is not None:
                active_widget.scroll_visible()

        header = self.query_one(f"#header-{self._column_css_id}", Static)
        header.update(self._header_text)

    @property
    def cards(self) -> list[Card]:
        """Get the cards in this column."""
        return self._cards
