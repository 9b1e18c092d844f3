"""Card detail panel."""

from rich.markup import escape
from textual.widgets import Static

from ...models import Card
from ...utils import format_timestamp


class CardDetailPanel(Static):
    """Shows every field of one card."""

    DEFAULT_CSS = """
    CardDetailPanel {
        width: 70;
        height: auto;
        max-height: 80%;
        padding: 1 2;
        background: $surface;
        border: solid $primary;
    }
    """

    def show_card(self, card: Card, column_name: str) -> None:
        """Render the card's fields."""
        lines = [
            f"[bold]{card.id}[/]  {escape(card.title)}",
            "",
            f"[dim]Column:[/]      {escape(column_name)}",
            f"[dim]Assignee:[/]    {escape(card.assignee) if card.assignee else '-'}",
            f"[dim]Created:[/]     {format_timestamp(card.created_at)}",
            f"[dim]Updated:[/]     {format_timestamp(card.updated_at)}",
            "",
            escape(card.description) if card.description else "[dim italic]No description[/]",
            "",
            "[dim]e: edit  m: move  d: delete  Esc: back[/]",
        ]
        self.update("\n".join(lines))
