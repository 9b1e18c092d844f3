"""Move and delete confirmation dialogs."""

from rich.markup import escape
from textual.widgets import Static

from ...models import Card, Column


class MoveCardDialog(Static):
    """Lists the columns with the pending target marked."""

    DEFAULT_CSS = """
    MoveCardDialog {
        width: 50;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: solid $primary;
    }
    """

    def show_target(self, card: Card, columns: list[Column], target_index: int) -> None:
        lines = [f"[bold]Move {card.id}[/] {escape(card.title)}", ""]
        for index, column in enumerate(columns):
            marker = ">" if index == target_index else " "
            name = escape(column.name)
            if index == target_index:
                name = f"[reverse]{name}[/]"
            current = " [dim](current)[/]" if column.id == card.column_id else ""
            lines.append(f" {marker} {name}{current}")
        lines.append("")
        lines.append("[dim]h/l: choose column  Enter: move  Esc: cancel[/]")
        self.update("\n".join(lines))


class ConfirmDeleteDialog(Static):
    """Yes/no prompt before deleting a card."""

    DEFAULT_CSS = """
    ConfirmDeleteDialog {
        width: 50;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: thick $error;
    }
    """

    def show_card(self, card: Card) -> None:
        self.update(
            f"[bold]Delete card?[/]\n\n{card.id}  {escape(card.title)}\n\n"
            "[dim]y: delete  n/Esc: cancel[/]"
        )
