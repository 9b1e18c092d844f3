"""Footer with context hints and the last error."""

from rich.markup import escape
from textual.widgets import Static


class StatusBar(Static):
    """Single-line footer.

    Shows the last error in red when there is one, otherwise the key hints
    for the active view.
    """

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        width: 100%;
        padding: 0 1;
        background: $primary-darken-3;
    }

    StatusBar.-error {
        background: $error;
        color: $text;
    }
    """

    def show_status(self, hints: str, error_message: str | None = None) -> None:
        if error_message:
            self.add_class("-error")
            self.update(f"✗ {escape(error_message)}")
        else:
            self.remove_class("-error")
            self.update(hints)
