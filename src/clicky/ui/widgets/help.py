"""Help overlay listing keyboard shortcuts."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Static


class HelpPanel(Vertical):
    """Keyboard shortcut reference shown over the board."""

    DEFAULT_CSS = """
    HelpPanel {
        width: 64;
        height: auto;
        max-height: 90%;
        padding: 1 2;
        background: $surface;
        border: solid $primary;
    }

    HelpPanel .help-title {
        text-align: center;
        text-style: bold;
        padding-bottom: 1;
        border-bottom: solid $primary-darken-2;
    }

    HelpPanel .help-section {
        height: auto;
        padding: 1 0 0 0;
    }

    HelpPanel .section-title {
        text-style: bold;
        color: $primary;
    }

    HelpPanel .help-row {
        height: 1;
    }

    HelpPanel .help-key {
        width: 18;
        text-style: bold;
    }

    HelpPanel .help-desc {
        width: 1fr;
        color: $text-muted;
    }

    HelpPanel .help-footer {
        text-align: center;
        color: $text-muted;
        padding-top: 1;
        border-top: solid $primary-darken-2;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static("Keyboard Shortcuts", classes="help-title")

        with Vertical(classes="help-section"):
            yield Static("Board", classes="section-title")
            yield self._help_row("h / Left", "Previous column")
            yield self._help_row("l / Right", "Next column")
            yield self._help_row("k / Up", "Previous card")
            yield self._help_row("j / Down", "Next card")
            yield self._help_row("g / G", "First / last card")
            yield self._help_row("Enter", "Select card / open details")
            yield self._help_row("h / l (selected)", "Move card to adjacent column")
            yield self._help_row("K / Shift+Up", "Move card up")
            yield self._help_row("J / Shift+Down", "Move card down")
            yield self._help_row("Escape", "Clear selection")

        with Vertical(classes="help-section"):
            yield Static("Cards", classes="section-title")
            yield self._help_row("n", "Create card in column")
            yield self._help_row("e", "Edit card (details)")
            yield self._help_row("m", "Move card to column")
            yield self._help_row("d", "Delete card (details)")

        with Vertical(classes="help-section"):
            yield Static("Form", classes="section-title")
            yield self._help_row("Tab / Up / Down", "Change field")
            yield self._help_row("Type", "Edit the focused field")
            yield self._help_row("Enter", "Finish field / save card")
            yield self._help_row("Escape", "Stop editing / cancel")

        with Vertical(classes="help-section"):
            yield Static("General", classes="section-title")
            yield self._help_row("r", "Reload board")
            yield self._help_row("?", "Toggle this help")
            yield self._help_row("q", "Quit")

        yield Static("Press ? or Escape to close", classes="help-footer")

    def _help_row(self, key: str, description: str) -> Horizontal:
        """Create a help row with key and description."""
        row = Horizontal(classes="help-row")
        row.compose_add_child(Static(key, classes="help-key"))
        row.compose_add_child(Static(description, classes="help-desc"))
        return row
