"""Card create/edit form panel."""

from rich.markup import escape
from textual.widgets import Static

from ..state import CardFormData, FormField, InputMode


class CardFormPanel(Static):
    """Renders the in-progress card form.

    The form has no input widgets of its own; keystrokes are applied to
    ``CardFormData`` by the controller and this panel redraws it.
    """

    DEFAULT_CSS = """
    CardFormPanel {
        width: 70;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: solid $accent;
    }
    """

    def show_form(self, heading: str, form: CardFormData) -> None:
        """Render the form fields with the focus and cursor indicators."""
        lines = [f"[bold]{escape(heading)}[/]", ""]
        for form_field in FormField:
            focused = form_field == form.current_field
            marker = "[bold]>[/]" if focused else " "
            value = escape(form.get(form_field))
            if focused and form.input_mode == InputMode.EDITING:
                value += "[reverse] [/]"
            label = f"{form_field.label}:"
            lines.append(f"{marker} [bold]{label:<13}[/]{value}")
        lines.append("")
        if form.input_mode == InputMode.EDITING:
            lines.append("[dim]Enter: next field  Esc: stop editing[/]")
        else:
            lines.append("[dim]Type to edit  Tab/Up/Down: field  Enter: save  Esc: cancel[/]")
        self.update("\n".join(lines))
