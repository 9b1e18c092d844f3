"""Line prompts used by the interactive wizards."""

from collections.abc import Sequence

from .output import error, header


def ask(label: str, default: str | None = None) -> str:
    """Prompt for a line of text; blank input returns the default (or "")."""
    suffix = f" [{default}]" if default else ""
    print(f"{label}{suffix}: ", end="", flush=True)
    value = input().strip()
    if not value and default is not None:
        return default
    return value


def ask_required(label: str, default: str | None = None) -> str:
    """Prompt until a non-empty value is given."""
    while True:
        value = ask(label, default)
        if value:
            return value
        error("Input cannot be empty")


def confirm(question: str) -> bool:
    """Ask a yes/no question. Only "y" (any case) counts as yes."""
    print(f"{question} [y/N] ", end="", flush=True)
    return input().strip().lower() == "y"


def choose(label: str, options: Sequence[tuple[str, str]]) -> str:
    """
    Show a numbered menu and return the value of the chosen option.

    Args:
        label: Menu heading
        options: (value, text) pairs in display order
    """
    header(label)
    for number, (_, text) in enumerate(options, start=1):
        print(f"  {number}. {text}")

    while True:
        print(f"Choose [1-{len(options)}]: ", end="", flush=True)
        raw = input().strip()
        if raw.isdigit() and 1 <= int(raw) <= len(options):
            return options[int(raw) - 1][0]
        error(f"Enter a number between 1 and {len(options)}")
