"""Colorful CLI output helpers."""

import sys

# ANSI color codes
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
RED = "\033[31m"
DIM = "\033[2m"
RESET = "\033[0m"
CHECK = "\u2713"  # ✓
BULLET = "\u2022"  # •
CROSS = "\u2717"  # ✗


def _supports_color(stream=None) -> bool:
    """Check if the stream is a terminal."""
    stream = stream or sys.stdout
    return hasattr(stream, "isatty") and stream.isatty()


def _colorize(text: str, color: str, stream=None) -> str:
    """Apply color to text if the stream supports it."""
    if _supports_color(stream):
        return f"{color}{text}{RESET}"
    return text


def success(message: str) -> None:
    """Print success message with green checkmark."""
    check = _colorize(CHECK, GREEN)
    print(f"{check} {message}")


def info(message: str) -> None:
    """Print info message with yellow bullet."""
    bullet = _colorize(BULLET, YELLOW)
    print(f"{bullet} {message}")


def header(message: str) -> None:
    """Print header message in blue."""
    print(_colorize(message, BLUE))


def detail(label: str, value: str, width: int = 12) -> None:
    """Print an indented ``label: value`` line."""
    print(f"  {label + ':':<{width}} {value}")


def dim(message: str) -> None:
    print(_colorize(message, DIM))


def error(message: str) -> None:
    """Print error message with red cross to stderr."""
    cross = _colorize(CROSS, RED, sys.stderr)
    print(f"{cross} {message}", file=sys.stderr)
