"""Utilities for deriving board identifiers."""

import re


def board_id_from_name(name: str) -> str:
    """
    Convert a board name to a board ID.

    Example: "My Project_v2!" -> "my-project-v2"
    """
    # Lowercase, spaces and underscores become hyphens
    text = name.lower().replace(" ", "-").replace("_", "-")

    # Keep only alphanumerics and hyphens
    return "".join(c for c in text if c.isalnum() or c == "-")


def card_id_prefix(board_id: str) -> str:
    """
    Derive the card ID prefix from a board ID.

    Takes up to the first three alphabetic characters, uppercased.

    Examples:
        "myproject" -> "MYP"
        "my_project_123" -> "MYP"
        "ab" -> "AB"
    """
    letters = re.findall(r"[^\W\d_]", board_id)
    return "".join(letters[:3]).upper()
