"""Utility functions."""

from .datetime import format_timestamp, now_utc
from .slug import board_id_from_name, card_id_prefix

__all__ = [
    "board_id_from_name",
    "card_id_prefix",
    "format_timestamp",
    "now_utc",
]
