"""Data models."""

from .board import DEFAULT_COLUMN_ID, Board
from .card import Card
from .column import Column
from .updates import FieldUpdate, UpdateAction

__all__ = [
    "DEFAULT_COLUMN_ID",
    "Board",
    "Card",
    "Column",
    "FieldUpdate",
    "UpdateAction",
]
