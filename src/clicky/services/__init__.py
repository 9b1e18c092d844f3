"""Service layer for business logic."""

from .board_service import BoardService, MoveDirection
from .card_service import CardService

__all__ = [
    "BoardService",
    "CardService",
    "MoveDirection",
]
