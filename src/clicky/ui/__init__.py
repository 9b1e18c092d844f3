"""UI components."""

from .controller import BoardController
from .screens.board import BoardScreen

__all__ = [
    "BoardController",
    "BoardScreen",
]
