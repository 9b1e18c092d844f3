"""Repository layer for data access."""

from .filesystem import JsonBoardRepository
from .protocol import BoardStoreProtocol

__all__ = [
    "BoardStoreProtocol",
    "JsonBoardRepository",
]
