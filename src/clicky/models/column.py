"""Column domain model."""

from pydantic import BaseModel, Field


class Column(BaseModel):
    """A workflow stage holding an ordered list of card IDs.

    ``cards`` is the authoritative ordering of cards within the column.
    """

    id: str  # e.g. "todo"
    name: str
    order: int = 0
    cards: list[str] = Field(default_factory=list)

    def add_card(self, card_id: str) -> None:
        """Append a card ID; no-op if it is already present."""
        if card_id not in self.cards:
            self.cards.append(card_id)

    def remove_card(self, card_id: str) -> bool:
        """Remove a card ID. Returns True if it was present."""
        if card_id in self.cards:
            self.cards.remove(card_id)
            return True
        return False

    def has_card(self, card_id: str) -> bool:
        return card_id in self.cards

    @property
    def card_count(self) -> int:
        return len(self.cards)

    def move_card_up(self, card_id: str) -> bool:
        """Swap a card with the one above it.

        Returns False (no mutation) if the card is first or absent.
        """
        return self._swap(card_id, -1)

    def move_card_down(self, card_id: str) -> bool:
        """Swap a card with the one below it.

        Returns False (no mutation) if the card is last or absent.
        """
        return self._swap(card_id, 1)

    def _swap(self, card_id: str, delta: int) -> bool:
        if card_id not in self.cards:
            return False

        current_idx = self.cards.index(card_id)
        new_idx = current_idx + delta

        # Check bounds
        if new_idx < 0 or new_idx >= len(self.cards):
            return False

        self.cards[current_idx], self.cards[new_idx] = (
            self.cards[new_idx],
            self.cards[current_idx],
        )
        return True
