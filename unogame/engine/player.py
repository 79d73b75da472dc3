"""Player: a seat at the table and the cards held there."""

from typing import List

from unogame.engine.card import Card
from unogame.engine.errors import IndexOutOfRange


class Player:
    """A player and their hand. Hand order is the order cards were added."""

    def __init__(self, name: str, seat: int):
        self.name = name
        self.seat = seat
        self._hand: List[Card] = []

    @property
    def hand(self) -> tuple[Card, ...]:
        return tuple(self._hand)

    def add_card(self, card: Card) -> None:
        self._hand.append(card)

    def card_at(self, index: int) -> Card:
        self._check_index(index)
        return self._hand[index]

    def remove_card_at(self, index: int) -> Card:
        self._check_index(index)
        return self._hand.pop(index)

    def hand_size(self) -> int:
        return len(self._hand)

    def _check_index(self, index: int) -> None:
        # negative indices are rejected rather than counted from the end
        if not 0 <= index < len(self._hand):
            raise IndexOutOfRange(
                f"{self.name} has no card number {index + 1}",
                {"index": index, "hand_size": len(self._hand)},
            )

    def __repr__(self) -> str:
        return f"Player(name={self.name!r}, seat={self.seat}, cards={len(self._hand)})"
