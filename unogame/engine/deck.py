"""Draw pile and discard pile."""

import logging
import random
from typing import Iterator, List, Optional, Sequence

from unogame.engine.card import Card, create_deck
from unogame.engine.errors import EmptyState, IndexOutOfRange

logger = logging.getLogger(__name__)


class DiscardPile:
    """Stack of played cards. The top card is the last one added."""

    def __init__(self) -> None:
        self._cards: List[Card] = []

    def add_card(self, card: Card) -> None:
        self._cards.append(card)

    def top(self) -> Card:
        if not self._cards:
            raise EmptyState("Discard pile is empty")
        return self._cards[-1]

    def replace_top(self, card: Card) -> Card:
        """Swap the top card for ``card`` and return the old top."""
        old = self.top()
        self._cards[-1] = card
        return old

    def drain_all_but_top(self) -> List[Card]:
        """Remove and return every card except the top one."""
        drained, self._cards = self._cards[:-1], self._cards[-1:]
        return drained

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)


class Deck:
    """Draw pile for a single game.

    Holds the game's discard pile so it can refill itself from played cards
    when it runs out.
    """

    def __init__(
        self,
        discard_pile: DiscardPile,
        rng: Optional[random.Random] = None,
        cards: Optional[Sequence[Card]] = None,
    ):
        self._discard_pile = discard_pile
        self._rng = rng or random.Random()
        self._cards: List[Card] = list(cards) if cards is not None else create_deck(self._rng)

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def shuffle(self) -> None:
        self._rng.shuffle(self._cards)

    def can_draw(self) -> bool:
        """True if draw() would succeed, counting a reshuffle of the discard pile."""
        return bool(self._cards) or len(self._discard_pile) > 1

    def draw(self) -> Card:
        """Pop one card, reshuffling the discard pile in first if empty."""
        if not self._cards:
            self.reshuffle()
        if not self._cards:
            raise IndexOutOfRange(
                "No cards left to draw",
                {"discard_pile": len(self._discard_pile)},
            )
        return self._cards.pop()

    def put_back(self, card: Card) -> None:
        """Return a card to the draw pile and reshuffle."""
        self._cards.append(card)
        self.shuffle()

    def reshuffle(self) -> None:
        """Turn every discarded card except the top into a new draw pile."""
        if self._cards:
            raise RuntimeError("Deck must be empty before reshuffling")
        # top() raises EmptyState if nothing was ever discarded
        top = self._discard_pile.top()
        self._cards.extend(self._discard_pile.drain_all_but_top())
        self.shuffle()
        logger.debug("Reshuffled %d cards into the deck, kept %s on top", len(self._cards), top)
