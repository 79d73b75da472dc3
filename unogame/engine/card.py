"""Card, CardType and Color types for UNO."""

import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional


class Color(str, Enum):
    """Card colors."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"


class CardType(str, Enum):
    """What a card does when played."""

    NUMBER = "number"
    SKIP = "skip"
    REVERSE = "reverse"
    DRAW_TWO = "draw_two"
    WILD = "wild"
    WILD_DRAW_FOUR = "wild_draw_four"


WILD_TYPES = (CardType.WILD, CardType.WILD_DRAW_FOUR)
ACTION_TYPES = (CardType.SKIP, CardType.REVERSE, CardType.DRAW_TWO)

NO_NUMBER = -1


@dataclass(frozen=True)
class Card:
    """A UNO card.

    Number cards carry a color and a number 0-9. Skip, reverse and draw two
    carry a color and ``number == -1``. Wild cards have ``color=None`` until
    played; the played card is then replaced by a copy with the chosen color.
    """

    kind: CardType
    color: Optional[Color]
    number: int = NO_NUMBER

    def __post_init__(self) -> None:
        if self.kind == CardType.NUMBER:
            if not 0 <= self.number <= 9:
                raise ValueError(f"Invalid card number: {self.number}")
        elif self.number != NO_NUMBER:
            raise ValueError(f"{self.kind.value} cards have no number")
        if self.kind not in WILD_TYPES and self.color is None:
            raise ValueError("Non-wild cards must have a color")

    @property
    def is_wild(self) -> bool:
        return self.kind in WILD_TYPES

    @property
    def is_number(self) -> bool:
        return self.kind == CardType.NUMBER

    def with_color(self, color: Color) -> "Card":
        """Return the replacement card for a played wild."""
        if not self.is_wild:
            raise ValueError(f"Only wild cards take a chosen color, not {self}")
        return replace(self, color=color)

    def __str__(self) -> str:
        label = str(self.number) if self.is_number else self.kind.value.replace("_", " ")
        if self.color is None:
            return label
        return f"{self.color.value} {label}"


def create_deck(rng: Optional[random.Random] = None) -> List[Card]:
    """Create a shuffled standard 108-card UNO deck.

    - 4 colors x (one 0, two each of 1-9): 76 cards
    - 4 colors x two each of Skip, Reverse, Draw Two: 24 cards
    - 4 Wild, 4 Wild Draw Four: 8 cards
    """
    cards: List[Card] = []

    for color in Color:
        cards.append(Card(CardType.NUMBER, color, 0))
        for number in range(1, 10):
            cards.append(Card(CardType.NUMBER, color, number))
            cards.append(Card(CardType.NUMBER, color, number))
        for kind in ACTION_TYPES:
            cards.append(Card(kind, color))
            cards.append(Card(kind, color))

    for _ in range(4):
        cards.append(Card(CardType.WILD, None))
        cards.append(Card(CardType.WILD_DRAW_FOUR, None))

    (rng or random).shuffle(cards)
    return cards
