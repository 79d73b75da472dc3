"""Exceptions raised by the UNO engine."""

from typing import Any, Optional


class UnoError(Exception):
    """Base class for engine errors.

    Carries an optional ``details`` dict that is appended to the message
    when the error is rendered.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            extra = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({extra})"
        return self.message


class IllegalMove(UnoError):
    """The chosen card cannot be played on the current top card."""

    def __init__(self, card, top_card):
        super().__init__(
            f"Cannot play {card} on {top_card}",
            {"card": str(card), "top_card": str(top_card)},
        )
        self.card = card
        self.top_card = top_card


class IndexOutOfRange(UnoError, IndexError):
    """A hand index was invalid or the draw pile had nothing left to give."""


class EmptyState(UnoError, RuntimeError):
    """The discard pile was queried while empty."""


class InvalidColorChoice(UnoError, ValueError):
    """A wild color choice was not one of red, green, blue or yellow."""


class GameOver(UnoError):
    """An action was submitted after a player already won."""
