"""Boundary protocols - the input and output sides the game loop talks to."""

from typing import Protocol, Sequence, runtime_checkable

from unogame.engine import Action, Card, Color, Player


@runtime_checkable
class InputProvider(Protocol):
    """Source of player decisions. Every call blocks until it has an answer."""

    def request_player_name(self, seat: int) -> str:
        """Name for the player sitting at ``seat`` (0-based)."""
        ...

    def request_action(
        self,
        player: Player,
        hand: Sequence[Card],
        top_card: Card,
    ) -> Action:
        """Choose what ``player`` does this turn.

        Args:
            player: The player whose turn it is.
            hand: That player's hand, in display order.
            top_card: The card to match.

        Returns:
            DrawCard(), or PlayCard(i) with a 0-based index into ``hand``.
            The index is not validated here; the engine rejects bad ones.
        """
        ...

    def request_color_choice(self) -> Color:
        """Color for a wild card that was just played."""
        ...


@runtime_checkable
class OutputSink(Protocol):
    """Destination for turn banners, hand listings and notices."""

    def announce(self, message: str) -> None:
        ...
