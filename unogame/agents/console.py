"""Console boundary - reads decisions from and writes notices to the terminal."""

from typing import Callable, Sequence

import typer

from unogame.engine import Action, Card, Color, DrawCard, InvalidColorChoice, PlayCard, Player

COLOR_NAMES = ", ".join(c.name for c in Color)


def parse_color(raw: str) -> Color:
    """Parse a color name such as ``red`` or ``YELLOW``."""
    name = raw.strip().upper()
    try:
        return Color[name]
    except KeyError:
        raise InvalidColorChoice(f"Invalid color {raw!r}", {"choose": COLOR_NAMES}) from None


class ConsoleOutput:
    """Writes announcements to stdout."""

    def __init__(self, echo: Callable[[str], None] = typer.echo):
        self._echo = echo

    def announce(self, message: str) -> None:
        self._echo(message)


class ConsoleInput:
    """Prompts a human at the terminal for names, moves and colors."""

    def __init__(
        self,
        read: Callable[[str], str] = input,
        echo: Callable[[str], None] = typer.echo,
    ):
        self._read = read
        self._echo = echo

    def request_player_name(self, seat: int) -> str:
        name = self._read(f"Enter name of player {seat + 1}: ").strip()
        return name or f"Player {seat + 1}"

    def request_action(
        self,
        player: Player,
        hand: Sequence[Card],
        top_card: Card,
    ) -> Action:
        while True:
            raw = self._read("Enter the card number to play or 0 to draw a card: ").strip()
            try:
                choice = int(raw)
            except ValueError:
                self._echo("Please enter a number.")
                continue
            if choice == 0:
                return DrawCard()
            return PlayCard(hand_index=choice - 1)

    def request_color_choice(self) -> Color:
        while True:
            raw = self._read(f"Choose a color: {COLOR_NAMES}: ")
            try:
                return parse_color(raw)
            except InvalidColorChoice:
                self._echo(f"Invalid color. Please enter one of the following: {COLOR_NAMES}.")
