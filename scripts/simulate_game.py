"""Simulate a game with scripted players picking random legal cards."""

import random

from unogame.engine import Card, Color, DrawCard, PlayCard, Player, can_play
from unogame.logging_config import setup_logging
from unogame.orchestration.game_runner import GameRunner


class RandomInput:
    def __init__(self, seed=None):
        self._rng = random.Random(seed)

    def request_player_name(self, seat: int) -> str:
        return f"Bot{seat + 1}"

    def request_action(self, player: Player, hand: list[Card], top_card: Card):
        # Prefer playing over drawing to make game progress
        playable = [i for i, card in enumerate(hand) if can_play(card, top_card)]
        if playable:
            return PlayCard(self._rng.choice(playable))
        return DrawCard()

    def request_color_choice(self) -> Color:
        return self._rng.choice(list(Color))


class PrintOutput:
    def announce(self, message: str) -> None:
        print(f"> {message}")


def main():
    setup_logging(level="DEBUG")
    runner = GameRunner(RandomInput(seed=42), PrintOutput(), num_players=4, seed=42)
    result = runner.run()

    print(f"Game finished! Winner: {result.winner}")
    print(f"Turns: {result.num_turns}")
    print(f"Cards accounted for: {runner.state.card_count()}")


if __name__ == "__main__":
    main()
