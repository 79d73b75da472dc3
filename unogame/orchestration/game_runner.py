"""Single game runner."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from unogame.engine import (
    STANDARD_RULES,
    GameState,
    IllegalMove,
    IndexOutOfRange,
    Player,
    RuleSet,
)

if TYPE_CHECKING:
    from unogame.agent.protocol import InputProvider, OutputSink

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Result of a completed game."""

    winner: Optional[str]
    num_turns: int
    player_names: tuple[str, ...]


class GameRunner:
    """Runs a single UNO game to completion.

    Pulls decisions from an input provider, feeds them to a GameState and
    reports what happened to an output sink.
    """

    def __init__(
        self,
        input_provider: "InputProvider",
        output: "OutputSink",
        num_players: int = 4,
        seed: Optional[int] = None,
        max_turns: Optional[int] = 1000,
        rules: RuleSet = STANDARD_RULES,
    ):
        self._input = input_provider
        self._output = output
        self._num_players = num_players
        self._seed = seed
        self._max_turns = max_turns
        self._rules = rules
        self.state: Optional[GameState] = None

    def run(self) -> GameResult:
        """Run the game and return the result."""
        names = [self._input.request_player_name(seat) for seat in range(self._num_players)]
        state = GameState.new(names, rng=random.Random(self._seed), rules=self._rules)
        return self.play(state)

    def play(self, state: GameState) -> GameResult:
        """Drive an already set-up game until someone wins or the turn cap is hit."""
        self.state = state
        num_turns = 0

        while not state.is_game_over():
            if self._max_turns is not None and num_turns >= self._max_turns:
                logger.warning("Stopping after %d turns without a winner", num_turns)
                self._output.announce(f"No winner after {num_turns} turns.")
                break
            self._take_turn(state)
            num_turns += 1

        winner = state.winner()
        self._output.announce("Game Over!")
        return GameResult(
            winner=winner.name if winner else None,
            num_turns=num_turns,
            player_names=tuple(p.name for p in state.players),
        )

    def _take_turn(self, state: GameState) -> None:
        """Prompt the current player until they make an accepted move."""
        self._output.announce(f"{state.current_player.name}'s turn.")
        self._output.announce(f"Top card on discard pile: {state.top_card}")

        while True:
            player = state.current_player
            self._show_hand(player)
            action = self._input.request_action(player, player.hand, state.top_card)
            try:
                result = state.apply_action(action, self._input.request_color_choice)
            except IllegalMove as exc:
                logger.debug("Rejected move: %s", exc)
                self._output.announce("You can't play that card. Try again.")
            except IndexOutOfRange as exc:
                self._output.announce(f"{exc.message}. Try again.")
            else:
                for event in result.events:
                    self._output.announce(event)
                return

    def _show_hand(self, player: Player) -> None:
        lines = [f"{player.name}'s cards:"]
        lines.extend(f"{i}. {card}" for i, card in enumerate(player.hand, start=1))
        self._output.announce("\n".join(lines))
