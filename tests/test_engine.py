"""Unit tests for the game engine."""

import random
from collections import Counter

import pytest

from unogame.engine import (
    Card,
    CardType,
    Color,
    Direction,
    DrawCard,
    GameOver,
    GameState,
    IllegalMove,
    IndexOutOfRange,
    InvalidColorChoice,
    PlayCard,
    create_deck,
)

from conftest import num

RED_5 = num(Color.RED, 5)


def test_create_deck_size() -> None:
    deck = create_deck(random.Random(42))
    assert len(deck) == 108


def test_create_deck_composition() -> None:
    kinds = Counter(card.kind for card in create_deck())
    assert kinds == {
        CardType.NUMBER: 76,
        CardType.SKIP: 8,
        CardType.REVERSE: 8,
        CardType.DRAW_TWO: 8,
        CardType.WILD: 4,
        CardType.WILD_DRAW_FOUR: 4,
    }
    zeros = [c for c in create_deck() if c.is_number and c.number == 0]
    assert sorted(c.color.value for c in zeros) == ["blue", "green", "red", "yellow"]


def test_create_deck_reproducible() -> None:
    d1 = create_deck(random.Random(123))
    d2 = create_deck(random.Random(123))
    assert d1 == d2


def test_new_game_two_players() -> None:
    state = GameState.new(["ann", "bob"], rng=random.Random(1))
    assert [p.hand_size() for p in state.players] == [7, 7]
    assert len(state.deck) == 108 - 14 - 1
    assert len(state.discard_pile) == 1
    assert not state.top_card.is_wild
    assert state.current_player.name == "ann"
    assert state.direction is Direction.CLOCKWISE
    assert state.card_count() == 108
    assert state.winner() is None


@pytest.mark.parametrize("seed", range(20))
def test_new_game_never_starts_on_wild(seed: int) -> None:
    state = GameState.new(["a", "b", "c"], rng=random.Random(seed))
    assert not state.top_card.is_wild
    assert state.card_count() == 108


@pytest.mark.parametrize("names", [["solo"], [f"p{i}" for i in range(11)]])
def test_new_game_rejects_bad_player_count(names) -> None:
    with pytest.raises(ValueError):
        GameState.new(names)


def test_draw_action(make_game) -> None:
    state = make_game([[RED_5], [RED_5]], top=num(Color.RED, 1))
    deck_before = len(state.deck)
    result = state.apply_action(DrawCard())
    assert result.player.name == "p0"
    assert state.players[0].hand_size() == 2
    assert len(state.deck) == deck_before - 1
    assert state.current_player_index == 1


def test_number_card_passes_turn(make_game) -> None:
    state = make_game([[RED_5, RED_5], [RED_5]], top=num(Color.RED, 1))
    result = state.play_action(0)
    assert result.card == RED_5
    assert state.top_card == RED_5
    assert state.current_player_index == 1


def test_skip_skips_one_player(make_game) -> None:
    hands = [[Card(CardType.SKIP, Color.RED), RED_5], [RED_5], [RED_5]]
    state = make_game(hands, top=num(Color.RED, 1))
    state.play_action(0)
    assert state.current_player_index == 2
    assert state.players[1].hand_size() == 1


def test_skip_with_two_players_returns_to_player(make_game) -> None:
    hands = [[Card(CardType.SKIP, Color.RED), RED_5], [RED_5]]
    state = make_game(hands, top=num(Color.RED, 1))
    state.play_action(0)
    assert state.current_player_index == 0


def test_reverse_flips_direction(make_game) -> None:
    hands = [[Card(CardType.REVERSE, Color.RED), RED_5], [RED_5], [RED_5]]
    state = make_game(hands, top=num(Color.RED, 1))
    state.play_action(0)
    assert state.direction is Direction.COUNTER_CLOCKWISE
    assert state.current_player_index == 2


def test_reverse_parity(make_game) -> None:
    reverse = Card(CardType.REVERSE, Color.GREEN)
    hands = [[reverse] * 6 + [RED_5]] * 3
    state = make_game([list(h) for h in hands], top=num(Color.GREEN, 1))
    initial = state.direction
    for played in range(1, 6):
        state.play_action(0)
        if played % 2:
            assert state.direction is not initial
        else:
            assert state.direction is initial


def test_draw_two_hits_next_player_and_passes_them(make_game) -> None:
    hands = [[Card(CardType.DRAW_TWO, Color.RED), RED_5], [RED_5], [RED_5]]
    state = make_game(hands, top=num(Color.RED, 1))
    result = state.play_action(0)
    assert state.players[1].hand_size() == 3
    assert state.players[2].hand_size() == 1
    assert state.current_player_index == 2
    assert "p1 draws two cards!" in result.events
    assert state.card_count() == 15


def test_wild_replaces_top_with_chosen_color(make_game) -> None:
    wild = Card(CardType.WILD, None)
    state = make_game([[wild, RED_5], [RED_5]], top=num(Color.RED, 1))
    state.play_action(0, lambda: Color.BLUE)
    assert state.top_card == Card(CardType.WILD, Color.BLUE)
    assert len(state.discard_pile) == 2
    assert state.current_player_index == 1


def test_wild_draw_four(make_game) -> None:
    wd4 = Card(CardType.WILD_DRAW_FOUR, None)
    state = make_game([[wd4, RED_5], [RED_5], [RED_5]], top=num(Color.RED, 1))
    state.play_action(0, lambda: Color.GREEN)
    assert state.top_card == Card(CardType.WILD_DRAW_FOUR, Color.GREEN)
    assert state.players[1].hand_size() == 5
    assert state.current_player_index == 2


def test_wild_color_constrains_next_play(make_game) -> None:
    wild = Card(CardType.WILD, None)
    state = make_game([[wild, RED_5], [num(Color.RED, 9), num(Color.BLUE, 2)]], top=RED_5)
    state.play_action(0, lambda: Color.BLUE)
    with pytest.raises(IllegalMove):
        state.play_action(0)
    state.play_action(1)
    assert state.top_card == num(Color.BLUE, 2)


def test_illegal_move_changes_nothing(make_game) -> None:
    hand = [num(Color.BLUE, 3), num(Color.GREEN, 4)]
    state = make_game([hand, [RED_5]], top=RED_5)
    with pytest.raises(IllegalMove):
        state.play_action(1)
    assert state.players[0].hand == tuple(hand)
    assert len(state.discard_pile) == 1
    assert state.current_player_index == 0


@pytest.mark.parametrize("index", [-1, 2, 99])
def test_bad_hand_index(make_game, index: int) -> None:
    state = make_game([[RED_5, RED_5], [RED_5]], top=RED_5)
    with pytest.raises(IndexOutOfRange):
        state.apply_action(PlayCard(index))
    assert state.players[0].hand_size() == 2
    assert state.current_player_index == 0


def test_bad_color_choice_changes_nothing(make_game) -> None:
    wild = Card(CardType.WILD, None)
    state = make_game([[wild, RED_5], [RED_5]], top=RED_5)
    with pytest.raises(InvalidColorChoice):
        state.play_action(0, lambda: "purple")
    with pytest.raises(InvalidColorChoice):
        state.play_action(0)
    assert state.players[0].hand_size() == 2
    assert state.top_card == RED_5


def test_color_choice_accepts_color_name(make_game) -> None:
    wild = Card(CardType.WILD, None)
    state = make_game([[wild, RED_5], [RED_5]], top=RED_5)
    state.play_action(0, lambda: " Yellow ")
    assert state.top_card.color is Color.YELLOW


def test_win_condition(make_game) -> None:
    state = make_game([[num(Color.RED, 3)], [RED_5, RED_5]], top=RED_5)
    result = state.play_action(0)
    assert result.winner is state.players[0]
    assert state.is_game_over()
    assert state.winner() is state.players[0]
    with pytest.raises(GameOver):
        state.draw_action()


def test_win_with_draw_two_still_deals_penalty(make_game) -> None:
    state = make_game([[Card(CardType.DRAW_TWO, Color.RED)], [RED_5]], top=RED_5)
    result = state.play_action(0)
    assert result.winner.name == "p0"
    assert state.players[1].hand_size() == 3


def _random_turn(state: GameState, rng: random.Random) -> None:
    hand = state.current_player.hand
    playable = [i for i, c in enumerate(hand) if state.rules.can_play(c, state.top_card)]
    if playable:
        state.play_action(rng.choice(playable), lambda: rng.choice(list(Color)))
    else:
        state.draw_action()


@pytest.mark.parametrize("seed", [3, 7, 11])
def test_card_count_is_conserved(seed: int) -> None:
    rng = random.Random(seed)
    state = GameState.new(["a", "b", "c"], rng=random.Random(seed))
    for _ in range(300):
        if state.is_game_over():
            break
        _random_turn(state, rng)
        assert state.card_count() == 108
    all_cards = Counter(state.deck.cards) + Counter(state.discard_pile)
    for player in state.players:
        all_cards += Counter(player.hand)
    assert sum(all_cards.values()) == 108


def test_draw_two_with_exhausted_supply_finishes_turn(make_game) -> None:
    hands = [[Card(CardType.DRAW_TWO, Color.RED), num(Color.RED, 1)], [RED_5]]
    state = make_game(hands, top=RED_5, deck=[])
    result = state.play_action(0)

    # only the old top card could be reshuffled in
    assert state.players[1].hand_size() == 2
    assert state.current_player_index == 0
    assert state.top_card == Card(CardType.DRAW_TWO, Color.RED)
    assert len(state.discard_pile) == 1
    assert "No cards left to draw" in result.events
    assert state.card_count() == 4


def test_wild_draw_four_with_exhausted_supply_can_win(make_game) -> None:
    wd4 = Card(CardType.WILD_DRAW_FOUR, None)
    state = make_game([[wd4], [RED_5], [RED_5]], top=RED_5, deck=[])
    result = state.play_action(0, lambda: Color.BLUE)

    assert result.winner is state.players[0]
    assert state.players[1].hand_size() == 2
    assert state.current_player_index == 2


def test_draw_with_exhausted_supply_passes_turn(make_game) -> None:
    state = make_game([[num(Color.BLUE, 3)], [RED_5]], top=RED_5, deck=[])
    result = state.draw_action()

    assert state.players[0].hand_size() == 1
    assert state.current_player_index == 1
    assert result.events[-1] == "p0 has no card to draw"
