"""Tests for the game runner, computer agents and simulations."""

import random

import pytest

from unoengine.agents import ComputerAgent
from unoengine.engine import Card, Color, PlayerView, create_card, create_player, create_players
from unoengine.orchestration import GameRunner, run_simulation


def _computer_table(num_players: int, seed: int):
    players = [create_player(f"Computer {i}") for i in range(num_players)]
    agents = [
        ComputerAgent(name=p.name, rng=random.Random(seed + i)) for i, p in enumerate(players)
    ]
    return players, agents


def _view() -> PlayerView:
    return PlayerView(
        name="p",
        seat=0,
        my_hand=[],
        top_discard=None,
        current_color=None,
        current_value=None,
        current_player="p",
        direction=1,
        num_cards_per_player=[],
        deck_size=0,
    )


def test_computer_agent_first_strategy() -> None:
    agent = ComputerAgent(strategy="first")
    playable = [create_card(Color.RED, "1"), create_card(Color.RED, "2")]
    assert agent.choose_card(_view(), playable) == playable[0]


def test_computer_agent_random_strategy() -> None:
    class Fixed:
        def random(self) -> float:
            return 0.7

    agent = ComputerAgent(strategy="random", rng=Fixed())
    playable = [create_card(Color.RED, "1"), create_card(Color.RED, "2"), create_card(Color.RED, "3")]
    assert agent.choose_card(_view(), playable) == playable[2]


def test_computer_agent_unknown_strategy() -> None:
    with pytest.raises(ValueError):
        ComputerAgent(strategy="smart")


def test_game_runs_to_a_winner() -> None:
    players, agents = _computer_table(3, seed=10)
    runner = GameRunner(players, agents, seed=10, max_turns=5000)
    result = runner.run()
    assert result.player_names == ("Computer 0", "Computer 1", "Computer 2")
    assert result.winner in result.player_names
    assert result.num_turns > 0

    game = runner.last_game
    winner = next(p for p in game.players if p.name == result.winner)
    assert winner.hand == []
    total = len(game.deck) + len(game.discard_pile) + sum(len(p.hand) for p in game.players)
    assert total == 108


def test_runner_does_not_touch_given_players() -> None:
    players, agents = _computer_table(2, seed=3)
    GameRunner(players, agents, seed=3).run()
    assert all(p.hand == [] for p in players)


def test_game_is_reproducible() -> None:
    players, agents = _computer_table(4, seed=99)
    first = GameRunner(players, agents, seed=99).run()
    players, agents = _computer_table(4, seed=99)
    second = GameRunner(players, agents, seed=99).run()
    assert first == second


def test_max_turns_stops_the_game() -> None:
    players, agents = _computer_table(4, seed=1)
    result = GameRunner(players, agents, seed=1, max_turns=1).run()
    assert result.num_turns == 1
    assert result.winner is None


def test_runner_needs_one_agent_per_player() -> None:
    players = create_players("Human", 2)
    with pytest.raises(ValueError):
        GameRunner(players, [ComputerAgent()])


def test_runner_rejects_unplayable_choice() -> None:
    class Cheater:
        name = "cheater"

        def choose_card(self, player_view: PlayerView, playable: list[Card]) -> Card:
            return create_card(Color.SPECIAL, "Joker")

    players = [create_player("a"), create_player("b")]
    with pytest.raises(ValueError, match="cannot be played"):
        GameRunner(players, [Cheater(), Cheater()], seed=5).run()


def test_agent_sees_only_its_own_hand() -> None:
    seen: list[PlayerView] = []

    class Recorder(ComputerAgent):
        def choose_card(self, player_view: PlayerView, playable: list[Card]) -> Card:
            seen.append(player_view)
            return super().choose_card(player_view, playable)

    players = create_players("Human", 1)
    agents = [Recorder(name="Human", strategy="first"), Recorder(name="Computer 0", strategy="first")]
    GameRunner(players, agents, seed=8, max_turns=10).run()
    assert seen
    for view in seen:
        assert view.current_player == view.name
        assert [name for name, _ in view.num_cards_per_player] == ["Human", "Computer 0"]


def test_run_simulation_counts_every_game() -> None:
    wins = run_simulation(num_players=3, num_games=5, seed=7, max_turns=5000)
    assert sum(wins.values()) == 5
    assert set(wins) <= {"Computer 0", "Computer 1", "Computer 2", "none"}


def test_run_simulation_is_reproducible() -> None:
    assert run_simulation(num_players=2, num_games=3, strategy="first", seed=4) == run_simulation(
        num_players=2, num_games=3, strategy="first", seed=4
    )
