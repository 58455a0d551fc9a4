"""Simulation - run many computer-only games and aggregate results."""

import random
from collections import defaultdict
from typing import Optional

from unoengine.agents.computer_agent import ComputerAgent
from unoengine.engine import create_player
from unoengine.orchestration.game_runner import GameRunner


def run_simulation(
    num_players: int = 4,
    num_games: int = 100,
    strategy: str = "random",
    seed: Optional[int] = None,
    max_turns: int = 1000,
) -> dict[str, int]:
    """Play ``num_games`` games between computer players.

    Every game gets its own seed drawn from ``seed``, so a whole run is
    reproducible.

    Returns:
        Dict mapping player name to number of wins. Games stopped at
        ``max_turns`` are counted under ``"none"``.
    """
    players = [create_player(f"Computer {i}") for i in range(num_players)]
    wins: dict[str, int] = defaultdict(int)

    rng = random.Random(seed)
    for _ in range(num_games):
        agents = [
            ComputerAgent(name=p.name, strategy=strategy, rng=random.Random(rng.randint(0, 2**31 - 1)))
            for p in players
        ]
        runner = GameRunner(players, agents, seed=rng.randint(0, 2**31 - 1), max_turns=max_turns)
        result = runner.run()
        wins[result.winner or "none"] += 1

    return dict(wins)
