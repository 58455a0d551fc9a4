"""Simulate a game between computer players."""

import logging
import random

from unoengine.agents import ComputerAgent
from unoengine.engine import create_player
from unoengine.orchestration.game_runner import GameRunner


def main():
    # Show every move
    logging.basicConfig(level=logging.INFO, format="> %(message)s")

    players = [create_player(f"Bot{i}") for i in range(1, 5)]
    agents = [
        ComputerAgent(name=p.name, rng=random.Random(i))
        for i, p in enumerate(players)
    ]

    runner = GameRunner(players, agents, seed=42)
    result = runner.run()

    print(f"Game finished! Winner: {result.winner}")
    print(f"Turns: {result.num_turns}")

    game = runner.last_game
    print(f"Cards left in deck: {len(game.deck)}, on discard pile: {len(game.discard_pile)}")


if __name__ == "__main__":
    main()
