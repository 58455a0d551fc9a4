"""Computer agent - plays the first or a random playable card."""

import random
from typing import Optional

from unoengine.engine import Card, PlayerView, RandomSource

STRATEGIES = ("random", "first")


class ComputerAgent:
    """Agent with no strategy beyond picking a legal card."""

    def __init__(
        self,
        name: str = "computer",
        strategy: str = "random",
        rng: Optional[RandomSource] = None,
    ):
        if strategy not in STRATEGIES:
            raise ValueError(f"Unknown strategy: {strategy}. Use one of {', '.join(STRATEGIES)}.")
        self._name = name
        self._strategy = strategy
        self._rng = rng if rng is not None else random.Random()

    @property
    def name(self) -> str:
        return self._name

    def choose_card(self, player_view: PlayerView, playable: list[Card]) -> Card:
        if self._strategy == "first":
            return playable[0]
        return playable[int(self._rng.random() * len(playable))]
