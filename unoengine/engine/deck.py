"""Deck creation and shuffling."""

import random
from typing import List, Optional, Protocol

from unoengine.engine.card import (
    ACTIONS,
    COLORS,
    NUMBERS,
    SPECIAL_CARDS,
    Card,
    Color,
    create_card,
)


class RandomSource(Protocol):
    """Anything that yields floats in [0, 1), e.g. ``random.Random``."""

    def random(self) -> float:
        ...


def create_deck() -> List[Card]:
    """Create a standard 108-card UNO deck, unshuffled.

    - 4 colors x (one 0, two of 1-9, two of Skip, Draw Two, Reverse): 100 cards
    - 4 Wild, 4 Wild Draw Four: 8 cards
    - Total: 108 cards
    """
    cards: List[Card] = []

    for color in COLORS:
        # One zero per color
        cards.append(create_card(color, NUMBERS[0]))
        # Two of each 1-9 per color
        for number in NUMBERS[1:]:
            cards.append(create_card(color, number))
            cards.append(create_card(color, number))
        # Two of each action card per color
        for action in ACTIONS:
            cards.append(create_card(color, action))
            cards.append(create_card(color, action))

    for _ in range(4):
        for value in SPECIAL_CARDS:
            cards.append(create_card(Color.SPECIAL, value))

    return cards


def shuffle_deck(deck: List[Card], rng: Optional[RandomSource] = None) -> None:
    """Shuffle the deck in place (Fisher-Yates)."""
    if rng is None:
        rng = random.Random()
    for i in range(len(deck) - 1, 0, -1):
        j = int(rng.random() * (i + 1))
        deck[i], deck[j] = deck[j], deck[i]
