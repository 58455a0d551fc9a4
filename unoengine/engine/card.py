"""Card and Color types for UNO."""

from dataclasses import dataclass
from enum import Enum


class Color(str, Enum):
    """Card colors. SPECIAL is reserved for Wild cards."""

    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    SPECIAL = "special"


# Playable colors, in deck construction order
COLORS = (Color.RED, Color.YELLOW, Color.GREEN, Color.BLUE)

SKIP = "Skip"
DRAW_TWO = "Draw Two"
REVERSE = "Reverse"
WILD = "Wild"
WILD_DRAW_FOUR = "Wild Draw Four"

NUMBERS = ("0", "1", "2", "3", "4", "5", "6", "7", "8", "9")
ACTIONS = (SKIP, DRAW_TWO, REVERSE)
SPECIAL_CARDS = (WILD, WILD_DRAW_FOUR)


@dataclass(frozen=True)
class Card:
    """An UNO card.

    Number and action cards carry one of the four playable colors.
    Wild and Wild Draw Four are colored ``Color.SPECIAL``.
    """

    color: Color
    value: str

    def __str__(self) -> str:
        if self.color == Color.SPECIAL:
            return self.value
        return f"{self.color.value} {self.value}"


def create_card(color: Color, value: str) -> Card:
    """Create a card. The combination is not validated."""
    return Card(color=color, value=value)


def is_action_card(card: Card) -> bool:
    """Return True for action and special cards."""
    return card.value in ACTIONS or card.value in SPECIAL_CARDS
