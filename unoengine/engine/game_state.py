"""Game state for UNO."""

import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from unoengine.engine.card import Card, Color
from unoengine.engine.deck import RandomSource
from unoengine.engine.player import Player


@dataclass
class Game:
    """Mutable UNO game session.

    Cards move between ``deck``, ``discard_pile`` and the players' hands;
    none is ever created or destroyed after ``new_game``.
    """

    players: List[Player]
    deck: List[Card]  # top is last
    discard_pile: List[Card] = field(default_factory=list)  # top is last
    current_player_index: int = 0
    direction: int = 1  # 1 = clockwise, -1 = counter-clockwise
    current_color: Optional[Color] = None  # overrides the top card's color
    rng: RandomSource = field(default_factory=random.Random, repr=False, compare=False)


def new_game(
    players: List[Player],
    deck: List[Card],
    rng: Optional[RandomSource] = None,
    seed: Optional[int] = None,
) -> Game:
    """Create a game. Nothing is shuffled or dealt yet."""
    if not players:
        raise ValueError("A game needs at least one player")
    if rng is None:
        rng = random.Random(seed)
    return Game(players=players, deck=deck, rng=rng)


def set_deck(deck: List[Card], game: Game) -> None:
    game.deck = deck


def is_the_first_turn(discard_pile: List[Card]) -> bool:
    """Only the opening card has been discarded."""
    return len(discard_pile) == 1


def get_current_card(discard_pile: List[Card]) -> Optional[Card]:
    return discard_pile[-1] if discard_pile else None


def get_current_value(discard_pile: List[Card]) -> Optional[str]:
    card = get_current_card(discard_pile)
    return card.value if card else None


def get_current_player(game: Game) -> Player:
    return game.players[game.current_player_index]


def get_current_color(game: Game) -> Color:
    """Color to match: the override if set, else the top card's color."""
    if game.current_color:
        return game.current_color
    card = get_current_card(game.discard_pile)
    if card is None:
        raise ValueError("No card on discard pile")
    return card.color


def set_current_color(game: Game, color: Optional[Color]) -> None:
    game.current_color = color


@dataclass
class PlayerView:
    """What a single seat is allowed to see.

    Contains only that player's hand and public info.
    """

    name: str
    seat: int  # index in game.players
    my_hand: List[Card]
    top_discard: Optional[Card]
    current_color: Optional[Color]
    current_value: Optional[str]
    current_player: str
    direction: int
    num_cards_per_player: List[Tuple[str, int]]  # (name, count) in seat order
    deck_size: int

    @classmethod
    def from_game(cls, game: Game, player: Player) -> "PlayerView":
        """Create a player view, hiding other players' hands."""
        top = get_current_card(game.discard_pile)
        seat = next(i for i, p in enumerate(game.players) if p is player)
        return cls(
            name=player.name,
            seat=seat,
            my_hand=list(player.hand),
            top_discard=top,
            current_color=get_current_color(game) if top else game.current_color,
            current_value=get_current_value(game.discard_pile),
            current_player=get_current_player(game).name,
            direction=game.direction,
            num_cards_per_player=[(p.name, len(p.hand)) for p in game.players],
            deck_size=len(game.deck),
        )
