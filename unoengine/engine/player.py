"""Player records."""

from dataclasses import dataclass, field
from typing import Iterable, List

from unoengine.engine.card import Card


@dataclass
class Player:
    """A seat at the table. Hand order is insertion order."""

    name: str
    human: bool = False
    hand: List[Card] = field(default_factory=list)


def create_player(name: str, human: bool = False) -> Player:
    return Player(name=name, human=human)


def create_players(human_name: str, num_computer_players: int) -> List[Player]:
    """Create the human player followed by ``Computer 0``, ``Computer 1``, ..."""
    players = [create_player(human_name, human=True)]
    for i in range(num_computer_players):
        players.append(create_player(f"Computer {i}"))
    return players


def add_card_to_player_hand(player: Player, card: Card) -> None:
    player.hand.append(card)


def add_cards_to_player_hand(player: Player, cards: Iterable[Card]) -> None:
    for card in cards:
        add_card_to_player_hand(player, card)
