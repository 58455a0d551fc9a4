"""UNO rules: dealing, drawing, playing cards and resolving their effects."""

import logging
from typing import List, Optional

from unoengine.engine.card import (
    COLORS,
    DRAW_TWO,
    REVERSE,
    SKIP,
    WILD,
    WILD_DRAW_FOUR,
    Card,
    Color,
)
from unoengine.engine.deck import shuffle_deck
from unoengine.engine.game_state import (
    Game,
    get_current_card,
    get_current_color,
    get_current_player,
    get_current_value,
    is_the_first_turn,
    set_current_color,
    set_deck,
)
from unoengine.engine.player import Player, add_cards_to_player_hand

logger = logging.getLogger(__name__)

INITIAL_HAND_SIZE = 7


def start_game(game: Game) -> None:
    """Shuffle the deck, deal seven cards to everyone and flip the opening card.

    The opening card's effect is not applied here; callers run
    ``apply_special_action`` once the table is set.
    """
    shuffle_deck(game.deck, game.rng)
    give_initial_cards(game)
    set_the_first_card(game)


def give_initial_cards(game: Game) -> None:
    for player in game.players:
        cards = draw_cards_from_deck(game, INITIAL_HAND_SIZE)
        add_cards_to_player_hand(player, cards)


def set_the_first_card(game: Game) -> None:
    cards = draw_cards_from_deck(game)
    if cards:
        discard_card(cards[0], game)


def remove_and_return_all_but_last(discard_pile: List[Card]) -> List[Card]:
    """Strip the discard pile down to its top card and return the rest."""
    all_but_last = discard_pile[:-1]
    del discard_pile[:-1]
    return all_but_last


def draw_cards_from_deck(game: Game, num_cards: int = 1) -> List[Card]:
    """Pop up to ``num_cards`` from the deck, reshuffling the discard pile when empty.

    Returns fewer cards than requested only when neither the deck nor the
    discard pile (minus its top card) has anything left.
    """
    drawn: List[Card] = []
    while len(drawn) < num_cards:
        if game.deck:
            drawn.append(game.deck.pop())
            continue

        new_deck = remove_and_return_all_but_last(game.discard_pile)
        if not new_deck:
            logger.warning(
                "No cards left to draw: wanted %d, got %d", num_cards, len(drawn)
            )
            break
        shuffle_deck(new_deck, game.rng)
        set_deck(new_deck, game)
        logger.debug("New deck created from discard pile: %d cards", len(new_deck))

    return drawn


def discard_card(card: Card, game: Game) -> None:
    """Put a card on top of the discard pile; its color becomes the current color."""
    game.discard_pile.append(card)
    set_current_color(game, card.color)


def get_playable_cards(
    player: Player,
    current_color: Optional[Color],
    current_value: Optional[str],
) -> List[Card]:
    """Return the cards in hand that can be played, in hand order."""
    return [
        card
        for card in player.hand
        if card.color == Color.SPECIAL
        or card.color == current_color
        or card.value == current_value
    ]


def play_card(card: Card, player: Player, game: Game) -> bool:
    """Move a card from the player's hand to the discard pile.

    Returns False, changing nothing, when the card is not in the hand.
    """
    try:
        index = player.hand.index(card)
    except ValueError:
        return False

    played = player.hand.pop(index)
    discard_card(played, game)
    return True


def get_next_player_index(
    current_player_index: int,
    direction: int,
    total_players: int,
    increment: int = 1,
) -> int:
    index = current_player_index + direction * increment
    while index < 0:
        index += total_players
    while index >= total_players:
        index -= total_players
    return index


def set_next_player_index(game: Game, increment: int = 1) -> None:
    game.current_player_index = get_next_player_index(
        game.current_player_index,
        game.direction,
        len(game.players),
        increment,
    )


def reverse_direction(game: Game) -> None:
    game.direction *= -1


def apply_action(game: Game) -> None:
    """Effect of a plain card: the turn passes to the next player."""
    set_next_player_index(game)


def apply_special_action(game: Game) -> None:
    """Resolve the effect of the card on top of the discard pile.

    On the first turn the opening card was not played by anyone, so
    Draw Two, Wild and Wild Draw Four hit the player at the current index
    instead of passing the turn first.
    """
    current_card = get_current_card(game.discard_pile)
    if current_card is None:
        raise ValueError("No card on discard pile")
    first_turn = is_the_first_turn(game.discard_pile)

    if current_card.value == SKIP:
        set_next_player_index(game, 2)
    elif current_card.value == DRAW_TWO:
        if not first_turn:
            set_next_player_index(game)
        _current_player_draws(game, 2)
    elif current_card.value == REVERSE:
        reverse_direction(game)
        set_next_player_index(game)
    elif current_card.value == WILD:
        change_to_random_color(game)
        if not first_turn:
            set_next_player_index(game)
    elif current_card.value == WILD_DRAW_FOUR:
        if not first_turn:
            set_next_player_index(game)
        _current_player_draws(game, 4)
        change_to_random_color(game)


def _current_player_draws(game: Game, num_cards: int) -> None:
    cards = draw_cards_from_deck(game, num_cards)
    add_cards_to_player_hand(get_current_player(game), cards)


def draw_card_from_deck_for_the_current_player(game: Game) -> bool:
    """Draw one card for the current player if they have nothing to play.

    Returns True when a card was added to the hand. A player holding a
    playable card may not draw.
    """
    current_player = get_current_player(game)
    playable_cards = get_playable_cards(
        current_player,
        get_current_color(game),
        get_current_value(game.discard_pile),
    )
    if playable_cards:
        return False

    cards = draw_cards_from_deck(game)
    add_cards_to_player_hand(current_player, cards)
    return bool(cards)


def change_to_random_color(game: Game) -> None:
    color = COLORS[int(game.rng.random() * len(COLORS))]
    set_current_color(game, color)
