"""Game engine for UNO."""

from unoengine.engine.card import (
    ACTIONS,
    COLORS,
    NUMBERS,
    SPECIAL_CARDS,
    Card,
    Color,
    create_card,
    is_action_card,
)
from unoengine.engine.deck import RandomSource, create_deck, shuffle_deck
from unoengine.engine.player import (
    Player,
    add_card_to_player_hand,
    add_cards_to_player_hand,
    create_player,
    create_players,
)
from unoengine.engine.game_state import (
    Game,
    PlayerView,
    get_current_card,
    get_current_color,
    get_current_player,
    get_current_value,
    is_the_first_turn,
    new_game,
    set_current_color,
    set_deck,
)
from unoengine.engine.rules import (
    apply_action,
    apply_special_action,
    change_to_random_color,
    discard_card,
    draw_card_from_deck_for_the_current_player,
    draw_cards_from_deck,
    get_next_player_index,
    get_playable_cards,
    give_initial_cards,
    play_card,
    remove_and_return_all_but_last,
    reverse_direction,
    set_next_player_index,
    set_the_first_card,
    start_game,
)

__all__ = [
    "ACTIONS",
    "COLORS",
    "NUMBERS",
    "SPECIAL_CARDS",
    "Card",
    "Color",
    "create_card",
    "is_action_card",
    "RandomSource",
    "create_deck",
    "shuffle_deck",
    "Player",
    "add_card_to_player_hand",
    "add_cards_to_player_hand",
    "create_player",
    "create_players",
    "Game",
    "PlayerView",
    "get_current_card",
    "get_current_color",
    "get_current_player",
    "get_current_value",
    "is_the_first_turn",
    "new_game",
    "set_current_color",
    "set_deck",
    "apply_action",
    "apply_special_action",
    "change_to_random_color",
    "discard_card",
    "draw_card_from_deck_for_the_current_player",
    "draw_cards_from_deck",
    "get_next_player_index",
    "get_playable_cards",
    "give_initial_cards",
    "play_card",
    "remove_and_return_all_but_last",
    "reverse_direction",
    "set_next_player_index",
    "set_the_first_card",
    "start_game",
]
