"""Single game runner."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence

from unoengine.engine import (
    Card,
    Color,
    Game,
    Player,
    PlayerView,
    apply_action,
    apply_special_action,
    create_deck,
    create_player,
    draw_card_from_deck_for_the_current_player,
    get_current_card,
    get_current_color,
    get_current_player,
    get_current_value,
    get_playable_cards,
    is_action_card,
    new_game,
    play_card,
    start_game,
)

if TYPE_CHECKING:
    from unoengine.agent.protocol import AgentProtocol

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Result of a completed game."""

    winner: Optional[str]
    num_turns: int
    player_names: tuple[str, ...]


class GameRunner:
    """Runs a single UNO game to completion.

    ``agents[i]`` plays for ``players[i]``. Each call to ``run`` deals a
    fresh deck to fresh copies of the players.
    """

    def __init__(
        self,
        players: Sequence[Player],
        agents: Sequence["AgentProtocol"],
        seed: Optional[int] = None,
        max_turns: int = 1000,
    ):
        if len(players) != len(agents):
            raise ValueError("Need exactly one agent per player")
        self._players = list(players)
        self._agents = list(agents)
        self._seed = seed
        self._max_turns = max_turns
        self.last_game: Optional[Game] = None

    def run(self) -> GameResult:
        """Run the game and return the result."""
        players = [create_player(p.name, p.human) for p in self._players]
        game = new_game(players, create_deck(), seed=self._seed)
        self.last_game = game
        start_game(game)

        opening = get_current_card(game.discard_pile)
        logger.info("Opening card: %s", opening)
        if opening is not None and is_action_card(opening):
            apply_special_action(game)
            self._log_color_change(game, opening)

        winner = None
        num_turns = 0
        while num_turns < self._max_turns:
            player = get_current_player(game)
            agent = self._agents[game.current_player_index]
            played = self._take_turn(game, player, agent)
            num_turns += 1
            if played is not None and not player.hand:
                winner = player.name
                logger.info("The winner is %s", winner)
                break
        else:
            logger.warning("Stopped after %d turns without a winner", num_turns)

        return GameResult(
            winner=winner,
            num_turns=num_turns,
            player_names=tuple(p.name for p in players),
        )

    def _take_turn(
        self, game: Game, player: Player, agent: "AgentProtocol"
    ) -> Optional[Card]:
        """Draw until something is playable, then play the agent's pick.

        Returns the played card, or None if the player had to pass.
        """
        while True:
            playable = get_playable_cards(
                player, get_current_color(game), get_current_value(game.discard_pile)
            )
            if playable:
                break
            if not draw_card_from_deck_for_the_current_player(game):
                logger.info("%s cannot draw and passes", player.name)
                apply_action(game)
                return None
            logger.info("%s drew a card", player.name)

        card = agent.choose_card(PlayerView.from_game(game, player), playable)
        if card not in playable or not play_card(card, player, game):
            raise ValueError(f"{agent.name} chose a card that cannot be played: {card}")
        logger.info("%s played %s (%d left)", player.name, card, len(player.hand))

        if not player.hand:
            return card
        if is_action_card(card):
            apply_special_action(game)
            self._log_color_change(game, card)
        else:
            apply_action(game)
        return card

    @staticmethod
    def _log_color_change(game: Game, card: Card) -> None:
        if card.color == Color.SPECIAL and game.current_color is not None:
            logger.info("Color is now %s", game.current_color.value)
