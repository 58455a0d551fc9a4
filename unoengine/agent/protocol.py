"""Agent protocol - interface that computer and human players implement."""

from typing import Protocol

from unoengine.engine import Card, PlayerView


class AgentProtocol(Protocol):
    """Interface for UNO-playing agents."""

    @property
    def name(self) -> str:
        """Display name for the agent."""
        ...

    def choose_card(self, player_view: PlayerView, playable: list[Card]) -> Card:
        """Choose which card to play.

        Args:
            player_view: Filtered view with only this player's hand and public info.
            playable: Cards from the hand that may be played now. Never empty;
                drawing is handled by the runner when nothing is playable.

        Returns:
            One of the playable cards.
        """
        ...
