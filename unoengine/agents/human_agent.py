"""Human agent - reads moves from terminal."""

from unoengine.engine import Card, PlayerView


def format_table(player_view: PlayerView) -> str:
    """Render the table: own hand face-up, everyone else as a card count."""
    lines = ["", "--- Your turn ---"]
    for seat, (name, count) in enumerate(player_view.num_cards_per_player):
        if seat != player_view.seat:
            lines.append(f"{name}: {count} cards")
    lines.append(f"Deck: {player_view.deck_size} cards")
    lines.append(f"Top discard: {player_view.top_discard}")
    color = player_view.current_color.value if player_view.current_color else "any"
    lines.append(f"Current color: {color}")
    lines.append("Your hand: " + ", ".join(str(c) for c in player_view.my_hand))
    return "\n".join(lines)


class HumanAgent:
    """Agent that prompts the human for input via terminal."""

    def __init__(self, name: str = "human"):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def choose_card(self, player_view: PlayerView, playable: list[Card]) -> Card:
        print(format_table(player_view))
        print("\nPlayable cards:")
        for i, card in enumerate(playable):
            print(f"  {i}: {card}")

        while True:
            try:
                raw = input("Enter number: ").strip()
                idx = int(raw)
                if 0 <= idx < len(playable):
                    return playable[idx]
            except ValueError:
                pass
            print("Invalid. Try again.")
