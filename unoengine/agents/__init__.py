"""Built-in agents."""

from unoengine.agents.computer_agent import ComputerAgent
from unoengine.agents.human_agent import HumanAgent

__all__ = ["ComputerAgent", "HumanAgent"]
