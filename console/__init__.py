"""Console front end for the round engine."""

from console.game import ConsoleGame
from console.prompts import Prompter
from console.renderer import ConsoleRenderer

__all__ = ["ConsoleGame", "Prompter", "ConsoleRenderer"]
