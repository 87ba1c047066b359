"""Kalida_AI package exports."""

from .Board import Board
from .Kalidagame import Kalidagame
from .Player import Player, HumanPlayer, ComputerPlayer

# Subpackages for geometry/win rules, AI strategies, and helpers
from . import ai, engine, utils

__all__ = [
    "Board",
    "Kalidagame",
    "Player",
    "HumanPlayer",
    "ComputerPlayer",
    "ai",
    "engine",
    "utils",
]
