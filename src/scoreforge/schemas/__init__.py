# src/scoreforge/schemas/__init__.py

"""Pydantic schemas for high score records and their stored envelope."""

from .highscores import HighScores
from .player import BasePlayer, Player

__all__ = [
    # Records
    "BasePlayer",
    "Player",
    # Envelope
    "HighScores",
]
