# src/scoreforge/__init__.py

"""ScoreForge: persistent per-level high score lists."""

from .services.highscore_service import (
    add_high_score,
    get_high_scores,
    identifier_for,
    reset_high_scores,
)

__all__ = [
    "add_high_score",
    "get_high_scores",
    "identifier_for",
    "reset_high_scores",
]
