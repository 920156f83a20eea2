# src/scoreforge/schemas/highscores.py

"""Envelope schema for a level's stored high score list."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field, field_validator

from .player import BasePlayer

T = TypeVar("T", bound=BasePlayer)


class HighScores(BaseModel, Generic[T]):
    """Serialized form of one level's high scores.

    Attributes:
        players: Records in ranked order (best first for the chosen direction)
    """

    players: list[T] = Field(default_factory=list, description="Ranked records")

    @field_validator("players", mode="before")
    @classmethod
    def _null_players_as_empty(cls, value):
        # A stored envelope of {"players": null} is an empty level
        return [] if value is None else value
