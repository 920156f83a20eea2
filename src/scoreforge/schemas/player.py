# src/scoreforge/schemas/player.py

"""Pydantic schemas for high score player records."""

from pydantic import BaseModel, ConfigDict


# ===============================================
# Base Schema: The fields every record must carry
# ===============================================
class BasePlayer(BaseModel):
    """A single high score entry.

    All player records derive from this model. Sorting requires ``name`` and
    ``score``; subclasses add their own fields, and any undeclared fields
    found in stored data are kept as well.
    """

    name: str
    score: int

    # Allow extra fields for game-specific data (difficulty, time, etc.)
    model_config = ConfigDict(extra="allow")


# ===============================================
# Example Schema: Extending the base record
# ===============================================
class Player(BasePlayer):
    """Example of extending BasePlayer with more saved stats."""

    extra: str = "yes"
