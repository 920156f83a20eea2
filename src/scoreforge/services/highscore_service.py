# src/scoreforge/services/highscore_service.py

"""Business logic for per-level high score lists.

Every operation is a load-mutate-store cycle against a ``KeyValueStore``;
nothing is cached between calls. There is no locking: two callers adding to
the same level at once can interleave their cycles and lose one of the
updates, so callers sharing a store across threads must serialize access
themselves.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from scoreforge import codec
from scoreforge.exceptions import InvalidLimitError
from scoreforge.schemas.player import BasePlayer
from scoreforge.storage.base import KeyValueStore

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BasePlayer)

# Prefix that keeps high score keys apart from other stored preferences.
KEY_PREFIX = "Highscores-"

DEFAULT_LIMIT = 100


def identifier_for(level_name: str) -> str:
    """Return the storage key for a level's high scores."""
    return f"{KEY_PREFIX}{level_name}"


def _load(store: KeyValueStore, level_name: str, player_type: type[T]) -> list[T]:
    text = store.get(identifier_for(level_name), "")
    return codec.decode(text, player_type)


def _rank_of(player: BasePlayer, players: list[BasePlayer]) -> int:
    # Identity, not equality: an equal-valued record already on the board
    # must not be mistaken for the one just inserted.
    for position, candidate in enumerate(players, start=1):
        if candidate is player:
            return position
    return 0


def reset_high_scores(store: KeyValueStore, level_name: str) -> None:
    """Remove all high scores for the given level.

    Resetting a level that has no scores is a no-op.
    """
    key = identifier_for(level_name)
    store.delete(key)
    store.flush()
    logger.info("Reset high scores", extra={"level": level_name, "key": key})


def add_high_score(
    store: KeyValueStore,
    level_name: str,
    player: T,
    limit: int = DEFAULT_LIMIT,
    ascending: bool = False,
) -> int:
    """
    Add a player's score to a level and return the player's rank.

    The stored list is re-sorted by score (highest first, or lowest first
    when ``ascending`` is set) with ties broken by name in ascending order,
    then cut down to ``limit`` entries before being saved.

    Existing entries are decoded as ``BasePlayer``: their extension fields
    are kept as extras, so records of any shape can share one board.

    Returns:
        The 1-based position of ``player`` in the saved list, or 0 if it did
        not make the cut.

    Raises:
        InvalidLimitError: If ``limit`` is less than 1.
        StorageUnavailableError: If the store cannot be read or written.
    """
    if limit < 1:
        raise InvalidLimitError(limit)

    players: list[BasePlayer] = list(_load(store, level_name, BasePlayer))
    players.append(player)

    # Two stable passes: name ascending first, then score in the requested
    # direction, so equal scores stay in name order either way.
    players.sort(key=lambda p: p.name)
    players.sort(key=lambda p: p.score, reverse=not ascending)
    del players[limit:]

    store.set(identifier_for(level_name), codec.encode(players))
    store.flush()

    rank = _rank_of(player, players)
    logger.info(
        "Added high score",
        extra={
            "level": level_name,
            "player_name": player.name,
            "score": player.score,
            "rank": rank,
            "limit": limit,
            "ascending": ascending,
        },
    )
    return rank


def get_high_scores(
    store: KeyValueStore, level_name: str, player_type: type[T] = BasePlayer
) -> list[T]:
    """
    Get all high scores for the given level, in stored (ranked) order.

    Returns an empty list if the level has no scores or its stored data is
    unreadable.
    """
    players = _load(store, level_name, player_type)
    logger.debug(
        "Loaded high scores",
        extra={"level": level_name, "count": len(players)},
    )
    return players
