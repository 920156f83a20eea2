# src/scoreforge/codec.py

"""Encoding and decoding of high score lists to stored JSON text.

The stored form is the ``HighScores`` envelope: a JSON object with a single
``players`` array. Decoding is parameterised by the record class so that
subclasses of ``BasePlayer`` get their own fields back.
"""

from __future__ import annotations

import logging
from typing import Iterable, TypeVar

from pydantic import ValidationError as PydanticValidationError

from scoreforge.exceptions import RecordDecodeError
from scoreforge.schemas.highscores import HighScores
from scoreforge.schemas.player import BasePlayer

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BasePlayer)


def encode(records: Iterable[BasePlayer], *, indent: int | None = None) -> str:
    """Serialize records, in order, to the stored JSON envelope.

    Every field is written, including subclass fields and undeclared extras.
    """
    envelope = HighScores[BasePlayer](players=list(records))
    # serialize_as_any keeps subclass fields that BasePlayer does not declare
    return envelope.model_dump_json(indent=indent, serialize_as_any=True)


def parse(text: str | None, player_type: type[T] = BasePlayer) -> list[T]:
    """Strictly decode stored text into a list of ``player_type`` records.

    Empty text and an envelope without ``players`` both decode to an empty
    list.

    Raises:
        RecordDecodeError: If the text is not valid JSON or any record fails
            validation against ``player_type``.
    """
    if text is None or not text.strip():
        return []

    try:
        envelope = HighScores[player_type].model_validate_json(text)
    except PydanticValidationError as e:
        raise RecordDecodeError(
            f"{e.error_count()} validation error(s); first: {e.errors()[0]['msg']}"
        ) from e

    return list(envelope.players)


def decode(text: str | None, player_type: type[T] = BasePlayer) -> list[T]:
    """Decode stored text, substituting an empty list for corrupt data.

    This is the fail-soft counterpart of :func:`parse`: a corrupt blob is
    logged and treated as a level with no scores yet.
    """
    try:
        return parse(text, player_type)
    except RecordDecodeError as e:
        logger.warning(
            "Discarding unreadable high score data: %s",
            e.message,
            extra={"player_type": player_type.__name__, **e.details},
        )
        return []
