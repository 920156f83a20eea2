# tests/test_codec.py

"""Unit tests for the high score codec."""

import json
import logging

import pytest
from scoreforge import codec
from scoreforge.exceptions import RecordDecodeError
from scoreforge.schemas.player import BasePlayer, Player


def test_encode_writes_players_envelope():
    """Encoded text is a single object holding the ordered players array."""
    players = [BasePlayer(name="A", score=10), BasePlayer(name="B", score=8)]

    data = json.loads(codec.encode(players))

    assert list(data) == ["players"]
    assert data["players"] == [
        {"name": "A", "score": 10},
        {"name": "B", "score": 8},
    ]


def test_encode_keeps_subclass_and_extra_fields():
    """Subclass fields and undeclared extras are both written out."""
    players = [
        Player(name="Test-Kun", score=10, extra="Test-Stk"),
        BasePlayer(name="Speedy", score=7, time_ms=5120),
    ]

    data = json.loads(codec.encode(players))

    assert data["players"][0] == {"name": "Test-Kun", "score": 10, "extra": "Test-Stk"}
    assert data["players"][1] == {"name": "Speedy", "score": 7, "time_ms": 5120}


def test_encode_field_order_is_stable():
    """Declared fields come first, in declaration order."""
    text = codec.encode([Player(name="A", score=1)])

    assert text == '{"players":[{"name":"A","score":1,"extra":"yes"}]}'


def test_encode_with_indent_is_pretty():
    """An indent produces multi-line output that still decodes."""
    text = codec.encode([BasePlayer(name="A", score=1)], indent=2)

    assert "\n" in text
    assert codec.decode(text) == [BasePlayer(name="A", score=1)]


def test_round_trip_with_extension_fields():
    """decode(encode(x)) reproduces x field-for-field."""
    players = [
        Player(name="Test-Kun", score=10, extra="Test-Stk"),
        Player(name="aest-Kun", score=1),
        Player(name="aest-Kun", score=1),
    ]

    decoded = codec.decode(codec.encode(players), Player)

    assert decoded == players
    assert all(isinstance(p, Player) for p in decoded)


def test_round_trip_keeps_extras_on_base_type():
    """Extras survive a round trip even without a dedicated subclass."""
    players = [BasePlayer(name="A", score=3, stage="boss", combo=12)]

    decoded = codec.decode(codec.encode(players))

    assert decoded == players
    assert decoded[0].model_extra == {"stage": "boss", "combo": 12}


@pytest.mark.parametrize("text", [None, "", "   ", "{}", '{"players": null}'])
def test_decode_empty_representations(text):
    """Missing, blank and player-less envelopes decode to an empty list."""
    assert codec.decode(text) == []
    assert codec.parse(text) == []


def test_encode_empty_list():
    """An empty list encodes to an envelope with an empty array."""
    assert json.loads(codec.encode([])) == {"players": []}


@pytest.mark.parametrize(
    "text",
    [
        "not json at all",
        '{"players": [{"name": "A"}]}',
        '{"players": [{"name": "A", "score": "ten"}]}',
        '{"players": {"name": "A", "score": 1}}',
        "[1, 2, 3]",
    ],
)
def test_parse_raises_on_corrupt_text(text):
    """The strict parser reports malformed data."""
    with pytest.raises(RecordDecodeError) as exc_info:
        codec.parse(text)

    assert "reason" in exc_info.value.details


def test_decode_corrupt_text_returns_empty_and_warns(caplog):
    """The fail-soft decoder logs a warning and yields no records."""
    with caplog.at_level(logging.WARNING, logger="scoreforge.codec"):
        result = codec.decode('{"players": [{"score": 5}]}')

    assert result == []
    assert any(
        r.levelno == logging.WARNING and "unreadable" in r.getMessage()
        for r in caplog.records
    )
