"""Tests for the shared data model."""

import pytest

from conftest import raw_place
from places_agent.errors import MalformedResponseError
from places_agent.models import (
    AssistantMessage,
    PlaceRecord,
    parse_places,
    serialize_places,
    tool_message,
)


class TestPlaceRecord:

    def test_from_raw(self):
        place = PlaceRecord.from_raw(raw_place(2))
        assert place.name == "Cafe 2"
        assert place.coordinates.lat == pytest.approx(28.632)
        assert place.coordinates.lng == pytest.approx(77.212)

    def test_from_raw_missing_place_id(self):
        raw = raw_place(0)
        del raw["place_id"]
        with pytest.raises(MalformedResponseError):
            PlaceRecord.from_raw(raw)

    def test_from_raw_missing_address_allowed(self):
        raw = raw_place(0)
        del raw["formatted_address"]
        assert PlaceRecord.from_raw(raw).address is None


class TestSerialization:

    def test_round_trip_preserves_place_ids(self):
        places = [PlaceRecord.from_raw(raw_place(i)) for i in range(5)]
        parsed = parse_places(serialize_places(places))

        assert len(parsed) == len(places)
        assert [p.place_id for p in parsed] == [p.place_id for p in places]
        assert parsed == places

    def test_empty(self):
        assert serialize_places([]) == "[]"
        assert parse_places("[]") == []

    def test_non_ascii_names_kept(self):
        raw = raw_place(0)
        raw["name"] = "Café Dilli Haat"
        text = serialize_places([PlaceRecord.from_raw(raw)])
        assert "Café" in text


class TestMessages:

    def test_tool_message_wire_form(self):
        assert tool_message("call_1", "[]").to_api() == {
            "role": "tool",
            "content": "[]",
            "tool_call_id": "call_1",
        }

    def test_assistant_without_tool_calls(self):
        msg = AssistantMessage(content="hi")
        assert not msg.has_tool_calls
        assert msg.to_api() == {"role": "assistant", "content": "hi"}
