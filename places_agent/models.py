"""Typed data model shared by the clients, the dispatcher and the orchestrator."""
import json
from typing import Any, Dict, List, Literal, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from places_agent.errors import MalformedResponseError


class LatLng(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float


class PlaceRecord(BaseModel):
    """One normalized place search result."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    address: Optional[str] = None
    coordinates: LatLng = Field(alias="location")
    rating: Optional[float] = None
    place_id: str

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> "PlaceRecord":
        """Project a raw Places API result entry, dropping provider-only fields."""
        try:
            return cls(
                name=raw["name"],
                address=raw.get("formatted_address"),
                location=raw["geometry"]["location"],
                rating=raw.get("rating"),
                place_id=raw["place_id"],
            )
        except (KeyError, TypeError, ValidationError) as e:
            raise MalformedResponseError(f"Unexpected place entry: {e}") from e


_PLACES = TypeAdapter(List[PlaceRecord])


def serialize_places(places: Sequence[PlaceRecord]) -> str:
    """Serialize places to the JSON text fed back to the model."""
    return json.dumps(
        [p.model_dump(by_alias=True) for p in places],
        ensure_ascii=False,
    )


def parse_places(text: str) -> List[PlaceRecord]:
    return _PLACES.validate_json(text)


class FunctionCall(BaseModel):
    name: str
    arguments: str = "{}"


class ToolCall(BaseModel):
    id: str
    type: Literal["function"] = "function"
    function: FunctionCall

    @property
    def name(self) -> str:
        return self.function.name

    @property
    def arguments(self) -> str:
        return self.function.arguments


class Message(BaseModel):
    role: Literal["system", "user", "assistant", "tool"]
    content: Optional[str] = None
    tool_calls: Optional[List[ToolCall]] = None
    tool_call_id: Optional[str] = None

    def to_api(self) -> Dict[str, Any]:
        """Wire form accepted by the chat completions endpoint."""
        data = self.model_dump(exclude_none=True)
        if self.role == "assistant":
            # content may be null when tool_calls are present
            data.setdefault("content", self.content)
        return data


class AssistantMessage(Message):
    role: Literal["assistant"] = "assistant"

    @property
    def has_tool_calls(self) -> bool:
        return bool(self.tool_calls)


def system_message(content: str) -> Message:
    return Message(role="system", content=content)


def user_message(content: str) -> Message:
    return Message(role="user", content=content)


def tool_message(tool_call_id: str, content: str) -> Message:
    return Message(role="tool", tool_call_id=tool_call_id, content=content)
