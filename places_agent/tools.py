"""Tool handlers exposed to the chat model and the dispatcher that routes calls to them."""
import json
import logging
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from places_agent.errors import ArgumentDecodeError
from places_agent.models import ToolCall, serialize_places
from places_agent.servers.google_places_server import DEFAULT_RADIUS, PlacesSearchClient, parse_location
from places_agent.tool_base import ToolCommand, ToolHandler

logger = logging.getLogger(__name__)


def decode_arguments(tool_call: ToolCall, required: Iterable[str]) -> Dict[str, Any]:
    """Decode a tool call's JSON arguments and check the required keys."""
    try:
        args = json.loads(tool_call.arguments or "{}")
    except json.JSONDecodeError as e:
        raise ArgumentDecodeError(f"{tool_call.name}: arguments are not valid JSON: {e}") from e
    if not isinstance(args, dict):
        raise ArgumentDecodeError(f"{tool_call.name}: arguments must be a JSON object")

    missing = [k for k in required if k not in args]
    if missing:
        raise ArgumentDecodeError(f"{tool_call.name}: missing required arguments {missing}")
    return args


class GooglePlacesArgs(BaseModel):
    query: str = Field(min_length=1)
    location: str
    # the schema declares a number; fractional meters are truncated
    radius: float = Field(default=DEFAULT_RADIUS, gt=0, allow_inf_nan=False)

    @field_validator("location")
    @classmethod
    def _valid_location(cls, v: str) -> str:
        parse_location(v)
        return v


class GooglePlacesTool(ToolHandler):
    command = ToolCommand(
        "googlePlaces",
        {
            "query": {
                "type": "string",
                "description": "The search query (e.g., 'coffee shop', 'pizza restaurant')",
            },
            "location": {
                "type": "string",
                "description": "The latitude,longitude coordinates (e.g., '37.7749,-122.4194')",
            },
            "radius": {
                "type": "number",
                "description": f"Search radius in meters (default: {DEFAULT_RADIUS})",
                "default": DEFAULT_RADIUS,
            },
        },
        ["query", "location"],
        "Search for places using Google Places API. Useful for finding restaurants, cafes, shops, tourist spots, etc.",
    )

    def __init__(self, places: PlacesSearchClient):
        self.places = places

    async def call(self, tool_call: ToolCall) -> Optional[str]:
        raw = decode_arguments(tool_call, self.command.required)
        try:
            args = GooglePlacesArgs.model_validate(raw)
        except ValidationError as e:
            raise ArgumentDecodeError(f"{tool_call.name}: invalid arguments: {e}") from e

        places = await self.places.search(args.query, args.location, int(args.radius))
        logger.info("%s returned %d places", tool_call.name, len(places))
        return serialize_places(places)


class ToolDispatcher:
    """
    Routes a model tool call to the handler registered under its name.
    Unknown tool names yield None rather than an error.
    """

    def __init__(self, handlers: Iterable[ToolHandler]):
        self.handlers: Dict[str, ToolHandler] = {h.command.name: h for h in handlers}

    def schemas(self) -> List[Dict[str, Any]]:
        return [h.schema for h in self.handlers.values()]

    async def dispatch(self, tool_call: ToolCall) -> Optional[str]:
        handler = self.handlers.get(tool_call.name)
        if handler is None:
            logger.warning("Ignoring call to unknown tool %r", tool_call.name)
            return None
        logger.info("Executing %s with args: %s", tool_call.name, tool_call.arguments)
        return await handler.call(tool_call)
