"""Shared fixtures and payload builders for the places agent tests."""

import json
from typing import Any, Dict, List, Optional

import pytest
import requests

from places_agent.config import Settings
from places_agent.models import AssistantMessage, FunctionCall, ToolCall


def raw_place(idx: int) -> Dict[str, Any]:
    """A realistic Google Places text-search result entry."""
    return {
        "business_status": "OPERATIONAL",
        "formatted_address": f"{idx} Connaught Place, New Delhi, Delhi 110001, India",
        "geometry": {
            "location": {"lat": 28.63 + idx / 1000, "lng": 77.21 + idx / 1000},
            "viewport": {"northeast": {"lat": 28.7, "lng": 77.3}, "southwest": {"lat": 28.6, "lng": 77.1}},
        },
        "icon": "https://maps.gstatic.com/mapfiles/place_api/icons/v1/png_71/cafe-71.png",
        "name": f"Cafe {idx}",
        "place_id": f"ChIJplace{idx}",
        "rating": 4.0 + idx / 10,
        "types": ["cafe", "food", "point_of_interest", "establishment"],
        "user_ratings_total": 100 + idx,
    }


def places_payload(count: int, status: str = "OK") -> Dict[str, Any]:
    return {"html_attributions": [], "results": [raw_place(i) for i in range(count)], "status": status}


def http_response(status_code: int, payload: Any = None, text: Optional[str] = None) -> requests.Response:
    """Build a real requests.Response without touching the network."""
    r = requests.Response()
    r.status_code = status_code
    r.encoding = "utf-8"
    r._content = (text if text is not None else json.dumps(payload)).encode("utf-8")
    return r


def tool_call(name: str = "googlePlaces", arguments: Any = None, call_id: str = "call_1") -> ToolCall:
    if arguments is None:
        arguments = {"query": "coffee shop", "location": "28.6139,77.2090"}
    if not isinstance(arguments, str):
        arguments = json.dumps(arguments)
    return ToolCall(id=call_id, function=FunctionCall(name=name, arguments=arguments))


def assistant(content: Optional[str] = None, calls: Optional[List[ToolCall]] = None) -> AssistantMessage:
    return AssistantMessage(content=content, tool_calls=calls)


def chat_completion_payload(content: Optional[str] = "Hello!", tool_calls: Optional[list] = None) -> dict:
    """Build a realistic OpenAI chat completion response dict."""
    message: Dict[str, Any] = {"role": "assistant", "content": content}
    if tool_calls:
        message["tool_calls"] = tool_calls
    return {
        "id": "chatcmpl-test123",
        "object": "chat.completion",
        "created": 1760000000,
        "model": "gpt-4o-mini",
        "choices": [
            {
                "index": 0,
                "message": message,
                "finish_reason": "tool_calls" if tool_calls else "stop",
            }
        ],
        "usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15},
    }


@pytest.fixture
def settings() -> Settings:
    return Settings(
        openai_api_key="test-openai-key",
        google_places_api_key="test-places-key",
        model="gpt-4o-mini",
        request_timeout=5.0,
    )
