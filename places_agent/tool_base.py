# tool_base.py
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from places_agent.models import ToolCall


class ToolCommand:
    """
    Describes one tool the chat model may call.
    Example: name='googlePlaces', params={'query': {...}, 'location': {...}},
    required=['query', 'location'], description='...'
    params maps each argument name to its JSON-schema property spec.
    """
    def __init__(self, name: str, params: Dict[str, Dict[str, Any]], required: List[str],
                 description: str = ""):
        self.name = name
        self.params = params
        self.required = required
        self.description = description

    def to_schema(self) -> Dict[str, Any]:
        """OpenAI function-tool schema for this command."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": {
                    "type": "object",
                    "properties": self.params,
                    "required": list(self.required),
                },
            },
        }


class ToolHandler(ABC):
    """
    One registered tool: exposes its OpenAI function schema and executes
    decoded calls, returning text for a tool-role message.
    """
    command: ToolCommand

    @property
    def schema(self) -> Dict[str, Any]:
        return self.command.to_schema()

    @abstractmethod
    async def call(self, tool_call: ToolCall) -> Optional[str]:
        """
        Execute one tool call and serialize its result.
        """
        ...
