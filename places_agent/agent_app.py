import logging
from typing import List, Optional

from places_agent.config import Settings
from places_agent.models import Message, system_message, tool_message, user_message
from places_agent.openai_client import ChatCompletionClient
from places_agent.servers.google_places_server import PlacesSearchClient
from places_agent.tools import GooglePlacesTool, ToolDispatcher

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a helpful assistant that can search for places. "
    "User's current location is {location}."
)


class ConversationOrchestrator:
    """
    Runs one user request through at most two chat rounds:
    ask the model, execute any tool calls it makes, then ask again with the
    tool results appended. Errors from any collaborator propagate unchanged.
    """

    def __init__(self, chat: ChatCompletionClient, dispatcher: ToolDispatcher, default_location: str):
        self.chat = chat
        self.dispatcher = dispatcher
        self.default_location = default_location

    async def run(self, prompt: str, location: Optional[str] = None) -> Optional[str]:
        location = location or self.default_location
        tools = self.dispatcher.schemas()
        messages: List[Message] = [
            system_message(SYSTEM_PROMPT.format(location=location)),
            user_message(prompt),
        ]
        logger.info("User: %s", prompt)
        logger.info("Location: %s", location)

        # First call: let the model decide whether to call tools
        logger.info("Making first API call...")
        msg = await self.chat.complete(messages, tools)

        if not msg.has_tool_calls:
            logger.info("Assistant: %s", msg.content)
            return msg.content

        logger.info("Model called tools: %s", ", ".join(tc.name for tc in msg.tool_calls))
        messages.append(msg)

        # Execute each tool call in declared order and append tool results
        for call in msg.tool_calls:
            result = await self.dispatcher.dispatch(call)
            messages.append(tool_message(call.id, result if result is not None else ""))

        # Second call: provide tool results and get final answer
        logger.info("Making second API call with function results...")
        final = await self.chat.complete(messages, tools)
        if final.has_tool_calls:
            logger.warning(
                "Ignoring %d tool call(s) requested after the tool round", len(final.tool_calls)
            )

        logger.info("Assistant: %s", final.content)
        return final.content


def build_assistant(settings: Settings) -> ConversationOrchestrator:
    """Wire the clients and the tool registry from one Settings object."""
    places = PlacesSearchClient(settings)
    dispatcher = ToolDispatcher([GooglePlacesTool(places)])
    return ConversationOrchestrator(ChatCompletionClient(settings), dispatcher, settings.default_location)

