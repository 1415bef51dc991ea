import logging
from typing import Any, Dict, List, Optional, Sequence

import openai
from openai import AsyncOpenAI
from pydantic import ValidationError

from places_agent.config import Settings
from places_agent.errors import MalformedResponseError, UpstreamError
from places_agent.models import AssistantMessage, Message

logger = logging.getLogger(__name__)


def make_client(settings: Settings) -> AsyncOpenAI:
    """Build the SDK client; raises ConfigError when the key is missing."""
    return AsyncOpenAI(
        api_key=settings.require_openai_key(),
        timeout=settings.request_timeout,
        max_retries=0,
    )


def _check_messages(messages: Sequence[Message]) -> None:
    if not messages:
        raise ValueError("messages must not be empty")
    if not any(m.role in ("system", "user") for m in messages):
        raise ValueError("messages must contain a system or user message")


def _check_tools(tools: Sequence[Dict[str, Any]]) -> None:
    for t in tools:
        fn = t.get("function") or {}
        params = fn.get("parameters") or {}
        if not fn.get("name") or not fn.get("description"):
            raise ValueError(f"tool schema needs a name and description: {t!r}")
        if params.get("type") != "object" or not isinstance(params.get("required"), list):
            raise ValueError(f"tool {fn['name']!r} needs an object parameter spec with a required list")


class ChatCompletionClient:
    """
    Chat completions with function calling. The model decides whether to
    answer directly or request tool invocations (tool_choice="auto").
    """

    def __init__(self, settings: Settings, client: Optional[AsyncOpenAI] = None):
        self.model = settings.model
        self.client = client or make_client(settings)

    async def complete(self, messages: Sequence[Message], tools: List[Dict[str, Any]]) -> AssistantMessage:
        _check_messages(messages)
        _check_tools(tools)

        try:
            resp = await self.client.chat.completions.create(
                model=self.model,
                messages=[m.to_api() for m in messages],
                tools=tools,
                tool_choice="auto",
            )
        except openai.APIResponseValidationError as e:
            raise MalformedResponseError(f"OpenAI response failed validation: {e}") from e
        except openai.APIStatusError as e:
            raise UpstreamError(
                f"OpenAI HTTP {e.status_code}: {e.message}", status_code=e.status_code, detail=e.body
            ) from e
        except openai.OpenAIError as e:
            # connection errors and timeouts
            raise UpstreamError(f"Error contacting OpenAI: {e}") from e

        logger.debug("OpenAI response body: %s", resp.model_dump_json(indent=2))

        if not getattr(resp, "choices", None) or resp.choices[0].message is None:
            raise MalformedResponseError("Invalid response from OpenAI API: no choices")

        try:
            return AssistantMessage.model_validate(resp.choices[0].message.model_dump())
        except ValidationError as e:
            raise MalformedResponseError(f"Invalid assistant message from OpenAI API: {e}") from e
