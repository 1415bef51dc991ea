import argparse
import asyncio
import logging
from typing import List, Optional, Tuple

from places_agent.agent_app import ConversationOrchestrator, build_assistant
from places_agent.config import Settings, load_settings
from places_agent.errors import ConfigError, PlacesAgentError

logger = logging.getLogger(__name__)

# (title, prompt)
EXAMPLES: List[Tuple[str, str]] = [
    ("Example 1: Find coffee shops", "Find me the best coffee shops nearby"),
    ("Example 2: Find pizza places", "I want to eat pizza. Show me some good pizza places within 2km"),
    ("Example 3: Regular chat", "What's the capital of India?"),
]


async def run_examples(agent: ConversationOrchestrator, prompts: List[Tuple[str, str]],
                       location: Optional[str] = None) -> List[Optional[str]]:
    """Run each prompt in turn; a failed run is reported and skipped."""
    answers: List[Optional[str]] = []
    for title, prompt in prompts:
        print(f"\n\n{title}")
        print("-" * 60)
        try:
            answer = await agent.run(prompt, location)
        except PlacesAgentError as e:
            print(f"Conversation error: {e}")
            answers.append(None)
            continue
        print(f"\nAssistant: {answer}")
        answers.append(answer)
        print("\n" + "=" * 60 + "\n")
    return answers


def run(prompt: Optional[str], location: Optional[str], settings: Settings) -> List[Optional[str]]:
    print("=" * 60)
    print("Testing OpenAI Function Calling with Google Places")
    print("=" * 60)

    try:
        settings.require_openai_key()
    except ConfigError as e:
        print(f"Error: {e}")
        print("Set your OpenAI API key:")
        print("   export OPENAI_API_KEY='your-api-key-here'")
        return []

    agent = build_assistant(settings)
    prompts = [("Your question", prompt)] if prompt else EXAMPLES
    return asyncio.run(run_examples(agent, prompts, location))


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="OpenAI function calling with Google Places demo")
    parser.add_argument("prompt", nargs="?", default=None,
                        help="User question for the assistant (runs the built-in examples when omitted)")
    parser.add_argument("--location", default=None,
                        help="User location as 'lat,lng' (default: PLACES_AGENT_LOCATION or New Delhi)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log full API responses")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings()
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        return
    run(args.prompt, args.location, settings)


if __name__ == "__main__":
    main()
