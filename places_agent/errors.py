"""Error types raised by the places agent."""

from typing import Optional


class PlacesAgentError(Exception):
    """Base class for every error surfaced by a conversation run."""


class UpstreamError(PlacesAgentError):
    """A provider could not be reached or answered with a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None, detail=None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class MalformedResponseError(PlacesAgentError):
    """A provider answered successfully but the payload shape is unusable."""


class ArgumentDecodeError(PlacesAgentError, ValueError):
    """Tool arguments did not parse or did not satisfy the tool schema."""


class ConfigError(PlacesAgentError):
    """Required configuration is missing."""
