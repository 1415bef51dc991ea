"""Google Places text-search client."""
import logging
import math
from typing import List, Optional, Tuple

import requests

from places_agent.config import Settings
from places_agent.errors import ArgumentDecodeError, UpstreamError
from places_agent.models import PlaceRecord

logger = logging.getLogger(__name__)

TEXT_SEARCH_URL = "https://maps.googleapis.com/maps/api/place/textsearch/json"
DEFAULT_RADIUS = 1000

# Application-level statuses Google reports alongside HTTP 200
_OK_STATUSES = ("OK", "ZERO_RESULTS")


def parse_location(location: str) -> Tuple[float, float]:
    """Parse a "lat,lng" string into floats."""
    parts = str(location).split(",")
    if len(parts) != 2:
        raise ArgumentDecodeError(f"location must be 'lat,lng', got {location!r}")
    try:
        lat, lng = float(parts[0]), float(parts[1])
    except ValueError as e:
        raise ArgumentDecodeError(f"location must be 'lat,lng', got {location!r}") from e
    if not (math.isfinite(lat) and math.isfinite(lng)):
        raise ArgumentDecodeError(f"location must be finite, got {location!r}")
    return lat, lng


class PlacesSearchClient:
    """
    Text search against the Google Places API (query + location bias + radius).
    """

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self.api_key = settings.google_places_api_key
        self.timeout = settings.request_timeout
        self.session = session or requests.Session()

    async def search(self, query: str, location: str, radius: int = DEFAULT_RADIUS) -> List[PlaceRecord]:
        """Search places matching ``query`` around ``location``.

        Raises UpstreamError for network errors, non-2xx statuses and payloads
        without a ``results`` list.
        """
        if not query or not str(query).strip():
            raise ArgumentDecodeError("query must be non-empty")
        lat, lng = parse_location(location)
        if radius is None or not math.isfinite(radius) or radius <= 0:
            raise ArgumentDecodeError(f"radius must be a positive finite number, got {radius!r}")

        params = {
            "query": query,
            "location": f"{lat},{lng}",
            "radius": int(radius),
            "key": self.api_key or "",
        }

        try:
            r = self.session.get(TEXT_SEARCH_URL, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise UpstreamError(f"Network error contacting Google Places: {e}") from e

        if not r.ok:
            raise UpstreamError(
                f"Google Places HTTP {r.status_code}", status_code=r.status_code, detail=r.text
            )

        try:
            data = r.json()
        except ValueError as e:
            raise UpstreamError("Google Places returned non-JSON response", status_code=r.status_code) from e

        if not isinstance(data, dict) or not isinstance(data.get("results"), list):
            raise UpstreamError("Google Places response has no results list", status_code=r.status_code, detail=data)

        status = data.get("status", "OK")
        if status not in _OK_STATUSES:
            raise UpstreamError(
                f"Google Places status {status}: {data.get('error_message', '')}".rstrip(": "),
                status_code=r.status_code,
                detail=data,
            )

        places = [PlaceRecord.from_raw(x) for x in data["results"]]
        logger.debug("Google Places returned %d results for %r", len(places), query)
        return places
