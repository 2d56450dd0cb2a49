import json
import logging
import urllib.parse

from .calc import Coordinates
from .client import fetch_json
from .errors import ConfigError, DecodeError, NotFoundError, RemoteError

logger = logging.getLogger(__name__)

GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"


def geocode_city(city, api_key, url=GEOCODE_URL, timeout=None):
    if not api_key:
        raise ConfigError("GOOGLE_MAPS_API_KEY environment variable not set")

    query = urllib.parse.urlencode({"address": city, "key": api_key})
    logger.debug("Geocoding %r", city)
    data = fetch_json(f"{url}?{query}", timeout=timeout, label="geocode")
    if not isinstance(data, dict):
        raise DecodeError("failed to decode geocode JSON: expected an object")

    status = data.get("status", "OK")
    if status == "ZERO_RESULTS" or (status == "OK" and not data.get("results")):
        raise NotFoundError(f"city not found: {city}")
    if status != "OK":
        message = data.get("error_message") or "no details"
        raise RemoteError(f"geocode API returned status: {status} ({message})", status=status, body=json.dumps(data))

    try:
        location = data["results"][0]["geometry"]["location"]
        coords = Coordinates(lat=float(location["lat"]), lng=float(location["lng"]))
    except (KeyError, IndexError, TypeError, ValueError) as exc:
        raise DecodeError(f"malformed geocode result: {exc!r}") from exc

    logger.debug("Resolved %r to %s, %s", city, coords.lat, coords.lng)
    return coords
