import json
import logging
import urllib.parse
from dataclasses import dataclass, field

from .calc import local_now
from .client import fetch_json
from .errors import DecodeError, RemoteError

logger = logging.getLogger(__name__)

TIMINGS_URL = "http://api.aladhan.com/v1/timings"


@dataclass
class DayTimings:
    timings: dict = field(default_factory=dict)
    readable: str = ""
    hijri: str = ""


def build_url(coords, method, day, url=TIMINGS_URL):
    query = urllib.parse.urlencode({
        "latitude": f"{coords.lat:f}",
        "longitude": f"{coords.lng:f}",
        "method": int(method)
    })
    return f"{url}/{day.strftime('%d-%m-%Y')}?{query}"


def fetch_timings(coords, method, day=None, url=TIMINGS_URL, timeout=None):
    day = day or local_now().date()
    request_url = build_url(coords, method, day, url)
    logger.debug("Fetching timings: %s", request_url)
    payload = fetch_json(request_url, timeout=timeout, label="timings")
    if not isinstance(payload, dict):
        raise DecodeError("failed to decode timings JSON: expected an object")

    code = payload.get("code")
    if code != 200:
        raise RemoteError(f"API returned code: {code}", status=code, body=json.dumps(payload))

    data = payload.get("data")
    if not isinstance(data, dict) or not isinstance(data.get("timings"), dict):
        raise DecodeError("timings JSON: data.timings is not an object")
    date_info = data.get("date") or {}
    if not isinstance(date_info, dict):
        raise DecodeError("timings JSON: data.date is not an object")
    hijri = date_info.get("hijri") or {}
    if not isinstance(hijri, dict):
        raise DecodeError("timings JSON: data.date.hijri is not an object")

    return DayTimings(
        timings={str(k): str(v) for k, v in data["timings"].items()},
        readable=str(date_info.get("readable", "")),
        hijri=str(hijri.get("readable", ""))
    )
