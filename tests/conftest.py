import io
import json
import urllib.error
import urllib.request

import pytest


class FakeResponse:
    def __init__(self, body, status=200, reason="OK"):
        if not isinstance(body, (bytes, str)):
            body = json.dumps(body)
        self._body = body.encode("utf-8") if isinstance(body, str) else body
        self.status = status
        self.reason = reason

    def read(self):
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class FakeOpener:
    """Stands in for urlopen: records requested URLs, replays canned results."""

    def __init__(self, *results):
        self.results = list(results)
        self.urls = []

    def __call__(self, req, timeout=None):
        self.urls.append(req.full_url)
        result = self.results.pop(0)
        if isinstance(result, BaseException):
            raise result
        return result


def http_error(url, code, reason, body):
    return urllib.error.HTTPError(url, code, reason, {}, io.BytesIO(body.encode("utf-8")))


@pytest.fixture
def opener(monkeypatch):
    def install(*results):
        fake = FakeOpener(*results)
        monkeypatch.setattr(urllib.request, "urlopen", fake)
        return fake
    return install


def timings_payload(timings=None, code=200):
    return {
        "code": code,
        "status": "OK",
        "data": {
            "timings": timings if timings is not None else {
                "Fajr": "05:00",
                "Sunrise": "06:30",
                "Dhuhr": "12:00",
                "Asr": "15:30",
                "Maghrib": "18:10",
                "Isha": "19:40"
            },
            "date": {
                "readable": "19 Oct 2026",
                "hijri": {"readable": "7 Jumada al-Ula 1448"}
            }
        }
    }


def geocode_payload(lat=36.7538, lng=3.0588, status="OK"):
    results = [] if status == "ZERO_RESULTS" else [
        {"geometry": {"location": {"lat": lat, "lng": lng}}, "formatted_address": "Algiers, Algeria"}
    ]
    return {"results": results, "status": status}
