from collections import namedtuple
from dataclasses import dataclass
from datetime import datetime, time, timedelta, timezone

from .errors import EmptyTimetableError, ParseError

NextPrayer = namedtuple("NextPrayer", ["name", "at", "remaining"])


@dataclass
class Coordinates:
    lat: float
    lng: float


def local_now():
    # Naive wall time; offsets are resolved per instant by astimezone().
    return datetime.now()


def parse_clock(value):
    """Return (hour, minute) for a 24-hour "HH:MM" string."""
    try:
        parsed = datetime.strptime(value.strip(), "%H:%M")
    except (AttributeError, ValueError) as exc:
        raise ParseError(f"invalid prayer time {value!r}") from exc
    return parsed.hour, parsed.minute


def instant_today(value, now, days=0):
    hour, minute = parse_clock(value)
    day = now.date() + timedelta(days=days)
    return datetime.combine(day, time(hour, minute), tzinfo=now.tzinfo)


def _utc(moment):
    return moment.astimezone(timezone.utc)


def next_prayer(timings, now=None):
    """Find the prayer coming soonest at or after now.

    Prayers already passed today count as tomorrow's occurrence. Equal
    waits go to the lexically smallest name. Durations are measured in
    UTC so a daylight-saving switch in between is accounted for.
    """
    if not timings:
        raise EmptyTimetableError("no prayer times to compare")
    now = now or local_now()
    start = _utc(now)

    best = None
    for name in sorted(timings):
        at = instant_today(timings[name], now)
        if _utc(at) < start:
            at = instant_today(timings[name], now, days=1)
        remaining = _utc(at) - start
        if best is None or remaining < best.remaining:
            best = NextPrayer(name, at, remaining)
    return best


def sort_prayers(timings, now=None):
    # Clock order for today only: passed prayers stay first, unlike next_prayer.
    now = now or local_now()
    keyed = [(instant_today(value, now), name, value) for name, value in timings.items()]
    keyed.sort(key=lambda item: item[0])
    return [(name, value) for _at, name, value in keyed]
