from datetime import datetime, timedelta, timezone

from athan.calc import next_prayer
from athan.render import format_countdown, format_time, render_schedule
from athan.timings import DayTimings

TZ = timezone.utc
NOW = datetime(2026, 10, 19, 13, 0, tzinfo=TZ)


def make_day():
    return DayTimings(
        timings={"Asr": "15:30", "Fajr": "05:00", "Dhuhr": "12:00"},
        readable="19 Oct 2026",
        hijri="7 Jumada al-Ula 1448"
    )


def test_format_countdown():
    assert format_countdown(timedelta(0)) == "00:00:00"
    assert format_countdown(timedelta(hours=2, minutes=30)) == "02:30:00"
    assert format_countdown(timedelta(seconds=3661, microseconds=900000)) == "01:01:01"
    assert format_countdown(timedelta(seconds=-5)) == "00:00:00"


def test_format_time():
    assert format_time("05:00", True) == "05:00"
    assert format_time("05:00", False) == "5:00 AM"
    assert format_time("15:30", False) == "3:30 PM"


def test_render_schedule():
    day = make_day()
    text = render_schedule(day, next_prayer(day.timings, NOW), now=NOW)
    assert text.splitlines() == [
        "Islamic Prayer Times:",
        "Date: 19 Oct 2026",
        "----------------------",
        "Fajr     \t: 05:00",
        "Dhuhr    \t: 12:00",
        "Asr      \t: 15:30",
        "",
        "Time Until Next Prayer (Asr): 02:30:00"
    ]


def test_render_schedule_with_hijri_and_12h():
    day = make_day()
    lines = render_schedule(
        day, next_prayer(day.timings, NOW), show_hijri=True, time_format="12h", now=NOW
    ).splitlines()
    assert lines[2] == "Hijri Date: 7 Jumada al-Ula 1448"
    assert lines[4] == "Fajr     \t: 5:00 AM"
    assert lines[6] == "Asr      \t: 3:30 PM"
