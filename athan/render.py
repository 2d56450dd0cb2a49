from datetime import datetime

from .calc import sort_prayers

HEADER = "Islamic Prayer Times:"
SEPARATOR = "----------------------"


def format_time(value, format_24h):
    if format_24h:
        return value
    return datetime.strptime(value.strip(), "%H:%M").strftime("%I:%M %p").lstrip("0")


def format_countdown(delta):
    total_seconds = int(delta.total_seconds())
    if total_seconds < 0:
        total_seconds = 0
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def render_schedule(day, upcoming, show_hijri=False, time_format="24h", now=None):
    format_24h = time_format != "12h"
    lines = [HEADER, f"Date: {day.readable}"]
    if show_hijri:
        lines.append(f"Hijri Date: {day.hijri}")
    lines.append(SEPARATOR)
    for name, value in sort_prayers(day.timings, now):
        lines.append(f"{name:<8} \t: {format_time(value, format_24h)}")
    lines.append("")
    lines.append(f"Time Until Next Prayer ({upcoming.name}): {format_countdown(upcoming.remaining)}")
    return "\n".join(lines)
