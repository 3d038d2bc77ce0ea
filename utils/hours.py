"""
Operating Hours Utilities
Parsing of weekly opening-hours strings and open/closed status resolution

Hours strings come from the provider's weekday descriptions joined with " · ":
    "Monday: 6:00 AM – 9:00 PM · Tuesday: Closed · Wednesday: Open 24 hours"
Day names may be long ("Monday") or short ("Mon"). Everything here is
best-effort: malformed input degrades to None / [] and never raises.
"""

import re
from datetime import datetime
from typing import Iterator, List, Optional, Tuple

from config import (
    get_local_now,
    get_logger,
    HOURS_SEGMENT_SEPARATOR,
    ALWAYS_OPEN_CLOSES_AT,
    DAY_NAMES_LONG,
    DAY_NAMES_SHORT,
)
from models import PlaceStatus, DayHours
from .text import shorten

logger = get_logger(__name__)

_TIME_12H = re.compile(r'^(\d{1,2}):(\d{2})\s*(AM|PM)$', re.IGNORECASE)
_TIME_24H = re.compile(r'^(\d{1,2}):(\d{2})$')
_TIME_RANGE = re.compile(
    r'(\d{1,2}:\d{2}\s*(?:AM|PM)?)\s*[–-]\s*(\d{1,2}:\d{2}\s*(?:AM|PM)?)',
    re.IGNORECASE
)
_HAS_DIGIT = re.compile(r'\d')
_CLOSED = re.compile(r'closed', re.IGNORECASE)
_ALWAYS_OPEN = re.compile(
    r'open\s*24|24\s*hour|00:00\s*[–-]\s*24:00|12:00\s*AM\s*[–-]\s*11:59\s*PM',
    re.IGNORECASE
)


# ========================================
# TIME PARSING / FORMATTING
# ========================================

def parse_time_to_minutes(time_str: str) -> Optional[int]:
    """
    Parse "6:00 AM", "9:00 pm", "06:00" or "21:00" to minutes since midnight.

    Returns:
        0-1439, or None when the text is not a valid clock time
    """
    if not isinstance(time_str, str):
        return None
    s = time_str.strip()

    match = _TIME_12H.match(s)
    if match:
        hour = int(match.group(1))
        minute = int(match.group(2))
        if not (1 <= hour <= 12) or minute > 59:
            return None
        meridiem = match.group(3).upper()
        if meridiem == 'PM' and hour != 12:
            hour += 12
        if meridiem == 'AM' and hour == 12:
            hour = 0
        return hour * 60 + minute

    match = _TIME_24H.match(s)
    if match:
        hour = int(match.group(1))
        minute = int(match.group(2))
        if hour > 23 or minute > 59:
            return None
        return hour * 60 + minute

    return None


def format_minutes_12h(minutes: int) -> str:
    """Format minutes since midnight as "h:mm AM/PM"."""
    hour = (minutes // 60) % 24
    minute = minutes % 60
    period = 'PM' if hour >= 12 else 'AM'
    hour12 = hour % 12 or 12
    return f"{hour12}:{minute:02d} {period}"


def _parse_range(body: str) -> Optional[Tuple[int, int]]:
    """Extract (open_minute, close_minute) from "6:00 AM – 9:00 PM"."""
    match = _TIME_RANGE.search(body)
    if not match:
        return None
    open_min = parse_time_to_minutes(match.group(1))
    close_min = parse_time_to_minutes(match.group(2))
    if open_min is None or close_min is None:
        return None
    return open_min, close_min


def _is_closed(body: str) -> bool:
    return bool(_CLOSED.search(body)) and not _ALWAYS_OPEN.search(body)


def _is_within(current_min: int, open_min: int, close_min: int) -> bool:
    """Inclusive range check; close <= open means the span crosses midnight."""
    if close_min > open_min:
        return open_min <= current_min <= close_min
    return current_min >= open_min or current_min <= close_min


# ========================================
# DAY SEGMENTS
# ========================================

def split_segments(hours_of_operation: str) -> List[str]:
    """Split the joined hours string into trimmed day segments."""
    return [segment.strip() for segment in hours_of_operation.split(HOURS_SEGMENT_SEPARATOR)]


def find_day_segment(segments: List[str], day_index: int) -> Optional[str]:
    """
    Resolve the segment for a day of the week.

    Looks for a segment starting with the long or short day name first
    ("Monday:" / "Mon:"). Only if no segment is named falls back to the
    segment at position day_index.

    Args:
        segments: Output of split_segments
        day_index: 0 = Sunday ... 6 = Saturday

    Returns:
        The segment text, or None
    """
    long_name = DAY_NAMES_LONG[day_index]
    short_name = DAY_NAMES_SHORT[day_index]
    for segment in segments:
        if segment.startswith(long_name + ':') or segment.startswith(short_name + ':'):
            return segment

    if day_index < len(segments) and segments[day_index]:
        return segments[day_index]
    return None


def segment_body(segment: str) -> str:
    """
    Drop the "<Day>:" prefix.

    A prefix containing digits is the first clock time of an unnamed
    segment ("6:00 AM – 9:00 PM"), not a day name, and is kept.
    """
    if ':' in segment:
        prefix, body = segment.split(':', 1)
        if not _HAS_DIGIT.search(prefix):
            return body.strip()
    return segment


def _day_index(now: datetime) -> int:
    # datetime.weekday() is 0 = Monday
    return (now.weekday() + 1) % 7


def _is_blank(hours_of_operation) -> bool:
    return not isinstance(hours_of_operation, str) or not hours_of_operation.strip()


# ========================================
# STATUS
# ========================================

def _opening_minute(segment: Optional[str]) -> Optional[int]:
    """Opening time of a day segment; 24-hour days open at midnight."""
    if not segment:
        return None
    body = segment_body(segment)
    if _is_closed(body):
        return None
    if _ALWAYS_OPEN.search(body):
        return 0
    span = _parse_range(body)
    return span[0] if span else None


def _find_next_opening(segments: List[str], day_index: int) -> Optional[PlaceStatus]:
    """
    Scan forward day by day (wrapping, at most 7 days) for the next opening.
    """
    for offset in range(1, 8):
        next_index = (day_index + offset) % 7
        opens_at = _opening_minute(find_day_segment(segments, next_index))
        if opens_at is not None:
            return PlaceStatus(is_open=False, opens_at=format_minutes_12h(opens_at))

    logger.debug("No opening found in the next 7 days")
    return None


def get_place_status(hours_of_operation: Optional[str],
                     now: Optional[datetime] = None) -> Optional[PlaceStatus]:
    """
    Open/closed status for right now plus the relevant time for display.

    - Open: closes_at (e.g. "9:00 PM"); 24-hour days report "11:59 PM"
    - Closed: opens_at, later today or on the next day with parseable hours

    Args:
        hours_of_operation: Joined weekly hours string
        now: Evaluation time (defaults to now in the configured timezone)

    Returns:
        PlaceStatus, or None when hours are missing or unparseable
    """
    if _is_blank(hours_of_operation):
        return None

    now = now or get_local_now()
    day_index = _day_index(now)
    segments = split_segments(hours_of_operation)

    today = find_day_segment(segments, day_index)
    if today is None:
        logger.debug(f"No segment for {DAY_NAMES_LONG[day_index]} in '{shorten(hours_of_operation)}'")
        return None

    body = segment_body(today)

    if _is_closed(body):
        return _find_next_opening(segments, day_index)

    if _ALWAYS_OPEN.search(body):
        return PlaceStatus(is_open=True, closes_at=ALWAYS_OPEN_CLOSES_AT)

    span = _parse_range(body)
    if span is None:
        logger.debug(f"Could not parse hours '{shorten(today)}'")
        return None

    open_min, close_min = span
    current_min = now.hour * 60 + now.minute

    if _is_within(current_min, open_min, close_min):
        return PlaceStatus(is_open=True, closes_at=format_minutes_12h(close_min))

    if current_min < open_min:
        return PlaceStatus(is_open=False, opens_at=format_minutes_12h(open_min))

    return _find_next_opening(segments, day_index)


def is_place_open_now(hours_of_operation: Optional[str],
                      now: Optional[datetime] = None) -> Optional[bool]:
    """True if open, False if closed, None if unknown."""
    status = get_place_status(hours_of_operation, now)
    if status is None:
        return None
    return status.is_open


def format_status_line(status: Optional[PlaceStatus]) -> Optional[str]:
    """
    Card badge text: "Open | Closes 9:00 PM" or "Closed | Opens 6:00 AM".
    """
    if status is None:
        return None
    if status.is_open:
        return f"Open | Closes {status.closes_at}"
    return f"Closed | Opens {status.opens_at}"


# ========================================
# WEEKLY SCHEDULE
# ========================================

def iter_hours_by_day(hours_of_operation: Optional[str],
                      now: Optional[datetime] = None) -> Iterator[DayHours]:
    """
    Yield today's hours then the following six days.

    Days without a segment are skipped.
    """
    if _is_blank(hours_of_operation):
        return

    now = now or get_local_now()
    today_index = _day_index(now)
    segments = split_segments(hours_of_operation)

    for offset in range(7):
        day_index = (today_index + offset) % 7
        segment = find_day_segment(segments, day_index)
        if segment is None:
            continue
        yield DayHours(
            day_name=DAY_NAMES_LONG[day_index],
            hours_text=segment_body(segment) or '—'
        )


def get_hours_by_day_starting_today(hours_of_operation: Optional[str],
                                    now: Optional[datetime] = None) -> List[DayHours]:
    """
    Weekly schedule starting today, e.g. Tuesday, Wednesday, ..., Monday.

    Returns:
        At most 7 DayHours entries (empty when hours are missing)
    """
    return list(iter_hours_by_day(hours_of_operation, now))


def join_weekday_descriptions(descriptions: Optional[List[str]]) -> Optional[str]:
    """
    Build the stored hours string from provider weekday descriptions.

    Args:
        descriptions: e.g. ["Monday: 6:00 AM – 9:00 PM", "Tuesday: Closed", ...]

    Returns:
        Joined string, or None when there is nothing to store
    """
    if not descriptions:
        return None
    cleaned = [d.strip() for d in descriptions if isinstance(d, str) and d.strip()]
    if not cleaned:
        return None
    return HOURS_SEGMENT_SEPARATOR.join(cleaned)
