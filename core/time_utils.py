"""
Clock Time Helpers
==================

Parsing, clamping and formatting for 24h "HH:MM" wall-clock values.

The lenient parser is what the public calculators use: it never raises and
coerces malformed components to 0. The strict parser raises TimeParseError and
exists for callers that need to reject bad input explicitly.
"""

from datetime import datetime
import logging
import math
import re
from typing import Optional, Union

import pytz

from models.data_models import (
    MINUTES_PER_DAY, ReportTime, RestFacilityClass, TimeParseError,
)

logger = logging.getLogger(__name__)

_STRICT_TIME_RE = re.compile(r'^(\d{1,2}):(\d{1,2})$')


def _js_round(value: float) -> int:
    """Round half up (away from -inf), matching the published calculator"""
    return int(math.floor(value + 0.5))


# ============================================================================
# CLAMPING
# ============================================================================

def clamp_hour(value: Union[int, float]) -> int:
    return max(0, min(23, int(math.floor(value))))


def clamp_minute(value: Union[int, float]) -> int:
    return max(0, min(59, int(math.floor(value))))


def clamp_sectors(value: Union[int, float], minimum: int = 1, maximum: int = 10) -> int:
    """Clamp a sector count into [minimum, maximum]; fractional counts floor"""
    try:
        sectors = int(math.floor(float(value)))
    except (TypeError, ValueError, OverflowError):
        logger.debug(f"Non-numeric sector count {value!r}, using {minimum}")
        return minimum
    return max(minimum, min(maximum, sectors))


def clamp_rest_facility_class(
    value: Optional[Union[int, RestFacilityClass]],
    default: RestFacilityClass = RestFacilityClass.CLASS_1
) -> RestFacilityClass:
    """Coerce None / int / enum into a RestFacilityClass, clamping ints to 1-3"""
    if value is None:
        return default
    if isinstance(value, RestFacilityClass):
        return value
    try:
        number = int(value)
    except OverflowError:
        # +-inf
        return RestFacilityClass.CLASS_3 if value > 0 else RestFacilityClass.CLASS_1
    except (TypeError, ValueError):
        logger.debug(f"Non-numeric rest facility class {value!r}, using {default.label}")
        return default
    return RestFacilityClass(max(1, min(3, number)))


# ============================================================================
# PARSING
# ============================================================================

def _component_to_int(part: str) -> int:
    """Integer value of one HH or MM component; empty or non-numeric -> 0"""
    part = part.strip()
    if not part:
        return 0
    try:
        return int(part)
    except ValueError:
        logger.debug(f"Non-numeric time component {part!r}, using 0")
        return 0


def parse_time_to_minutes(time_text: str) -> int:
    """
    Parse "HH:MM" or "H:MM" into minutes since midnight.

    Each component is coerced on its own: empty or non-numeric parts count
    as 0, then hour is clamped to 0-23 and minute to 0-59. Input without a
    ":" separator returns 0.
    """
    parts = str(time_text if time_text is not None else '').strip().split(':')
    if len(parts) < 2:
        logger.debug(f"Unparseable time {time_text!r}, using 00:00")
        return 0
    hour = _component_to_int(parts[0])
    minute = _component_to_int(parts[1])
    return clamp_hour(hour) * 60 + clamp_minute(minute)


def parse_time_strict(time_text: str) -> int:
    """
    Parse "HH:MM" into minutes since midnight, raising on bad input.

    Raises:
        TimeParseError: empty, non-numeric, or out-of-range components
    """
    if time_text is None or not str(time_text).strip():
        raise TimeParseError("Empty time value")
    match = _STRICT_TIME_RE.match(str(time_text).strip())
    if not match:
        raise TimeParseError(f"Expected HH:MM, got {time_text!r}")
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23:
        raise TimeParseError(f"Hour out of range (0-23): {hour}")
    if minute > 59:
        raise TimeParseError(f"Minute out of range (0-59): {minute}")
    return hour * 60 + minute


def parse_report_time(value: Union[str, ReportTime]) -> ReportTime:
    """Lenient conversion of a string or ReportTime into a ReportTime"""
    if isinstance(value, ReportTime):
        return value
    return ReportTime(minutes=parse_time_to_minutes(value))


def report_time_from_datetime(dt: datetime, timezone_name: str) -> str:
    """
    Local "HH:MM" report time for an instant at the crew's acclimatised zone.

    Naive datetimes are taken as UTC.
    """
    if dt.tzinfo is None:
        dt = pytz.utc.localize(dt)
    tz = pytz.timezone(timezone_name)
    local = dt.astimezone(tz)
    return f"{local.hour:02d}:{local.minute:02d}"


# ============================================================================
# FORMATTING
# ============================================================================

def format_minutes_as_time(minutes: float) -> str:
    """Minutes (any sign, any magnitude) -> "HH:MM" on a 24h clock"""
    normalized = _js_round(minutes) % MINUTES_PER_DAY
    hours, mins = divmod(normalized, 60)
    return f"{hours:02d}:{mins:02d}"


def format_hours(hours: float) -> str:
    """10.5 -> "10h 30m", 10 -> "10h" """
    total = _js_round(hours * 60)
    h, m = divmod(total, 60)
    if m == 0:
        return f"{h}h"
    return f"{h}h {m}m"


def format_duration(minutes: float) -> str:
    """Minutes -> "Xh Ym", "Xh" or "Ym"; non-positive -> "0m" """
    if minutes <= 0:
        return "0m"
    h, m = divmod(_js_round(minutes), 60)
    if h == 0:
        return f"{m}m"
    if m == 0:
        return f"{h}h"
    return f"{h}h {m}m"
