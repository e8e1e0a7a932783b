"""
data_models.py - Core Data Structures
======================================

Value types for flight duty period (FDP) limit resolution and the
latest wheels-up back-calculation.

Every type here is immutable and produced fresh per call.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Optional, Union
from enum import Enum


MINUTES_PER_DAY = 24 * 60


# ============================================================================
# EXCEPTIONS
# ============================================================================

class TimeParseError(ValueError):
    """Raised by the strict HH:MM parser for malformed or out-of-range input"""


# ============================================================================
# ENUMS
# ============================================================================

class CrewComposition(Enum):
    """Crew complement, selects the FDP table family"""
    STANDARD = "standard"      # 2 pilots (report-time banded table)
    AUGMENTED_3 = "3-crew"     # 3 pilots (in-flight rest table)
    AUGMENTED_4 = "4-crew"     # 4 pilots (in-flight rest table)

    @property
    def pilots(self) -> int:
        return {
            CrewComposition.STANDARD: 2,
            CrewComposition.AUGMENTED_3: 3,
            CrewComposition.AUGMENTED_4: 4,
        }[self]

    @property
    def is_augmented(self) -> bool:
        return self is not CrewComposition.STANDARD


class RestFacilityClass(Enum):
    """
    In-flight rest facility classification for augmented crews.
    Class 1 allows the longest FDP, class 3 the shortest.
    """
    CLASS_1 = 1  # Bunk or lie-flat equivalent
    CLASS_2 = 2  # Reclining seat with leg support, separated area
    CLASS_3 = 3  # Passenger cabin seat

    @property
    def label(self) -> str:
        return f"Class {self.value}"


# ============================================================================
# INPUT VALUES
# ============================================================================

@dataclass(frozen=True)
class ReportTime:
    """
    Wall-clock report (duty start) time as minutes since midnight.

    Construct through `from_components` or the parsers in core.time_utils
    to get clamping. Direct construction is unchecked.
    """
    minutes: int

    @classmethod
    def from_components(cls, hour: int, minute: int) -> 'ReportTime':
        """Build from hour/minute, clamping hour to 0-23 and minute to 0-59"""
        hour = max(0, min(23, int(hour)))
        minute = max(0, min(59, int(minute)))
        return cls(minutes=hour * 60 + minute)

    @property
    def hour(self) -> int:
        return self.minutes // 60

    @property
    def minute(self) -> int:
        return self.minutes % 60

    @property
    def is_valid(self) -> bool:
        return 0 <= self.minutes < MINUTES_PER_DAY

    @property
    def hhmm(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"

    def __str__(self) -> str:
        return self.hhmm


ReportTimeInput = Union[str, ReportTime]
CrewCompositionInput = Union[str, CrewComposition]
RestFacilityInput = Optional[Union[int, RestFacilityClass]]


# ============================================================================
# RESULTS
# ============================================================================

@dataclass(frozen=True)
class FDPResult:
    """Resolved FDP / FDT limits for one report time and crew setup"""
    max_flight_duty_time_hours: float     # Max block (flight) time
    max_flight_duty_period_hours: float   # Max report-to-release period
    report_time_window: str               # Band label, or report time for augmented crews
    source: str                           # Matched table row, e.g. "2-pilot"

    def to_dict(self) -> Dict[str, Union[float, str]]:
        return {
            'maxFlightDutyTimeHours': self.max_flight_duty_time_hours,
            'maxFlightDutyPeriodHours': self.max_flight_duty_period_hours,
            'reportTimeWindow': self.report_time_window,
            'source': self.source,
        }


@dataclass(frozen=True)
class WheelsUpResult:
    """
    Latest legal wheels-up clock time for the final sector.

    `next_day` reports whether the duty period itself ends on or after the
    following midnight, not whether the printed wheels-up clock time rolled
    over.
    """
    time: str
    next_day: bool

    def to_dict(self) -> Dict[str, Union[str, bool]]:
        return {'time': self.time, 'nextDay': self.next_day}


@dataclass(frozen=True)
class TimelineSegment:
    """One slice of the duty budget (report -> sign-off)"""
    label: str
    minutes: float

    def to_dict(self) -> Dict[str, Union[str, float]]:
        return asdict(self)
