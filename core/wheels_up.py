"""
Latest Wheels-Up Back-Calculation
=================================

Finds the latest wheels-up time for the final sector so the duty period
still ends legally:

    sign-off = wheels up + block + destination taxi + sign-off buffer
    sign-off <= report + max FDP

so latest wheels up = report + max FDP - block - taxi - buffer.
"""

import logging
from typing import Optional, Tuple

from models.data_models import (
    MINUTES_PER_DAY, ReportTimeInput, TimelineSegment, WheelsUpResult,
)
from core.parameters import CalculatorConfig, DEFAULT_CONFIG
from core.time_utils import format_minutes_as_time, parse_report_time

logger = logging.getLogger(__name__)


class WheelsUpBackCalculator:
    """Invert the FDP budget to the latest legal departure clock time"""

    def __init__(self, config: CalculatorConfig = None):
        self.config = config or DEFAULT_CONFIG

    @property
    def sign_off_minutes(self) -> int:
        return self.config.framework.sign_off_buffer_minutes

    def _tail_minutes(self, block_minutes: float, taxi_minutes: float) -> float:
        return block_minutes + taxi_minutes + self.sign_off_minutes

    def latest_wheels_up(
        self,
        report_time: ReportTimeInput,
        max_fdp_hours: float,
        final_sector_block_hours: float,
        destination_taxi_minutes: float = 0,
    ) -> Optional[WheelsUpResult]:
        """
        Latest wheels-up time for the final sector.

        Args:
            report_time: FDP start "HH:MM"
            max_fdp_hours: Max flight duty period in hours
            final_sector_block_hours: Block time of the last sector in hours
            destination_taxi_minutes: Taxi time at destination, negative -> 0

        Returns:
            WheelsUpResult, or None when there is no final-sector time or the
            block + taxi + sign-off tail does not fit in the FDP budget
        """
        report_min = parse_report_time(report_time).minutes
        budget_min = max_fdp_hours * 60
        fdp_end_min = report_min + budget_min
        block_min = final_sector_block_hours * 60
        taxi_min = max(0, destination_taxi_minutes)
        tail_min = self._tail_minutes(block_min, taxi_min)

        if final_sector_block_hours <= 0:
            logger.debug("No final sector block time; latest wheels-up unavailable")
            return None
        if tail_min > budget_min:
            logger.debug(
                f"Tail {tail_min:.0f} min exceeds FDP budget {budget_min:.0f} min; "
                "latest wheels-up unavailable"
            )
            return None

        wheels_up_min = fdp_end_min - tail_min
        next_day = fdp_end_min >= MINUTES_PER_DAY
        return WheelsUpResult(time=format_minutes_as_time(wheels_up_min), next_day=next_day)

    def duty_timeline(
        self,
        report_time: ReportTimeInput,
        max_fdp_hours: float,
        final_sector_block_hours: float,
        destination_taxi_minutes: float = 0,
    ) -> Optional[Tuple[TimelineSegment, ...]]:
        """
        Breakdown of the FDP budget when departing at the latest wheels-up.

        Segments: duty to wheels up | last sector block | destination taxi |
        sign-off. Their sum equals the FDP budget.
        """
        result = self.latest_wheels_up(
            report_time, max_fdp_hours, final_sector_block_hours, destination_taxi_minutes
        )
        if result is None:
            return None

        block_min = final_sector_block_hours * 60
        taxi_min = max(0, destination_taxi_minutes)
        duty_to_wheels_up = max_fdp_hours * 60 - self._tail_minutes(block_min, taxi_min)
        return (
            TimelineSegment('Duty to wheels up', duty_to_wheels_up),
            TimelineSegment('Last sector (block)', block_min),
            TimelineSegment('Destination taxi', taxi_min),
            TimelineSegment(f'Sign off ({self.sign_off_minutes} min)', self.sign_off_minutes),
        )


_DEFAULT_CALCULATOR = WheelsUpBackCalculator()


def latest_wheels_up(
    report_time: ReportTimeInput,
    max_fdp_hours: float,
    final_sector_block_hours: float,
    destination_taxi_minutes: float = 0,
) -> Optional[WheelsUpResult]:
    """Module-level shortcut using the fixed 50 min sign-off buffer"""
    return _DEFAULT_CALCULATOR.latest_wheels_up(
        report_time, max_fdp_hours, final_sector_block_hours, destination_taxi_minutes
    )


def duty_timeline(
    report_time: ReportTimeInput,
    max_fdp_hours: float,
    final_sector_block_hours: float,
    destination_taxi_minutes: float = 0,
) -> Optional[Tuple[TimelineSegment, ...]]:
    return _DEFAULT_CALCULATOR.duty_timeline(
        report_time, max_fdp_hours, final_sector_block_hours, destination_taxi_minutes
    )
