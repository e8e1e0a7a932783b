"""
FDP Limit Resolution
====================

Selects the maximum flight duty period (FDP) and maximum flight duty time
(FDT) for a report time and crew setup.

Two table families:
- Standard 2-pilot: report-time band x sector column (FDP), with a separate
  coarser band structure for FDT
- Augmented 3/4-pilot: crew size x rest facility class x (<=2 or >=3
  sectors); report time is not used

Reference: AJX Operations Manual 8-5-1 (2)(1)
"""

import logging
from typing import Optional

from models.data_models import (
    CrewComposition, CrewCompositionInput, FDPResult, ReportTime,
    ReportTimeInput, RestFacilityClass, RestFacilityInput,
)
from core.parameters import CalculatorConfig, DEFAULT_CONFIG
from core.time_utils import (
    clamp_rest_facility_class, clamp_sectors, parse_report_time,
)

logger = logging.getLogger(__name__)


def coerce_crew_composition(value: CrewCompositionInput) -> CrewComposition:
    """Accept the enum or its string value; unknown strings mean standard"""
    if isinstance(value, CrewComposition):
        return value
    try:
        return CrewComposition(str(value).strip().lower())
    except ValueError:
        logger.warning(f"Unknown crew complement {value!r}, using standard 2-pilot limits")
        return CrewComposition.STANDARD


class FDPLimitResolver:
    """Resolve FDP / FDT limits from the reference tables"""

    def __init__(self, config: CalculatorConfig = None):
        self.config = config or DEFAULT_CONFIG

    def resolve(
        self,
        report_time: ReportTimeInput,
        sectors: int,
        crew_composition: CrewCompositionInput = CrewComposition.STANDARD,
        rest_facility_class: RestFacilityInput = None,
    ) -> Optional[FDPResult]:
        """
        Calculate maximum FDP and FDT for the given inputs.

        Args:
            report_time: "HH:MM" (lenient) or a ReportTime
            sectors: Scheduled flights in the duty, clamped to 1-10
            crew_composition: standard / 3-crew / 4-crew
            rest_facility_class: 1-3, augmented crews only (default class 1)

        Returns:
            FDPResult, or None when the report time falls in no band
        """
        framework = self.config.framework
        crew = coerce_crew_composition(crew_composition)
        sector_count = clamp_sectors(sectors, framework.min_sectors, framework.max_sectors)

        if not crew.is_augmented:
            return self._resolve_standard(parse_report_time(report_time), sector_count)

        facility = clamp_rest_facility_class(
            rest_facility_class, framework.default_rest_facility_class
        )
        window = report_time.hhmm if isinstance(report_time, ReportTime) else str(report_time)
        return self._resolve_augmented(window, sector_count, crew, facility)

    def _resolve_standard(self, report: ReportTime, sectors: int) -> Optional[FDPResult]:
        if not report.is_valid:
            logger.warning(f"Report time minute {report.minutes} is outside the 24h clock")
            return None

        table = self.config.standard_table
        band = table.band_for(report.minutes)
        fdt_band = table.fdt_band_for(report.minutes)
        if band is None or fdt_band is None:
            logger.warning(f"Report time minute {report.minutes} matches no FDP band")
            return None

        column = table.column_for(sectors)
        if column is None:
            logger.warning(f"Sector count {sectors} matches no FDP column")
            return None

        max_fdp = band.fdp_hours[column.index]
        max_fdt = fdt_band.limit_for(sectors)
        logger.debug(
            f"2-pilot: report {report.hhmm} band {band.label}, {sectors} sectors "
            f"(column {column.index}) -> FDP {max_fdp}h, FDT {max_fdt}h"
        )
        return FDPResult(
            max_flight_duty_time_hours=max_fdt,
            max_flight_duty_period_hours=max_fdp,
            report_time_window=band.label,
            source='2-pilot',
        )

    def _resolve_augmented(
        self,
        report_window: str,
        sectors: int,
        crew: CrewComposition,
        facility: RestFacilityClass,
    ) -> FDPResult:
        params = self.config.augmented_params
        max_fdp = params.get_max_fdp(crew, facility, sectors)
        max_fdt = params.get_max_fdt(crew)
        source = f"{crew.pilots}-pilot {facility.label}"
        logger.debug(f"{source}: {sectors} sectors -> FDP {max_fdp}h, FDT {max_fdt}h")
        return FDPResult(
            max_flight_duty_time_hours=max_fdt,
            max_flight_duty_period_hours=max_fdp,
            report_time_window=report_window,
            source=source,
        )


_DEFAULT_RESOLVER = FDPLimitResolver()


def resolve_fdp(
    report_time: ReportTimeInput,
    sectors: int,
    crew_composition: CrewCompositionInput = CrewComposition.STANDARD,
    rest_facility_class: RestFacilityInput = None,
) -> Optional[FDPResult]:
    """Module-level shortcut using the default reference tables"""
    return _DEFAULT_RESOLVER.resolve(report_time, sectors, crew_composition, rest_facility_class)
