"""
Core FDP Calculator Components
==============================

Main exports for FDP limit resolution and latest wheels-up calculation.
"""

from core.parameters import (
    SectorColumn,
    ReportTimeBand,
    FDTBand,
    StandardFDPTable,
    AugmentedFDPParameters,
    FTLFramework,
    CalculatorConfig,
    DEFAULT_CONFIG,
    REST_FACILITY_CLASS_INFO,
    CREW_COMPOSITION_LABELS,
)

from core.time_utils import (
    parse_time_to_minutes,
    parse_time_strict,
    parse_report_time,
    report_time_from_datetime,
    format_minutes_as_time,
    format_hours,
    format_duration,
)

from core.fdp_limits import FDPLimitResolver, resolve_fdp, coerce_crew_composition
from core.wheels_up import WheelsUpBackCalculator, latest_wheels_up, duty_timeline

__all__ = [
    # Reference tables & config
    'SectorColumn',
    'ReportTimeBand',
    'FDTBand',
    'StandardFDPTable',
    'AugmentedFDPParameters',
    'FTLFramework',
    'CalculatorConfig',
    'DEFAULT_CONFIG',
    'REST_FACILITY_CLASS_INFO',
    'CREW_COMPOSITION_LABELS',
    # Time helpers
    'parse_time_to_minutes',
    'parse_time_strict',
    'parse_report_time',
    'report_time_from_datetime',
    'format_minutes_as_time',
    'format_hours',
    'format_duration',
    # FDP limits
    'FDPLimitResolver',
    'resolve_fdp',
    'coerce_crew_composition',
    # Wheels-up
    'WheelsUpBackCalculator',
    'latest_wheels_up',
    'duty_timeline',
]
