"""
Configuration & Reference Tables for FDP Limits
===============================================

All regulatory reference data for the FDP calculator:
- ReportTimeBand / SectorColumn: 2-pilot FDP table rows and columns
- FDTBand: 2-pilot flight duty time (block) limits
- StandardFDPTable: banded 2-pilot lookup
- AugmentedFDPParameters: 3/4-pilot limits by rest facility class
- FTLFramework: domain limits and the fixed sign-off buffer
- CalculatorConfig: master configuration container

Reference: AJX Operations Manual 8-5 Duty Time and Rest of Crew Member,
REV No.40, EFF 2025.6.5 (8-5-1 (2)(1)1)B-C and (2)(1)2)B-C)
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from models.data_models import CrewComposition, RestFacilityClass, MINUTES_PER_DAY


# ============================================================================
# BANDED LOOKUP STRUCTURES
# ============================================================================

@dataclass(frozen=True)
class SectorColumn:
    """Closed sector-count range [min_sectors, max_sectors] -> table index"""
    min_sectors: int
    max_sectors: int
    index: int

    def contains(self, sectors: int) -> bool:
        return self.min_sectors <= sectors <= self.max_sectors


@dataclass(frozen=True)
class ReportTimeBand:
    """Half-open report-time band [start_minute, end_minute) with its FDP row"""
    start_minute: int
    end_minute: int
    label: str
    fdp_hours: Tuple[float, ...]

    def contains(self, minute: int) -> bool:
        return self.start_minute <= minute < self.end_minute


@dataclass(frozen=True)
class FDTBand:
    """Half-open report-time band for the 2-pilot max flight duty time"""
    start_minute: int
    end_minute: int
    two_or_less_hours: float
    three_or_more_hours: float

    def contains(self, minute: int) -> bool:
        return self.start_minute <= minute < self.end_minute

    def limit_for(self, sectors: int) -> float:
        return self.three_or_more_hours if sectors >= 3 else self.two_or_less_hours


# Columns of the manual table: 1-2 flights merged, then 3..9, then 10.
# Index 8 of each stored row is never selected.
SECTOR_COLUMNS: Tuple[SectorColumn, ...] = (
    SectorColumn(1, 2, 0),
    SectorColumn(3, 3, 1),
    SectorColumn(4, 4, 2),
    SectorColumn(5, 5, 3),
    SectorColumn(6, 6, 4),
    SectorColumn(7, 7, 5),
    SectorColumn(8, 8, 6),
    SectorColumn(9, 9, 7),
    SectorColumn(10, 10, 9),
)

# Manual 8-5-1 (2)(1)1)C - start of FDP (acclimated time) x flights
STANDARD_FDP_BANDS: Tuple[ReportTimeBand, ...] = (
    ReportTimeBand(0, 300, '00:00-04:59', (11, 10.5, 10, 9.5, 9, 9, 9, 9, 9, 9)),
    ReportTimeBand(300, 360, '05:00-05:59', (12, 11.5, 11, 10.5, 10, 9.5, 9, 9, 9, 9)),
    ReportTimeBand(360, 840, '06:00-13:59', (13, 12.5, 12, 11.5, 11, 10.5, 10, 9.5, 9, 9)),
    ReportTimeBand(840, 960, '14:00-15:59', (12, 11.5, 11, 10.5, 10, 9.5, 9, 9, 9, 9)),
    ReportTimeBand(960, 1440, '16:00-23:59', (11, 10.5, 10, 9.5, 9, 9, 9, 9, 9, 9)),
)

# Manual 8-5-1 (2)(1)1)B - coarser bands than the FDP table
STANDARD_FDT_BANDS: Tuple[FDTBand, ...] = (
    FDTBand(0, 300, 9.0, 8.0),
    FDTBand(300, 1020, 10.0, 9.0),
    FDTBand(1020, 1440, 9.0, 8.0),
)


def _check_contiguous(bands, name: str) -> None:
    assert bands, f"{name}: no bands defined"
    assert bands[0].start_minute == 0, f"{name}: first band must start at 00:00"
    assert bands[-1].end_minute == MINUTES_PER_DAY, f"{name}: last band must end at 24:00"
    for prev, nxt in zip(bands, bands[1:]):
        assert prev.end_minute == nxt.start_minute, \
            f"{name}: gap or overlap between {prev} and {nxt}"


# ============================================================================
# TABLE PARAMETERS
# ============================================================================

@dataclass(frozen=True)
class StandardFDPTable:
    """2-pilot FDP (report band x sector column) and FDT limits"""

    bands: Tuple[ReportTimeBand, ...] = STANDARD_FDP_BANDS
    fdt_bands: Tuple[FDTBand, ...] = STANDARD_FDT_BANDS
    sector_columns: Tuple[SectorColumn, ...] = SECTOR_COLUMNS
    row_length: int = 10

    def __post_init__(self):
        _check_contiguous(self.bands, "FDP bands")
        _check_contiguous(self.fdt_bands, "FDT bands")
        for band in self.bands:
            assert len(band.fdp_hours) == self.row_length, \
                f"Band {band.label} has {len(band.fdp_hours)} values, expected {self.row_length}"
        for column in self.sector_columns:
            assert 0 <= column.index < self.row_length, \
                f"Sector column index out of range: {column}"

    def band_for(self, minute: int) -> Optional[ReportTimeBand]:
        return next((b for b in self.bands if b.contains(minute)), None)

    def fdt_band_for(self, minute: int) -> Optional[FDTBand]:
        return next((b for b in self.fdt_bands if b.contains(minute)), None)

    def column_for(self, sectors: int) -> Optional[SectorColumn]:
        return next((c for c in self.sector_columns if c.contains(sectors)), None)


@dataclass(frozen=True)
class AugmentedFDPParameters:
    """
    3-pilot / 4-pilot limits with in-flight rest.

    FDP depends only on crew size, rest facility class and whether the duty
    has 2 or fewer sectors. FDT is a flat limit per crew size.

    References:
        Manual 8-5-1 (2)(1)2)C - FDP by rest facility and sectors
        Manual 8-5-1 (2)(1)2)B - FDT
    """
    # Key: (crew, facility) -> (two_or_less_hours, three_or_more_hours)
    fdp_table: Dict[Tuple[CrewComposition, RestFacilityClass], Tuple[float, float]] = field(
        default_factory=lambda: {
            (CrewComposition.AUGMENTED_3, RestFacilityClass.CLASS_1): (17.0, 16.0),
            (CrewComposition.AUGMENTED_3, RestFacilityClass.CLASS_2): (16.0, 15.0),
            (CrewComposition.AUGMENTED_3, RestFacilityClass.CLASS_3): (15.0, 14.0),
            (CrewComposition.AUGMENTED_4, RestFacilityClass.CLASS_1): (18.0, 17.0),
            (CrewComposition.AUGMENTED_4, RestFacilityClass.CLASS_2): (17.0, 16.0),
            (CrewComposition.AUGMENTED_4, RestFacilityClass.CLASS_3): (16.0, 15.0),
        }
    )

    fdt_hours: Dict[CrewComposition, float] = field(default_factory=lambda: {
        CrewComposition.AUGMENTED_3: 15.0,
        CrewComposition.AUGMENTED_4: 17.0,
    })

    def __post_init__(self):
        for crew in (CrewComposition.AUGMENTED_3, CrewComposition.AUGMENTED_4):
            assert crew in self.fdt_hours, f"Missing FDT limit for {crew.value}"
            previous = None
            for facility in RestFacilityClass:
                limits = self.fdp_table.get((crew, facility))
                assert limits is not None, f"Missing FDP limits for {crew.value} {facility.label}"
                assert limits[0] >= limits[1], \
                    f"{crew.value} {facility.label}: 2-sector limit below 3+ sector limit"
                if previous is not None:
                    assert previous[0] >= limits[0] and previous[1] >= limits[1], \
                        f"{crew.value}: {facility.label} more permissive than a better class"
                previous = limits

    def get_max_fdp(
        self,
        crew_composition: CrewComposition,
        rest_facility_class: RestFacilityClass,
        sectors: int
    ) -> float:
        """Get maximum FDP for crew size, facility class and sector count."""
        two_or_less, three_or_more = self.fdp_table[(crew_composition, rest_facility_class)]
        return two_or_less if sectors <= 2 else three_or_more

    def get_max_fdt(self, crew_composition: CrewComposition) -> float:
        return self.fdt_hours[crew_composition]


@dataclass(frozen=True)
class FTLFramework:
    """Domain limits shared by the resolver and the back-calculator"""

    min_sectors: int = 1
    max_sectors: int = 10
    default_rest_facility_class: RestFacilityClass = RestFacilityClass.CLASS_1

    # On-chocks -> administrative sign-off
    sign_off_buffer_minutes: int = 50

    def __post_init__(self):
        assert 1 <= self.min_sectors <= self.max_sectors, \
            f"Sector domain invalid: {self.min_sectors}-{self.max_sectors}"
        assert self.sign_off_buffer_minutes >= 0, "Sign-off buffer must be non-negative"


# ============================================================================
# DISPLAY REFERENCE DATA
# ============================================================================

REST_FACILITY_CLASS_INFO: Dict[RestFacilityClass, Dict[str, str]] = {
    RestFacilityClass.CLASS_1: {
        'label': 'Class 1',
        'description': (
            'Class 1 rest facility: bunk or equivalent that allows horizontal sleep '
            '(e.g. crew rest compartment with lie-flat bed).'
        ),
    },
    RestFacilityClass.CLASS_2: {
        'label': 'Class 2',
        'description': (
            'Class 2 rest facility: reclining seat with leg support, in an area separated '
            'from passengers and flight deck (e.g. dedicated crew seat).'
        ),
    },
    RestFacilityClass.CLASS_3: {
        'label': 'Class 3',
        'description': (
            'Class 3 rest facility: seat in the passenger cabin (e.g. business class seat). '
            'No dedicated crew rest area.'
        ),
    },
}

CREW_COMPOSITION_LABELS: Dict[CrewComposition, str] = {
    CrewComposition.STANDARD: 'Standard (2-pilot)',
    CrewComposition.AUGMENTED_3: '3-Crew',
    CrewComposition.AUGMENTED_4: '4-Crew',
}


# ============================================================================
# MASTER CONFIGURATION
# ============================================================================

@dataclass(frozen=True)
class CalculatorConfig:
    """Master configuration container"""
    framework: FTLFramework = field(default_factory=FTLFramework)
    standard_table: StandardFDPTable = field(default_factory=StandardFDPTable)
    augmented_params: AugmentedFDPParameters = field(default_factory=AugmentedFDPParameters)

    @classmethod
    def default_config(cls):
        return cls(
            framework=FTLFramework(),
            standard_table=StandardFDPTable(),
            augmented_params=AugmentedFDPParameters(),
        )


# Built once at import; shared read-only by every resolver instance
DEFAULT_CONFIG = CalculatorConfig.default_config()
