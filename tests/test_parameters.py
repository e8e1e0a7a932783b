#!/usr/bin/env python3
"""
test_parameters.py
==================

Reference table structure and configuration validation.

Run: python -m pytest tests/test_parameters.py -v
"""

import pytest

from models.data_models import CrewComposition, RestFacilityClass
from core.parameters import (
    AugmentedFDPParameters, CalculatorConfig, CREW_COMPOSITION_LABELS, DEFAULT_CONFIG,
    FDTBand, FTLFramework, REST_FACILITY_CLASS_INFO, ReportTimeBand, StandardFDPTable,
)
from core.fdp_limits import FDPLimitResolver


ROW = (10, 10, 10, 10, 10, 10, 10, 10, 10, 10)


class TestStandardTable:
    """Bands cover the day exactly once."""

    def test_default_bands_contiguous(self):
        bands = DEFAULT_CONFIG.standard_table.bands
        assert bands[0].start_minute == 0
        assert bands[-1].end_minute == 1440
        for prev, nxt in zip(bands, bands[1:]):
            assert prev.end_minute == nxt.start_minute

    def test_every_minute_has_one_band(self):
        table = DEFAULT_CONFIG.standard_table
        for minute in range(1440):
            assert sum(b.contains(minute) for b in table.bands) == 1
            assert sum(b.contains(minute) for b in table.fdt_bands) == 1
            assert table.band_for(minute) is not None

    def test_out_of_day_minute_has_no_band(self):
        assert DEFAULT_CONFIG.standard_table.band_for(1440) is None
        assert DEFAULT_CONFIG.standard_table.band_for(-1) is None

    def test_sector_columns(self):
        table = DEFAULT_CONFIG.standard_table
        assert table.column_for(1).index == table.column_for(2).index == 0
        assert [table.column_for(s).index for s in range(3, 10)] == [1, 2, 3, 4, 5, 6, 7]
        assert table.column_for(10).index == 9
        assert table.column_for(11) is None

    def test_gap_rejected(self):
        with pytest.raises(AssertionError):
            StandardFDPTable(bands=(
                ReportTimeBand(0, 600, 'a', ROW),
                ReportTimeBand(660, 1440, 'b', ROW),
            ))

    def test_short_row_rejected(self):
        with pytest.raises(AssertionError):
            StandardFDPTable(bands=(ReportTimeBand(0, 1440, 'all day', (10, 9)),))

    def test_fdt_must_cover_day(self):
        with pytest.raises(AssertionError):
            StandardFDPTable(fdt_bands=(FDTBand(0, 1000, 9, 8),))

    def test_custom_table_used_by_resolver(self):
        config = CalculatorConfig(
            standard_table=StandardFDPTable(
                bands=(ReportTimeBand(0, 1440, '00:00-23:59', ROW),),
                fdt_bands=(FDTBand(0, 1440, 8, 7),),
            )
        )
        result = FDPLimitResolver(config).resolve('12:00', 4, 'standard')
        assert result.report_time_window == '00:00-23:59'
        assert result.max_flight_duty_period_hours == 10
        assert result.max_flight_duty_time_hours == 7


class TestAugmentedParameters:

    def test_class_ordering(self):
        params = AugmentedFDPParameters()
        for crew in (CrewComposition.AUGMENTED_3, CrewComposition.AUGMENTED_4):
            limits = [params.get_max_fdp(crew, f, 1) for f in RestFacilityClass]
            assert limits == sorted(limits, reverse=True)

    def test_better_class_must_not_be_stricter(self):
        table = dict(AugmentedFDPParameters().fdp_table)
        table[(CrewComposition.AUGMENTED_3, RestFacilityClass.CLASS_3)] = (18.0, 17.0)
        with pytest.raises(AssertionError):
            AugmentedFDPParameters(fdp_table=table)

    def test_missing_fdt_rejected(self):
        with pytest.raises(AssertionError):
            AugmentedFDPParameters(fdt_hours={CrewComposition.AUGMENTED_3: 15.0})


class TestFramework:

    def test_defaults(self):
        framework = FTLFramework()
        assert framework.sign_off_buffer_minutes == 50
        assert (framework.min_sectors, framework.max_sectors) == (1, 10)

    def test_inverted_sector_domain_rejected(self):
        with pytest.raises(AssertionError):
            FTLFramework(min_sectors=5, max_sectors=2)


class TestDisplayData:

    def test_rest_facility_info(self):
        for facility in RestFacilityClass:
            info = REST_FACILITY_CLASS_INFO[facility]
            assert info['label'] == facility.label
            assert info['description'].startswith(facility.label)

    def test_crew_labels(self):
        assert CREW_COMPOSITION_LABELS[CrewComposition.STANDARD] == 'Standard (2-pilot)'
        assert set(CREW_COMPOSITION_LABELS) == set(CrewComposition)

    def test_crew_pilots_and_augmentation(self):
        assert CrewComposition.STANDARD.pilots == 2
        assert not CrewComposition.STANDARD.is_augmented
        assert CrewComposition.AUGMENTED_3.is_augmented
        assert CrewComposition.AUGMENTED_4.is_augmented
