#!/usr/bin/env python3
"""
test_time_utils.py
==================

Parsing, clamping and formatting of HH:MM clock values.

Run: python -m pytest tests/test_time_utils.py -v
"""

from datetime import datetime

import pytest
import pytz

from models.data_models import ReportTime, RestFacilityClass, TimeParseError
from core.time_utils import (
    clamp_rest_facility_class, clamp_sectors, format_duration, format_hours,
    format_minutes_as_time, parse_report_time, parse_time_strict,
    parse_time_to_minutes, report_time_from_datetime,
)


class TestLenientParsing:
    """Never raises; bad components -> 0, components clamped."""

    @pytest.mark.parametrize('text,expected', [
        ('00:00', 0),
        ('09:05', 545),
        ('9:05', 545),
        (' 23:59 ', 1439),
        ('24:00', 23 * 60),
        ('12:75', 12 * 60 + 59),
        ('-1:30', 30),
        ('12:30:45', 750),
        ('12:xx', 720),
        ('xx:30', 30),
        ('09:', 540),
        (':45', 45),
    ])
    def test_valid_and_clamped(self, text, expected):
        assert parse_time_to_minutes(text) == expected

    @pytest.mark.parametrize('text', ['', '930', 'ab:cd', ':', '9.5:00', None])
    def test_malformed_is_midnight(self, text):
        assert parse_time_to_minutes(text) == 0

    def test_parse_report_time(self):
        assert parse_report_time('7:45') == ReportTime(minutes=465)
        existing = ReportTime(minutes=10)
        assert parse_report_time(existing) is existing


class TestStrictParsing:
    """Explicit TimeParseError for anything the lenient parser would coerce."""

    def test_accepts_valid(self):
        assert parse_time_strict('9:05') == 545
        assert parse_time_strict('23:59') == 1439

    @pytest.mark.parametrize('text', ['', '   ', '930', 'ab:10', '24:00', '12:60', '-1:00', None])
    def test_rejects(self, text):
        with pytest.raises(TimeParseError):
            parse_time_strict(text)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            parse_time_strict('nope')


class TestClamping:

    def test_report_time_components(self):
        assert ReportTime.from_components(25, 70).hhmm == '23:59'
        assert ReportTime.from_components(-3, -1).hhmm == '00:00'
        assert ReportTime.from_components(6, 5).hhmm == '06:05'

    @pytest.mark.parametrize('value,expected', [
        (0, 1), (-2, 1), (1, 1), (3.7, 3), (10, 10), (99, 10), ('4', 4), ('x', 1), (None, 1),
    ])
    def test_sectors(self, value, expected):
        assert clamp_sectors(value) == expected

    def test_rest_facility_class(self):
        assert clamp_rest_facility_class(None) is RestFacilityClass.CLASS_1
        assert clamp_rest_facility_class(2) is RestFacilityClass.CLASS_2
        assert clamp_rest_facility_class(7) is RestFacilityClass.CLASS_3
        assert clamp_rest_facility_class(-1) is RestFacilityClass.CLASS_1
        assert clamp_rest_facility_class(RestFacilityClass.CLASS_3) is RestFacilityClass.CLASS_3
        assert clamp_rest_facility_class('x', RestFacilityClass.CLASS_2) is RestFacilityClass.CLASS_2

    def test_rest_facility_class_infinite(self):
        assert clamp_rest_facility_class(float('inf')) is RestFacilityClass.CLASS_3
        assert clamp_rest_facility_class(float('-inf')) is RestFacilityClass.CLASS_1
        assert clamp_rest_facility_class(float('nan')) is RestFacilityClass.CLASS_1


class TestFormatting:

    @pytest.mark.parametrize('minutes,expected', [
        (0, '00:00'), (640, '10:40'), (1160, '19:20'), (1440, '00:00'),
        (1980, '09:00'), (-30, '23:30'), (639.6, '10:40'), (1439.5, '00:00'),
    ])
    def test_clock_time(self, minutes, expected):
        assert format_minutes_as_time(minutes) == expected

    @pytest.mark.parametrize('hours,expected', [
        (10, '10h'), (10.5, '10h 30m'), (9.25, '9h 15m'), (11.999, '12h'),
    ])
    def test_hours(self, hours, expected):
        assert format_hours(hours) == expected

    @pytest.mark.parametrize('minutes,expected', [
        (0, '0m'), (-5, '0m'), (45, '45m'), (120, '2h'), (125, '2h 5m'),
    ])
    def test_duration(self, minutes, expected):
        assert format_duration(minutes) == expected


class TestLocalReportTime:
    """Report instant -> acclimatised local clock time."""

    def test_aware_utc(self):
        dt = datetime(2025, 6, 15, 0, 30, tzinfo=pytz.utc)
        assert report_time_from_datetime(dt, 'Asia/Tokyo') == '09:30'

    def test_naive_taken_as_utc(self):
        assert report_time_from_datetime(datetime(2025, 6, 15, 23, 0), 'Asia/Tokyo') == '08:00'

    def test_dst_zone(self):
        dt = datetime(2025, 7, 1, 12, 0, tzinfo=pytz.utc)
        assert report_time_from_datetime(dt, 'Europe/London') == '13:00'
