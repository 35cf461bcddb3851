"""Tests for the ISO 8601 duration parser."""

import pytest

from dataknobs_parsers import (
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_MONTH,
    MS_PER_SECOND,
    MS_PER_WEEK,
    MS_PER_YEAR,
    ValidationError,
    iso_duration,
)
from dataknobs_parsers.testing import ParserTester

MESSAGE = '"test" must be a valid ISO 8601 duration'

VALID_DURATIONS = [
    ("P3.1Y", 97761600000),
    ("P3Y", 94608000000),
    ("P6.1M", 15811200000),
    ("P6M", 15552000000),
    ("P2.1W", 1270080000),
    ("P2W", 1209600000),
    ("P4.2D", 362880000),
    ("P4D", 345600000),
    ("PT12.1H", 43560000),
    ("PT12H", 43200000),
    ("PT30.1M", 1806000),
    ("PT30M", 1800000),
    ("PT5.1S", 5100),
    ("PT5S", 5000),
    ("P3Y6M2W4DT12H30M5.2S", 111760205200),
    ("P3Y6M2W4DT12H30M5S", 111760205000),
    ("P3Y6M2W4DT12H30.4M", 111760224000),
    ("P3Y6M2W4DT12H30M", 111760200000),
    ("P3Y6M2W4DT12.4H", 111759840000),
    ("P3Y6M2W4DT12H", 111758400000),
    ("P3Y6M2W4.4DT", 111749760000),
    ("P3Y6M2W4DT", 111715200000),
    ("P3Y6M2W4.4D", 111749760000),
    ("P3Y6M2W4D", 111715200000),
    ("P3Y6M2.2W", 111490560000),
    ("P3Y6M2W", 111369600000),
    ("P3Y6.2M", 110678400000),
    ("P3Y6M", 110160000000),
    ("P3.2Y", 100915200000),
]

INVALID_DURATIONS = [
    None,
    42,
    "",
    "P",
    "PT",
    "-P",
    "-PT",
    "3Y",
    "P3",
    "p3Y",
    "P1D2Y",
    "PT1H2D",
    "P1Y1Y",
    "P2.4Y3M",
    "P3Y6M2W4DT12H30.4M5S",
    "P3Y6M2W4DT12.4H3M",
    "P3Y6M2W4.4DT12H",
    "P3Y6M2.2W4D",
    "P3Y6.2M2W",
    "P3.2Y6M",
    "P1.Y",
    "PT1S\n",
    "P٣Y",
]


class TestUnitFactors:
    """Test the fixed unit factors."""

    def test_factors(self):
        assert MS_PER_SECOND == 1000
        assert MS_PER_MINUTE == 60 * 1000
        assert MS_PER_HOUR == 60 * 60 * 1000
        assert MS_PER_DAY == 24 * MS_PER_HOUR
        assert MS_PER_WEEK == 7 * MS_PER_DAY
        assert MS_PER_MONTH == 30 * MS_PER_DAY
        assert MS_PER_YEAR == 365 * MS_PER_DAY


class TestIsoDuration:
    """Test ISO 8601 duration parsing."""

    @pytest.fixture
    def tester(self):
        return ParserTester(iso_duration(), MESSAGE)

    @pytest.mark.parametrize("value", INVALID_DURATIONS)
    def test_invalid(self, tester, value):
        tester.invalid(value)

    @pytest.mark.parametrize("sign,factor", [("", 1), ("-", -1)])
    @pytest.mark.parametrize("value,expected", VALID_DURATIONS)
    def test_valid(self, tester, value, expected, sign, factor):
        tester.valid(sign + value, float(expected * factor))

    def test_returns_float(self, tester):
        assert isinstance(tester.valid("PT1S", 1000.0), float)

    def test_comma_separator(self, tester):
        tester.valid("PT5,1S", 5100.0)
        tester.valid("-P4,2D", -362880000.0)

    def test_fraction_without_integer_part(self, tester):
        tester.valid("PT.5S", 500.0)

    def test_sub_millisecond_fraction(self, tester):
        tester.valid("PT0.0005S", 0.5)

    def test_zero(self, tester):
        tester.valid("PT0S", 0.0)
        tester.valid("P0D", 0.0)

    def test_error_path(self):
        with pytest.raises(ValidationError) as exc_info:
            iso_duration()("P1X", ("config", "timeout"))
        assert exc_info.value.path == ("config", "timeout")
        assert exc_info.value.message == '"config.timeout" must be a valid ISO 8601 duration'
