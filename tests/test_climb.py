"""
Tests for the climb-rate calculator.
"""

import pytest
from igc_flightlog.core.climb import ClimbRateCalculator
from igc_flightlog.data.parser import IGCParser
from igc_flightlog.utils.conversions import round_half_up
from tests.conftest import make_b_record


def fixes_from(records):
    """Build fixes from (time, pressure altitude, speed) tuples."""
    lines = [make_b_record(time, pressure_alt=alt, speed=speed) for time, alt, speed in records]
    return IGCParser.parse_lines(["HFDTE170818"] + lines).fixes


class TestClimbRateCalculator:
    """Test cases for ClimbRateCalculator."""

    @pytest.fixture
    def calculator(self):
        """Create a calculator with the default full scan."""
        return ClimbRateCalculator()

    @pytest.fixture
    def sample_fixes(self, sample_lines):
        """Fixes of the shared sample flight."""
        return IGCParser.parse_lines(sample_lines).fixes

    def test_two_second_interval(self, calculator, sample_fixes):
        """Test the best climb over 2 seconds: 100 m -> 150 m in 5 s."""
        rate = calculator.max_climb_rate(sample_fixes, 2)

        assert rate == round_half_up(50 / 5 * 60 * 3.28084)
        assert rate == 1969

    def test_fifteen_second_interval(self, calculator, sample_fixes):
        """Test the best climb over 15 seconds: 100 m -> 120 m in 15 s."""
        assert calculator.max_climb_rate(sample_fixes, 15) == 262

    def test_no_pair_long_enough(self, calculator, sample_fixes):
        """Test that an interval longer than the flight gives 0."""
        assert calculator.max_climb_rate(sample_fixes, 30) == 0

    def test_max_climb_rates(self, calculator, sample_fixes):
        """Test the rates for the standard intervals."""
        rates = calculator.max_climb_rates(sample_fixes, (2, 15, 30))

        assert rates == {2: 1969, 15: 262, 30: 0}
        assert list(rates) == [2, 15, 30]

    def test_empty_sequence(self, calculator):
        """Test that no fixes give a zero rate."""
        assert calculator.max_climb_rate([], 2) == 0

    def test_stationary_start_fixes_are_skipped(self, calculator):
        """Test that fixes with zero speed never start a climb."""
        fixes = fixes_from([
            ("100000", 100, 0),
            ("100010", 500, 0),
        ])

        assert calculator.max_climb_rate(fixes, 2) == 0

    def test_stationary_fix_can_end_a_climb(self, calculator):
        """Test that the second point may have zero speed."""
        fixes = fixes_from([
            ("100000", 100, 10),
            ("100010", 110, 0),
        ])

        # 10 m in 10 s = 196.85 ft/min
        assert calculator.max_climb_rate(fixes, 2) == 197

    def test_only_first_qualifying_candidate_is_used(self, calculator):
        """Test that a bigger gain further on is not considered for the same start."""
        fixes = fixes_from([
            ("100000", 100, 10),
            ("100002", 101, 10),
            ("100004", 101, 10),
            ("100006", 300, 10),
        ])

        # Starts: t0 -> t2 (+1 m), t2 -> t4 (0 m), t4 -> t6 (+199 m)
        assert calculator.max_climb_rate(fixes, 2) == round_half_up(199 / 2 * 60 * 3.28084)
        # t2 -> t6 is best; t0 -> t6 is never tried since t0 -> t4 comes first
        assert calculator.max_climb_rate(fixes, 4) == round_half_up(199 / 2 * 60 * 3.28084 / 2)

    def test_descent_records_nothing(self, calculator):
        """Test that sinking pairs do not count."""
        fixes = fixes_from([
            ("100000", 500, 10),
            ("100005", 400, 10),
            ("100010", 300, 10),
        ])

        assert calculator.max_climb_rate(fixes, 2) == 0

    def test_invalid_interval(self, calculator, sample_fixes):
        """Test that the interval must be positive."""
        with pytest.raises(ValueError):
            calculator.max_climb_rate(sample_fixes, 0)


class TestScanModes:
    """Test cases for the full-file and forward-only candidate scans."""

    @pytest.fixture
    def out_of_order_fixes(self):
        """
        A file whose last fix is recorded earlier in the day than the first.

        For the start at 10:00:05 the full scan finds 10:00:10 (listed first)
        while the forward scan only sees 10:00:08 and the out-of-order fix.
        """
        return fixes_from([
            ("100010", 400, 0),
            ("100005", 100, 10),
            ("100008", 150, 10),
            ("095900", 50, 0),
        ])

    def test_full_scan_searches_from_top_of_file(self, out_of_order_fixes):
        """Test that the legacy scan may pick a fix listed before the start."""
        calculator = ClimbRateCalculator(legacy_full_scan=True)

        # 100 m -> 400 m in 5 s
        assert calculator.max_climb_rate(out_of_order_fixes, 5) == round_half_up(300 / 5 * 60 * 3.28084)

    def test_forward_scan_only_looks_ahead(self, out_of_order_fixes):
        """Test that the forward scan ignores fixes before the start."""
        calculator = ClimbRateCalculator(legacy_full_scan=False)

        assert calculator.max_climb_rate(out_of_order_fixes, 5) == 0

    def test_scans_agree_on_chronological_files(self):
        """Test that both scans give the same rates on an ordered file."""
        fixes = fixes_from([
            ("100000", 100, 10),
            ("100003", 130, 10),
            ("100007", 170, 12),
            ("100015", 175, 8),
            ("100031", 260, 6),
            ("100040", 250, 0),
        ])

        for interval in (2, 15, 30):
            full = ClimbRateCalculator(legacy_full_scan=True).max_climb_rate(fixes, interval)
            forward = ClimbRateCalculator(legacy_full_scan=False).max_climb_rate(fixes, interval)
            assert full == forward

    def test_midnight_rollover_never_qualifies(self):
        """Test that a climb across midnight UTC is not measured."""
        fixes = fixes_from([
            ("235958", 100, 10),
            ("000005", 300, 10),
        ])

        assert ClimbRateCalculator().max_climb_rate(fixes, 2) == 0
