"""
Flight analysis for IGC Flight Log.
Segments a fix sequence into launch, flight and landing and builds the
flight summary.
"""

import logging
import datetime
from dataclasses import dataclass
from typing import Dict, Any, Optional, Sequence, Tuple

from .climb import ClimbRateCalculator
from ..config.constants import DEFAULT_CLIMB_INTERVALS, DURATION_ROUND_UP_MINUTES
from ..config.settings import Settings, settings as default_settings
from ..data.models import Fix, FlightDuration, FlightPoint, FlightState, FlightSummary

logger = logging.getLogger("igc_flightlog.core.flight")


@dataclass
class AnalysisOptions:
    """
    Tunable parts of the analysis.

    Attributes:
        climb_intervals: Look-ahead intervals (seconds) for the climb statistics
        legacy_full_scan: Search the whole file for the second climb point
        duration_round_up_minutes: Minutes added to every flight duration
    """
    climb_intervals: Tuple[int, ...] = DEFAULT_CLIMB_INTERVALS
    legacy_full_scan: bool = True
    duration_round_up_minutes: int = DURATION_ROUND_UP_MINUTES

    def __post_init__(self):
        """Validate data after initialization"""
        self.climb_intervals = tuple(int(interval) for interval in self.climb_intervals)
        if not self.climb_intervals:
            raise ValueError("at least one climb interval is required")
        if any(interval <= 0 for interval in self.climb_intervals):
            raise ValueError("climb intervals must be positive")
        if self.duration_round_up_minutes < 0:
            raise ValueError("duration_round_up_minutes cannot be negative")

    @classmethod
    def from_settings(cls, source: Optional[Settings] = None) -> 'AnalysisOptions':
        """Build options from the application settings"""
        source = source or default_settings
        return cls(
            climb_intervals=tuple(source.get('climb_intervals', DEFAULT_CLIMB_INTERVALS)),
            legacy_full_scan=bool(source.get('legacy_full_scan', True)),
            duration_round_up_minutes=int(
                source.get('duration_round_up_minutes', DURATION_ROUND_UP_MINUTES)
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'climb_intervals': list(self.climb_intervals),
            'legacy_full_scan': self.legacy_full_scan,
            'duration_round_up_minutes': self.duration_round_up_minutes,
        }


def _truncated_divmod(dividend: int, divisor: int) -> Tuple[int, int]:
    """divmod() that truncates toward zero, so negative spans stay symmetric"""
    quotient = abs(dividend) // divisor
    if dividend < 0:
        quotient = -quotient
    return quotient, dividend - quotient * divisor


def compute_duration(launch_time: datetime.datetime,
                     landing_time: datetime.datetime,
                     round_up_minutes: int = DURATION_ROUND_UP_MINUTES) -> FlightDuration:
    """
    Get the flight duration between launch and landing.

    Whole minutes are counted (seconds truncated), then `round_up_minutes`
    is added to the remainder minutes, even when the flight lasted an exact
    number of minutes.

    Args:
        launch_time: Launch timestamp
        landing_time: Landing timestamp
        round_up_minutes: Minutes added to the remainder

    Returns:
        FlightDuration: Hours and minutes of the flight
    """
    elapsed_seconds = int((landing_time - launch_time).total_seconds())
    minutes, _ = _truncated_divmod(elapsed_seconds, 60)
    hours, minutes = _truncated_divmod(minutes, 60)
    return FlightDuration(hours=hours, minutes=minutes + round_up_minutes)


@dataclass
class _Segmentation:
    """Mutable state of one pass over the fixes"""
    state: FlightState = FlightState.NOT_STARTED
    max_altitude_ft: int = 0
    max_speed: int = 0
    previous_speed: int = 0
    launch_index: Optional[int] = None
    landing_index: Optional[int] = None


class FlightAnalyzer:
    """
    Single-pass launch/landing detection over an ordered fix sequence.

    The glider is considered launched at the first fix with a non-zero
    speed and landed at the first later fix where both it and the fix
    before it report zero speed. The pass stops at the landing.

    The maximum altitude is updated on every examined fix whatever the
    state, but is reset to the launch altitude at launch, so only fixes
    from launch onward count once the flight has started.
    """

    def __init__(self, options: Optional[AnalysisOptions] = None):
        self.options = options or AnalysisOptions()
        self.climb_calculator = ClimbRateCalculator(legacy_full_scan=self.options.legacy_full_scan)

    def analyze(self, flight_date: str, fixes: Sequence[Fix]) -> FlightSummary:
        """
        Analyze one flight.

        Args:
            flight_date: DDMMYY flight date, empty if unknown
            fixes: Valid fixes in file order

        Returns:
            FlightSummary: The flight summary; launch/landing fields are
            None when the flight never started or never landed
        """
        run = self._segment(fixes)

        launch = fixes[run.launch_index] if run.launch_index is not None else None
        landing = fixes[run.landing_index] if run.landing_index is not None else None

        duration = None
        if launch is not None and landing is not None and launch.timestamp and landing.timestamp:
            duration = compute_duration(
                launch.timestamp,
                landing.timestamp,
                self.options.duration_round_up_minutes
            )

        climb_rates = self.climb_calculator.max_climb_rates(fixes, self.options.climb_intervals)

        if run.state != FlightState.LANDED:
            logger.warning(f"Flight incomplete ({run.state.value}) after {len(fixes)} fixes")
        logger.info(f"The max speed is {run.max_speed}")

        return FlightSummary(
            flight_date=flight_date,
            state=run.state,
            fix_count=len(fixes),
            max_altitude_ft=run.max_altitude_ft,
            max_speed=run.max_speed,
            climb_rates=climb_rates,
            launch_time=launch.timestamp if launch else None,
            launch_altitude_ft=launch.altitude_ft if launch else None,
            launch_point=FlightPoint.from_fix(launch) if launch else None,
            launch_index=run.launch_index,
            landing_time=landing.timestamp if landing else None,
            landing_altitude_ft=landing.altitude_ft if landing else None,
            landing_point=FlightPoint.from_fix(landing) if landing else None,
            landing_index=run.landing_index,
            duration=duration,
        )

    @staticmethod
    def _segment(fixes: Sequence[Fix]) -> _Segmentation:
        run = _Segmentation()

        for index, fix in enumerate(fixes):
            if fix.speed > run.max_speed:
                run.max_speed = fix.speed

            if run.state == FlightState.NOT_STARTED and fix.is_moving:
                run.state = FlightState.FLYING
                run.launch_index = index
                run.max_altitude_ft = fix.altitude_ft
                logger.debug(f"Launch at {fix.time}, {fix.altitude_ft} ft")

            if fix.altitude_ft > run.max_altitude_ft:
                run.max_altitude_ft = fix.altitude_ft

            if run.state == FlightState.FLYING and fix.speed == 0 and run.previous_speed == 0:
                run.state = FlightState.LANDED
                run.landing_index = index
                logger.debug(f"Landing at {fix.time}, {fix.altitude_ft} ft")
                break

            run.previous_speed = fix.speed

        return run


def analyze_flight(flight_date: str,
                   fixes: Sequence[Fix],
                   options: Optional[AnalysisOptions] = None) -> FlightSummary:
    """
    Analyze one flight with the given (or default) options.

    Args:
        flight_date: DDMMYY flight date, empty if unknown
        fixes: Valid fixes in file order
        options: Analysis options

    Returns:
        FlightSummary: The flight summary
    """
    return FlightAnalyzer(options).analyze(flight_date, fixes)
