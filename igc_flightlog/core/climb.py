"""
Climb-rate statistics for IGC Flight Log.

For a look-ahead interval the calculator pairs every fix the glider was
moving at with the first fix at least `interval` seconds later and reports
the best altitude gain per minute over all such pairs.
"""

import bisect
import logging
from itertools import accumulate
from typing import Dict, Iterable, List, Optional, Sequence

from ..config.constants import FEET_PER_METER, SECONDS_PER_MINUTE
from ..data.models import Fix
from ..utils.conversions import round_half_up

logger = logging.getLogger("igc_flightlog.core.climb")


class ClimbRateCalculator:
    """
    Computes the maximum climb rate (ft/min) over a fixed look-ahead interval.

    With `legacy_full_scan` (the default) the second point of each pair is
    the first fix *in file order* whose time of day is at least `interval`
    seconds after the start fix, searching from the top of the file. With
    it disabled only fixes after the start fix are considered. The two
    agree on chronological files and differ when fixes are out of order.

    Elapsed time uses the time of day only; a flight crossing midnight UTC
    yields negative differences that never qualify.
    """

    def __init__(self, legacy_full_scan: bool = True):
        self.legacy_full_scan = legacy_full_scan

    def max_climb_rate(self, fixes: Sequence[Fix], interval: int) -> int:
        """
        Get the best climb rate over `interval` seconds.

        Args:
            fixes: The ordered fix sequence of one flight
            interval: Look-ahead interval in seconds, must be positive

        Returns:
            int: Maximum climb rate in feet per minute, 0 if the glider never climbed
        """
        if interval <= 0:
            raise ValueError("interval must be a positive number of seconds")

        seconds = [fix.seconds_of_day for fix in fixes]
        if self.legacy_full_scan:
            find_second = self._full_scan_finder(seconds)
        else:
            find_second = self._forward_scan_finder(seconds)

        best = 0
        for index, start in enumerate(fixes):
            # Not flying
            if not start.is_moving:
                continue

            second_index = find_second(index, seconds[index] + interval)
            if second_index is None:
                continue

            second = fixes[second_index]
            gain_m = second.pressure_altitude_m - start.pressure_altitude_m
            if gain_m <= 0:
                continue

            elapsed = seconds[second_index] - seconds[index]
            rate = round_half_up(gain_m / elapsed * SECONDS_PER_MINUTE * FEET_PER_METER)
            if rate > best:
                best = rate

        logger.debug(f"Max climb over {interval}s: {best} ft/min ({len(fixes)} fixes)")
        return best

    def max_climb_rates(self, fixes: Sequence[Fix], intervals: Iterable[int]) -> Dict[int, int]:
        """
        Get the best climb rate for several intervals.

        Returns:
            Dict[int, int]: Climb rate in ft/min keyed by interval, in the
            order the intervals were given
        """
        return {interval: self.max_climb_rate(fixes, interval) for interval in intervals}

    @staticmethod
    def _full_scan_finder(seconds: List[int]):
        # The first index holding a value >= target is also the first index
        # where the running maximum reaches target, and the running maximum
        # is sorted, so the scan from the top of the file becomes a bisection
        running_max = list(accumulate(seconds, max))

        def find(start_index: int, target: int) -> Optional[int]:
            position = bisect.bisect_left(running_max, target)
            return position if position < len(running_max) else None

        return find

    @staticmethod
    def _forward_scan_finder(seconds: List[int]):
        def find(start_index: int, target: int) -> Optional[int]:
            for position in range(start_index + 1, len(seconds)):
                if seconds[position] >= target:
                    return position
            return None

        return find
