"""
Parser for IGC flight recorder files.

Only two record kinds matter for the flight log: the date header
(``HFDTE``) and the position fixes (``B`` records). Everything else in the
file is skipped.
"""

import logging
import re
from typing import Iterable, List, Optional, Tuple
import datetime

from .models import RawFix, Fix, ParsedFlight
from ..config.constants import (
    IGC_DATE_MARKER,
    IGC_DATE_LONG_PREFIX,
    IGC_FIX_PREFIX,
    IGC_TIMESTAMP_FORMAT,
    DATE_SLICE,
    TIME_SLICE,
    LATITUDE_SLICE,
    LONGITUDE_SLICE,
    VALIDITY_SLICE,
    PRESSURE_ALT_SLICE,
    GNSS_ALT_SLICE,
    SPEED_SLICE,
    MIN_FIX_LENGTH,
)
from ..errors import MalformedRecord
from ..utils.conversions import meters_to_feet
from ..utils.coordinates import coordinate_to_decimal

logger = logging.getLogger("igc_flightlog.parser")

_DIGITS = re.compile(r"^\d+$")
_ALTITUDE = re.compile(r"^-?\d+$")


class IGCParser:
    """
    Parses the lines of one IGC file into the flight date and the ordered
    list of valid fixes.

    Parsing is all-or-nothing: a single malformed record fails the whole
    file with MalformedRecord, and an unknown hemisphere letter fails it
    with InvalidCoordinate.
    """

    @staticmethod
    def parse_file(path: str) -> ParsedFlight:
        """
        Read an IGC file fully and parse it.

        Args:
            path: Path to the IGC file

        Returns:
            ParsedFlight: The flight date and retained fixes

        Raises:
            OSError: If the file cannot be read
            MalformedRecord: If a date or fix record is malformed
            InvalidCoordinate: If a fix carries an unknown hemisphere letter
        """
        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            lines = f.readlines()
        logger.debug(f"Read {len(lines)} lines from {path}")
        return IGCParser.parse_lines(lines)

    @staticmethod
    def parse_lines(lines: Iterable[str]) -> ParsedFlight:
        """
        Parse raw IGC lines.

        Args:
            lines: The lines of one IGC file, with or without line endings

        Returns:
            ParsedFlight: The flight date ("" when the file has no date
            header) and the fixes flagged valid, in file order
        """
        flight_date = ""
        raw_fixes: List[Tuple[int, str, RawFix]] = []

        for line_number, line in enumerate(lines, start=1):
            line = line.rstrip("\r\n")

            if IGC_DATE_MARKER in line:
                flight_date = IGCParser._parse_date(line, line_number)
            elif line.startswith(IGC_FIX_PREFIX):
                raw = IGCParser._split_fix(line, line_number)
                if raw.is_valid:
                    raw_fixes.append((line_number, line, raw))

        # The date header may follow the first fixes, so fixes are only
        # normalized once the whole file has been read
        fixes = [
            IGCParser._normalize_fix(raw, flight_date, line_number, line)
            for line_number, line, raw in raw_fixes
        ]

        logger.debug(f"Parsed {len(fixes)} valid fixes, flight date {flight_date or 'missing'}")
        return ParsedFlight(flight_date=flight_date, fixes=fixes)

    @staticmethod
    def _parse_date(line: str, line_number: int) -> str:
        """
        Extract the DDMMYY flight date from a date header.

        Example date lines:
        HFDTE170818
        HFDTEDATE:170818,01
        """
        if line[5:10] == IGC_DATE_LONG_PREFIX:
            date = line[10:16]
        else:
            date = line[DATE_SLICE]

        if len(date) != 6 or not _DIGITS.match(date):
            raise MalformedRecord(f"invalid date header {line!r}", line_number, line)
        return date

    @staticmethod
    def _split_fix(line: str, line_number: int) -> RawFix:
        """
        Cut a B record into its fields.

        Example B line:
        B1012003715200N12230450WA0050000500055
        => B<time><lat><lon><validity><pressure alt><gnss alt><speed>
        """
        if len(line) < MIN_FIX_LENGTH:
            raise MalformedRecord(
                f"fix record has {len(line)} characters, expected at least {MIN_FIX_LENGTH}",
                line_number,
                line,
            )

        return RawFix(
            time=line[TIME_SLICE],
            latitude=line[LATITUDE_SLICE],
            longitude=line[LONGITUDE_SLICE],
            validity=line[VALIDITY_SLICE],
            pressure_alt=line[PRESSURE_ALT_SLICE],
            gnss_alt=line[GNSS_ALT_SLICE],
            speed=line[SPEED_SLICE],
        )

    @staticmethod
    def _normalize_fix(raw: RawFix, flight_date: str, line_number: int, line: str) -> Fix:
        """Check the numeric fields of a retained fix and convert them"""
        numeric_fields = (
            ("time", raw.time, _DIGITS),
            ("latitude", raw.latitude[:-1], _DIGITS),
            ("longitude", raw.longitude[:-1], _DIGITS),
            ("pressure altitude", raw.pressure_alt, _ALTITUDE),
            ("GNSS altitude", raw.gnss_alt, _ALTITUDE),
            ("speed", raw.speed, _DIGITS),
        )
        for name, value, pattern in numeric_fields:
            if not pattern.match(value):
                raise MalformedRecord(f"non-numeric {name} {value!r}", line_number, line)

        gnss_altitude_m = int(raw.gnss_alt)

        try:
            return Fix(
                time=raw.time,
                timestamp=IGCParser.parse_timestamp(flight_date, raw.time),
                latitude=coordinate_to_decimal(raw.latitude),
                longitude=coordinate_to_decimal(raw.longitude),
                raw_latitude=raw.latitude,
                raw_longitude=raw.longitude,
                altitude_ft=meters_to_feet(gnss_altitude_m),
                gnss_altitude_m=gnss_altitude_m,
                pressure_altitude_m=int(raw.pressure_alt),
                speed=int(raw.speed),
            )
        except ValueError as e:
            raise MalformedRecord(str(e), line_number, line) from e

    @staticmethod
    def parse_timestamp(flight_date: str, time: str) -> Optional[datetime.datetime]:
        """
        Combine the DDMMYY flight date and HHMMSS time of day.

        Returns:
            Optional[datetime.datetime]: The absolute timestamp, or None when
            the date is missing or the combination is not a real moment
        """
        if not flight_date:
            return None
        try:
            return datetime.datetime.strptime(flight_date + time, IGC_TIMESTAMP_FORMAT)
        except ValueError:
            return None


# Create a singleton instance of the parser
parser = IGCParser()
