"""
CSV flight log writer for IGC Flight Log.
Writes one line per flight behind a fixed header line.
"""

import csv
import logging
from typing import List, Optional, TextIO

from ..config.constants import CSV_HEADER, CSV_TIMESTAMP_FORMAT
from ..data.models import FlightSummary
from ..errors import OutputError

logger = logging.getLogger("igc_flightlog.io.csv_log")


def _text(value) -> str:
    """Render an optional value, unset values as an empty cell"""
    return "" if value is None else str(value)


def format_entry(summary: FlightSummary, filename: str) -> List[str]:
    """
    Build the CSV cells for one flight.

    The flight number, site name, notes and landing type columns are left
    empty for the pilot to fill in.

    Args:
        summary: The flight summary
        filename: Name of the source IGC file

    Returns:
        List[str]: The cells, in CSV_HEADER order
    """
    launch_time = summary.launch_time.strftime(CSV_TIMESTAMP_FORMAT) if summary.launch_time else ""
    return [
        "",
        launch_time,
        _text(summary.duration),
        _text(summary.launch_altitude_ft),
        _text(summary.max_altitude_ft),
        _text(summary.landing_altitude_ft),
        summary.climb_rate_label(),
        summary.launch_point.raw if summary.launch_point else "",
        summary.landing_point.raw if summary.landing_point else "",
        "",
        "",
        "",
        filename,
    ]


class FlightLogWriter:
    """
    Writes flight summaries to a CSV flight log.

    Usage:
        with FlightLogWriter(path) as writer:
            writer.write_entry(summary, "flight.igc")
    """

    def __init__(self, path: str):
        self.path = path
        self.file: Optional[TextIO] = None
        self.writer = None
        self.entry_count = 0

    def open(self) -> None:
        """
        Create the output file and write the header line.

        Raises:
            OutputError: If the file cannot be created
        """
        try:
            self.file = open(self.path, 'w', newline='', encoding='utf-8')
            self.writer = csv.writer(self.file, lineterminator='\n')
            self.writer.writerow(CSV_HEADER)
        except OSError as e:
            raise OutputError(self.path, f"error creating output file: {e}") from e
        logger.info(f"Writing flight log to {self.path}")

    def write_entry(self, summary: FlightSummary, filename: str) -> None:
        """
        Append one flight to the log.

        Raises:
            OutputError: If the file is not open or cannot be written
        """
        if self.writer is None:
            raise OutputError(self.path, "output file is not open")
        try:
            self.writer.writerow(format_entry(summary, filename))
        except OSError as e:
            raise OutputError(self.path, f"error writing entry for {filename}: {e}") from e
        self.entry_count += 1

    def close(self) -> None:
        """
        Flush and close the output file.

        Raises:
            OutputError: If closing fails
        """
        if self.file is None:
            return
        try:
            self.file.close()
        except OSError as e:
            raise OutputError(self.path, f"failed to close the output file: {e}") from e
        finally:
            self.file = None
            self.writer = None
        logger.info(f"Wrote {self.entry_count} entries to {self.path}")

    def __enter__(self) -> 'FlightLogWriter':
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
