"""
Exceptions raised by IGC Flight Log.

Parsing and analysis failures are local to one IGC file; the conversion
pipeline records them per file and carries on. OutputError is the only
failure that ends a whole run.
"""

from typing import Optional


class FlightLogError(Exception):
    """Base class for all IGC Flight Log errors"""


class MalformedRecord(FlightLogError):
    """A date or fix record is too short or holds non-numeric data"""

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class InvalidCoordinate(FlightLogError):
    """A coordinate string cannot be converted to decimal degrees"""

    def __init__(self, coordinate: str, reason: str):
        self.coordinate = coordinate
        super().__init__(f"Invalid coordinate {coordinate!r}: {reason}")


class OutputError(FlightLogError):
    """The output file cannot be created, written or closed"""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Output file {path}: {reason}")
