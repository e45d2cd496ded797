"""
Data models for IGC Flight Log.
Contains classes representing raw IGC records, normalized fixes and the
flight summary produced by the analysis engine.
"""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any
import datetime
import os
from enum import Enum

from ..config.constants import IGC_VALID_FIX


class FlightState(Enum):
    """States of the flight segmentation state machine"""
    NOT_STARTED = "not_started"
    FLYING = "flying"
    LANDED = "landed"


@dataclass
class RawFix:
    """
    One IGC B record, split into its fixed-offset fields.
    Format: B<HHMMSS><DDMMmmmN><DDDMMmmmE><V><PPPPP><GGGGG><SSS>
    """
    time: str
    latitude: str
    longitude: str
    validity: str
    pressure_alt: str
    gnss_alt: str
    speed: str

    @property
    def is_valid(self) -> bool:
        """True when the recorder flagged a valid GPS fix"""
        return self.validity == IGC_VALID_FIX

    def to_dict(self) -> Dict[str, Any]:
        """Convert the object to a dictionary"""
        return {
            "time": self.time,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "validity": self.validity,
            "pressure_alt": self.pressure_alt,
            "gnss_alt": self.gnss_alt,
            "speed": self.speed,
        }


@dataclass
class Fix:
    """
    A validated, normalized position fix.

    `speed` is the raw magnitude of the trailing speed field. The analysis
    only compares it against zero and against other fixes; output formats
    apply their own unit conversion.
    """
    time: str
    timestamp: Optional[datetime.datetime]
    latitude: float
    longitude: float
    raw_latitude: str
    raw_longitude: str
    altitude_ft: int
    gnss_altitude_m: int
    pressure_altitude_m: int
    speed: int

    def __post_init__(self):
        """Validate data after initialization"""
        if len(self.time) != 6 or not self.time.isdigit():
            raise ValueError("time must be six digits (HHMMSS)")
        if not -90 <= self.latitude <= 90:
            raise ValueError("latitude must be between -90 and 90")
        if not -180 <= self.longitude <= 180:
            raise ValueError("longitude must be between -180 and 180")
        if self.speed < 0:
            raise ValueError("speed cannot be negative")

    @property
    def seconds_of_day(self) -> int:
        """Time of day in seconds, ignoring the flight date"""
        return int(self.time[0:2]) * 3600 + int(self.time[2:4]) * 60 + int(self.time[4:6])

    @property
    def is_moving(self) -> bool:
        """A non-zero speed field means the glider is flying"""
        return self.speed > 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert the object to a dictionary"""
        return {
            "time": self.time,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "altitude_ft": self.altitude_ft,
            "gnss_altitude_m": self.gnss_altitude_m,
            "pressure_altitude_m": self.pressure_altitude_m,
            "speed": self.speed,
        }


@dataclass(frozen=True)
class FlightPoint:
    """A launch or landing position, kept in both decimal and raw IGC form"""
    latitude: float
    longitude: float
    raw_latitude: str
    raw_longitude: str

    @classmethod
    def from_fix(cls, fix: Fix) -> 'FlightPoint':
        return cls(fix.latitude, fix.longitude, fix.raw_latitude, fix.raw_longitude)

    @property
    def raw(self) -> str:
        """Raw IGC representation, e.g. '3453787N 08526761W'"""
        return f"{self.raw_latitude} {self.raw_longitude}"

    @property
    def decimal(self) -> str:
        return f"{self.latitude} {self.longitude}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "raw": self.raw,
        }


@dataclass(frozen=True)
class FlightDuration:
    """Flight time as whole hours and remainder minutes"""
    hours: int
    minutes: int

    def __str__(self) -> str:
        return f"{self.hours}:{self.minutes}:00"


@dataclass(frozen=True)
class FlightSummary:
    """
    Result of one analysis pass over a flight.

    Launch and landing fields are None when the flight never started or
    never landed; `state` tells which. Timestamps are also None when the
    file carries no usable date header.
    """
    flight_date: str
    state: FlightState
    fix_count: int
    max_altitude_ft: int
    max_speed: int
    climb_rates: Dict[int, int] = field(default_factory=dict)
    launch_time: Optional[datetime.datetime] = None
    launch_altitude_ft: Optional[int] = None
    launch_point: Optional[FlightPoint] = None
    launch_index: Optional[int] = None
    landing_time: Optional[datetime.datetime] = None
    landing_altitude_ft: Optional[int] = None
    landing_point: Optional[FlightPoint] = None
    landing_index: Optional[int] = None
    duration: Optional[FlightDuration] = None

    @property
    def is_complete(self) -> bool:
        """True when both launch and landing were detected"""
        return self.state == FlightState.LANDED

    def climb_rate_label(self) -> str:
        """Climb rates joined in interval order, e.g. '1968-400-213'"""
        return "-".join(str(self.climb_rates[interval]) for interval in sorted(self.climb_rates))

    def to_dict(self) -> Dict[str, Any]:
        """Convert the summary to a dictionary"""
        return {
            "flight_date": self.flight_date,
            "state": self.state.value,
            "fix_count": self.fix_count,
            "launch_time": self.launch_time.isoformat() if self.launch_time else None,
            "landing_time": self.landing_time.isoformat() if self.landing_time else None,
            "duration": str(self.duration) if self.duration else "",
            "launch_altitude_ft": self.launch_altitude_ft,
            "max_altitude_ft": self.max_altitude_ft,
            "landing_altitude_ft": self.landing_altitude_ft,
            "climb_rates": {str(k): v for k, v in sorted(self.climb_rates.items())},
            "launch_point": self.launch_point.to_dict() if self.launch_point else None,
            "landing_point": self.landing_point.to_dict() if self.landing_point else None,
            "max_speed": self.max_speed,
        }


@dataclass
class ParsedFlight:
    """Date header and retained fixes of one IGC file"""
    flight_date: str
    fixes: List[Fix] = field(default_factory=list)

    def __iter__(self):
        # Allows `flight_date, fixes = parser.parse_lines(lines)`
        return iter((self.flight_date, self.fixes))


@dataclass
class FileResult:
    """
    Outcome of converting one IGC file: either a summary or an error.
    """
    path: str
    fixes: List[Fix] = field(default_factory=list)
    summary: Optional[FlightSummary] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.summary is not None

    @property
    def filename(self) -> str:
        return os.path.basename(self.path)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "ok": self.ok,
            "summary": self.summary.to_dict() if self.summary else None,
            "error": str(self.error) if self.error else None,
        }
