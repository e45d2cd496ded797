"""
Data package for IGC Flight Log.
Contains data models and the IGC record parser.
"""

from .models import (
    RawFix,
    Fix,
    FlightPoint,
    FlightDuration,
    FlightState,
    FlightSummary,
    ParsedFlight,
    FileResult
)
from .parser import IGCParser, parser

__all__ = [
    'RawFix',
    'Fix',
    'FlightPoint',
    'FlightDuration',
    'FlightState',
    'FlightSummary',
    'ParsedFlight',
    'FileResult',
    'IGCParser',
    'parser'
]
