"""
I/O package for IGC Flight Log.
Contains file discovery and the CSV and KML output writers.
"""

from .files import (
    is_igc_file,
    list_igc_files,
    get_igc_files_from_path,
    default_kml_path
)
from .csv_log import FlightLogWriter, format_entry
from .kml import KMLWriter

__all__ = [
    'is_igc_file',
    'list_igc_files',
    'get_igc_files_from_path',
    'default_kml_path',
    'FlightLogWriter',
    'format_entry',
    'KMLWriter'
]
