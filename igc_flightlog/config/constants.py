"""
Constants for IGC Flight Log.
These are fixed values that don't change during application execution.
"""

# Unit conversion factors
FEET_PER_METER = 3.28084
MPH_PER_KPH = 0.621371  # Speed field as written by most loggers is km/h
SECONDS_PER_MINUTE = 60

# IGC file related constants
IGC_EXTENSION = '.igc'
IGC_DATE_MARKER = 'HFDTE'
IGC_DATE_LONG_PREFIX = 'DATE:'  # IGC 2016 long form: HFDTEDATE:DDMMYY,NN
IGC_FIX_PREFIX = 'B'
IGC_VALID_FIX = 'A'

# Fixed-offset slices of the date header line
DATE_SLICE = slice(5, 11)

# Fixed-offset slices of a B record (0-based, half-open)
TIME_SLICE = slice(1, 7)
LATITUDE_SLICE = slice(7, 15)
LONGITUDE_SLICE = slice(15, 24)
VALIDITY_SLICE = slice(24, 25)
PRESSURE_ALT_SLICE = slice(25, 30)
GNSS_ALT_SLICE = slice(30, 35)
SPEED_SLICE = slice(35, 38)
MIN_FIX_LENGTH = 38

# Timestamp formats
IGC_TIMESTAMP_FORMAT = '%d%m%y%H%M%S'  # flight date + time of day
CSV_TIMESTAMP_FORMAT = '%m/%d/%Y %H:%M:%S'
KML_TIMESTAMP_FORMAT = '%m/%d/%Y %H:%M'

# Flight analysis
DEFAULT_CLIMB_INTERVALS = (2, 15, 30)  # seconds
DURATION_ROUND_UP_MINUTES = 1  # Added to the remainder minutes of every duration

# CSV flight log
CSV_HEADER = [
    'Flight No.',
    'Launch Time (UTC)',
    'Flight Duration',
    'Launch Altitude',
    'Max Altitude',
    'Land Altitude',
    'Max Avg 2s-15s-30s',
    'Launch Point',
    'Landing Point',
    'Site Name',
    'Notes',
    'Landing',
    'IGC File Name',
]

# KML output
KML_DOCUMENT_NAME = 'IGC Flights'
KML_ICON_HREF = 'http://maps.google.com/mapfiles/kml/paddle/grn-blank-lv.png'
KML_ICON_SCALE = 0.2
KML_EXTENSION = '.kml'

# Conversion pipeline
DEFAULT_MAX_WORKERS = 4

# Application information
APP_NAME = "IGC Flight Log"
APP_VERSION = "1.0.0"
APP_AUTHOR = "IGC Flight Log contributors"
APP_LICENSE = "MIT License"
APP_DESCRIPTION = "Convert IGC flight recorder logs into a flight log CSV or KML tracks"
