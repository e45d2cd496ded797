"""
IGC Flight Log
Extracts flight metrics from IGC flight recorder files.

Features:
- Launch and landing detection, altitude extremes and climb-rate statistics
- A CSV flight log with one line per flight
- KML tracks for Google Earth
"""

from . import config
from . import data
from . import utils
from .config.constants import APP_NAME, APP_VERSION, APP_AUTHOR, APP_LICENSE
from .errors import FlightLogError, MalformedRecord, InvalidCoordinate, OutputError

__version__ = APP_VERSION
__author__ = APP_AUTHOR
__license__ = APP_LICENSE

# Initialize logging when the package is imported
import logging
import sys

# Configure root logger
root_logger = logging.getLogger("igc_flightlog")
root_logger.setLevel(logging.INFO)

# Create console handler
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setLevel(logging.DEBUG)

# Create formatter
formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
console_handler.setFormatter(formatter)

# Add handler to logger
root_logger.addHandler(console_handler)

root_logger.debug(f"Initializing {APP_NAME} v{APP_VERSION}")
