"""
File management utilities for IGC Flight Log.
"""

import os
import logging
from typing import List

from ..config.constants import IGC_EXTENSION, KML_EXTENSION

logger = logging.getLogger("igc_flightlog.io.files")


def is_igc_file(path: str) -> bool:
    """
    Check whether a path names an IGC file.

    The extension check is case-insensitive, so both ``flight.igc`` and
    ``FLIGHT.IGC`` match.
    """
    return path.lower().endswith(IGC_EXTENSION)


def list_igc_files(directory: str) -> List[str]:
    """
    List all IGC files in the specified directory.

    Args:
        directory: Directory to search (not recursive)

    Returns:
        List[str]: IGC file paths sorted by file name
    """
    try:
        names = os.listdir(directory)
    except OSError as e:
        logger.error(f"Error listing IGC files in {directory}: {e}")
        return []

    igc_files = [
        os.path.join(directory, name)
        for name in sorted(names)
        if is_igc_file(name) and os.path.isfile(os.path.join(directory, name))
    ]
    logger.debug(f"Found {len(igc_files)} IGC files in {directory}")
    return igc_files


def get_igc_files_from_path(path: str) -> List[str]:
    """
    Get the IGC files named by a path.

    Args:
        path: A directory (all IGC files inside are returned) or a single file

    Returns:
        List[str]: IGC file paths; empty if the path is neither a directory
        nor an IGC file
    """
    if os.path.isdir(path):
        return list_igc_files(path)

    if is_igc_file(os.path.basename(path)) and os.path.isfile(path):
        return [path]

    logger.warning(f"Not an IGC file or directory: {path}")
    return []


def default_kml_path(igc_files: List[str]) -> str:
    """
    Get the default KML output path: the first IGC file's path plus ``.kml``.

    Args:
        igc_files: The IGC files being converted, must not be empty

    Returns:
        str: Absolute path of the KML file
    """
    return os.path.abspath(igc_files[0]) + KML_EXTENSION
