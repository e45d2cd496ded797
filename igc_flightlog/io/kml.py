"""
KML writer for IGC Flight Log.
Renders flights as Google Earth placemarks and flight paths using simplekml.
"""

import logging
from typing import Optional, Sequence

import simplekml

from ..config.constants import (
    KML_DOCUMENT_NAME,
    KML_ICON_HREF,
    KML_ICON_SCALE,
    KML_TIMESTAMP_FORMAT,
    MPH_PER_KPH,
)
from ..data.models import Fix, FileResult, FlightSummary
from ..errors import OutputError
from ..utils.conversions import round_half_up

logger = logging.getLogger("igc_flightlog.io.kml")


class KMLWriter:
    """
    Collects flights into a single KML document.

    Every flight gets its own sub-document with a "Fixes" folder (one
    placemark per fix from launch through landing, carrying speed and
    altitude as extended data) and a "Flightpath" folder holding one
    LineString over every fix of the file.
    """

    def __init__(self, path: str, speed_factor: float = MPH_PER_KPH):
        """
        Initialize the writer.

        Args:
            path: Output KML file
            speed_factor: Multiplier turning the raw speed field into mph
        """
        self.path = path
        self.speed_factor = speed_factor
        self.kml = simplekml.Kml(name=KML_DOCUMENT_NAME)
        self.flight_count = 0

        self.fix_style = simplekml.Style()
        self.fix_style.iconstyle.scale = KML_ICON_SCALE
        self.fix_style.iconstyle.icon.href = KML_ICON_HREF

    def add_result(self, result: FileResult) -> bool:
        """
        Add a converted file. Failed conversions are skipped.

        Returns:
            bool: True if the flight was added
        """
        if not result.ok:
            logger.debug(f"Skipping failed file {result.filename}")
            return False
        self.add_flight(result.fixes, result.summary, result.filename)
        return True

    def add_flight(self, fixes: Sequence[Fix], summary: FlightSummary, name: str) -> simplekml.Document:
        """
        Add one flight.

        Args:
            fixes: The fixes the summary was computed from
            summary: The flight summary
            name: Name of the flight's document, usually the IGC file name

        Returns:
            simplekml.Document: The flight's document
        """
        document = self.kml.newdocument(name=name)
        document.open = 1

        if summary.launch_time:
            label = f"{summary.launch_time.strftime(KML_TIMESTAMP_FORMAT)} UTC"
        else:
            label = "unknown launch time"

        if summary.launch_index is not None:
            last_index = summary.landing_index if summary.landing_index is not None else len(fixes) - 1
            fix_folder = document.newfolder(name=f"Fixes - {label}")
            for fix in fixes[summary.launch_index:last_index + 1]:
                self._add_fix(fix_folder, fix)

        path_folder = document.newfolder(name=f"Flightpath - {label}")
        path = path_folder.newlinestring(
            name=name,
            coords=[(fix.longitude, fix.latitude, fix.gnss_altitude_m) for fix in fixes]
        )
        path.altitudemode = simplekml.AltitudeMode.absolute

        self.flight_count += 1
        logger.debug(f"Added {name} to KML ({len(fixes)} fixes)")
        return document

    def _add_fix(self, folder: simplekml.Folder, fix: Fix) -> None:
        point = folder.newpoint(coords=[(fix.longitude, fix.latitude, fix.gnss_altitude_m)])
        point.altitudemode = simplekml.AltitudeMode.absolute
        point.style = self.fix_style
        point.extendeddata.newdata(
            name="tas",
            value=f"{self.speed_mph(fix)} mph",
            displayname="True Air Speed"
        )
        point.extendeddata.newdata(
            name="alt",
            value=f"{fix.altitude_ft} ft",
            displayname="Altitude"
        )

    def speed_mph(self, fix: Fix) -> int:
        """Speed of a fix converted with the writer's speed factor"""
        return round_half_up(fix.speed * self.speed_factor)

    def to_string(self) -> str:
        """Render the KML document"""
        return self.kml.kml()

    def save(self, path: Optional[str] = None) -> str:
        """
        Write the KML document.

        Raises:
            OutputError: If the file cannot be written

        Returns:
            str: The path written
        """
        target = path or self.path
        try:
            self.kml.save(target)
        except OSError as e:
            raise OutputError(target, f"error writing KML: {e}") from e
        logger.info(f"Wrote {self.flight_count} flights to {target}")
        return target
