"""
Coordinate conversion utilities.

IGC B records store WGS84 positions as degrees followed by minutes x 1000
and a hemisphere letter, e.g. ``3453787N`` (34 deg 53.787' N) and
``08526761W`` (85 deg 26.761' W). These helpers convert between that form
and signed decimal degrees.
"""

import math

from .conversions import round_half_up
from ..errors import InvalidCoordinate

LATITUDE_HEMISPHERES = ('N', 'S')
LONGITUDE_HEMISPHERES = ('E', 'W')
NEGATIVE_HEMISPHERES = ('S', 'W')

LATITUDE_DEGREE_DIGITS = 2
LONGITUDE_DEGREE_DIGITS = 3
MINUTE_DIGITS = 5
MINUTE_SCALE = 1000  # minutes are stored in thousandths


def coordinate_to_decimal(coordinate: str) -> float:
    """
    Convert an IGC coordinate string to signed decimal degrees.

    Args:
        coordinate: Digits followed by a hemisphere letter (N, S, E or W)

    Returns:
        float: Decimal degrees, negative in the southern and western hemispheres

    Raises:
        InvalidCoordinate: If the hemisphere letter is unknown or the digits
            are missing or non-numeric
    """
    if not coordinate:
        raise InvalidCoordinate(coordinate, "empty coordinate")

    hemisphere = coordinate[-1]
    digits = coordinate[:-1]

    if hemisphere in LONGITUDE_HEMISPHERES:
        degree_digits = LONGITUDE_DEGREE_DIGITS
    elif hemisphere in LATITUDE_HEMISPHERES:
        degree_digits = LATITUDE_DEGREE_DIGITS
    else:
        raise InvalidCoordinate(coordinate, f"unknown hemisphere {hemisphere!r}")

    if len(digits) <= degree_digits or not digits.isdigit():
        raise InvalidCoordinate(coordinate, "expected degree and minute digits")

    degrees = float(digits[:degree_digits])
    decimal_minutes = float(digits[degree_digits:]) / MINUTE_SCALE / 60

    value = degrees + decimal_minutes
    if hemisphere in NEGATIVE_HEMISPHERES:
        value = -value
    return value


def decimal_to_coordinate(value: float, is_latitude: bool) -> str:
    """
    Render signed decimal degrees in the IGC coordinate form.

    Args:
        value: Decimal degrees
        is_latitude: True for a 7-digit latitude, False for an 8-digit longitude

    Returns:
        str: Coordinate string such as ``3453787N`` or ``08526761W``
    """
    negative = math.copysign(1.0, value) < 0
    magnitude = abs(value)

    degrees = int(magnitude)
    minutes = round_half_up((magnitude - degrees) * 60 * MINUTE_SCALE)
    if minutes >= 60 * MINUTE_SCALE:
        degrees += 1
        minutes -= 60 * MINUTE_SCALE

    if is_latitude:
        hemisphere = LATITUDE_HEMISPHERES[1] if negative else LATITUDE_HEMISPHERES[0]
        degree_digits = LATITUDE_DEGREE_DIGITS
    else:
        hemisphere = LONGITUDE_HEMISPHERES[1] if negative else LONGITUDE_HEMISPHERES[0]
        degree_digits = LONGITUDE_DEGREE_DIGITS

    return f"{degrees:0{degree_digits}d}{minutes:0{MINUTE_DIGITS}d}{hemisphere}"
