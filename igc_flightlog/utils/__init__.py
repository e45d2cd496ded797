"""
Utilities package for IGC Flight Log.
Contains common utilities and helpers used across the application.
"""

from .conversions import round_half_up, meters_to_feet
from .coordinates import coordinate_to_decimal, decimal_to_coordinate
from .events import EventBus, Event, EventType, publish_event, event_bus

__all__ = [
    'round_half_up',
    'meters_to_feet',
    'coordinate_to_decimal',
    'decimal_to_coordinate',
    'EventBus',
    'Event',
    'EventType',
    'publish_event',
    'event_bus'
]
