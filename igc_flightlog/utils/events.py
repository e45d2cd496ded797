"""
Progress events for IGC Flight Log.

The conversion pipeline publishes an event when a run starts, for every file
it converts or fails on, and when the run is over. Front ends subscribe to
report progress; the pipeline never knows who is listening.
"""

import inspect
import logging
import time
import uuid
from collections import defaultdict, deque
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, DefaultDict, Dict, Iterable, List, Optional

logger = logging.getLogger("igc_flightlog.events")

HISTORY_SIZE = 100


class EventType(Enum):
    """Events published while converting IGC files"""
    # Conversion events
    CONVERSION_STARTED = auto()   # data: file_count, options
    FILE_CONVERTED = auto()       # data: filename, summary
    FILE_FAILED = auto()          # data: filename, message
    CONVERSION_FINISHED = auto()  # data: converted, failed

    # System events
    ERROR_OCCURRED = auto()       # data: message, component


@dataclass
class Event:
    """One published event"""
    type: EventType
    data: Dict[str, Any] = field(default_factory=dict)
    source: Optional[str] = None
    timestamp: float = field(default_factory=time.time)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))


Callback = Callable[[Event], Any]


class EventBus:
    """
    In-process publish/subscribe hub, shared as a singleton.

    Callbacks may be plain functions or coroutine functions. They run in
    subscription order and a coroutine callback is awaited before the next
    one starts, so subscribers see events in the order they were published.
    """
    _instance = None
    _subscribers: DefaultDict[EventType, List[Callback]]
    _history: deque

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(EventBus, cls).__new__(cls)
            cls._instance._subscribers = defaultdict(list)
            cls._instance._history = deque(maxlen=HISTORY_SIZE)
            logger.debug("EventBus initialized")
        return cls._instance

    async def subscribe(self, event_type: EventType, callback: Callback) -> None:
        """Register a callback; registering the same callback twice has no effect"""
        callbacks = self._subscribers[event_type]
        if callback not in callbacks:
            callbacks.append(callback)
            logger.debug(f"Subscribed to {event_type.name}")

    async def unsubscribe(self, event_type: EventType, callback: Callback) -> bool:
        """
        Remove a callback.

        Returns:
            bool: True if the callback was subscribed
        """
        callbacks = self._subscribers.get(event_type, [])
        if callback not in callbacks:
            return False
        callbacks.remove(callback)
        logger.debug(f"Unsubscribed from {event_type.name}")
        return True

    @asynccontextmanager
    async def subscribed(self, handlers: Dict[EventType, Callback]):
        """
        Subscribe several handlers for the duration of a block.

        Usage:
            async with event_bus.subscribed({EventType.FILE_FAILED: on_failed}):
                await converter.convert_files(paths)
        """
        for event_type, callback in handlers.items():
            await self.subscribe(event_type, callback)
        try:
            yield self
        finally:
            for event_type, callback in handlers.items():
                await self.unsubscribe(event_type, callback)

    async def publish(self, event: Event) -> None:
        """
        Deliver an event to its subscribers.

        A failing callback is logged and the remaining callbacks still run.
        """
        self._history.append(event)

        callbacks = list(self._subscribers.get(event.type, []))
        if not callbacks:
            logger.debug(f"No subscribers for event {event.type.name}")
            return

        for callback in callbacks:
            try:
                result = callback(event)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                logger.error(f"Error in {event.type.name} subscriber: {e}")

    def get_event_history(self, types: Optional[Iterable[EventType]] = None) -> List[Event]:
        """Recent events, oldest first, optionally only those of the given types"""
        if types is None:
            return list(self._history)
        wanted = set(types)
        return [event for event in self._history if event.type in wanted]

    def clear_history(self) -> None:
        self._history.clear()

    def clear_subscribers(self) -> None:
        self._subscribers.clear()


# Create global event bus instance
event_bus = EventBus()


async def publish_event(event_type: EventType,
                        data: Optional[Dict[str, Any]] = None,
                        source: Optional[str] = None) -> Event:
    """
    Create and publish an event.

    Returns:
        Event: The published event
    """
    event = Event(type=event_type, data=data or {}, source=source)
    await event_bus.publish(event)
    return event
