"""Event base classes and type-based dispatch."""

from __future__ import annotations

import enum
from typing import Callable, ClassVar, TypeVar


class EventType(enum.Enum):
    """Category of an event."""

    MOUSE = enum.auto()
    KEYBOARD = enum.auto()
    WINDOW = enum.auto()
    CUSTOM = enum.auto()


class Event:
    """Base class for events.

    Subclasses set ``static_type`` to the category they belong to.
    """

    static_type: ClassVar[EventType]
    handled: bool = False

    @property
    def event_type(self) -> EventType:
        """The category of this event."""
        return type(self).static_type


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Routes one event to handlers of a matching event category."""

    def __init__(self, event: Event):
        self.event = event

    def dispatch(self, event_class: type[E], func: Callable[[E], bool]) -> bool:
        """Call ``func`` if the event is of ``event_class``'s category.

        The handler's result is OR-ed into ``event.handled``. Returns whether
        the handler was called.
        """
        if self.event.event_type != event_class.static_type:
            return False
        self.event.handled |= bool(func(self.event))  # type: ignore[arg-type]
        return True


class CustomEvent(Event):
    """An application-defined event identified by name."""

    static_type: ClassVar[EventType] = EventType.CUSTOM

    def __init__(self, name: str):
        self.name = name

    @property
    def event_type(self) -> EventType:
        """Always the custom category."""
        return EventType.CUSTOM

    def __repr__(self) -> str:
        return f"CustomEvent({self.name!r})"