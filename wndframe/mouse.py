"""Mouse state and a bounded queue of mouse events."""

from __future__ import annotations

import collections
import dataclasses
import enum
from typing import ClassVar

from .events import Event, EventType


class MouseEventType(enum.Enum):
    """What happened to the mouse."""

    L_PRESS = enum.auto()
    L_RELEASE = enum.auto()
    R_PRESS = enum.auto()
    R_RELEASE = enum.auto()
    WHEEL_UP = enum.auto()
    WHEEL_DOWN = enum.auto()
    MOVE = enum.auto()
    ENTER = enum.auto()
    LEAVE = enum.auto()


@dataclasses.dataclass
class MouseEvent(Event):
    """A mouse event with a snapshot of the mouse state when it happened."""

    static_type: ClassVar[EventType] = EventType.MOUSE

    kind: MouseEventType
    left_is_pressed: bool
    right_is_pressed: bool
    x: int
    y: int

    @property
    def event_type(self) -> EventType:
        """Always the mouse category."""
        return EventType.MOUSE

    @property
    def pos(self) -> tuple[int, int]:
        return (self.x, self.y)


class Mouse:
    """Tracks mouse state and keeps the most recent events."""

    BUFFER_SIZE: ClassVar[int] = 16

    def __init__(self):
        self.x = 0
        self.y = 0
        self.left_is_pressed = False
        self.right_is_pressed = False
        self.is_in_window = False
        self._buffer: collections.deque[MouseEvent] = collections.deque(
            maxlen=self.BUFFER_SIZE
        )

    @property
    def pos(self) -> tuple[int, int]:
        return (self.x, self.y)

    def read(self) -> MouseEvent | None:
        """Take the oldest queued event, or None if there is none."""
        return self._buffer.popleft() if self._buffer else None

    def is_empty(self) -> bool:
        return not self._buffer

    def flush(self) -> None:
        self._buffer.clear()

    def _push(self, kind: MouseEventType) -> None:
        self._buffer.append(
            MouseEvent(kind, self.left_is_pressed, self.right_is_pressed, self.x, self.y)
        )

    def on_mouse_move(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        self._push(MouseEventType.MOVE)

    def on_mouse_leave(self) -> None:
        self.is_in_window = False
        self._push(MouseEventType.LEAVE)

    def on_mouse_enter(self) -> None:
        self.is_in_window = True
        self._push(MouseEventType.ENTER)

    def on_left_pressed(self) -> None:
        self.left_is_pressed = True
        self._push(MouseEventType.L_PRESS)

    def on_left_released(self) -> None:
        self.left_is_pressed = False
        self._push(MouseEventType.L_RELEASE)

    def on_right_pressed(self) -> None:
        self.right_is_pressed = True
        self._push(MouseEventType.R_PRESS)

    def on_right_released(self) -> None:
        self.right_is_pressed = False
        self._push(MouseEventType.R_RELEASE)

    def on_wheel_up(self) -> None:
        self._push(MouseEventType.WHEEL_UP)

    def on_wheel_down(self) -> None:
        self._push(MouseEventType.WHEEL_DOWN)