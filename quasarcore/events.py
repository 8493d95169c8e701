"""Window, keyboard and mouse events, and a dispatcher that routes them by type."""

from __future__ import annotations

from enum import IntEnum, auto
from typing import Callable, ClassVar, TypeVar

__all__ = [
    "EventType",
    "Event",
    "EventDispatcher",
    "WindowResizeEvent",
    "WindowCloseEvent",
    "KeyEvent",
    "KeyPressedEvent",
    "KeyReleasedEvent",
    "KeyTypedEvent",
    "MouseMovedEvent",
    "MouseScrolledEvent",
    "MouseButtonEvent",
    "MouseButtonPressedEvent",
    "MouseButtonReleasedEvent",
]


class EventType(IntEnum):
    """Kinds of events the engine produces."""

    NONE = 0
    WINDOW_CLOSE = auto()
    WINDOW_RESIZE = auto()
    KEY_PRESSED = auto()
    KEY_RELEASED = auto()
    KEY_TYPED = auto()
    MOUSE_BUTTON_PRESSED = auto()
    MOUSE_BUTTON_RELEASED = auto()
    MOUSE_MOVED = auto()
    MOUSE_SCROLLED = auto()


def _num(value: float) -> str:
    """Format a float the way a default text stream does (six significant digits)."""
    return f"{value:g}"


class Event:
    """Base class of all events; concrete subclasses set ``event_type`` and ``name``."""

    event_type: ClassVar[EventType]
    name: ClassVar[str]

    def __init__(self) -> None:
        if getattr(type(self), "event_type", None) is None:
            raise TypeError(f"{type(self).__name__} is abstract and cannot be instantiated")
        self.handled = False

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Calls a handler on the wrapped event when it is of the requested class."""

    def __init__(self, event: Event) -> None:
        self.event = event

    def dispatch(self, event_class: type[E], func: Callable[[E], bool]) -> bool:
        """Run ``func`` if the event matches ``event_class``; return whether it ran.

        The handler's result becomes the event's ``handled`` flag.
        """
        wanted = getattr(event_class, "event_type", None)
        if wanted is not None and self.event.event_type == wanted:
            self.event.handled = bool(func(self.event))  # type: ignore[arg-type]
            return True
        return False


class WindowResizeEvent(Event):
    event_type = EventType.WINDOW_RESIZE
    name = "WindowResize"

    def __init__(self, width: int, height: int) -> None:
        super().__init__()
        self.width = width
        self.height = height

    def __str__(self) -> str:
        return f"WindowResizeEvent: {self.width}, {self.height}"


class WindowCloseEvent(Event):
    event_type = EventType.WINDOW_CLOSE
    name = "WindowClose"


class KeyEvent(Event):
    """Base of keyboard events; not instantiable by itself."""

    def __init__(self, key_code: int) -> None:
        super().__init__()
        self.key_code = key_code


class KeyPressedEvent(KeyEvent):
    event_type = EventType.KEY_PRESSED
    name = "KeyPressed"

    def __init__(self, key_code: int, is_repeat: bool = False) -> None:
        super().__init__(key_code)
        self.is_repeat = is_repeat

    def __str__(self) -> str:
        return f"KeyPressedEvent: {self.key_code} (repeat = {int(self.is_repeat)})"


class KeyReleasedEvent(KeyEvent):
    event_type = EventType.KEY_RELEASED
    name = "KeyReleased"

    def __str__(self) -> str:
        return f"KeyReleasedEvent: {self.key_code}"


class KeyTypedEvent(KeyEvent):
    event_type = EventType.KEY_TYPED
    name = "KeyTyped"

    def __str__(self) -> str:
        return f"KeyTypedEvent: {self.key_code}"


class MouseMovedEvent(Event):
    event_type = EventType.MOUSE_MOVED
    name = "MouseMoved"

    def __init__(self, x: float, y: float) -> None:
        super().__init__()
        self.x = x
        self.y = y

    def __str__(self) -> str:
        return f"MouseMovedEvent: {_num(self.x)}, {_num(self.y)}"


class MouseScrolledEvent(Event):
    event_type = EventType.MOUSE_SCROLLED
    name = "MouseScrolled"

    def __init__(self, x_offset: float, y_offset: float) -> None:
        super().__init__()
        self.x_offset = x_offset
        self.y_offset = y_offset

    def __str__(self) -> str:
        return f"MouseScrolledEvent: {_num(self.x_offset)}, {_num(self.y_offset)}"


class MouseButtonEvent(Event):
    """Base of mouse button events; not instantiable by itself."""

    def __init__(self, button: int) -> None:
        super().__init__()
        self.button = button


class MouseButtonPressedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_PRESSED
    name = "MouseButtonPressed"

    def __str__(self) -> str:
        return f"MouseButtonPressedEvent: {self.button}"


class MouseButtonReleasedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_RELEASED
    name = "MouseButtonReleased"

    def __str__(self) -> str:
        return f"MouseButtonReleasedEvent: {self.button}"