import pytest

from quasarcore.events import (
    Event,
    EventDispatcher,
    EventType,
    KeyEvent,
    KeyPressedEvent,
    KeyReleasedEvent,
    KeyTypedEvent,
    MouseButtonEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)


def test_event_types_follow_declaration_order():
    events = [
        WindowCloseEvent(),
        WindowResizeEvent(1, 1),
        KeyPressedEvent(1),
        KeyReleasedEvent(1),
        KeyTypedEvent(1),
        MouseButtonPressedEvent(0),
        MouseButtonReleasedEvent(0),
        MouseMovedEvent(0.0, 0.0),
        MouseScrolledEvent(0.0, 0.0),
    ]
    assert [event.event_type.value for event in events] == list(range(1, 10))
    assert EventType.NONE.value == 0
    assert events[-1].event_type is list(EventType)[-1]


def test_window_resize_fields_and_text():
    event = WindowResizeEvent(1280, 720)
    assert (event.width, event.height) == (1280, 720)
    assert str(event) == "WindowResizeEvent: 1280, 720"
    assert event.event_type is EventType.WINDOW_RESIZE
    assert event.name == "WindowResize"


def test_window_close_text_is_name():
    event = WindowCloseEvent()
    assert str(event) == "WindowClose"
    assert event.handled is False


def test_key_pressed_text_shows_repeat_as_digit():
    assert str(KeyPressedEvent(65, True)) == "KeyPressedEvent: 65 (repeat = 1)"
    assert str(KeyPressedEvent(65)) == "KeyPressedEvent: 65 (repeat = 0)"


def test_key_released_and_typed():
    released = KeyReleasedEvent(32)
    typed = KeyTypedEvent(32)
    assert str(released) == "KeyReleasedEvent: 32"
    assert str(typed) == "KeyTypedEvent: 32"
    assert released.key_code == typed.key_code == 32
    assert released.event_type is EventType.KEY_RELEASED
    assert typed.event_type is EventType.KEY_TYPED


def test_mouse_moved_float_formatting():
    event = MouseMovedEvent(1.5, 2.0)
    assert str(event) == "MouseMovedEvent: 1.5, 2"
    assert (event.x, event.y) == (1.5, 2.0)


def test_mouse_scrolled_text():
    event = MouseScrolledEvent(0.0, -1.0)
    assert str(event) == "MouseScrolledEvent: 0, -1"


def test_mouse_buttons():
    pressed = MouseButtonPressedEvent(1)
    released = MouseButtonReleasedEvent(1)
    assert str(pressed) == "MouseButtonPressedEvent: 1"
    assert str(released) == "MouseButtonReleasedEvent: 1"
    assert pressed.button == released.button == 1


@pytest.mark.parametrize("cls, args", [(Event, ()), (KeyEvent, (1,)), (MouseButtonEvent, (0,))])
def test_abstract_events_cannot_be_created(cls, args):
    with pytest.raises(TypeError):
        cls(*args)


def test_dispatch_matching_type_sets_handled():
    event = WindowResizeEvent(10, 20)
    seen = []

    def handler(e):
        seen.append((e.width, e.height))
        return True

    assert EventDispatcher(event).dispatch(WindowResizeEvent, handler) is True
    assert seen == [(10, 20)]
    assert event.handled is True


def test_dispatch_other_type_does_nothing():
    event = KeyPressedEvent(10)
    called = []
    assert EventDispatcher(event).dispatch(MouseMovedEvent, lambda e: called.append(e) or True) is False
    assert called == []
    assert event.handled is False


def test_dispatch_handler_returning_false_clears_handled():
    event = WindowCloseEvent()
    event.handled = True
    assert EventDispatcher(event).dispatch(WindowCloseEvent, lambda e: False) is True
    assert event.handled is False