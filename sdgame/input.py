"""Keyboard and mouse state tracking and event dispatch."""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, DefaultDict, Dict, Iterable, List, Set, Union

from sdgame.vector import Vector2

_log = logging.getLogger(__name__)

_SCANCODE_MASK = 1 << 30


def _scancode_key(scancode: int) -> int:
    return scancode | _SCANCODE_MASK


class Key(IntEnum):
    """Keyboard key codes."""

    A = ord("a")
    B = ord("b")
    C = ord("c")
    D = ord("d")
    E = ord("e")
    F = ord("f")
    G = ord("g")
    H = ord("h")
    I = ord("i")  # noqa: E741
    J = ord("j")
    K = ord("k")
    L = ord("l")
    M = ord("m")
    N = ord("n")
    O = ord("o")  # noqa: E741
    P = ord("p")
    Q = ord("q")
    R = ord("r")
    S = ord("s")
    T = ord("t")
    U = ord("u")
    V = ord("v")
    W = ord("w")
    X = ord("x")
    Y = ord("y")
    Z = ord("z")
    ZERO = ord("0")
    ONE = ord("1")
    TWO = ord("2")
    THREE = ord("3")
    FOUR = ord("4")
    FIVE = ord("5")
    SIX = ord("6")
    SEVEN = ord("7")
    EIGHT = ord("8")
    NINE = ord("9")
    TAB = ord("\t")
    CAPS_LOCK = _scancode_key(57)
    LSHIFT = _scancode_key(225)
    RSHIFT = _scancode_key(229)
    LCONTROL = _scancode_key(224)
    RCONTROL = _scancode_key(228)
    LALT = _scancode_key(226)
    RALT = _scancode_key(230)
    SPACE = ord(" ")
    INSERT = _scancode_key(73)
    DELETE = 127
    BACKSPACE = ord("\b")
    SLASH = ord("/")
    BACKSLASH = ord("\\")
    QUOTE = ord("'")
    BACKQUOTE = ord("`")
    COLON = ord(":")
    COMMA = ord(",")
    PERIOD = ord(".")
    HOME = _scancode_key(74)
    PAGE_UP = _scancode_key(75)
    PAGE_DOWN = _scancode_key(78)
    END = _scancode_key(77)
    LEFT = _scancode_key(80)
    RIGHT = _scancode_key(79)
    UP = _scancode_key(82)
    DOWN = _scancode_key(81)
    RBRACKET = ord("]")
    LBRACKET = ord("[")
    EQUALS = ord("=")
    PRINT_SCREEN = _scancode_key(70)
    MINUS = ord("-")
    DASH = ord("-")
    F1 = _scancode_key(58)
    F2 = _scancode_key(59)
    F3 = _scancode_key(60)
    F4 = _scancode_key(61)
    F5 = _scancode_key(62)
    F6 = _scancode_key(63)
    F7 = _scancode_key(64)
    F8 = _scancode_key(65)
    F9 = _scancode_key(66)
    F10 = _scancode_key(67)
    F11 = _scancode_key(68)
    F12 = _scancode_key(69)
    F13 = _scancode_key(104)
    F14 = _scancode_key(105)
    F15 = _scancode_key(106)
    F16 = _scancode_key(107)
    F17 = _scancode_key(108)
    F18 = _scancode_key(109)
    F19 = _scancode_key(110)
    F20 = _scancode_key(111)
    F21 = _scancode_key(112)
    F22 = _scancode_key(113)
    F23 = _scancode_key(114)
    F24 = _scancode_key(115)
    ESCAPE = 27


class Button(IntEnum):
    """Mouse buttons."""

    LEFT = 1
    MIDDLE = 2
    RIGHT = 3


class EventType(IntEnum):
    """Kinds of input event."""

    QUIT = 0x100
    WINDOW = 0x200
    SYSWM = 0x201
    KEY_DOWN = 0x300
    KEY_UP = 0x301
    TEXT_EDITING = 0x302
    TEXT_INPUT = 0x303
    MOUSE_MOTION = 0x400
    MOUSE_BUTTON_DOWN = 0x401
    MOUSE_BUTTON_UP = 0x402
    MOUSE_WHEEL = 0x403
    JOY_AXIS_MOTION = 0x600
    JOY_BALL_MOTION = 0x601
    JOY_HAT_MOTION = 0x602
    JOY_BUTTON_DOWN = 0x603
    JOY_BUTTON_UP = 0x604
    JOY_DEVICE_ADDED = 0x605
    JOY_DEVICE_REMOVED = 0x606
    CONTROLLER_AXIS_MOTION = 0x650
    CONTROLLER_BUTTON_DOWN = 0x651
    CONTROLLER_BUTTON_UP = 0x652
    CONTROLLER_DEVICE_ADDED = 0x653
    CONTROLLER_DEVICE_REMOVED = 0x654
    CONTROLLER_DEVICE_REMAPPED = 0x655
    FINGER_DOWN = 0x700
    FINGER_UP = 0x701
    FINGER_MOTION = 0x702
    DOLLAR_GESTURE = 0x800
    DOLLAR_RECORD = 0x801
    MULTI_GESTURE = 0x802
    CLIPBOARD_UPDATE = 0x900
    DROP_FILE = 0x1000
    DROP_TEXT = 0x1001
    DROP_BEGIN = 0x1002
    DROP_COMPLETE = 0x1003
    AUDIO_DEVICE_ADDED = 0x1100
    AUDIO_DEVICE_REMOVED = 0x1101
    USER = 0x8000


_KEY_EVENTS = frozenset({EventType.KEY_DOWN, EventType.KEY_UP})
_MOUSE_EVENTS = frozenset(
    {
        EventType.MOUSE_MOTION,
        EventType.MOUSE_BUTTON_DOWN,
        EventType.MOUSE_BUTTON_UP,
        EventType.MOUSE_WHEEL,
    }
)


@dataclass(frozen=True)
class KeyboardEvent:
    """A key going down or up."""

    type: EventType
    key: Union[Key, int]
    repeat: int = 0
    timestamp: int = 0

    def __post_init__(self) -> None:
        if self.type not in _KEY_EVENTS:
            raise ValueError(f"{self.type!r} is not a keyboard event type")

    @property
    def pressed(self) -> bool:
        """True when the key is down after this event."""
        return self.type is EventType.KEY_DOWN


@dataclass(frozen=True)
class MouseMotionEvent:
    """The mouse moving to a screen position."""

    x: int
    y: int
    timestamp: int = 0
    type: EventType = EventType.MOUSE_MOTION


@dataclass(frozen=True)
class MouseButtonEvent:
    """A mouse button going down or up."""

    type: EventType
    button: Union[Button, int]
    x: int = 0
    y: int = 0
    timestamp: int = 0

    def __post_init__(self) -> None:
        if self.type not in (EventType.MOUSE_BUTTON_DOWN, EventType.MOUSE_BUTTON_UP):
            raise ValueError(f"{self.type!r} is not a mouse button event type")


class Keyboard:
    """Tracks which keys are held and which changed this frame."""

    def __init__(self) -> None:
        self._just_up: Set[int] = set()
        self._just_down: Set[int] = set()
        self._keys: Dict[int, KeyboardEvent] = {}

    def is_key_down(self, key: Union[Key, int]) -> bool:
        """True while the key is held."""
        event = self._keys.get(int(key))
        return event is not None and event.pressed

    def is_key_up(self, key: Union[Key, int]) -> bool:
        """True while the key is not held."""
        return not self.is_key_down(key)

    def key_pressed(self, key: Union[Key, int]) -> bool:
        """True if the key went down this frame (repeats excluded)."""
        return int(key) in self._just_down

    def key_released(self, key: Union[Key, int]) -> bool:
        """True if the key went up this frame."""
        return int(key) in self._just_up

    def process_input(self, event: KeyboardEvent) -> None:
        """Record a key event; other event types are ignored."""
        code = int(event.key)
        if event.type == EventType.KEY_DOWN:
            if event.repeat == 0:
                self._just_down.add(code)
            self._keys[code] = event
        elif event.type == EventType.KEY_UP:
            self._just_up.add(code)
            self._keys[code] = event

    def post_update(self) -> None:
        """Forget this frame's presses and releases."""
        self._just_up.clear()
        self._just_down.clear()


class Mouse:
    """Tracks mouse position and button state."""

    def __init__(self) -> None:
        self._just_up: Set[int] = set()
        self._just_down: Set[int] = set()
        self._buttons: Dict[int, MouseButtonEvent] = {}
        self._position = Vector2(0.0, 0.0)

    def button_pressed(self, button: Union[Button, int]) -> bool:
        """True if the button went down this frame."""
        return int(button) in self._just_down

    def button_released(self, button: Union[Button, int]) -> bool:
        """True if the button went up this frame."""
        return int(button) in self._just_up

    def button_down(self, button: Union[Button, int]) -> bool:
        """True while the button is held."""
        event = self._buttons.get(int(button))
        return event is not None and event.type == EventType.MOUSE_BUTTON_DOWN

    def button_up(self, button: Union[Button, int]) -> bool:
        """True while the button is not held."""
        return not self.button_down(button)

    @property
    def position(self) -> Vector2:
        """The mouse's screen position."""
        return self._position

    def process_input(self, event: Any) -> None:
        """Record a motion or button event; wheel events change nothing."""
        event_type = event.type
        if event_type == EventType.MOUSE_MOTION:
            self._position = Vector2(float(event.x), float(event.y))
        elif event_type == EventType.MOUSE_BUTTON_DOWN:
            self._just_down.add(int(event.button))
            self._buttons[int(event.button)] = event
        elif event_type == EventType.MOUSE_BUTTON_UP:
            self._just_up.add(int(event.button))
            self._buttons[int(event.button)] = event

    def post_update(self) -> None:
        """Forget this frame's presses and releases."""
        self._just_down.clear()
        self._just_up.clear()


Listener = Callable[[Any], None]


class InputMgr:
    """Feeds input events to the keyboard, the mouse and subscribed listeners."""

    def __init__(self) -> None:
        self._keyboard = Keyboard()
        self._mouse = Mouse()
        self._listeners: DefaultDict[EventType, List[Listener]] = defaultdict(list)

    @property
    def keyboard(self) -> Keyboard:
        return self._keyboard

    @property
    def mouse(self) -> Mouse:
        return self._mouse

    def subscribe(self, event_type: Union[EventType, int], listener: Listener) -> None:
        """Call ``listener(event)`` for every processed event of ``event_type``.

        Clipboard updates are never dispatched.
        """
        self._listeners[EventType(event_type)].append(listener)

    def process_input(self, events: Iterable[Any]) -> None:
        """Start a new frame and handle ``events`` in order.

        Each event needs a ``type`` attribute; events of unknown type are
        logged and skipped.
        """
        self._keyboard.post_update()
        self._mouse.post_update()

        for event in events:
            try:
                event_type = EventType(getattr(event, "type", None))
            except (ValueError, TypeError):
                _log.error("Unknown Event processed.")
                continue

            if event_type is EventType.CLIPBOARD_UPDATE:
                continue
            if event_type in _KEY_EVENTS:
                self._keyboard.process_input(event)
            elif event_type in _MOUSE_EVENTS:
                self._mouse.process_input(event)

            for listener in list(self._listeners.get(event_type, ())):
                listener(event)