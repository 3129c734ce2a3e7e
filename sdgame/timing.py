"""Frame timing, stopwatch timers, countdown timers and ad-hoc profiling."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, TextIO

MAX_DELTA_TICKS = 64
MAX_TIMERS = 10

TickClock = Callable[[], int]


def _monotonic_ms_clock() -> TickClock:
    origin = time.monotonic()

    def clock() -> int:
        return int((time.monotonic() - origin) * 1000)

    return clock


class GameTime:
    """Tracks milliseconds since start and the time between frames.

    ``clock`` returns the current tick count in milliseconds; by default it
    counts from the moment the object is created.
    """

    def __init__(self, starting_ticks: int = 0, clock: Optional[TickClock] = None) -> None:
        self._clock = clock if clock is not None else _monotonic_ms_clock()
        self._starting_ticks = starting_ticks
        self._ticks = 0
        self._delta_ticks = 0

    def update(self) -> None:
        """Sample the clock; the delta is capped at ``MAX_DELTA_TICKS``."""
        current = self._clock()
        delta = current - self._ticks
        if delta < 0 or delta > MAX_DELTA_TICKS:
            delta = MAX_DELTA_TICKS
        self._delta_ticks = delta
        self._ticks = current

    @property
    def total_ticks(self) -> int:
        """Ticks since start plus the starting ticks given at construction."""
        return self._ticks + self._starting_ticks

    @property
    def ticks_since_exe(self) -> int:
        """Ticks since start, without the starting ticks."""
        return self._ticks

    @property
    def delta_ticks(self) -> int:
        """Ticks since the previous update, at most ``MAX_DELTA_TICKS``."""
        return self._delta_ticks


class Chronogram:
    """A set of stopwatches keyed by index, read against a :class:`GameTime`."""

    def __init__(self, time: GameTime) -> None:
        self._time = time
        self._timers: Dict[int, int] = {}

    def check_ticks(self, index: int) -> int:
        """Milliseconds since timer ``index`` was started; KeyError if never started."""
        try:
            started = self._timers[index]
        except KeyError:
            raise KeyError(f"timer {index} has not been started") from None
        return self._time.total_ticks - started

    def check_seconds(self, index: int) -> float:
        """Seconds since timer ``index`` was started."""
        return self.check_ticks(index) * 0.001

    def start_timer(self, index: int) -> None:
        """Start or restart timer ``index``."""
        self._timers[index] = self._time.total_ticks


class Performance:
    """Named wall-clock measurements reported in milliseconds."""

    def __init__(
        self,
        clock: Callable[[], float] = time.perf_counter,
        out: Optional[TextIO] = None,
    ) -> None:
        self._clock = clock
        self._out = out
        self._tests: Dict[str, float] = {}

    def start(self, name: str = "") -> None:
        """Begin (or restart) the measurement called ``name``."""
        self._tests[name] = self._clock()

    def end(self, name: str = "") -> float:
        """Finish measurement ``name``, report it and return the elapsed milliseconds."""
        end_time = self._clock()
        try:
            started = self._tests.pop(name)
        except KeyError:
            raise KeyError(
                f'Performance check error! Test with name "{name}" could not be found.'
            ) from None
        elapsed_ms = (end_time - started) * 1000.0
        print(f"[Performance: {name}] took {elapsed_ms} ms", file=self._out or sys.stdout)
        return elapsed_ms


@dataclass
class _Countdown:
    paused: bool = False
    ticks_left: int = 0
    set_time: int = 0
    listeners: List[Callable[[int], None]] = field(default_factory=list)

    def reset(self, pause: bool) -> None:
        self.paused = pause
        self.ticks_left = self.set_time

    def set(self, ticks: int, pause: bool) -> None:
        if ticks <= 0:
            raise ValueError(f"timer ticks must be positive, got {ticks}")
        self.set_time = ticks
        self.reset(pause)


class Timer:
    """``MAX_TIMERS`` countdown timers driven by a :class:`GameTime`.

    A timer that runs out calls its listeners with its index, then rewinds
    to its set time and pauses.
    """

    def __init__(self, time: GameTime) -> None:
        self._time = time
        self._timers = [_Countdown() for _ in range(MAX_TIMERS)]

    def _get(self, index: int) -> _Countdown:
        if not 0 <= index < MAX_TIMERS:
            raise IndexError(f"timer index {index} out of range 0..{MAX_TIMERS - 1}")
        return self._timers[index]

    def update(self) -> None:
        """Count every running timer down by the frame's delta ticks."""
        delta = self._time.delta_ticks
        for index, countdown in enumerate(self._timers):
            if countdown.paused:
                continue
            countdown.ticks_left -= delta
            if countdown.ticks_left <= 0:
                for listener in list(countdown.listeners):
                    listener(index)
                countdown.reset(True)

    def pause(self, index: int) -> None:
        self._get(index).paused = True

    def resume(self, index: int) -> None:
        self._get(index).paused = False

    def ticks_left(self, index: int) -> int:
        return self._get(index).ticks_left

    def is_paused(self, index: int) -> bool:
        return self._get(index).paused

    def add_listener(self, index: int, listener: Callable[[int], None]) -> None:
        """Call ``listener(index)`` whenever timer ``index`` runs out."""
        self._get(index).listeners.append(listener)

    def set(self, index: int, ticks: int, pause: bool = False) -> None:
        """Give timer ``index`` a new length in ticks and rewind it."""
        self._get(index).set(ticks, pause)

    def reset(self, index: int, pause: bool = False) -> None:
        """Rewind timer ``index`` to its set length."""
        self._get(index).reset(pause)