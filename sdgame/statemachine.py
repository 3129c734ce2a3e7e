"""A stack-based state machine with per-state event callbacks."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Generic, Hashable, List, Optional, TypeVar

K = TypeVar("K", bound=Hashable)

_log = logging.getLogger(__name__)


class StateMachineState(Generic[K]):
    """One state of a :class:`StateMachine`, identified by its key.

    The ``on_*`` methods register listeners and return the state so that
    calls can be chained.
    """

    def __init__(self, key: K) -> None:
        self._key = key
        self._current_time = 0.0
        self._enter_listeners: List[Callable[[], None]] = []
        self._exit_listeners: List[Callable[[float], None]] = []
        self._pause_listeners: List[Callable[[bool, float], None]] = []
        self._step_listeners: List[Callable[[float, float], None]] = []

    @property
    def key(self) -> K:
        return self._key

    @property
    def current_time(self) -> float:
        """Seconds spent running in this state since it was entered."""
        return self._current_time

    def on_enter(self, func: Callable[[], None]) -> StateMachineState[K]:
        """Call ``func()`` when the state is entered."""
        self._enter_listeners.append(func)
        return self

    def on_exit(self, func: Callable[[float], None]) -> StateMachineState[K]:
        """Call ``func(total_seconds)`` when the state is exited."""
        self._exit_listeners.append(func)
        return self

    def on_pause(self, func: Callable[[bool, float], None]) -> StateMachineState[K]:
        """Call ``func(paused, total_seconds)`` on pause (True) and resume (False)."""
        self._pause_listeners.append(func)
        return self

    def on_step(self, func: Callable[[float, float], None]) -> StateMachineState[K]:
        """Call ``func(delta_seconds, total_seconds)`` on every update."""
        self._step_listeners.append(func)
        return self

    def _update(self, delta_seconds: float) -> None:
        self._current_time += delta_seconds
        for listener in list(self._step_listeners):
            listener(delta_seconds, self._current_time)

    def _enter(self) -> None:
        for listener in list(self._enter_listeners):
            listener()

    def _exit(self) -> None:
        for listener in list(self._exit_listeners):
            listener(self._current_time)
        self._current_time = 0.0

    def _resume(self) -> None:
        for listener in list(self._pause_listeners):
            listener(False, self._current_time)

    def _pause(self) -> None:
        for listener in list(self._pause_listeners):
            listener(True, self._current_time)


class StateMachine(Generic[K]):
    """Runs states on a stack; only the top state is updated.

    Starting and stopping states is queued and takes effect at the next
    :meth:`update`.
    """

    def __init__(self) -> None:
        self._states: Dict[K, StateMachineState[K]] = {}
        self._running: List[StateMachineState[K]] = []
        self._next_state: Optional[StateMachineState[K]] = None
        self._to_remove = False
        self._to_replace = False
        self._to_start = False
        self._paused = False
        self._start_listeners: List[Callable[[K], None]] = []
        self._exit_listeners: List[Callable[[K, float], None]] = []

    def add_state(self, key: K) -> StateMachineState[K]:
        """Create and return a state for ``key``, replacing any existing one."""
        if key in self._states:
            _log.warning("Overwriting duplicate state with key %r.", key)
        state: StateMachineState[K] = StateMachineState(key)
        self._states[key] = state
        return state

    def get_state(self, key: K) -> Optional[StateMachineState[K]]:
        return self._states.get(key)

    def start_state(self, key: K, replace_current: bool = True) -> bool:
        """Queue the state ``key`` to start; returns False if no such state exists.

        With ``replace_current`` False the running state is paused rather
        than exited.
        """
        state = self._states.get(key)
        if state is None:
            _log.error("Tried to run state with key %r, but none was found.", key)
            return False
        self._next_state = state
        self._to_replace = replace_current
        self._to_start = True
        return True

    def stop_current_state(self) -> None:
        """Queue the running state to exit, resuming the one beneath it."""
        self._to_remove = True

    @property
    def current_state(self) -> Optional[StateMachineState[K]]:
        """The running state, or None."""
        return self._running[-1] if self._running else None

    @property
    def paused(self) -> bool:
        return self._paused

    @paused.setter
    def paused(self, value: bool) -> None:
        self._paused = value

    def add_start_listener(self, func: Callable[[K], None]) -> None:
        """Call ``func(key)`` whenever a state starts."""
        self._start_listeners.append(func)

    def add_exit_listener(self, func: Callable[[K, float], None]) -> None:
        """Call ``func(key, total_seconds)`` whenever a state is stopped."""
        self._exit_listeners.append(func)

    def update(self, delta_ticks: int) -> None:
        """Apply queued changes and step the running state by ``delta_ticks`` milliseconds."""
        if self._paused:
            return
        self._process_changes()
        current = self.current_state
        if current is not None:
            current._update(delta_ticks * 0.001)

    def _process_changes(self) -> None:
        if self._to_remove:
            current = self.current_state
            if current is not None:
                for listener in list(self._exit_listeners):
                    listener(current.key, current.current_time)
                current._exit()
                self._running.pop()
                remaining = self.current_state
                if remaining is not None:
                    remaining._resume()
            self._to_remove = False
            self._to_replace = False

        next_state = self._next_state
        if next_state is None:
            return

        current = self.current_state
        if self._to_replace:
            if current is not None:
                current._exit()
                self._running.pop()
            self._to_replace = False
        elif current is not None:
            current._pause()

        self._running.append(next_state)
        for listener in list(self._start_listeners):
            listener(next_state.key)
        self._to_start = False
        next_state._enter()

        # An enter listener may have queued another state; keep it queued.
        if not self._to_start:
            self._next_state = None