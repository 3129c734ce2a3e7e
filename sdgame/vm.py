"""A minimal bounded value stack for a script interpreter."""

from __future__ import annotations

MAX_STACK = 512
_UINT_MAX = 0xFFFFFFFF


class VM:
    """Holds a stack of unsigned 32-bit values, at most ``MAX_STACK`` deep."""

    def __init__(self) -> None:
        self._stack: list[int] = []

    def push(self, val: int) -> None:
        """Push a value; raises OverflowError when the stack is full."""
        if not 0 <= val <= _UINT_MAX:
            raise ValueError(f"{val!r} is not an unsigned 32-bit value")
        if len(self._stack) >= MAX_STACK:
            raise OverflowError("VM stack overflow")
        self._stack.append(val)

    def pop(self) -> int:
        """Remove and return the top value; raises IndexError when empty."""
        if not self._stack:
            raise IndexError("pop from empty VM stack")
        return self._stack.pop()

    def __len__(self) -> int:
        return len(self._stack)