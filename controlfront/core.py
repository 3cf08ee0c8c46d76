"""Command id generators and the connection states shared by all modes."""

from __future__ import annotations

import threading
from enum import Enum

_ID_MODULUS = 1000


class SimpleIdGenerator:
    """Endless command ids counting 1, 2, ..., 999, 0, 1, ..."""

    def __init__(self) -> None:
        self._id = 0

    def __iter__(self) -> SimpleIdGenerator:
        return self

    def __next__(self) -> int:
        self._id = (self._id + 1) % _ID_MODULUS
        return self._id


class SharedIdGenerator:
    """A thread-safe id generator; pass the same instance to every user."""

    def __init__(self) -> None:
        self._generator = SimpleIdGenerator()
        self._lock = threading.Lock()

    def __iter__(self) -> SharedIdGenerator:
        return self

    def __next__(self) -> int:
        with self._lock:
            return next(self._generator)


class CoreConnection(Enum):
    """State of the connection to the remote node, common to all modes."""

    START = "Start"
    FAILURE = "Failure"
    RESET = "Reset"
    IDLE = "Idle"

    def is_start(self) -> bool:
        """True while a reset cycle has still to be started."""
        return self is CoreConnection.START

    def is_failure(self) -> bool:
        """True when the connection failed."""
        return self is CoreConnection.FAILURE

    def reset_ongoing(self) -> bool:
        """True while starting or waiting for a reset to be acknowledged."""
        return self in (CoreConnection.START, CoreConnection.RESET)

    def connected(self) -> bool:
        """True once the reset was acknowledged."""
        return self is CoreConnection.IDLE

    def label(self) -> str:
        """Name shown on the display."""
        return self.value


class ControlArea(Enum):
    """Where input goes: the tab bar (the default) or the active tab."""

    TABS = "tabs"
    DETAILS = "details"