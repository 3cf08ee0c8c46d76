"""User input events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class InputKind(Enum):
    """What kind of input arrived."""

    ENTER = auto()
    BACK = auto()
    LEFT = auto()
    RIGHT = auto()
    SEND = auto()


@dataclass(frozen=True)
class InputEvent:
    """A single input event; LEFT and RIGHT carry an amount."""

    kind: InputKind
    amount: int = 0