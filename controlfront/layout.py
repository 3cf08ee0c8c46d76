"""Colour scheme and colour helpers for the display."""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Sequence

HEADER_MARGIN = 0.1


class Kind(Enum):
    """Areas that get their own colour ramp."""

    OBSERVABLES = "observables"
    LAUNCH_CONTROL = "launch_control"
    RF_SILENCE = "rf_silence"
    STATUS = "status"


class Intensity(Enum):
    """Position on a colour ramp."""

    LOW = 0.3
    HIGH = 0.6


@dataclass(frozen=True)
class LinSrgb:
    """A linear RGB colour with channels in [0, 1]."""

    red: float
    green: float
    blue: float


@dataclass(frozen=True)
class Color32:
    """An 8-bit per channel RGB colour."""

    r: int
    g: int
    b: int


def _mix(a: LinSrgb, b: LinSrgb, factor: float) -> LinSrgb:
    return LinSrgb(
        a.red + (b.red - a.red) * factor,
        a.green + (b.green - a.green) * factor,
        a.blue + (b.blue - a.blue) * factor,
    )


class Gradient:
    """Colours spread evenly over [0, 1], linearly interpolated."""

    def __init__(self, colors: Sequence[LinSrgb]) -> None:
        colors = list(colors)
        if not colors:
            raise ValueError("a gradient needs at least one colour")
        self._colors = colors
        last = len(colors) - 1
        self._positions = [index / last if last else 0.0 for index in range(len(colors))]

    def get(self, t: float) -> LinSrgb:
        """Return the colour at position t, clamped to the ends."""
        if t <= self._positions[0]:
            return self._colors[0]
        if t >= self._positions[-1]:
            return self._colors[-1]
        upper = bisect.bisect_right(self._positions, t)
        lower = upper - 1
        span = self._positions[upper] - self._positions[lower]
        factor = (t - self._positions[lower]) / span
        return _mix(self._colors[lower], self._colors[upper], factor)


_HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")


def _unhex(c: int) -> int:
    # Lower case letters map the same way as upper case ones offset by 55,
    # which is what the colour tables have always been decoded with.
    if 0x30 <= c <= 0x39:
        return c - 48
    return c - 55


def _hex_byte(high: int, low: int) -> int:
    return ((_unhex(high) << 4) & 0xFF) | _unhex(low)


def hexcolor_parser(data: bytes | str) -> tuple[bytes, LinSrgb]:
    """Parse '#rrggbb' from the start of data; return (rest, colour)."""
    if isinstance(data, str):
        data = data.encode("ascii")
    if not data.startswith(b"#"):
        raise ValueError(f"expected '#' at start of {data!r}")
    digits = data[1:7]
    if len(digits) < 6 or any(c not in _HEX_DIGITS for c in digits):
        raise ValueError(f"expected six hex digits in {data!r}")
    r = _hex_byte(digits[0], digits[1])
    g = _hex_byte(digits[2], digits[3])
    b = _hex_byte(digits[4], digits[5])
    return data[7:], LinSrgb(r / 255.0, g / 255.0, b / 255.0)


def hexcolor_vec_parser(data: bytes | str) -> tuple[bytes, list[LinSrgb]]:
    """Parse one or more space separated '#rrggbb' colours."""
    rest, first = hexcolor_parser(data)
    colors = [first]
    while rest.startswith(b" "):
        try:
            after, color = hexcolor_parser(rest[1:])
        except ValueError:
            break
        colors.append(color)
        rest = after
    return rest, colors


OBSERVABLES = Color32(0x62, 0xBB, 0xC1)
LAUNCHCONTROL = Color32(0xED, 0x6A, 0x52)

_MUTED = {
    OBSERVABLES: Color32(0x32, 0x78, 0x7D),
    LAUNCHCONTROL: Color32(0xB0, 0x26, 0x14),
}

_KIND_GRADIENTS = {
    Kind.OBSERVABLES: b"#11282a #215053 #32787d #42a0a6 #62bbc1 #82c8cd #a1d6d9 #c0e3e6 #e0f1f2",
    Kind.LAUNCH_CONTROL: b"#240d24 #481b49 #6c286d #903692 #b744b8 #c567c7 #d48dd5 #e2b3e3 #f1d9f1",
    Kind.RF_SILENCE: b"#0e1d2f #0e1d2f #13273e #13273e #18314f #2b578c #447ec5 #82a9d9 #c1d4ec",
    Kind.STATUS: b"#514400 #a18900 #f2cd00 #ffe343 #ffee93 #fff2a9 #fff5bf #fff9d4 #fffcea",
}


def muted(color: Color32) -> Color32:
    """Return the muted variant of one of the main colours."""
    return _MUTED[color]


@lru_cache(maxsize=None)
def kind_color(kind: Kind, intensity: Intensity) -> LinSrgb:
    """Return the colour for an area at the given intensity."""
    _, colors = hexcolor_vec_parser(_KIND_GRADIENTS[kind])
    return Gradient(colors).get(intensity.value)


def color32(color: LinSrgb) -> Color32:
    """Convert a linear colour to 8-bit channels, truncating."""

    def channel(value: float) -> int:
        return max(0, min(255, int(value * 255.0)))

    return Color32(channel(color.red), channel(color.green), channel(color.blue))


@lru_cache(maxsize=None)
def kind_color32(kind: Kind, intensity: Intensity) -> Color32:
    """Return the 8-bit colour for an area at the given intensity."""
    return color32(kind_color(kind, intensity))