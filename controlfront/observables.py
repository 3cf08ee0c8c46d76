"""Raw wire values of the observables and their calibrations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import IntEnum
from typing import SupportsFloat


@dataclass(frozen=True)
class ClkFreq:
    """Clock frequency of the counter that stamps the uptime, in Hz."""

    value: int


@dataclass(frozen=True)
class Timestamp:
    """A counter value in clock ticks."""

    value: int

    def duration(self, clkfreq: ClkFreq) -> timedelta:
        """Convert the tick count to elapsed time."""
        freq = clkfreq.value
        secs, rest = divmod(self.value, freq)
        nanos = rest * 1_000_000_000 // freq
        return timedelta(seconds=secs, microseconds=nanos // 1000)


@dataclass(frozen=True)
class Ads1256Reading:
    """A raw ADS1256 ADC reading."""

    value: int

    def __float__(self) -> float:
        return float(self.value)


@dataclass(frozen=True)
class AdcForceCalibration:
    """Linear calibration from ADC reading to force."""

    m: float
    c: float

    def force(self, value: SupportsFloat) -> float:
        """Return the force in kilonewtons."""
        return float(value) * self.m + self.c


@dataclass(frozen=True)
class AdcPressureCalibration:
    """Linear calibration from ADC reading to pressure."""

    m: float
    c: float

    def pressure(self, value: SupportsFloat) -> float:
        """Return the pressure in bar."""
        return float(value) * self.m + self.c


class AdcGain(IntEnum):
    """Programmable gain of the ADC."""

    GAIN1 = 1
    GAIN2 = 2
    GAIN4 = 4
    GAIN8 = 8
    GAIN16 = 16
    GAIN32 = 32
    GAIN64 = 64


def parse_adc_gain(text: str) -> AdcGain:
    """Parse a gain name such as 'gain32'."""
    for gain in AdcGain:
        if gain.name.lower() == text:
            return gain
    names = ", ".join(gain.name.lower() for gain in AdcGain)
    raise ValueError(f"invalid gain {text!r}, use one of {names}")