"""Observables of the test stand."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum, auto

from .observables import (
    AdcForceCalibration,
    AdcPressureCalibration,
    Ads1256Reading,
    ClkFreq,
    Timestamp,
)


@dataclass(frozen=True)
class RawObservablesGroup1:
    """Group 1 as received on the wire."""

    clkfreq: ClkFreq
    uptime: Timestamp
    thrust: Ads1256Reading
    pressure: Ads1256Reading


@dataclass(frozen=True)
class RawObservablesGroup2:
    """Group 2 as received on the wire."""

    state: int
    filename_or_error: bytes
    anomalies: int
    vbb_voltage: int
    pyro_status: int
    records: int


RawObservablesGroup = RawObservablesGroup1 | RawObservablesGroup2


@dataclass(frozen=True)
class ObservablesGroup1:
    """Group 1 in physical units: thrust in kN, pressure in bar."""

    clkfreq: ClkFreq
    uptime: timedelta
    thrust: float
    pressure: float


class RecordingKind(Enum):
    """State of the on-board recording."""

    UNKNOWN = auto()
    ERROR = auto()
    PAUSE = auto()
    RECORDING = auto()


@dataclass(frozen=True)
class RecordingState:
    """Recording state with the file name or error text where there is one."""

    kind: RecordingKind
    text: str | None = None


class PyroStatus(Enum):
    """Continuity state of a pyro channel pair."""

    UNKNOWN = auto()
    OPEN = auto()
    CLOSED = auto()


@dataclass(frozen=True)
class ObservablesGroup2:
    """Group 2 decoded; vbb_voltage in volts."""

    recording_state: RecordingState
    anomalies: int
    records: int
    vbb_voltage: float
    pyro12_status: PyroStatus
    pyro34_status: PyroStatus


def pyro_status_from_bitfield(value: int) -> PyroStatus:
    """Decode a two-bit pyro status field."""
    match value:
        case 0:
            return PyroStatus.UNKNOWN
        case 2:
            return PyroStatus.OPEN
        case 3:
            return PyroStatus.CLOSED
    raise ValueError(f"invalid pyro status bits: {value}")


def _recording_state(state: int, text: bytes) -> RecordingState:
    match state:
        case 0x55:  # 'U'
            return RecordingState(RecordingKind.UNKNOWN)
        case 0x50:  # 'P'
            return RecordingState(RecordingKind.PAUSE)
        case 0x45:  # 'E'
            return RecordingState(RecordingKind.ERROR, text.decode("utf-8"))
        case 0x52:  # 'R'
            return RecordingState(RecordingKind.RECORDING, text.decode("utf-8"))
    raise ValueError(f"invalid recording state: {state!r}")


@dataclass(frozen=True)
class SystemDefinition:
    """Calibration of the test stand sensors."""

    thrust_calibration: AdcForceCalibration = field(
        default_factory=lambda: AdcForceCalibration(m=4.451e-5, c=-0.049)
    )
    pressure_calibration: AdcPressureCalibration = field(
        default_factory=lambda: AdcPressureCalibration(m=4.213e-5, c=-0.927)
    )

    def transform_og1(self, raw: RawObservablesGroup1) -> ObservablesGroup1:
        """Convert raw group 1 to physical units."""
        return ObservablesGroup1(
            clkfreq=raw.clkfreq,
            uptime=raw.uptime.duration(raw.clkfreq),
            thrust=self.thrust_calibration.force(raw.thrust),
            pressure=self.pressure_calibration.pressure(raw.pressure),
        )

    def transform_og2(self, raw: RawObservablesGroup2) -> ObservablesGroup2:
        """Decode raw group 2."""
        return ObservablesGroup2(
            recording_state=_recording_state(raw.state, raw.filename_or_error),
            anomalies=raw.anomalies,
            records=raw.records,
            vbb_voltage=raw.vbb_voltage * 0.00125,
            pyro12_status=pyro_status_from_bitfield(raw.pyro_status & 0x03),
            pyro34_status=pyro_status_from_bitfield((raw.pyro_status >> 4) & 0x03),
        )