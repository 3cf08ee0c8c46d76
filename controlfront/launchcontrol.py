"""The launch control tab state machine."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, auto

from .core import ControlArea, CoreConnection
from .input import InputEvent, InputKind

_DIGIT_RANGE = 16
_PROGRESS_STEP = 3
_PROGRESS_FULL = 100
_DECAY_AFTER = 0.5  # seconds without input before progress starts to decay
_PYRO_TIMEOUT = 3.0  # seconds after ignition before switching to observables


class LaunchStage(Enum):
    """Stages of the launch control tab."""

    CORE = auto()
    ENTER_DIGIT_HI_A = auto()
    ENTER_DIGIT_LO_A = auto()
    TRANSMIT_KEY_A = auto()
    PREPARE_UNLOCK_PYROS = auto()
    UNLOCK_PYROS = auto()
    ENTER_DIGIT_HI_B = auto()
    ENTER_DIGIT_LO_B = auto()
    TRANSMIT_KEY_AB = auto()
    PREPARE_IGNITION = auto()
    WAIT_FOR_FIRE = auto()
    FIRE = auto()
    WAIT_FOR_PYRO_TIMEOUT = auto()
    SWITCH_TO_OBSERVABLES = auto()


_STAGE_LABELS = {
    LaunchStage.ENTER_DIGIT_HI_A: "Enter Hi A",
    LaunchStage.ENTER_DIGIT_LO_A: "Enter Lo A",
    LaunchStage.PREPARE_UNLOCK_PYROS: "Prepare Unlock Pyros",
    LaunchStage.UNLOCK_PYROS: "Unlocking Pyros",
    LaunchStage.TRANSMIT_KEY_A: "Transmitting Key A",
    LaunchStage.ENTER_DIGIT_HI_B: "Enter Hi B",
    LaunchStage.ENTER_DIGIT_LO_B: "Enter Lo B",
    LaunchStage.TRANSMIT_KEY_AB: "Transmitting Key AB",
    LaunchStage.PREPARE_IGNITION: "Prepare Ignition",
    LaunchStage.WAIT_FOR_FIRE: "Wait for Fire",
    LaunchStage.FIRE: "Fire!",
    LaunchStage.WAIT_FOR_PYRO_TIMEOUT: "Pyros ignited",
    LaunchStage.SWITCH_TO_OBSERVABLES: "",
}

# Stages that are only left through a response from the remote node.
_AWAITING_RESPONSE = frozenset(
    {
        LaunchStage.TRANSMIT_KEY_A,
        LaunchStage.TRANSMIT_KEY_AB,
        LaunchStage.FIRE,
        LaunchStage.UNLOCK_PYROS,
    }
)

_STAGES_WITH_A = frozenset(
    {
        LaunchStage.ENTER_DIGIT_LO_A,
        LaunchStage.PREPARE_UNLOCK_PYROS,
        LaunchStage.UNLOCK_PYROS,
        LaunchStage.TRANSMIT_KEY_A,
        LaunchStage.ENTER_DIGIT_HI_B,
        LaunchStage.ENTER_DIGIT_LO_B,
        LaunchStage.TRANSMIT_KEY_AB,
        LaunchStage.PREPARE_IGNITION,
        LaunchStage.WAIT_FOR_FIRE,
    }
)

_STAGES_WITH_AB = frozenset(
    {
        LaunchStage.ENTER_DIGIT_LO_B,
        LaunchStage.TRANSMIT_KEY_AB,
        LaunchStage.PREPARE_IGNITION,
        LaunchStage.WAIT_FOR_FIRE,
    }
)

_HIGHLIGHTS = {
    LaunchStage.ENTER_DIGIT_HI_A: (True, False, False, False),
    LaunchStage.ENTER_DIGIT_LO_A: (False, True, False, False),
    LaunchStage.ENTER_DIGIT_HI_B: (False, False, True, False),
    LaunchStage.ENTER_DIGIT_LO_B: (False, False, False, True),
}


def _step(digit: int, event: InputEvent) -> int:
    if event.kind is InputKind.RIGHT:
        return (digit + 1) % _DIGIT_RANGE
    return (_DIGIT_RANGE + digit - 1) % _DIGIT_RANGE


def _decayed(progress: int, last_update: float, now: float) -> int:
    if progress >= _PROGRESS_FULL:
        return _PROGRESS_FULL
    if now - last_update > _DECAY_AFTER:
        return max(progress, 1) - 1
    return progress


@dataclass(frozen=True)
class LaunchControlMode:
    """State of the launch control tab.

    ``core`` matters in the CORE stage; the key digits are kept as the
    stages need them; ``progress`` (0 to 100) and ``last_update`` (seconds on
    a monotonic clock) belong to the prepare stages, and ``last_update``
    holds the ignition time in WAIT_FOR_PYRO_TIMEOUT.
    """

    stage: LaunchStage = LaunchStage.CORE
    core: CoreConnection = CoreConnection.START
    hi_a: int = 0
    lo_a: int = 0
    hi_b: int = 0
    lo_b: int = 0
    progress: int = 0
    last_update: float = 0.0

    def label(self) -> str:
        """Name shown on the display."""
        if self.stage is LaunchStage.CORE:
            return self.core.label()
        return _STAGE_LABELS[self.stage]

    def core_mode(self) -> CoreConnection:
        """The connection state; any stage past CORE counts as connected."""
        if self.stage is LaunchStage.CORE:
            return self.core
        return CoreConnection.IDLE

    def _nop(self) -> tuple[LaunchControlMode, ControlArea]:
        return self, ControlArea.TABS

    def _key_a(self, stage: LaunchStage, **extra) -> LaunchControlMode:
        return LaunchControlMode(stage, hi_a=self.hi_a, lo_a=self.lo_a, **extra)

    def _key_ab(self, stage: LaunchStage, **extra) -> LaunchControlMode:
        return LaunchControlMode(
            stage, hi_a=self.hi_a, lo_a=self.lo_a, hi_b=self.hi_b, lo_b=self.lo_b, **extra
        )

    def process_event(
        self, event: InputEvent, now: float
    ) -> tuple[LaunchControlMode, ControlArea]:
        """Advance on user input."""
        kind = event.kind
        start = LaunchControlMode(), ControlArea.TABS
        details = ControlArea.DETAILS
        match self.stage:
            case LaunchStage.CORE:
                if self.core is CoreConnection.IDLE and kind is InputKind.ENTER:
                    return LaunchControlMode(LaunchStage.ENTER_DIGIT_HI_A), details
                return self._nop()
            case LaunchStage.ENTER_DIGIT_HI_A:
                if kind is InputKind.ENTER:
                    return LaunchControlMode(LaunchStage.ENTER_DIGIT_LO_A, hi_a=self.hi_a), details
                if kind is InputKind.BACK:
                    return start
                if kind in (InputKind.LEFT, InputKind.RIGHT):
                    return replace(self, hi_a=_step(self.hi_a, event)), details
                return self._nop()
            case LaunchStage.ENTER_DIGIT_LO_A:
                if kind is InputKind.ENTER:
                    return self._key_a(LaunchStage.TRANSMIT_KEY_A), details
                if kind is InputKind.BACK:
                    return LaunchControlMode(LaunchStage.ENTER_DIGIT_HI_A, hi_a=self.hi_a), details
                if kind in (InputKind.LEFT, InputKind.RIGHT):
                    return replace(self, lo_a=_step(self.lo_a, event)), details
                return self._nop()
            case LaunchStage.ENTER_DIGIT_HI_B:
                if kind is InputKind.ENTER:
                    return (
                        self._key_a(LaunchStage.ENTER_DIGIT_LO_B, hi_b=self.hi_b),
                        details,
                    )
                if kind is InputKind.BACK:
                    return start
                if kind in (InputKind.LEFT, InputKind.RIGHT):
                    return replace(self, hi_b=_step(self.hi_b, event)), details
                return self._nop()
            case LaunchStage.ENTER_DIGIT_LO_B:
                if kind is InputKind.ENTER:
                    return self._key_ab(LaunchStage.TRANSMIT_KEY_AB), details
                if kind is InputKind.BACK:
                    return (
                        self._key_a(LaunchStage.ENTER_DIGIT_HI_B, hi_b=self.hi_b),
                        details,
                    )
                if kind in (InputKind.LEFT, InputKind.RIGHT):
                    return replace(self, lo_b=_step(self.lo_b, event)), details
                return self._nop()
            case LaunchStage.PREPARE_IGNITION:
                if self.progress == _PROGRESS_FULL:
                    return self._key_ab(LaunchStage.WAIT_FOR_FIRE), details
                return self._prepare(event, now)
            case LaunchStage.PREPARE_UNLOCK_PYROS:
                if self.progress == _PROGRESS_FULL:
                    return self._key_a(LaunchStage.UNLOCK_PYROS), details
                return self._prepare(event, now)
            case LaunchStage.WAIT_FOR_FIRE:
                if kind is InputKind.BACK:
                    return start
                if kind is InputKind.ENTER:
                    return LaunchControlMode(LaunchStage.FIRE), details
                return self, details
        if self.stage in _AWAITING_RESPONSE:
            return self, details
        return self._nop()

    def _prepare(self, event: InputEvent, now: float) -> tuple[LaunchControlMode, ControlArea]:
        if event.kind is InputKind.BACK:
            return LaunchControlMode(), ControlArea.TABS
        if event.kind is InputKind.RIGHT:
            progress = min(self.progress + _PROGRESS_STEP, _PROGRESS_FULL)
            return replace(self, progress=progress, last_update=now), ControlArea.DETAILS
        return self, ControlArea.DETAILS

    def drive(self, now: float) -> LaunchControlMode:
        """Let progress decay without input and end the pyro timeout."""
        match self.stage:
            case LaunchStage.PREPARE_IGNITION | LaunchStage.PREPARE_UNLOCK_PYROS:
                progress = _decayed(self.progress, self.last_update, now)
                return replace(self, progress=progress)
            case LaunchStage.WAIT_FOR_PYRO_TIMEOUT:
                if now - self.last_update > _PYRO_TIMEOUT:
                    return LaunchControlMode(LaunchStage.SWITCH_TO_OBSERVABLES)
        return self

    def affected_by_timeout(self) -> bool:
        """True unless resetting or idle: an abandoned sequence resets itself."""
        idle = self.stage is LaunchStage.CORE and self.core is CoreConnection.IDLE
        return not self.reset_ongoing() and not idle

    def failure_mode(self) -> LaunchControlMode:
        """The state after a connection failure."""
        return LaunchControlMode(core=CoreConnection.FAILURE)

    def reset_mode(self) -> LaunchControlMode:
        """The state while waiting for a reset to be acknowledged."""
        return LaunchControlMode(core=CoreConnection.RESET)

    def reset_ongoing(self) -> bool:
        """True while a reset cycle is running."""
        return self.core_mode().reset_ongoing()

    def is_radio_silence(self) -> bool:
        """Launch control never asks for radio silence."""
        return False

    def digits(self) -> tuple[int, int, int, int]:
        """The key digits entered so far: (hi_a, lo_a, hi_b, lo_b)."""
        stage = self.stage
        hi_a = self.hi_a if stage is LaunchStage.ENTER_DIGIT_HI_A or stage in _STAGES_WITH_A else 0
        lo_a = self.lo_a if stage in _STAGES_WITH_A else 0
        hi_b = self.hi_b if stage is LaunchStage.ENTER_DIGIT_HI_B or stage in _STAGES_WITH_AB else 0
        lo_b = self.lo_b if stage in _STAGES_WITH_AB else 0
        return hi_a, lo_a, hi_b, lo_b

    def highlights(self) -> tuple[bool, bool, bool, bool]:
        """Which digit is being entered."""
        return _HIGHLIGHTS.get(self.stage, (False, False, False, False))

    def prepare_ignition_progress(self) -> float:
        """Progress of the ignition preparation, from 0.0 to 1.0."""
        if self.stage is LaunchStage.PREPARE_IGNITION:
            return self.progress / 100.0
        if self.stage is LaunchStage.WAIT_FOR_FIRE:
            return 1.0
        return 0.0

    def unlock_pyros_progress(self) -> float:
        """Progress of the pyro unlocking, from 0.0 to 1.0."""
        match self.stage:
            case (
                LaunchStage.CORE
                | LaunchStage.ENTER_DIGIT_HI_A
                | LaunchStage.ENTER_DIGIT_LO_A
                | LaunchStage.TRANSMIT_KEY_A
            ):
                return 0.0
            case LaunchStage.PREPARE_UNLOCK_PYROS:
                return self.progress / 100.0
        return 1.0