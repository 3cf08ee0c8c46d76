# controlfront

The operator-side logic of a rocket test-stand launch control station,
kept free of any user interface or radio hardware. Everything here is
plain Python with no third-party dependencies.

## Modules

- `controlfront.args`: program options. `LaunchMode` (`Observables`,
  `LaunchControl`, `RFSilence`), `parse_launch_mode`, the `ProgramArgs`
  dataclass and `parse_args`, which understands `-p/--port`,
  `-s/--start-with` (required) and `-d/--dont-record`.
- `controlfront.input`: `InputKind` (enter, back, left, right, send) and
  the frozen `InputEvent`, whose `amount` is used by left and right.
- `controlfront.layout`: `#rrggbb` parsing (`hexcolor_parser`,
  `hexcolor_vec_parser`), `LinSrgb` and `Color32` colours, a linear
  `Gradient`, and the colour scheme per area (`Kind`, `Intensity`,
  `kind_color`, `kind_color32`, `muted`, `color32`).
- `controlfront.observables`: wire values (`ClkFreq`, `Timestamp`,
  `Ads1256Reading`), linear calibrations (`AdcForceCalibration`,
  `AdcPressureCalibration`) and the ADC gain setting (`AdcGain`,
  `parse_adc_gain`).
- `controlfront.rqa` and `controlfront.rqb`: raw observable groups of the
  test stand and of the rocket, and a `SystemDefinition` whose
  `transform_og1` and `transform_og2` turn them into uptime, thrust (kN),
  pressure (bar), battery voltage (V), pyro channel status and, for the
  test stand, the recording state, anomaly and record counts.
- `controlfront.core`: command id generators (`SimpleIdGenerator`, and the
  thread-safe `SharedIdGenerator`) counting 1 to 999 and wrapping to 0,
  the connection states `CoreConnection` (`Start`, `Failure`, `Reset`,
  `Idle`) and `ControlArea` (tabs or details).
- `controlfront.launchcontrol`: `LaunchStage` and the immutable
  `LaunchControlMode` state machine of the two-key arming and ignition
  sequence.

## Usage

```python
from controlfront.args import LaunchMode, parse_args

args = parse_args(["--start-with", "LaunchControl", "--dont-record"])
assert args.start_with is LaunchMode.LAUNCH_CONTROL
assert args.port is None and args.dont_record
```

The launch control state machine takes input events together with the
current time in seconds on a monotonic clock, and returns the next state
and where further input should go:

```python
import time

from controlfront.core import ControlArea, CoreConnection
from controlfront.input import InputEvent, InputKind
from controlfront.launchcontrol import LaunchControlMode, LaunchStage

mode = LaunchControlMode(core=CoreConnection.IDLE)
mode, area = mode.process_event(InputEvent(InputKind.ENTER), time.monotonic())
assert mode.stage is LaunchStage.ENTER_DIGIT_HI_A and area is ControlArea.DETAILS

mode, _ = mode.process_event(InputEvent(InputKind.RIGHT, 10), time.monotonic())
assert mode.digits() == (1, 0, 0, 0)
print(mode.label())  # "Enter Hi A"
```

Each key digit runs from 0 to 15 and wraps around. In the two prepare
stages each right event raises the progress by 3, up to 100; `drive(now)`
lowers it by one on every call once half a second has passed without
input. Three seconds after ignition, `drive` moves to
`SWITCH_TO_OBSERVABLES`. `affected_by_timeout()` reports whether the
current state should fall back to a reset when left alone.

Timestamps from the remote node are converted with its clock frequency:

```python
from datetime import timedelta

from controlfront.observables import ClkFreq, Timestamp

assert Timestamp(600_000_000).duration(ClkFreq(300_000_000)) == timedelta(seconds=2)
```

## What it does not do

- It has no command and no screen: it parses options and provides state
  and colours, but draws nothing and reads no keyboard or joystick.
- It does not talk to the radio module or the remote node. There is no
  sentence parser, no protocol, no sending of commands and no handling of
  responses, so the stages that wait for an acknowledgement
  (transmitting a key, unlocking pyros, fire) are only left by building
  the next state yourself.
- It has no state machine for the RF-silence or observables tabs and no
  switching between tabs, and it does not itself time out and reset an
  abandoned sequence.
- It does not record received data to a file.