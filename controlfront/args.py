"""Command line arguments of the launch control front end."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum

_INVALID_MODE = "No valid value, use Observables, RFSilence, LaunchControl"


class LaunchMode(Enum):
    """The tab the front end starts with."""

    OBSERVABLES = "Observables"
    LAUNCH_CONTROL = "LaunchControl"
    RF_SILENCE = "RFSilence"


def parse_launch_mode(text: str) -> LaunchMode:
    """Parse a launch mode by its exact name."""
    try:
        return LaunchMode(text)
    except ValueError:
        raise ValueError(_INVALID_MODE) from None


@dataclass
class ProgramArgs:
    """Parsed program arguments."""

    port: str | None = None
    start_with: LaunchMode = LaunchMode.OBSERVABLES
    dont_record: bool = False


def _launch_mode_argument(text: str) -> LaunchMode:
    try:
        return parse_launch_mode(text)
    except ValueError as error:
        raise argparse.ArgumentTypeError(str(error)) from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="launch-control",
        description="Launch control and telemetry front end.",
    )
    parser.add_argument("-p", "--port", default=None, help="serial port of the radio module")
    parser.add_argument(
        "-s",
        "--start-with",
        required=True,
        type=_launch_mode_argument,
        help="Observables, LaunchControl or RFSilence",
    )
    parser.add_argument(
        "-d",
        "--dont-record",
        action="store_true",
        help="do not record received data to a file",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> ProgramArgs:
    """Parse command line arguments; exits with a usage message on error."""
    namespace = _build_parser().parse_args(argv)
    return ProgramArgs(
        port=namespace.port,
        start_with=namespace.start_with,
        dont_record=namespace.dont_record,
    )