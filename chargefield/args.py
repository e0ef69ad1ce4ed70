"""Command-line argument parsing for the simulation viewer."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class SimulationSetup(Enum):
    """Preset arrangements of particles, named as on the command line."""

    CIRCULAR = "circular"
    CIRCULAR_MOVING = "circular-moving"
    FOUR = "four"
    RANDOM = "random"
    INPUT = "input"


USAGE = (
    "Usage: chargefield <simulation_setup> [options]\n"
    "Arguments:\n"
    "<simulation_setup>      Preset of particle state (required)\n"
    "                        circular, circular-moving, four, random\n"
    "Options:\n"
    "    --ignore-field      Does not show electric field\n"
    "        --help, -h      Shows this message\n"
)


@dataclass
class ParsedArgs:
    """Result of parsing the command line."""

    sim_setup: SimulationSetup | None = None
    ignore_field: bool = False
    help: bool = False
    error_output: bool = False

    def print_usage(self) -> None:
        """Write the usage text to standard output."""
        sys.stdout.write(USAGE)


def parse_args(argv: Sequence[str] | None = None) -> ParsedArgs:
    """Parse ``argv`` (without the program name); problems are reported on stderr."""
    if argv is None:
        argv = sys.argv[1:]
    parsed = ParsedArgs()

    if not argv:
        print("Error: Missing required argument <simulation_setup>", file=sys.stderr)
        parsed.error_output = True
        parsed.help = True

    for arg in argv:
        if arg == "--ignore-field":
            parsed.ignore_field = True
        elif arg in ("--help", "-h"):
            parsed.help = True
        else:
            try:
                parsed.sim_setup = SimulationSetup(arg)
            except ValueError:
                print(f"Error: Unrecognized argument '{arg}'", file=sys.stderr)
                parsed.error_output = True
    return parsed