"""
Configuration
=============
Global constants for the command-line layer and the bundled programs.

Exports:
    DEFAULT_MAX_STEPS (int): Step budget used by the CLI when none is given.
    PROGRAMS_PATH (Path): Directory holding the bundled sample programs.
"""
import os
from pathlib import Path

PROGRAM_SUFFIX = '.cgf'
PROGRAMS_PATH = Path(__file__).parent / 'programs'

DEFAULT_MAX_STEPS = 1_000_000
MAX_STEPS_ENV = 'CGFUNGE_MAX_STEPS'

# CLI exit codes
EXIT_OK = 0
EXIT_ERROR = 1
EXIT_STACK_UNDERFLOW = 3
EXIT_STEP_LIMIT = 4


def get_max_steps(environ=None):
    """Reads the step budget from CGFUNGE_MAX_STEPS, falling back to DEFAULT_MAX_STEPS.

    'none' disables the limit (returns None); '0' allows zero steps, as --max-steps 0 does.
    """
    environ = os.environ if environ is None else environ
    raw = environ.get(MAX_STEPS_ENV)
    if raw is None or not raw.strip():
        return DEFAULT_MAX_STEPS
    raw = raw.strip()
    if raw.lower() == 'none':
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{MAX_STEPS_ENV} must be an integer or 'none', got {raw!r}")
    if value < 0:
        raise ValueError(f"{MAX_STEPS_ENV} must be non-negative, got {value}")
    return value


def list_programs():
    """Names of the bundled sample programs, without suffix."""
    return sorted(p.stem for p in PROGRAMS_PATH.glob('*' + PROGRAM_SUFFIX))


def program_path(name):
    path = PROGRAMS_PATH / (name + PROGRAM_SUFFIX)
    if not path.is_file():
        raise FileNotFoundError(f"No bundled program named '{name}'")
    return path
