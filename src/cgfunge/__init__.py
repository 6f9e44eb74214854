"""
CGFunge Interpreter

Runs programs written in CGFunge, a two-dimensional language where control
flow is cursor movement over a grid of characters and computation happens
on an integer stack.
"""

from .errors import CGFungeError, StackUnderflow, StepLimitExceeded
from .grid import Grid, load_program
from .interpreter import HALTED, STACK_UNDERFLOW, STEP_LIMIT_EXCEEDED, Interpreter, RunResult
from .main import run_program

__version__ = "0.1.0"
__all__ = [
    "run_program",
    "Interpreter",
    "RunResult",
    "Grid",
    "load_program",
    "CGFungeError",
    "StackUnderflow",
    "StepLimitExceeded",
    "HALTED",
    "STACK_UNDERFLOW",
    "STEP_LIMIT_EXCEEDED",
]
