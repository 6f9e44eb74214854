import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .cursor import Cursor
from .dispatcher import Dispatcher
from .errors import StackUnderflow, StepLimitExceeded
from .grid import Grid
from .machine import StackMachine
from .trace import build_trace_table

logger = logging.getLogger(__name__)

# Run outcomes
HALTED = 'HALTED'
STACK_UNDERFLOW = 'STACK_UNDERFLOW'
STEP_LIMIT_EXCEEDED = 'STEP_LIMIT_EXCEEDED'


@dataclass
class RunResult:
    outcome: str
    output: str
    stack: List[int] = field(default_factory=list)
    steps: int = 0
    row: int = 0
    col: int = 0
    direction: Optional[str] = None
    error: Optional[Exception] = None
    trace: object = None  # pyarrow.Table when the run was traced

    @property
    def halted(self):
        return self.outcome == HALTED


# Interpreter owns one run context: grid, cursor, stack machine and output.
# Every call to trace() or run() starts again from the initial state.
class Interpreter:
    def __init__(self, grid=None, max_steps=None, debug=False):
        if max_steps is not None and max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {max_steps}")
        self.grid = grid if grid is not None else Grid()
        self.max_steps = max_steps
        self.debug = debug
        self.dispatcher = Dispatcher()
        self._reset()

    def add_line(self, line):
        """Appends one row to the program."""
        self.grid.add_line(line)

    def _reset(self):
        self.cursor = Cursor()
        self.machine = StackMachine()
        self.steps = 0
        self.records = []

    @property
    def stack(self):
        return self.machine.stack

    @property
    def output(self):
        return self.machine.output

    def _snapshot(self, error_class, message):
        return error_class(
            message,
            output=self.machine.output,
            stack=self.machine.stack,
            steps=self.steps,
            row=self.cursor.row,
            col=self.cursor.col,
            direction=self.cursor.direction,
        )

    def step(self):
        """Executes one loop iteration: dispatch (or skip), then advance."""
        machine = self.machine
        cursor = self.cursor
        char = self.grid.char_at(cursor.row, cursor.col)
        self.steps += 1

        skipped = machine.skip_next
        if skipped:
            machine.skip_next = False
        else:
            try:
                self.dispatcher.dispatch(char, machine, cursor)
            except StackUnderflow:
                raise self._snapshot(
                    StackUnderflow,
                    f"Stack underflow on {char!r} at row {cursor.row}, column {cursor.col}") from None

        if self.debug:
            self.records.append({
                'step': self.steps,
                'row': cursor.row,
                'col': cursor.col,
                'char': char,
                'direction': cursor.direction,
                'skipped': skipped,
                'stack_depth': machine.depth(),
                'top': machine.top(),
            })

        cursor.advance()

    def trace(self):
        """Runs the program from the first cell until it halts.

        Returns:
            str: The accumulated output

        Raises:
            StackUnderflow: 'I' or 'C' executed on an empty stack
            StepLimitExceeded: max_steps iterations ran without reaching 'E'
        """
        self._reset()
        logger.debug("Starting run on %dx%d grid (max_steps=%s)",
                     self.grid.height, self.grid.width, self.max_steps)
        while not self.machine.halted:
            if self.max_steps is not None and self.steps >= self.max_steps:
                logger.warning("Step limit of %d reached at row %d, column %d",
                               self.max_steps, self.cursor.row, self.cursor.col)
                raise self._snapshot(
                    StepLimitExceeded, f"Step limit of {self.max_steps} exceeded")
            self.step()
        logger.debug("Halted after %d steps with %d values on the stack",
                     self.steps, len(self.machine.stack))
        return self.machine.output

    def run(self):
        """Runs the program and reports how it ended instead of raising."""
        try:
            self.trace()
        except StackUnderflow as e:
            logger.error("%s", e)
            return self._result(STACK_UNDERFLOW, e)
        except StepLimitExceeded as e:
            return self._result(STEP_LIMIT_EXCEEDED, e)
        return self._result(HALTED)

    def trace_table(self):
        return build_trace_table(self.records)

    def _result(self, outcome, error=None):
        return RunResult(
            outcome=outcome,
            output=self.machine.output,
            stack=list(self.machine.stack),
            steps=self.steps,
            row=self.cursor.row,
            col=self.cursor.col,
            direction=self.cursor.direction,
            error=error,
            trace=self.trace_table() if self.debug else None,
        )
