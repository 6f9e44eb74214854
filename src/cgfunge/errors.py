# Error taxonomy for a CGFunge run.
# Only two conditions ever stop a run early; everything else in the
# instruction table is absorbed as a no-op.


class CGFungeError(Exception):
    """Base class for run-terminating conditions.

    The exception carries a snapshot of the run at the moment it stopped so
    callers can still inspect the partial output.
    """

    def __init__(self, message, output="", stack=None, steps=0, row=0, col=0, direction=None):
        super().__init__(message)
        self.output = output
        self.stack = list(stack) if stack is not None else []
        self.steps = steps
        self.row = row
        self.col = col
        self.direction = direction


class StackUnderflow(CGFungeError):
    """An output instruction ('I' or 'C') popped from an empty stack."""


class StepLimitExceeded(CGFungeError):
    """The embedding harness's step budget ran out before an 'E' was reached."""
