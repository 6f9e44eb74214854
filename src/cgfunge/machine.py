from .errors import StackUnderflow


# Stack Machine: integer stack, mode flags and the output buffer for one run.
class StackMachine:
    def __init__(self):
        self.stack = []            # LIFO of ints, top at the tail
        self.string_mode = False   # push character codes instead of dispatching
        self.skip_next = False     # skip dispatch of the next cell
        self.halted = False
        self._output = []          # append-only output fragments

    def push(self, value):
        self.stack.append(int(value))

    def pop(self):
        """Pops the top value, or returns None when the stack is empty."""
        if not self.stack:
            return None
        return self.stack.pop()

    def pop_strict(self):
        """Pops the top value; raises StackUnderflow when the stack is empty."""
        if not self.stack:
            raise StackUnderflow("Stack underflow: nothing to pop")
        return self.stack.pop()

    def depth(self):
        return len(self.stack)

    def top(self):
        return self.stack[-1] if self.stack else None

    def write(self, text):
        self._output.append(text)

    @property
    def output(self):
        return ''.join(self._output)
