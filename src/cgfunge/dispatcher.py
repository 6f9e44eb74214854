from .cursor import ARROWS, Direction

CHAR_CODE_MODULUS = 0x10000


# Dispatcher: total mapping from a cell's character to its effect on the
# Stack Machine and/or the Cursor direction. Anything not in the table,
# including space and the out-of-bounds sentinel (None), is a no-op.
class Dispatcher:
    def __init__(self):
        self.table = {}
        for digit in '0123456789':
            self.table[digit] = self._push_digit
        for op in '+-*':
            self.table[op] = self._arithmetic
        for arrow in ARROWS:
            self.table[arrow] = self._set_direction
        self.table.update({
            'P': self._pop,
            'X': self._swap,
            'D': self._duplicate,
            '_': self._horizontal_if,
            '|': self._vertical_if,
            '"': self._toggle_string_mode,
            'I': self._print_int,
            'C': self._print_char,
            'S': self._skip,
            'E': self._end,
        })

    def dispatch(self, char, machine, cursor):
        """Applies the effect of one cell.

        Args:
            char (str | None): Cell character, None for a position outside the grid
            machine (StackMachine): Stack and mode flags of the current run
            cursor (Cursor): Cursor whose direction may be changed
        """
        if char is None:
            return
        if machine.string_mode:
            if char == '"':
                machine.string_mode = False
            else:
                machine.push(ord(char))
            return
        handler = self.table.get(char)
        if handler is not None:
            handler(char, machine, cursor)

    # digits push their value
    def _push_digit(self, char, machine, cursor):
        machine.push(int(char))

    def _arithmetic(self, char, machine, cursor):
        # val1 is the current top, val2 the element below it
        if machine.depth() < 2:
            return
        val1 = machine.pop()
        val2 = machine.pop()
        if char == '+':
            machine.push(val1 + val2)
        elif char == '-':
            machine.push(abs(val1 - val2))
        else:
            machine.push(val1 * val2)

    def _pop(self, char, machine, cursor):
        machine.pop()

    def _swap(self, char, machine, cursor):
        stack = machine.stack
        if len(stack) > 1:
            stack[-1], stack[-2] = stack[-2], stack[-1]

    def _duplicate(self, char, machine, cursor):
        if machine.depth() > 0:
            machine.push(machine.top())

    def _set_direction(self, char, machine, cursor):
        cursor.direction = ARROWS[char]

    # An empty stack pops None, which counts as nonzero.
    def _horizontal_if(self, char, machine, cursor):
        cursor.direction = Direction.RIGHT if machine.pop() == 0 else Direction.LEFT

    def _vertical_if(self, char, machine, cursor):
        cursor.direction = Direction.DOWN if machine.pop() == 0 else Direction.UP

    def _toggle_string_mode(self, char, machine, cursor):
        machine.string_mode = not machine.string_mode

    def _print_int(self, char, machine, cursor):
        machine.write(str(machine.pop_strict()))

    # code points wrap modulo 0x10000, so every integer names a character
    def _print_char(self, char, machine, cursor):
        machine.write(chr(machine.pop_strict() % CHAR_CODE_MODULUS))

    def _skip(self, char, machine, cursor):
        machine.skip_next = True

    def _end(self, char, machine, cursor):
        machine.halted = True
