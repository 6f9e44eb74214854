# Direction values and the Cursor (the single program counter).


class Direction:
    RIGHT = 'RIGHT'
    LEFT = 'LEFT'
    UP = 'UP'
    DOWN = 'DOWN'


# (row delta, column delta) for one step in each direction
DELTAS = {
    Direction.RIGHT: (0, 1),
    Direction.LEFT: (0, -1),
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
}

# Arrow instructions and the direction each one selects
ARROWS = {
    '>': Direction.RIGHT,
    '<': Direction.LEFT,
    '^': Direction.UP,
    'v': Direction.DOWN,
}


class Cursor:
    def __init__(self, row=0, col=0, direction=Direction.RIGHT):
        if direction not in DELTAS:
            raise ValueError(f"Unknown direction: {direction!r}")
        self.row = row
        self.col = col
        self.direction = direction

    def advance(self):
        """Moves exactly one cell in the current direction."""
        d_row, d_col = DELTAS[self.direction]
        self.row += d_row
        self.col += d_col

    def __repr__(self):
        return f"Cursor(row={self.row}, col={self.col}, direction={self.direction})"
