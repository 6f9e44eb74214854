# Grid Store: the program as an ordered sequence of rows.
# Rows are kept verbatim (no trimming, no padding) and may differ in length.


class Grid:
    def __init__(self, rows=None):
        self._rows = [list(row) for row in (rows or [])]

    @classmethod
    def from_lines(cls, lines):
        """Builds a grid from an ordered sequence of text lines."""
        return cls(lines)

    @classmethod
    def from_text(cls, text):
        """Builds a grid from a block of program text.

        Args:
            text (str): Program source; each line becomes one row.

        Returns:
            Grid: The loaded grid. Only a newline (or CRLF) ends a row, and a
            trailing newline does not add an empty row.
        """
        rows = [line[:-1] if line.endswith('\r') else line for line in text.split('\n')]
        if rows and rows[-1] == '':
            rows.pop()
        return cls(rows)

    def add_line(self, line):
        self._rows.append(list(line))

    def char_at(self, row, col):
        """Returns the character at (row, col), or None outside the stored bounds.

        Negative indices are out of bounds; they never wrap around.
        """
        if row < 0 or row >= len(self._rows):
            return None
        cells = self._rows[row]
        if col < 0 or col >= len(cells):
            return None
        return cells[col]

    def row(self, index):
        return ''.join(self._rows[index])

    @property
    def height(self):
        return len(self._rows)

    @property
    def width(self):
        return max((len(row) for row in self._rows), default=0)

    def __iter__(self):
        for cells in self._rows:
            yield ''.join(cells)

    def __len__(self):
        return len(self._rows)

    def __str__(self):
        return '\n'.join(self)


def load_program(path):
    """Reads a program file into a Grid."""
    with open(path, 'r', encoding='utf-8') as file:
        return Grid.from_text(file.read())
