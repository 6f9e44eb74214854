from .grid import Grid
from .interpreter import Interpreter


def run_program(code, max_steps=None, debug=False):
    """Run a CGFunge program.

    Args:
        code (str | list): Program text, or an ordered sequence of rows
        max_steps (int): Optional step budget; None runs until 'E'
        debug (bool): If True, the result carries the per-step trace table

    Returns:
        RunResult: outcome, output, final stack and cursor of the run
    """
    if isinstance(code, str):
        grid = Grid.from_text(code)
    else:
        grid = Grid.from_lines(code)
    interpreter = Interpreter(grid, max_steps=max_steps, debug=debug)
    return interpreter.run()


if __name__ == "__main__":
    result = run_program('"!olleH"CCCCCCE')
    print(result.output)
