import argparse
import logging
import os
import sys

from . import config
from .grid import load_program
from .interpreter import Interpreter, STACK_UNDERFLOW, STEP_LIMIT_EXCEEDED
from .logging_config import setup_logging
from .trace import write_trace_csv

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(prog='cgfunge', description='CGFunge Interpreter')
    parser.add_argument('filename', nargs='?', help='Path to the program file to execute')
    parser.add_argument('--example', metavar='NAME', help='Run a bundled sample program')
    parser.add_argument('--list-examples', action='store_true', help='List the bundled sample programs')
    parser.add_argument('--max-steps', type=int, default=None,
                        help=f'Stop after this many steps, 0 runs nothing (default: ${config.MAX_STEPS_ENV} '
                             f'or {config.DEFAULT_MAX_STEPS})')
    parser.add_argument('--no-limit', action='store_true', help='Run without a step limit')
    parser.add_argument('--debug', action='store_true', help='Write the execution trace in CSV format')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], help='Logging level')
    parser.add_argument('--log-file', help='Also write logs to this file')
    return parser


def _resolve_max_steps(args):
    if args.no_limit:
        return None
    if args.max_steps is not None:
        return args.max_steps
    return config.get_max_steps()


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    if args.list_examples:
        for name in config.list_programs():
            print(name)
        return config.EXIT_OK

    if args.example and args.filename:
        parser.error('give either a filename or --example, not both')
    if not args.example and not args.filename:
        parser.error('a filename or --example is required')
    if args.max_steps is not None and args.max_steps < 0:
        parser.error('--max-steps must be non-negative')

    try:
        if args.example:
            path = config.program_path(args.example)
            trace_path = args.example + '.trace.csv'
        else:
            path = args.filename
            trace_path = os.path.splitext(args.filename)[0] + '.trace.csv'
        grid = load_program(path)
        max_steps = _resolve_max_steps(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return config.EXIT_ERROR

    logger.info("Running %s", path)
    try:
        result = Interpreter(grid, max_steps=max_steps, debug=args.debug).run()
        sys.stdout.write(result.output)
        sys.stdout.flush()
    except (ValueError, OverflowError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return config.EXIT_ERROR

    if args.debug:
        write_trace_csv(result.trace, trace_path)
        print(f"\nTrace saved to: {trace_path}", file=sys.stderr)

    if result.outcome == STACK_UNDERFLOW:
        print(f"\nError: {result.error}", file=sys.stderr)
        return config.EXIT_STACK_UNDERFLOW
    if result.outcome == STEP_LIMIT_EXCEEDED:
        print(f"\nStopped: step limit of {max_steps} exceeded without reaching 'E'", file=sys.stderr)
        return config.EXIT_STEP_LIMIT
    return config.EXIT_OK


def entry_point():
    sys.exit(main())


if __name__ == "__main__":
    entry_point()
