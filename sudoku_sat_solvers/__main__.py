import argparse
import logging
import sys

from .records import RecordRunner
from .solvers import ENGINES, BoxShape, SudokuError

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="sudoku_sat_solvers",
        description="Solve Sudoku puzzle records by encoding them as SAT",
    )
    parser.add_argument("filename", help="Puzzle record file, or - for stdin")
    parser.add_argument(
        "--engine", choices=sorted(ENGINES), default="z3", help="SAT engine to use"
    )
    parser.add_argument(
        "--timeout", type=float, default=120, help="Per-puzzle timeout in seconds"
    )
    parser.add_argument(
        "--box",
        type=BoxShape.parse,
        default=None,
        help="Box shape as HxW (default: square boxes where possible)",
    )
    parser.add_argument("--verbose", action="store_true", help="Be verbose")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    try:
        args = parse_args(argv)
    except SudokuError as e:
        print(e, file=sys.stderr)
        return EXIT_FAILURE

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    runner = RecordRunner(engine=args.engine, timeout=args.timeout, box_shape=args.box)

    if args.filename == "-":
        runner.run(sys.stdin)
    else:
        try:
            with open(args.filename, "rt") as f:
                runner.run(f)
        except OSError as e:
            logging.getLogger(__name__).error("Cannot read %s: %s", args.filename, e)
            print("not solvable")
            return EXIT_FAILURE

    return EXIT_FAILURE if runner.error else EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
