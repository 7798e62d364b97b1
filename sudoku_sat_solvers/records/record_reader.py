from dataclasses import dataclass
from typing import Iterable, Iterator, List

from ..solvers.sudoku_error import PuzzleFormatError


@dataclass
class PuzzleRecord:
    size: int
    values: int
    grid: List[List[int]]
    line: int


def _parse_ints(text: str, line_no: int) -> List[int]:
    try:
        return [int(token) for token in text.split()]
    except ValueError:
        raise PuzzleFormatError(f"Line {line_no}: expected integers, got {text.strip()!r}")


def read_records(lines: Iterable[str]) -> Iterator[PuzzleRecord]:
    """Yield puzzles from newline-delimited records.

    Each record is a ``SIZE VALUES`` header followed by SIZE*SIZE cell
    values, normally one grid row per line. 0 marks an empty cell. Blank
    lines between records are ignored.
    """
    numbered = enumerate(lines, start=1)

    for line_no, line in numbered:
        if not line.strip():
            continue

        header = _parse_ints(line, line_no)
        if len(header) != 2:
            raise PuzzleFormatError(
                f"Line {line_no}: header must be 'SIZE VALUES', got {line.strip()!r}"
            )
        size, values = header
        if size <= 0 or values <= 0:
            raise PuzzleFormatError(
                f"Line {line_no}: SIZE and VALUES must be positive"
            )

        cells: List[int] = []
        for row_line_no, row_line in numbered:
            cells.extend(_parse_ints(row_line, row_line_no))
            if len(cells) >= size * size:
                break

        if len(cells) != size * size:
            raise PuzzleFormatError(
                f"Record at line {line_no}: expected {size * size} cells, got {len(cells)}"
            )

        for pos, val in enumerate(cells):
            if not (0 <= val <= values):
                raise PuzzleFormatError(
                    f"Record at line {line_no}: value {val} at position "
                    f"({pos // size},{pos % size}) must be between 0 and {values}"
                )

        grid = [cells[row * size:(row + 1) * size] for row in range(size)]
        yield PuzzleRecord(size, values, grid, line_no)
