from math import isqrt
from typing import List, NamedTuple, Tuple

from .sudoku_error import SudokuError


def get_var(row: int, col: int, k: int, size: int, values: int) -> int:
    """Convert a cell position and zero-based value index to a CNF variable."""
    if not (0 <= row < size):
        raise ValueError(f"Row must be between 0 and {size-1}")
    if not (0 <= col < size):
        raise ValueError(f"Column must be between 0 and {size-1}")
    if not (0 <= k < values):
        raise ValueError(f"Value index must be between 0 and {values-1}")

    return row * size * values + col * values + k + 1


def decode_var(var: int, size: int, values: int) -> Tuple[int, int, int]:
    """Convert a CNF variable back to (row, col, value index)."""
    if not (1 <= var <= size * size * values):
        raise ValueError(f"Variable must be between 1 and {size * size * values}")

    offset = var - 1
    row = offset // (size * values)
    col = (offset % (size * values)) // values
    k = offset % values
    return row, col, k


class BoxShape(NamedTuple):
    """Height and width of a box region, in cells."""

    height: int
    width: int

    @classmethod
    def for_size(cls, size: int) -> "BoxShape":
        """Default box shape for a grid of the given size.

        Perfect squares get square boxes (3x3 for 9x9, 2x2 for 4x4). Other
        sizes use the most balanced factorisation, e.g. 2x3 for 6x6.
        """
        if size <= 0:
            raise SudokuError("Size must be positive")

        root = isqrt(size)
        for height in range(root, 0, -1):
            if size % height == 0:
                return cls(height, size // height)
        return cls(1, size)

    @classmethod
    def parse(cls, text: str) -> "BoxShape":
        """Parse a shape written as ``HxW``."""
        try:
            height, width = (int(part) for part in text.lower().split("x"))
        except ValueError:
            raise SudokuError(f"Invalid box shape {text!r}: expected HxW")
        return cls(height, width)

    def check(self, size: int) -> None:
        if self.height <= 0 or self.width <= 0:
            raise SudokuError(f"Invalid box shape {self.height}x{self.width}")
        if self.height * self.width != size:
            raise SudokuError(
                f"Box shape {self.height}x{self.width} does not tile a {size}x{size} grid"
            )


def box_cells(box: int, size: int, shape: BoxShape) -> List[Tuple[int, int]]:
    """Cells of a box in row-major order."""
    boxes_per_row = size // shape.width
    start_row = (box // boxes_per_row) * shape.height
    start_col = (box % boxes_per_row) * shape.width
    return [
        (row, col)
        for row in range(start_row, start_row + shape.height)
        for col in range(start_col, start_col + shape.width)
    ]


def validate_grid(grid, values: int) -> None:
    """Raise SudokuError unless grid is a square puzzle with cells in [0, values]."""
    if not grid or not isinstance(grid, list):
        raise SudokuError("Invalid Sudoku puzzle: input must be a non-empty list")

    size = len(grid)
    for i, row in enumerate(grid):
        if not isinstance(row, list) or len(row) != size:
            raise SudokuError(f"Invalid Sudoku puzzle: row {i} must have {size} cells")
        for j, val in enumerate(row):
            if not isinstance(val, int) or isinstance(val, bool):
                raise SudokuError(
                    f"Invalid value at position ({i},{j}): must be an integer"
                )
            if val < 0 or val > values:
                raise SudokuError(
                    f"Invalid value {val} at position ({i},{j}): must be between 0 and {values}"
                )


def validate_solution(solution, puzzle, shape: BoxShape) -> bool:
    """Check that solution is a complete Sudoku that keeps every clue of puzzle."""
    if not solution:
        return False

    size = len(puzzle)
    if len(solution) != size or any(len(row) != size for row in solution):
        return False

    valid_nums = set(range(1, size + 1))

    if any(set(row) != valid_nums for row in solution):
        return False

    for col in range(size):
        if {solution[row][col] for row in range(size)} != valid_nums:
            return False

    for box in range(size):
        if {solution[r][c] for r, c in box_cells(box, size, shape)} != valid_nums:
            return False

    return all(
        puzzle[i][j] == 0 or puzzle[i][j] == solution[i][j]
        for i in range(size)
        for j in range(size)
    )
