from typing import List, Mapping

from .sudoku_error import SudokuError
from .utils import get_var


def decode_solution(
    model: Mapping[int, bool], size: int, values: int
) -> List[List[int]]:
    """
    Rebuild the grid from a satisfying assignment.

    Args:
        model: Variable id to truth value, as returned by an engine
        size: Grid size
        values: Number of values a cell can take

    Returns:
        2D list with the value of each cell

    Raises:
        SudokuError: If a cell has no true variable
    """
    if model is None:
        raise SudokuError("Invalid model: model cannot be None")

    solution = [[0] * size for _ in range(size)]
    for i in range(size):
        for j in range(size):
            for k in range(values):
                if model.get(get_var(i, j, k, size, values), False):
                    solution[i][j] = k + 1
                    break
            else:
                raise SudokuError(f"No value assigned to cell ({i},{j})")
    return solution


def flatten(grid: List[List[int]]) -> List[int]:
    """Cell values in row-major order."""
    return [val for row in grid for val in row]
