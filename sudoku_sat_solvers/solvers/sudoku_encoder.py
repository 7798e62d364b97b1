import logging
from typing import List, Optional

from .solver_utils import CNFFormula, SolverUtils
from .utils import BoxShape, get_var

log = logging.getLogger(__name__)


def encode_puzzle(
    grid: List[List[int]], values: int, shape: Optional[BoxShape] = None
) -> CNFFormula:
    """Build the CNF whose models are the valid completions of grid.

    Clues become unit clauses; empty cells (0) add nothing of their own.
    The full rule set is then added for every cell and region.
    """
    size = len(grid)
    shape = shape or BoxShape.for_size(size)
    shape.check(size)

    formula = CNFFormula(size * size * values)

    givens = 0
    for i in range(size):
        for j in range(size):
            value = grid[i][j]
            if value != 0:
                formula.add_clause([get_var(i, j, value - 1, size, values)])
                givens += 1

    SolverUtils.add_sudoku_rules(formula, size, values, shape)

    log.debug(
        "Encoded %dx%d puzzle (%d givens, box %dx%d): %d variables, %d clauses",
        size,
        size,
        givens,
        shape.height,
        shape.width,
        formula.num_vars,
        len(formula),
    )
    return formula
