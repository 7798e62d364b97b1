from math import comb

import pytest

from sudoku_sat_solvers.solvers.sudoku_encoder import encode_puzzle
from sudoku_sat_solvers.solvers.sudoku_error import SudokuError
from sudoku_sat_solvers.solvers.utils import BoxShape, get_var

RULE_CLAUSES_9x9 = 81 * (1 + comb(9, 2)) + 3 * 81 * (1 + comb(9, 2))


def test_encode_empty_grid(empty_9x9):
    formula = encode_puzzle(empty_9x9, 9)
    assert formula.num_vars == 729
    assert len(formula) == RULE_CLAUSES_9x9
    assert not any(len(clause) == 1 for clause in formula)


def test_encode_clues_as_unit_clauses(empty_9x9):
    empty_9x9[0][0] = 5
    empty_9x9[8][3] = 1
    formula = encode_puzzle(empty_9x9, 9)

    assert len(formula) == RULE_CLAUSES_9x9 + 2
    assert formula.clauses[:2] == (
        (get_var(0, 0, 4, 9, 9),),
        (get_var(8, 3, 0, 9, 9),),
    )


def test_encode_solved_grid(solved_9x9):
    formula = encode_puzzle(solved_9x9, 9)
    units = [clause for clause in formula if len(clause) == 1]
    assert len(units) == 81


def test_encode_uses_default_box_shape():
    grid = [[0] * 6 for _ in range(6)]
    formula = encode_puzzle(grid, 6)
    assert formula.num_vars == 216


def test_encode_rejects_mismatched_box_shape(empty_9x9):
    with pytest.raises(SudokuError, match="does not tile"):
        encode_puzzle(empty_9x9, 9, BoxShape(2, 3))


def test_encode_builds_fresh_formula(empty_9x9):
    first = encode_puzzle(empty_9x9, 9)
    second = encode_puzzle(empty_9x9, 9)
    assert first is not second
    assert first.clauses == second.clauses
