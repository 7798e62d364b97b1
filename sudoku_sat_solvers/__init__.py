from .solvers import (
    BoxShape,
    CNFFormula,
    CVC5Engine,
    SatResult,
    SatStatus,
    SudokuError,
    SudokuSATSolver,
    Z3Engine,
    decode_solution,
    encode_puzzle,
)
from .records import RecordRunner, read_records
