from .cvc5_solver import CVC5Engine
from .sat_result import SatResult, SatStatus
from .sat_solver import ENGINES, SudokuSATSolver, create_engine
from .solution_decoder import decode_solution, flatten
from .solver_utils import CNFFormula, SolverUtils
from .sudoku_encoder import encode_puzzle
from .sudoku_error import ClauseError, PuzzleFormatError, SudokuError
from .utils import BoxShape, decode_var, get_var
from .z3_solver import Z3Engine
