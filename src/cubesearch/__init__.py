from .cube import Color, Cube3x3x3, Face
from .errors import BudgetExceeded, DepthExceeded, InvalidState, SolveError, Unsolvable
from .moves import MOVES, Move, apply_move, apply_moves, format_moves, invert_moves, parse_moves, scramble
from .search import DEFAULT_MAX_DEPTH, IterativeDeepeningSearch
from .solver import CubeSolver, SolvedCube, solve

__all__ = [
    "BudgetExceeded",
    "Color",
    "Cube3x3x3",
    "CubeSolver",
    "DEFAULT_MAX_DEPTH",
    "DepthExceeded",
    "Face",
    "InvalidState",
    "IterativeDeepeningSearch",
    "MOVES",
    "Move",
    "SolveError",
    "SolvedCube",
    "Unsolvable",
    "apply_move",
    "apply_moves",
    "format_moves",
    "invert_moves",
    "parse_moves",
    "scramble",
    "solve",
]
