from collections import namedtuple

from .errors import Unsolvable
from .moves import apply_moves, format_moves
from .search import DEFAULT_MAX_DEPTH, IterativeDeepeningSearch

SolvedCube = namedtuple("SolvedCube", ["final_state", "moves_applied"])


class CubeSolver:
    """
    Solves one cube with the restricted 8-move set.

    A solver is single-use: it hands its cube to the search on the first
    call to solve() and refuses further calls.
    """

    def __init__(self, cube, max_depth=DEFAULT_MAX_DEPTH, node_budget=None, time_budget=None,
                 check_solvable=True, verbose=False):
        """
        Args:
            cube: The Cube3x3x3 to solve
            max_depth: Longest move sequence to search for
            node_budget: Maximum number of states to visit (None = unlimited)
            time_budget: Maximum wall-clock seconds (None = unlimited)
            check_solvable: Reject configurations that cannot occur on a real cube before searching
            verbose: Whether to print progress messages
        """
        self.cube = cube
        self.max_depth = max_depth
        self.node_budget = node_budget
        self.time_budget = time_budget
        self.check_solvable = check_solvable
        self.verbose = verbose
        self.moves = []
        self.search = None

    def solve(self):
        """
        Search for a move sequence that solves the cube.

        Returns:
            SolvedCube: the solved final state and the moves applied to reach it

        Raises:
            Unsolvable: if check_solvable is set and the cube cannot occur on a real cube
            DepthExceeded: if no solution exists within max_depth moves
            BudgetExceeded: if the node or time budget ran out
            RuntimeError: if this solver was already used
        """
        if self.cube is None:
            raise RuntimeError("CubeSolver is single-use; create a new solver for another cube")
        cube, self.cube = self.cube, None

        if self.verbose:
            print("=== Cube Solver ===")
            print(cube)

        if cube.is_solved():
            if self.verbose:
                print("Cube is already solved.")
            return SolvedCube(cube, [])

        if self.check_solvable and not cube.is_valid_configuration():
            raise Unsolvable("Cube state cannot be reached from a solved cube")

        self.search = IterativeDeepeningSearch(
            max_depth=self.max_depth,
            node_budget=self.node_budget,
            time_budget=self.time_budget,
            verbose=self.verbose,
        )
        self.moves = self.search.search(cube)

        final_state = apply_moves(cube, self.moves)
        assert final_state.is_solved(), f"Search returned a non-solving path: {format_moves(self.moves)}"

        if self.verbose:
            print(f"Cube solved in {len(self.moves)} moves: {format_moves(self.moves)}")
        return SolvedCube(final_state, list(self.moves))


def solve(cube, **options):
    """
    Convenience function to solve a cube with a fresh CubeSolver.

    Args:
        cube: The Cube3x3x3 to solve
        **options: Keyword arguments for CubeSolver

    Returns:
        SolvedCube: final_state and moves_applied
    """
    return CubeSolver(cube, **options).solve()
