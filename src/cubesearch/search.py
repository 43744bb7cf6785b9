import time

from .errors import BudgetExceeded, DepthExceeded
from .moves import MOVES, apply_move

DEFAULT_MAX_DEPTH = 8

# Opposite layers commute, so only one of the two orders is explored:
# a top move never follows a bottom move and a left move never follows a right move.
_COMMUTING_AFTER = {"bottom": "top", "right": "left"}


def _build_transitions():
    """Pre-calculate the moves allowed after each previous move (None at the root)."""
    transitions = {None: MOVES}
    for last in MOVES:
        allowed = []
        for move in MOVES:
            if move is last.inverse:
                continue
            if _COMMUTING_AFTER.get(last.face) == move.face:
                continue
            allowed.append(move)
        transitions[last] = tuple(allowed)
    return transitions


class IterativeDeepeningSearch:
    """
    Iterative-deepening depth-first search over cube states.

    Each iteration runs a depth-limited DFS with limits 0, 1, ..., max_depth,
    so the first solution found is a shortest one for the restricted move set.
    Moves are tried in Move declaration order, which makes the result
    deterministic.

    Only the states on the current root-to-leaf path are remembered; a global
    visited set would cut off shorter routes to a state first seen deeper in
    the tree.
    """

    def __init__(self, max_depth=DEFAULT_MAX_DEPTH, node_budget=None, time_budget=None, verbose=False):
        """
        Args:
            max_depth: Longest move sequence to try
            node_budget: Maximum number of states visited over all iterations (None = unlimited)
            time_budget: Maximum wall-clock seconds (None = unlimited)
            verbose: Whether to print progress after each depth iteration
        """
        if max_depth < 0:
            raise ValueError("max_depth must be non-negative")
        self.max_depth = max_depth
        self.node_budget = node_budget
        self.time_budget = time_budget
        self.verbose = verbose
        self.transitions = _build_transitions()

        self.nodes_visited = 0
        self.depth_reached = 0
        self.elapsed = 0.0
        self._start_time = None

    def search(self, cube):
        """
        Find a shortest move sequence that solves the cube.

        Returns:
            list: The moves, in order; empty if the cube is already solved

        Raises:
            DepthExceeded: if no sequence of at most max_depth moves solves the cube
            BudgetExceeded: if the node or time budget runs out first
        """
        self.nodes_visited = 0
        self.depth_reached = 0
        self._start_time = time.time()

        try:
            for limit in range(self.max_depth + 1):
                self.depth_reached = limit
                path = []
                on_path = {cube.key()}

                if self._search(cube, limit, path, on_path):
                    if self.verbose:
                        print(f"Solved at depth {limit} after {self.nodes_visited} nodes")
                    return path

                if self.verbose:
                    print(f"Depth {limit}: no solution ({self.nodes_visited} nodes visited)")
        finally:
            self.elapsed = time.time() - self._start_time

        raise DepthExceeded(self.max_depth, self.nodes_visited)

    def _search(self, cube, limit, path, on_path):
        self.nodes_visited += 1
        self._check_budget()

        if cube.is_solved():
            return True
        if len(path) >= limit:
            return False

        last_move = path[-1] if path else None
        for move in self.transitions[last_move]:
            # Three identical quarter-turns equal the inverse turn, which is shorter
            if len(path) >= 2 and path[-2] is move and last_move is move:
                continue

            child = apply_move(cube, move)
            key = child.key()
            if key in on_path:
                continue

            path.append(move)
            on_path.add(key)
            if self._search(child, limit, path, on_path):
                return True
            on_path.discard(key)
            path.pop()

        return False

    def _check_budget(self):
        if self.node_budget is not None and self.nodes_visited > self.node_budget:
            raise BudgetExceeded("node budget", self.nodes_visited, time.time() - self._start_time)
        if self.time_budget is not None:
            elapsed = time.time() - self._start_time
            if elapsed > self.time_budget:
                raise BudgetExceeded("time budget", self.nodes_visited, elapsed)
