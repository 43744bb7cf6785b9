class InvalidState(ValueError):
    """
    Raised when a cube is constructed from faces that break a sticker-count invariant.

    Attributes:
        invariant: Which invariant failed: "center", "edge" or "corner"
    """

    def __init__(self, invariant, message):
        super().__init__(f"Invalid {invariant} stickers: {message}")
        self.invariant = invariant


class SolveError(Exception):
    """Base class for search outcomes that did not produce a solution."""


class Unsolvable(SolveError):
    """The cube is not a physically reachable configuration."""


class DepthExceeded(SolveError):
    def __init__(self, max_depth, nodes_visited):
        super().__init__(f"No solution within {max_depth} moves ({nodes_visited} nodes visited)")
        self.max_depth = max_depth
        self.nodes_visited = nodes_visited


class BudgetExceeded(SolveError):
    def __init__(self, reason, nodes_visited, elapsed):
        super().__init__(f"Search budget exceeded: {reason} ({nodes_visited} nodes, {elapsed:.2f}s)")
        self.reason = reason
        self.nodes_visited = nodes_visited
        self.elapsed = elapsed
