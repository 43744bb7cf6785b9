import enum
import random

import numpy as np

from .cube import Cube3x3x3

FRONT = Cube3x3x3.FRONT
LEFT = Cube3x3x3.LEFT
BACK = Cube3x3x3.BACK
RIGHT = Cube3x3x3.RIGHT
TOP = Cube3x3x3.TOP
BOTTOM = Cube3x3x3.BOTTOM


class Move(enum.Enum):
    """
    The quarter-turns the solver may use, in the order the search tries them.

    Values are the standard notation for the same turn: "rotate left" on the
    top layer moves the front face's top row onto the left face, which is U.
    """

    TOP_ROTATE_LEFT = "U"
    TOP_ROTATE_RIGHT = "U'"
    BOTTOM_ROTATE_LEFT = "D'"
    BOTTOM_ROTATE_RIGHT = "D"
    LEFT_ROTATE_UP = "L'"
    LEFT_ROTATE_DOWN = "L"
    RIGHT_ROTATE_UP = "R"
    RIGHT_ROTATE_DOWN = "R'"

    @property
    def inverse(self):
        return _INVERSES[self]

    @property
    def face(self):
        """The layer this move turns: "top", "bottom", "left" or "right"."""
        return self.name.split("_")[0].lower()

    @property
    def notation(self):
        return self.value

    def __str__(self):
        return self.value


MOVES = tuple(Move)

_INVERSES = {
    Move.TOP_ROTATE_LEFT: Move.TOP_ROTATE_RIGHT,
    Move.TOP_ROTATE_RIGHT: Move.TOP_ROTATE_LEFT,
    Move.BOTTOM_ROTATE_LEFT: Move.BOTTOM_ROTATE_RIGHT,
    Move.BOTTOM_ROTATE_RIGHT: Move.BOTTOM_ROTATE_LEFT,
    Move.LEFT_ROTATE_UP: Move.LEFT_ROTATE_DOWN,
    Move.LEFT_ROTATE_DOWN: Move.LEFT_ROTATE_UP,
    Move.RIGHT_ROTATE_UP: Move.RIGHT_ROTATE_DOWN,
    Move.RIGHT_ROTATE_DOWN: Move.RIGHT_ROTATE_UP,
}

TOP_ROW = (0, 1, 2)
BOTTOM_ROW = (6, 7, 8)
LEFT_COLUMN = (0, 3, 6)
RIGHT_COLUMN = (2, 5, 8)

# new[i] = old[_CLOCKWISE[i]] within one face
_CLOCKWISE = (6, 3, 0, 7, 4, 1, 8, 5, 2)


def _slots(face, positions):
    return [face * 9 + p for p in positions]


def _rotate_face_clockwise(s, face):
    """Rotate a face clockwise."""
    base = face * 9
    old = s[base:base + 9]
    s[base:base + 9] = [old[i] for i in _CLOCKWISE]


def _cycle(s, *strips):
    """Each strip takes the stickers of the next one; the last takes the first's."""
    saved = [s[i] for i in strips[0]]
    for dst, src in zip(strips, strips[1:]):
        for d, r in zip(dst, src):
            s[d] = s[r]
    for d, value in zip(strips[-1], saved):
        s[d] = value


# The turns below track sticker slots rather than colors: after one runs on
# list(range(54)), s[i] names the slot whose sticker ends up at slot i.

def _turn_top(s):
    """Top face clockwise as seen from above."""
    _rotate_face_clockwise(s, TOP)

    # Front gets top row from Right, Right from Back, Back from Left, Left from Front
    _cycle(s, _slots(FRONT, TOP_ROW), _slots(RIGHT, TOP_ROW),
           _slots(BACK, TOP_ROW), _slots(LEFT, TOP_ROW))


def _turn_bottom(s):
    """Bottom face clockwise as seen from below."""
    _rotate_face_clockwise(s, BOTTOM)

    # Front gets bottom row from Left, Left from Back, Back from Right, Right from Front
    _cycle(s, _slots(FRONT, BOTTOM_ROW), _slots(LEFT, BOTTOM_ROW),
           _slots(BACK, BOTTOM_ROW), _slots(RIGHT, BOTTOM_ROW))


def _turn_left(s):
    """Left face clockwise as seen from the left."""
    _rotate_face_clockwise(s, LEFT)

    # Top gets left column from Back (flipped), Back from Bottom, Bottom from Front, Front from Top
    _cycle(s, _slots(TOP, LEFT_COLUMN), _slots(BACK, (8, 5, 2)),
           _slots(BOTTOM, LEFT_COLUMN), _slots(FRONT, LEFT_COLUMN))


def _turn_right(s):
    """Right face clockwise as seen from the right."""
    _rotate_face_clockwise(s, RIGHT)

    # Top gets right column from Front, Front from Bottom, Bottom from Back (flipped), Back from Top
    _cycle(s, _slots(TOP, RIGHT_COLUMN), _slots(FRONT, RIGHT_COLUMN),
           _slots(BOTTOM, RIGHT_COLUMN), _slots(BACK, (6, 3, 0)))


def _permutation(turn):
    s = list(range(54))
    turn(s)
    return np.array(s, dtype=np.intp)


def _inverse_permutation(perm):
    inverse = np.empty_like(perm)
    inverse[perm] = np.arange(len(perm), dtype=perm.dtype)
    return inverse


def _build_permutations():
    clockwise = {
        "top": _permutation(_turn_top),
        "bottom": _permutation(_turn_bottom),
        "left": _permutation(_turn_left),
        "right": _permutation(_turn_right),
    }
    counter = {face: _inverse_permutation(perm) for face, perm in clockwise.items()}
    return {
        Move.TOP_ROTATE_LEFT: clockwise["top"],
        Move.TOP_ROTATE_RIGHT: counter["top"],
        Move.BOTTOM_ROTATE_LEFT: counter["bottom"],
        Move.BOTTOM_ROTATE_RIGHT: clockwise["bottom"],
        Move.LEFT_ROTATE_UP: counter["left"],
        Move.LEFT_ROTATE_DOWN: clockwise["left"],
        Move.RIGHT_ROTATE_UP: clockwise["right"],
        Move.RIGHT_ROTATE_DOWN: counter["right"],
    }


PERMUTATIONS = _build_permutations()


def apply_move(cube, move):
    """Return the cube obtained by applying one move; the input is left untouched."""
    return Cube3x3x3._from_stickers(cube.stickers[PERMUTATIONS[move]])


def apply_moves(cube, moves):
    for move in moves:
        cube = apply_move(cube, move)
    return cube


def parse_moves(algorithm):
    """
    Parse a sequence of moves from a string notation.

    Examples:
    - "U L' R" parses to TOP_ROTATE_LEFT, LEFT_ROTATE_UP, RIGHT_ROTATE_UP
    - "TOP_ROTATE_RIGHT D" mixes enum names and notation

    Valid tokens are the notation values U, U', D, D', L, L', R, R' and the
    Move member names. F, B, half turns and slice moves are not part of the
    move set.
    """
    moves = []
    for token in algorithm.split():
        if token in Move.__members__:
            moves.append(Move[token])
            continue
        try:
            moves.append(Move(token))
        except ValueError:
            raise ValueError(f"Invalid move notation: {token}") from None
    return moves


def format_moves(moves):
    return " ".join(move.value for move in moves)


def invert_moves(moves):
    """Get the inverse sequence of moves to undo a sequence"""
    return [move.inverse for move in reversed(moves)]


def scramble(cube, num_moves=20, rng=None):
    """Apply a random sequence of moves to scramble the cube.

    Args:
        cube: Starting cube (not modified)
        num_moves: How many random moves to apply
        rng: random.Random instance, for reproducible scrambles

    Returns:
        tuple: (scrambled_cube, moves) where moves is the applied list
    """
    rng = rng or random.Random()
    applied_moves = [rng.choice(MOVES) for _ in range(num_moves)]
    return apply_moves(cube, applied_moves), applied_moves
