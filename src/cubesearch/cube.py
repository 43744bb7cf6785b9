import enum

import kociemba as koc
import numpy as np

from .errors import InvalidState, Unsolvable


class Color(enum.Enum):
    BLUE = 'B'
    GREEN = 'G'
    ORANGE = 'O'
    RED = 'R'
    WHITE = 'W'
    YELLOW = 'Y'


# Colors are stored as their position in the enum
COLORS = tuple(Color)
_COLOR_CODES = {color: code for code, color in enumerate(COLORS)}


class Face:
    """
    One side of the cube: 9 stickers read row by row.

    0 1 2
    3 4 5
    6 7 8
    """

    TOP_LEFT = 0
    TOP = 1
    TOP_RIGHT = 2
    LEFT = 3
    CENTER = 4
    RIGHT = 5
    BOTTOM_LEFT = 6
    BOTTOM = 7
    BOTTOM_RIGHT = 8

    CORNERS = (TOP_LEFT, TOP_RIGHT, BOTTOM_LEFT, BOTTOM_RIGHT)
    EDGES = (TOP, LEFT, RIGHT, BOTTOM)

    __slots__ = ('colors',)

    def __init__(self, colors):
        colors = tuple(colors)
        if len(colors) != 9:
            raise ValueError(f"A face has 9 stickers, got {len(colors)}")
        self.colors = colors

    @classmethod
    def uniform(cls, color):
        """Create a face with all 9 stickers of one color."""
        return cls([color] * 9)

    @property
    def center(self):
        return self.colors[self.CENTER]

    def is_one_color(self):
        first_color = self.colors[0]
        return all(color == first_color for color in self.colors)

    def __iter__(self):
        return iter(self.colors)

    def __getitem__(self, index):
        return self.colors[index]

    def __len__(self):
        return 9

    def __eq__(self, other):
        if not isinstance(other, Face):
            return NotImplemented
        return self.colors == other.colors

    def __hash__(self):
        return hash(self.colors)

    def __repr__(self):
        return f"Face({''.join(color.value for color in self.colors)})"


class Cube3x3x3:
    """
    An immutable 3x3x3 cube state.

    The cube is represented as 6 faces, each with 9 stickers.
    Faces are indexed as follows:
    0: Front
    1: Left
    2: Back
    3: Right
    4: Top
    5: Bottom

    Front, left, back and right are read from outside with row 0 next to the
    top face. Top is read from above with row 2 next to the front face, and
    bottom is read from below with row 0 next to the front face.

    Cubes are only created through validated construction or by applying a
    move to an existing cube (see cubesearch.moves), never changed in place.
    """

    FRONT = 0
    LEFT = 1
    BACK = 2
    RIGHT = 3
    TOP = 4
    BOTTOM = 5

    FACE_NAMES = ("front", "left", "back", "right", "top", "bottom")

    DEFAULT_SCHEME = (Color.GREEN, Color.ORANGE, Color.BLUE, Color.RED, Color.WHITE, Color.YELLOW)

    # Kociemba reads faces in URFDLB order
    KOCIEMBA_ORDER = (TOP, RIGHT, FRONT, BOTTOM, LEFT, BACK)

    __slots__ = ('_stickers',)

    def __init__(self, faces):
        faces = tuple(faces)
        if len(faces) != 6:
            raise ValueError(f"A cube has 6 faces, got {len(faces)}")

        codes = []
        for face in faces:
            for color in face:
                try:
                    codes.append(_COLOR_CODES[color])
                except KeyError:
                    raise TypeError(f"Stickers must be Color values, got {color!r}") from None

        stickers = np.array(codes, dtype=np.uint8)
        self._validate(stickers.reshape(6, 9))
        stickers.setflags(write=False)
        self._stickers = stickers

    @classmethod
    def solved(cls, scheme=DEFAULT_SCHEME):
        """Create a solved cube with one color per face, in face order."""
        return cls([Face.uniform(color) for color in scheme])

    @classmethod
    def _from_stickers(cls, stickers):
        # Move application only permutes a valid cube, so the invariants still hold
        cube = cls.__new__(cls)
        stickers.setflags(write=False)
        cube._stickers = stickers
        return cube

    @staticmethod
    def _validate(grid):
        checks = (
            ("center", [Face.CENTER], 1),
            ("edge", list(Face.EDGES), 4),
            ("corner", list(Face.CORNERS), 4),
        )
        for invariant, positions, expected in checks:
            counts = np.bincount(grid[:, positions].ravel(), minlength=len(COLORS))
            if (counts != expected).any():
                wrong = ", ".join(
                    f"{COLORS[code].name.lower()}={int(count)}"
                    for code, count in enumerate(counts)
                    if count != expected
                )
                raise InvalidState(
                    invariant,
                    f"each color must appear {expected} time(s) in {invariant} positions ({wrong})",
                )

    @property
    def stickers(self):
        """The 54 sticker codes as a read-only numpy array."""
        return self._stickers

    @property
    def faces(self):
        return tuple(self.face(index) for index in range(6))

    def face(self, index):
        return Face(COLORS[code] for code in self._stickers[index * 9:index * 9 + 9])

    def is_solved(self):
        """Check if every face shows a single color on all 9 stickers."""
        grid = self._stickers.reshape(6, 9)
        return bool((grid == grid[:, :1]).all())

    def key(self):
        """Canonical bytes of the sticker configuration, usable as a dict or set key."""
        return self._stickers.tobytes()

    def to_array(self):
        """Return the color codes as a (6, 9) uint8 array, faces in canonical order."""
        return self._stickers.reshape(6, 9).copy()

    def color_counts(self):
        return {COLORS[code]: int(count)
                for code, count in enumerate(np.bincount(self._stickers, minlength=len(COLORS)))}

    def __eq__(self, other):
        if not isinstance(other, Cube3x3x3):
            return NotImplemented
        return np.array_equal(self._stickers, other._stickers)

    def __hash__(self):
        return hash(self.key())

    def __repr__(self):
        faces = " ".join(
            "".join(COLORS[code].value for code in self._stickers[i * 9:i * 9 + 9])
            for i in range(6)
        )
        return f"Cube3x3x3({faces})"

    def __str__(self):
        """Return the cube unfolded as a net: top, then left/front/right/back, then bottom."""
        letters = [COLORS[code].value for code in self._stickers]

        def row(face, r):
            start = face * 9 + r * 3
            return letters[start:start + 3]

        result = []

        for r in range(3):
            result.append(" " * 8 + " ".join(row(self.TOP, r)))

        for r in range(3):
            row_str = []
            for face in (self.LEFT, self.FRONT, self.RIGHT, self.BACK):
                row_str.extend(row(face, r))
                if face != self.BACK:
                    row_str.append(" ")
            result.append(" ".join(row_str))

        for r in range(3):
            result.append(" " * 8 + " ".join(row(self.BOTTOM, r)))

        return "\n".join(result)

    def to_kociemba_string(self):
        """
        Convert cube state to Kociemba string notation.

        Kociemba uses the following conventions:
        - Each face is represented by its center color
        - The order of faces is: Up, Right, Front, Down, Left, Back
        - Each face is read from top-left to bottom-right

        Our top/bottom/side reading directions match Kociemba's, so only the
        face order and the color letters change.

        Returns:
            str: A 54-character string representing the cube state
        """
        letters = {}
        for face_idx, letter in zip(self.KOCIEMBA_ORDER, "URFDLB"):
            letters[self._stickers[face_idx * 9 + Face.CENTER]] = letter

        kociemba_str = ""
        for face_idx in self.KOCIEMBA_ORDER:
            for code in self._stickers[face_idx * 9:face_idx * 9 + 9]:
                kociemba_str += letters[code]
        return kociemba_str

    def solve_with_kociemba(self):
        """
        Generate a reference solution using the full 18-move set.

        The two-phase solver also checks corner twist, edge flip and
        permutation parity, which the sticker counts cannot.

        Returns:
            list: Move notation strings such as "F2" or "B'"

        Raises:
            Unsolvable: if the configuration cannot occur on a real cube
        """
        if self.is_solved():
            return []

        try:
            solution = koc.solve(self.to_kociemba_string())
        except ValueError as e:
            raise Unsolvable(f"Cube state is not reachable on a physical cube: {e}") from e
        return solution.split()

    def is_valid_configuration(self):
        """Check whether the cube can be reached from solved on a physical cube."""
        try:
            self.solve_with_kociemba()
        except Unsolvable:
            return False
        return True
