import unittest

import numpy as np

from cubesearch.cube import Color, Cube3x3x3, Face
from cubesearch.errors import InvalidState, Unsolvable
from cubesearch.moves import Move, apply_move

B, G, O, R, W, Y = Color.BLUE, Color.GREEN, Color.ORANGE, Color.RED, Color.WHITE, Color.YELLOW


def solved_faces():
    return [list(Face.uniform(color)) for color in Cube3x3x3.DEFAULT_SCHEME]


def build(faces):
    return Cube3x3x3([Face(colors) for colors in faces])


class TestFace(unittest.TestCase):

    def test_face_needs_nine_stickers(self):
        with self.assertRaises(ValueError):
            Face([W] * 8)

    def test_is_one_color_checks_every_sticker(self):
        self.assertTrue(Face.uniform(W).is_one_color())
        # The bottom-right sticker counts too
        self.assertFalse(Face([W] * 8 + [R]).is_one_color())
        self.assertFalse(Face([W, W, W, W, Y, W, W, W, W]).is_one_color())

    def test_named_offsets(self):
        face = Face([B, G, O, R, W, Y, B, G, O])
        self.assertEqual(face.center, W)
        self.assertEqual(face[Face.TOP_RIGHT], O)
        self.assertEqual(face[Face.BOTTOM], G)
        self.assertEqual(len(face), 9)

    def test_equality_and_hash(self):
        self.assertEqual(Face.uniform(R), Face([R] * 9))
        self.assertEqual(len({Face.uniform(R), Face([R] * 9)}), 1)
        self.assertNotEqual(Face.uniform(R), Face.uniform(O))


class TestCubeConstruction(unittest.TestCase):

    def test_solved_cube(self):
        cube = Cube3x3x3.solved()
        self.assertTrue(cube.is_solved())
        self.assertEqual(cube.face(Cube3x3x3.FRONT), Face.uniform(G))
        self.assertEqual(cube.face(Cube3x3x3.TOP), Face.uniform(W))

    def test_duplicated_center_is_rejected(self):
        faces = solved_faces()
        faces[Cube3x3x3.FRONT][Face.CENTER] = O
        with self.assertRaises(InvalidState) as ctx:
            build(faces)
        self.assertEqual(ctx.exception.invariant, "center")

    def test_wrong_edge_distribution_is_rejected(self):
        faces = solved_faces()
        # Totals stay at 9 per color, but green loses an edge to a corner
        faces[Cube3x3x3.FRONT][Face.TOP] = O
        faces[Cube3x3x3.LEFT][Face.TOP_LEFT] = G
        with self.assertRaises(InvalidState) as ctx:
            build(faces)
        self.assertEqual(ctx.exception.invariant, "edge")

    def test_wrong_corner_distribution_is_rejected(self):
        faces = solved_faces()
        faces[Cube3x3x3.FRONT][Face.TOP_LEFT] = O
        with self.assertRaises(InvalidState) as ctx:
            build(faces)
        self.assertEqual(ctx.exception.invariant, "corner")

    def test_invalid_state_is_a_value_error(self):
        faces = solved_faces()
        faces[Cube3x3x3.TOP][Face.CENTER] = Y
        with self.assertRaises(ValueError):
            build(faces)

    def test_wrong_face_count(self):
        with self.assertRaises(ValueError):
            Cube3x3x3([Face.uniform(W)] * 5)

    def test_non_color_sticker(self):
        faces = solved_faces()
        faces[0][0] = 'G'
        with self.assertRaises(TypeError):
            build(faces)

    def test_scrambled_faces_round_trip(self):
        cube = apply_move(apply_move(Cube3x3x3.solved(), Move.RIGHT_ROTATE_UP), Move.TOP_ROTATE_LEFT)
        rebuilt = Cube3x3x3(cube.faces)
        self.assertEqual(rebuilt, cube)
        self.assertFalse(rebuilt.is_solved())


class TestCubeQueries(unittest.TestCase):

    def test_is_solved_false_when_one_sticker_differs(self):
        # Swap two corner stickers between faces so the counts stay valid
        faces = solved_faces()
        faces[Cube3x3x3.FRONT][Face.BOTTOM_RIGHT] = B
        faces[Cube3x3x3.BACK][Face.BOTTOM_RIGHT] = G
        cube = build(faces)
        self.assertFalse(cube.is_solved())

    def test_is_solved_with_any_color_scheme(self):
        cube = Cube3x3x3.solved((W, Y, R, O, B, G))
        self.assertTrue(cube.is_solved())

    def test_color_counts(self):
        counts = Cube3x3x3.solved().color_counts()
        self.assertEqual(counts, {color: 9 for color in Color})

    def test_to_array(self):
        grid = Cube3x3x3.solved().to_array()
        self.assertEqual(grid.shape, (6, 9))
        self.assertEqual(grid.dtype, np.uint8)
        # The copy is writable and detached from the cube
        grid[0, 0] = 5
        self.assertTrue(Cube3x3x3.solved().is_solved())

    def test_equality_hash_and_key(self):
        a = Cube3x3x3.solved()
        b = Cube3x3x3.solved()
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(a.key(), b.key())
        self.assertNotEqual(a, apply_move(a, Move.TOP_ROTATE_LEFT))

    def test_stickers_are_read_only(self):
        cube = Cube3x3x3.solved()
        with self.assertRaises(ValueError):
            cube.stickers[0] = 1

    def test_str_shows_net(self):
        lines = str(Cube3x3x3.solved()).splitlines()
        self.assertEqual(len(lines), 9)
        self.assertEqual(lines[0].strip(), "W W W")
        self.assertEqual(lines[3], "O O O   G G G   R R R   B B B")
        self.assertEqual(lines[8].strip(), "Y Y Y")


class TestKociemba(unittest.TestCase):

    def test_solved_kociemba_string(self):
        self.assertEqual(
            Cube3x3x3.solved().to_kociemba_string(),
            "U" * 9 + "R" * 9 + "F" * 9 + "D" * 9 + "L" * 9 + "B" * 9,
        )

    def test_kociemba_string_after_top_rotate_left(self):
        cube = apply_move(Cube3x3x3.solved(), Move.TOP_ROTATE_LEFT)
        self.assertEqual(
            cube.to_kociemba_string(),
            "UUUUUUUUU" "BBBRRRRRR" "RRRFFFFFF" "DDDDDDDDD" "FFFLLLLLL" "LLLBBBBBB",
        )

    def test_kociemba_string_after_right_rotate_up(self):
        cube = apply_move(Cube3x3x3.solved(), Move.RIGHT_ROTATE_UP)
        self.assertEqual(
            cube.to_kociemba_string(),
            "UUFUUFUUF" "RRRRRRRRR" "FFDFFDFFD" "DDBDDBDDB" "LLLLLLLLL" "UBBUBBUBB",
        )

    def test_kociemba_string_after_left_rotate_up(self):
        cube = apply_move(Cube3x3x3.solved(), Move.LEFT_ROTATE_UP)
        self.assertEqual(
            cube.to_kociemba_string(),
            "FUUFUUFUU" "RRRRRRRRR" "DFFDFFDFF" "BDDBDDBDD" "LLLLLLLLL" "BBUBBUBBU",
        )

    def test_letters_follow_centers(self):
        cube = Cube3x3x3.solved((W, Y, R, O, B, G))
        self.assertEqual(cube.to_kociemba_string(), Cube3x3x3.solved().to_kociemba_string())

    def test_reference_solution(self):
        self.assertEqual(Cube3x3x3.solved().solve_with_kociemba(), [])
        cube = apply_move(apply_move(Cube3x3x3.solved(), Move.LEFT_ROTATE_DOWN), Move.BOTTOM_ROTATE_RIGHT)
        self.assertTrue(cube.is_valid_configuration())
        self.assertTrue(cube.solve_with_kociemba())

    def test_twisted_corner_is_not_a_valid_configuration(self):
        cube = twisted_corner_cube()
        self.assertFalse(cube.is_solved())
        self.assertFalse(cube.is_valid_configuration())
        with self.assertRaises(Unsolvable):
            cube.solve_with_kociemba()


def twisted_corner_cube():
    """A cube whose front-top-right corner is twisted in place; sticker counts are still valid."""
    faces = solved_faces()
    faces[Cube3x3x3.FRONT][Face.TOP_RIGHT] = W
    faces[Cube3x3x3.TOP][Face.BOTTOM_RIGHT] = R
    faces[Cube3x3x3.RIGHT][Face.TOP_LEFT] = G
    return build(faces)


if __name__ == "__main__":
    unittest.main()
