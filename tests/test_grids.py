import pytest

from calendar_solver.grids import (
    grid_to_cells,
    normalize_cells,
    orientations,
    reflect_cells,
    rotate_cells,
    shape_bounds,
    shape_to_grid,
)
from calendar_solver.layout import DEFAULT_PIECES

I_TETROMINO = ((0, 0), (1, 0), (2, 0), (3, 0))
O_TETROMINO = ((0, 0), (0, 1), (1, 0), (1, 1))


def test_rotate_and_reflect_follow_coordinate_maps():
    assert rotate_cells([(1, 2), (-3, 0)]) == ((2, -1), (0, 3))
    assert reflect_cells([(1, 2), (-3, 0)]) == ((-1, 2), (3, 0))


def test_normalize_moves_to_origin_and_sorts():
    assert normalize_cells([(3, 5), (2, 7), (2, 5)]) == ((0, 0), (0, 2), (1, 0))


def test_normalize_rejects_empty_shape():
    with pytest.raises(ValueError):
        normalize_cells([])


def test_straight_tetromino_has_two_orientations():
    shapes = orientations(I_TETROMINO)
    assert len(shapes) == 2
    assert set(shapes) == {
        ((0, 0), (0, 1), (0, 2), (0, 3)),
        ((0, 0), (1, 0), (2, 0), (3, 0)),
    }


def test_square_has_one_orientation():
    assert orientations(O_TETROMINO) == (O_TETROMINO,)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("L", 8),
        ("rect", 2),
        ("U", 4),
        ("Z", 4),
        ("Y", 8),
        ("P", 8),
        ("V", 4),
        ("N", 8),
    ],
)
def test_default_piece_orientation_counts(name, expected):
    piece = next(p for p in DEFAULT_PIECES if p.name == name)
    shapes = orientations(piece.cells)
    assert len(shapes) == expected
    assert len(set(shapes)) == len(shapes)


@pytest.mark.parametrize("piece", DEFAULT_PIECES, ids=lambda p: p.name)
def test_orientations_closed_under_symmetry_group(piece):
    shapes = set(orientations(piece.cells))
    for shape in shapes:
        assert normalize_cells(rotate_cells(shape)) in shapes
        assert normalize_cells(reflect_cells(shape)) in shapes


@pytest.mark.parametrize("piece", DEFAULT_PIECES, ids=lambda p: p.name)
def test_orientations_are_normalized_and_keep_area(piece):
    for shape in orientations(piece.cells):
        assert normalize_cells(shape) == shape
        assert len(shape) == piece.area


def test_orientations_are_deterministic():
    shape = DEFAULT_PIECES[0].cells
    assert orientations(shape) == orientations(shape)


def test_shape_grid_helpers():
    l_shape = ((0, 0), (1, 0), (2, 0), (2, 1))
    assert shape_bounds(l_shape) == (3, 2)
    grid = shape_to_grid(l_shape)
    assert grid == [[True, False], [True, False], [True, True]]
    assert grid_to_cells(grid) == set(l_shape)
