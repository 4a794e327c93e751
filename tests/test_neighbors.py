import pytest

from hexlattice import Axial, Cube, Double, DoubleLayout, OffsetLayout, Offset
from hexlattice import (
    diagonals_cube,
    neighbors_axial,
    neighbors_axial_bounded,
    neighbors_double,
    neighbors_offset,
    neighbors_offset_bounded,
    offset_to_cube,
)


def test_neighbors_axial_six():
    n = list(neighbors_axial(Axial(0, 0)))
    assert len(n) == 6
    assert Axial(1, 0) in n
    assert Axial(0, 1) in n
    assert n[0] == Axial(1, -1)


@pytest.mark.parametrize(
    ("offset", "expected"),
    [
        (
            Offset(4, 4, OffsetLayout.EVEN_R),
            {
                (3, 4),
                (4, 3),
                (4, 5),
                (5, 3),
                (5, 4),
                (5, 5),
            },
        ),
        (
            Offset(4, 5, OffsetLayout.EVEN_R),
            {
                (3, 4),
                (3, 5),
                (3, 6),
                (4, 4),
                (4, 6),
                (5, 5),
            },
        ),
        (
            Offset(4, 4, OffsetLayout.ODD_R),
            {
                (3, 3),
                (3, 4),
                (3, 5),
                (4, 3),
                (4, 5),
                (5, 4),
            },
        ),
        (
            Offset(4, 5, OffsetLayout.ODD_R),
            {
                (3, 5),
                (4, 4),
                (4, 6),
                (5, 4),
                (5, 5),
                (5, 6),
            },
        ),
        (
            Offset(4, 4, OffsetLayout.EVEN_Q),
            {
                (3, 4),
                (3, 5),
                (4, 3),
                (4, 5),
                (5, 4),
                (5, 5),
            },
        ),
        (
            Offset(5, 4, OffsetLayout.EVEN_Q),
            {
                (4, 3),
                (4, 4),
                (5, 3),
                (5, 5),
                (6, 3),
                (6, 4),
            },
        ),
        (
            Offset(4, 4, OffsetLayout.ODD_Q),
            {
                (3, 3),
                (3, 4),
                (4, 3),
                (4, 5),
                (5, 3),
                (5, 4),
            },
        ),
        (
            Offset(5, 4, OffsetLayout.ODD_Q),
            {
                (4, 4),
                (4, 5),
                (5, 3),
                (5, 5),
                (6, 4),
                (6, 5),
            },
        ),
    ],
)
def test_neighbors_offset_exact_neighbor_sets(offset: Offset, expected: set[tuple[int, int]]):
    actual = {(n.col, n.row) for n in neighbors_offset(offset)}
    assert actual == expected


@pytest.mark.parametrize("layout", list(OffsetLayout))
def test_neighbors_offset_follow_canonical_order(layout):
    origin = Offset(3, 3, layout)
    ordered = [offset_to_cube(n) for n in neighbors_offset(origin)]
    assert ordered == offset_to_cube(origin).neighbors()
    assert all(n.layout is layout for n in neighbors_offset(origin))


def test_neighbors_double_tables():
    width = Double(0, 0, DoubleLayout.DOUBLED_WIDTH)
    assert [(n.col, n.row) for n in neighbors_double(width)] == [
        (1, -1),
        (2, 0),
        (1, 1),
        (-1, 1),
        (-2, 0),
        (-1, -1),
    ]
    height = Double(0, 0, DoubleLayout.DOUBLED_HEIGHT)
    assert [(n.col, n.row) for n in neighbors_double(height)] == [
        (1, -1),
        (1, 1),
        (0, 2),
        (-1, 1),
        (-1, -1),
        (0, -2),
    ]


def test_bounded_neighbors_clip_to_the_rectangle():
    corner = Offset(0, 0, OffsetLayout.ODD_R)
    assert list(neighbors_offset_bounded(corner, 3, 3)) == [
        Offset(1, 0, OffsetLayout.ODD_R),
        Offset(0, 1, OffsetLayout.ODD_R),
    ]
    assert set(neighbors_axial_bounded(Axial(0, 0), 2, 2)) == {Axial(1, 0), Axial(0, 1)}


def test_diagonals_cube():
    assert list(diagonals_cube(Cube.ORIGIN)) == Cube.ORIGIN.diagonals()
