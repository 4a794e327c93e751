import pytest

from hexlattice import (
    Axial,
    CoordSys,
    Cube,
    Double,
    DoubleLayout,
    InvalidCoordinateError,
    Offset,
    OffsetLayout,
    axial_round,
    axial_to_cube,
    axial_to_offset,
    convert,
    coord_system,
    cube_lerp,
    cube_round,
    cube_to_axial,
    cube_to_double,
    cube_to_offset,
    double_to_cube,
    filled_hex,
    offset_to_axial,
    offset_to_cube,
    to_cube,
)

CUBES = filled_hex(Cube.ORIGIN, 4) + [Cube(-17, 10, 7), Cube(23, -40, 17), Cube(-9, -6, 15)]


def test_axial_cube_roundtrip():
    a = Axial(3, -2)
    c = axial_to_cube(a)
    a2 = cube_to_axial(c)
    assert a == a2
    assert axial_to_cube(Axial(1, 2)) == Cube(1, -3, 2)


@pytest.mark.parametrize("layout", list(OffsetLayout))
def test_offset_roundtrip_for_every_parity(layout):
    for cube in CUBES:
        offset = cube_to_offset(cube, layout)
        assert offset.layout is layout
        assert offset_to_cube(offset) == cube
        assert offset_to_axial(axial_to_offset(cube_to_axial(cube), layout)) == cube_to_axial(cube)


@pytest.mark.parametrize("layout", list(DoubleLayout))
def test_double_roundtrip_for_both_conventions(layout):
    for cube in CUBES:
        double = cube_to_double(cube, layout)
        assert (double.col - double.row) % 2 == 0
        assert double_to_cube(double) == cube


@pytest.mark.parametrize(
    ("axial", "layout", "expected"),
    [
        (Axial(1, 3), OffsetLayout.EVEN_R, (3, 3)),
        (Axial(1, 3), OffsetLayout.ODD_R, (2, 3)),
        (Axial(3, 1), OffsetLayout.EVEN_Q, (3, 3)),
        (Axial(3, 1), OffsetLayout.ODD_Q, (3, 2)),
        (Axial(-1, -1), OffsetLayout.EVEN_R, (-1, -1)),
        (Axial(-1, -1), OffsetLayout.ODD_R, (-2, -1)),
        (Axial(-1, -1), OffsetLayout.EVEN_Q, (-1, -1)),
        (Axial(-1, -1), OffsetLayout.ODD_Q, (-1, -2)),
    ],
)
def test_offset_values_per_parity(axial, layout, expected):
    offset = axial_to_offset(axial, layout)
    assert (offset.col, offset.row) == expected
    assert offset_to_axial(offset) == axial


def test_double_values_per_convention():
    cube = Cube(1, -3, 2)
    assert cube_to_double(cube, DoubleLayout.DOUBLED_WIDTH) == Double(
        4, 2, DoubleLayout.DOUBLED_WIDTH
    )
    assert cube_to_double(cube, DoubleLayout.DOUBLED_HEIGHT) == Double(
        1, 5, DoubleLayout.DOUBLED_HEIGHT
    )


def test_convert_routes_through_cube():
    offset = convert(Axial(1, 2), CoordSys.OFFSET, OffsetLayout.ODD_R)
    assert offset == Offset(2, 2, OffsetLayout.ODD_R)
    double = convert(offset, CoordSys.DOUBLE, DoubleLayout.DOUBLED_HEIGHT)
    assert double == Double(1, 5, DoubleLayout.DOUBLED_HEIGHT)
    assert convert(double, CoordSys.AXIAL) == Axial(1, 2)
    assert convert(double, CoordSys.CUBE) == Cube(1, -3, 2)
    assert to_cube(double) == to_cube(offset) == Cube(1, -3, 2)


def test_convert_never_guesses_a_layout():
    with pytest.raises(InvalidCoordinateError):
        convert(Cube.ORIGIN, CoordSys.OFFSET)
    with pytest.raises(InvalidCoordinateError):
        convert(Cube.ORIGIN, CoordSys.DOUBLE, OffsetLayout.ODD_R)
    with pytest.raises(InvalidCoordinateError):
        convert(Cube.ORIGIN, CoordSys.OFFSET, DoubleLayout.DOUBLED_WIDTH)


def test_coord_system_labels():
    assert coord_system(Cube.ORIGIN) is CoordSys.CUBE
    assert coord_system(Axial.ORIGIN) is CoordSys.AXIAL
    assert coord_system(Offset(0, 0, OffsetLayout.EVEN_Q)) is CoordSys.OFFSET
    assert coord_system(Double(0, 0, DoubleLayout.DOUBLED_WIDTH)) is CoordSys.DOUBLE
    with pytest.raises(InvalidCoordinateError):
        coord_system((0, 0))  # type: ignore[arg-type]


def test_cube_round_fixes_the_worst_component():
    assert cube_round(0.4, -0.3, -0.1) == Cube.ORIGIN
    assert cube_round(1.6, -0.7, -0.9) == Cube(2, -1, -1)
    # Naive rounding gives (1, 1, -1), which is off the lattice.
    assert cube_round(0.6, 0.6, -1.2) == Cube(1, 0, -1)


def test_cube_round_always_lands_on_the_lattice():
    for i in range(-20, 21):
        for j in range(-20, 21):
            fx = i / 7
            fz = j / 5
            fy = -fx - fz
            cube = cube_round(fx, fy, fz)
            assert cube.x + cube.y + cube.z == 0
            assert abs(cube.x - fx) <= 1
            assert abs(cube.y - fy) <= 1
            assert abs(cube.z - fz) <= 1


def test_axial_round_and_lerp():
    assert axial_round(0.9, 0.1) == Axial(1, 0)
    assert cube_lerp(Cube.ORIGIN, Cube(2, -2, 0), 0.5) == (1.0, -1.0, 0.0)


def test_axial_to_offset_rejects_non_layouts():
    with pytest.raises(InvalidCoordinateError):
        axial_to_offset(Axial(0, 0), "odd_r")  # type: ignore[arg-type]
    with pytest.raises(InvalidCoordinateError):
        axial_to_offset(Axial(0, 0), DoubleLayout.DOUBLED_WIDTH)  # type: ignore[arg-type]
