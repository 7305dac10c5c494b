from __future__ import annotations

import pytest

from cubecore.geometry import LAYER_SIDES, face_ring_coords, layer_coords, layer_length, ring_length
from cubecore.models import Axis, FaceElement

SIZES = [1, 2, 3, 4, 5]


def _cubie_position(face: FaceElement, row: int, col: int, size: int) -> tuple[int, int, int]:
    """Position (x right, y up, z towards the viewer) of the cubie carrying a cell."""
    top = size - 1
    if face is FaceElement.FRONT:
        return col, top - row, top
    if face is FaceElement.BACK:
        return top - col, top - row, 0
    if face is FaceElement.LEFT:
        return 0, top - row, col
    if face is FaceElement.RIGHT:
        return top, top - row, top - col
    if face is FaceElement.TOP:
        return col, top, row
    if face is FaceElement.BOTTOM:
        return col, 0, top - row
    raise AssertionError(f"unexpected face {face}")


def test_every_axis_has_four_sides_excluding_its_own_faces() -> None:
    for axis, sides in LAYER_SIDES.items():
        faces = [side.face for side in sides]
        assert len(set(faces)) == 4
        assert axis.positive_face not in faces
        assert axis.negative_face not in faces


@pytest.mark.parametrize("size", SIZES)
@pytest.mark.parametrize("axis", list(Axis))
def test_layer_cells_are_distinct_and_partition_side_faces(axis: Axis, size: int) -> None:
    seen: set[tuple[FaceElement, int, int]] = set()
    for depth in range(size):
        ring = [layer_coords(axis, pos, depth, size) for pos in range(layer_length(size))]
        assert len(set(ring)) == layer_length(size)
        assert not seen & set(ring), f"depth {depth} overlaps another depth"
        seen |= set(ring)

        for pos, (face, row, col) in enumerate(ring):
            assert face is LAYER_SIDES[axis][pos // size].face
            assert 0 <= row < size and 0 <= col < size

    side_faces = {side.face for side in LAYER_SIDES[axis]}
    assert seen == {
        (face, row, col) for face in side_faces for row in range(size) for col in range(size)
    }


@pytest.mark.parametrize("size", SIZES)
@pytest.mark.parametrize("axis", list(Axis))
def test_layer_lies_in_one_plane_at_its_depth(axis: Axis, size: int) -> None:
    for depth in range(size):
        for pos in range(layer_length(size)):
            cubie = _cubie_position(*layer_coords(axis, pos, depth, size), size)
            # Depth is measured from the positive face of the axis.
            assert cubie[axis] == size - 1 - depth


@pytest.mark.parametrize("size", SIZES)
@pytest.mark.parametrize("axis", list(Axis))
def test_consecutive_layer_positions_are_neighbours(axis: Axis, size: int) -> None:
    length = layer_length(size)
    for depth in range(size):
        for pos in range(length):
            here = _cubie_position(*layer_coords(axis, pos, depth, size), size)
            there = _cubie_position(*layer_coords(axis, pos + 1, depth, size), size)
            distance = sum(abs(a - b) for a, b in zip(here, there))
            if (pos + 1) % size == 0:
                # Crossing to the next side stays on the same corner cubie.
                assert distance == 0
            else:
                assert distance == 1


def test_known_layer_entries_for_size_three() -> None:
    assert layer_coords(Axis.X, 0, 0, 3) == (FaceElement.TOP, 2, 2)
    assert layer_coords(Axis.X, 3, 0, 3) == (FaceElement.BACK, 0, 0)
    assert layer_coords(Axis.X, 6, 0, 3) == (FaceElement.BOTTOM, 2, 2)
    assert layer_coords(Axis.X, 9, 0, 3) == (FaceElement.FRONT, 2, 2)
    assert layer_coords(Axis.Y, 0, 0, 3) == (FaceElement.FRONT, 0, 2)
    assert layer_coords(Axis.Y, 4, 0, 3) == (FaceElement.LEFT, 0, 1)
    assert layer_coords(Axis.Z, 5, 1, 3) == (FaceElement.BOTTOM, 1, 0)
    assert layer_coords(Axis.Z, 11, 1, 3) == (FaceElement.TOP, 1, 2)


@pytest.mark.parametrize("axis", list(Axis))
def test_layer_positions_wrap(axis: Axis) -> None:
    size = 4
    length = layer_length(size)
    for pos in range(length):
        expected = layer_coords(axis, pos, 1, size)
        assert layer_coords(axis, pos + length, 1, size) == expected
        assert layer_coords(axis, pos - length, 1, size) == expected


def test_layer_depth_out_of_range_fails() -> None:
    with pytest.raises(ValueError, match="depth"):
        layer_coords(Axis.X, 0, 3, 3)
    with pytest.raises(ValueError, match="depth"):
        layer_coords(Axis.Y, 0, -1, 3)


def test_face_ring_walks_clockwise_from_top_left() -> None:
    ring = [face_ring_coords(pos, 0, 3) for pos in range(ring_length(0, 3))]
    assert ring == [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2), (2, 1), (2, 0), (1, 0)]


def test_inner_face_ring_of_even_face() -> None:
    ring = [face_ring_coords(pos, 1, 4) for pos in range(ring_length(1, 4))]
    assert ring == [(1, 1), (1, 2), (2, 2), (2, 1)]


def test_face_ring_positions_wrap() -> None:
    assert face_ring_coords(-1, 0, 3) == (1, 0)
    assert face_ring_coords(8, 0, 3) == (0, 0)


@pytest.mark.parametrize("size", [2, 3, 4, 5, 6])
def test_face_rings_cover_the_face_once(size: int) -> None:
    covered: list[tuple[int, int]] = []
    for padding in range(size // 2):
        covered.extend(face_ring_coords(pos, padding, size) for pos in range(ring_length(padding, size)))

    assert len(covered) == len(set(covered))
    expected = {(row, col) for row in range(size) for col in range(size)}
    if size % 2:
        expected.discard((size // 2, size // 2))
    assert set(covered) == expected


def test_face_ring_without_cells_fails() -> None:
    with pytest.raises(ValueError, match="padding"):
        face_ring_coords(0, 1, 3)
    with pytest.raises(ValueError, match="padding"):
        face_ring_coords(0, -1, 3)
