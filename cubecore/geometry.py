from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cubecore.models import Axis, FaceElement
from cubecore.utils import positive_mod


class RowColRule(Enum):
    """How a layer side turns (position-in-side, depth) into a row or column index."""

    DEPTH = "depth"
    NEG_DEPTH = "neg_depth"
    POS = "pos"
    NEG_POS = "neg_pos"

    def resolve(self, pos: int, depth: int, size: int) -> int:
        if self is RowColRule.DEPTH:
            return depth
        if self is RowColRule.NEG_DEPTH:
            return size - 1 - depth
        if self is RowColRule.POS:
            return pos
        return size - 1 - pos


@dataclass(frozen=True)
class LayerSide:
    face: FaceElement
    row: RowColRule
    col: RowColRule


_D = RowColRule.DEPTH
_ND = RowColRule.NEG_DEPTH
_P = RowColRule.POS
_NP = RowColRule.NEG_POS

# Sides of a layer, clockwise as seen from the positive face of the axis
# (RIGHT for X, TOP for Y, FRONT for Z). Depth is measured from that face.
LAYER_SIDES: dict[Axis, tuple[LayerSide, LayerSide, LayerSide, LayerSide]] = {
    Axis.X: (
        LayerSide(FaceElement.TOP, row=_NP, col=_ND),
        LayerSide(FaceElement.BACK, row=_P, col=_D),
        LayerSide(FaceElement.BOTTOM, row=_NP, col=_ND),
        LayerSide(FaceElement.FRONT, row=_NP, col=_ND),
    ),
    Axis.Y: (
        LayerSide(FaceElement.FRONT, row=_D, col=_NP),
        LayerSide(FaceElement.LEFT, row=_D, col=_NP),
        LayerSide(FaceElement.BACK, row=_D, col=_NP),
        LayerSide(FaceElement.RIGHT, row=_D, col=_NP),
    ),
    Axis.Z: (
        LayerSide(FaceElement.RIGHT, row=_P, col=_D),
        LayerSide(FaceElement.BOTTOM, row=_D, col=_NP),
        LayerSide(FaceElement.LEFT, row=_NP, col=_ND),
        LayerSide(FaceElement.TOP, row=_ND, col=_P),
    ),
}


def layer_length(size: int) -> int:
    return 4 * size


def layer_coords(axis: Axis, element_pos: int, depth: int, size: int) -> tuple[FaceElement, int, int]:
    """
    Maps a position on the ring of a layer to the cell of a face grid.

    `element_pos` is wrapped into [0, 4 * size); every `size` consecutive
    positions belong to one side of the layer, in the order of LAYER_SIDES.
    """
    if size < 1:
        raise ValueError("size must be >= 1")
    if not 0 <= depth < size:
        raise ValueError(f"depth {depth} out of range for cube size {size}")

    pos = positive_mod(element_pos, layer_length(size))
    side = LAYER_SIDES[Axis(axis)][pos // size]
    side_pos = pos % size
    return (
        side.face,
        side.row.resolve(side_pos, depth, size),
        side.col.resolve(side_pos, depth, size),
    )


def ring_length(padding: int, size: int) -> int:
    return 4 * (size - 1 - 2 * padding)


def face_ring_coords(element_pos: int, padding: int, size: int) -> tuple[int, int]:
    """
    Maps a position on the square ring inset by `padding` inside one face grid.

    The walk is clockwise from the ring's top-left corner: top edge left to
    right, right edge downwards, bottom edge right to left, left edge upwards.
    """
    edge = size - 1 - 2 * padding
    if padding < 0 or edge <= 0:
        raise ValueError(f"padding {padding} has no ring on a face of size {size}")

    low = padding
    high = size - 1 - padding
    pos = positive_mod(element_pos, 4 * edge)
    if pos < edge:
        return low, low + pos
    if pos < 2 * edge:
        return low + (pos - edge), high
    if pos < 3 * edge:
        return high, high - (pos - 2 * edge)
    return high - (pos - 3 * edge), low
