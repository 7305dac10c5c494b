from __future__ import annotations

import math
from typing import Callable, TypeVar

T = TypeVar("T")


def positive_mod(numerator: int, denominator: int) -> int:
    """Returns numerator mod denominator normalized into [0, denominator)."""
    if denominator <= 0:
        raise ValueError("denominator must be > 0")
    # Python's % already follows the sign of the denominator.
    return numerator % denominator


def positive_fmod(numerator: float, denominator: float) -> float:
    if denominator <= 0:
        raise ValueError("denominator must be > 0")
    module = math.fmod(numerator, denominator)
    if module < 0:
        module += denominator
    # fmod of a tiny negative value can round up to the denominator itself.
    if module >= denominator:
        module = 0.0
    return module


def deg_to_radians(angle: float) -> float:
    return angle * math.pi / 180.0


def normalize_angle(angle: float, signed: bool = False) -> float:
    """Wraps an angle in radians into [0, 2π), or into [-π, π) when signed."""
    if signed:
        return positive_fmod(angle + math.pi, 2 * math.pi) - math.pi
    return positive_fmod(angle, 2 * math.pi)


def rotate_elements(
    offset: int,
    size: int,
    get: Callable[[int], T],
    set_: Callable[[int, T], None],
) -> None:
    """
    Rotates a sequence of `size` elements seen only through `get`/`set_`.

    The element read at position p ends up at position p - offset, so a
    positive offset rotates to the left. Positions passed to the accessors are
    not wrapped: a negative offset walks negative positions, and the accessors
    are expected to map them back into range.
    """
    if size < 0:
        raise ValueError("size must be >= 0")
    if abs(offset) > size:
        raise ValueError(f"offset {offset} exceeds sequence size {size}")
    if offset == 0:
        return

    step = 1 if offset > 0 else -1
    start = 0 if offset > 0 else 1
    count = abs(offset)

    saved = [get((start + i) * step) for i in range(count)]
    for i in range(size - count):
        set_((start + i) * step, get((start + i + count) * step))
    for i, value in enumerate(saved):
        set_((start + size - count + i) * step, value)
