#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from cubecore.config import CubeConfig, configure_logging
from cubecore.cube import CubeCoordinateError, RubikCube
from cubecore.formatting import parse_clockwise, parse_face
from cubecore.models import Rotation


def parse_rotation(raw: str) -> Rotation:
    parts = raw.strip().split(":")
    if len(parts) not in (2, 3):
        raise ValueError(f"Rotation '{raw}' must look like face:direction[:depth]")

    depth = 0
    if len(parts) == 3:
        try:
            depth = int(parts[2])
        except ValueError as exc:
            raise ValueError(f"Rotation '{raw}' has a non-integer depth") from exc

    return Rotation(face=parse_face(parts[0]), clockwise=parse_clockwise(parts[1]), depth=depth)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Apply layer rotations to a solved cube and print the result."
    )
    parser.add_argument(
        "rotations",
        nargs="*",
        help="Rotations as face:direction[:depth], e.g. left:cw:0 or U:ccw:1",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=None,
        help="Cube size N (default: $CUBECORE_SIZE or 3)",
    )
    parser.add_argument("--state", action="store_true", help="Print the one-line state string")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: $CUBECORE_LOG_LEVEL or WARNING)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        defaults = CubeConfig.from_env()
        config = CubeConfig(
            size=defaults.size if args.size is None else args.size,
            log_level=args.log_level or defaults.log_level,
        )
        configure_logging(config.log_level)
        rotations = [parse_rotation(raw) for raw in args.rotations]
        cube = RubikCube(config.size)
        cube.apply(rotations)
    except (ValueError, CubeCoordinateError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.state:
        print(cube.state_string())
    else:
        print(cube)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
