from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Iterable

from cubecore.config import CubeConfig
from cubecore.cube import RubikCube
from cubecore.formatting import face_element_to_string
from cubecore.models import Clockwise, FaceElement, Rotation

logger = logging.getLogger(__name__)


@dataclass
class CubeService:
    """Owns one cube and serializes every access to it for multi-threaded hosts."""

    cube: RubikCube
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    @classmethod
    def create(cls, config: CubeConfig | None = None) -> "CubeService":
        resolved = config or CubeConfig.from_env()
        logger.info("Creating cube service with size %d", resolved.size)
        return cls(cube=RubikCube(resolved.size))

    def rotate(self, face: FaceElement, clockwise: Clockwise, depth: int = 0) -> dict[str, Any]:
        rotation = Rotation(face=face, clockwise=clockwise, depth=depth)
        with self._lock:
            self.cube.rotate_face(rotation.face, rotation.clockwise, rotation.depth)
            logger.info("Applied rotation %s", rotation)
            return self._snapshot_locked()

    def apply(self, rotations: Iterable[Rotation]) -> dict[str, Any]:
        pending = list(rotations)
        with self._lock:
            # Apply to a copy so a bad rotation leaves the served cube untouched.
            staged = self.cube.copy()
            staged.apply(pending)
            self.cube = staged
            logger.info("Applied %d rotations", len(pending))
            return self._snapshot_locked()

    def reset(self, size: int | None = None) -> dict[str, Any]:
        with self._lock:
            self.cube = RubikCube(self.cube.size if size is None else size)
            logger.info("Reset cube to solved state with size %d", self.cube.size)
            return self._snapshot_locked()

    def snapshot(self) -> dict[str, Any]:
        with self._lock:
            return self._snapshot_locked()

    def face_element(self, face: FaceElement, row: int, col: int) -> str:
        with self._lock:
            return face_element_to_string(self.cube.get_face_element(face, row, col))

    def _snapshot_locked(self) -> dict[str, Any]:
        return {
            "size": self.cube.size,
            "solved": self.cube.is_solved(),
            "state": self.cube.state_string(),
            "faces": {
                face.label: [
                    [face_element_to_string(element) for element in row]
                    for row in self.cube.face_grid(face)
                ]
                for face in FaceElement.real_faces()
            },
        }
