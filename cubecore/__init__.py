from cubecore.config import CubeConfig, configure_logging
from cubecore.cube import CubeCoordinateError, FaceObjectError, RubikCube
from cubecore.formatting import (
    clockwise_to_string,
    face_element_to_string,
    face_to_string,
    format_cube,
    parse_clockwise,
    parse_face,
    state_string,
)
from cubecore.geometry import LAYER_SIDES, LayerSide, RowColRule, face_ring_coords, layer_coords
from cubecore.models import Axis, Clockwise, FaceElement, Rotation
from cubecore.service import CubeService
from cubecore.utils import normalize_angle, positive_fmod, positive_mod, rotate_elements

__all__ = [
    "Axis",
    "Clockwise",
    "CubeConfig",
    "CubeCoordinateError",
    "CubeService",
    "FaceElement",
    "FaceObjectError",
    "LAYER_SIDES",
    "LayerSide",
    "Rotation",
    "RowColRule",
    "RubikCube",
    "clockwise_to_string",
    "configure_logging",
    "face_element_to_string",
    "face_ring_coords",
    "face_to_string",
    "format_cube",
    "layer_coords",
    "normalize_angle",
    "parse_clockwise",
    "parse_face",
    "positive_fmod",
    "positive_mod",
    "rotate_elements",
    "state_string",
]
