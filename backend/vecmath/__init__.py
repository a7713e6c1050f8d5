"""
vecmath - 3D vector arithmetic.

This package provides:
- Vec3: immutable 3D vector with arithmetic, products and angles
- Point helpers: unit vector between points, vertex angle, plane normal,
  triangle area
- UndefinedDirection: raised when a zero-length vector needs a direction
"""

from .vector import Vec3, VecLike, new, vec
from .points import (
    unit_vector_points,
    inner_angle_points,
    plane_unit_normal,
    tri_area_points,
)
from .errors import UndefinedDirection
from .config import ServerConfig

__version__ = "0.1.0"

__all__ = [
    "Vec3",
    "VecLike",
    "new",
    "vec",
    "unit_vector_points",
    "inner_angle_points",
    "plane_unit_normal",
    "tri_area_points",
    "UndefinedDirection",
    "ServerConfig",
]
