"""
Point-based geometry helpers.

These take POSITIONS rather than free vectors and build the free vectors
they need from point differences:

    A ------> B        B - A is the displacement from A to B

Orientation follows the right-hand rule and the ORDER of the arguments:
with the vertex at the origin, a on the x-axis and b on the y-axis, the
plane normal is +z.
"""

from __future__ import annotations
import logging

from .errors import UndefinedDirection
from .vector import Vec3, VecLike

logger = logging.getLogger(__name__)


def unit_vector_points(a: VecLike, b: VecLike) -> Vec3:
    """
    Unit vector pointing from point a to point b.

    Raises:
        UndefinedDirection: a and b are the same point
    """
    a = Vec3.from_iterable(a)
    b = Vec3.from_iterable(b)
    try:
        return b.minus(a).unit_vector()
    except UndefinedDirection as e:
        raise UndefinedDirection(
            "unit_vector_points", e.vector,
            f"unit_vector_points: points {tuple(a)} and {tuple(b)} coincide",
        ) from e


def inner_angle_points(vertex: VecLike, a: VecLike, b: VecLike) -> float:
    """
    Angle (radians, [0, pi]) at vertex between the rays vertex->a and vertex->b.

    Raises:
        UndefinedDirection: a or b coincides with the vertex
    """
    try:
        lead = unit_vector_points(vertex, a)
        tail = unit_vector_points(vertex, b)
    except UndefinedDirection as e:
        raise UndefinedDirection(
            "inner_angle_points", e.vector,
            "inner_angle_points: an endpoint coincides with the vertex",
        ) from e
    return lead.inner_angle(tail)


def plane_unit_normal(vertex: VecLike, a: VecLike, b: VecLike) -> Vec3:
    """
    Unit normal to the plane through vertex, a and b.

    Sense is (a - vertex) x (b - vertex).

    Raises:
        UndefinedDirection: the three points are collinear
    """
    vertex = Vec3.from_iterable(vertex)
    lead = Vec3.from_iterable(a).minus(vertex)
    tail = Vec3.from_iterable(b).minus(vertex)
    normal = lead.cross(tail)
    if normal.length() == 0:
        logger.debug("plane_unit_normal: collinear points %r, %r, %r", vertex, a, b)
        raise UndefinedDirection(
            "plane_unit_normal", normal,
            "plane_unit_normal: points are collinear and span no plane",
        )
    return normal.unit_vector()


def tri_area_points(a: VecLike, b: VecLike, c: VecLike) -> float:
    """Area of triangle abc: |(a - b) x (a - c)| / 2. Degenerate triangles give 0."""
    a = Vec3.from_iterable(a)
    lead = a.minus(b)
    tail = a.minus(c)
    return lead.cross(tail).length() / 2
