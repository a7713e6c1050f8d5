"""
3D Vector Math

A Vec3 is an ordered triple (x, y, z). It can stand for a point in space
or a free vector (a displacement); the math doesn't care which.

Conventions used throughout:
- Vectors are IMMUTABLE. Every operation returns a new Vec3 (or a number).
- Missing components are zero: Vec3(1, 2) is (1, 2, 0), new() is the origin.
- Angles are radians.
- Anything that needs a direction (unit vector, angles) raises
  UndefinedDirection for a zero-length vector instead of returning NaN.

Operands may be a Vec3 or any 3-element sequence (tuple, list, numpy
array), so quick calls like v.plus((0, 2, 1)) work without wrapping.

Note on dot(): an older implementation of this API summed x*x' + y*y' + y*y'
(y term twice, z term dropped). That is a bug; dot() here is the standard
x*x' + y*y' + z*z' and tests pin it.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Tuple, Union
import logging
import math
import numpy as np

from .errors import UndefinedDirection

logger = logging.getLogger(__name__)

# Anything that can be read as three coordinates
VecLike = Union["Vec3", Sequence[float], np.ndarray]


def _clamp_unit(value: float) -> float:
    """Clamp a cosine into [-1, 1] so acos never sees rounding overshoot."""
    return max(-1.0, min(1.0, value))


@dataclass(frozen=True)
class Vec3:
    """
    A 3D vector (or point). Frozen, so it is hashable and safe to share.

    Components default to 0, matching the zero-fill rule of new().
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    # ------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------

    @classmethod
    def new(cls, x: Optional[float] = 0.0, y: Optional[float] = 0.0, z: Optional[float] = 0.0) -> Vec3:
        """Build a vector; omitted or None components become 0."""
        return cls(
            0.0 if x is None else x,
            0.0 if y is None else y,
            0.0 if z is None else z,
        )

    @classmethod
    def from_iterable(cls, values: Iterable[Optional[float]]) -> Vec3:
        """
        Build from up to three values, zero-filling the rest.

        Raises:
            ValueError: more than three values were given
        """
        if isinstance(values, cls):
            return values
        if isinstance(values, np.ndarray):
            return cls.from_array(values)
        coords = list(values)
        if len(coords) > 3:
            raise ValueError(f"Vec3 takes at most 3 components, got {len(coords)}")
        return cls.new(*coords)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Vec3:
        """Create from numpy array (1 to 3 elements)."""
        flat = np.asarray(arr, dtype=float).ravel()
        if flat.size > 3:
            raise ValueError(f"Vec3 takes at most 3 components, got {flat.size}")
        return cls.new(*(float(v) for v in flat))

    @classmethod
    def from_dict(cls, data: dict) -> Vec3:
        """Inverse of to_dict(); missing keys are 0."""
        return cls.new(data.get("x"), data.get("y"), data.get("z"))

    @classmethod
    def zero(cls) -> Vec3:
        """Origin / zero vector."""
        return cls(0.0, 0.0, 0.0)

    # ------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------

    def plus(self, *others: VecLike) -> Vec3:
        """
        Add any number of vectors to this one, left to right.

        With no operands, returns self.
        """
        if not others:
            return self
        x, y, z = self.x, self.y, self.z
        for other in others:
            o = Vec3.from_iterable(other)
            x, y, z = x + o.x, y + o.y, z + o.z
        return Vec3(x, y, z)

    def minus(self, *others: VecLike) -> Vec3:
        """
        Subtract each operand in turn: self - v1 - v2 - ...

        In exact arithmetic this equals self - (v1 + v2 + ...).
        """
        x, y, z = self.x, self.y, self.z
        for other in others:
            o = Vec3.from_iterable(other)
            x, y, z = x - o.x, y - o.y, z - o.z
        return Vec3(x, y, z)

    def scalar_mult(self, factor: float) -> Vec3:
        """Scale every component by factor."""
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    # Python operators map onto the named operations
    def __add__(self, other: VecLike) -> Vec3:
        return self.plus(other)

    def __sub__(self, other: VecLike) -> Vec3:
        return self.minus(other)

    def __mul__(self, scalar: float) -> Vec3:
        return self.scalar_mult(scalar)

    def __rmul__(self, scalar: float) -> Vec3:
        return self.scalar_mult(scalar)

    def __truediv__(self, scalar: float) -> Vec3:
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    # ------------------------------------------------------------
    # Products
    # ------------------------------------------------------------

    def dot(self, other: VecLike) -> float:
        """Dot product: x*x' + y*y' + z*z'."""
        o = Vec3.from_iterable(other)
        return self.x * o.x + self.y * o.y + self.z * o.z

    def cross(self, other: VecLike) -> Vec3:
        """Cross product self x other (right-hand rule)."""
        o = Vec3.from_iterable(other)
        return Vec3(
            self.y * o.z - self.z * o.y,
            self.z * o.x - self.x * o.z,
            self.x * o.y - self.y * o.x,
        )

    # ------------------------------------------------------------
    # Magnitude and direction
    # ------------------------------------------------------------

    def length(self) -> float:
        """Euclidean norm. 0 only for the zero vector."""
        # hypot scales internally: no overflow near 1e154, no underflow near 1e-162
        return math.hypot(self.x, self.y, self.z)

    def unit_vector(self) -> Vec3:
        """
        Same direction, length 1.

        Raises:
            UndefinedDirection: self is the zero vector
        """
        mag = self.length()
        if mag == 0:
            logger.debug("unit_vector requested for zero-length vector %r", self)
            raise UndefinedDirection("unit_vector", self)
        return Vec3(self.x / mag, self.y / mag, self.z / mag)

    def direction_angles(self) -> Tuple[float, float, float]:
        """
        Angles (radians) between this vector and the x, y and z axes.

        These are the arccosines of the unit vector's components, so
        cos²a + cos²b + cos²c = 1.
        """
        try:
            unit = self.unit_vector()
        except UndefinedDirection as e:
            raise UndefinedDirection("direction_angles", self) from e
        return (
            math.acos(_clamp_unit(unit.x)),
            math.acos(_clamp_unit(unit.y)),
            math.acos(_clamp_unit(unit.z)),
        )

    def planar_angles(self) -> Tuple[float, float, float]:
        """
        Counter-clockwise angle in each primary plane, measured from the
        first-named axis: (xy, xz, yz) = (atan2(y,x), atan2(z,x), atan2(z,y)).

        Each is in [-pi, pi]; a projection that is (0, 0) gives 0.
        """
        return (
            math.atan2(self.y, self.x),
            math.atan2(self.z, self.x),
            math.atan2(self.z, self.y),
        )

    def angle_xy(self) -> float:
        """Just the xy planar angle, atan2(y, x)."""
        return math.atan2(self.y, self.x)

    def inner_angle(self, other: VecLike) -> float:
        """
        Unsigned angle between two vectors, in [0, pi].

        Raises:
            UndefinedDirection: either vector has zero length
        """
        o = Vec3.from_iterable(other)
        m_self = self.length()
        m_other = o.length()
        if m_self == 0 or m_other == 0:
            zero = self if m_self == 0 else o
            logger.debug("inner_angle requested with zero-length vector %r", zero)
            raise UndefinedDirection("inner_angle", zero)
        # Compare unit vectors so huge or tiny magnitudes cannot overflow the ratio
        cos_angle = self.unit_vector().dot(o.unit_vector())
        return math.acos(_clamp_unit(cos_angle))

    # ------------------------------------------------------------
    # Point-based helpers, called on the first point
    # ------------------------------------------------------------

    def unit_vector_points(self, other: VecLike) -> Vec3:
        """Unit vector pointing from this point to other."""
        from .points import unit_vector_points
        return unit_vector_points(self, other)

    def inner_angle_points(self, a: VecLike, b: VecLike) -> float:
        """Angle at this point (the vertex) between rays to a and b."""
        from .points import inner_angle_points
        return inner_angle_points(self, a, b)

    def plane_unit_normal(self, a: VecLike, b: VecLike) -> Vec3:
        """Unit normal of the plane through this point (the vertex), a and b."""
        from .points import plane_unit_normal
        return plane_unit_normal(self, a, b)

    def tri_area_points(self, b: VecLike, c: VecLike) -> float:
        """Area of the triangle (self, b, c)."""
        from .points import tri_area_points
        return tri_area_points(self, b, c)

    # ------------------------------------------------------------
    # Aliases (older method names)
    # ------------------------------------------------------------

    vec_add = plus
    vec_sub = minus
    dot_product = dot
    cross_product = cross
    magnitude = length
    ang = angle_xy

    # ------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------

    def to_array(self) -> np.ndarray:
        """Convert to numpy array for bulk math."""
        return np.array([self.x, self.y, self.z], dtype=float)

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_dict(self) -> dict:
        """For JSON serialization."""
        return {"x": self.x, "y": self.y, "z": self.z}

    def __repr__(self) -> str:
        return f"Vec3({self.x!r}, {self.y!r}, {self.z!r})"


def new(x: Optional[float] = 0.0, y: Optional[float] = 0.0, z: Optional[float] = 0.0) -> Vec3:
    """Module-level constructor; same zero-fill rule as Vec3.new."""
    return Vec3.new(x, y, z)


# Short name for nesting calls: vec(1, 2).cross(vec(0, 0, 1))
vec = new
