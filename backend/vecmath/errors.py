"""
Errors raised by vecmath.

There is only one failure mode in vector math worth reporting: asking for a
direction when there is none. A zero-length vector has no unit vector, no
direction angles and no angle to anything else; three collinear points span
no plane. Everything else is a total function over real numbers.
"""

from __future__ import annotations
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .vector import Vec3


class UndefinedDirection(ValueError):
    """
    A direction was requested for a zero-length vector.

    Subclasses ValueError so callers already guarding against math domain
    errors catch it too.

    Attributes:
        operation: Name of the operation that failed (e.g. "unit_vector")
        vector: The zero-length vector that triggered the failure
    """

    def __init__(self, operation: str, vector: Optional[Vec3] = None, message: str = ""):
        self.operation = operation
        self.vector = vector
        if not message:
            message = f"{operation}: zero-length vector has no direction"
            if vector is not None:
                message = f"{operation}: zero-length vector {tuple(vector)} has no direction"
        super().__init__(message)
