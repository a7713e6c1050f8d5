"""
API Server - vecmath over HTTP

Exposes the vector operations as JSON endpoints so tools that don't
speak Python (UIs, scripts in other languages) can use the same math:

1. POST /vectors/{operation}: operations on one vector (plus operands)
2. POST /points/{operation}:  point-based geometry helpers
3. GET  /operations:          what's available

Every endpoint is stateless: request in, result out.
"""

from __future__ import annotations
import logging
import math
from contextlib import asynccontextmanager
from typing import Any, Callable, Dict, List, Optional, Tuple

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from vecmath import (
    Vec3,
    ServerConfig,
    UndefinedDirection,
    unit_vector_points,
    inner_angle_points,
    plane_unit_normal,
    tri_area_points,
    __version__,
)

logger = logging.getLogger(__name__)

config = ServerConfig()


# ============================================================
# Operation tables
# ============================================================

# Operand shapes for per-vector operations
NO_OPERANDS = "none"
ONE_OPERAND = "one"
ANY_OPERANDS = "many"
FACTOR = "factor"

# name -> (operand shape, description)
VECTOR_OPERATIONS: Dict[str, Tuple[str, str]] = {
    "plus": (ANY_OPERANDS, "Componentwise sum of the vector and all operands"),
    "minus": (ANY_OPERANDS, "Subtract each operand in turn from the vector"),
    "scalar_mult": (FACTOR, "Multiply each component by factor"),
    "dot": (ONE_OPERAND, "Dot product with one operand"),
    "cross": (ONE_OPERAND, "Cross product with one operand"),
    "length": (NO_OPERANDS, "Euclidean length"),
    "unit_vector": (NO_OPERANDS, "Vector scaled to length 1"),
    "direction_angles": (NO_OPERANDS, "Angles to the x, y and z axes"),
    "planar_angles": (NO_OPERANDS, "Angles in the xy, xz and yz planes"),
    "angle_xy": (NO_OPERANDS, "Angle in the xy plane"),
    "inner_angle": (ONE_OPERAND, "Unsigned angle to one operand"),
}

# name -> (function, number of points, description)
POINT_OPERATIONS: Dict[str, Tuple[Callable[..., Any], int, str]] = {
    "unit_vector_points": (unit_vector_points, 2, "Unit vector from the first point to the second"),
    "inner_angle_points": (inner_angle_points, 3, "Angle at the first point between rays to the other two"),
    "plane_unit_normal": (plane_unit_normal, 3, "Unit normal of the plane through three points"),
    "tri_area_points": (tri_area_points, 3, "Area of the triangle with three vertices"),
}

# Operations whose scalar results are angles (converted when degrees=true)
ANGLE_OPERATIONS = {
    "direction_angles",
    "planar_angles",
    "angle_xy",
    "inner_angle",
    "inner_angle_points",
}


# ============================================================
# API Models
# ============================================================

class Vec3Model(BaseModel):
    """3D vector for API. Omitted components are 0."""
    x: float
    y: float = 0.0
    z: float = 0.0

    def to_vec(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)


class VectorOperationRequest(BaseModel):
    """Body for /vectors/{operation}."""
    vector: Vec3Model
    others: List[Vec3Model] = []
    factor: Optional[float] = None


class PointOperationRequest(BaseModel):
    """Body for /points/{operation}."""
    points: List[Vec3Model]


# ============================================================
# Helpers
# ============================================================

def serialize_result(operation: str, result: Any, degrees: bool = False) -> Any:
    """
    Turn a library result into JSON-friendly data.

    Raises:
        HTTPException: the result is not finite (422); JSON has no inf/nan
    """
    if isinstance(result, Vec3):
        return {key: serialize_result(operation, value) for key, value in result.to_dict().items()}
    if isinstance(result, tuple):
        return [serialize_result(operation, value, degrees) for value in result]

    value = float(result)
    if not math.isfinite(value):
        logger.warning("Non-finite result from %s: %s", operation, value)
        raise HTTPException(
            status_code=422,
            detail=f"{operation}: result is not finite ({value}); inputs are out of floating-point range",
        )
    if degrees and operation in ANGLE_OPERATIONS:
        value = math.degrees(value)
    if config.result_precision is not None:
        value = round(value, config.result_precision)
    return value


def run_vector_operation(operation: str, request: VectorOperationRequest) -> Any:
    """
    Validate operands for a per-vector operation and call it.

    Raises:
        HTTPException: unknown operation (404) or wrong operands (400)
        UndefinedDirection: from the library, handled by the caller
    """
    if operation not in VECTOR_OPERATIONS:
        raise HTTPException(status_code=404, detail=f"Unknown operation: {operation}")

    shape, _ = VECTOR_OPERATIONS[operation]
    vector = request.vector.to_vec()
    others = [o.to_vec() for o in request.others]
    method = getattr(vector, operation)

    if shape == FACTOR:
        if request.factor is None:
            raise HTTPException(status_code=400, detail=f"{operation} requires 'factor'")
        return method(request.factor)
    if shape == ANY_OPERANDS:
        return method(*others)
    if shape == ONE_OPERAND:
        if len(others) != 1:
            raise HTTPException(
                status_code=400,
                detail=f"{operation} takes exactly 1 operand, got {len(others)}",
            )
        return method(others[0])
    if others:
        raise HTTPException(status_code=400, detail=f"{operation} takes no operands")
    return method()


def run_point_operation(operation: str, request: PointOperationRequest) -> Any:
    """Validate the point count for a point helper and call it."""
    if operation not in POINT_OPERATIONS:
        raise HTTPException(status_code=404, detail=f"Unknown operation: {operation}")

    func, num_points, _ = POINT_OPERATIONS[operation]
    if len(request.points) != num_points:
        raise HTTPException(
            status_code=400,
            detail=f"{operation} takes {num_points} points, got {len(request.points)}",
        )
    return func(*(p.to_vec() for p in request.points))


# ============================================================
# App
# ============================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown logic."""
    logger.info("vecmath server starting (version %s)", __version__)
    yield
    logger.info("vecmath server shutting down")


app = FastAPI(
    title="vecmath",
    description="3D vector arithmetic over HTTP",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================
# REST Endpoints
# ============================================================

@app.get("/")
async def root():
    return {
        "name": "vecmath",
        "version": __version__,
        "status": "ready",
    }


@app.get("/operations")
async def list_operations():
    """List available operations."""
    return {
        "vectors": [
            {"id": name, "operands": shape, "description": description}
            for name, (shape, description) in VECTOR_OPERATIONS.items()
        ],
        "points": [
            {"id": name, "num_points": num_points, "description": description}
            for name, (_, num_points, description) in POINT_OPERATIONS.items()
        ],
    }


@app.post("/vectors/{operation}")
async def vector_operation(operation: str, request: VectorOperationRequest, degrees: bool = False):
    """
    Apply a per-vector operation.

    Angles are radians unless ?degrees=true.
    """
    try:
        result = run_vector_operation(operation, request)
    except UndefinedDirection as e:
        logger.warning("Degenerate input to %s: %s", operation, e)
        raise HTTPException(status_code=422, detail=str(e))
    return {"operation": operation, "result": serialize_result(operation, result, degrees)}


@app.post("/points/{operation}")
async def point_operation(operation: str, request: PointOperationRequest, degrees: bool = False):
    """Apply a point-based helper."""
    try:
        result = run_point_operation(operation, request)
    except UndefinedDirection as e:
        logger.warning("Degenerate input to %s: %s", operation, e)
        raise HTTPException(status_code=422, detail=str(e))
    return {"operation": operation, "result": serialize_result(operation, result, degrees)}


# ============================================================
# Main entry point
# ============================================================

if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=config.log_level)
    uvicorn.run(app, host=config.host, port=config.port)
