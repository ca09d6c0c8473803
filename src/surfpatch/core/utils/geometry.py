#!/usr/bin/env python3
# src/surfpatch/core/utils/geometry.py

"""
Small vector helpers used by the orientation filter and the growth engine.
"""

from typing import Sequence

import numpy as np

from ..domain.exceptions import DegenerateGeometryError

# Vectors are compatible when the angle between them is under 120 degrees
ORIENTATION_COSINE_LIMIT = -0.5


def squared_distance(first: Sequence[float], second: Sequence[float]) -> float:
    """Return the squared cartesian distance between two points."""
    delta = np.asarray(first, dtype=float) - np.asarray(second, dtype=float)
    return float(np.dot(delta, delta))


def subtract(first: Sequence[float], second: Sequence[float]) -> np.ndarray:
    """Return the vector pointing from ``second`` to ``first``."""
    return np.asarray(first, dtype=float) - np.asarray(second, dtype=float)


def dot(first: Sequence[float], second: Sequence[float]) -> float:
    return float(np.dot(np.asarray(first, dtype=float), np.asarray(second, dtype=float)))


def magnitude(vector: Sequence[float]) -> float:
    return float(np.linalg.norm(np.asarray(vector, dtype=float)))


def vector_angle_compatible(
    first: Sequence[float],
    second: Sequence[float],
    cosine_limit: float = ORIENTATION_COSINE_LIMIT,
) -> bool:
    """
    Check whether two vectors point in broadly the same direction.

    Args:
        first: First 3-vector
        second: Second 3-vector
        cosine_limit: Cosines at or below this value are rejected

    Returns:
        True if the cosine of the angle between the vectors exceeds
        ``cosine_limit`` (angle below 120 degrees by default)

    Raises:
        DegenerateGeometryError: If either vector has zero length
    """
    length_product = magnitude(first) * magnitude(second)
    if length_product == 0.0:
        raise DegenerateGeometryError(
            "Cannot compute the angle between vectors when one has zero length"
        )
    return dot(first, second) / length_product > cosine_limit
