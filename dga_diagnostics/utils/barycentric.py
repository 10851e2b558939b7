# dga_diagnostics/utils/barycentric.py

import numpy as np
from typing import Iterable, List, NamedTuple, Tuple

from ..schemas import Point

class TriangleVertices(NamedTuple):
    """Cartesian corners of a ternary chart"""
    top: Tuple[float, float]
    right: Tuple[float, float]
    left: Tuple[float, float]


def triangle_vertices(width: float = 360, height: float = 320, padding: float = 40) -> TriangleVertices:
    """Corners of an upright equilateral-style chart triangle inside a width x height box"""
    return TriangleVertices(
        top=(width / 2, padding),
        right=(width - padding, height - padding),
        left=(padding, height - padding),
    )


def ternary_to_cartesian(pA: float, pB: float, pC: float, vertices: TriangleVertices) -> Point:
    """
    Map ternary percentages to a Cartesian point.

    Args:
        pA: weight of the top vertex (0-100)
        pB: weight of the right vertex (0-100)
        pC: weight of the left vertex (0-100)
        vertices: triangle corners

    Returns:
        pA/100 * top + pB/100 * right + pC/100 * left
    """
    weights = np.array([pA, pB, pC], dtype=float) / 100.0
    corners = np.array([vertices.top, vertices.right, vertices.left], dtype=float)
    x, y = weights @ corners
    return Point(x=float(x), y=float(y))


def ternary_polygon(points: Iterable[Tuple[float, float, float]], vertices: TriangleVertices) -> List[Point]:
    """Map ordered (a, b, c) triples to a closed Cartesian polygon (first vertex repeated last)"""
    coords = [ternary_to_cartesian(a, b, c, vertices) for a, b, c in points]
    if not coords:
        return []
    return coords + [coords[0]]
