# dga_diagnostics/utils/geometry.py

import numpy as np
from typing import Tuple

def polygon_area_centroid(vertices: np.ndarray, epsilon: float = 1e-9) -> Tuple[float, np.ndarray]:
    """
    Signed area and centroid of a closed polygon (shoelace formula).

    Args:
        vertices: (n, 2) array of polygon vertices in order; the last vertex connects back to the first
        epsilon: areas with |A| below this are treated as degenerate

    Returns:
        (signed area, centroid). A degenerate polygon has its centroid at the origin.
    """
    vertices = np.asarray(vertices, dtype=float)
    x, y = vertices[:, 0], vertices[:, 1]
    x_next, y_next = np.roll(x, -1), np.roll(y, -1)

    cross = x * y_next - x_next * y
    area = 0.5 * np.sum(cross)

    if abs(area) < epsilon:
        return float(area), np.zeros(2)

    cx = np.sum((x + x_next) * cross) / (6.0 * area)
    cy = np.sum((y + y_next) * cross) / (6.0 * area)
    return float(area), np.array([cx, cy])


def polar_angle_deg(x: float, y: float) -> float:
    """Angle of (x, y) counter-clockwise from +x in degrees, normalised to [0, 360)"""
    angle = float(np.degrees(np.arctan2(y, x))) % 360.0
    # -0.0 % 360 and tiny negatives can round up to 360.0
    return 0.0 if angle >= 360.0 else angle
