# dga_diagnostics/services/duval_pentagon.py

import logging
import numpy as np
from enum import Enum
from typing import Optional, Tuple

from ..core.config import settings
from ..schemas import PentagonResult, Point
from ..utils.geometry import polar_angle_deg, polygon_area_centroid
from ..utils.validation import SampleLike, sanitize_sample

logger = logging.getLogger(__name__)

class PentagonZone(Enum):
    """Duval Pentagon 1 zones"""
    PD = "PD"   # partial discharge
    S = "S"     # stray gassing
    T1 = "T1"
    T2 = "T2"
    T3 = "T3"
    D1 = "D1"
    D2 = "D2"
    NOT_AVAILABLE = "N/A"
    UNDETERMINED = "Undetermined"

# Axis order is fixed: H2 on top, then counter-clockwise
PENTAGON_AXES: Tuple[Tuple[str, float], ...] = (
    ('H2', 90.0),
    ('C2H6', 162.0),
    ('CH4', 234.0),
    ('C2H4', 306.0),
    ('C2H2', 18.0),
)

# Angular sectors [start, end) in degrees. An approximation of the pentagon's
# irregular zone polygons; D2 wraps through 0.
ZONE_SECTORS: Tuple[Tuple[float, float, PentagonZone], ...] = (
    (0.0, 10.0, PentagonZone.D2),
    (10.0, 80.0, PentagonZone.D1),
    (80.0, 100.0, PentagonZone.PD),
    (100.0, 190.0, PentagonZone.S),
    (190.0, 240.0, PentagonZone.T1),
    (240.0, 280.0, PentagonZone.T2),
    (280.0, 320.0, PentagonZone.T3),
    (320.0, 360.0, PentagonZone.D2),
)


def classify_pentagon_angle(angle: float) -> PentagonZone:
    """Zone for a centroid direction given in degrees (any value, wrapped into [0, 360))"""
    angle = angle % 360.0
    for start, end, zone in ZONE_SECTORS:
        if start <= angle < end:
            return zone
    return PentagonZone.UNDETERMINED


def pentagon_vertices(percentages) -> np.ndarray:
    """Polygon vertices obtained by placing each gas percentage along its axis"""
    angles = np.radians([angle for _, angle in PENTAGON_AXES])
    radii = np.asarray(percentages, dtype=float)
    return np.column_stack((radii * np.cos(angles), radii * np.sin(angles)))


def analyze_pentagon(sample: SampleLike, policy: Optional[str] = None,
                     epsilon: Optional[float] = None) -> PentagonResult:
    """
    Run the Duval Pentagon 1 centroid method on a gas sample.

    The five gas percentages are laid out on fixed axes, the centroid of the
    resulting polygon is computed and its polar angle picks the zone. The
    centroid is returned unscaled, centred on the origin, y pointing up.

    Args:
        sample: GasSample or mapping of gas readings (ppm)
        policy: negative reading policy override ("reject" or "clamp")
        epsilon: degenerate area / origin tolerance, defaults to settings.PENTAGON_AREA_EPSILON

    Returns:
        PentagonResult. No point and zone "N/A" when all five gases are zero;
        zone "Undetermined" when the centroid sits on the origin.
    """
    gas = sanitize_sample(sample, policy)
    epsilon = settings.PENTAGON_AREA_EPSILON if epsilon is None else epsilon

    values = np.array([getattr(gas, name) for name, _ in PENTAGON_AXES], dtype=float)
    total = values.sum()
    if total == 0:
        logger.debug("No pentagon gases present, no point to place")
        return PentagonResult(point=None, zone=PentagonZone.NOT_AVAILABLE.value)

    percentages = values / total * 100
    area, centroid = polygon_area_centroid(pentagon_vertices(percentages), epsilon)
    cx, cy = float(centroid[0]), float(centroid[1])

    if np.hypot(cx, cy) < epsilon:
        # Degenerate polygon or perfectly balanced gases: no direction to classify
        angle = None
        zone = PentagonZone.UNDETERMINED
    else:
        angle = polar_angle_deg(cx, cy)
        zone = classify_pentagon_angle(angle)

    logger.debug(f"Pentagon area={area:.4f} centroid=({cx:.4f}, {cy:.4f}) zone={zone.value}")

    return PentagonResult(
        point=Point(x=cx, y=cy),
        percentages={name: float(p) for (name, _), p in zip(PENTAGON_AXES, percentages)},
        angle=angle,
        zone=zone.value,
    )
