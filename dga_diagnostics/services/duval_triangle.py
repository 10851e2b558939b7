# dga_diagnostics/services/duval_triangle.py

import logging
from enum import Enum
from types import MappingProxyType
from typing import List, Optional

from ..core.exceptions import UnknownZoneError
from ..schemas import Point, TriangleResult
from ..utils.barycentric import TriangleVertices, ternary_polygon, triangle_vertices
from ..utils.validation import SampleLike, sanitize_sample

logger = logging.getLogger(__name__)

class TriangleZone(Enum):
    """Duval Triangle 1 zones"""
    PD = "PD"   # partial discharge
    T1 = "T1"   # thermal < 300C
    T2 = "T2"   # thermal 300-700C
    T3 = "T3"   # thermal > 700C
    D1 = "D1"   # low energy discharge
    D2 = "D2"   # high energy discharge
    DT = "DT"   # mixed thermal and discharge
    NOT_AVAILABLE = "N/A"

# Chart anchor points as (CH4, C2H4, C2H2) percentages
ANCHOR_POINTS = MappingProxyType({
    'Top': (100, 0, 0),
    'Right': (0, 100, 0),
    'Left': (0, 0, 100),
    'a': (98, 0, 2),
    'b': (98, 2, 0),
    'c': (96, 0, 4),
    'd': (76, 20, 4),
    'e': (80, 20, 0),
    'f': (46, 50, 4),
    'g': (50, 50, 0),
    'h': (35, 50, 15),
    'I': (0, 85, 15),
    'J': (0, 71, 29),
    'k': (31, 40, 29),
    'l': (47, 40, 13),
    'm': (64, 23, 13),
    'n': (87, 0, 13),
    'o': (0, 23, 77),
})

TRIANGLE_ZONE_BOUNDARIES = MappingProxyType({
    TriangleZone.PD: ('Top', 'b', 'a'),
    TriangleZone.T1: ('b', 'e', 'd', 'c'),
    TriangleZone.T2: ('e', 'g', 'f', 'd'),
    TriangleZone.T3: ('g', 'Right', 'I', 'h', 'f'),
    TriangleZone.D1: ('n', 'm', 'o', 'Left'),
    TriangleZone.D2: ('m', 'l', 'k', 'J', 'o'),
    TriangleZone.DT: ('c', 'd', 'f', 'h', 'I', 'J', 'k', 'l', 'm', 'n'),
})


def classify_triangle_zone(p_ch4: float, p_c2h4: float, p_c2h2: float) -> TriangleZone:
    """
    Assign a Duval Triangle 1 zone from normalised percentages.

    Rules are evaluated in order and the first match wins. The rule set is a
    simplified approximation of the chart's zone polygons.
    """
    if p_ch4 >= 98:
        return TriangleZone.PD
    if p_c2h2 < 4:
        if p_c2h4 < 20:
            return TriangleZone.T1
        if p_c2h4 < 50:
            return TriangleZone.T2
        return TriangleZone.T3
    if p_c2h2 >= 13 and p_c2h4 < 23:
        return TriangleZone.D1
    if p_c2h4 >= 23 and p_c2h2 >= 13:
        # Right of the l-k line the T3 tail reaches down to 15% C2H2
        if p_c2h4 >= 40 and p_c2h2 < 29:
            return TriangleZone.T3 if p_c2h2 < 15 else TriangleZone.D2
        return TriangleZone.D2
    if p_c2h4 >= 50 and p_c2h2 < 15:
        return TriangleZone.T3
    # Everything left between the thermal and discharge bands
    return TriangleZone.DT


def analyze_triangle(sample: SampleLike, policy: Optional[str] = None) -> TriangleResult:
    """
    Run the Duval Triangle 1 method on a gas sample.

    Args:
        sample: GasSample or mapping of gas readings (ppm)
        policy: negative reading policy override ("reject" or "clamp")

    Returns:
        TriangleResult with CH4/C2H4/C2H2 percentages and the zone label;
        zone "N/A" with zero percentages when none of the three gases is present
    """
    gas = sanitize_sample(sample, policy)
    total = gas.CH4 + gas.C2H4 + gas.C2H2
    if total == 0:
        logger.debug("No CH4/C2H4/C2H2 present, triangle zone not available")
        return TriangleResult(pA=0.0, pB=0.0, pC=0.0, zone=TriangleZone.NOT_AVAILABLE.value)

    p_ch4 = gas.CH4 / total * 100
    p_c2h4 = gas.C2H4 / total * 100
    p_c2h2 = gas.C2H2 / total * 100
    zone = classify_triangle_zone(p_ch4, p_c2h4, p_c2h2)

    return TriangleResult(pA=p_ch4, pB=p_c2h4, pC=p_c2h2, zone=zone.value)


def zone_outline(zone, vertices: Optional[TriangleVertices] = None) -> List[Point]:
    """Closed Cartesian outline of a zone's boundary polygon, for chart overlays"""
    try:
        key = zone if isinstance(zone, TriangleZone) else TriangleZone(zone)
        names = TRIANGLE_ZONE_BOUNDARIES[key]
    except (ValueError, KeyError):
        raise UnknownZoneError(str(getattr(zone, 'value', zone))) from None
    return ternary_polygon([ANCHOR_POINTS[n] for n in names], vertices or triangle_vertices())
