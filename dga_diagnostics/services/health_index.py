# dga_diagnostics/services/health_index.py

import math
import logging
from types import MappingProxyType
from typing import Optional

from ..schemas import GasSample, GasScoreDetail, HealthIndexResult
from ..utils.validation import SampleLike, sanitize_sample

logger = logging.getLogger(__name__)

# Upper bounds (inclusive) of scores 1-5; anything above the last bound scores 6
SCORE_THRESHOLDS = MappingProxyType({
    'H2': (100, 200, 300, 500, 700),
    'CH4': (75, 125, 200, 400, 600),
    'C2H6': (65, 80, 100, 120, 150),
    'C2H4': (50, 80, 100, 150, 200),
    'C2H2': (3, 7, 35, 50, 80),
    'CO': (350, 700, 900, 1100, 1400),
    'CO2': (2500, 3000, 4000, 5000, 7000),
    'TDCG': (690, 1251, 1785, 2720, 4360),
})

WEIGHTS = MappingProxyType({
    'H2': 3,
    'CH4': 2,
    'C2H6': 2,
    'C2H4': 4,
    'C2H2': 6,
    'CO': 3,
    'CO2': 2,
    'TDCG': 3,
})

# Fault factor per classifier fault code
HI_FF_MAPPING = MappingProxyType({
    'N': 1.0,
    'PD': 0.8,
    'T1': 0.7,
    'D1': 0.6,
    'T2': 0.4,
    'T3': 0.3,
    'D2': 0.2,
    'DT': 0.1,
})
UNKNOWN_FAULT_FACTOR = 0.1

# (lower bound of finalHI, condition), checked top down
CONDITION_BANDS = (
    (85, "Very Good"),
    (70, "Good"),
    (50, "Need Caution"),
    (30, "Poor"),
)
WORST_CONDITION = "Very Poor"


def gas_score(key: str, value: float) -> int:
    """Risk score 1-6 of one gas (or TDCG) concentration"""
    for score, bound in enumerate(SCORE_THRESHOLDS[key], start=1):
        if value <= bound:
            return score
    return 6


def total_dissolved_combustible_gas(gas: GasSample) -> float:
    return gas.H2 + gas.CH4 + gas.C2H6 + gas.C2H4 + gas.C2H2 + gas.CO


def co2_co_ratio(gas: GasSample) -> float:
    return 0.0 if gas.CO == 0 else gas.CO2 / gas.CO


def dgaf_health_index(dgaf: float) -> float:
    if dgaf < 1.2:
        return 1.0
    if dgaf < 1.5:
        return 0.8
    if dgaf < 2:
        return 0.6
    if dgaf < 2.5:
        return 0.4
    return 0.2


def fault_factor(fault_code: str) -> float:
    """HI_FF for a classifier fault code; unknown codes get the worst factor"""
    if fault_code not in HI_FF_MAPPING:
        logger.debug(f"Unknown fault code {fault_code!r}, using worst-case fault factor")
        return UNKNOWN_FAULT_FACTOR
    return HI_FF_MAPPING[fault_code]


def calculate_ledtf(gas: GasSample) -> float:
    """Low energy discharge / thermal factor from the H2-CH4-CO composition vector"""
    total = gas.H2 + gas.CH4 + gas.CO
    if total == 0:
        return 0.8

    h = gas.H2 / total
    c = gas.CH4 / total
    term1 = h + 0.5 * c
    term2 = (math.sqrt(3) / 2) * c
    magnitude = math.sqrt(term1 ** 2 + term2 ** 2)

    return 0.7 if magnitude <= 0.13 else 0.25


def calculate_pif1(gas: GasSample) -> float:
    ratio = co2_co_ratio(gas)
    if gas.CO > 500 and gas.CO2 > 5000:
        # Always 1 here since CO > 500; kept to mirror the rating sheet
        return 1.0 if gas.CO > 350 else 0.8
    if ratio > 7:
        return 0.6
    if ratio >= 5:
        return 0.4
    return 0.2


def calculate_pif2(gas: GasSample) -> float:
    ratio = co2_co_ratio(gas)
    if ratio <= 7.4:
        return 0.8
    if ratio <= 8:
        return 0.6
    if ratio <= 8.7:
        return 0.4
    return 0.2


def classify_condition(final_hi: float) -> str:
    for lower, condition in CONDITION_BANDS:
        if final_hi >= lower:
            return condition
    return WORST_CONDITION


def compute_health_index(sample: SampleLike, fault_code: str, policy: Optional[str] = None) -> HealthIndexResult:
    """
    Compute the transformer Health Index.

    finalHI = (0.5*HI_DGAF + 0.3*HI_FF + 0.1*LEDTF + 0.1*PIF) * 100

    Args:
        sample: GasSample or mapping of gas readings (ppm)
        fault_code: fault label from the external classifier (N, PD, T1, ...)
        policy: negative reading policy override ("reject" or "clamp")

    Returns:
        HealthIndexResult with every intermediate factor
    """
    gas = sanitize_sample(sample, policy)

    tdcg = total_dissolved_combustible_gas(gas)
    values = {key: (tdcg if key == 'TDCG' else getattr(gas, key)) for key in WEIGHTS}

    details = []
    for key, weight in WEIGHTS.items():
        score = gas_score(key, values[key])
        details.append(GasScoreDetail(
            gas=key, value=values[key], score=score, weight=weight, weighted_score=score * weight
        ))

    total_weight = sum(d.weight for d in details)
    dgaf = round(sum(d.weighted_score for d in details) / total_weight, 2)

    hi_dgaf = dgaf_health_index(dgaf)
    hi_ff = fault_factor(fault_code)
    ledtf = calculate_ledtf(gas)
    pif1 = calculate_pif1(gas)
    pif2 = calculate_pif2(gas)
    pif = round(0.6 * pif1 + 0.4 * pif2, 2)

    raw = 0.5 * hi_dgaf + 0.3 * hi_ff + 0.1 * ledtf + 0.1 * pif
    final_hi = round(raw * 100, 2)
    condition = classify_condition(final_hi)

    logger.debug(f"Health index {final_hi} ({condition}) DGAF={dgaf} fault={fault_code}")

    return HealthIndexResult(
        tdcg=tdcg,
        co2_co_ratio=round(co2_co_ratio(gas), 2),
        details=details,
        dgaf=dgaf,
        hi_dgaf=hi_dgaf,
        hi_ff=hi_ff,
        gbdt_fault=fault_code,
        ledtf=ledtf,
        pif1=pif1,
        pif2=pif2,
        pif=pif,
        final_hi=final_hi,
        condition=condition,
    )
