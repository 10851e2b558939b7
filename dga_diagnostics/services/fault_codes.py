# dga_diagnostics/services/fault_codes.py

import re
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional, Sequence, Union

from ..schemas import FaultDiagnosis

logger = logging.getLogger(__name__)

# Output order of the external classifier's probability vector
MODEL_LABELS_ORDER = ("PD", "D1", "D2", "T1", "T2", "T3", "DT", "N")

@dataclass(frozen=True)
class FaultInfo:
    """Readable description of a fault code"""
    fault_type: str
    severity: str   # Normal, Caution or Critical
    description: str

FAULT_CATALOGUE = MappingProxyType({
    "N": FaultInfo("Normal", "Normal", "Transformer condition appears normal."),
    "PD": FaultInfo("Partial Discharge", "Caution", "Low energy discharges (Corona) detected."),
    "D1": FaultInfo("Low Energy Discharge", "Caution", "Discharges of low energy (Sparking) detected."),
    "D2": FaultInfo(
        "High Energy Discharge", "Critical",
        "Discharges of high energy (Arcing) detected. Immediate attention recommended.",
    ),
    "T1": FaultInfo("Thermal Fault < 300°C", "Caution", "Low range thermal fault detected."),
    "T2": FaultInfo("Thermal Fault 300-700°C", "Caution", "Medium range thermal fault detected."),
    "T3": FaultInfo(
        "Thermal Fault > 700°C", "Critical",
        "High range thermal fault detected. Risk of insulation degradation.",
    ),
    "DT": FaultInfo(
        "Mix Thermal & Discharge", "Critical",
        "Combined thermal and electrical fault detected. Complex failure mode.",
    ),
})

# Probabilities at or below this percentage are left out of the breakdown
MIN_REPORTED_PROBABILITY = 1.0

_CODE_TAG = re.compile(r"\[(.*?)\]")


def fault_info(fault_code: str) -> FaultInfo:
    """Catalogue entry for a code; unknown codes get a generic Caution entry"""
    info = FAULT_CATALOGUE.get(fault_code)
    if info is None:
        return FaultInfo(
            f"Unknown Fault Code ({fault_code})",
            "Caution",
            "Model returned a classification code not in the standard mapping.",
        )
    return info


def confidence_level(confidence: Optional[float]) -> str:
    if confidence is None:
        return "Low"
    if confidence >= 80:
        return "High"
    if confidence >= 50:
        return "Medium"
    return "Low"


def parse_confidence(confidence: Union[str, float, None]) -> Optional[float]:
    """Parse a confidence such as "98.94%" or 98.94 into a percentage"""
    if confidence is None:
        return None
    if isinstance(confidence, str):
        text = confidence.strip().rstrip('%').strip()
        try:
            return float(text)
        except ValueError:
            logger.warning(f"Unparseable confidence value: {confidence!r}")
            return None
    return float(confidence)


def probability_breakdown(probabilities: Optional[Sequence[float]]) -> dict:
    """
    Pair a probability vector with the model's labels.

    Values are fractions (0-1) and are reported as percentages, sorted high to
    low, dropping anything at or below 1%. A vector whose length does not match
    the label order cannot be labelled and gives an empty breakdown.
    """
    if not probabilities:
        return {}
    if len(probabilities) != len(MODEL_LABELS_ORDER):
        logger.warning(
            f"Expected {len(MODEL_LABELS_ORDER)} probabilities, got {len(probabilities)}; skipping breakdown"
        )
        return {}

    ranked = sorted(
        ((label, float(p) * 100) for label, p in zip(MODEL_LABELS_ORDER, probabilities)),
        key=lambda item: item[1],
        reverse=True,
    )
    return {label: pct for label, pct in ranked if pct > MIN_REPORTED_PROBABILITY}


def interpret_model_output(fault_code: str, confidence: Union[str, float, None] = None,
                           probabilities: Optional[Sequence[float]] = None) -> FaultDiagnosis:
    """
    Turn the external classifier's raw output into a readable diagnosis.

    Args:
        fault_code: predicted label, e.g. "D2"
        confidence: model confidence, either a percentage string ("98.94%") or a number
        probabilities: per-label probabilities in MODEL_LABELS_ORDER

    Returns:
        FaultDiagnosis with the fault code tagged as "[CODE]" in its description
    """
    info = fault_info(fault_code)
    value = parse_confidence(confidence)

    return FaultDiagnosis(
        fault_code=fault_code,
        fault_type=info.fault_type,
        severity=info.severity,
        description=f"[{fault_code}] - {info.description}",
        confidence=value,
        confidence_level=confidence_level(value),
        probabilities=probability_breakdown(probabilities),
    )


def extract_fault_code(text: Optional[str], default: str = "N") -> str:
    """Pull the "[CODE]" tag out of a diagnosis description"""
    if text:
        match = _CODE_TAG.search(text)
        if match and match.group(1):
            return match.group(1)
    return default
