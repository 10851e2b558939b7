# dga_diagnostics/utils/validation.py

import math
import logging
from typing import Mapping, Optional, Union

from ..core.config import settings
from ..core.exceptions import InvalidInputError
from ..schemas import GasSample, GAS_FIELDS

logger = logging.getLogger(__name__)

SampleLike = Union[GasSample, Mapping[str, float]]


def as_gas_sample(sample: SampleLike) -> GasSample:
    """Accept a GasSample or a plain mapping of gas name -> ppm; gas names are case sensitive"""
    if isinstance(sample, GasSample):
        return sample
    readings = dict(sample)
    for key, value in readings.items():
        if key not in GAS_FIELDS:
            raise InvalidInputError(key, value, reason="unknown gas")
    return GasSample.model_validate(readings)


def sanitize_sample(sample: SampleLike, policy: Optional[str] = None) -> GasSample:
    """
    Apply the negative-concentration policy to a sample.

    Args:
        sample: GasSample or mapping of gas readings
        policy: "reject" or "clamp"; defaults to settings.NEGATIVE_GAS_POLICY

    Returns:
        A GasSample with only finite, nonnegative readings

    Raises:
        InvalidInputError: for NaN/inf under any policy, or negatives under "reject"
    """
    sample = as_gas_sample(sample)
    policy = policy or settings.NEGATIVE_GAS_POLICY
    if policy not in ("reject", "clamp"):
        raise ValueError(f"Unknown negative gas policy: {policy}")

    clamped = {}
    for gas in GAS_FIELDS:
        value = getattr(sample, gas)
        if not math.isfinite(value):
            raise InvalidInputError(gas, value)
        if value < 0:
            if policy == "reject":
                raise InvalidInputError(gas, value)
            clamped[gas] = 0.0

    if clamped:
        logger.warning(f"Clamped negative readings to zero: {', '.join(clamped)}")
        return sample.model_copy(update=clamped)
    return sample
