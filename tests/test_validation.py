import math
import pytest
from pydantic import ValidationError

from dga_diagnostics.core.config import Settings, settings
from dga_diagnostics.core.exceptions import DGAError, InvalidInputError
from dga_diagnostics.schemas import GasSample
from dga_diagnostics.services.duval_pentagon import analyze_pentagon
from dga_diagnostics.services.duval_triangle import analyze_triangle
from dga_diagnostics.services.health_index import compute_health_index
from dga_diagnostics.utils.validation import sanitize_sample


def test_reject_negative_reading():
    with pytest.raises(InvalidInputError) as exc:
        sanitize_sample(GasSample(H2=10, C2H2=-1), policy="reject")
    assert exc.value.gas == "C2H2"
    assert exc.value.value == -1
    assert isinstance(exc.value, ValueError)
    assert isinstance(exc.value, DGAError)


def test_clamp_negative_reading():
    clean = sanitize_sample(GasSample(H2=10, C2H2=-1, CO=-5), policy="clamp")
    assert clean.C2H2 == 0.0
    assert clean.CO == 0.0
    assert clean.H2 == 10


@pytest.mark.parametrize("policy", ["reject", "clamp"])
@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_non_finite_readings_always_rejected(policy, value):
    with pytest.raises(InvalidInputError):
        sanitize_sample(GasSample(CH4=value), policy=policy)


def test_unknown_policy():
    with pytest.raises(ValueError):
        sanitize_sample(GasSample(), policy="ignore")


def test_engines_follow_configured_policy(monkeypatch):
    sample = GasSample(CH4=14, C2H4=6, C2H2=-3)
    with pytest.raises(InvalidInputError):
        analyze_triangle(sample)

    monkeypatch.setattr(settings, "NEGATIVE_GAS_POLICY", "clamp")
    assert analyze_triangle(sample).zone == "T2"
    assert analyze_pentagon(sample).zone == analyze_pentagon(GasSample(CH4=14, C2H4=6)).zone
    assert compute_health_index(sample, "N") == compute_health_index(GasSample(CH4=14, C2H4=6), "N")


def test_policy_argument_overrides_settings():
    with pytest.raises(InvalidInputError):
        compute_health_index(GasSample(CO=-1), "N", policy="reject")
    assert compute_health_index(GasSample(CO=-1), "N", policy="clamp").final_hi == pytest.approx(92.4)


def test_gas_sample_is_immutable():
    sample = GasSample(H2=1)
    with pytest.raises(ValidationError):
        sample.H2 = 2


def test_unknown_gas_names_rejected():
    with pytest.raises(InvalidInputError) as exc:
        analyze_triangle({"ch4": 14, "c2h4": 6})
    assert exc.value.gas == "ch4"
    assert "unknown gas" in str(exc.value)
    with pytest.raises(ValidationError):
        GasSample(ch4=14)
    assert analyze_triangle({"CH4": 14, "C2H4": 6}).zone == "T2"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("DGA_NEGATIVE_GAS_POLICY", "clamp")
    monkeypatch.setenv("DGA_PENTAGON_AREA_EPSILON", "1e-6")
    configured = Settings()
    assert configured.NEGATIVE_GAS_POLICY == "clamp"
    assert configured.PENTAGON_AREA_EPSILON == 1e-6


def test_settings_reject_unknown_policy(monkeypatch):
    monkeypatch.setenv("DGA_NEGATIVE_GAS_POLICY", "ignore")
    with pytest.raises(ValidationError):
        Settings()


def test_configure_logging_sets_package_level():
    import logging
    from dga_diagnostics.core.config import configure_logging

    package_logger = logging.getLogger("dga_diagnostics")
    previous = package_logger.level
    try:
        configure_logging("debug")
        assert package_logger.level == logging.DEBUG
        configure_logging()
        assert package_logger.level == getattr(logging, settings.LOG_LEVEL)
    finally:
        package_logger.setLevel(previous)
