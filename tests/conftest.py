import pytest

from dga_diagnostics.schemas import GasSample


@pytest.fixture
def zero_sample():
    return GasSample()


@pytest.fixture
def reference_samples():
    """Field samples with the fault labels assigned by the reference dataset"""
    extras = dict(CO=500.0, CO2=3000.0, O2=1500.0, N2=50000.0)
    presets = {
        'DT': dict(H2=152.0, CH4=254.0, C2H6=908.0, C2H4=2250.0, C2H2=4830.0),
        'D2': dict(H2=277.0, CH4=142.0, C2H6=59.0, C2H4=802.0, C2H2=3840.0),
        'D1': dict(H2=921.0, CH4=42.0, C2H6=3.0, C2H4=75.0, C2H2=713.0),
        'T3': dict(H2=36.0, CH4=101.0, C2H6=35.0, C2H4=193.0, C2H2=0.0),
        'T2': dict(H2=122.0, CH4=50.0, C2H6=31.0, C2H4=69.0, C2H2=0.0),
        'T1': dict(H2=104.0, CH4=37.0, C2H6=11.0, C2H4=11.0, C2H2=0.0),
        'PD': dict(H2=7907.0, CH4=467.0, C2H6=249.0, C2H4=2.0, C2H2=0.0),
        'N': dict(H2=8.0, CH4=14.0, C2H6=22.0, C2H4=6.0, C2H2=0.0),
    }
    return {label: GasSample(**gases, **extras) for label, gases in presets.items()}


@pytest.fixture
def heavy_sample():
    return GasSample(H2=1000, CH4=1000, C2H6=200, C2H4=300, C2H2=100, CO=2000, CO2=10000)
