from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict

GAS_FIELDS = ('H2', 'CH4', 'C2H6', 'C2H4', 'C2H2', 'CO', 'CO2', 'O2', 'N2')

class GasSample(BaseModel):
    """Dissolved gas concentrations in ppm. O2 and N2 are carried but not used by the diagnostics."""
    model_config = ConfigDict(frozen=True, extra="forbid")
    H2: float = 0.0; CH4: float = 0.0; C2H6: float = 0.0; C2H4: float = 0.0; C2H2: float = 0.0
    CO: float = 0.0; CO2: float = 0.0; O2: float = 0.0; N2: float = 0.0

class Point(BaseModel):
    model_config = ConfigDict(frozen=True)
    x: float
    y: float

class TriangleResult(BaseModel):
    """Duval Triangle 1 result. pA=%CH4 (top), pB=%C2H4 (right), pC=%C2H2 (left)."""
    model_config = ConfigDict(frozen=True)
    pA: float
    pB: float
    pC: float
    zone: str

class PentagonResult(BaseModel):
    """Duval Pentagon 1 result. point is the unscaled gas polygon centroid, None when no gas is present."""
    model_config = ConfigDict(frozen=True)
    point: Optional[Point] = None
    percentages: Dict[str, float] = Field(default_factory=dict)
    angle: Optional[float] = None
    zone: str

class GasScoreDetail(BaseModel):
    model_config = ConfigDict(frozen=True)
    gas: str
    value: float
    score: int
    weight: int
    weighted_score: int

class HealthIndexResult(BaseModel):
    model_config = ConfigDict(frozen=True)
    tdcg: float
    co2_co_ratio: float
    details: List[GasScoreDetail]
    dgaf: float
    hi_dgaf: float
    hi_ff: float
    gbdt_fault: str
    ledtf: float
    pif1: float
    pif2: float
    pif: float
    final_hi: float
    condition: str

class FaultDiagnosis(BaseModel):
    """Readable interpretation of the external fault classifier's output."""
    model_config = ConfigDict(frozen=True)
    fault_code: str
    fault_type: str
    severity: str
    description: str
    confidence: Optional[float] = None
    confidence_level: str = "Low"
    probabilities: Dict[str, float] = Field(default_factory=dict)
