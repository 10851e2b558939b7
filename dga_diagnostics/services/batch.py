# dga_diagnostics/services/batch.py

import logging
import pandas as pd
from datetime import datetime
from typing import Any, Dict, Optional

from ..core.exceptions import DGAError
from ..data.ingest_dga import normalise_cols
from ..schemas import GasSample, GAS_FIELDS
from .duval_pentagon import analyze_pentagon
from .duval_triangle import analyze_triangle
from .health_index import compute_health_index

logger = logging.getLogger(__name__)

RESULT_COLUMNS = [
    'duval_triangle', 'p_ch4', 'p_c2h4', 'p_c2h2',
    'duval_pentagon', 'pentagon_x', 'pentagon_y',
    'fault_code', 'final_hi', 'condition', 'error',
]


def diagnose_sample(sample: GasSample, fault_code: str = "N", policy: Optional[str] = None) -> Dict[str, Any]:
    """Run all three diagnostics on one sample and flatten the results into a row"""
    triangle = analyze_triangle(sample, policy)
    pentagon = analyze_pentagon(sample, policy)
    health = compute_health_index(sample, fault_code, policy)

    return {
        'duval_triangle': triangle.zone,
        'p_ch4': triangle.pA,
        'p_c2h4': triangle.pB,
        'p_c2h2': triangle.pC,
        'duval_pentagon': pentagon.zone,
        'pentagon_x': pentagon.point.x if pentagon.point else None,
        'pentagon_y': pentagon.point.y if pentagon.point else None,
        'fault_code': fault_code,
        'final_hi': health.final_hi,
        'condition': health.condition,
        'error': None,
    }


def diagnose_frame(df: pd.DataFrame, fault_column: str = 'fault_label', default_fault: str = "N",
                   policy: Optional[str] = None) -> pd.DataFrame:
    """
    Diagnose every row of a DGA table.

    Args:
        df: table of gas readings; column names are normalised (hydrogen -> H2, ...)
        fault_column: column holding the classifier's fault code, looked up in the input table
            first and then among the normalised columns (fault, label -> fault_label)
        default_fault: fault code used where the column is missing or empty
        policy: negative reading policy override ("reject" or "clamp")

    Returns:
        The normalised readings joined with one result row per input row. Rows
        that fail validation keep empty results and carry the message in 'error'.
    """
    start_time = datetime.now()
    readings = normalise_cols(df).reset_index(drop=True)
    if fault_column in df.columns:
        faults = df[fault_column].reset_index(drop=True)
    elif fault_column in readings.columns:
        faults = readings[fault_column]
    else:
        faults = pd.Series([None] * len(readings), dtype=object)

    rows = []
    failed = 0
    for i, row in readings.iterrows():
        fault = faults.iloc[i]
        fault = default_fault if fault is None or pd.isna(fault) or str(fault).strip() == "" else str(fault).strip()
        try:
            sample = GasSample(**{gas: row[gas] for gas in GAS_FIELDS})
            rows.append(diagnose_sample(sample, fault, policy))
        except DGAError as e:
            failed += 1
            rows.append({**{c: None for c in RESULT_COLUMNS}, 'fault_code': fault, 'error': str(e)})

    results = pd.DataFrame(rows, columns=RESULT_COLUMNS)
    duration = (datetime.now() - start_time).total_seconds()
    logger.info(f"Diagnosed {len(results)} samples in {duration:.2f}s ({failed} failed)")

    return pd.concat([readings[list(GAS_FIELDS)], results], axis=1)
