import pandas as pd
from typing import List
from ..schemas import GasSample, GAS_FIELDS
CANON=list(GAS_FIELDS)+['fault_label','timestamp']
COLMAPS=[{'hydrogen':'H2','methane':'CH4','ethane':'C2H6','ethylene':'C2H4','acetylene':'C2H2','carbon_monoxide':'CO','carbon_dioxide':'CO2','oxygen':'O2','nitrogen':'N2','time':'timestamp','timestamp':'timestamp','fault':'fault_label','label':'fault_label'},{'h2':'H2','ch4':'CH4','c2h6':'C2H6','c2h4':'C2H4','c2h2':'C2H2','co':'CO','co2':'CO2','o2':'O2','n2':'N2','time':'timestamp','timestamp':'timestamp','fault':'fault_label','label':'fault_label'}]

def normalise_cols(df):
    """Rename a DGA table's columns to canonical gas names and coerce readings to floats (missing -> 0)."""
    lower={c.lower().strip():c for c in df.columns}
    best={}; score=-1
    for mp in COLMAPS:
        s=sum(1 for k in mp if k in lower)
        if s>score: best, score = mp, s
    rename={lower[k]:v for k,v in best.items() if k in lower}
    df=df.rename(columns=rename)
    for c in CANON:
        if c not in df.columns: df[c]=None
    for c in GAS_FIELDS:
        df[c]=pd.to_numeric(df[c], errors='coerce').fillna(0.0).astype(float)
    return df[CANON]

def frame_to_samples(df) -> List[GasSample]:
    df=normalise_cols(df)
    return [GasSample(**{g:row[g] for g in GAS_FIELDS}) for _,row in df.iterrows()]
