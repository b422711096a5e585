from typing import Dict, List, Tuple
import pandas as pd

from .constants import MANUFACTURERS, DESIGNS

CtKey = Tuple[str, str, str]

def _ct_db_rows() -> List[Dict]:
    rows = []
    def add(maker, design, materials: Dict[str, float]):
        for key, ct in materials.items():
            rows.append({"manufacturer": maker, "design": design, "material": key, "base_ct": float(ct)})
    # Single vision designs
    add("HOYA", "外面非球面", {"1.60": 1.5, "1.67": 1.5, "1.74": 1.0})
    add("HOYA", "両面非球面", {"1.60": 1.4, "1.67": 1.3, "1.74": 1.0})
    add("東海光学", "外面非球面", {"1.60": 1.5, "1.67": 1.4, "1.76": 1.0})
    add("東海光学", "両面非球面", {"1.60": 1.4, "1.67": 1.3, "1.76": 1.0})
    add("伊藤光学", "外面非球面", {"1.60": 1.5, "1.67": 1.5, "1.74": 1.0})
    add("伊藤光学", "両面非球面", {"1.60": 1.4, "1.67": 1.3, "1.74": 1.0})
    # Progressive families share one row per maker
    for design in ("遠近", "中近", "近々"):
        add("HOYA", design, {"1.60": 1.8, "1.67": 1.8, "1.74": 1.2})
        add("東海光学", design, {"1.60": 1.8, "1.67": 1.7, "1.76": 1.2})
        add("伊藤光学", design, {"1.60": 1.8, "1.67": 1.8, "1.74": 1.2})
    return rows

CT_DB = pd.DataFrame(_ct_db_rows(), columns=["manufacturer", "design", "material", "base_ct"])

def derive_ct_table(df: pd.DataFrame) -> Dict[CtKey, float]:
    table: Dict[CtKey, float] = {}
    for _, r in df.iterrows():
        if r["manufacturer"] not in MANUFACTURERS or r["design"] not in DESIGNS:
            raise ValueError(f"Unknown manufacturer/design in CT table: {r['manufacturer']} / {r['design']}")
        table[(r["manufacturer"], r["design"], r["material"])] = float(r["base_ct"])
    return table

CT_TABLE = derive_ct_table(CT_DB)

# Demonstration frames shown before any catalog is imported
DEMO_FRAMES: List[Dict] = [
    {"brand": "Round S", "shape": "ラウンド", "A": 46, "B": 42, "DBL": 22, "sku": "RS-46", "color": "BK", "stock": 1, "reorder": False},
    {"brand": "Classic P", "shape": "ボストン", "A": 48, "B": 43, "DBL": 20, "sku": "CP-48", "color": "BR", "stock": 0, "reorder": True},
    {"brand": "Slim R", "shape": "スクエア", "A": 52, "B": 36, "DBL": 18, "sku": "SR-52", "color": "NV", "stock": 2, "reorder": False},
]
