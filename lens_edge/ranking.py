"""
Frame ranking: per-eye edge thickness for every frame, ordered by the thicker eye.

recompute() is the only entry point callers need; it keeps no state between calls,
so any change to the inputs or the catalog is reflected by calling it again.
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple
import numpy as np
import pandas as pd

from .constants import ALLOWANCE_DEFAULT, REPRESENTATIVE_FRAME, RANKING_COLUMNS, SAFETY_MARGIN_DEFAULT
from .frames import FrameRecord
from .geometry import EdgeEstimate, Prescription, estimate_for_eye
from .materials import MATERIALS, Material
from .policy import CenterThicknessPolicy


@dataclass(frozen=True)
class EstimateInputs:
    right: Prescription
    left: Prescription
    material_right: Material
    material_left: Material
    manufacturer: str
    design: str
    safety_margin: float = SAFETY_MARGIN_DEFAULT
    allowance: float = ALLOWANCE_DEFAULT
    stock_only: bool = False

    def policy(self) -> CenterThicknessPolicy:
        return CenterThicknessPolicy(safety_margin=self.safety_margin)

    def min_center_thickness(self) -> Tuple[float, float]:
        p = self.policy()
        return (p.min_center_thickness(self.manufacturer, self.design, self.material_right.key),
                p.min_center_thickness(self.manufacturer, self.design, self.material_left.key))


@dataclass(frozen=True)
class RankedFrame:
    frame: FrameRecord
    right: EdgeEstimate
    left: EdgeEstimate
    worst: float


def filter_stock(frames: Iterable[FrameRecord], stock_only: bool) -> List[FrameRecord]:
    return [f for f in frames if f.stock > 0] if stock_only else list(frames)


def rank_frames(frames: Iterable[FrameRecord], right: Prescription, left: Prescription,
                material_right: Material, material_left: Material,
                min_ct_right: float, min_ct_left: float,
                allowance: float = ALLOWANCE_DEFAULT, stock_only: bool = False) -> List[RankedFrame]:
    rows = []
    for f in filter_stock(frames, stock_only):
        r = estimate_for_eye(right, material_right.refractive_index, min_ct_right, f.A, f.B, f.DBL, allowance)
        l = estimate_for_eye(left, material_left.refractive_index, min_ct_left, f.A, f.B, f.DBL, allowance)
        rows.append(RankedFrame(frame=f, right=r, left=l, worst=max(r.edge_thickness, l.edge_thickness)))
    if not rows:
        return rows
    # stable: exact ties keep catalog order
    order = np.argsort(np.array([r.worst for r in rows], dtype=float), kind="stable")
    return [rows[i] for i in order]


def recompute(frames: Iterable[FrameRecord], inputs: EstimateInputs) -> List[RankedFrame]:
    ct_r, ct_l = inputs.min_center_thickness()
    return rank_frames(frames, inputs.right, inputs.left, inputs.material_right, inputs.material_left,
                       ct_r, ct_l, allowance=inputs.allowance, stock_only=inputs.stock_only)


def ranking_table(rows: List[RankedFrame]) -> pd.DataFrame:
    data = []
    for r in rows:
        f = r.frame
        data.append({
            "brand": f.brand, "shape": f.shape, "A": f.A, "B": f.B, "DBL": f.DBL,
            "sku": f.sku, "color": f.color, "stock": int(f.stock), "reorder": bool(f.reorder),
            "decentration_r": r.right.decentration, "decentration_l": r.left.decentration,
            "ed_r": r.right.effective_diameter, "ed_l": r.left.effective_diameter,
            "edge_r": r.right.edge_thickness, "edge_l": r.left.edge_thickness,
            "worst": r.worst,
        })
    return pd.DataFrame(data, columns=list(RANKING_COLUMNS))


def compare_materials(inputs: EstimateInputs, frame: Tuple[float, float, float] = REPRESENTATIVE_FRAME,
                      materials: Optional[Iterable[Material]] = None) -> pd.DataFrame:
    A, B, DBL = frame
    policy = inputs.policy()
    data = []
    for m in (materials if materials is not None else MATERIALS):
        ct = policy.min_center_thickness(inputs.manufacturer, inputs.design, m.key)
        r = estimate_for_eye(inputs.right, m.refractive_index, ct, A, B, DBL, inputs.allowance)
        l = estimate_for_eye(inputs.left, m.refractive_index, ct, A, B, DBL, inputs.allowance)
        data.append({"material": m.display_name, "ct": ct, "edge_r": r.edge_thickness,
                     "edge_l": l.edge_thickness, "worst": max(r.edge_thickness, l.edge_thickness)})
    return pd.DataFrame(data, columns=["material", "ct", "edge_r", "edge_l", "worst"])
