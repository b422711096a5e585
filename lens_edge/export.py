from dataclasses import dataclass
from datetime import datetime
from io import StringIO
from typing import List, Optional
import pandas as pd

from .constants import REPORT_TITLE, STORE_NAME_DEFAULT
from .ranking import RankedFrame, ranking_table
from .utils import fmt_mm, round6

_MM_COLUMNS = ("decentration_r", "decentration_l", "ed_r", "ed_l", "edge_r", "edge_l", "worst")

@dataclass(frozen=True)
class ReportHeader:
    manufacturer: str
    design: str
    safety_margin: float
    store_name: str = STORE_NAME_DEFAULT

    def lines(self) -> List[str]:
        return [
            REPORT_TITLE,
            self.store_name,
            f"メーカー: {self.manufacturer} / 設計: {self.design} / 安全マージン: {self.safety_margin:.1f} mm",
        ]

def display_table(rows: List[RankedFrame]) -> pd.DataFrame:
    df = ranking_table(rows)
    for col in _MM_COLUMNS:
        df[col] = df[col].map(fmt_mm)
    df["reorder"] = df["reorder"].map(lambda v: "要" if v else "-")
    return df

def export_ranking_csv(rows: List[RankedFrame], header: ReportHeader, generated: Optional[datetime] = None) -> bytes:
    df = ranking_table(rows)
    for col in _MM_COLUMNS:
        df[col] = df[col].map(round6)
    buf = StringIO()
    for line in header.lines():
        buf.write(f"# {line}\n")
    buf.write(f"# Generated: {(generated or datetime.now()).strftime('%Y-%m-%d %H:%M:%S')}\n")
    df.to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")
