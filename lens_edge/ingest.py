"""
Frame catalog import from loosely structured CSV/TSV text.

Header labels are matched against COLUMN_SYNONYMS once per document, then each
row is read positionally. Rows without a usable A or DBL are skipped and counted.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple
import logging
import math
import re

from .constants import (
    BRAND_PLACEHOLDER, COLUMN_SYNONYMS, EMPTY_FILE_SUMMARY, REORDER_TRUE_TOKENS, SIZE_TOKEN_PATTERN,
)
from .frames import FrameRecord, new_frame_id

logger = logging.getLogger(__name__)

_SIZE_RE = re.compile(SIZE_TOKEN_PATTERN, re.ASCII)
_LINE_SPLIT_RE = re.compile(r"\r?\n")
# plain decimal notation, ASCII digits only
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

NOT_FOUND = -1


@dataclass
class ImportResult:
    records: List[FrameRecord] = field(default_factory=list)
    rejected: int = 0
    header: List[str] = field(default_factory=list)
    empty: bool = False

    @property
    def accepted(self) -> int:
        return len(self.records)

    def summary(self) -> str:
        if self.empty:
            return EMPTY_FILE_SUMMARY
        return f"読み込み: {self.accepted}件 / スキップ: {self.rejected}件\nヘッダ: {', '.join(self.header)}"


def detect_delimiter(text: str) -> str:
    return "\t" if ("\t" in text and "," not in text) else ","


def split_lines(text: str) -> List[str]:
    if text.startswith("\ufeff"):
        text = text[1:]
    return [ln for ln in _LINE_SPLIT_RE.split(text) if ln.strip()]


def resolve_columns(header: Sequence[str], synonyms: Dict[str, Tuple[str, ...]] = COLUMN_SYNONYMS) -> Dict[str, int]:
    """Map each logical field to the first header position carrying one of its labels, or NOT_FOUND."""
    resolved = {}
    for name, labels in synonyms.items():
        accepted = set(labels)
        resolved[name] = next((i for i, h in enumerate(header) if h in accepted), NOT_FOUND)
    return resolved


def parse_number(s: Optional[str]) -> Optional[float]:
    s = (s or "").strip()
    if not _NUMBER_RE.fullmatch(s):
        return None
    v = float(s)
    return v if math.isfinite(v) else None


def parse_dimension(s: Optional[str]) -> Optional[float]:
    """Positive frame measurement in mm, else None."""
    v = parse_number(s)
    return v if (v is not None and v > 0) else None


def parse_size_token(s: Optional[str]) -> Tuple[Optional[float], Optional[float]]:
    m = _SIZE_RE.search(s or "")
    if not m:
        return None, None
    return float(m.group(1)), float(m.group(2))


def parse_stock(s: Optional[str]) -> int:
    v = parse_number(s)
    if v is None or v < 0:
        return 0
    return int(v)


def parse_reorder(s: Optional[str]) -> bool:
    return s in REORDER_TRUE_TOKENS


def _cell(cols: List[str], idx: int) -> Optional[str]:
    if idx == NOT_FOUND or idx >= len(cols):
        return None
    return cols[idx]


def parse_row(cols: List[str], idx: Dict[str, int]) -> Optional[FrameRecord]:
    A = parse_dimension(_cell(cols, idx["A"]))
    DBL = parse_dimension(_cell(cols, idx["DBL"]))
    if (A is None or DBL is None) and idx["size"] != NOT_FOUND:
        size_a, size_dbl = parse_size_token(_cell(cols, idx["size"]))
        if A is None and size_a: A = size_a
        if DBL is None and size_dbl: DBL = size_dbl
    if A is None or DBL is None:
        return None
    B = parse_number(_cell(cols, idx["B"]))
    return FrameRecord(
        id=new_frame_id(),
        A=A,
        DBL=DBL,
        B=B if B is not None else 0.0,
        brand=_cell(cols, idx["brand"]) or BRAND_PLACEHOLDER,
        shape=_cell(cols, idx["shape"]) or "",
        sku=_cell(cols, idx["sku"]) or "",
        color=_cell(cols, idx["color"]) or "",
        stock=parse_stock(_cell(cols, idx["stock"])),
        reorder=parse_reorder(_cell(cols, idx["reorder"])),
    )


def parse_frames_csv(text: str) -> ImportResult:
    lines = split_lines(text or "")
    if not lines:
        logger.info("Frame import: empty document")
        return ImportResult(empty=True)
    delim = detect_delimiter(text)
    header = [h.strip() for h in lines[0].split(delim)]
    idx = resolve_columns(header)
    logger.debug("Resolved columns: %s", {k: v for k, v in idx.items() if v != NOT_FOUND})

    result = ImportResult(header=header)
    for row_no, line in enumerate(lines[1:], start=1):
        cols = [c.strip() for c in line.split(delim)]
        if all(c == "" for c in cols):
            continue
        rec = parse_row(cols, idx)
        if rec is None:
            result.rejected += 1
            logger.debug("Skipping row %d: no usable A/DBL (%r)", row_no, line)
            continue
        result.records.append(rec)
    logger.info("Frame import: %d accepted, %d skipped", result.accepted, result.rejected)
    return result
