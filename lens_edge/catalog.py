from typing import Iterable, Iterator, List, Optional
import logging
import math

from .constants import BRAND_PLACEHOLDER
from .data import DEMO_FRAMES
from .frames import FrameRecord, new_frame_id
from .ingest import ImportResult, parse_frames_csv

logger = logging.getLogger(__name__)

def _positive(name: str, v) -> float:
    try:
        x = float(v)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number (got {v!r})")
    if not math.isfinite(x) or x <= 0:
        raise ValueError(f"{name} must be > 0 mm (got {v!r})")
    return x

class FrameCatalog:
    """In-memory frame catalog, changed only through explicit add/import/remove calls."""

    def __init__(self, frames: Optional[Iterable[FrameRecord]] = None):
        self._frames: List[FrameRecord] = list(frames or [])

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[FrameRecord]:
        return iter(self._frames)

    @property
    def frames(self) -> List[FrameRecord]:
        return list(self._frames)

    def extend(self, records: Iterable[FrameRecord]) -> int:
        before = len(self._frames)
        self._frames.extend(records)
        return len(self._frames) - before

    def add_frame(self, brand: str, A: float, B: float, DBL: float, sku: str = "", color: str = "",
                  stock: int = 0, shape: str = "", reorder: bool = False) -> FrameRecord:
        A = _positive("A", A); DBL = _positive("DBL", DBL)
        try:
            B = float(B) if B is not None else 0.0
        except (TypeError, ValueError):
            B = 0.0
        if not math.isfinite(B): B = 0.0
        stock = max(0, int(stock or 0))
        frame = FrameRecord(id=new_frame_id(), A=A, DBL=DBL, B=B, brand=(brand or "").strip() or BRAND_PLACEHOLDER,
                            shape=shape or "", sku=sku or "", color=color or "", stock=stock, reorder=bool(reorder))
        self._frames.append(frame)
        logger.info("Added frame %s (%s %s)", frame.id, frame.brand, frame.size_label)
        return frame

    def remove(self, frame_id: str) -> bool:
        before = len(self._frames)
        self._frames = [f for f in self._frames if f.id != frame_id]
        return len(self._frames) != before

    def import_text(self, text: str) -> ImportResult:
        result = parse_frames_csv(text)
        if result.records:
            self.extend(result.records)
        return result

def demo_catalog() -> FrameCatalog:
    return FrameCatalog(FrameRecord(id=new_frame_id(), **row) for row in DEMO_FRAMES)
