from dataclasses import dataclass
import itertools

from .constants import BRAND_PLACEHOLDER

# Session-wide, never reused
_frame_seq = itertools.count(1)

def new_frame_id() -> str:
    return f"f{next(_frame_seq)}"

@dataclass(frozen=True)
class FrameRecord:
    id: str
    A: float
    DBL: float
    B: float = 0.0
    brand: str = BRAND_PLACEHOLDER
    shape: str = ""
    sku: str = ""
    color: str = ""
    stock: int = 0
    reorder: bool = False

    @property
    def size_label(self) -> str:
        return f"{self.A:g}□{self.DBL:g}"
