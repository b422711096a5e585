"""Minimum center thickness policy: base thickness per (manufacturer, design, material) plus a safety margin."""
from dataclasses import dataclass, field
from typing import Dict, Tuple
import logging
import math

from .constants import DEFAULT_BASE_CT, SAFETY_MARGIN_DEFAULT
from .data import CT_TABLE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CenterThicknessPolicy:
    safety_margin: float = SAFETY_MARGIN_DEFAULT
    table: Dict[Tuple[str, str, str], float] = field(default_factory=lambda: dict(CT_TABLE))
    default_base: float = DEFAULT_BASE_CT

    def __post_init__(self):
        if not math.isfinite(self.safety_margin) or self.safety_margin < 0:
            raise ValueError(f"Safety margin must be >= 0 mm (got {self.safety_margin!r})")
        if not math.isfinite(self.default_base) or self.default_base <= 0:
            raise ValueError(f"Default base thickness must be > 0 mm (got {self.default_base!r})")

    def base_thickness(self, manufacturer: str, design: str, material_key: str) -> float:
        """Base minimum center thickness in mm; combinations missing from the table fall back to the default."""
        v = self.table.get((manufacturer, design, material_key))
        if v is None:
            logger.warning("No CT entry for %s / %s / %s; using default %.1f mm",
                           manufacturer, design, material_key, self.default_base)
            return self.default_base
        return float(v)

    def min_center_thickness(self, manufacturer: str, design: str, material_key: str) -> float:
        return self.base_thickness(manufacturer, design, material_key) + self.safety_margin

    def with_margin(self, safety_margin: float) -> "CenterThicknessPolicy":
        return CenterThicknessPolicy(safety_margin=safety_margin, table=self.table, default_base=self.default_base)
