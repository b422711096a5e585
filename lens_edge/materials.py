from dataclasses import dataclass
from typing import Dict, Tuple
import math

from .constants import MATERIAL_ROWS, DEFAULT_MATERIAL_KEY

@dataclass(frozen=True)
class Material:
    key: str
    display_name: str
    refractive_index: float

    def __post_init__(self):
        n = self.refractive_index
        # the thickness model divides by (n - 1)
        if not isinstance(n, (int, float)) or not math.isfinite(n) or n <= 1.0:
            raise ValueError(f"Refractive index must be a finite number > 1 (got {n!r} for {self.key})")

def build_materials(rows) -> Tuple[Material, ...]:
    materials = tuple(Material(key, name, float(index)) for key, name, index in rows)
    keys = [m.key for m in materials]
    if len(set(keys)) != len(keys):
        raise ValueError(f"Duplicate material keys: {keys}")
    return materials

MATERIALS: Tuple[Material, ...] = build_materials(MATERIAL_ROWS)
_BY_KEY: Dict[str, Material] = {m.key: m for m in MATERIALS}

def get_material(key: str) -> Material:
    mat = _BY_KEY.get(str(key).strip())
    if mat is None:
        raise ValueError(f"Unsupported material: {key} (expected one of {', '.join(_BY_KEY)})")
    return mat

def default_material() -> Material:
    return _BY_KEY[DEFAULT_MATERIAL_KEY]
