from dataclasses import dataclass

from .constants import ALLOWANCE_DEFAULT, SAG_DENOMINATOR

@dataclass(frozen=True)
class Prescription:
    sphere: float
    cylinder: float
    monocular_pd: float

@dataclass(frozen=True)
class EdgeEstimate:
    edge_thickness: float
    delta_thickness: float
    blank_diameter: float
    decentration: float
    effective_diameter: float

def spherical_equivalent(sphere: float, cylinder: float) -> float:
    return sphere + cylinder / 2.0

def decentration_mm(A: float, DBL: float, monocular_pd: float) -> float:
    frame_pd = A + DBL
    return abs(frame_pd / 2.0 - monocular_pd)

def estimate_edge_thickness(sphere: float, cylinder: float, refractive_index: float, min_center_thickness: float,
                            A: float, B: float, DBL: float, monocular_pd: float,
                            allowance: float = ALLOWANCE_DEFAULT) -> EdgeEstimate:
    # Thin-lens sag approximation; refractive_index > 1 is guaranteed by Material.
    SE = abs(spherical_equivalent(sphere, cylinder))
    dec = decentration_mm(A, DBL, monocular_pd)
    span = max(A, B)
    blank = span + 2.0 * dec + 2.0 * allowance
    r = blank / 2.0
    delta = (r * r * SE) / (SAG_DENOMINATOR * (refractive_index - 1.0))
    edge = min_center_thickness + delta
    ED = span + 2.0 * dec
    return EdgeEstimate(edge_thickness=edge, delta_thickness=delta, blank_diameter=blank,
                        decentration=dec, effective_diameter=ED)

def estimate_for_eye(rx: Prescription, refractive_index: float, min_center_thickness: float,
                     A: float, B: float, DBL: float, allowance: float = ALLOWANCE_DEFAULT) -> EdgeEstimate:
    return estimate_edge_thickness(rx.sphere, rx.cylinder, refractive_index, min_center_thickness,
                                   A, B, DBL, rx.monocular_pd, allowance)
