import numpy as np

def round6(x: float) -> float:
    try:
        return float(np.round(float(x), 6))
    except (TypeError, ValueError):
        return x

def fmt_mm(x) -> str:
    try:
        return f"{float(x):.1f}mm"
    except (TypeError, ValueError):
        return str(x)
