from .calculator import ROIEngine, compute_breakdown, compute_roi
from .result import CalculationBreakdown, CalculationContext, ROIResults

__all__ = [
    "CalculationBreakdown",
    "CalculationContext",
    "ROIEngine",
    "ROIResults",
    "compute_breakdown",
    "compute_roi",
]
