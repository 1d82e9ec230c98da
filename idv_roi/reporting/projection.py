"""Chart series derived from ROI results."""

from __future__ import annotations

from idv_roi.engine.result import ROIResults
from idv_roi.reporting.models import MonthlyProjection, SavingsSlice
from idv_roi.savings_library import get_all_components

_RESULT_FIELDS = {
    "fraud_prevention": "annual_fraud_savings",
    "compliance": "annual_compliance_savings",
    "operational_efficiency": "annual_operational_savings",
}


def savings_breakdown(results: ROIResults) -> list[SavingsSlice]:
    """Positive savings components in registration order."""
    slices: list[SavingsSlice] = []
    for component in get_all_components().values():
        value = getattr(results, _RESULT_FIELDS[component.id])
        if value > 0:
            slices.append(
                SavingsSlice(component_id=component.id, label=component.label, value=value)
            )
    return slices


def monthly_projection(results: ROIResults, months: int = 12) -> list[MonthlyProjection]:
    """Cumulative savings vs. cumulative added cost, month by month."""
    monthly_investment = results.annual_cost_increase / 12
    projections: list[MonthlyProjection] = []
    for month in range(1, months + 1):
        savings = results.monthly_benefit * month
        investment = monthly_investment * month
        projections.append(
            MonthlyProjection(
                month=month,
                label=f"Month {month}",
                cumulative_savings=savings,
                cumulative_investment=investment,
                net_benefit=savings - investment,
            )
        )
    return projections
