"""Result records produced by the ROI engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from pydantic import Field

from idv_roi.models.base import CamelModel


class ROIResults(CamelModel):
    """Derived financial metrics, recomputed wholesale on every input change."""

    annual_fraud_savings: float
    annual_compliance_savings: float
    annual_operational_savings: float
    total_annual_savings: float
    annual_cost_increase: float
    net_annual_roi: float = Field(alias="netAnnualROI")
    roi_percentage: float
    payback_months: float
    monthly_benefit: float
    three_year_roi: float = Field(alias="threeYearROI")
    risk_score: float


@dataclass(frozen=True)
class CalculationContext:
    """Intermediate values shared by the savings formulas."""

    annual_verifications: float
    annual_transaction_volume: float
    fraud_rate: float
    fraud_reduction_rate: float
    current_cost_per_verification: float
    compliance_violation_cost: float
    operational_efficiency_gain: float
    size_multiplier: float
    risk_multiplier: float

    @property
    def current_annual_fraud_loss(self) -> float:
        return self.annual_transaction_volume * self.fraud_rate


@dataclass(frozen=True)
class CalculationBreakdown:
    """Complete audit trail for a single ROI calculation."""

    context: CalculationContext
    violation_probability: float
    reduced_violation_probability: float
    component_savings: Mapping[str, float]  # read-only view
    results: ROIResults
    disabled_components: tuple[str, ...] = ()
