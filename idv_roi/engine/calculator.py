"""Core ROI engine.

Takes calculator inputs + lookup tables -> produces ROIResults. The
calculation is a single stateless pass; nothing about the inputs is kept
between calls.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping, Optional

import idv_roi.savings_library  # noqa: F401  registers the components
from idv_roi.engine.result import CalculationBreakdown, CalculationContext, ROIResults
from idv_roi.models.enums import CompanySize, Industry
from idv_roi.models.inputs import CalculatorInputs
from idv_roi.savings_library.formulas import violation_probability
from idv_roi.savings_library.registry import get_all_components
from idv_roi.tables.schema import CompanySizeConfig, IndustryConfig, ROITables

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12
PROJECTION_YEARS = 3

# Risk score surcharges
SLOW_PAYBACK_MONTHS = 12
SLOW_PAYBACK_PENALTY = 20
LOW_ROI_PERCENTAGE = 100
LOW_ROI_PENALTY = 15
MAX_RISK_SCORE = 100


def compute_breakdown(
    inputs: CalculatorInputs,
    industry_table: Mapping[Industry, IndustryConfig],
    size_table: Optional[Mapping[CompanySize, CompanySizeConfig]] = None,
) -> CalculationBreakdown:
    """Run the full calculation and keep every intermediate value.

    An industry or company size missing from its table raises KeyError:
    callers are expected to pass keys the tables define.
    """
    config = industry_table[inputs.industry]
    size_multiplier = 1.0
    if inputs.company_size is not None and size_table:
        size_multiplier = size_table[inputs.company_size].multiplier

    annual_verifications = inputs.monthly_verifications * MONTHS_PER_YEAR
    context = CalculationContext(
        annual_verifications=annual_verifications,
        annual_transaction_volume=annual_verifications * inputs.avg_transaction_value,
        fraud_rate=inputs.current_fraud_rate / 100,
        fraud_reduction_rate=inputs.improvement_rate / 100,
        current_cost_per_verification=inputs.current_cost_per_verification,
        compliance_violation_cost=config.compliance_violation_cost,
        operational_efficiency_gain=config.operational_efficiency_gain,
        size_multiplier=size_multiplier,
        risk_multiplier=config.risk_multiplier,
    )

    component_savings: dict[str, float] = {}
    disabled: list[str] = []
    for component in get_all_components().values():
        if not component.is_enabled(inputs):
            component_savings[component.id] = 0.0
            disabled.append(component.id)
            continue
        kwargs = {name: getattr(context, name) for name in component.required_inputs}
        component_savings[component.id] = component.formula_fn(**kwargs)

    annual_fraud_savings = component_savings["fraud_prevention"]
    annual_compliance_savings = component_savings["compliance"]
    annual_operational_savings = component_savings["operational_efficiency"]
    total_annual_savings = (
        annual_fraud_savings + annual_compliance_savings + annual_operational_savings
    )

    annual_cost_increase = annual_verifications * (
        inputs.our_cost_per_verification - inputs.current_cost_per_verification
    )
    net_annual_roi = total_annual_savings - annual_cost_increase

    roi_percentage = 0.0
    payback_months = 0.0
    if annual_cost_increase > 0:
        roi_percentage = (net_annual_roi / annual_cost_increase) * 100
        if total_annual_savings != 0:
            payback_months = annual_cost_increase / (
                total_annual_savings / MONTHS_PER_YEAR
            )

    risk_score = _risk_score(
        fraud_rate_pct=inputs.current_fraud_rate,
        risk_multiplier=config.risk_multiplier,
        payback_months=payback_months,
        roi_percentage=roi_percentage,
    )

    results = ROIResults(
        annual_fraud_savings=annual_fraud_savings,
        annual_compliance_savings=annual_compliance_savings,
        annual_operational_savings=annual_operational_savings,
        total_annual_savings=total_annual_savings,
        annual_cost_increase=annual_cost_increase,
        net_annual_roi=net_annual_roi,
        roi_percentage=roi_percentage,
        payback_months=payback_months,
        monthly_benefit=total_annual_savings / MONTHS_PER_YEAR,
        three_year_roi=net_annual_roi * PROJECTION_YEARS,
        risk_score=risk_score,
    )

    probability = violation_probability(context.fraud_rate)
    logger.debug(
        "ROI for %s: savings=%.2f cost_increase=%.2f roi=%.2f%% risk=%.1f",
        inputs.industry.value,
        total_annual_savings,
        annual_cost_increase,
        roi_percentage,
        risk_score,
    )
    return CalculationBreakdown(
        context=context,
        violation_probability=probability,
        reduced_violation_probability=probability * (1 - context.fraud_reduction_rate),
        component_savings=MappingProxyType(component_savings),
        results=results,
        disabled_components=tuple(disabled),
    )


def compute_roi(
    inputs: CalculatorInputs,
    industry_table: Mapping[Industry, IndustryConfig],
    size_table: Optional[Mapping[CompanySize, CompanySizeConfig]] = None,
) -> ROIResults:
    """Map one set of calculator inputs to its ROI results."""
    return compute_breakdown(inputs, industry_table, size_table).results


def _risk_score(
    fraud_rate_pct: float,
    risk_multiplier: float,
    payback_months: float,
    roi_percentage: float,
) -> float:
    """Composite 0-100 risk indicator (lower is better)."""
    raw = fraud_rate_pct * risk_multiplier
    if payback_months > SLOW_PAYBACK_MONTHS:
        raw += SLOW_PAYBACK_PENALTY
    if roi_percentage < LOW_ROI_PERCENTAGE:
        raw += LOW_ROI_PENALTY
    return max(0.0, min(float(MAX_RISK_SCORE), raw))


class ROIEngine:
    """ROI engine bound to one set of lookup tables.

    Inputs are immutable and hashable, so repeated calculations for the same
    form state are served from a small cache.
    """

    def __init__(self, tables: ROITables, cache_size: int = 128) -> None:
        self.tables = tables
        self._cache_size = cache_size
        self._cache: dict[CalculatorInputs, CalculationBreakdown] = {}

    def breakdown(self, inputs: CalculatorInputs) -> CalculationBreakdown:
        cached = self._cache.get(inputs)
        if cached is not None:
            return cached
        result = compute_breakdown(
            inputs, self.tables.industries, self.tables.company_sizes
        )
        if len(self._cache) >= self._cache_size:
            self._cache.pop(next(iter(self._cache)))
        self._cache[inputs] = result
        return result

    def calculate(self, inputs: CalculatorInputs) -> ROIResults:
        """Run the ROI calculation for one set of inputs."""
        return self.breakdown(inputs).results
