"""Risk assessment and threshold-driven insights."""

from __future__ import annotations

from idv_roi.engine.result import ROIResults
from idv_roi.models.enums import InsightSeverity, RiskLevel
from idv_roi.models.inputs import CalculatorInputs
from idv_roi.reporting.formatting import (
    format_currency,
    format_months,
    format_number,
    format_percent,
)
from idv_roi.reporting.models import Insight, RiskAssessment, RiskFactor
from idv_roi.tables.schema import IndustryConfig

HIGH_RISK_SCORE = 60
MEDIUM_RISK_SCORE = 30

HIGH_FRAUD_RATE = 5
ELEVATED_FRAUD_RATE = 2
LARGE_TRANSACTION_VALUE = 1000

OUTSTANDING_ROI_PERCENTAGE = 300
FAST_PAYBACK_MONTHS = 6
HIGH_FRAUD_SAVINGS = 1_000_000


def risk_level(score: float) -> RiskLevel:
    """> 60 high, > 30 medium, otherwise low."""
    if score > HIGH_RISK_SCORE:
        return RiskLevel.HIGH
    if score > MEDIUM_RISK_SCORE:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def assess_risk(
    inputs: CalculatorInputs,
    results: ROIResults,
    industry: IndustryConfig,
) -> RiskAssessment:
    if inputs.current_fraud_rate > HIGH_FRAUD_RATE:
        fraud_level = RiskLevel.HIGH
    elif inputs.current_fraud_rate > ELEVATED_FRAUD_RATE:
        fraud_level = RiskLevel.MEDIUM
    else:
        fraud_level = RiskLevel.LOW

    transaction_level = (
        RiskLevel.MEDIUM
        if inputs.avg_transaction_value > LARGE_TRANSACTION_VALUE
        else RiskLevel.LOW
    )

    factors = [
        RiskFactor(
            label=f"{format_number(inputs.current_fraud_rate)}% Current Fraud Rate",
            level=fraud_level,
        ),
        RiskFactor(label=f"{industry.name} Industry"),
        RiskFactor(
            label=f"{format_currency(inputs.avg_transaction_value)} Avg Transaction",
            level=transaction_level,
        ),
    ]
    return RiskAssessment(
        score=results.risk_score,
        level=risk_level(results.risk_score),
        risk_reduction=100 - results.risk_score,
        factors=factors,
    )


def generate_insights(results: ROIResults) -> list[Insight]:
    insights: list[Insight] = []

    if results.roi_percentage > OUTSTANDING_ROI_PERCENTAGE:
        insights.append(
            Insight(
                severity=InsightSeverity.SUCCESS,
                title="Outstanding ROI!",
                message=(
                    "This investment shows exceptional returns of "
                    f"{format_percent(results.roi_percentage)} annually."
                ),
            )
        )

    # A zero payback (no added cost) also counts as fast
    if results.payback_months < FAST_PAYBACK_MONTHS:
        insights.append(
            Insight(
                severity=InsightSeverity.INFO,
                title="Fast Payback",
                message=(
                    "You'll see positive returns in under 6 months with a payback "
                    f"period of {format_months(results.payback_months)}."
                ),
            )
        )

    if results.annual_fraud_savings > HIGH_FRAUD_SAVINGS:
        insights.append(
            Insight(
                severity=InsightSeverity.WARNING,
                title="High Fraud Risk",
                message=(
                    "Your current fraud exposure is over $1M annually. "
                    "Immediate action recommended."
                ),
            )
        )

    return insights
