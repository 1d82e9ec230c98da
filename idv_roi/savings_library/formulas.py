"""Savings component formulas for identity verification ROI.

Each function is a pure calculation with no side effects. Rates arrive as
fractions (0.75, not 75). Inputs are not range-checked: a negative fraud rate
or cost produces a negative saving rather than an error.
"""

from idv_roi.savings_library.registry import register_component

# Violation risk is modeled as twice the fraud rate, capped here
MAX_VIOLATION_PROBABILITY = 0.05
VIOLATION_RISK_FACTOR = 2


def violation_probability(fraud_rate: float) -> float:
    """P(compliance violation) = min(5%, 2 x fraud_rate)"""
    return min(MAX_VIOLATION_PROBABILITY, fraud_rate * VIOLATION_RISK_FACTOR)


@register_component(
    component_id="fraud_prevention",
    label="Fraud Prevention",
    description=(
        "Fraud losses avoided on the annual transaction volume. "
        "Formula: volume * fraud_rate * reduction * size_multiplier."
    ),
    required_inputs=[
        "annual_transaction_volume",
        "fraud_rate",
        "fraud_reduction_rate",
        "size_multiplier",
    ],
)
def calc_fraud_savings(
    annual_transaction_volume: float,
    fraud_rate: float,
    fraud_reduction_rate: float,
    size_multiplier: float,
) -> float:
    """Fraud_Savings = (volume x fraud_rate) x reduction x size_multiplier"""
    current_annual_fraud_loss = annual_transaction_volume * fraud_rate
    return current_annual_fraud_loss * fraud_reduction_rate * size_multiplier


@register_component(
    component_id="compliance",
    label="Compliance Savings",
    description=(
        "Expected compliance violation cost avoided by lowering violation "
        "probability in step with fraud. "
        "Formula: (p - p * (1 - reduction)) * violation_cost * size_multiplier."
    ),
    required_inputs=[
        "fraud_rate",
        "fraud_reduction_rate",
        "compliance_violation_cost",
        "size_multiplier",
    ],
    toggle="include_compliance_costs",
)
def calc_compliance_savings(
    fraud_rate: float,
    fraud_reduction_rate: float,
    compliance_violation_cost: float,
    size_multiplier: float,
) -> float:
    """Compliance_Savings = (p - p_reduced) x violation_cost x size_multiplier"""
    probability = violation_probability(fraud_rate)
    reduced_probability = probability * (1 - fraud_reduction_rate)
    return (probability - reduced_probability) * compliance_violation_cost * size_multiplier


@register_component(
    component_id="operational_efficiency",
    label="Operational Efficiency",
    description=(
        "Share of current verification spend recovered through automation. "
        "Formula: annual_verifications * current_cost * efficiency_gain * size_multiplier."
    ),
    required_inputs=[
        "annual_verifications",
        "current_cost_per_verification",
        "operational_efficiency_gain",
        "size_multiplier",
    ],
    toggle="include_operational_efficiency",
)
def calc_operational_savings(
    annual_verifications: float,
    current_cost_per_verification: float,
    operational_efficiency_gain: float,
    size_multiplier: float,
) -> float:
    """Operational_Savings = verifications x cost x efficiency_gain x size_multiplier"""
    return (
        annual_verifications
        * current_cost_per_verification
        * operational_efficiency_gain
        * size_multiplier
    )
