"""Shared test fixtures for the ROI calculator test suite."""

import pytest

from idv_roi.engine import ROIEngine
from idv_roi.models.enums import Industry
from idv_roi.models.inputs import CalculatorInputs
from idv_roi.tables import get_base_tables, load_tables


@pytest.fixture
def enhanced_tables():
    return load_tables()


@pytest.fixture
def base_tables():
    return get_base_tables()


@pytest.fixture
def engine(enhanced_tables):
    return ROIEngine(enhanced_tables)


@pytest.fixture
def healthcare_inputs() -> CalculatorInputs:
    """Healthcare reference case with no company-size scaling.

    annual verifications 120,000; transaction volume $60M; fraud loss $1.5M;
    total savings $1,226,250 against a $60,000 cost increase.
    """
    return CalculatorInputs(
        industry=Industry.HEALTHCARE,
        monthly_verifications=10_000,
        current_fraud_rate=2.5,
        improvement_rate=75,
        avg_transaction_value=500,
        current_cost_per_verification=2.50,
        our_cost_per_verification=3.00,
        include_compliance_costs=True,
        include_operational_efficiency=True,
    )
