"""Integration tests for the ROI engine."""

import math

import pytest

from idv_roi.engine import ROIEngine, compute_breakdown, compute_roi
from idv_roi.models.enums import CompanySize, Industry


class TestReferenceScenario:
    def test_intermediate_values(self, enhanced_tables, healthcare_inputs):
        breakdown = compute_breakdown(
            healthcare_inputs, enhanced_tables.industries, enhanced_tables.company_sizes
        )
        ctx = breakdown.context
        assert ctx.annual_verifications == 120_000
        assert ctx.annual_transaction_volume == pytest.approx(60_000_000)
        assert ctx.current_annual_fraud_loss == pytest.approx(1_500_000)
        assert ctx.size_multiplier == 1.0
        assert breakdown.violation_probability == pytest.approx(0.05)
        assert breakdown.reduced_violation_probability == pytest.approx(0.0125)

    def test_savings_components(self, enhanced_tables, healthcare_inputs):
        results = compute_roi(healthcare_inputs, enhanced_tables.industries)
        assert results.annual_fraud_savings == pytest.approx(1_125_000)
        assert results.annual_compliance_savings == pytest.approx(56_250)
        assert results.annual_operational_savings == pytest.approx(45_000)
        assert results.total_annual_savings == pytest.approx(1_226_250)

    def test_cost_and_roi(self, enhanced_tables, healthcare_inputs):
        results = compute_roi(healthcare_inputs, enhanced_tables.industries)
        assert results.annual_cost_increase == pytest.approx(60_000)
        assert results.net_annual_roi == pytest.approx(1_166_250)
        assert results.roi_percentage == pytest.approx(1943.75)
        # 60,000 / (1,226,250 / 12)
        assert results.payback_months == pytest.approx(0.587, abs=1e-3)

    def test_enhanced_fields(self, enhanced_tables, healthcare_inputs):
        results = compute_roi(healthcare_inputs, enhanced_tables.industries)
        assert results.monthly_benefit == pytest.approx(102_187.5)
        assert results.three_year_roi == pytest.approx(3_498_750)
        # 2.5 * 1.5 healthcare risk multiplier, fast payback, high ROI
        assert results.risk_score == pytest.approx(3.75)

    def test_base_tables_use_unit_risk_multiplier(self, base_tables, healthcare_inputs):
        results = compute_roi(healthcare_inputs, base_tables.industries)
        assert results.total_annual_savings == pytest.approx(1_226_250)
        assert results.risk_score == pytest.approx(2.5)


class TestEqualCosts:
    def test_zero_cost_increase_zeroes_roi_and_payback(self, enhanced_tables, healthcare_inputs):
        inputs = healthcare_inputs.replace(our_cost_per_verification=2.50)
        results = compute_roi(inputs, enhanced_tables.industries)
        assert results.annual_cost_increase == 0
        assert results.roi_percentage == 0
        assert results.payback_months == 0
        assert results.net_annual_roi == pytest.approx(1_226_250)
        assert results.net_annual_roi == results.total_annual_savings

    def test_cheaper_service_gives_negative_cost_increase(self, enhanced_tables, healthcare_inputs):
        inputs = healthcare_inputs.replace(our_cost_per_verification=2.00)
        results = compute_roi(inputs, enhanced_tables.industries)
        assert results.annual_cost_increase == pytest.approx(-60_000)
        assert results.roi_percentage == 0
        assert results.payback_months == 0
        assert results.net_annual_roi == pytest.approx(1_286_250)


class TestNoImprovement:
    def test_only_operational_savings_remain(self, enhanced_tables, healthcare_inputs):
        inputs = healthcare_inputs.replace(improvement_rate=0)
        breakdown = compute_breakdown(inputs, enhanced_tables.industries)
        results = breakdown.results
        assert results.annual_fraud_savings == 0
        assert breakdown.reduced_violation_probability == breakdown.violation_probability
        assert results.annual_compliance_savings == 0
        assert results.annual_operational_savings == pytest.approx(45_000)
        assert results.total_annual_savings == pytest.approx(45_000)

    def test_nothing_remains_with_operational_toggle_off(self, enhanced_tables, healthcare_inputs):
        inputs = healthcare_inputs.replace(
            improvement_rate=0, include_operational_efficiency=False
        )
        results = compute_roi(inputs, enhanced_tables.industries)
        assert results.total_annual_savings == 0
        # cost increase is positive but there is nothing to pay it back with
        assert results.payback_months == 0
        assert results.roi_percentage == pytest.approx(-100)


class TestCompanySize:
    def test_medium_size_scales_every_component(self, enhanced_tables, healthcare_inputs):
        inputs = healthcare_inputs.replace(company_size=CompanySize.MEDIUM)
        results = compute_roi(
            inputs, enhanced_tables.industries, enhanced_tables.company_sizes
        )
        assert results.annual_fraud_savings == pytest.approx(1_350_000)
        assert results.annual_compliance_savings == pytest.approx(67_500)
        assert results.annual_operational_savings == pytest.approx(54_000)
        assert results.total_annual_savings == pytest.approx(1_471_500)

    def test_size_does_not_scale_cost_increase(self, enhanced_tables, healthcare_inputs):
        inputs = healthcare_inputs.replace(company_size=CompanySize.LARGE)
        results = compute_roi(
            inputs, enhanced_tables.industries, enhanced_tables.company_sizes
        )
        assert results.annual_cost_increase == pytest.approx(60_000)

    def test_size_ignored_without_size_table(self, enhanced_tables, healthcare_inputs):
        inputs = healthcare_inputs.replace(company_size=CompanySize.STARTUP)
        results = compute_roi(inputs, enhanced_tables.industries)
        assert results.annual_fraud_savings == pytest.approx(1_125_000)


class TestRiskScore:
    def test_slow_payback_and_low_roi_penalties(self, enhanced_tables, healthcare_inputs):
        inputs = healthcare_inputs.replace(
            improvement_rate=1,
            include_compliance_costs=False,
            include_operational_efficiency=False,
        )
        results = compute_roi(inputs, enhanced_tables.industries)
        # fraud savings 15,000 vs cost 60,000 -> 48 months, -75% ROI
        assert results.payback_months == pytest.approx(48)
        assert results.roi_percentage == pytest.approx(-75)
        assert results.risk_score == pytest.approx(3.75 + 20 + 15)

    def test_clamped_at_100(self, enhanced_tables, healthcare_inputs):
        inputs = healthcare_inputs.replace(current_fraud_rate=90)
        results = compute_roi(inputs, enhanced_tables.industries)
        assert results.risk_score == 100

    def test_clamped_at_zero_for_negative_fraud_rate(self, enhanced_tables, healthcare_inputs):
        inputs = healthcare_inputs.replace(current_fraud_rate=-50)
        results = compute_roi(inputs, enhanced_tables.industries)
        assert results.risk_score == 0


class TestROIEngine:
    def test_calculate_matches_pure_function(self, engine, enhanced_tables, healthcare_inputs):
        expected = compute_roi(
            healthcare_inputs, enhanced_tables.industries, enhanced_tables.company_sizes
        )
        assert engine.calculate(healthcare_inputs) == expected

    def test_repeated_inputs_are_cached(self, engine, healthcare_inputs):
        first = engine.breakdown(healthcare_inputs)
        second = engine.breakdown(healthcare_inputs.replace())
        assert first is second

    def test_cached_breakdown_is_read_only(self, engine, healthcare_inputs):
        inputs = healthcare_inputs.replace(include_compliance_costs=False)
        breakdown = engine.breakdown(inputs)
        with pytest.raises(AttributeError):
            breakdown.disabled_components.append("fraud_prevention")
        with pytest.raises(TypeError):
            breakdown.component_savings["compliance"] = 1.0
        again = engine.breakdown(inputs)
        assert again.disabled_components == ("compliance",)
        assert again.component_savings["compliance"] == 0.0

    def test_cache_is_bounded(self, enhanced_tables, healthcare_inputs):
        engine = ROIEngine(enhanced_tables, cache_size=2)
        for rate in (1.0, 2.0, 3.0):
            engine.calculate(healthcare_inputs.replace(current_fraud_rate=rate))
        assert len(engine._cache) == 2

    def test_every_industry_produces_finite_results(self, engine, healthcare_inputs):
        for industry in Industry:
            results = engine.calculate(healthcare_inputs.replace(industry=industry))
            for value in results.model_dump().values():
                assert not math.isnan(value)

    def test_unknown_industry_is_a_key_error(self, base_tables, healthcare_inputs):
        inputs = healthcare_inputs.replace(industry=Industry.GAMING)
        with pytest.raises(KeyError):
            compute_roi(inputs, base_tables.industries)
