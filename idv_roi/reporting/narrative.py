"""Executive summary text for an ROI result."""

from __future__ import annotations

from typing import Optional

from idv_roi.engine.result import ROIResults
from idv_roi.models.inputs import CalculatorInputs
from idv_roi.reporting.formatting import format_currency, format_months, format_percent
from idv_roi.tables.schema import CompanySizeConfig, IndustryConfig


def build_executive_summary(
    inputs: CalculatorInputs,
    results: ROIResults,
    industry: IndustryConfig,
    company_size: Optional[CompanySizeConfig] = None,
) -> str:
    """Format the investment analysis and business impact as markdown."""
    lines: list[str] = []

    lines.append("## Executive Summary")
    profile = industry.name
    if company_size is not None:
        profile += f", {company_size.name}"
    lines.append(f"Profile: {profile}\n")

    monthly_investment = results.annual_cost_increase / 12
    lines.append("### Investment Analysis")
    lines.append(
        f"- Annual Investment: {format_currency(results.annual_cost_increase)} "
        f"({format_currency(monthly_investment)}/month)"
    )
    lines.append(f"- Annual Return: {format_currency(results.total_annual_savings)}")
    lines.append(f"- Net Annual Benefit: {format_currency(results.net_annual_roi)}")
    lines.append(f"- ROI: {format_percent(results.roi_percentage)} annually")
    lines.append("")

    lines.append("### Business Impact")
    lines.append(f"- Fraud Reduction: {format_percent(inputs.improvement_rate)} improvement")
    lines.append(f"- Monthly Savings: {format_currency(results.monthly_benefit)}")
    lines.append(f"- Payback Period: {format_months(results.payback_months)}")
    lines.append(f"- 3-Year Value: {format_currency(results.three_year_roi)}")

    return "\n".join(lines)
