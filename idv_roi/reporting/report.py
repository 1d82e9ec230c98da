"""Bundle results and every derived view for one form state."""

from __future__ import annotations

import logging

from idv_roi.engine.calculator import ROIEngine
from idv_roi.models.inputs import CalculatorInputs
from idv_roi.reporting.insights import assess_risk, generate_insights
from idv_roi.reporting.models import ROIReport
from idv_roi.reporting.narrative import build_executive_summary
from idv_roi.reporting.projection import monthly_projection, savings_breakdown

logger = logging.getLogger(__name__)


def build_report(inputs: CalculatorInputs, engine: ROIEngine) -> ROIReport:
    tables = engine.tables
    results = engine.calculate(inputs)
    industry = tables.industry(inputs.industry)
    company_size = (
        tables.company_sizes.get(inputs.company_size)
        if inputs.company_size is not None
        else None
    )

    report = ROIReport(
        inputs=inputs,
        results=results,
        savings_breakdown=savings_breakdown(results),
        projection=monthly_projection(results),
        risk=assess_risk(inputs, results, industry),
        insights=generate_insights(results),
        executive_summary=build_executive_summary(inputs, results, industry, company_size),
    )
    logger.info(
        "Report built for %s: net_annual_roi=%.0f, %d insights",
        inputs.industry.value,
        results.net_annual_roi,
        len(report.insights),
    )
    return report
