"""Presentation records derived from ROI results."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from idv_roi.engine.result import ROIResults
from idv_roi.models.base import CamelModel
from idv_roi.models.enums import InsightSeverity, RiskLevel
from idv_roi.models.inputs import CalculatorInputs


class SavingsSlice(CamelModel):
    component_id: str
    label: str
    value: float


class MonthlyProjection(CamelModel):
    month: int
    label: str
    cumulative_savings: float
    cumulative_investment: float
    net_benefit: float


class RiskFactor(CamelModel):
    label: str
    level: Optional[RiskLevel] = None  # None for purely informational factors


class RiskAssessment(CamelModel):
    score: float
    level: RiskLevel
    risk_reduction: float
    factors: list[RiskFactor]


class Insight(CamelModel):
    severity: InsightSeverity
    title: str
    message: str


class ROIReport(CamelModel):
    """Everything the presentation layer renders for one form state."""

    inputs: CalculatorInputs
    results: ROIResults
    savings_breakdown: list[SavingsSlice]
    projection: list[MonthlyProjection]
    risk: RiskAssessment
    insights: list[Insight]
    executive_summary: str


class ExportDocument(CamelModel):
    inputs: CalculatorInputs
    results: ROIResults
    generated_date: datetime
