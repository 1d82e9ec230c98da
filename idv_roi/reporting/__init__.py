from .export import build_export, export_filename, export_json
from .formatting import format_currency, format_number, format_percent
from .insights import assess_risk, generate_insights, risk_level
from .models import (
    ExportDocument,
    Insight,
    MonthlyProjection,
    RiskAssessment,
    RiskFactor,
    ROIReport,
    SavingsSlice,
)
from .narrative import build_executive_summary
from .projection import monthly_projection, savings_breakdown
from .report import build_report

__all__ = [
    "ExportDocument",
    "Insight",
    "MonthlyProjection",
    "RiskAssessment",
    "RiskFactor",
    "ROIReport",
    "SavingsSlice",
    "assess_risk",
    "build_executive_summary",
    "build_export",
    "build_report",
    "export_filename",
    "export_json",
    "format_currency",
    "format_number",
    "format_percent",
    "generate_insights",
    "monthly_projection",
    "risk_level",
    "savings_breakdown",
]
