from .coercion import coerce_integer, coerce_number
from .enums import CompanySize, Industry, InsightSeverity, RiskLevel, TableVariant
from .inputs import CalculatorInputs, default_inputs

__all__ = [
    "CalculatorInputs",
    "CompanySize",
    "Industry",
    "InsightSeverity",
    "RiskLevel",
    "TableVariant",
    "coerce_integer",
    "coerce_number",
    "default_inputs",
]
