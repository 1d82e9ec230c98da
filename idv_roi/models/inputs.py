from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional

from pydantic import Field

from .base import CamelModel
from .coercion import coerce_integer, coerce_number
from .enums import CompanySize, Industry, TableVariant

if TYPE_CHECKING:
    from idv_roi.tables.schema import ROITables

# Form values the calculator starts with before the user edits anything
DEFAULT_MONTHLY_VERIFICATIONS = 10_000
DEFAULT_FRAUD_RATE = 2.5
DEFAULT_IMPROVEMENT_RATE = 75.0
DEFAULT_AVG_TRANSACTION_VALUE = 500.0
DEFAULT_CURRENT_COST = 2.50
DEFAULT_OUR_COST = 3.00

_NUMERIC_FIELDS = (
    "current_fraud_rate",
    "improvement_rate",
    "avg_transaction_value",
    "current_cost_per_verification",
    "our_cost_per_verification",
)
_TOGGLE_FIELDS = ("include_compliance_costs", "include_operational_efficiency")


class CalculatorInputs(CamelModel):
    """Business parameters for one ROI calculation.

    ``company_size`` and the two toggles are optional: ``None`` means the
    calculator variant does not offer that control, so no size scaling is
    applied and the savings component is never gated off.

    Numbers are not range-checked. Negative values flow through the formulas
    as plain arithmetic.
    """

    industry: Industry = Industry.HEALTHCARE
    company_size: Optional[CompanySize] = None
    monthly_verifications: float = DEFAULT_MONTHLY_VERIFICATIONS
    current_fraud_rate: float = Field(
        default=DEFAULT_FRAUD_RATE, description="Percent of transactions that are fraudulent"
    )
    improvement_rate: float = Field(
        default=DEFAULT_IMPROVEMENT_RATE, description="Percent reduction in fraud"
    )
    avg_transaction_value: float = DEFAULT_AVG_TRANSACTION_VALUE
    current_cost_per_verification: float = DEFAULT_CURRENT_COST
    our_cost_per_verification: float = DEFAULT_OUR_COST
    include_compliance_costs: Optional[bool] = None
    include_operational_efficiency: Optional[bool] = None

    def replace(self, **changes: Any) -> CalculatorInputs:
        """Return a copy with some fields changed (one form edit)."""
        return self.model_copy(update=changes)

    @classmethod
    def from_form(
        cls, raw: Mapping[str, Any], tables: ROITables
    ) -> CalculatorInputs:
        """Build inputs from a raw form mapping.

        Keys may be camelCase or snake_case. Missing keys keep the defaults
        of the table variant; numeric text that does not parse becomes 0.
        Raises ValueError for an industry or company size the tables do not
        define.
        """
        defaults = default_inputs(tables)
        values = defaults.model_dump()

        for name, field in cls.model_fields.items():
            if field.alias in raw:
                values[name] = raw[field.alias]
            elif name in raw:
                values[name] = raw[name]

        industry = _parse_key(values["industry"], Industry, "industry")
        if industry not in tables.industries:
            raise ValueError(
                f"Industry '{industry.value}' is not defined in tables '{tables.id}'"
            )
        values["industry"] = industry

        if tables.company_sizes:
            size = values["company_size"]
            if size is None:
                size = tables.default_company_size
            size = _parse_key(size, CompanySize, "company size")
            if size not in tables.company_sizes:
                raise ValueError(
                    f"Company size '{size.value}' is not defined in tables '{tables.id}'"
                )
            values["company_size"] = size
        else:
            values["company_size"] = None

        values["monthly_verifications"] = coerce_integer(values["monthly_verifications"])
        for name in _NUMERIC_FIELDS:
            values[name] = coerce_number(values[name])

        if tables.variant == TableVariant.BASE:
            for name in _TOGGLE_FIELDS:
                values[name] = None

        return cls.model_validate(values)


def default_inputs(tables: ROITables) -> CalculatorInputs:
    """The documented starting form for a table variant."""
    if tables.variant == TableVariant.BASE:
        return CalculatorInputs(industry=tables.default_industry)
    return CalculatorInputs(
        industry=tables.default_industry,
        company_size=tables.default_company_size,
        include_compliance_costs=True,
        include_operational_efficiency=True,
    )


def _parse_key(value: Any, enum_cls: type, label: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        raise ValueError(f"Unknown {label}: {value!r}") from None
