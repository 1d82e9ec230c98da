"""Pydantic models for the industry and company-size lookup tables."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from idv_roi.models.enums import CompanySize, Industry, TableVariant


class IndustryConfig(BaseModel):
    """Per-industry constants used by the savings formulas.

    ``fraud_loss_multiplier`` and ``breach_cost_per_record`` are carried for
    reference only; no formula reads them.
    """

    name: str
    icon: str = ""
    description: str = ""
    fraud_loss_multiplier: float = Field(description="Typical fraud loss rate (not used)")
    compliance_violation_cost: float = Field(
        ge=0, description="Expected cost of one compliance violation"
    )
    breach_cost_per_record: float = Field(description="Breach cost per record (not used)")
    operational_efficiency_gain: float = Field(
        ge=0, le=1.0, description="Fraction of verification spend recovered"
    )
    risk_multiplier: float = Field(default=1.0, ge=0)


class CompanySizeConfig(BaseModel):
    """Linear scale factor applied to every savings component."""

    name: str
    multiplier: float = Field(gt=0)


class ROITables(BaseModel):
    """A complete set of lookup tables for one calculator variant."""

    id: str
    name: str
    version: str
    variant: TableVariant
    default_industry: Industry
    industries: dict[Industry, IndustryConfig] = Field(min_length=1)
    company_sizes: dict[CompanySize, CompanySizeConfig] = Field(default_factory=dict)
    default_company_size: Optional[CompanySize] = None

    @model_validator(mode="after")
    def defaults_exist_in_tables(self) -> ROITables:
        if self.default_industry not in self.industries:
            raise ValueError(
                f"default_industry '{self.default_industry.value}' "
                "is missing from industries"
            )
        if self.company_sizes:
            if self.default_company_size not in self.company_sizes:
                raise ValueError(
                    "default_company_size must name one of company_sizes, "
                    f"got {self.default_company_size}"
                )
        elif self.default_company_size is not None:
            raise ValueError("default_company_size given without company_sizes")
        return self

    @model_validator(mode="after")
    def enhanced_variant_has_sizes(self) -> ROITables:
        if self.variant == TableVariant.ENHANCED and not self.company_sizes:
            raise ValueError("enhanced tables must define company_sizes")
        if self.variant == TableVariant.BASE and self.company_sizes:
            raise ValueError("base tables cannot define company_sizes")
        return self

    def industry(self, industry: Industry) -> IndustryConfig:
        return self.industries[industry]
