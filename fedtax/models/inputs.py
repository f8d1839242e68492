"""Calculation input model."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from fedtax.models.enums import FilingStatus


class TaxCalculationParams(BaseModel):
    """Inputs to a single federal tax calculation.

    Monetary amounts are annual dollar figures. Negative amounts are accepted
    here and clamped by the calculator rather than rejected. Scenario files
    may use either these field names or the web form's camelCase keys
    (``taxYear``, ``otherIncome``, ...).
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="forbid",
    )

    tax_year: int
    filing_status: FilingStatus
    wages: Decimal = Decimal("0")
    other_income: Decimal = Decimal("0")
    adjustments: Decimal = Decimal("0")  # above-the-line (IRA, HSA, ...)
    itemized_deductions: Decimal | None = None
    dependents: int = 0  # qualifying children under 17
    withholding: Decimal = Decimal("0")

    @field_validator("filing_status", mode="before")
    @classmethod
    def _parse_filing_status(cls, value: object) -> FilingStatus:
        return FilingStatus.parse(value)  # type: ignore[arg-type]
