"""Calculation output models."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from fedtax.models.enums import FilingStatus


class BracketBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    rate: Decimal  # fraction, e.g. 0.22
    income: Decimal  # taxable income falling in this bracket
    tax: Decimal


class TaxCalculationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    tax_year: int
    filing_status: FilingStatus
    # Income
    total_income: Decimal
    agi: Decimal
    # Deductions
    standard_deduction: Decimal
    itemized_deductions: Decimal | None = None
    total_deductions: Decimal
    used_itemized: bool = False
    taxable_income: Decimal
    # Tax
    income_tax: Decimal
    bracket_breakdown: list[BracketBreakdown]
    effective_rate: Decimal  # percent
    marginal_rate: Decimal  # percent
    # Credits
    child_tax_credit: Decimal
    eitc: Decimal
    total_credits: Decimal
    # Totals
    total_tax_liability: Decimal
    withholding: Decimal
    refund_or_owed: Decimal  # positive = refund, negative = owed

    @property
    def is_refund(self) -> bool:
        return self.refund_or_owed >= 0

    @property
    def refund_or_owed_label(self) -> str:
        return "Estimated Refund" if self.is_refund else "Amount Owed"
