"""Bracket and credit parameter models.

One TaxYearTables bundle exists per supported tax year. Brackets follow the
IRS rate-schedule convention: a bracket covers income "over min but not over
max", so each bracket's min equals the previous bracket's max.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from fedtax.models.enums import FilingStatus


class TaxBracket(BaseModel):
    model_config = ConfigDict(frozen=True)

    rate: Decimal
    min: Decimal
    max: Decimal | None = None  # None for the top bracket

    @property
    def is_top(self) -> bool:
        return self.max is None


class ChildTaxCreditParams(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_credit_per_child: Decimal
    phase_out_threshold_married: Decimal
    phase_out_threshold_other: Decimal
    phase_out_rate: Decimal  # per dollar of excess AGI

    def threshold_for(self, filing_status: FilingStatus) -> Decimal:
        if filing_status.is_joint:
            return self.phase_out_threshold_married
        return self.phase_out_threshold_other


class EITCTier(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_credit: Decimal
    income_limit_single: Decimal
    income_limit_married: Decimal

    def income_limit_for(self, filing_status: FilingStatus) -> Decimal:
        if filing_status.is_joint:
            return self.income_limit_married
        return self.income_limit_single


class EITCParams(BaseModel):
    """EITC tiers keyed by qualifying children: 0, 1, 2 and 3 (three or more)."""

    model_config = ConfigDict(frozen=True)

    tiers: dict[int, EITCTier]
    phase_out_start_fraction: Decimal = Decimal("0.70")

    def tier_for(self, dependents: int) -> EITCTier:
        top = max(self.tiers)
        return self.tiers[min(max(dependents, 0), top)]


class TaxYearTables(BaseModel):
    """Everything the calculator needs for one tax year."""

    model_config = ConfigDict(frozen=True)

    tax_year: int
    brackets: dict[FilingStatus, tuple[TaxBracket, ...]]
    standard_deduction: dict[FilingStatus, Decimal]
    child_tax_credit: ChildTaxCreditParams
    eitc: EITCParams
