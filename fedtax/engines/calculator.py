"""Federal income tax calculation engine.

Computes a single-year federal estimate from wages, other income,
above-the-line adjustments, deductions, dependents and withholding:
  - AGI and standard vs. itemized deduction selection
  - Progressive ordinary income tax with a per-bracket breakdown
  - Child Tax Credit and EITC (see engines.credits)
  - Final liability (credits floored at zero) and refund or amount owed

Invalid numeric inputs are clamped, never rejected. Only an unsupported tax
year or an unknown filing status raises.
"""

import logging
from collections.abc import Callable, Mapping
from decimal import Decimal
from typing import Any

from pydantic import ValidationError
from pydantic.alias_generators import to_snake

from fedtax.engines.brackets import get_tax_year_tables
from fedtax.engines.credits import compute_child_tax_credit, compute_eitc
from fedtax.exceptions import InvalidInputError
from fedtax.models.enums import FilingStatus
from fedtax.models.inputs import TaxCalculationParams
from fedtax.models.results import BracketBreakdown, TaxCalculationResult
from fedtax.models.tables import TaxBracket, TaxYearTables

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def apply_brackets(
    taxable_income: Decimal, brackets: tuple[TaxBracket, ...] | list[TaxBracket]
) -> tuple[Decimal, list[BracketBreakdown]]:
    """Apply progressive tax brackets to income.

    Returns the total tax and one breakdown row per bracket that taxed a
    nonzero amount.
    """
    tax = ZERO
    breakdown: list[BracketBreakdown] = []
    remaining = max(taxable_income, ZERO)

    for bracket in brackets:
        if remaining <= ZERO:
            break
        if bracket.max is None:
            taxed = remaining
        else:
            taxed = min(bracket.max - bracket.min, remaining)
        bracket_tax = taxed * bracket.rate
        tax += bracket_tax
        remaining -= taxed
        breakdown.append(
            BracketBreakdown(rate=bracket.rate, income=taxed, tax=bracket_tax)
        )

    return tax, breakdown


def select_deduction(
    standard_deduction: Decimal, itemized_deductions: Decimal | None
) -> tuple[Decimal, bool]:
    """Pick the larger of standard and itemized. Returns (deduction, used_itemized)."""
    if itemized_deductions is None or itemized_deductions <= standard_deduction:
        return standard_deduction, False
    return itemized_deductions, True


def parse_params(data: Mapping[str, Any]) -> TaxCalculationParams:
    """Build TaxCalculationParams from a plain mapping.

    Accepts snake_case or camelCase keys. Any validation failure is raised as
    InvalidInputError naming the first offending field.
    """
    try:
        return TaxCalculationParams.model_validate(dict(data))
    except ValidationError as exc:
        error = exc.errors()[0]
        field = ".".join(to_snake(str(part)) for part in error["loc"]) or "params"
        raise InvalidInputError(field, error["msg"]) from exc


class TaxCalculator:
    """Computes federal tax liability, credits and refund for one tax year."""

    def __init__(
        self,
        tables_for: Callable[[int], TaxYearTables] = get_tax_year_tables,
    ) -> None:
        self.tables_for = tables_for

    def calculate(self, params: TaxCalculationParams) -> TaxCalculationResult:
        """Compute the full federal estimate for ``params``."""
        tables = self.tables_for(params.tax_year)
        status = params.filing_status

        # --- Income aggregation ---
        total_income = params.wages + params.other_income
        agi = max(total_income - params.adjustments, ZERO)

        # --- Deductions ---
        standard_deduction = tables.standard_deduction[status]
        deduction, used_itemized = select_deduction(
            standard_deduction, params.itemized_deductions
        )
        taxable_income = max(agi - deduction, ZERO)

        # --- Ordinary income tax ---
        income_tax, breakdown = apply_brackets(taxable_income, tables.brackets[status])
        effective_rate = income_tax / agi * HUNDRED if agi > ZERO else ZERO
        marginal_rate = breakdown[-1].rate * HUNDRED if breakdown else ZERO

        # --- Credits ---
        child_tax_credit = compute_child_tax_credit(
            agi, params.dependents, status, tables.child_tax_credit
        )
        eitc = compute_eitc(agi, params.dependents, status, tables.eitc)
        total_credits = child_tax_credit + eitc

        # --- Totals ---
        # Credits are treated as non-refundable: liability never goes below zero.
        total_tax_liability = max(income_tax - total_credits, ZERO)
        refund_or_owed = params.withholding - total_tax_liability

        logger.debug(
            "Calculated %s/%s: agi=%s taxable=%s tax=%s credits=%s liability=%s",
            params.tax_year, status, agi, taxable_income, income_tax,
            total_credits, total_tax_liability,
        )

        return TaxCalculationResult(
            tax_year=params.tax_year,
            filing_status=status,
            total_income=total_income,
            agi=agi,
            standard_deduction=standard_deduction,
            itemized_deductions=params.itemized_deductions,
            total_deductions=deduction,
            used_itemized=used_itemized,
            taxable_income=taxable_income,
            income_tax=income_tax,
            bracket_breakdown=breakdown,
            effective_rate=effective_rate,
            marginal_rate=marginal_rate,
            child_tax_credit=child_tax_credit,
            eitc=eitc,
            total_credits=total_credits,
            total_tax_liability=total_tax_liability,
            withholding=params.withholding,
            refund_or_owed=refund_or_owed,
        )

    def compute_income_tax(
        self, taxable_income: Decimal, filing_status: FilingStatus, tax_year: int
    ) -> Decimal:
        """Compute federal ordinary income tax using progressive brackets."""
        brackets = self.tables_for(tax_year).brackets[filing_status]
        tax, _ = apply_brackets(taxable_income, brackets)
        return tax

    def compute_child_tax_credit(
        self, agi: Decimal, dependents: int, filing_status: FilingStatus, tax_year: int
    ) -> Decimal:
        return compute_child_tax_credit(
            agi, dependents, filing_status, self.tables_for(tax_year).child_tax_credit
        )

    def compute_eitc(
        self, agi: Decimal, dependents: int, filing_status: FilingStatus, tax_year: int
    ) -> Decimal:
        return compute_eitc(agi, dependents, filing_status, self.tables_for(tax_year).eitc)


def calculate_federal_tax(
    params: TaxCalculationParams | Mapping[str, Any],
) -> TaxCalculationResult:
    """Compute a federal tax estimate.

    ``params`` may be a TaxCalculationParams or a mapping with the same
    fields (snake_case or camelCase).
    """
    if not isinstance(params, TaxCalculationParams):
        params = parse_params(params)
    return TaxCalculator().calculate(params)
