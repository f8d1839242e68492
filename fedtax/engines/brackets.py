"""Tax bracket and credit configuration.

Federal brackets, standard deductions, Child Tax Credit and EITC parameters.
Keyed by tax year and filing status. Never hardcode brackets in computation functions.

Sources:
  - 2024: IRS Rev. Proc. 2023-34
  - 2025: IRS Rev. Proc. 2024-40; standard deduction and CTC per P.L. 119-21
"""

import logging
from decimal import Decimal

from fedtax.exceptions import UnsupportedTaxYearError
from fedtax.models.enums import FilingStatus
from fedtax.models.tables import (
    ChildTaxCreditParams,
    EITCParams,
    EITCTier,
    TaxBracket,
    TaxYearTables,
)

logger = logging.getLogger(__name__)

DEFAULT_TAX_YEAR = 2024

# ---------------------------------------------------------------------------
# Federal ordinary income brackets: {year: {filing_status: [(upper_bound, rate), ...]}}
# Upper bound is Decimal or None for the top bracket.
# ---------------------------------------------------------------------------
FEDERAL_BRACKETS: dict[int, dict[FilingStatus, list[tuple[Decimal | None, Decimal]]]] = {
    2024: {
        FilingStatus.SINGLE: [
            (Decimal("11600"), Decimal("0.10")),
            (Decimal("47150"), Decimal("0.12")),
            (Decimal("100525"), Decimal("0.22")),
            (Decimal("191950"), Decimal("0.24")),
            (Decimal("243725"), Decimal("0.32")),
            (Decimal("609350"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
        FilingStatus.MFJ: [
            (Decimal("23200"), Decimal("0.10")),
            (Decimal("94300"), Decimal("0.12")),
            (Decimal("201050"), Decimal("0.22")),
            (Decimal("383900"), Decimal("0.24")),
            (Decimal("487450"), Decimal("0.32")),
            (Decimal("731200"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
        FilingStatus.MFS: [
            (Decimal("11600"), Decimal("0.10")),
            (Decimal("47150"), Decimal("0.12")),
            (Decimal("100525"), Decimal("0.22")),
            (Decimal("191950"), Decimal("0.24")),
            (Decimal("243725"), Decimal("0.32")),
            (Decimal("365600"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
        FilingStatus.HOH: [
            (Decimal("16550"), Decimal("0.10")),
            (Decimal("63100"), Decimal("0.12")),
            (Decimal("100500"), Decimal("0.22")),
            (Decimal("191950"), Decimal("0.24")),
            (Decimal("243700"), Decimal("0.32")),
            (Decimal("609350"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
    },
    2025: {
        FilingStatus.SINGLE: [
            (Decimal("11925"), Decimal("0.10")),
            (Decimal("48475"), Decimal("0.12")),
            (Decimal("103350"), Decimal("0.22")),
            (Decimal("197300"), Decimal("0.24")),
            (Decimal("250525"), Decimal("0.32")),
            (Decimal("626350"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
        FilingStatus.MFJ: [
            (Decimal("23850"), Decimal("0.10")),
            (Decimal("96950"), Decimal("0.12")),
            (Decimal("206700"), Decimal("0.22")),
            (Decimal("394600"), Decimal("0.24")),
            (Decimal("501050"), Decimal("0.32")),
            (Decimal("751600"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
        FilingStatus.MFS: [
            (Decimal("11925"), Decimal("0.10")),
            (Decimal("48475"), Decimal("0.12")),
            (Decimal("103350"), Decimal("0.22")),
            (Decimal("197300"), Decimal("0.24")),
            (Decimal("250525"), Decimal("0.32")),
            (Decimal("375800"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
        FilingStatus.HOH: [
            (Decimal("17000"), Decimal("0.10")),
            (Decimal("64850"), Decimal("0.12")),
            (Decimal("103350"), Decimal("0.22")),
            (Decimal("197300"), Decimal("0.24")),
            (Decimal("250500"), Decimal("0.32")),
            (Decimal("626350"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
    },
}

# ---------------------------------------------------------------------------
# Federal standard deduction
# ---------------------------------------------------------------------------
FEDERAL_STANDARD_DEDUCTION: dict[int, dict[FilingStatus, Decimal]] = {
    2024: {
        FilingStatus.SINGLE: Decimal("14600"),
        FilingStatus.MFJ: Decimal("29200"),
        FilingStatus.MFS: Decimal("14600"),
        FilingStatus.HOH: Decimal("21900"),
    },
    2025: {
        FilingStatus.SINGLE: Decimal("15750"),
        FilingStatus.MFJ: Decimal("31500"),
        FilingStatus.MFS: Decimal("15750"),
        FilingStatus.HOH: Decimal("23625"),
    },
}

# ---------------------------------------------------------------------------
# Child Tax Credit (IRC Section 24)
# Phase-out thresholds are statutory and NOT inflation-adjusted.
# Only joint filers get the higher threshold; MFS and HOH use the single one.
# ---------------------------------------------------------------------------
CHILD_TAX_CREDIT: dict[int, ChildTaxCreditParams] = {
    2024: ChildTaxCreditParams(
        max_credit_per_child=Decimal("2000"),
        phase_out_threshold_married=Decimal("400000"),
        phase_out_threshold_other=Decimal("200000"),
        phase_out_rate=Decimal("0.05"),
    ),
    2025: ChildTaxCreditParams(
        max_credit_per_child=Decimal("2200"),
        phase_out_threshold_married=Decimal("400000"),
        phase_out_threshold_other=Decimal("200000"),
        phase_out_rate=Decimal("0.05"),
    ),
}

# ---------------------------------------------------------------------------
# Earned Income Tax Credit (IRC Section 32)
# {children: (max_credit, completed phase-out AGI single, completed phase-out AGI MFJ)}
# "Single" limits also apply to HOH and MFS.
# ---------------------------------------------------------------------------
EITC: dict[int, dict[int, tuple[Decimal, Decimal, Decimal]]] = {
    2024: {
        0: (Decimal("632"), Decimal("18591"), Decimal("25511")),
        1: (Decimal("4213"), Decimal("49084"), Decimal("56004")),
        2: (Decimal("6960"), Decimal("55768"), Decimal("62688")),
        3: (Decimal("7830"), Decimal("59899"), Decimal("66819")),
    },
    2025: {
        0: (Decimal("649"), Decimal("19104"), Decimal("26214")),
        1: (Decimal("4328"), Decimal("50434"), Decimal("57554")),
        2: (Decimal("7152"), Decimal("57310"), Decimal("64430")),
        3: (Decimal("8046"), Decimal("61555"), Decimal("68675")),
    },
}

# Linear phase-out begins at this fraction of the income limit
EITC_PHASE_OUT_START_FRACTION = Decimal("0.70")


def build_brackets(
    schedule: list[tuple[Decimal | None, Decimal]],
) -> tuple[TaxBracket, ...]:
    """Turn an (upper_bound, rate) schedule into contiguous TaxBracket rows."""
    brackets = []
    lower = Decimal("0")
    for upper, rate in schedule:
        brackets.append(TaxBracket(rate=rate, min=lower, max=upper))
        if upper is None:
            break
        lower = upper
    return tuple(brackets)


def _build_year(tax_year: int) -> TaxYearTables:
    return TaxYearTables(
        tax_year=tax_year,
        brackets={
            status: build_brackets(schedule)
            for status, schedule in FEDERAL_BRACKETS[tax_year].items()
        },
        standard_deduction=FEDERAL_STANDARD_DEDUCTION[tax_year],
        child_tax_credit=CHILD_TAX_CREDIT[tax_year],
        eitc=EITCParams(
            tiers={
                children: EITCTier(
                    max_credit=max_credit,
                    income_limit_single=limit_single,
                    income_limit_married=limit_married,
                )
                for children, (max_credit, limit_single, limit_married)
                in EITC[tax_year].items()
            },
            phase_out_start_fraction=EITC_PHASE_OUT_START_FRACTION,
        ),
    )


TAX_YEAR_TABLES: dict[int, TaxYearTables] = {
    year: _build_year(year) for year in FEDERAL_BRACKETS
}

SUPPORTED_TAX_YEARS: tuple[int, ...] = tuple(sorted(TAX_YEAR_TABLES))


def get_tax_year_tables(tax_year: int) -> TaxYearTables:
    """Return the bracket/deduction/credit bundle for a tax year."""
    tables = TAX_YEAR_TABLES.get(tax_year)
    if tables is None:
        logger.warning("No tax tables for year %s", tax_year)
        raise UnsupportedTaxYearError(tax_year, SUPPORTED_TAX_YEARS)
    return tables
