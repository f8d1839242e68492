"""Child Tax Credit and Earned Income Tax Credit.

Both calculators are deliberately simplified relative to the IRS worksheets:
  - CTC collapses the four filing statuses into two phase-out thresholds
    (joint vs. everyone else) and ignores the refundable ACTC portion.
  - EITC uses a single linear phase-out from 70% of the income limit down to
    zero at the limit; there is no phase-in region and no plateau.
"""

from decimal import ROUND_CEILING, ROUND_HALF_UP, Decimal

from fedtax.models.enums import FilingStatus
from fedtax.models.tables import ChildTaxCreditParams, EITCParams

ZERO = Decimal("0")
CENT = Decimal("0.01")
PHASE_OUT_STEP = Decimal("1000")


def compute_child_tax_credit(
    agi: Decimal,
    dependents: int,
    filing_status: FilingStatus,
    params: ChildTaxCreditParams,
) -> Decimal:
    """Per-child credit reduced in whole $1,000 steps of AGI over the threshold.

    Each started $1,000 of excess costs ``phase_out_rate * 1000`` ($50), so
    $1 over the threshold already removes one full step.
    """
    base_credit = max(dependents, 0) * params.max_credit_per_child
    if base_credit == ZERO:
        return ZERO

    excess = agi - params.threshold_for(filing_status)
    if excess <= ZERO:
        return base_credit

    steps = (excess / PHASE_OUT_STEP).to_integral_value(rounding=ROUND_CEILING)
    reduction = steps * (params.phase_out_rate * PHASE_OUT_STEP)
    return max(base_credit - reduction, ZERO)


def compute_eitc(
    agi: Decimal,
    dependents: int,
    filing_status: FilingStatus,
    params: EITCParams,
) -> Decimal:
    """EITC for the dependents tier, rounded to cents."""
    tier = params.tier_for(dependents)
    income_limit = tier.income_limit_for(filing_status)
    if agi > income_limit:
        return ZERO

    phase_out_start = income_limit * params.phase_out_start_fraction
    if agi <= phase_out_start:
        return tier.max_credit

    remaining = (income_limit - agi) / (income_limit - phase_out_start)
    return (tier.max_credit * remaining).quantize(CENT, rounding=ROUND_HALF_UP)
