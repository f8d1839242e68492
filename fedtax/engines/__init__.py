"""Tax computation engines."""

from fedtax.engines.calculator import (
    TaxCalculator,
    apply_brackets,
    calculate_federal_tax,
    parse_params,
    select_deduction,
)
from fedtax.engines.credits import compute_child_tax_credit, compute_eitc

__all__ = [
    "TaxCalculator",
    "apply_brackets",
    "calculate_federal_tax",
    "compute_child_tax_credit",
    "compute_eitc",
    "parse_params",
    "select_deduction",
]
