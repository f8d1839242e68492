"""Data models for fedtax."""

from fedtax.models.enums import FilingStatus
from fedtax.models.inputs import TaxCalculationParams
from fedtax.models.results import BracketBreakdown, TaxCalculationResult
from fedtax.models.tables import (
    ChildTaxCreditParams,
    EITCParams,
    EITCTier,
    TaxBracket,
    TaxYearTables,
)

__all__ = [
    "BracketBreakdown",
    "ChildTaxCreditParams",
    "EITCParams",
    "EITCTier",
    "FilingStatus",
    "TaxBracket",
    "TaxCalculationParams",
    "TaxCalculationResult",
    "TaxYearTables",
]
