"""fedtax — federal income tax estimator."""

from fedtax.engines.brackets import SUPPORTED_TAX_YEARS, get_tax_year_tables
from fedtax.engines.calculator import TaxCalculator, calculate_federal_tax
from fedtax.exceptions import InvalidInputError, TaxComputationError
from fedtax.formatting import format_currency, format_percentage
from fedtax.models import FilingStatus, TaxCalculationParams, TaxCalculationResult

__version__ = "0.1.0"

__all__ = [
    "FilingStatus",
    "InvalidInputError",
    "SUPPORTED_TAX_YEARS",
    "TaxCalculationParams",
    "TaxCalculationResult",
    "TaxCalculator",
    "TaxComputationError",
    "calculate_federal_tax",
    "format_currency",
    "format_percentage",
    "get_tax_year_tables",
]
