"""Shared test fixtures for fedtax."""

from decimal import Decimal

import pytest

from fedtax.engines.calculator import TaxCalculator
from fedtax.models.enums import FilingStatus
from fedtax.models.inputs import TaxCalculationParams


@pytest.fixture
def calculator() -> TaxCalculator:
    return TaxCalculator()


@pytest.fixture
def single_2024_params() -> TaxCalculationParams:
    """Single filer, $50k wages, no dependents, $6k withheld."""
    return TaxCalculationParams(
        tax_year=2024,
        filing_status=FilingStatus.SINGLE,
        wages=Decimal("50000"),
        other_income=Decimal("0"),
        adjustments=Decimal("0"),
        itemized_deductions=None,
        dependents=0,
        withholding=Decimal("6000"),
    )


@pytest.fixture
def mfj_low_income_params() -> TaxCalculationParams:
    """Married filing jointly, two children, $40k wages, $2k withheld."""
    return TaxCalculationParams(
        tax_year=2024,
        filing_status=FilingStatus.MFJ,
        wages=Decimal("40000"),
        dependents=2,
        withholding=Decimal("2000"),
    )
