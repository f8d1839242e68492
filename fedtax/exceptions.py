"""Custom exceptions for fedtax."""

from pathlib import Path


class TaxComputationError(Exception):
    """Base exception for tax computation errors."""


class InvalidInputError(TaxComputationError):
    """Raised when a calculation input is malformed or out of range."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Invalid input for '{field}': {message}")


class UnsupportedTaxYearError(InvalidInputError):
    """Raised when no bracket/credit tables exist for the requested tax year."""

    def __init__(self, tax_year: object, supported: tuple[int, ...]):
        self.tax_year = tax_year
        self.supported = supported
        years = ", ".join(str(y) for y in supported)
        super().__init__(
            "tax_year", f"{tax_year} is not supported (supported years: {years})"
        )


class ScenarioFileError(TaxComputationError):
    """Raised when a scenario JSON file cannot be read or parsed."""

    def __init__(self, file_path: str | Path, message: str):
        self.file_path = str(file_path)
        super().__init__(f"Scenario file error for {file_path}: {message}")
