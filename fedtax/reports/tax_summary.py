"""Tax calculation summary report generator."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from fedtax.formatting import format_currency, format_percentage
from fedtax.models.results import TaxCalculationResult

TEMPLATE_DIR = Path(__file__).parent / "templates"

DISCLAIMER = (
    "This calculator provides estimates based on the information you provide and "
    "current federal tax rates. Actual tax liability may vary based on your complete "
    "financial situation, additional deductions, credits, state taxes, and other "
    "factors. This tool should not be used for actual tax preparation or filing."
)


class TaxSummaryGenerator:
    """Generates a human-readable tax calculation summary report."""

    def __init__(self) -> None:
        self.env = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["currency"] = format_currency
        self.env.filters["percent"] = format_percentage

    def render(self, result: TaxCalculationResult) -> str:
        """Render tax calculation summary report."""
        template = self.env.get_template("tax_summary.txt")
        return template.render(res=result, disclaimer=DISCLAIMER)
