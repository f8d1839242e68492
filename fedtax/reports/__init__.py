"""Report generators."""

from fedtax.reports.tax_summary import TaxSummaryGenerator

__all__ = ["TaxSummaryGenerator"]
