"""Typer CLI interface for fedtax."""

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Annotated, Any

import typer

BANNER = r"""
   __        _ _
  / _|___ __| | |_ __ ___ __
 |  _/ -_) _` |  _/ _` \ \ /
 |_| \___\__,_|\__\__,_/_\_\

  Federal Tax Estimator
"""

FORMATS = ("table", "text", "json")


def show_banner() -> None:
    typer.echo(BANNER)


app = typer.Typer(
    name="fedtax",
    help="fedtax — Federal income tax, credit and refund estimator.",
)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """fedtax — Federal income tax, credit and refund estimator."""
    if ctx.invoked_subcommand is None:
        show_banner()
        typer.echo("Run `fedtax --help` for available commands.")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


class _DecimalEncoder(json.JSONEncoder):
    """JSON encoder that serializes Decimal as string."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, Decimal):
            return str(obj)
        return super().default(obj)


def _load_scenario(path: Path) -> dict:
    """Read a scenario JSON file into a plain dict."""
    from fedtax.exceptions import ScenarioFileError

    try:
        data = json.loads(path.read_text())
    except OSError as exc:
        raise ScenarioFileError(path, exc.strerror or str(exc)) from exc
    except json.JSONDecodeError as exc:
        raise ScenarioFileError(path, f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc
    if not isinstance(data, dict):
        raise ScenarioFileError(path, "expected a JSON object")
    return data


def _build_params(
    input_file: Path | None,
    year: int | None,
    filing_status: str | None,
    wages: float | None,
    other_income: float | None,
    adjustments: float | None,
    itemized: float | None,
    dependents: int | None,
    withholding: float | None,
) -> Any:
    """Merge scenario file values with CLI flags (flags win) into params."""
    from pydantic.alias_generators import to_snake

    from fedtax.engines.brackets import DEFAULT_TAX_YEAR
    from fedtax.engines.calculator import parse_params

    raw = _load_scenario(input_file) if input_file is not None else {}
    data: dict[str, Any] = {to_snake(key): value for key, value in raw.items()}

    overrides = {
        "tax_year": year,
        "filing_status": filing_status,
        "wages": wages,
        "other_income": other_income,
        "adjustments": adjustments,
        "itemized_deductions": itemized,
        "dependents": dependents,
        "withholding": withholding,
    }
    for key, value in overrides.items():
        if value is None:
            continue
        if isinstance(value, float):
            value = Decimal(str(value))
        data[key] = value

    data.setdefault("tax_year", DEFAULT_TAX_YEAR)
    data.setdefault("filing_status", "SINGLE")
    return parse_params(data)


def _calculate_or_exit(**options: Any) -> Any:
    from fedtax.engines.calculator import calculate_federal_tax
    from fedtax.exceptions import TaxComputationError

    try:
        params = _build_params(**options)
        return calculate_federal_tax(params)
    except TaxComputationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)


def _display_result(result: Any) -> None:
    """Pretty-print a TaxCalculationResult using Rich."""
    from rich.console import Console
    from rich.panel import Panel
    from rich.table import Table

    from fedtax.formatting import format_currency, format_percentage
    from fedtax.reports.tax_summary import DISCLAIMER

    console = Console()
    style = "bold green" if result.is_refund else "bold red"
    console.print(
        Panel(
            f"[bold]Total Tax:[/bold] {format_currency(result.total_tax_liability)}\n"
            f"[bold]Effective Rate:[/bold] {format_percentage(result.effective_rate)}\n"
            f"[bold]Total Credits:[/bold] {format_currency(result.total_credits)}\n"
            f"[{style}]{result.refund_or_owed_label}: "
            f"{format_currency(abs(result.refund_or_owed))}[/{style}]",
            title=f"[bold]{result.tax_year} — {result.filing_status.label}[/bold]",
            border_style="cyan",
        )
    )

    inc = Table(title="Income & Deductions", show_header=False, padding=(0, 1))
    inc.add_column("", style="cyan", min_width=30)
    inc.add_column("", justify="right", style="green")
    inc.add_row("Total Income", format_currency(result.total_income))
    inc.add_row("Adjusted Gross Income (AGI)", format_currency(result.agi))
    deduction_kind = "Itemized" if result.used_itemized else "Standard"
    inc.add_row(f"Total Deductions ({deduction_kind})", format_currency(result.total_deductions))
    inc.add_row("Taxable Income", format_currency(result.taxable_income))
    console.print(inc)

    brk = Table(title="Tax Bracket Breakdown", show_header=True, padding=(0, 1))
    brk.add_column("Rate", style="cyan")
    brk.add_column("Income", justify="right")
    brk.add_column("Tax", justify="right", style="green")
    for row in result.bracket_breakdown:
        brk.add_row(
            format_percentage(row.rate * 100, 0),
            format_currency(row.income),
            format_currency(row.tax),
        )
    brk.add_row("[bold]Total[/bold]", "", f"[bold]{format_currency(result.income_tax)}[/bold]")
    console.print(brk)
    console.print(f"Marginal Tax Rate: {format_percentage(result.marginal_rate)}")

    if result.total_credits > 0:
        cred = Table(title="Tax Credits", show_header=False, padding=(0, 1))
        cred.add_column("", style="cyan", min_width=30)
        cred.add_column("", justify="right", style="green")
        if result.child_tax_credit > 0:
            cred.add_row("Child Tax Credit", format_currency(result.child_tax_credit))
        if result.eitc > 0:
            cred.add_row("Earned Income Credit", format_currency(result.eitc))
        cred.add_row("Total Credits", format_currency(result.total_credits))
        console.print(cred)

    console.print(f"[dim]{DISCLAIMER}[/dim]")


# Inputs shared by `calculate` and `report`
InputFileOpt = Annotated[
    Path | None,
    typer.Option("--input", "-i", help="JSON scenario file with calculation inputs"),
]
YearOpt = Annotated[
    int | None,
    typer.Option("--year", "-y", envvar="FEDTAX_YEAR", help="Tax year (2024 or 2025)"),
]
FilingStatusOpt = Annotated[
    str | None,
    typer.Option(
        "--filing-status",
        "-s",
        envvar="FEDTAX_FILING_STATUS",
        help="Filing status: SINGLE, MFJ, MFS, HOH",
    ),
]
WagesOpt = Annotated[float | None, typer.Option("--wages", help="Wages, salaries, tips (W-2)")]
OtherIncomeOpt = Annotated[
    float | None,
    typer.Option("--other-income", help="Interest, dividends and other income"),
]
AdjustmentsOpt = Annotated[
    float | None,
    typer.Option("--adjustments", help="Above-the-line adjustments (IRA, HSA, ...)"),
]
ItemizedOpt = Annotated[
    float | None,
    typer.Option("--itemized", help="Total itemized deductions (standard used if larger)"),
]
DependentsOpt = Annotated[
    int | None, typer.Option("--dependents", help="Qualifying children under 17")
]
WithholdingOpt = Annotated[
    float | None, typer.Option("--withholding", help="Federal income tax withheld")
]
VerboseOpt = Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")]


@app.command()
def calculate(
    input_file: InputFileOpt = None,
    year: YearOpt = None,
    filing_status: FilingStatusOpt = None,
    wages: WagesOpt = None,
    other_income: OtherIncomeOpt = None,
    adjustments: AdjustmentsOpt = None,
    itemized: ItemizedOpt = None,
    dependents: DependentsOpt = None,
    withholding: WithholdingOpt = None,
    output_format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: table, text, json")
    ] = "table",
    verbose: VerboseOpt = False,
) -> None:
    """Calculate federal tax, credits and refund or amount owed."""
    _configure_logging(verbose)

    fmt = output_format.lower()
    if fmt not in FORMATS:
        typer.echo(
            f"Error: Invalid format '{output_format}'. Valid: {', '.join(FORMATS)}", err=True
        )
        raise typer.Exit(1)

    result = _calculate_or_exit(
        input_file=input_file,
        year=year,
        filing_status=filing_status,
        wages=wages,
        other_income=other_income,
        adjustments=adjustments,
        itemized=itemized,
        dependents=dependents,
        withholding=withholding,
    )

    if fmt == "json":
        typer.echo(json.dumps(result.model_dump(), cls=_DecimalEncoder, indent=2))
    elif fmt == "text":
        from fedtax.reports.tax_summary import TaxSummaryGenerator

        typer.echo(TaxSummaryGenerator().render(result), nl=False)
    else:
        _display_result(result)


@app.command()
def report(
    input_file: InputFileOpt = None,
    year: YearOpt = None,
    filing_status: FilingStatusOpt = None,
    wages: WagesOpt = None,
    other_income: OtherIncomeOpt = None,
    adjustments: AdjustmentsOpt = None,
    itemized: ItemizedOpt = None,
    dependents: DependentsOpt = None,
    withholding: WithholdingOpt = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the report to this file instead of stdout"),
    ] = None,
    verbose: VerboseOpt = False,
) -> None:
    """Render a plain-text tax summary report."""
    from fedtax.reports.tax_summary import TaxSummaryGenerator

    _configure_logging(verbose)
    result = _calculate_or_exit(
        input_file=input_file,
        year=year,
        filing_status=filing_status,
        wages=wages,
        other_income=other_income,
        adjustments=adjustments,
        itemized=itemized,
        dependents=dependents,
        withholding=withholding,
    )
    content = TaxSummaryGenerator().render(result)

    if output is None:
        typer.echo(content, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content)
    typer.echo(f"Report written to {output}")


@app.command()
def brackets(
    year: int = typer.Argument(..., help="Tax year"),
    filing_status: str | None = typer.Option(
        None,
        "--filing-status",
        "-s",
        help="Show only this filing status: SINGLE, MFJ, MFS, HOH",
    ),
) -> None:
    """Show tax brackets, standard deductions and credit limits for a year."""
    from rich.console import Console
    from rich.table import Table

    from fedtax.engines.brackets import get_tax_year_tables
    from fedtax.exceptions import TaxComputationError
    from fedtax.formatting import format_bracket_range, format_currency, format_percentage
    from fedtax.models.enums import FilingStatus

    try:
        tables = get_tax_year_tables(year)
    except TaxComputationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    if filing_status is None:
        statuses = list(FilingStatus)
    else:
        try:
            statuses = [FilingStatus.parse(filing_status)]
        except ValueError:
            typer.echo(
                f"Error: Invalid filing status '{filing_status}'. Valid: SINGLE, MFJ, MFS, HOH",
                err=True,
            )
            raise typer.Exit(1)

    console = Console()
    for status in statuses:
        console.print(f"[bold]{year} Tax Brackets — {status.label}[/bold]")
        tbl = Table(show_header=True)
        tbl.add_column("Rate", style="cyan")
        tbl.add_column("Taxable Income", justify="right")
        for bracket in tables.brackets[status]:
            tbl.add_row(format_percentage(bracket.rate * 100, 0), format_bracket_range(bracket))
        console.print(tbl)
        console.print(
            f"Standard Deduction: {format_currency(tables.standard_deduction[status])}"
        )

    ctc = tables.child_tax_credit
    console.print(
        f"Child Tax Credit: up to {format_currency(ctc.max_credit_per_child)} per child"
    )
    top_tier = tables.eitc.tiers[max(tables.eitc.tiers)]
    console.print(f"Earned Income Tax Credit: up to {format_currency(top_tier.max_credit)}")


if __name__ == "__main__":
    app()
