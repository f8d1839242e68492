"""Display formatting for dollar amounts, rates and bracket ranges."""

from decimal import ROUND_HALF_UP, Decimal, localcontext

from fedtax.models.tables import TaxBracket

ONE = Decimal("1")


def _to_decimal(value: Decimal | int | float) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _round_half_up(value: Decimal, decimals: int) -> Decimal:
    """Round to ``decimals`` places without hitting the context precision limit."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + decimals + 2)
        return value.quantize(ONE.scaleb(-decimals), rounding=ROUND_HALF_UP)


def format_currency(amount: Decimal | int | float) -> str:
    """Whole-dollar US currency: ``$50,000``, ``-$1,234``.

    Cents are rounded half away from zero.
    """
    dollars = _round_half_up(_to_decimal(amount), 0)
    sign = "-" if dollars < 0 else ""
    return f"{sign}${abs(dollars):,.0f}"


def format_percentage(rate: Decimal | int | float, decimals: int = 1) -> str:
    """Format a rate that is already a percentage: 22 -> ``22.0%``."""
    rounded = _round_half_up(_to_decimal(rate), decimals)
    return f"{rounded:.{decimals}f}%"


def format_bracket_range(bracket: TaxBracket) -> str:
    """Tax-guide style range, e.g. ``$11,601 - $47,150`` or ``$609,351+``."""
    lower = bracket.min if bracket.min == 0 else bracket.min + ONE
    if bracket.max is None:
        return f"{format_currency(lower)}+"
    return f"{format_currency(lower)} - {format_currency(bracket.max)}"
