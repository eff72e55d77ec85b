"""
Formatting utilities.
"""


def format_currency(amount: float, currency: str = "USD") -> str:
    """
    Format an amount as whole-unit currency.

    Args:
        amount: The amount (rounded to whole units for display).
        currency: Currency code (default USD).

    Returns:
        Formatted currency string, e.g. "$1,234" or "-$1,234".
    """
    symbol = "$" if currency == "USD" else currency + " "
    whole = int(round(amount))
    sign = "-" if whole < 0 else ""
    return f"{sign}{symbol}{abs(whole):,}"


def format_compact_currency(amount: float) -> str:
    """
    Short currency format for text messages.

    $1.2M for millions, $340K for thousands, $950 otherwise.
    The unit is chosen after rounding, so 999,999.6 reads $1.0M, not $1000K.
    """
    sign = "-" if amount < 0 else ""
    value = abs(amount)
    if round(value / 1_000) >= 1_000:
        return f"{sign}${value / 1_000_000:.1f}M"
    if round(value) >= 1_000:
        return f"{sign}${value / 1_000:.0f}K"
    return f"{sign}${value:,.0f}"


def format_percent(value: float, decimals: int = 1) -> str:
    """
    Format a number as a percentage.

    Args:
        value: The percentage value.
        decimals: Number of decimal places.

    Returns:
        Formatted percentage string.
    """
    return f"{value:.{decimals}f}%"
