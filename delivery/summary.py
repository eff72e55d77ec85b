"""
Channel-neutral summary of a comparison.

Both delivery channels render from this, so the figures shown in the
email and the text message always agree.
"""

from dataclasses import dataclass
from typing import Tuple

from core.models import ComparisonResult, SaleOptionType


@dataclass(frozen=True)
class OptionLine:
    type: SaleOptionType
    name: str
    timeline: str
    net_proceeds: float
    recommended: bool


@dataclass(frozen=True)
class ComparisonSummary:
    """Figures shared by the email and SMS messages."""
    property_value: float
    mortgage_balance: float
    equity: float
    equity_percentage: float
    recommended: OptionLine
    options: Tuple[OptionLine, ...]

    @property
    def equity_positive(self) -> bool:
        return self.equity >= 0

    def describe(self) -> str:
        """One-line summary used in delivery logs."""
        return (
            f"value={self.property_value:.0f} equity={self.equity:.0f} "
            f"({self.equity_percentage:.1f}%) recommended={self.recommended.type.value} "
            f"net={self.recommended.net_proceeds:.0f}"
        )


def summarize(comparison: ComparisonResult) -> ComparisonSummary:
    """Build the shared summary from a comparison result."""
    lines = tuple(
        OptionLine(
            type=opt.type,
            name=opt.name,
            timeline=opt.timeline,
            net_proceeds=opt.net_proceeds,
            recommended=opt.recommended,
        )
        for opt in comparison.options
    )
    recommended = next(line for line in lines if line.recommended)

    return ComparisonSummary(
        property_value=comparison.property_value,
        mortgage_balance=comparison.mortgage_balance,
        equity=comparison.equity,
        equity_percentage=comparison.equity_percentage,
        recommended=recommended,
        options=lines,
    )
