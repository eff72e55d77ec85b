"""
Equity & Sale Options Comparator

Projects three disposition strategies for a property value and mortgage
balance:
- Traditional sale (open market, agent listed)
- Cash offer (fast direct purchase)
- Short sale (lender-approved sale below the balance owed)

Recommendation bands on equity percentage:
- > 20%: Traditional
- 5-20% (inclusive at both ends): Cash Offer
- < 5%: Short Sale
"""

import math
from dataclasses import dataclass
from typing import Dict, Final, Tuple

from .errors import InvalidInput
from .models import (
    ComparisonResult,
    EquityPosition,
    EquityRecommendation,
    SaleCosts,
    SaleOption,
    SaleOptionType,
)


# =============================================================================
# Configuration Constants
# =============================================================================

# Equity percentage thresholds
TRADITIONAL_MIN_EQUITY_PERCENT: Final[int] = 20  # strictly greater than
SHORT_SALE_MAX_EQUITY_PERCENT: Final[int] = 5  # strictly less than

# Closing-cost reserve used by the quick equity read-out
EQUITY_CLOSING_COST_PERCENT: Final[int] = 7


@dataclass(frozen=True)
class OptionProfile:
    """
    Static model for one sale strategy.

    Percentages are whole numbers. Gross is a percentage of property value;
    costs are a percentage of gross proceeds.
    """
    name: str
    description: str
    timeline: str
    timeline_days: int
    gross_percent: int
    commission_percent: int
    closing_percent: int
    repairs_percent: int
    pros: Tuple[str, ...]
    cons: Tuple[str, ...]


OPTION_PROFILES: Final[Dict[SaleOptionType, OptionProfile]] = {
    SaleOptionType.TRADITIONAL: OptionProfile(
        name="Traditional Sale",
        description="List with a real estate agent on the open market for maximum value.",
        timeline="60-90 days",
        timeline_days=75,
        gross_percent=100,
        commission_percent=6,
        closing_percent=3,
        repairs_percent=5,
        pros=(
            "Highest potential sale price",
            "Market-rate value",
            "Multiple buyer competition",
            "Standard process",
        ),
        cons=(
            "Longest timeline (60-90 days)",
            "High costs (14% of value)",
            "Requires repairs and staging",
            "Showings and open houses",
            "Deal may fall through",
        ),
    ),
    SaleOptionType.CASH_OFFER: OptionProfile(
        name="Cash Offer",
        description="Sell directly to a cash buyer for a fast, guaranteed close with no repairs.",
        timeline="7-10 days",
        timeline_days=8,
        gross_percent=85,
        commission_percent=0,
        closing_percent=2,
        repairs_percent=0,
        pros=(
            "Fastest option (7-10 days)",
            "No repairs needed",
            "No showings or staging",
            "Guaranteed close",
            "Avoid foreclosure quickly",
            "Minimal closing costs",
        ),
        cons=(
            "Lower sale price (85% of value)",
            "Less than market value",
        ),
    ),
    SaleOptionType.SHORT_SALE: OptionProfile(
        name="Short Sale",
        description="Sell for less than owed with lender approval to avoid foreclosure.",
        timeline="90-180 days",
        timeline_days=135,
        gross_percent=75,
        # Commission is paid by the lender in practice but modelled as a deduction
        commission_percent=6,
        closing_percent=2,
        repairs_percent=0,
        pros=(
            "Avoid foreclosure",
            "Less credit damage than foreclosure",
            "Lender forgives remaining balance",
            "Sold as-is (no repairs)",
        ),
        cons=(
            "Longest timeline (90-180 days)",
            "Requires lender approval",
            "Below market value (75%)",
            "Complex negotiation process",
            "May still owe deficiency",
            "Credit score impact",
        ),
    ),
}

EQUITY_MESSAGES: Final[Dict[EquityRecommendation, str]] = {
    EquityRecommendation.TRADITIONAL: (
        "You have strong equity. A traditional sale on the open market is likely "
        "to maximize your proceeds."
    ),
    EquityRecommendation.CASH_OFFER: (
        "Your equity is moderate. A fast cash offer avoids commissions and repairs "
        "and may net you a similar amount sooner."
    ),
    EquityRecommendation.SHORT_SALE: (
        "Your equity is limited or negative. A consultation is recommended to "
        "review short sale and foreclosure-avoidance options."
    ),
}


def _percent_of(amount: float, percent: int) -> float:
    """Apply a whole-number percentage. Unrounded; display rounds."""
    return amount * percent / 100


def _equity_percentage(property_value: float, equity: float) -> float:
    return equity * 100 / property_value


def _validate_inputs(property_value: float, mortgage_balance: float) -> None:
    errors = []
    if not math.isfinite(property_value):
        errors.append("property_value must be a finite number")
    elif property_value <= 0:
        errors.append("property_value must be positive")
    if not math.isfinite(mortgage_balance):
        errors.append("mortgage_balance must be a finite number")
    elif mortgage_balance < 0:
        errors.append("mortgage_balance must be non-negative")
    if errors:
        raise InvalidInput(errors)


def select_recommendation(equity_percentage: float) -> SaleOptionType:
    """
    Pick the recommended strategy for an equity percentage.

    Both boundaries (exactly 20% and exactly 5%) belong to the cash offer.
    """
    if equity_percentage > TRADITIONAL_MIN_EQUITY_PERCENT:
        return SaleOptionType.TRADITIONAL
    if equity_percentage < SHORT_SALE_MAX_EQUITY_PERCENT:
        return SaleOptionType.SHORT_SALE
    return SaleOptionType.CASH_OFFER


class SaleOptionsComparator:
    """
    Builds the three-way sale options comparison.

    Every option is computed unconditionally; the recommendation only
    flags one of them.
    """

    def compare(self, property_value: float, mortgage_balance: float) -> ComparisonResult:
        """
        Compare all sale options.

        Args:
            property_value: Estimated market value (must be positive)
            mortgage_balance: Outstanding loan balance (must be non-negative)

        Returns:
            ComparisonResult with exactly three options, one recommended

        Raises:
            InvalidInput: If property_value <= 0 or mortgage_balance < 0
        """
        _validate_inputs(property_value, mortgage_balance)

        equity = property_value - mortgage_balance
        equity_percentage = _equity_percentage(property_value, equity)
        recommended_type = select_recommendation(equity_percentage)

        options = tuple(
            self._build_option(
                option_type=option_type,
                property_value=property_value,
                mortgage_balance=mortgage_balance,
                recommended=option_type == recommended_type,
            )
            for option_type in SaleOptionType
        )

        return ComparisonResult(
            property_value=property_value,
            mortgage_balance=mortgage_balance,
            equity=equity,
            equity_percentage=equity_percentage,
            options=options,
        )

    def _build_option(
        self,
        option_type: SaleOptionType,
        property_value: float,
        mortgage_balance: float,
        recommended: bool,
    ) -> SaleOption:
        profile = OPTION_PROFILES[option_type]

        gross = _percent_of(property_value, profile.gross_percent)
        costs = SaleCosts(
            agent_commission=_percent_of(gross, profile.commission_percent),
            closing_costs=_percent_of(gross, profile.closing_percent),
            repairs=_percent_of(gross, profile.repairs_percent),
        )
        net = gross - mortgage_balance - costs.total

        return SaleOption(
            type=option_type,
            name=profile.name,
            description=profile.description,
            timeline=profile.timeline,
            timeline_days=profile.timeline_days,
            gross_proceeds=gross,
            costs=costs,
            net_proceeds=net,
            pros=profile.pros,
            cons=profile.cons,
            recommended=recommended,
        )


def compare(property_value: float, mortgage_balance: float) -> ComparisonResult:
    """
    Compare traditional sale, cash offer and short sale.

    This is the primary entry point for the comparison.
    """
    return SaleOptionsComparator().compare(property_value, mortgage_balance)


def assess_equity(property_value: float, mortgage_balance: float) -> EquityPosition:
    """
    Produce the quick equity read-out.

    Args:
        property_value: Estimated market value (must be positive)
        mortgage_balance: Outstanding loan balance (must be non-negative)

    Returns:
        EquityPosition with a closing-cost reserve and advisory message
    """
    _validate_inputs(property_value, mortgage_balance)

    equity = property_value - mortgage_balance
    equity_percentage = _equity_percentage(property_value, equity)
    closing_costs = _percent_of(property_value, EQUITY_CLOSING_COST_PERCENT)

    # Same bands as the options comparison, mapped onto the advisory tag
    tag = EquityRecommendation(select_recommendation(equity_percentage).value)

    return EquityPosition(
        property_value=property_value,
        mortgage_balance=mortgage_balance,
        equity=equity,
        equity_percentage=equity_percentage,
        closing_costs=closing_costs,
        net_proceeds=equity - closing_costs,
        sale_recommendation=tag,
        recommendation_message=EQUITY_MESSAGES[tag],
    )
