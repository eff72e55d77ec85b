"""
Property Analyzer - Valuation + Comparison Pipeline

Runs the estimate -> compare chain for one property description.
The comparison and equity read-out are only produced when a mortgage
balance was supplied.
"""

from dataclasses import dataclass
from typing import Optional

from .comparator import SaleOptionsComparator, assess_equity
from .errors import InvalidInput
from .models import (
    ComparisonResult,
    EquityPosition,
    PropertyDescription,
    ValuationResult,
)
from .valuation import PropertyValuationEngine


@dataclass(frozen=True)
class PropertyAnalysis:
    """
    Everything computed for one request.

    equity and comparison are None when no mortgage balance was given.
    """
    description: PropertyDescription
    valuation: ValuationResult
    equity: Optional[EquityPosition] = None
    comparison: Optional[ComparisonResult] = None

    @property
    def has_comparison(self) -> bool:
        return self.comparison is not None

    def to_dict(self) -> dict:
        return {
            "property": self.description.to_dict(),
            "valuation": self.valuation.to_dict(),
            "equity": self.equity.to_dict() if self.equity else None,
            "comparison": self.comparison.to_dict() if self.comparison else None,
        }


class PropertyAnalyzer:
    """
    Integrated pipeline.

    Pipeline order:
    1. VALUATE - attribute-based estimate
    2. EQUITY - quick read-out against the mortgage balance
    3. COMPARE - three sale options with one recommended
    """

    def __init__(
        self,
        engine: Optional[PropertyValuationEngine] = None,
        comparator: Optional[SaleOptionsComparator] = None,
    ):
        self._engine = engine or PropertyValuationEngine()
        self._comparator = comparator or SaleOptionsComparator()

    def analyze(self, description: PropertyDescription) -> PropertyAnalysis:
        """
        Analyze a property.

        Raises:
            InvalidInput: On malformed attributes, or when the estimate is zero
                and a comparison was requested
        """
        valuation = self._engine.estimate(description)

        if not description.has_mortgage:
            return PropertyAnalysis(description=description, valuation=valuation)

        if valuation.estimated_value <= 0:
            raise InvalidInput(
                ["estimated value is zero; sale options cannot be compared"]
            )

        value = valuation.estimated_value
        balance = description.mortgage_balance

        return PropertyAnalysis(
            description=description,
            valuation=valuation,
            equity=assess_equity(value, balance),
            comparison=self._comparator.compare(value, balance),
        )
