"""
Sale Options Engine - Core Business Logic

Pipeline:
1. Valuation (attribute-based estimate, confidence, range)
2. Equity read-out (quick advisory against the mortgage balance)
3. Sale options comparison (traditional / cash offer / short sale)
"""

from .errors import InvalidInput, RenderFailure, DeliveryFailure
from .models import (
    StructureCategory,
    ConditionTier,
    ConfidenceTier,
    SaleOptionType,
    EquityRecommendation,
    PropertyDescription,
    ValuationBreakdown,
    ValuationRange,
    ValuationResult,
    EquityPosition,
    SaleCosts,
    SaleOption,
    ComparisonResult,
)
from .valuation import PropertyValuationEngine, estimate
from .comparator import SaleOptionsComparator, compare, assess_equity
from .analysis import PropertyAnalyzer, PropertyAnalysis

__all__ = [
    # Errors
    "InvalidInput",
    "RenderFailure",
    "DeliveryFailure",
    # Models
    "StructureCategory",
    "ConditionTier",
    "ConfidenceTier",
    "SaleOptionType",
    "EquityRecommendation",
    "PropertyDescription",
    "ValuationBreakdown",
    "ValuationRange",
    "ValuationResult",
    "EquityPosition",
    "SaleCosts",
    "SaleOption",
    "ComparisonResult",
    # Valuation Engine
    "PropertyValuationEngine",
    "estimate",
    # Comparator
    "SaleOptionsComparator",
    "compare",
    "assess_equity",
    # Integrated pipeline
    "PropertyAnalyzer",
    "PropertyAnalysis",
]
