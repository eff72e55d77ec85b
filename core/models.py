"""
Data models for the sale options engine.

Defines the property description supplied by the caller, the valuation
result, the equity advisory and the three-way sale options comparison.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .errors import InvalidInput


class StructureCategory(Enum):
    """
    Structure category of the property.

    Every lookup table keyed by this enum must cover all members.
    """
    SINGLE_FAMILY = "single_family"
    CONDO = "condo"
    TOWNHOUSE = "townhouse"
    MULTI_FAMILY = "multi_family"

    @classmethod
    def from_string(cls, value: str) -> Optional["StructureCategory"]:
        """Convert string to StructureCategory, case-insensitive."""
        normalised = value.lower().strip().replace("-", "_").replace(" ", "_")
        for member in cls:
            if member.value == normalised:
                return member
        return None

    @property
    def label(self) -> str:
        return {
            StructureCategory.SINGLE_FAMILY: "Single Family",
            StructureCategory.CONDO: "Condo",
            StructureCategory.TOWNHOUSE: "Townhouse",
            StructureCategory.MULTI_FAMILY: "Multi-Family",
        }[self]


class ConditionTier(Enum):
    """
    Condition of the property.

    Ordered best to worst: excellent > good > fair > poor.
    """
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

    @classmethod
    def from_string(cls, value: str) -> Optional["ConditionTier"]:
        """Convert string to ConditionTier, case-insensitive."""
        normalised = value.lower().strip()
        for member in cls:
            if member.value == normalised:
                return member
        return None

    @property
    def label(self) -> str:
        return self.value.capitalize()


class ConfidenceTier(Enum):
    """
    Confidence in the valuation.

    High: ZIP code priced, condition not poor, 1,000-5,000 sqft
    Low: ZIP code unknown, poor condition, or size outside 800-6,000 sqft
    Medium: everything else
    """
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class SaleOptionType(Enum):
    """Disposition strategy compared for every property."""
    TRADITIONAL = "traditional"
    CASH_OFFER = "cash_offer"
    SHORT_SALE = "short_sale"


class EquityRecommendation(Enum):
    """Advisory tag on the quick equity read-out."""
    TRADITIONAL = "traditional"
    CASH_OFFER = "cash_offer"
    SHORT_SALE = "short_sale"


@dataclass(frozen=True)
class PropertyDescription:
    """
    Property attributes supplied by the requester.

    Constructed per request and never persisted.
    """
    zip_code: str
    property_type: StructureCategory
    square_feet: int
    bedrooms: int
    bathrooms: float
    condition: ConditionTier

    # Optional fields
    mortgage_balance: Optional[float] = None
    address: str = ""

    def __post_init__(self):
        """Validate attributes after initialization."""
        errors = []
        for name in ("square_feet", "bedrooms", "bathrooms"):
            value = getattr(self, name)
            if not math.isfinite(value):
                errors.append(f"{name} must be a finite number")
            elif value <= 0:
                errors.append(f"{name} must be positive")
        if math.isfinite(self.bathrooms) and self.bathrooms > 0:
            if (self.bathrooms * 2) != int(self.bathrooms * 2):
                errors.append("bathrooms must be in 0.5 increments")
        if self.mortgage_balance is not None:
            if not math.isfinite(self.mortgage_balance):
                errors.append("mortgage_balance must be a finite number")
            elif self.mortgage_balance < 0:
                errors.append("mortgage_balance must be non-negative")
        if errors:
            raise InvalidInput(errors)

    @property
    def has_mortgage(self) -> bool:
        return self.mortgage_balance is not None

    def to_dict(self) -> dict:
        return {
            "zip_code": self.zip_code,
            "property_type": self.property_type.value,
            "square_feet": self.square_feet,
            "bedrooms": self.bedrooms,
            "bathrooms": self.bathrooms,
            "condition": self.condition.value,
            "mortgage_balance": self.mortgage_balance,
            "address": self.address,
        }


@dataclass(frozen=True)
class ValuationBreakdown:
    """Base value plus the four signed adjustments."""
    base_value: int
    type_adjustment: int
    condition_adjustment: int
    bedroom_adjustment: int
    bathroom_adjustment: int

    @property
    def total_adjustments(self) -> int:
        return (
            self.type_adjustment
            + self.condition_adjustment
            + self.bedroom_adjustment
            + self.bathroom_adjustment
        )

    def to_dict(self) -> dict:
        return {
            "base_value": self.base_value,
            "type_adjustment": self.type_adjustment,
            "condition_adjustment": self.condition_adjustment,
            "bedroom_adjustment": self.bedroom_adjustment,
            "bathroom_adjustment": self.bathroom_adjustment,
        }


@dataclass(frozen=True)
class ValuationRange:
    low: int
    mid: int
    high: int

    def to_dict(self) -> dict:
        return {"low": self.low, "mid": self.mid, "high": self.high}


@dataclass(frozen=True)
class ValuationResult:
    """
    Estimated market value for a property.

    estimated_value = max(0, base_value + all adjustments)
    """
    estimated_value: int
    valuation_range: ValuationRange
    price_per_sqft: int
    breakdown: ValuationBreakdown
    confidence: ConfidenceTier
    zip_code_found: bool

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "estimated_value": self.estimated_value,
            "valuation_range": self.valuation_range.to_dict(),
            "price_per_sqft": self.price_per_sqft,
            "breakdown": self.breakdown.to_dict(),
            "confidence": self.confidence.value,
            "zip_code_found": self.zip_code_found,
        }


@dataclass(frozen=True)
class EquityPosition:
    """
    Quick equity read-out for presentation.

    Uses the same thresholds as the sale options comparison.
    """
    property_value: float
    mortgage_balance: float
    equity: float
    equity_percentage: float
    closing_costs: float
    net_proceeds: float
    sale_recommendation: EquityRecommendation
    recommendation_message: str

    def to_dict(self) -> dict:
        return {
            "property_value": self.property_value,
            "mortgage_balance": self.mortgage_balance,
            "equity": self.equity,
            "equity_percentage": self.equity_percentage,
            "closing_costs": self.closing_costs,
            "net_proceeds": self.net_proceeds,
            "sale_recommendation": self.sale_recommendation.value,
            "recommendation_message": self.recommendation_message,
        }


@dataclass(frozen=True)
class SaleCosts:
    """Costs deducted from gross proceeds. Zero where a cost does not apply."""
    agent_commission: float = 0.0
    closing_costs: float = 0.0
    repairs: float = 0.0

    @property
    def total(self) -> float:
        return self.agent_commission + self.closing_costs + self.repairs

    def to_dict(self) -> dict:
        return {
            "agent_commission": self.agent_commission,
            "closing_costs": self.closing_costs,
            "repairs": self.repairs,
            "total": self.total,
        }


@dataclass(frozen=True)
class SaleOption:
    """One projected disposition strategy."""
    type: SaleOptionType
    name: str
    description: str
    timeline: str
    timeline_days: int
    gross_proceeds: float
    costs: SaleCosts
    net_proceeds: float
    pros: Tuple[str, ...] = field(default_factory=tuple)
    cons: Tuple[str, ...] = field(default_factory=tuple)
    recommended: bool = False

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "name": self.name,
            "description": self.description,
            "timeline": self.timeline,
            "timeline_days": self.timeline_days,
            "gross_proceeds": self.gross_proceeds,
            "costs": self.costs.to_dict(),
            "net_proceeds": self.net_proceeds,
            "pros": list(self.pros),
            "cons": list(self.cons),
            "recommended": self.recommended,
        }


@dataclass(frozen=True)
class ComparisonResult:
    """
    Three sale options for one property value and mortgage balance.

    Options are always ordered traditional, cash offer, short sale,
    and exactly one is recommended.
    """
    property_value: float
    mortgage_balance: float
    equity: float
    equity_percentage: float
    options: Tuple[SaleOption, ...]

    @property
    def recommended_option(self) -> SaleOption:
        return next(opt for opt in self.options if opt.recommended)

    def option(self, option_type: SaleOptionType) -> SaleOption:
        """Look up an option by its type tag."""
        for opt in self.options:
            if opt.type == option_type:
                return opt
        raise KeyError(option_type)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "property_value": self.property_value,
            "mortgage_balance": self.mortgage_balance,
            "equity": self.equity,
            "equity_percentage": self.equity_percentage,
            "options": [opt.to_dict() for opt in self.options],
        }
