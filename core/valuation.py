"""
Property Valuation Engine

Estimates market value from basic property attributes:
- Base value from local price per square foot
- Structure category adjustment
- Condition adjustment
- Bedroom and bathroom adjustments against a per-category baseline
- Confidence rating and valuation range

Pure computation: same input = same output, no external calls.
"""

from typing import Dict, Final, Tuple

from .errors import InvalidInput
from .market_data import lookup_price_per_sqft
from .models import (
    ConditionTier,
    ConfidenceTier,
    PropertyDescription,
    StructureCategory,
    ValuationBreakdown,
    ValuationRange,
    ValuationResult,
)


# =============================================================================
# Configuration Constants
# =============================================================================

TYPE_MULTIPLIERS: Final[Dict[StructureCategory, float]] = {
    StructureCategory.SINGLE_FAMILY: 1.0,
    StructureCategory.CONDO: 0.85,
    StructureCategory.TOWNHOUSE: 0.90,
    StructureCategory.MULTI_FAMILY: 0.95,
}

CONDITION_MULTIPLIERS: Final[Dict[ConditionTier, float]] = {
    ConditionTier.EXCELLENT: 1.15,
    ConditionTier.GOOD: 1.0,
    ConditionTier.FAIR: 0.90,
    ConditionTier.POOR: 0.75,
}

# (bedrooms, bathrooms) a typical property of the category has
ROOM_BASELINES: Final[Dict[StructureCategory, Tuple[int, float]]] = {
    StructureCategory.SINGLE_FAMILY: (3, 2.0),
    StructureCategory.CONDO: (2, 2.0),
    StructureCategory.TOWNHOUSE: (3, 2.0),
    StructureCategory.MULTI_FAMILY: (4, 2.0),
}

BEDROOM_VALUE: Final[int] = 15000
BATHROOM_VALUE: Final[int] = 8000

# Valuation range band around the estimate
RANGE_BAND_PERCENT: Final[int] = 20

# Size bands for confidence
TYPICAL_SQFT_MIN: Final[int] = 1000
TYPICAL_SQFT_MAX: Final[int] = 5000
OUTLIER_SQFT_MIN: Final[int] = 800
OUTLIER_SQFT_MAX: Final[int] = 6000


class PropertyValuationEngine:
    """
    Attribute-based valuation pipeline.

    Pipeline order:
    1. PRICE - Look up local price per sqft (or regional default)
    2. BASE - square feet x price per sqft
    3. ADJUST - type, condition, bedrooms, bathrooms
    4. FLOOR - estimate never goes below zero
    5. RATE - confidence tier and valuation range
    """

    def estimate(self, description: PropertyDescription) -> ValuationResult:
        """
        Estimate market value for a property.

        Args:
            description: Property attributes

        Returns:
            ValuationResult with estimate, range, breakdown and confidence

        Raises:
            InvalidInput: If area, bedrooms or bathrooms are not positive
        """
        self._check_positive(description)

        # Step 1: Local price
        price_per_sqft, zip_code_found = lookup_price_per_sqft(description.zip_code)

        # Step 2: Base value
        base_value = description.square_feet * price_per_sqft

        # Step 3: Adjustments
        breakdown = ValuationBreakdown(
            base_value=round(base_value),
            type_adjustment=round(self._type_adjustment(base_value, description.property_type)),
            condition_adjustment=round(self._condition_adjustment(base_value, description.condition)),
            bedroom_adjustment=self._bedroom_adjustment(description),
            bathroom_adjustment=self._bathroom_adjustment(description),
        )

        # Step 4: Floor at zero
        estimated_value = max(0, breakdown.base_value + breakdown.total_adjustments)

        # Step 5: Confidence and range
        confidence = self._determine_confidence(
            zip_code_found=zip_code_found,
            condition=description.condition,
            square_feet=description.square_feet,
        )

        return ValuationResult(
            estimated_value=estimated_value,
            valuation_range=self._valuation_range(estimated_value),
            price_per_sqft=price_per_sqft,
            breakdown=breakdown,
            confidence=confidence,
            zip_code_found=zip_code_found,
        )

    def _check_positive(self, description: PropertyDescription) -> None:
        errors = []
        if description.square_feet <= 0:
            errors.append("square_feet must be positive")
        if description.bedrooms <= 0:
            errors.append("bedrooms must be positive")
        if description.bathrooms <= 0:
            errors.append("bathrooms must be positive")
        if errors:
            raise InvalidInput(errors)

    def _type_adjustment(self, base_value: float, category: StructureCategory) -> float:
        return base_value * (TYPE_MULTIPLIERS[category] - 1)

    def _condition_adjustment(self, base_value: float, condition: ConditionTier) -> float:
        return base_value * (CONDITION_MULTIPLIERS[condition] - 1)

    def _bedroom_adjustment(self, description: PropertyDescription) -> int:
        baseline_beds, _ = ROOM_BASELINES[description.property_type]
        return round((description.bedrooms - baseline_beds) * BEDROOM_VALUE)

    def _bathroom_adjustment(self, description: PropertyDescription) -> int:
        # Half baths count as half a bathroom's value
        _, baseline_baths = ROOM_BASELINES[description.property_type]
        return round((description.bathrooms - baseline_baths) * BATHROOM_VALUE)

    def _valuation_range(self, estimated_value: int) -> ValuationRange:
        return ValuationRange(
            low=round(estimated_value * (100 - RANGE_BAND_PERCENT) / 100),
            mid=estimated_value,
            high=round(estimated_value * (100 + RANGE_BAND_PERCENT) / 100),
        )

    def _determine_confidence(
        self,
        zip_code_found: bool,
        condition: ConditionTier,
        square_feet: int,
    ) -> ConfidenceTier:
        """
        Determine confidence rating.

        High: ZIP priced, condition not poor, typical size
        Low: ZIP unknown, poor condition, or outlier size
        Medium: everything else

        Args:
            zip_code_found: Whether dedicated ZIP pricing was used
            condition: Property condition
            square_feet: Livable area

        Returns:
            Confidence rating
        """
        if (
            zip_code_found
            and condition != ConditionTier.POOR
            and TYPICAL_SQFT_MIN <= square_feet <= TYPICAL_SQFT_MAX
        ):
            return ConfidenceTier.HIGH

        if (
            not zip_code_found
            or condition == ConditionTier.POOR
            or square_feet < OUTLIER_SQFT_MIN
            or square_feet > OUTLIER_SQFT_MAX
        ):
            return ConfidenceTier.LOW

        return ConfidenceTier.MEDIUM


def estimate(description: PropertyDescription) -> ValuationResult:
    """
    Estimate market value for a property.

    This is the primary entry point for valuation.
    """
    return PropertyValuationEngine().estimate(description)
