"""
Tests for the Property Valuation Engine

Tests covering:
1. Base value and adjustments
2. Zero floor on the estimate
3. Every category and condition has a lookup entry
4. ZIP code fallback and confidence rating
5. Input validation
6. Deterministic results for same input
"""

import pytest

from core import (
    ConditionTier,
    ConfidenceTier,
    InvalidInput,
    PropertyDescription,
    PropertyValuationEngine,
    StructureCategory,
    estimate,
)
from core.market_data import (
    DEFAULT_PRICE_PER_SQFT,
    lookup_price_per_sqft,
    normalise_zip_code,
)
from core.valuation import (
    CONDITION_MULTIPLIERS,
    ROOM_BASELINES,
    TYPE_MULTIPLIERS,
)


# =============================================================================
# Test Fixtures
# =============================================================================

@pytest.fixture
def engine():
    """Valuation engine instance."""
    return PropertyValuationEngine()


@pytest.fixture
def create_property():
    """Factory fixture for property descriptions."""
    def _create(
        zip_code: str = "75201",
        property_type: StructureCategory = StructureCategory.SINGLE_FAMILY,
        square_feet: int = 2000,
        bedrooms: int = 3,
        bathrooms: float = 2.0,
        condition: ConditionTier = ConditionTier.GOOD,
        mortgage_balance=None,
    ) -> PropertyDescription:
        return PropertyDescription(
            zip_code=zip_code,
            property_type=property_type,
            square_feet=square_feet,
            bedrooms=bedrooms,
            bathrooms=bathrooms,
            condition=condition,
            mortgage_balance=mortgage_balance,
        )
    return _create


# =============================================================================
# Test: Base Value and Adjustments
# =============================================================================

class TestBaseValuation:
    """Tests for base value and the four adjustments."""

    def test_baseline_property_has_no_adjustments(self, engine, create_property):
        """Single family at baseline rooms in good condition is base value."""
        result = engine.estimate(create_property())

        assert result.price_per_sqft == 350
        assert result.breakdown.base_value == 700000
        assert result.breakdown.total_adjustments == 0
        assert result.estimated_value == 700000

    def test_range_is_twenty_percent_band(self, engine, create_property):
        """Range spans 80% to 120% of the estimate."""
        result = engine.estimate(create_property())

        assert result.valuation_range.low == 560000
        assert result.valuation_range.mid == 700000
        assert result.valuation_range.high == 840000

    def test_condo_type_adjustment(self, engine, create_property):
        """Condo applies a 15% reduction to base value."""
        result = engine.estimate(create_property(
            property_type=StructureCategory.CONDO,
            square_feet=1000,
            bedrooms=2,
        ))

        assert result.breakdown.base_value == 350000
        assert result.breakdown.type_adjustment == -52500
        assert result.estimated_value == 297500

    def test_excellent_condition_adds_value(self, engine, create_property):
        """Excellent condition adds 15% of base value."""
        result = engine.estimate(create_property(condition=ConditionTier.EXCELLENT))

        assert result.breakdown.condition_adjustment == 105000
        assert result.estimated_value == 805000

    def test_extra_bedroom_adds_fixed_amount(self, engine, create_property):
        """Each bedroom above the category baseline adds 15,000."""
        result = engine.estimate(create_property(bedrooms=5))

        assert result.breakdown.bedroom_adjustment == 30000

    def test_half_bath_counts_half(self, engine, create_property):
        """A half bath adds half of a full bathroom's value."""
        result = engine.estimate(create_property(bathrooms=2.5))

        assert result.breakdown.bathroom_adjustment == 4000
        assert result.estimated_value == 704000

    def test_fewer_rooms_than_baseline_reduces_value(self, engine, create_property):
        """Rooms below baseline produce negative adjustments."""
        result = engine.estimate(create_property(bedrooms=2, bathrooms=1.0))

        assert result.breakdown.bedroom_adjustment == -15000
        assert result.breakdown.bathroom_adjustment == -8000

    def test_baseline_depends_on_category(self, engine, create_property):
        """Multi-family expects more bedrooms than a condo."""
        multi = engine.estimate(create_property(
            property_type=StructureCategory.MULTI_FAMILY, bedrooms=3,
        ))
        condo = engine.estimate(create_property(
            property_type=StructureCategory.CONDO, bedrooms=3,
        ))

        assert multi.breakdown.bedroom_adjustment == -15000
        assert condo.breakdown.bedroom_adjustment == 15000


# =============================================================================
# Test: Zero Floor
# =============================================================================

class TestZeroFloor:
    """Tests that the estimate never goes negative."""

    def test_tiny_poor_property_floors_at_zero(self, engine, create_property):
        """Negative adjustments larger than base value floor at zero."""
        result = engine.estimate(create_property(
            zip_code="99999",
            property_type=StructureCategory.CONDO,
            square_feet=100,
            bedrooms=1,
            bathrooms=0.5,
            condition=ConditionTier.POOR,
        ))

        assert result.breakdown.base_value + result.breakdown.total_adjustments < 0
        assert result.estimated_value == 0
        assert result.valuation_range.low == 0
        assert result.valuation_range.high == 0


# =============================================================================
# Test: Lookup Tables Are Exhaustive
# =============================================================================

class TestLookupCoverage:
    """Every enum member must have an entry in every lookup table."""

    def test_every_category_has_type_multiplier(self):
        for category in StructureCategory:
            assert category in TYPE_MULTIPLIERS

    def test_every_category_has_room_baseline(self):
        for category in StructureCategory:
            assert category in ROOM_BASELINES

    def test_every_condition_has_multiplier(self):
        for condition in ConditionTier:
            assert condition in CONDITION_MULTIPLIERS

    @pytest.mark.parametrize("category", list(StructureCategory))
    @pytest.mark.parametrize("condition", list(ConditionTier))
    def test_every_combination_estimates(self, engine, create_property, category, condition):
        """No category/condition combination fails to estimate."""
        result = engine.estimate(create_property(property_type=category, condition=condition))

        assert result.estimated_value > 0


# =============================================================================
# Test: ZIP Code Pricing and Confidence
# =============================================================================

class TestZipCodePricing:
    """Tests for local pricing lookup."""

    def test_known_zip_uses_table(self):
        assert lookup_price_per_sqft("75205") == (400, True)

    def test_unknown_zip_uses_default(self):
        assert lookup_price_per_sqft("10001") == (DEFAULT_PRICE_PER_SQFT, False)

    def test_zip_plus_four_is_normalised(self):
        assert normalise_zip_code(" 75201-1234 ") == "75201"
        assert lookup_price_per_sqft("75201-1234") == (350, True)

    def test_unknown_zip_flagged_in_result(self, engine, create_property):
        result = engine.estimate(create_property(zip_code="10001"))

        assert result.zip_code_found is False
        assert result.price_per_sqft == DEFAULT_PRICE_PER_SQFT


class TestConfidence:
    """Tests for confidence rating."""

    def test_high_confidence(self, engine, create_property):
        """Known ZIP, good condition, typical size is High."""
        result = engine.estimate(create_property())

        assert result.confidence == ConfidenceTier.HIGH

    def test_unknown_zip_is_low(self, engine, create_property):
        result = engine.estimate(create_property(zip_code="10001"))

        assert result.confidence == ConfidenceTier.LOW

    def test_poor_condition_is_low(self, engine, create_property):
        result = engine.estimate(create_property(condition=ConditionTier.POOR))

        assert result.confidence == ConfidenceTier.LOW

    def test_outlier_size_is_low(self, engine, create_property):
        assert engine.estimate(create_property(square_feet=700)).confidence == ConfidenceTier.LOW
        assert engine.estimate(create_property(square_feet=6500)).confidence == ConfidenceTier.LOW

    def test_atypical_but_not_outlier_size_is_medium(self, engine, create_property):
        assert engine.estimate(create_property(square_feet=900)).confidence == ConfidenceTier.MEDIUM
        assert engine.estimate(create_property(square_feet=5500)).confidence == ConfidenceTier.MEDIUM


# =============================================================================
# Test: Input Validation
# =============================================================================

class TestInputValidation:
    """Tests for rejected property attributes."""

    def test_zero_square_feet_rejected(self, create_property):
        with pytest.raises(InvalidInput) as exc_info:
            create_property(square_feet=0)

        assert "square_feet must be positive" in exc_info.value.errors

    def test_zero_bedrooms_rejected(self, create_property):
        with pytest.raises(InvalidInput):
            create_property(bedrooms=0)

    def test_quarter_bath_rejected(self, create_property):
        with pytest.raises(InvalidInput) as exc_info:
            create_property(bathrooms=1.25)

        assert "bathrooms must be in 0.5 increments" in exc_info.value.errors

    def test_negative_mortgage_rejected(self, create_property):
        with pytest.raises(InvalidInput):
            create_property(mortgage_balance=-1)

    @pytest.mark.parametrize("field", ["square_feet", "bedrooms", "bathrooms"])
    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_rejected(self, create_property, field, value):
        """NaN and infinities are input errors, not crashes."""
        with pytest.raises(InvalidInput) as exc_info:
            create_property(**{field: value})

        assert f"{field} must be a finite number" in exc_info.value.errors

    def test_non_finite_mortgage_rejected(self, create_property):
        with pytest.raises(InvalidInput) as exc_info:
            create_property(mortgage_balance=float("nan"))

        assert "mortgage_balance must be a finite number" in exc_info.value.errors

    def test_all_errors_collected(self, create_property):
        """Every invalid field is reported, not just the first."""
        with pytest.raises(InvalidInput) as exc_info:
            create_property(square_feet=-5, bedrooms=0, bathrooms=0)

        assert len(exc_info.value.errors) == 3

    def test_invalid_input_is_value_error(self, create_property):
        with pytest.raises(ValueError):
            create_property(square_feet=0)


class TestEnumParsing:
    """Tests for lenient enum parsing."""

    def test_category_accepts_hyphens_and_spaces(self):
        assert StructureCategory.from_string("Multi-Family") == StructureCategory.MULTI_FAMILY
        assert StructureCategory.from_string("single family") == StructureCategory.SINGLE_FAMILY

    def test_unknown_category_returns_none(self):
        assert StructureCategory.from_string("castle") is None

    def test_condition_case_insensitive(self):
        assert ConditionTier.from_string(" Excellent ") == ConditionTier.EXCELLENT


# =============================================================================
# Test: Deterministic Results
# =============================================================================

class TestDeterministicResults:
    """Tests that same input produces same output."""

    def test_same_input_same_result(self, create_property):
        description = create_property(bedrooms=4, bathrooms=2.5)

        assert estimate(description) == estimate(description)

    def test_result_serializable(self, create_property):
        result = estimate(create_property())
        data = result.to_dict()

        assert data["confidence"] == "high"
        assert data["valuation_range"]["mid"] == data["estimated_value"]
