"""
Unit tests for BandCatalog and band configuration.

Tests cover:
- Ordering and lookup
- Neighbor lookups for resistance and assistance bands
- Configuration validation
"""
import pytest
from pydantic import ValidationError

from backend.core.band_catalog import BandCatalog
from domain.models.band import BandConfig, BandType, Direction


@pytest.fixture
def catalog():
    """Four-band catalog: red < blue < green < black."""
    return BandCatalog(BandConfig())


@pytest.mark.unit
class TestBandLookup:
    """Tests for basic catalog lookups."""

    def test_colors_sorted_by_order(self):
        config = BandConfig(colors={
            "green": {"resistance": 30, "order": 3},
            "red": {"resistance": 10, "order": 1},
            "blue": {"resistance": 20, "order": 2},
        })
        assert BandCatalog(config).colors == ["red", "blue", "green"]

    def test_resistance_of_known_color(self, catalog):
        assert catalog.resistance_of("blue") == 20

    def test_resistance_of_unknown_color(self, catalog):
        assert catalog.resistance_of("purple") is None

    def test_lookup_is_case_insensitive(self, catalog):
        assert "Red" in catalog
        assert catalog.get(" GREEN ").order == 3

    def test_thresholds_exposed(self, catalog):
        assert catalog.max_reps_before_band_change == 15
        assert catalog.default_reps_on_band_change == 8


@pytest.mark.unit
class TestNeighbor:
    """Tests for neighbor lookups."""

    def test_resistance_harder_is_higher_order(self, catalog):
        assert catalog.neighbor("red", BandType.RESISTANCE, Direction.HARDER) == "blue"

    def test_resistance_easier_is_lower_order(self, catalog):
        assert catalog.neighbor("green", BandType.RESISTANCE, Direction.EASIER) == "blue"

    def test_resistance_boundaries(self, catalog):
        assert catalog.neighbor("black", BandType.RESISTANCE, Direction.HARDER) is None
        assert catalog.neighbor("red", BandType.RESISTANCE, Direction.EASIER) is None

    def test_assistance_harder_is_lower_order(self, catalog):
        """Less assistance is harder."""
        assert catalog.neighbor("black", BandType.ASSISTANCE, Direction.HARDER) == "green"

    def test_assistance_boundaries(self, catalog):
        assert catalog.neighbor("red", BandType.ASSISTANCE, Direction.HARDER) is None
        assert catalog.neighbor("black", BandType.ASSISTANCE, Direction.EASIER) is None

    def test_assistance_inverts_resistance(self, catalog):
        """For every band, assistance/harder == resistance/easier and vice versa."""
        for color in catalog.colors:
            assert catalog.neighbor(color, BandType.ASSISTANCE, Direction.HARDER) == \
                catalog.neighbor(color, BandType.RESISTANCE, Direction.EASIER)
            assert catalog.neighbor(color, BandType.ASSISTANCE, Direction.EASIER) == \
                catalog.neighbor(color, BandType.RESISTANCE, Direction.HARDER)

    def test_resistance_neighbors_follow_order(self, catalog):
        """Harder is order k+1 and easier is order k-1 when they exist."""
        by_order = {catalog.get(c).order: c for c in catalog.colors}
        for color in catalog.colors:
            k = catalog.get(color).order
            assert catalog.neighbor(color, BandType.RESISTANCE, Direction.HARDER) == by_order.get(k + 1)
            assert catalog.neighbor(color, BandType.RESISTANCE, Direction.EASIER) == by_order.get(k - 1)

    def test_unknown_color_returns_none(self, catalog):
        assert catalog.neighbor("purple", BandType.RESISTANCE, Direction.HARDER) is None

    def test_gaps_in_order_are_skipped(self):
        """Neighbours are adjacent in order, not order +/- 1."""
        config = BandConfig(colors={
            "light": {"resistance": 5, "order": 10},
            "heavy": {"resistance": 50, "order": 30},
        })
        catalog = BandCatalog(config)
        assert catalog.neighbor("light", BandType.RESISTANCE, Direction.HARDER) == "heavy"


@pytest.mark.unit
class TestBandConfig:
    """Tests for configuration validation."""

    def test_duplicate_orders_rejected(self):
        with pytest.raises(ValidationError):
            BandConfig(colors={
                "red": {"resistance": 10, "order": 1},
                "blue": {"resistance": 20, "order": 1},
            })

    def test_thresholds_must_be_positive(self):
        with pytest.raises(ValidationError):
            BandConfig(max_reps_before_band_change=0)

    def test_config_is_frozen(self):
        config = BandConfig()
        with pytest.raises(ValidationError):
            config.max_reps_before_band_change = 20

    def test_color_keys_lowercased(self):
        config = BandConfig(colors={"Red": {"resistance": 10, "order": 1}})
        assert list(config.colors) == ["red"]
