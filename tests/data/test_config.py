"""Tests for NormalizerConfig validation."""

import pytest

from geolens.data.config import NormalizerConfig


class TestNormalizerConfig:
    """Tests for NormalizerConfig defaults and validation."""

    def test_default_values(self):
        """Test that defaults give deterministic back-fill."""
        config = NormalizerConfig()
        assert config.backfill == "default"
        assert config.default_value == 0.0
        assert config.default_bias == 0.0
        assert config.default_category == "unknown"
        assert config.seed is None
        assert config.clip_bias is True
        assert config.region_fallback == "latitude_band"

    def test_random_backfill(self):
        """Test that random back-fill is accepted with a seed."""
        config = NormalizerConfig(backfill="random", seed=42)
        assert config.backfill == "random"
        assert config.seed == 42

    def test_invalid_backfill_raises_error(self):
        """Test that an unknown back-fill mode raises ValueError."""
        with pytest.raises(ValueError, match="backfill must be one of"):
            NormalizerConfig(backfill="interpolate")

    def test_default_bias_out_of_range(self):
        """Test that a default bias outside [0, 1] raises ValueError."""
        with pytest.raises(ValueError, match="default_bias must be in"):
            NormalizerConfig(default_bias=1.5)

    def test_default_bias_unchecked_without_clipping(self):
        """Test that clip_bias=False allows any default bias."""
        config = NormalizerConfig(default_bias=1.5, clip_bias=False)
        assert config.default_bias == 1.5

    def test_empty_default_category(self):
        """Test that an empty default category raises ValueError."""
        with pytest.raises(ValueError, match="default_category cannot be empty"):
            NormalizerConfig(default_category="")

    def test_invalid_region_fallback_raises_error(self):
        """Test that an unknown region fallback raises ValueError."""
        with pytest.raises(ValueError, match="region_fallback must be one of"):
            NormalizerConfig(region_fallback="nearest")
