"""Tests for header alias resolution."""

from geolens.data.schema import FIELD_SYNONYMS, has_coordinates, resolve_columns


class TestResolveColumns:
    """Tests for resolve_columns."""

    def test_canonical_headers(self):
        """Test that canonical names map to themselves."""
        mapping = resolve_columns(["lat", "lng", "value", "bias", "category", "region"])

        assert mapping == {
            "lat": "lat",
            "lng": "lng",
            "value": "value",
            "bias": "bias",
            "category": "category",
            "region_tag": "region",
        }

    def test_case_insensitive(self):
        """Test that matching ignores case and keeps the original header."""
        mapping = resolve_columns(["LATITUDE", "Lon", "Score", "Type"])

        assert mapping["lat"] == "LATITUDE"
        assert mapping["lng"] == "Lon"
        assert mapping["value"] == "Score"
        assert mapping["category"] == "Type"

    def test_alias_priority(self):
        """Test that the earlier alias wins regardless of column order."""
        mapping = resolve_columns(["y", "x", "latitude", "longitude"])

        assert mapping["lat"] == "latitude"
        assert mapping["lng"] == "longitude"

    def test_whitespace_ignored(self):
        """Test that padded headers still match."""
        mapping = resolve_columns([" lat ", "lng"])
        assert mapping["lat"] == " lat "

    def test_missing_fields(self):
        """Test that unmatched fields map to None."""
        mapping = resolve_columns(["name", "lat"])

        assert mapping["lng"] is None
        assert mapping["value"] is None
        assert mapping["region_tag"] is None

    def test_zone_is_a_region(self):
        """Test that a zone header maps to the region tag only."""
        mapping = resolve_columns(["lat", "lng", "zone"])

        assert mapping["region_tag"] == "zone"
        assert mapping["category"] is None

    def test_custom_synonyms(self):
        """Test that a custom alias table is honoured."""
        mapping = resolve_columns(["breite", "laenge"], {"lat": ("breite",), "lng": ("laenge",)})
        assert mapping == {"lat": "breite", "lng": "laenge"}

    def test_every_field_has_aliases(self):
        """Test that the default table covers every canonical field."""
        assert set(FIELD_SYNONYMS) == {"lat", "lng", "value", "bias", "category", "region_tag"}
        assert all(FIELD_SYNONYMS.values())


class TestHasCoordinates:
    """Tests for has_coordinates."""

    def test_both_present(self):
        assert has_coordinates(resolve_columns(["lat", "lon"])) is True

    def test_one_missing(self):
        assert has_coordinates(resolve_columns(["lat", "value"])) is False
