"""Unit tests for colors and materials.

Tests cover:
- Saturating color scale and add
- Color parsing (names, triples, invalid input)
- Material validation and the local color weight
- Dictionary export and import
"""

import pytest

from src.whitted.materials import (
    BLACK,
    RED,
    WHITE,
    Material,
    add_colors,
    parse_color,
    scale_color,
)


class TestScaleColor:
    """Tests for scale_color()."""

    def test_identity(self):
        """Test intensity 1.0 leaves the color unchanged."""
        assert scale_color((12, 34, 56), 1.0) == (12, 34, 56)

    def test_truncates_toward_zero(self):
        """Test fractional channels are truncated, not rounded."""
        assert scale_color((100, 101, 3), 0.999) == (99, 100, 2)

    def test_saturates_at_255(self):
        """Test bright intensities clip instead of wrapping."""
        assert scale_color((200, 100, 0), 2.0) == (255, 200, 0)

    def test_negative_intensity_is_black(self):
        """Test negative intensities clamp to zero."""
        assert scale_color(WHITE, -0.5) == BLACK

    def test_returns_plain_ints(self):
        """Test channels are Python ints, not NumPy scalars."""
        assert all(type(channel) is int for channel in scale_color(RED, 0.5))


class TestAddColors:
    """Tests for add_colors()."""

    def test_sum(self):
        """Test channel-wise addition."""
        assert add_colors((10, 20, 30), (1, 2, 3)) == (11, 22, 33)

    def test_saturates(self):
        """Test sums above 255 clip."""
        assert add_colors((200, 0, 255), (100, 0, 1)) == (255, 0, 255)

    def test_three_colors(self):
        """Test any number of colors can be summed."""
        assert add_colors((1, 1, 1), (2, 2, 2), (3, 3, 3)) == (6, 6, 6)


class TestParseColor:
    """Tests for parse_color()."""

    def test_named_color(self):
        """Test names are looked up case-insensitively."""
        assert parse_color("Red") == RED

    def test_triple(self):
        """Test RGB triples are accepted."""
        assert parse_color([1, 2, 3]) == (1, 2, 3)

    @pytest.mark.parametrize(
        "value",
        [
            "chartreuse",
            (1, 2),
            (0, 0, 256),
            (-1, 0, 0),
            (0.5, 0, 0),
            None,
            7,
            (None, 0, 0),
            ("1", 0, 0),
        ],
    )
    def test_invalid(self, value):
        """Test unknown names and malformed triples are rejected."""
        with pytest.raises(ValueError):
            parse_color(value)


class TestMaterial:
    """Tests for Material."""

    def test_defaults(self):
        """Test a bare material is matte, opaque and non-reflective."""
        material = Material(RED)
        assert material.specularity == 0.0
        assert material.reflectivity == 0.0
        assert material.transparency == 0.0
        assert material.refractivity == 0.0
        assert material.local_weight == 1.0

    def test_color_name_is_resolved(self):
        """Test a color name is converted to a triple."""
        assert Material("blue").color == (0, 0, 255)

    def test_local_weight(self):
        """Test the local weight is what reflection and transparency leave over."""
        material = Material(RED, reflectivity=0.25, transparency=0.5)
        assert material.local_weight == pytest.approx(0.25)

    def test_energy_limit_is_inclusive(self):
        """Test reflectivity + transparency may add up to exactly 1."""
        material = Material(RED, reflectivity=0.7, transparency=0.3)
        assert material.local_weight == pytest.approx(0.0)

    def test_energy_limit_exceeded(self):
        """Test reflectivity + transparency above 1 is rejected."""
        with pytest.raises(ValueError, match="exceeds 1.0"):
            Material(RED, reflectivity=0.6, transparency=0.5)

    @pytest.mark.parametrize(
        "fields",
        [
            {"specularity": -1.0},
            {"reflectivity": 1.5},
            {"reflectivity": -0.1},
            {"transparency": 2.0},
            {"refractivity": -1.0},
        ],
    )
    def test_invalid_fields(self, fields):
        """Test out-of-range parameters are rejected."""
        with pytest.raises(ValueError):
            Material(RED, **fields)

    def test_from_dict_fills_defaults(self):
        """Test optional fields default when missing."""
        material = Material.from_dict({"color": [10, 20, 30], "reflectivity": 0.5})
        assert material.color == (10, 20, 30)
        assert material.reflectivity == 0.5
        assert material.specularity == 0.0

    def test_from_dict_requires_color(self):
        """Test a definition without a color is rejected."""
        with pytest.raises(ValueError, match="color"):
            Material.from_dict({"specularity": 10})

    @pytest.mark.parametrize(
        "data", [None, [255, 0, 0], {"color": "red", "reflectivity": None}]
    )
    def test_from_dict_wrong_types(self, data):
        """Test malformed definitions raise ValueError rather than TypeError."""
        with pytest.raises(ValueError):
            Material.from_dict(data)

    def test_to_dict(self):
        """Test export lists every parameter."""
        material = Material((230, 240, 255), 300.0, 0.1, 0.8, 1.5)
        assert material.to_dict() == {
            "color": [230, 240, 255],
            "specularity": 300.0,
            "reflectivity": 0.1,
            "transparency": 0.8,
            "refractivity": 1.5,
        }
        assert Material.from_dict(material.to_dict()) == material
