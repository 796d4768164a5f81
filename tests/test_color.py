"""Unit tests for the Color value type.

Tests cover:
- Packing to and from 24-bit integers
- Channel validation
- Saturating arithmetic
"""

import dataclasses

import pytest


class TestColorPacking:
    """Tests for hex packing."""

    def test_to_hex_layout(self):
        """Test that channels are packed as 0xRRGGBB."""
        from teddycast.core.color import Color

        assert Color(139, 69, 19).to_hex() == 0x8B4513
        assert Color(120, 180, 130).to_hex() == (120 << 16) | (180 << 8) | 130

    def test_to_hex_extremes(self):
        """Test black and white pack to 0 and 0xFFFFFF."""
        from teddycast.core.color import BLACK, WHITE

        assert BLACK.to_hex() == 0x000000
        assert WHITE.to_hex() == 0xFFFFFF

    def test_from_hex_inverts_to_hex(self):
        """Test that from_hex recovers the original channels."""
        from teddycast.core.color import Color

        for color in (Color(0, 0, 0), Color(1, 2, 3), Color(255, 128, 7)):
            assert Color.from_hex(color.to_hex()) == color

    def test_from_hex_ignores_high_bits(self):
        """Test that bits above 24 are dropped."""
        from teddycast.core.color import Color

        assert Color.from_hex(0xFF123456) == Color(0x12, 0x34, 0x56)

    def test_to_float(self):
        """Test float conversion to [0, 1]."""
        from teddycast.core.color import Color

        r, g, b = Color(255, 0, 51).to_float()
        assert abs(r - 1.0) < 1e-9
        assert abs(g) < 1e-9
        assert abs(b - 0.2) < 1e-9


class TestColorValidation:
    """Tests for channel range checks."""

    @pytest.mark.parametrize("channels", [(-1, 0, 0), (0, 256, 0), (0, 0, 1000)])
    def test_out_of_range_raises(self, channels):
        """Test that channels outside [0, 255] are rejected."""
        from teddycast.core.color import Color

        with pytest.raises(ValueError):
            Color(*channels)

    def test_non_int_raises(self):
        """Test that float channels are rejected."""
        from teddycast.core.color import Color

        with pytest.raises(ValueError):
            Color(1.5, 0, 0)

    def test_color_is_immutable(self):
        """Test that colors cannot be modified."""
        from teddycast.core.color import Color

        color = Color(10, 20, 30)
        with pytest.raises(dataclasses.FrozenInstanceError):
            color.r = 0

    def test_colors_are_hashable_values(self):
        """Test that equal colors compare and hash equal."""
        from teddycast.core.color import Color

        assert Color(1, 2, 3) == Color(1, 2, 3)
        assert len({Color(1, 2, 3), Color(1, 2, 3)}) == 1


class TestColorArithmetic:
    """Tests for saturating add and scale."""

    def test_add_saturates(self):
        """Test that addition clamps at 255."""
        from teddycast.core.color import Color

        assert Color(200, 100, 0) + Color(100, 100, 5) == Color(255, 200, 5)

    def test_multiply_scales(self):
        """Test scaling by a float."""
        from teddycast.core.color import Color

        assert Color(100, 50, 20) * 0.5 == Color(50, 25, 10)
        assert 2.0 * Color(100, 200, 0) == Color(200, 255, 0)

    def test_multiply_clamps_negative(self):
        """Test that negative factors clamp to zero."""
        from teddycast.core.color import Color

        assert Color(100, 50, 20) * -1.0 == Color(0, 0, 0)
