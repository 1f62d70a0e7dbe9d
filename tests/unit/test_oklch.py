"""Tests for sRGB <-> OKLCH conversion."""

from __future__ import annotations

import pytest

# =============================================================================
# Hex parsing
# =============================================================================


class TestHexParsing:
    def test_parse_with_and_without_hash(self):
        from hueforge.core.oklch import parse_hex

        assert parse_hex("#7B458F") == (0x7B, 0x45, 0x8F)
        assert parse_hex("7b458f") == (0x7B, 0x45, 0x8F)
        assert parse_hex("  #004780 ") == (0x00, 0x47, 0x80)

    @pytest.mark.parametrize("value", ["#12345", "#GGGGGG", "", "#1234567", None, 123])
    def test_invalid_hex_raises(self, value):
        from hueforge.core.errors import InvalidColorFormat
        from hueforge.core.oklch import hex_to_oklch

        with pytest.raises(InvalidColorFormat) as exc_info:
            hex_to_oklch(value)
        assert exc_info.value.value == value

    def test_is_valid_hex(self):
        from hueforge.core.oklch import is_valid_hex

        assert is_valid_hex("#cbdb2a") is True
        assert is_valid_hex("CBDB2A") is True
        assert is_valid_hex("#cbdb2") is False
        assert is_valid_hex(None) is False

    def test_invalid_format_is_hueforge_error(self):
        from hueforge.core.errors import HueforgeError, InvalidColorFormat

        assert issubclass(InvalidColorFormat, HueforgeError)


# =============================================================================
# Conversion
# =============================================================================


class TestHexToOklch:
    def test_pure_red(self):
        from hueforge.core.oklch import hex_to_oklch

        lightness, chroma, hue = hex_to_oklch("#ff0000")
        assert lightness == pytest.approx(0.628, abs=1e-3)
        assert chroma == pytest.approx(0.2577, abs=1e-3)
        assert hue == pytest.approx(29.23, abs=0.5)

    def test_white_is_achromatic(self):
        from hueforge.core.oklch import hex_to_oklch

        lightness, chroma, hue = hex_to_oklch("#ffffff")
        assert lightness == pytest.approx(1.0, abs=1e-3)
        assert chroma < 1e-4
        assert hue is None

    def test_black_is_achromatic(self):
        from hueforge.core.oklch import hex_to_oklch

        lightness, chroma, hue = hex_to_oklch("#000000")
        assert lightness == pytest.approx(0.0, abs=1e-6)
        assert chroma == pytest.approx(0.0, abs=1e-6)
        assert hue is None

    def test_mid_gray_is_achromatic(self):
        from hueforge.core.oklch import hex_to_oklch

        _lightness, _chroma, hue = hex_to_oklch("#808080")
        assert hue is None

    def test_hue_range(self):
        from hueforge.core.oklch import hex_to_oklch

        for value in ("#7b458f", "#004780", "#cbdb2a", "#ef426f", "#f37327"):
            _lightness, _chroma, hue = hex_to_oklch(value)
            assert hue is not None
            assert 0.0 <= hue < 360.0


class TestOklchToHex:
    def test_white_and_black(self):
        from hueforge.core.oklch import oklch_to_hex

        assert oklch_to_hex(1.0, 0.0, 0.0) == "#ffffff"
        assert oklch_to_hex(0.0, 0.0, 0.0) == "#000000"

    def test_out_of_gamut_is_clamped(self):
        import re

        from hueforge.core.oklch import oklch_to_hex

        result = oklch_to_hex(0.98, 0.15, 320.0)
        assert re.fullmatch(r"#[0-9a-f]{6}", result)

    def test_lowercase_output(self):
        from hueforge.core.oklch import oklch_to_hex

        result = oklch_to_hex(0.5, 0.15, 320.0)
        assert result == result.lower()
        assert len(result) == 7

    @pytest.mark.parametrize(
        "lightness,chroma,hue",
        [(0.6, 0.1, 250.0), (0.5, 0.12, 30.0), (0.7, 0.08, 140.0)],
    )
    def test_in_gamut_roundtrip(self, lightness, chroma, hue):
        from hueforge.core.oklch import hex_to_oklch, oklch_to_hex

        l2, c2, h2 = hex_to_oklch(oklch_to_hex(lightness, chroma, hue))
        assert l2 == pytest.approx(lightness, abs=2e-3)
        assert c2 == pytest.approx(chroma, abs=3e-3)
        assert h2 == pytest.approx(hue, abs=3.0)

    @pytest.mark.parametrize("value", ["#7B458F", "#004780", "#CBDB2A", "#2A7BDB", "#ffffff"])
    def test_hex_roundtrip_is_exact(self, value):
        from hueforge.core.oklch import hex_to_oklch, oklch_to_hex

        lightness, chroma, hue = hex_to_oklch(value)
        assert oklch_to_hex(lightness, chroma, hue or 0.0) == value.lower()


class TestFormatting:
    def test_oklch_to_css(self):
        from hueforge.core.oklch import oklch_to_css

        assert oklch_to_css(0.98, 0.15, 320.0) == "oklch(0.980 0.1500 320.0)"

    def test_oklch_to_css_with_alpha(self):
        from hueforge.core.oklch import oklch_to_css

        assert oklch_to_css(0.5, 0.1, 10.0, alpha=0.5) == "oklch(0.500 0.1000 10.0 / 0.50)"

    def test_hex_to_rgba(self):
        from hueforge.core.oklch import hex_to_rgba

        assert hex_to_rgba("#ff0000") == {"r": 1.0, "g": 0.0, "b": 0.0, "a": 1}
        rgba = hex_to_rgba("#7b458f")
        assert rgba["g"] == pytest.approx(0x45 / 255)
