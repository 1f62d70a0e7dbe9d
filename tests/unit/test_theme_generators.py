"""Tests for static token scales and the font link helper."""

from __future__ import annotations

import pytest


class TestGenerators:
    def test_spacing_scale(self):
        from hueforge.core.theme_generators import generate_spacing_scale, spacing_px

        scale = generate_spacing_scale()
        assert len(scale) == 12
        assert scale["space-1"] == "0.25rem"
        assert scale["space-12"] == "5rem"
        assert spacing_px("space-4") == 16

    def test_spacing_px_unknown(self):
        from hueforge.core.theme_generators import spacing_px

        with pytest.raises(KeyError):
            spacing_px("space-99")

    def test_type_scale(self):
        from hueforge.core.theme_generators import HEADING_STEPS, generate_type_scale

        scale = generate_type_scale()
        assert list(scale)[0] == "step--2"
        assert list(scale)[-1] == "step-5"
        assert all(value.startswith("clamp(") for value in scale.values())
        assert set(HEADING_STEPS.values()) <= set(scale)

    def test_shape_scales(self):
        from hueforge.core.theme_generators import (
            generate_border_widths,
            generate_radii,
            generate_shadows,
        )

        assert generate_radii()["radius-md"] == "0.5rem"
        shadows = generate_shadows()
        assert list(shadows)[0] == "shadow-color"
        assert shadows["shadow-color"] == "240 2% 50%"
        assert "var(--shadow-color)" in shadows["shadow-3"]
        assert generate_border_widths() == {"border-width-1": "1px", "border-width-2": "2px"}


class TestFonts:
    def test_google_fonts_url(self):
        from hueforge.core.fonts import google_fonts_url

        assert google_fonts_url("Open Sans", "Montserrat") == (
            "https://fonts.googleapis.com/css2?family=Open+Sans:wght@400;700"
            "&family=Montserrat:wght@700&display=swap"
        )

    def test_font_link_tag(self):
        from hueforge.core.fonts import font_link_tag
        from hueforge.core.ir import FontSpec

        tag = font_link_tag(FontSpec(body_font_name="Source Sans 3", heading_font_name="Lora"))
        assert tag.startswith('<link href="https://fonts.googleapis.com/css2?family=Source+Sans+3:')
        assert tag.endswith('rel="stylesheet">')

    def test_google_fonts_url_encodes_reserved_characters(self):
        from hueforge.core.fonts import google_fonts_url

        url = google_fonts_url("Foo & Bar: Pro", "Baz;Sans")
        assert "family=Foo+%26+Bar%3A+Pro:wght@400;700" in url
        assert "family=Baz%3BSans:wght@700" in url
        assert url.count("&") == 2
