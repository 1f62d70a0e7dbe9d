"""Tests for stylesheet generation."""

from __future__ import annotations

import re
from pathlib import Path

RAMP_REF = re.compile(r"var\((--(?:p1|p2|accent|neutral|success|warning|danger)-\d+)\)")


class TestSections:
    def test_color_ramps(self, default_config):
        from hueforge.core.css_export import generate_color_ramps
        from hueforge.core.derive import derive_theme

        css = generate_color_ramps(derive_theme(default_config))

        assert css.startswith(":root {")
        assert "  --p1-50: oklch(0.98 0.15 320.0);" in css
        assert "  --p1-600: oklch(0.5 0.15 320.0);" in css
        assert "--neutral-25: oklch(0.99 0.02 240.0);" in css
        assert re.search(r"--p1-600-hex: #[0-9a-f]{6};", css)

    def test_color_ramps_keep_full_precision(self):
        from hueforge.core.css_export import generate_color_ramps
        from hueforge.core.derive import derive_theme
        from hueforge.core.ir import ColorSpec, ThemeConfig

        stops = (0.9875, 0.95, 0.9, 0.8, 0.7, 0.6, 0.5, 0.4, 0.3, 0.2)
        config = ThemeConfig(accent=ColorSpec(hue=107.25, chroma=0.12345, stops=stops))
        css = generate_color_ramps(derive_theme(config))

        assert "  --accent-50: oklch(0.9875 0.12345 107.25);" in css
        assert "  --accent-600: oklch(0.5 0.12345 107.25);" in css

    def test_semantic_tokens(self, default_config):
        from hueforge.core.css_export import DARK_SELECTOR, LIGHT_SELECTOR, generate_semantic_tokens
        from hueforge.core.derive import derive_theme

        css = generate_semantic_tokens(derive_theme(default_config))
        light, dark = css.split(DARK_SELECTOR)

        assert light.startswith(LIGHT_SELECTOR)
        assert "--brand-primary: var(--p1-600);" in light
        assert "--text-0: var(--neutral-950);" in light
        assert "--notification-success: var(--success-600);" in light

        assert "/* Dark Theme Semantic Colors */" in dark
        assert "--brand-primary: var(--p1-500);" in dark
        assert "--text-on-primary: var(--neutral-950);" in dark

    def test_gradient_brand(self, gradient_config):
        from hueforge.core.css_export import generate_semantic_tokens
        from hueforge.core.derive import derive_theme

        derivation = derive_theme(gradient_config)
        css = generate_semantic_tokens(derivation)
        end_hex = derivation.light.binding_for("brand-primary").end_hex

        assert f"--brand-primary: linear-gradient(45deg, var(--p1-600), {end_hex});" in css
        assert "--brand-primary: linear-gradient(45deg, var(--p1-500), #" in css

    def test_os_preference_follows_dark_bindings(self, gradient_config):
        from hueforge.core.css_export import generate_os_preference
        from hueforge.core.derive import derive_theme

        css = generate_os_preference(derive_theme(gradient_config))

        assert css.startswith("@media (prefers-color-scheme: dark) {")
        assert ':root:not([data-theme="light"])' in css
        assert "--surface-1: var(--neutral-900);" in css
        assert "--brand-primary: linear-gradient(45deg, var(--p1-500), #" in css
        assert "--shadow-color: 240 2% 0%;" in css

    def test_global_styles_use_fonts(self):
        from hueforge.core.css_export import generate_global_styles
        from hueforge.core.ir import FontSpec, ThemeConfig

        config = ThemeConfig(fonts=FontSpec(body_font_name="Inter", heading_font_name="Lora"))
        css = generate_global_styles(config)

        assert "--font-base: 'Inter', sans-serif;" in css
        assert "--font-heading: 'Lora', sans-serif;" in css
        assert "h1 { font-size: var(--step-4); }" in css

    def test_static_scales(self):
        from hueforge.core.css_export import (
            generate_radii_shadows_borders,
            generate_spacing_scale_css,
            generate_typography_scale,
        )

        assert "--space-4: 1rem;  /* 16px */" in generate_spacing_scale_css()
        assert "--step-0: clamp(1.13rem, 1.09rem + 0.19vw, 1.25rem);" in generate_typography_scale()
        shape = generate_radii_shadows_borders()
        assert "--radius-full: 9999px;" in shape
        assert "--shadow-color: 240 2% 50%;" in shape
        assert "--border-width-2: 2px;" in shape


class TestComponents:
    def test_solid_primary_hover(self, default_config):
        from hueforge.core.css_export import generate_component_css
        from hueforge.core.derive import derive_theme

        css = generate_component_css(derive_theme(default_config))

        assert ".btn-primary:hover { background-color: var(--p1-700); }" in css
        assert '[data-theme="dark"] .btn-primary:hover { background-color: var(--p1-400); }' in css

    def test_gradient_primary_hover_lifts(self, gradient_config):
        from hueforge.core.css_export import generate_component_css
        from hueforge.core.derive import derive_theme

        css = generate_component_css(derive_theme(gradient_config))

        assert (
            ".btn-primary:hover { box-shadow: var(--shadow-3); transform: translateY(-2px); }"
            in css
        )
        assert ".btn-primary { background: var(--brand-primary);" in css

    def test_badges_and_notification_buttons(self, default_config):
        from hueforge.core.css_export import generate_component_css
        from hueforge.core.derive import derive_theme

        css = generate_component_css(derive_theme(default_config))

        for name in ("primary", "secondary", "accent", "success", "warning", "danger"):
            assert f".badge-{name} {{" in css
        for name in ("success", "warning", "danger"):
            assert f".btn-{name} {{" in css
        assert ".slider-track::-moz-range-thumb {" in css


class TestFullStylesheet:
    def test_section_order(self, default_config):
        from hueforge.core.css_export import generate_full_css

        css = generate_full_css(default_config)
        markers = [
            "/* Modern CSS Reset */",
            "/* p1 ramp */",
            "/* Light Theme Semantic Colors */",
            "/* Dark Theme Semantic Colors */",
            "/* Spacing",
            "/* Fluid Typography Scale",
            "/* Radii */",
            "@media (prefers-color-scheme: dark)",
            "--font-base:",
            ".visually-hidden {",
            "/* ====== Buttons ====== */",
            "/* ====== Slider ====== */",
        ]
        positions = [css.index(marker) for marker in markers]
        assert positions == sorted(positions)
        assert css.endswith("}\n")

    def test_ramp_references_are_defined(self, default_config):
        from hueforge.core.css_export import generate_full_css

        css = generate_full_css(default_config)
        for name in set(RAMP_REF.findall(css)):
            assert f"{name}: oklch(" in css, name

    def test_accepts_derivation(self, default_config):
        from hueforge.core.css_export import generate_full_css
        from hueforge.core.derive import derive_theme

        assert generate_full_css(derive_theme(default_config)) == generate_full_css(default_config)

    def test_deterministic(self, gradient_config):
        from hueforge.core.css_export import generate_full_css

        assert generate_full_css(gradient_config) == generate_full_css(gradient_config)

    def test_partial_derivation_omits_group(self, mismatched_config):
        from hueforge.core.css_export import generate_full_css

        css = generate_full_css(mismatched_config)

        assert "--p2-50:" not in css
        assert "--p1-50:" in css
        assert "--danger-900:" in css

    def test_short_primary_ladder_renders_solid_brand(self):
        from hueforge.core.css_export import generate_full_css
        from hueforge.core.ir import ColorSpec, ThemeConfig

        config = ThemeConfig(
            primary1=ColorSpec(
                stops=(0.95, 0.85, 0.75, 0.6, 0.5, 0.4, 0.3),
                use_gradient=True,
                gradient_end_seed_hex="#2A7BDB",
            )
        )
        css = generate_full_css(config)

        assert "--brand-primary: var(--p1-600);" in css
        assert "--brand-primary: var(--p1-500);" in css
        assert "linear-gradient(45deg" not in css

    def test_export_file(self, default_config, tmp_path: Path):
        from hueforge.core.css_export import export_css_file, generate_full_css

        output = tmp_path / "dist" / "theme.css"
        result = export_css_file(default_config, output)

        assert result == output
        assert output.read_text(encoding="utf-8") == generate_full_css(default_config)
