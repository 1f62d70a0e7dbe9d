"""
Stylesheet generation for HUEFORGE themes.

Builds one CSS document from independently generated sections: reset,
primitive ramps, semantic bindings for light and dark mode, static scales,
an OS dark-preference fallback, global element styles, utilities and
component rules. Component rules reference semantic custom properties,
stepping to specific ramp tokens only for hover and badge shades.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .derive import ThemeDerivation, derive_theme
from .ir import GradientBinding, SemanticBinding, SolidBinding, ThemeConfig, Token
from .theme_generators import (
    BODY_STEP,
    HEADING_STEPS,
    SHADOW_COLOR_DARK,
    generate_border_widths,
    generate_radii,
    generate_shadows,
    generate_spacing_scale,
    generate_type_scale,
    spacing_px,
)

logger = logging.getLogger(__name__)

LIGHT_SELECTOR = ':root, [data-theme="light"]'
DARK_SELECTOR = '[data-theme="dark"]'


def _block(selector: str, lines: list[str], indent: int = 2) -> str:
    prefix = " " * indent
    body = [f"{prefix}{line}" if line else "" for line in lines]
    return "\n".join([f"{selector} {{", *body, "}"])


def binding_value(binding: SolidBinding | GradientBinding) -> str:
    """CSS value for a semantic binding."""
    if isinstance(binding, GradientBinding):
        return (
            f"linear-gradient({binding.angle}deg, var({binding.start.css_var}), {binding.end_hex})"
        )
    return f"var({binding.token.css_var})"


def _semantic_lines(binding: SemanticBinding) -> list[str]:
    lines: list[str] = []
    current_group = None
    for role, role_binding in binding.roles:
        if role.group == "notification" and current_group != "notification":
            lines.extend(["", "/* Notification colors */"])
        current_group = role.group
        lines.append(f"{role.css_var}: {binding_value(role_binding)};")
    return lines


# =============================================================================
# Sections
# =============================================================================


_RESET_RULES: tuple[str, ...] = (
    "*, *::before, *::after { box-sizing: border-box; }",
    "html { line-height: 1.5; -webkit-text-size-adjust: 100%; -moz-tab-size: 4; "
    "tab-size: 4; font-family: sans-serif; }",
    "body { margin: 0; }",
    "hr { height: 0; color: inherit; }",
    "h1, h2, h3, h4, h5, h6 { font-size: inherit; font-weight: inherit; }",
    "a { color: inherit; text-decoration: inherit; }",
    "b, strong { font-weight: bolder; }",
    "code, kbd, samp, pre { font-family: monospace, monospace; font-size: 1em; }",
    "small { font-size: 80%; }",
    "sub, sup { font-size: 75%; line-height: 0; position: relative; vertical-align: baseline; }",
    "sub { bottom: -0.25em; }",
    "sup { top: -0.5em; }",
    "table { text-indent: 0; border-color: inherit; border-collapse: collapse; }",
    "button, input, optgroup, select, textarea { font-family: inherit; font-size: 100%; "
    "line-height: 1.5; margin: 0; padding: 0; color: inherit; }",
    "button, select { text-transform: none; }",
    "button, [type='button'], [type='reset'], [type='submit'] { -webkit-appearance: button; }",
    "::-moz-focus-inner { border-style: none; padding: 0; }",
    ":-moz-focusring { outline: 1px dotted ButtonText; }",
    ":-moz-ui-invalid { box-shadow: none; }",
    "legend { padding: 0; }",
    "progress { vertical-align: baseline; }",
    "::-webkit-inner-spin-button, ::-webkit-outer-spin-button { height: auto; }",
    "[type='search'] { -webkit-appearance: textfield; outline-offset: -2px; }",
    "::-webkit-search-decoration { -webkit-appearance: none; }",
    "::-webkit-file-upload-button { -webkit-appearance: button; font: inherit; }",
    "summary { display: list-item; }",
    "img, svg, video, canvas, audio, iframe, embed, object { display: block; "
    "vertical-align: middle; max-width: 100%; height: auto; }",
)


def generate_css_reset() -> str:
    """Modern CSS reset."""
    return "\n".join(["/* Modern CSS Reset */", *_RESET_RULES])


def _token_oklch(token: Token) -> str:
    # shortest round-trip repr, so the custom property matches the stored token
    return f"oklch({token.l!r} {token.c!r} {token.h!r})"


def generate_color_ramps(derivation: ThemeDerivation) -> str:
    """Primitive ramps as custom properties, in OKLCH and resolved hex form."""
    lines: list[str] = []
    for ramp in derivation.ramps.ramps:
        if lines:
            lines.append("")
        lines.append(f"/* {ramp.prefix} ramp */")
        for token in ramp.tokens:
            lines.append(f"{token.name}: {_token_oklch(token)};")
            lines.append(f"{token.name}-hex: {token.hex};")
    return _block(":root", lines)


def generate_semantic_tokens(derivation: ThemeDerivation) -> str:
    """Semantic bindings: light as the default, dark under the theme attribute."""
    light = _block(
        LIGHT_SELECTOR,
        ["/* Light Theme Semantic Colors */", *_semantic_lines(derivation.light)],
    )
    dark = _block(
        DARK_SELECTOR,
        ["/* Dark Theme Semantic Colors */", *_semantic_lines(derivation.dark)],
    )
    return f"{light}\n\n{dark}"


def generate_spacing_scale_css() -> str:
    lines = ["/* Spacing (based on a 0.25rem grid) */"]
    for name, value in generate_spacing_scale().items():
        lines.append(f"--{name}: {value};  /* {spacing_px(name)}px */")
    return _block(":root", lines)


def generate_typography_scale() -> str:
    lines = ["/* Fluid Typography Scale (using clamp) */"]
    lines.extend(f"--{name}: {value};" for name, value in generate_type_scale().items())
    return _block(":root", lines)


def generate_radii_shadows_borders() -> str:
    """Radii, shadows and border widths, plus the dark-mode shadow color."""
    lines = ["/* Radii */"]
    lines.extend(f"--{name}: {value};" for name, value in generate_radii().items())
    lines.extend(["", "/* Shadows */"])
    lines.extend(f"--{name}: {value};" for name, value in generate_shadows().items())
    lines.extend(["", "/* Borders */"])
    lines.extend(f"--{name}: {value};" for name, value in generate_border_widths().items())

    root = _block(":root", lines)
    dark = _block(DARK_SELECTOR, [f"--shadow-color: {SHADOW_COLOR_DARK};"])
    return f"{root}\n{dark}"


def generate_os_preference(derivation: ThemeDerivation) -> str:
    """Dark bindings for users whose OS prefers dark and who chose no theme."""
    lines = [
        "/* Set dark theme variables if no theme is specified */",
        *_semantic_lines(derivation.dark),
        f"--shadow-color: {SHADOW_COLOR_DARK};",
    ]
    inner = _block(':root:not([data-theme="light"])', lines)
    indented = "\n".join(f"  {line}" if line else "" for line in inner.splitlines())
    return "\n".join(["@media (prefers-color-scheme: dark) {", indented, "}"])


def generate_global_styles(config: ThemeConfig) -> str:
    """Font wiring and element defaults."""
    fonts = config.fonts
    root = _block(
        ":root",
        [
            f"--font-base: '{fonts.body_font_name}', sans-serif;",
            f"--font-heading: '{fonts.heading_font_name}', sans-serif;",
        ],
    )
    headings = "\n".join(f"{tag} {{ font-size: var(--{step}); }}" for tag, step in HEADING_STEPS.items())
    return f"""{root}

body {{
  font-family: var(--font-base);
  background-color: var(--surface-1);
  color: var(--text-1);
  -webkit-font-smoothing: antialiased;
}}

/* Styles for the preview containers */
[data-theme] {{
  background-color: var(--surface-1);
  color: var(--text-1);
}}

h1, h2, h3, h4, h5, h6 {{
  font-family: var(--font-heading);
  color: var(--text-0);
  line-height: 1.2;
  font-weight: 700;
}}

{headings}
p, a, li, button, input, label {{ font-size: var(--{BODY_STEP}); }}

a {{
  color: var(--brand-primary);
  text-decoration: none;
  font-weight: 500;
}}
a:hover {{
  text-decoration: underline;
}}

ul, ol {{
  padding-left: var(--space-5);
  margin-block: var(--space-4);
  list-style-position: inside;
}}

ul {{ list-style-type: disc; }}
ol {{ list-style-type: decimal; }}

li {{
  margin-bottom: var(--space-2);
}}

ul ul, ol ol, ul ol, ol ul {{
  margin-block: var(--space-3);
  padding-left: var(--space-5);
}}

ul ul {{ list-style-type: circle; }}
ol ol {{ list-style-type: lower-alpha; }}
ul ol {{ list-style-type: lower-alpha; }}
ol ul {{ list-style-type: circle; }}"""


def generate_visually_hidden() -> str:
    return _block(
        ".visually-hidden",
        [
            "position: absolute;",
            "width: 1px;",
            "height: 1px;",
            "padding: 0;",
            "margin: -1px;",
            "overflow: hidden;",
            "clip: rect(0, 0, 0, 0);",
            "white-space: nowrap;",
            "border-width: 0;",
        ],
    )


# =============================================================================
# Components
# =============================================================================

# (modifier, light bg/fg, light hover bg, dark bg/fg, dark hover bg)
_NOTIFICATION_BUTTONS: tuple[tuple[str, tuple[int, int], int, tuple[int, int], int], ...] = (
    ("success", (100, 700), 200, (900, 200), 800),
    ("warning", (100, 800), 200, (900, 200), 800),
    ("danger", (100, 700), 200, (900, 200), 800),
)

_BADGE_GROUPS: tuple[tuple[str, str], ...] = (
    ("primary", "p1"),
    ("secondary", "p2"),
    ("accent", "accent"),
    ("success", "success"),
    ("warning", "warning"),
    ("danger", "danger"),
)


def _button_rules(derivation: ThemeDerivation) -> list[str]:
    gradient_light = isinstance(derivation.light.binding_for("brand-primary"), GradientBinding)
    gradient_dark = isinstance(derivation.dark.binding_for("brand-primary"), GradientBinding)
    lift = "box-shadow: var(--shadow-3); transform: translateY(-2px);"

    primary_hover = lift if gradient_light else "background-color: var(--p1-700);"
    primary_hover_dark = lift if gradient_dark else "background-color: var(--p1-400);"

    rules = [
        "/* ====== Buttons ====== */",
        _block(
            ".btn",
            [
                "display: inline-flex;",
                "align-items: center;",
                "justify-content: center;",
                "padding: var(--space-2) var(--space-4);",
                "font-family: var(--font-base);",
                f"font-size: var(--{BODY_STEP});",
                "font-weight: 700;",
                "border-radius: var(--radius-md);",
                "border: var(--border-width-1) solid transparent;",
                "cursor: pointer;",
                "transition: all 0.2s ease-in-out;",
            ],
        ),
        ".btn:focus-visible { outline: 2px solid var(--brand-accent); outline-offset: 2px; }",
        "",
        ".btn-primary { background: var(--brand-primary); color: var(--text-on-primary); }",
        f".btn-primary:hover {{ {primary_hover} }}",
        f"{DARK_SELECTOR} .btn-primary {{ color: var(--text-on-primary); }}",
        f"{DARK_SELECTOR} .btn-primary:hover {{ {primary_hover_dark} }}",
        "",
        ".btn-secondary { background-color: var(--brand-secondary); color: var(--text-on-secondary); }",
        ".btn-secondary:hover { background-color: var(--p2-700); }",
        f"{DARK_SELECTOR} .btn-secondary {{ color: var(--text-on-secondary); }}",
        f"{DARK_SELECTOR} .btn-secondary:hover {{ background-color: var(--p2-400); }}",
        "",
        ".btn-accent { background-color: var(--brand-accent); color: var(--neutral-950); }",
        ".btn-accent:hover { background-color: var(--accent-600); }",
        f"{DARK_SELECTOR} .btn-accent:hover {{ background-color: var(--accent-300); }}",
    ]

    for name, (bg, fg), hover, (dark_bg, dark_fg), dark_hover in _NOTIFICATION_BUTTONS:
        rules.extend(
            [
                "",
                f".btn-{name} {{ background-color: var(--{name}-{bg}); color: var(--{name}-{fg}); }}",
                f".btn-{name}:hover {{ background-color: var(--{name}-{hover}); }}",
                f"{DARK_SELECTOR} .btn-{name} {{ background-color: var(--{name}-{dark_bg}); "
                f"color: var(--{name}-{dark_fg}); }}",
                f"{DARK_SELECTOR} .btn-{name}:hover {{ background-color: var(--{name}-{dark_hover}); }}",
            ]
        )
    return rules


def _badge_rules() -> list[str]:
    rules = [
        "/* ====== Badges ====== */",
        _block(
            ".badge",
            [
                "display: inline-block;",
                "padding: var(--space-1) var(--space-2);",
                "font-size: var(--step--1);",
                "font-weight: 600;",
                "border-radius: var(--radius-full);",
                "line-height: 1;",
            ],
        ),
    ]
    rules.extend(
        f".badge-{name} {{ background-color: var(--{group}-100); color: var(--{group}-800); }}"
        for name, group in _BADGE_GROUPS
    )
    rules.append("")
    rules.extend(
        f"{DARK_SELECTOR} .badge-{name} {{ background-color: var(--{group}-800); "
        f"color: var(--{group}-200); }}"
        for name, group in _BADGE_GROUPS
    )
    return rules


_CARD_FORM_TAB_CSS = """/* ====== Card ====== */
.card {
  background-color: var(--surface-2);
  border-radius: var(--radius-lg);
  padding: var(--space-6);
  border: var(--border-width-1) solid var(--border-1);
  box-shadow: var(--shadow-2);
}
.card-primary {
  background: var(--brand-primary);
  color: var(--text-on-primary);
}
.card-primary h4 {
  color: var(--text-on-primary);
}
.card-secondary {
  background-color: var(--brand-secondary);
  color: var(--text-on-secondary);
}
.card-secondary h4 {
  color: var(--text-on-secondary);
}

/* ====== Forms ====== */
.input-field {
  width: 100%;
  background-color: var(--surface-2);
  padding: var(--space-2) var(--space-3);
  color: var(--text-1);
  border-radius: var(--radius-md);
  border: var(--border-width-1) solid var(--border-1);
  transition: all 0.2s;
}
.input-field::placeholder { color: var(--text-2); }
.input-field:focus {
  border-color: var(--brand-primary);
  outline: 2px solid var(--brand-primary);
  outline-offset: 2px;
}

/* ====== Tabs ====== */
.tab-list {
  display: flex;
  border-bottom: var(--border-width-2) solid var(--border-1);
}
.tab-button {
  padding: var(--space-2) var(--space-4);
  background: none;
  border: none;
  cursor: pointer;
  font-weight: 600;
  color: var(--text-2);
  border-bottom: var(--border-width-2) solid transparent;
  transform: translateY(var(--border-width-2));
  transition: all 0.2s;
}
.tab-button:hover {
  color: var(--text-0);
}
.tab-button.active {
  color: var(--brand-primary);
  border-color: var(--brand-primary);
}
.tab-panel {
  padding: var(--space-4);
  background-color: var(--surface-2);
  border: var(--border-width-1) solid var(--border-1);
  border-top: none;
  border-radius: 0 0 var(--radius-md) var(--radius-md);
}

/* ====== Accordion ====== */
.accordion-item {
  background-color: var(--surface-2);
  border: var(--border-width-1) solid var(--border-1);
  border-radius: var(--radius-md);
}
.accordion-item:not(:last-child) { margin-bottom: var(--space-2); }
.accordion-header button {
  width: 100%;
  padding: var(--space-3) var(--space-4);
  text-align: left;
  background: none;
  border: none;
  font-weight: 700;
  color: var(--text-0);
  cursor: pointer;
}
.accordion-content {
  display: grid;
  grid-template-rows: 0fr;
  transition: grid-template-rows 0.3s ease-in-out;
}
.accordion-content.open { grid-template-rows: 1fr; }
.accordion-content > p {
  overflow: hidden;
  padding: 0 var(--space-4) var(--space-4) var(--space-4);
  color: var(--text-2);
}"""

_SLIDER_THUMB = [
    "width: 20px;",
    "height: 20px;",
    "border-radius: 50%;",
    "background-color: var(--brand-primary);",
    "cursor: pointer;",
    "border: 3px solid var(--surface-1);",
    "box-shadow: var(--shadow-1);",
]


def _slider_rules() -> list[str]:
    return [
        "/* ====== Slider ====== */",
        _block(
            ".slider-track",
            [
                "-webkit-appearance: none;",
                "appearance: none;",
                "width: 100%;",
                "height: 8px;",
                "border-radius: var(--radius-full);",
                "background: linear-gradient(to right, var(--brand-primary) "
                "calc(var(--value, 50) * 1%), var(--surface-3) calc(var(--value, 50) * 1%));",
                "outline: none;",
            ],
        ),
        _block(
            ".slider-track::-webkit-slider-thumb",
            ["-webkit-appearance: none;", "appearance: none;", *_SLIDER_THUMB],
        ),
        _block(".slider-track::-moz-range-thumb", _SLIDER_THUMB),
    ]


def generate_component_css(derivation: ThemeDerivation) -> str:
    """Buttons, badges, cards, inputs, tabs, accordion and slider."""
    parts = [
        "\n".join(_button_rules(derivation)),
        "\n".join(_badge_rules()),
        _CARD_FORM_TAB_CSS,
        "\n".join(_slider_rules()),
    ]
    return "\n\n".join(parts)


# =============================================================================
# Full document
# =============================================================================


def generate_full_css(theme: ThemeConfig | ThemeDerivation) -> str:
    """
    Generate the complete stylesheet.

    Args:
        theme: A configuration (derived here) or an existing derivation

    Returns:
        CSS text, sections separated by blank lines
    """
    derivation = theme if isinstance(theme, ThemeDerivation) else derive_theme(theme)
    if not derivation.is_complete:
        logger.warning(
            f"Stylesheet omits {len(derivation.errors)} color group(s) that failed to derive"
        )

    sections = [
        generate_css_reset(),
        generate_color_ramps(derivation),
        generate_semantic_tokens(derivation),
        generate_spacing_scale_css(),
        generate_typography_scale(),
        generate_radii_shadows_borders(),
        generate_os_preference(derivation),
        generate_global_styles(derivation.config),
        generate_visually_hidden(),
        generate_component_css(derivation),
    ]
    return "\n\n".join(sections) + "\n"


def export_css_file(theme: ThemeConfig | ThemeDerivation, output_path: Path) -> Path:
    """Generate the stylesheet and write it to *output_path*.

    Returns:
        Path to the written file.
    """
    css = generate_full_css(theme)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(css, encoding="utf-8")

    logger.info(f"Wrote stylesheet to {output_path}")
    return output_path
