"""
Web font link helper.

Builds the Google Fonts stylesheet URL for a body/heading font pairing.
Loading the stylesheet is left to whoever renders the theme.
"""

from __future__ import annotations

from urllib.parse import quote_plus

from .ir import FontSpec

GOOGLE_FONTS_CSS_URL = "https://fonts.googleapis.com/css2"


def _family_param(name: str) -> str:
    # spaces become "+"; reserved characters such as "&" are percent-encoded
    return quote_plus(" ".join(name.split()))


def google_fonts_url(body_font: str, heading_font: str) -> str:
    """Get the stylesheet URL loading the body font (400, 700) and heading font (700)."""
    return (
        f"{GOOGLE_FONTS_CSS_URL}?family={_family_param(body_font)}:wght@400;700"
        f"&family={_family_param(heading_font)}:wght@700&display=swap"
    )


def font_link_for(fonts: FontSpec) -> str:
    return google_fonts_url(fonts.body_font_name, fonts.heading_font_name)


def font_link_tag(fonts: FontSpec) -> str:
    """HTML ``<link>`` element for the font stylesheet."""
    return f'<link href="{font_link_for(fonts)}" rel="stylesheet">'
