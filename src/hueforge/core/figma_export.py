"""
Design-tool variable document export.

Generates a two-collection variables document from a ThemeConfig:

- Primitives: one "Default" mode, one RGBA color per ramp token
  ("p1/600").
- Semantic: "Light" and "Dark" modes, one alias per role
  ("brand/primary" -> "p1/600").

Names stay isomorphic to the stylesheet's custom properties
("--p1-600", "--brand-primary") with "/" in place of "-".
A gradient primary brand cannot be expressed as a single alias; its start
token is used.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .derive import ThemeDerivation, derive_theme
from .ir import ColorMode, ThemeConfig
from .oklch import hex_to_rgba

logger = logging.getLogger(__name__)

DOCUMENT_VERSION = "1.0"

PRIMITIVES_COLLECTION = "Primitives"
SEMANTIC_COLLECTION = "Semantic"
PRIMITIVE_MODE = "Default"

# Collection mode names per theme mode, in document order.
SEMANTIC_MODES: dict[ColorMode, str] = {
    ColorMode.LIGHT: "Light",
    ColorMode.DARK: "Dark",
}


def _primitives_collection(derivation: ThemeDerivation) -> dict[str, Any]:
    variables: dict[str, Any] = {}
    for token in derivation.ramps.tokens():
        variables[token.primitive_name] = {
            "type": "COLOR",
            "valuesByMode": {PRIMITIVE_MODE: hex_to_rgba(token.hex)},
        }

    return {
        "name": PRIMITIVES_COLLECTION,
        "modes": [{"name": PRIMITIVE_MODE, "variables": {}}],
        "variables": variables,
    }


def _semantic_collection(derivation: ThemeDerivation) -> dict[str, Any]:
    variables: dict[str, Any] = {}
    modes: list[dict[str, Any]] = []

    for mode, mode_name in SEMANTIC_MODES.items():
        aliases: dict[str, Any] = {}
        for role, binding in derivation.binding_for_mode(mode).roles:
            variables.setdefault(role.variable_name, {"type": "COLOR", "valuesByMode": {}})
            aliases[role.variable_name] = {
                "type": "VARIABLE_ALIAS",
                "alias": binding.token.primitive_name,
            }
        modes.append({"name": mode_name, "variables": aliases})

    return {
        "name": SEMANTIC_COLLECTION,
        "modes": modes,
        "variables": variables,
    }


def generate_variables_document(theme: ThemeConfig | ThemeDerivation) -> dict[str, Any]:
    """Generate the variables document.

    Args:
        theme: A configuration (derived here) or an existing derivation.

    Returns:
        JSON-serializable dict: ``{version, collections: [...]}``.
    """
    derivation = theme if isinstance(theme, ThemeDerivation) else derive_theme(theme)
    if not derivation.is_complete:
        logger.warning(
            f"Variables document omits {len(derivation.errors)} color group(s) "
            "that failed to derive"
        )

    return {
        "version": DOCUMENT_VERSION,
        "collections": [
            _primitives_collection(derivation),
            _semantic_collection(derivation),
        ],
    }


def variables_to_json(document: dict[str, Any]) -> str:
    return json.dumps(document, indent=2)


def export_variables_file(theme: ThemeConfig | ThemeDerivation, output_path: Path) -> Path:
    """Generate the variables document and write it as JSON.

    Args:
        theme: Configuration or derivation.
        output_path: Path to write the JSON document.

    Returns:
        Path to the written file.
    """
    document = generate_variables_document(theme)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        variables_to_json(document),
        encoding="utf-8",
    )

    logger.info(f"Wrote variables document to {output_path}")
    return output_path
