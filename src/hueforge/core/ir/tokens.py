"""
Derived token IR types.

Tokens, ramps and semantic bindings are values produced by derivation.
They are frozen and carry no identity beyond the derivation call that
produced them.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from .themeconfig import ColorMode

# =============================================================================
# Primitive tokens
# =============================================================================


class Token(BaseModel):
    """One derived color, e.g. ``--p1-600``."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Custom property name, e.g. '--p1-600'")
    group: str = Field(description="Color group prefix, e.g. 'p1'")
    weight: int = Field(description="Ladder weight, e.g. 600")
    hex: str = Field(pattern=r"^#[0-9a-f]{6}$", description="Resolved sRGB color")
    l: float = Field(description="OKLCH lightness")  # noqa: E741
    c: float = Field(description="OKLCH chroma")
    h: float = Field(description="OKLCH hue")

    @property
    def primitive_name(self) -> str:
        """Variable document name, e.g. 'p1/600'."""
        return f"{self.group}/{self.weight}"


class Ramp(BaseModel):
    """Ordered tokens for one color group, in stop order."""

    model_config = ConfigDict(frozen=True)

    prefix: str
    tokens: tuple[Token, ...]

    def __len__(self) -> int:
        return len(self.tokens)

    def token_at(self, index: int) -> Token:
        return self.tokens[index]

    def token_for(self, weight: int) -> Token:
        """Get the token for a ladder weight.

        Raises:
            KeyError: If the ramp has no token for *weight*.
        """
        for token in self.tokens:
            if token.weight == weight:
                return token
        raise KeyError(f"{self.prefix} has no weight {weight}")


# =============================================================================
# Semantic bindings
# =============================================================================


class TokenRef(BaseModel):
    """Reference to a primitive token by group and ladder weight."""

    model_config = ConfigDict(frozen=True)

    group: str
    weight: int

    @property
    def css_var(self) -> str:
        return f"--{self.group}-{self.weight}"

    @property
    def primitive_name(self) -> str:
        return f"{self.group}/{self.weight}"


class SolidBinding(BaseModel):
    """Role bound to a single primitive token."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["solid"] = "solid"
    token: TokenRef


class GradientBinding(BaseModel):
    """Role rendered as a two-stop linear gradient."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["gradient"] = "gradient"
    start: TokenRef
    end_hex: str = Field(pattern=r"^#[0-9a-f]{6}$")
    angle: int = 45

    @property
    def token(self) -> TokenRef:
        """The start token; the closest single-token stand-in for the gradient."""
        return self.start


RoleBinding = Annotated[SolidBinding | GradientBinding, Field(discriminator="kind")]


class SemanticRole(BaseModel):
    """A named design purpose, e.g. text/on-primary."""

    model_config = ConfigDict(frozen=True)

    group: str = Field(description="Role group, e.g. 'text'")
    name: str = Field(description="Role name within the group, e.g. 'on-primary'")

    @property
    def key(self) -> str:
        """Flat role key, e.g. 'text-on-primary'."""
        return f"{self.group}-{self.name}"

    @property
    def css_var(self) -> str:
        return f"--{self.group}-{self.name}"

    @property
    def variable_name(self) -> str:
        return f"{self.group}/{self.name}"


class SemanticBinding(BaseModel):
    """All role bindings for one theme mode, in role-table order."""

    model_config = ConfigDict(frozen=True)

    mode: ColorMode
    roles: tuple[tuple[SemanticRole, RoleBinding], ...]

    def binding_for(self, key: str) -> SolidBinding | GradientBinding:
        """Get the binding for a flat role key such as 'brand-primary'."""
        for role, binding in self.roles:
            if role.key == key:
                return binding
        raise KeyError(f"Unknown semantic role: {key}")
