"""
Typography component - Data models.

Presets and settings arrive as theme-shaped mappings (camelCase keys), so the
models here stay permissive: unknown shapes degrade to "absent" instead of
failing validation.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# --- Units ---


class Unit(str, Enum):
    """Supported CSS length units."""

    PX = "px"
    REM = "rem"
    EM = "em"

    @property
    def is_relative(self) -> bool:
        return self is not Unit.PX

    def to_px(self, value: float, root_size_value: float) -> float:
        """Convert a magnitude in this unit to pixels."""
        return value if self is Unit.PX else value * root_size_value

    def from_px(self, value: float, root_size_value: float) -> float:
        """Convert a pixel magnitude into this unit."""
        return value if self is Unit.PX else value / root_size_value


@dataclass(frozen=True)
class ParsedLength:
    """A length split into magnitude and unit."""

    value: float
    unit: Unit

    def __str__(self) -> str:
        return f"{format_number(self.value)}{self.unit.value}"


def format_number(value: float) -> str:
    """Render a number without a trailing ``.0`` for integral values."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


# --- Configuration ---


@dataclass(frozen=True)
class FluidDefaults:
    """Tunable constants for fluid font-size computation."""

    root_size_value: float = 16
    minimum_font_size_limit: str = "14px"
    minimum_viewport_width: str = "320px"
    maximum_viewport_width: str = "1600px"
    scale_factor: float = 1
    minimum_font_size_factor_min: float = 0.25
    minimum_font_size_factor_max: float = 0.75
    minimum_font_size_log_base: float = 0.075
    precision: int = 3


DEFAULT_FLUID = FluidDefaults()


# --- Presets ---


@dataclass(frozen=True)
class FluidBounds:
    """Explicit per-preset fluid bounds."""

    min: str | float | None = None
    max: str | float | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> FluidBounds:
        return cls(min=data.get("min") or None, max=data.get("max") or None)

    @property
    def is_empty(self) -> bool:
        return not self.min and not self.max


@dataclass(frozen=True)
class SizePreset:
    """
    A named font size entry.

    ``fluid`` is ``False`` to opt out, ``True`` to opt in, ``None`` to defer
    to global settings, or a ``FluidBounds`` with explicit bounds.
    """

    size: str | float | None
    fluid: bool | FluidBounds | None = None
    slug: str | None = None
    name: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SizePreset:
        """Build a preset from a theme-shaped mapping."""
        raw_fluid = data.get("fluid")
        fluid: bool | FluidBounds | None
        if isinstance(raw_fluid, bool):
            fluid = raw_fluid
        elif isinstance(raw_fluid, Mapping):
            fluid = FluidBounds.from_mapping(raw_fluid)
        else:
            # None, [] and anything else defer to global settings
            fluid = None
        return cls(
            size=data.get("size"),
            fluid=fluid,
            slug=data.get("slug"),
            name=data.get("name"),
        )

    @property
    def bounds(self) -> FluidBounds:
        if isinstance(self.fluid, FluidBounds):
            return self.fluid
        return FluidBounds()


# --- Input Models ---


@dataclass(frozen=True)
class ResolveSettingsInput:
    """Input for normalizing global fluid typography settings."""

    settings: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class ResolveFontSizeInput:
    """Input for resolving one preset."""

    preset: SizePreset
    settings: Mapping[str, Any] | None = None
    defaults: FluidDefaults = DEFAULT_FLUID


@dataclass(frozen=True)
class ResolvePresetsInput:
    """Input for resolving every preset of a theme."""

    presets: tuple[SizePreset, ...]
    settings: Mapping[str, Any] | None = None
    defaults: FluidDefaults = DEFAULT_FLUID


# --- Output Models ---


@dataclass(frozen=True)
class ResolveSettingsOutput:
    """Normalized fluid configuration."""

    fluid: bool | dict[str, Any] | None

    def as_dict(self) -> dict[str, Any]:
        fluid = dict(self.fluid) if isinstance(self.fluid, dict) else self.fluid
        return {"fluid": fluid}


@dataclass(frozen=True)
class ResolvedFontSize:
    """A preset paired with its computed CSS value."""

    preset: SizePreset
    value: str | float | None

    @property
    def is_fluid(self) -> bool:
        return isinstance(self.value, str) and "clamp(" in self.value


@dataclass(frozen=True)
class ResolvePresetsOutput:
    """Resolved values for a set of presets, in declaration order."""

    font_sizes: tuple[ResolvedFontSize, ...] = field(default_factory=tuple)

    @property
    def total(self) -> int:
        return len(self.font_sizes)
