"""
Typography component - Fluid font-size resolution.

Shell Layer - adapts presets and settings into the pure engine and
serializes the results as CSS custom properties.

Invariants:
- Inputs are never mutated
- Same preset and settings always give the same value
- Unsupported input yields the literal size, never an error
"""

from __future__ import annotations

import logging
import re

from ._impl import (
    get_fluid_typography_options_from_settings,
    get_typography_font_size_value,
)
from .models import (
    DEFAULT_FLUID,
    FluidDefaults,
    ResolvedFontSize,
    ResolveFontSizeInput,
    ResolvePresetsInput,
    ResolvePresetsOutput,
    ResolveSettingsInput,
    ResolveSettingsOutput,
    SizePreset,
    format_number,
)
from .ports import ThemeSettingsPort

logger = logging.getLogger(__name__)

CUSTOM_PROPERTY_PREFIX = "--preset--font-size--"

_SLUG_SPLIT_RE = re.compile(r"[^a-zA-Z0-9]+")
_CAMEL_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


# --- Component Entry Points ---


def run_resolve_settings(input_data: ResolveSettingsInput) -> ResolveSettingsOutput:
    """Normalize global settings into a fluid configuration."""
    options = get_fluid_typography_options_from_settings(input_data.settings)
    return ResolveSettingsOutput(fluid=options["fluid"])


def run_resolve_font_size(input_data: ResolveFontSizeInput) -> ResolvedFontSize:
    """Resolve a single preset against normalized settings."""
    value = get_typography_font_size_value(
        input_data.preset,
        input_data.settings,
        defaults=input_data.defaults,
    )
    return ResolvedFontSize(preset=input_data.preset, value=value)


def run_resolve_presets(input_data: ResolvePresetsInput) -> ResolvePresetsOutput:
    """
    Resolve every preset with one normalized configuration.

    ``settings`` here is the raw document settings; it is normalized once
    and shared across presets.
    """
    normalized = run_resolve_settings(ResolveSettingsInput(settings=input_data.settings))
    options = normalized.as_dict()

    resolved = tuple(
        run_resolve_font_size(
            ResolveFontSizeInput(preset=preset, settings=options, defaults=input_data.defaults)
        )
        for preset in input_data.presets
    )
    return ResolvePresetsOutput(font_sizes=resolved)


def run(
    theme: ThemeSettingsPort,
    defaults: FluidDefaults = DEFAULT_FLUID,
) -> ResolvePresetsOutput:
    """Resolve all font-size presets exposed by a theme source."""
    presets = tuple(SizePreset.from_mapping(p) for p in theme.get_font_size_presets())
    return run_resolve_presets(
        ResolvePresetsInput(presets=presets, settings=theme.get_settings(), defaults=defaults)
    )


# --- Stylesheet Serialization ---


def to_kebab_case(value: str) -> str:
    """Convert a preset slug such as ``xLarge`` or ``x large`` to ``x-large``."""
    value = _CAMEL_RE.sub("-", value)
    parts = [p for p in _SLUG_SPLIT_RE.split(value) if p]
    return "-".join(parts).lower()


def build_font_size_declarations(output: ResolvePresetsOutput) -> list[str]:
    """Render resolved presets as CSS custom property declarations."""
    declarations: list[str] = []
    for item in output.font_sizes:
        slug = item.preset.slug
        if not slug or item.value is None:
            logger.debug("Skipping font size preset without slug or value: %r", item.preset)
            continue
        value = item.value if isinstance(item.value, str) else f"{format_number(item.value)}px"
        declarations.append(f"{CUSTOM_PROPERTY_PREFIX}{to_kebab_case(slug)}: {value};")
    return declarations


def build_stylesheet(output: ResolvePresetsOutput, selector: str = ":root") -> str:
    """Wrap the declarations in a single rule."""
    body = "".join(f"\t{line}\n" for line in build_font_size_declarations(output))
    return f"{selector} {{\n{body}}}\n"
