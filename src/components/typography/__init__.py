"""
Typography component - Fluid font-size presets.

Resolves theme font-size presets into static lengths or viewport-responsive
clamp() expressions.
"""

from ._impl import (
    get_computed_fluid_typography_value,
    get_fluid_typography_options_from_settings,
    get_typography_font_size_value,
    get_typography_value_and_unit,
    is_fluid_typography_enabled,
    round_to_precision,
)
from .component import (
    CUSTOM_PROPERTY_PREFIX,
    build_font_size_declarations,
    build_stylesheet,
    run,
    run_resolve_font_size,
    run_resolve_presets,
    run_resolve_settings,
    to_kebab_case,
)
from .models import (
    DEFAULT_FLUID,
    FluidBounds,
    FluidDefaults,
    ParsedLength,
    ResolvedFontSize,
    ResolveFontSizeInput,
    ResolvePresetsInput,
    ResolvePresetsOutput,
    ResolveSettingsInput,
    ResolveSettingsOutput,
    SizePreset,
    Unit,
    format_number,
)
from .ports import ThemeSettingsPort

__all__ = [
    # Entry points
    "run",
    "run_resolve_settings",
    "run_resolve_font_size",
    "run_resolve_presets",
    # Input models
    "ResolveSettingsInput",
    "ResolveFontSizeInput",
    "ResolvePresetsInput",
    # Output models
    "ResolveSettingsOutput",
    "ResolvedFontSize",
    "ResolvePresetsOutput",
    # Domain models
    "FluidBounds",
    "FluidDefaults",
    "ParsedLength",
    "SizePreset",
    "Unit",
    # Engine functions
    "get_computed_fluid_typography_value",
    "get_fluid_typography_options_from_settings",
    "get_typography_font_size_value",
    "get_typography_value_and_unit",
    "is_fluid_typography_enabled",
    "round_to_precision",
    "format_number",
    # Serialization
    "build_font_size_declarations",
    "build_stylesheet",
    "to_kebab_case",
    # Ports
    "ThemeSettingsPort",
    # Constants
    "CUSTOM_PROPERTY_PREFIX",
    "DEFAULT_FLUID",
]
