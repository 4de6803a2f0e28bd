"""
Fluid typography engine - unit parsing and clamp() computation.

Pure functions only. Every unsupported or ambiguous input degrades to
returning the author's value unchanged; nothing here raises.

Key behaviors:
- Lengths are parsed into (value, unit) for px, rem and em only
- Bare numbers are treated as px
- A preset's minimum is derived from its size on a logarithmic curve
  unless given explicitly
- Output is clamp(min, <rem intercept> + ((1vw - <offset>) * <slope>), max)
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping
from typing import Any

from .models import (
    DEFAULT_FLUID,
    FluidDefaults,
    ParsedLength,
    SizePreset,
    Unit,
    format_number,
)

logger = logging.getLogger(__name__)

_LENGTH_RE = re.compile(r"(\d*\.?\d+)(rem|px|em)")
_NUMBER_RE = re.compile(r"\d*\.?\d+")


# --- Numbers and Units ---


def round_to_precision(value: float, digits: int = 3) -> float | None:
    """Round half-up to ``digits`` decimal places. Non-finite input gives None."""
    if not math.isfinite(value):
        return None
    base = 10**digits
    return math.floor(value * base + 0.5) / base


def get_typography_value_and_unit(
    raw_value: Any,
    coerce_to: Unit | str | None = None,
    root_size_value: float = 16,
) -> ParsedLength | None:
    """
    Split a CSS length into magnitude and unit.

    Numbers and numeric strings are read as px. px converts to rem/em through
    the root size; rem and em are interchangeable without conversion.

    Returns None for anything outside px, rem and em.
    """
    if isinstance(raw_value, bool) or not isinstance(raw_value, (str, int, float)):
        return None

    if isinstance(raw_value, (int, float)):
        if not math.isfinite(raw_value):
            return None
        raw_value = f"{format_number(raw_value)}px"
    elif _NUMBER_RE.fullmatch(raw_value):
        raw_value = f"{raw_value}px"

    match = _LENGTH_RE.fullmatch(raw_value)
    if match is None:
        return None

    value = float(match.group(1))
    unit = Unit(match.group(2))
    target = Unit(coerce_to) if coerce_to else None

    if target is Unit.PX and unit.is_relative:
        value = unit.to_px(value, root_size_value)
        unit = target
    elif unit is Unit.PX and target is not None and target.is_relative:
        value = target.from_px(value, root_size_value)
        unit = target
    elif target is not None and target.is_relative and unit.is_relative:
        unit = target

    rounded = round_to_precision(value, 3)
    if rounded is None:
        return None
    return ParsedLength(value=rounded, unit=unit)


# --- Settings Resolver ---


def is_fluid_typography_enabled(options: Any) -> bool:
    """True when ``options['fluid']`` is True or a non-empty mapping."""
    if not isinstance(options, Mapping):
        return False
    fluid = options.get("fluid")
    return fluid is True or (isinstance(fluid, Mapping) and len(fluid) > 0)


def get_fluid_typography_options_from_settings(settings: Any) -> dict[str, Any]:
    """
    Normalize document settings into ``{"fluid": ...}``.

    ``typography.fluid`` False always wins. A mapping is copied and inherits
    ``layout.wideSize`` as ``maxViewportWidth`` unless it sets its own.
    """
    if not isinstance(settings, Mapping):
        return {"fluid": None}

    typography = settings.get("typography")
    if not isinstance(typography, Mapping):
        return {"fluid": None}

    fluid = typography.get("fluid")
    if isinstance(fluid, bool):
        return {"fluid": fluid}
    if not isinstance(fluid, Mapping):
        return {"fluid": None}

    resolved = dict(fluid)
    layout = settings.get("layout")
    wide_size = layout.get("wideSize") if isinstance(layout, Mapping) else None
    if "maxViewportWidth" not in resolved and get_typography_value_and_unit(wide_size):
        resolved = {"maxViewportWidth": wide_size, **resolved}
    return {"fluid": resolved}


# --- Fluid Computation ---


def _minimum_font_size_factor(size_px: float, defaults: FluidDefaults) -> float:
    """Shrink factor for the auto-computed minimum; smaller for larger sizes."""
    if size_px <= 0:
        return defaults.minimum_font_size_factor_max
    factor = 1 - defaults.minimum_font_size_log_base * math.log2(size_px)
    return min(
        max(factor, defaults.minimum_font_size_factor_min),
        defaults.minimum_font_size_factor_max,
    )


def _as_literal(bound: Any) -> Any:
    """Explicit numeric bounds render as px."""
    if isinstance(bound, (int, float)) and not isinstance(bound, bool) and bound:
        return f"{format_number(bound)}px"
    return bound


def get_computed_fluid_typography_value(
    font_size: Any,
    minimum_font_size: Any = None,
    maximum_font_size: Any = None,
    minimum_font_size_limit: Any = None,
    maximum_viewport_width: Any = None,
    defaults: FluidDefaults = DEFAULT_FLUID,
) -> str | None:
    """
    Build a clamp() expression for ``font_size``.

    Returns None when no fluid value should be emitted: an unsupported unit
    anywhere, or a size at or below the limit with no explicit bounds.
    """
    root = defaults.root_size_value
    minimum_font_size = _as_literal(minimum_font_size)
    maximum_font_size = _as_literal(maximum_font_size)
    if not get_typography_value_and_unit(minimum_font_size_limit, root_size_value=root):
        minimum_font_size_limit = defaults.minimum_font_size_limit
    maximum_viewport_width = maximum_viewport_width or defaults.maximum_viewport_width

    font_size_parsed = get_typography_value_and_unit(font_size, root_size_value=root)
    if font_size_parsed is None:
        return None

    limit_parsed = get_typography_value_and_unit(
        minimum_font_size_limit, coerce_to=font_size_parsed.unit, root_size_value=root
    )

    if limit_parsed and limit_parsed.value and not minimum_font_size and not maximum_font_size:
        if font_size_parsed.value <= limit_parsed.value:
            return None

    if not maximum_font_size:
        maximum_font_size = str(font_size_parsed)

    if not minimum_font_size:
        size_px = font_size_parsed.unit.to_px(font_size_parsed.value, root)
        factor = _minimum_font_size_factor(size_px, defaults)
        calculated = round_to_precision(font_size_parsed.value * factor, defaults.precision)
        if calculated is None:
            return None
        if limit_parsed and limit_parsed.value and calculated < limit_parsed.value:
            minimum_font_size = f"{format_number(limit_parsed.value)}{font_size_parsed.unit.value}"
        else:
            minimum_font_size = f"{format_number(calculated)}{font_size_parsed.unit.value}"

    minimum_parsed = get_typography_value_and_unit(minimum_font_size, root_size_value=root)
    working_unit = minimum_parsed.unit if minimum_parsed else Unit.REM
    maximum_parsed = get_typography_value_and_unit(
        maximum_font_size, coerce_to=working_unit, root_size_value=root
    )
    if minimum_parsed is None or maximum_parsed is None:
        logger.debug(
            "Unsupported fluid bounds min=%r max=%r, keeping literal size",
            minimum_font_size,
            maximum_font_size,
        )
        return None

    minimum_rem = get_typography_value_and_unit(
        minimum_font_size, coerce_to=Unit.REM, root_size_value=root
    )
    max_viewport = get_typography_value_and_unit(
        maximum_viewport_width, coerce_to=working_unit, root_size_value=root
    )
    min_viewport = get_typography_value_and_unit(
        defaults.minimum_viewport_width, coerce_to=working_unit, root_size_value=root
    )
    if max_viewport is None or min_viewport is None or minimum_rem is None:
        logger.debug("Unsupported viewport width %r, keeping literal size", maximum_viewport_width)
        return None

    viewport_span = max_viewport.value - min_viewport.value
    offset = round_to_precision(min_viewport.value / 100, defaults.precision)
    linear_factor = None
    if viewport_span:
        linear_factor = round_to_precision(
            100 * ((maximum_parsed.value - minimum_parsed.value) / viewport_span),
            defaults.precision,
        )
    # A flat ramp still needs a non-zero multiplier
    slope = round_to_precision((linear_factor or 1) * defaults.scale_factor, defaults.precision)
    if slope is None:
        return None

    fluid_target = (
        f"{minimum_rem} + ((1vw - {format_number(offset or 0)}{working_unit.value})"
        f" * {format_number(slope)})"
    )
    return f"clamp({minimum_font_size}, {fluid_target}, {maximum_font_size})"


# --- Font-Size Value Resolver ---


def _as_preset(preset: SizePreset | Mapping[str, Any] | None) -> SizePreset:
    if isinstance(preset, SizePreset):
        return preset
    if isinstance(preset, Mapping):
        return SizePreset.from_mapping(preset)
    return SizePreset(size=None)


def _preset_enables_fluid(preset: SizePreset) -> bool:
    return preset.fluid is True or (preset.fluid is not None and not preset.bounds.is_empty)


def get_typography_font_size_value(
    preset: SizePreset | Mapping[str, Any] | None,
    settings: Mapping[str, Any] | None = None,
    defaults: FluidDefaults = DEFAULT_FLUID,
) -> Any:
    """
    Resolve a preset's CSS font-size value.

    ``settings`` is the normalized ``{"fluid": ...}`` mapping. The guards
    below run in order and each returns the literal size.
    """
    preset = _as_preset(preset)
    size = preset.size

    if preset.fluid is False:
        return size
    if size is None or isinstance(size, bool) or not size or size == "0":
        return size
    if "clamp(" in str(size):
        return size
    if not is_fluid_typography_enabled(settings) and not _preset_enables_fluid(preset):
        return size

    fluid_settings = settings.get("fluid") if isinstance(settings, Mapping) else None
    if not isinstance(fluid_settings, Mapping):
        fluid_settings = {}

    bounds = preset.bounds
    value = get_computed_fluid_typography_value(
        font_size=size,
        minimum_font_size=bounds.min,
        maximum_font_size=bounds.max,
        minimum_font_size_limit=fluid_settings.get("minFontSize"),
        maximum_viewport_width=fluid_settings.get("maxViewportWidth"),
        defaults=defaults,
    )
    if value is None:
        logger.debug("No fluid value for size %r, keeping literal", size)
        return size
    return value
