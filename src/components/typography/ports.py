"""
Typography component - Port interfaces.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class ThemeSettingsPort(Protocol):
    """Source of document-wide style settings and font-size presets."""

    def get_settings(self) -> Mapping[str, Any]:
        """Get the settings mapping (``typography``, ``layout`` ...)."""
        ...

    def get_font_size_presets(self) -> list[Mapping[str, Any]]:
        """Get font-size presets in declaration order."""
        ...
