from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FluidSettings(BaseModel):
    min_font_size: str | int | float | None = Field(default=None, alias="minFontSize")
    max_viewport_width: str | int | float | None = Field(default=None, alias="maxViewportWidth")

    model_config = ConfigDict(populate_by_name=True)


class FluidBoundsSettings(BaseModel):
    min: str | int | float | None = None
    max: str | int | float | None = None


class FontSizePreset(BaseModel):
    slug: str
    name: str | None = None
    size: str | int | float | None = None
    # [] and null both defer to the global setting
    fluid: bool | FluidBoundsSettings | list[Any] | None = None


class TypographySettings(BaseModel):
    fluid: bool | FluidSettings | None = None
    font_sizes: list[FontSizePreset] = Field(default_factory=list, alias="fontSizes")

    model_config = ConfigDict(populate_by_name=True)


class LayoutSettings(BaseModel):
    content_size: str | int | float | None = Field(default=None, alias="contentSize")
    wide_size: str | int | float | None = Field(default=None, alias="wideSize")

    model_config = ConfigDict(populate_by_name=True)


class ThemeSettings(BaseModel):
    typography: TypographySettings = Field(default_factory=TypographySettings)
    layout: LayoutSettings = Field(default_factory=LayoutSettings)


class Theme(BaseModel):
    """Document-wide style configuration, shaped like a theme.json file."""

    version: int = 1
    settings: ThemeSettings = Field(default_factory=ThemeSettings)

    def get_settings(self) -> Mapping[str, Any]:
        """Settings mapping with camelCase keys, without the preset list."""
        return self.settings.model_dump(
            by_alias=True,
            exclude_none=True,
            exclude={"typography": {"font_sizes"}},
        )

    def get_font_size_presets(self) -> list[Mapping[str, Any]]:
        return [
            preset.model_dump(by_alias=True, exclude_none=True)
            for preset in self.settings.typography.font_sizes
        ]
