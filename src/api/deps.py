import logging
import math
import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends, HTTPException, status

from src.components.typography import FluidDefaults
from src.theme.loader import load_theme
from src.theme.models import Theme

logger = logging.getLogger(__name__)

DEFAULT_ROOT_FONT_SIZE = 16.0


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.theme_path = Path(os.environ.get("LAB_THEME_PATH", str(self.base_dir / "theme.yaml")))
        self.root_font_size = _root_font_size(os.environ.get("LAB_ROOT_FONT_SIZE"))


def _root_font_size(raw: str | None) -> float:
    if raw is None:
        return DEFAULT_ROOT_FONT_SIZE
    try:
        value = float(raw)
    except ValueError:
        value = 0
    if not math.isfinite(value) or value <= 0:
        logger.warning("Invalid LAB_ROOT_FONT_SIZE %r, using %s", raw, DEFAULT_ROOT_FONT_SIZE)
        return DEFAULT_ROOT_FONT_SIZE
    return value


@lru_cache
def get_settings() -> Settings:
    return Settings()


@lru_cache
def _load_theme_cached(path: Path) -> Theme:
    return load_theme(path)


def get_theme(settings: Settings = Depends(get_settings)) -> Theme:
    try:
        return _load_theme_cached(settings.theme_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error("Theme unavailable: %s", e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Theme unavailable: {e}",
        ) from e


def get_fluid_defaults(settings: Settings = Depends(get_settings)) -> FluidDefaults:
    return FluidDefaults(root_size_value=settings.root_font_size)
