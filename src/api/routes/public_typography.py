"""Public typography endpoints exposing resolved font-size presets."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from src.api.deps import get_fluid_defaults, get_theme
from src.components.typography import FluidDefaults, build_stylesheet, run
from src.theme.models import Theme

router = APIRouter()


class FontSizeResponse(BaseModel):
    slug: str
    name: str | None = None
    size: str | int | float | None = None
    value: str | int | float | None = None
    fluid: bool


@router.get("/font-sizes", response_model=list[FontSizeResponse])
def list_font_sizes(
    theme: Theme = Depends(get_theme),
    defaults: FluidDefaults = Depends(get_fluid_defaults),
) -> list[FontSizeResponse]:
    """
    List theme font-size presets with their computed CSS values.

    `value` is either the literal size or a clamp() expression.
    """
    result = run(theme, defaults)
    return [
        FontSizeResponse(
            slug=item.preset.slug or "",
            name=item.preset.name,
            size=item.preset.size,
            value=item.value,
            fluid=item.is_fluid,
        )
        for item in result.font_sizes
    ]


@router.get("/font-sizes.css", response_class=PlainTextResponse)
def font_sizes_stylesheet(
    theme: Theme = Depends(get_theme),
    defaults: FluidDefaults = Depends(get_fluid_defaults),
) -> PlainTextResponse:
    """Serve the presets as CSS custom properties on :root."""
    css = build_stylesheet(run(theme, defaults))
    return PlainTextResponse(
        content=css,
        media_type="text/css",
        headers={"Cache-Control": "public, max-age=300"},
    )
