import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.theme.models import Theme

logger = logging.getLogger(__name__)


def load_theme(path: Path) -> Theme:
    """
    Load and validate a theme file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Theme file not found at: {path}")

    content = path.read_text()

    try:
        data = yaml.safe_load(_strip_markdown_fences(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in theme file: {e}") from e

    if data is None:
        raise ValueError("Theme file is empty")

    try:
        theme = Theme.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Theme validation failed:\n{e}") from e

    logger.info(
        "Theme loaded from %s (%d font size presets)",
        path,
        len(theme.settings.typography.font_sizes),
    )
    return theme


def _strip_markdown_fences(content: str) -> str:
    """Return the first ```yaml block if present, otherwise the whole content."""
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        stripped = line.strip()
        if stripped.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and stripped.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    if found_block:
        return "\n".join(yaml_lines)
    return content
