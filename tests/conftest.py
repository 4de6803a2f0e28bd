from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent

THEME_YAML = """\
version: 1
settings:
  layout:
    wideSize: 1200px
  typography:
    fluid:
      minFontSize: 15px
    fontSizes:
      - slug: small
        name: Small
        size: 14px
      - slug: large
        name: Large
        size: 1.75rem
      - slug: xLarge
        name: Extra Large
        size: 2.5rem
        fluid:
          min: 2rem
          max: 2.75rem
      - slug: huge
        name: Huge
        size: 4rem
        fluid: false
"""


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def theme_path(tmp_path: Path) -> Path:
    """Write a small theme file to a temporary directory."""
    path = tmp_path / "theme.yaml"
    path.write_text(THEME_YAML)
    return path
