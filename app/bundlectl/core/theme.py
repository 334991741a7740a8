"""Console colors for bundlectl.

Defaults can be overridden per user in the ``[colors]`` table of
``$XDG_CONFIG_HOME/bundlectl/theme.toml``.
"""

import logging
import tomllib
from functools import cache
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from rich.theme import Theme

from bundlectl.core.paths import get_user_config_dir

logger = logging.getLogger(__name__)

HexColor = Annotated[str, Field(pattern=r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")]


class Palette(BaseModel):
    """Hex colors behind the console styles."""

    model_config = ConfigDict(extra="forbid")

    text: HexColor = "#ffffff"
    muted: HexColor = "#b2bec3"
    header: HexColor = "#69B9A1"
    border: HexColor = "#29526d"
    success: HexColor = "#03b971"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"
    info: HexColor = "#0ec1c8"
    copied: HexColor = "#c1ff62"
    skipped: HexColor = "#226666"
    pruned: HexColor = "#d44ebc"

    def styles(self) -> dict[str, str]:
        """Map every console style name to its Rich style string."""
        styles = self.model_dump()
        styles["error"] = f"bold {self.error}"
        styles["bold_header"] = f"bold {self.header}"
        styles["package.name"] = f"bold {self.text}"
        return styles


def load_palette(path: Path | None = None) -> Palette:
    """Read the user palette, falling back to the defaults.

    A missing file is silent; an unreadable or invalid one is logged
    and ignored so that a bad theme never aborts a build.
    """
    path = path or get_user_config_dir() / "theme.toml"
    try:
        with open(path, "rb") as f:
            colors = tomllib.load(f).get("colors", {})
        return Palette.model_validate(colors)
    except FileNotFoundError:
        return Palette()
    except (OSError, tomllib.TOMLDecodeError, ValidationError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return Palette()


@cache
def get_theme() -> Theme:
    """Return the Rich theme built from the user palette."""
    return Theme(load_palette().styles())
