"""Colors for result kinds, looked up from an injected theme."""

import logging
import re
from enum import StrEnum
from pathlib import Path
from typing import Any, Protocol

from pydantic import Field, ValidationError, model_validator

from autotest_results.kinds import ResultKind
from autotest_results.models.base import Model

log = logging.getLogger(__name__)

HEX_COLOR = re.compile(r"^#(?P<alpha>[0-9a-fA-F]{2})?(?P<rgb>[0-9a-fA-F]{6})$")


class ThemeLoadError(Exception):
    """Raised when a theme file cannot be read or validated."""


def parse_hex_channels(value: str) -> dict[str, int]:
    """Split ``#rrggbb`` or ``#aarrggbb`` into channel values."""
    if (match := HEX_COLOR.match(value)) is None:
        raise ValueError(f"Expected '#rrggbb' or '#aarrggbb', got {value!r}")
    rgb = int(match["rgb"], 16)
    return {
        "red": rgb >> 16,
        "green": (rgb >> 8) & 0xFF,
        "blue": rgb & 0xFF,
        "alpha": int(match["alpha"], 16) if match["alpha"] else 255,
    }


class Color(Model):
    """RGBA color with 8-bit channels."""

    red: int = Field(..., ge=0, le=255)
    green: int = Field(..., ge=0, le=255)
    blue: int = Field(..., ge=0, le=255)
    alpha: int = Field(default=255, ge=0, le=255)

    @model_validator(mode="before")
    @classmethod
    def accept_hex_string(cls, data: Any) -> Any:
        """Allow colors to be given as hex strings in theme files."""
        if isinstance(data, str):
            return parse_hex_channels(data)
        return data

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse ``#rrggbb`` or ``#aarrggbb``."""
        return cls(**parse_hex_channels(value))

    @property
    def hex(self) -> str:
        """Color as ``#rrggbb``, without alpha."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    @property
    def is_transparent(self) -> bool:
        """Whether the color is fully transparent."""
        return self.alpha == 0


TRANSPARENT = Color(red=0, green=0, blue=0, alpha=0)


class ThemeColor(StrEnum):
    """Semantic color keys of the results output pane."""

    TEST_PASS_TEXT = "test_pass_text"
    TEST_FAIL_TEXT = "test_fail_text"
    TEST_XFAIL_TEXT = "test_xfail_text"
    TEST_XPASS_TEXT = "test_xpass_text"
    TEST_SKIP_TEXT = "test_skip_text"
    TEST_DEBUG_TEXT = "test_debug_text"
    TEST_WARN_TEXT = "test_warn_text"
    TEST_FATAL_TEXT = "test_fatal_text"
    STD_OUT_TEXT = "std_out_text"


class ThemeProvider(Protocol):
    """Read-only lookup of themed colors."""

    def color(self, key: ThemeColor) -> Color:
        """Return the color configured for key."""
        ...


class OutputTheme(Model):
    """Output pane palette, one color per ``ThemeColor`` key.

    Defaults match the stock light palette; a theme file may override any
    subset of the keys.
    """

    test_pass_text: Color = Color.from_hex("#009900")
    test_fail_text: Color = Color.from_hex("#a00000")
    test_xfail_text: Color = Color.from_hex("#28f028")
    test_xpass_text: Color = Color.from_hex("#f02828")
    test_skip_text: Color = Color.from_hex("#787878")
    test_debug_text: Color = Color.from_hex("#329696")
    test_warn_text: Color = Color.from_hex("#d0bb00")
    test_fatal_text: Color = Color.from_hex("#640000")
    std_out_text: Color = Color.from_hex("#000000")

    def color(self, key: ThemeColor) -> Color:
        """Return the color configured for key."""
        color: Color = getattr(self, key.value)
        return color


def load_theme(path: Path) -> OutputTheme:
    """Load an output theme from a JSON file of ``key: "#rrggbb"`` pairs.

    Raises:
        ThemeLoadError: If the file cannot be read or holds invalid values

    """
    log.debug("Loading theme from %s", path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ThemeLoadError(f"Cannot read theme file {path}: {e}") from e

    try:
        return OutputTheme.model_validate_json(content)
    except ValidationError as e:
        raise ThemeLoadError(f"Invalid theme file {path}: {e}") from e


def color_for(kind: ResultKind, theme: ThemeProvider) -> Color:
    """Return the display color of a result kind.

    Internal kinds are transparent without consulting the theme; kinds with
    no dedicated color use the standard output color.
    """
    if kind.is_internal:
        return TRANSPARENT

    match kind:
        case ResultKind.PASS:
            key = ThemeColor.TEST_PASS_TEXT
        case ResultKind.FAIL:
            key = ThemeColor.TEST_FAIL_TEXT
        case ResultKind.EXPECTED_FAIL:
            key = ThemeColor.TEST_XFAIL_TEXT
        case ResultKind.UNEXPECTED_PASS:
            key = ThemeColor.TEST_XPASS_TEXT
        case ResultKind.SKIP:
            key = ThemeColor.TEST_SKIP_TEXT
        case ResultKind.MESSAGE_DEBUG:
            key = ThemeColor.TEST_DEBUG_TEXT
        case ResultKind.MESSAGE_WARN:
            key = ThemeColor.TEST_WARN_TEXT
        case ResultKind.MESSAGE_FATAL:
            key = ThemeColor.TEST_FATAL_TEXT
        case _:
            key = ThemeColor.STD_OUT_TEXT
    return theme.color(key)
