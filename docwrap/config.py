"""Configuration defaults, .env loading, and parsing of option values.

WHY: The wrapping core takes already-resolved scalars, but something has to
turn "equal", "'greedy'", "off" or "120" from a .env file, an environment
variable or a command line flag into those scalars. Keeping that here
means the core never touches configuration.

HOW: python-dotenv loads the .env file on import. Defaults are module-level
constants read from the environment. parse_wrapping_style() and
parse_max_length() normalise raw strings and raise ValueError on anything
they do not understand.

RULES:
- DOCWRAP_MAX_LENGTH: positive int, or "off"/negative to disable wrapping
- DOCWRAP_WRAPPING_STYLE: "greedy" or "equal" (minimum raggedness)
- Quotes and surrounding whitespace around values are ignored
- The defaults are resolved once at import time
"""

from __future__ import annotations

import os
from typing import Optional, Union

from dotenv import load_dotenv

from .models import WrappingStyle

# Load .env from the working directory (where the command is run from)
load_dotenv()

MAX_LENGTH_OFF = "off"


def parse_wrapping_style(value: Union[str, WrappingStyle]) -> WrappingStyle:
    """Map a configuration spelling to a WrappingStyle.

    WHY: Configuration files often carry quoted or upper-case values, e.g.
    ``wrapping_style = "Equal"``.

    HOW: Strips whitespace and quotes, lowercases, then looks the value up
    among the enum values.

    RULES:
    - WrappingStyle members are returned unchanged
    - Accepted spellings are the enum values: "greedy", "equal"
    - Anything else raises ValueError
    """
    if isinstance(value, WrappingStyle):
        return value
    name = value.strip().strip("\"'").lower()
    for style in WrappingStyle:
        if style.value == name:
            return style
    raise ValueError(
        "Unknown wrapping style '{}'. Available: {}".format(
            value, ", ".join(style.value for style in WrappingStyle)
        )
    )


def parse_max_length(value: Union[str, int]) -> Optional[int]:
    """Parse a max line length, returning None when wrapping is disabled.

    "off" and negative numbers disable wrapping. Zero is rejected: a line
    must have room for at least one character.
    """
    if isinstance(value, str):
        raw = value.strip().strip("\"'").lower()
        if raw == MAX_LENGTH_OFF:
            return None
        try:
            length = int(raw)
        except ValueError:
            raise ValueError(
                "Invalid max line length '{}'. Use a positive integer or '{}'.".format(
                    value, MAX_LENGTH_OFF
                )
            ) from None
    else:
        length = value

    if length < 0:
        return None
    if length == 0:
        raise ValueError("Max line length must be at least 1, got 0")
    return length


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_MAX_LENGTH_RAW = os.getenv("DOCWRAP_MAX_LENGTH", "100")
DEFAULT_WRAPPING_STYLE_RAW = os.getenv("DOCWRAP_WRAPPING_STYLE", WrappingStyle.MINIMUM_RAGGED.value)
