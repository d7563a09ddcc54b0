"""Data models for the paragraph wrapper.

WHY: The tokenizer and the line breakers exchange a very small vocabulary:
segments, a wrapping style, and the layout parameters. Keeping them in one
module gives every caller (library, CLI, tests) the same names.

HOW: A Segment is a plain string. WrappingStyle is an enum whose values are
the configuration spellings. WrapParams bundles the already-resolved layout
scalars so callers can pass one object around instead of four arguments.

RULES:
- Segment text is sacred: the breakers never modify, split, or reorder it.
- WrappingStyle values are the spellings accepted in configuration:
  "greedy" and "equal" (minimum raggedness).
- WrapParams is frozen; build a new one with dataclasses.replace().
- Python 3.9 compatible (no slots=True, no match/case, no X | Y unions).
"""

import enum
from dataclasses import dataclass

Segment = str
"""An indivisible, non-empty slice of the input text."""


class WrappingStyle(enum.Enum):
    """The available line breaking algorithms.

    Attributes:
        GREEDY: Fill each line with as many segments as fit. Predictable,
            but the last lines of a paragraph can end up very short.
        MINIMUM_RAGGED: Choose break points that minimise the sum of
            squared slack, so line lengths come out roughly equal.
    """

    GREEDY = "greedy"
    MINIMUM_RAGGED = "equal"


@dataclass(frozen=True)
class WrapParams:
    """Layout parameters for one wrap call.

    Attributes:
        max_length: Soft line length target. A single segment longer than
            this is placed alone on its line rather than split.
        leading_indent: Prefix for the first produced line.
        continuation_indent: Prefix for every following line.
        style: Which line breaker to use.
    """

    max_length: int
    leading_indent: str = ""
    continuation_indent: str = ""
    style: WrappingStyle = WrappingStyle.MINIMUM_RAGGED
