"""Line breakers: turn an ordered list of segments into wrapped text.

WHY: Callers choose between two layouts for the same words. Greedy packing
is predictable and minimises the line count; minimum raggedness spreads the
slack evenly so a paragraph does not end with a stub line. Both must honour
the same contract so the caller can swap them by configuration alone.

HOW: BaseBreaker is an ABC with a single ``wrap()`` method. GreedyBreaker is
a first-fit single pass. BalancedBreaker is a backward dynamic program over
segment positions, the same shortest-path shape as classic paragraph
layout. BREAKERS maps each WrappingStyle to its breaker class.

RULES:
- Segments are joined with exactly one space or one newline.
- A segment is never split. A segment too long for any line gets a line
  of its own and overflows max_length.
- The first line starts with leading_indent, every other line with
  continuation_indent. Indent length counts toward max_length.
- An empty segment list produces "" (no lines, not even an indent).
- No state is kept between calls; instances are safe to share.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Sequence, Type, Union

from .models import Segment, WrappingStyle

logger = logging.getLogger(__name__)


class BaseBreaker(ABC):
    """Abstract base for line breaking strategies.

    To add a strategy:
    1. Subclass BaseBreaker and implement wrap()
    2. Add a WrappingStyle member for it
    3. Register it in BREAKERS
    """

    @abstractmethod
    def wrap(
        self,
        segments: Sequence[Segment],
        max_length: int,
        leading_indent: str,
        continuation_indent: str,
    ) -> str:
        """Lay out ``segments`` into lines of at most ``max_length`` characters.

        Args:
            segments: Ordered, indivisible segments from tokenize().
            max_length: Soft line length target, at least 1.
            leading_indent: Prefix for the first line.
            continuation_indent: Prefix for every following line.

        Returns:
            The wrapped text, lines separated by "\\n", no trailing newline.
        """


class GreedyBreaker(BaseBreaker):
    """First-fit packing: put each segment on the current line if it fits."""

    def wrap(
        self,
        segments: Sequence[Segment],
        max_length: int,
        leading_indent: str,
        continuation_indent: str,
    ) -> str:
        if not segments:
            return ""

        lines = []  # type: List[str]
        current = [leading_indent, segments[0]]
        current_length = len(leading_indent) + len(segments[0])

        for segment in segments[1:]:
            if current_length + 1 + len(segment) <= max_length:
                current.append(" ")
                current.append(segment)
                current_length += 1 + len(segment)
            else:
                lines.append("".join(current))
                current = [continuation_indent, segment]
                current_length = len(continuation_indent) + len(segment)

        lines.append("".join(current))

        logger.debug("Greedy: %d segments -> %d lines", len(segments), len(lines))
        return "\n".join(lines)


class BalancedBreaker(BaseBreaker):
    """Minimum raggedness: minimise the sum of squared slack over all lines.

    cost[i] is the cheapest layout of segments[i:], where a line holding
    segments[i:j] costs (max_length - line_length)**2. The candidate loop
    stops at the first segment that would overflow, except that a lone
    segment is always allowed so oversized segments stay feasible.
    """

    def wrap(
        self,
        segments: Sequence[Segment],
        max_length: int,
        leading_indent: str,
        continuation_indent: str,
    ) -> str:
        n = len(segments)
        if n == 0:
            return ""

        split = self._split_points(segments, max_length, leading_indent, continuation_indent)

        lines = []  # type: List[str]
        i = 0
        while i < n:
            j = split[i]
            indent = leading_indent if i == 0 else continuation_indent
            lines.append(indent + " ".join(segments[i:j]))
            i = j

        logger.debug("Balanced: %d segments -> %d lines", n, len(lines))
        return "\n".join(lines)

    @staticmethod
    def _split_points(
        segments: Sequence[Segment],
        max_length: int,
        leading_indent: str,
        continuation_indent: str,
    ) -> List[int]:
        """Run the DP and return split[i], the end of the line starting at i."""
        n = len(segments)
        cost = [0] * (n + 1)
        split = [n] * (n + 1)

        for i in range(n - 1, -1, -1):
            indent = leading_indent if i == 0 else continuation_indent
            line_length = len(indent) - 1
            best = None
            for j in range(i + 1, n + 1):
                line_length += 1 + len(segments[j - 1])
                if line_length > max_length and j > i + 1:
                    break
                candidate = cost[j] + (max_length - line_length) ** 2
                if best is None or candidate < best:
                    best = candidate
                    split[i] = j
            cost[i] = best

        return split


BREAKERS: Dict[WrappingStyle, Type[BaseBreaker]] = {
    WrappingStyle.GREEDY: GreedyBreaker,
    WrappingStyle.MINIMUM_RAGGED: BalancedBreaker,
}


def wrap(
    segments: Sequence[Segment],
    max_length: int,
    leading_indent: str = "",
    continuation_indent: str = "",
    style: Union[WrappingStyle, str] = WrappingStyle.MINIMUM_RAGGED,
) -> str:
    """Wrap ``segments`` with the breaker registered for ``style``.

    WHY: Callers select the strategy by configuration value, not by class.

    HOW: Resolves ``style`` (enum member or its string value) through
    BREAKERS and delegates to a fresh breaker instance.

    RULES:
    - max_length < 1 is a caller bug and raises ValueError.
    - Unknown styles raise ValueError.
    - Empty ``segments`` returns "".

    Args:
        segments: Ordered segments from tokenize().
        max_length: Soft line length target, at least 1.
        leading_indent: Prefix for the first line.
        continuation_indent: Prefix for every following line.
        style: WrappingStyle or one of its values ("greedy", "equal").

    Returns:
        The wrapped text.

    Raises:
        ValueError: If max_length < 1 or style is unknown.
    """
    if max_length < 1:
        raise ValueError("max_length must be at least 1, got {}".format(max_length))
    try:
        breaker_cls = BREAKERS[WrappingStyle(style)]
    except ValueError:
        raise ValueError(
            "Unknown wrapping style '{}'. Available: {}".format(
                style, ", ".join(s.value for s in WrappingStyle)
            )
        ) from None
    return breaker_cls().wrap(segments, max_length, leading_indent, continuation_indent)
