"""Paragraph wrapper for documentation comments.

WHY: Linter rules that fix comment wrapping need to reflow prose to a
maximum line length without ever breaking inside inline code, links, or
emphasis runs. This package is that engine, free of any host linter API:
it takes plain text plus layout scalars and returns plain text.

HOW: Two stages. tokenize() turns a line into indivisible segments, then
wrap() lays the segments out with the chosen line breaker (greedy or
minimum raggedness). reflow() applies both stages to every paragraph of a
comment body.

RULES:
- tokenize(), wrap() and reflow() are the public API.
- Wrapping styles: "greedy" and "equal" (minimum raggedness, the default).
- No global state: every call works on its own buffers.
- Python 3.9 compatible (no slots=True, no match/case, no X | Y unions).
"""

from .breakers import BREAKERS, BalancedBreaker, GreedyBreaker, wrap
from .models import Segment, WrappingStyle, WrapParams
from .paragraph import reflow
from .tokenizer import tokenize

__version__ = "0.1.0"

__all__ = [
    "tokenize",
    "wrap",
    "wrap_text",
    "reflow",
    "Segment",
    "WrappingStyle",
    "WrapParams",
    "GreedyBreaker",
    "BalancedBreaker",
    "BREAKERS",
]


def wrap_text(text: str, params: WrapParams) -> str:
    """Tokenize ``text`` as one paragraph and wrap it with ``params``.

    Raises:
        ValueError: If params.max_length < 1.
    """
    return wrap(
        tokenize(text),
        params.max_length,
        params.leading_indent,
        params.continuation_indent,
        params.style,
    )
