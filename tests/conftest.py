"""Shared test fixtures for the docwrap test suite.

WHY: The property tests and the breaker tests run the same realistic
documentation paragraphs through both strategies. Centralizing the sample
text here keeps every module testing against identical input.

HOW: Plain pytest fixtures. ``markdown_paragraph`` mixes every protected
construct the tokenizer knows about; ``lorem_paragraph`` is plain prose
long enough to need several lines at common widths.

RULES:
- Sample paragraphs are single-line (no embedded newlines).
- Fixtures return fresh objects; tests may mutate them.
"""

import pytest

from docwrap import BalancedBreaker, GreedyBreaker

LOREM = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Curabitur ullamcorper sapien "
    "vitae mi auctor, et sollicitudin nibh condimentum. "
    "Etiam elementum ligula a lectus posuere, id blandit nulla faucibus."
)

MARKDOWN = (
    "Returns the `Foo` instance for [key](https://example.com/docs/(key)), or throws "
    "**an exception**. See [Bar][bar-ref] and [nested [brackets]] for details; "
    "a ```raw `code` span``` and ~~old text~~, then _emphasis on words_ follow. "
    "Some averyveryverylongidentifierthatcannotpossiblyfitonasingleline here."
)


@pytest.fixture
def lorem_paragraph():
    """Plain prose paragraph long enough to need several lines at width 50."""
    return LOREM


@pytest.fixture
def markdown_paragraph():
    """Paragraph with code spans, links, emphasis and one oversized word."""
    return MARKDOWN


@pytest.fixture(params=[GreedyBreaker, BalancedBreaker], ids=["greedy", "balanced"])
def breaker(request):
    """Each line breaker in turn."""
    return request.param()
