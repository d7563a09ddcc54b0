"""Split a line of documentation prose into indivisible segments.

WHY: The line breakers may only break between segments. Plain words are
easy (anything between two whitespace runs), but markdown constructs such
as `inline code`, [links](target) and **bold text** may contain spaces and
must still move to the next line as a whole.

HOW: A single left-to-right scan. A segment starts at a non-whitespace
character and is assembled from pieces. At each piece boundary the matchers
below are tried in priority order; the first one that recognises a complete
construct supplies the next piece, otherwise the rest of the non-whitespace
run is taken as a plain word. The segment ends at the first whitespace
character found at a piece boundary, so punctuation or letters glued to a
construct stay with it.

Bracket, parenthesis and backtick matching is done with explicit depth
counters instead of recursive regular expressions. The closing delimiter
for every opener is found in one pass up front, so the scan stays linear
in the length of the line.

RULES:
- Priority: inline link, shortcut link, bracket group, ``` code, ` code,
  emphasis run, plain word.
- Unbalanced or unterminated delimiters fall through to the plain word rule.
- Only ASCII whitespace separates segments; everything else is content.
- Interior whitespace runs are separators only and are not kept.
- Leading/trailing runs of spaces may be glued onto the first/last segment.
"""

from typing import Callable, Dict, List, Optional

from .models import Segment

WHITESPACE = " \t\n\r\f\v"
EMPHASIS_DELIMITERS = "*_~"
MAX_EMPHASIS_RUN = 3
# The outer link target parens plus one nested level, e.g. [a](b_(c))
MAX_PAREN_DEPTH = 2
CODE_FENCE = "```"


def _is_space(ch: str) -> bool:
    return ch in WHITESPACE


# =============================================================================
# Closing-delimiter tables
#
# Built once per tokenize() call so that every matcher below answers in
# constant time. Rescanning to the end of the text for each unclosed opener
# would make lines full of stray brackets or asterisks quadratic.
# =============================================================================

def _next_index(text: str, predicate: Callable[[int], bool]) -> List[int]:
    """For each index i, the first j >= i with predicate(j), else len(text)."""
    n = len(text)
    table = [n] * (n + 1)
    for i in range(n - 1, -1, -1):
        table[i] = i if predicate(i) else table[i + 1]
    return table


def _bracket_closers(text: str) -> Dict[int, int]:
    """Map every ``[`` that has a balancing ``]`` to the index past it."""
    closers = {}  # type: Dict[int, int]
    stack = []  # type: List[int]
    for i, ch in enumerate(text):
        if ch == "[":
            stack.append(i)
        elif ch == "]" and stack:
            closers[stack.pop()] = i + 1
    return closers


def _paren_closers(text: str) -> Dict[int, int]:
    """Map every ``(`` that has a balancing ``)`` to the index past it.

    A backslash escapes the following character. A group whose nesting is
    deeper than MAX_PAREN_DEPTH has no entry.
    """
    closers = {}  # type: Dict[int, int]
    stack = []  # type: List[List[int]]
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "(":
            stack.append([i, 1])
        elif ch == ")" and stack:
            start, height = stack.pop()
            if height <= MAX_PAREN_DEPTH:
                closers[start] = i + 1
            if stack:
                stack[-1][1] = max(stack[-1][1], height + 1)
        i += 1
    return closers


class _Scanner:
    """Construct matchers over one text, backed by precomputed tables.

    Each matcher receives a start index and returns the index just past the
    construct, or None if no complete construct starts there.
    """

    def __init__(self, text: str):
        self.text = text
        self.size = len(text)
        self.brackets = _bracket_closers(text)
        self.parens = _paren_closers(text)
        self.next_newline = _next_index(text, lambda i: text[i] == "\n")
        self.next_backtick = _next_index(text, lambda i: text[i] == "`")
        self.next_fence = _next_index(text, lambda i: text.startswith(CODE_FENCE, i))
        # run -> first index c >= i where the run starts right
        # after a non-whitespace character
        self.emphasis_closers = {}  # type: Dict[str, List[int]]
        for delimiter in EMPHASIS_DELIMITERS:
            if delimiter not in text:
                continue
            for size in range(1, MAX_EMPHASIS_RUN + 1):
                run = delimiter * size
                self.emphasis_closers[run] = _next_index(
                    text,
                    lambda i, run=run: i > 0
                    and not _is_space(text[i - 1])
                    and text.startswith(run, i),
                )
        self.matchers = [
            self.match_link,
            self.match_fenced_code,
            self.match_code_span,
            self.match_emphasis,
        ]  # type: List[Callable[[int], Optional[int]]]

    def match_link(self, pos: int) -> Optional[int]:
        """Match an inline link, a shortcut link, or a plain bracket group.

        ``[label](target)`` wins over ``[label][ref]``, which wins over a
        lone ``[label]``. Bracket groups nest to any depth; link targets
        allow one nested level of parentheses.
        """
        label_end = self.brackets.get(pos)
        if label_end is None:
            return None
        for closers in (self.parens, self.brackets):
            end = closers.get(label_end)
            if end is not None:
                return end
        return label_end

    def match_fenced_code(self, pos: int) -> Optional[int]:
        """Match ```code``` whose content holds no other triple backtick."""
        if not self.text.startswith(CODE_FENCE, pos):
            return None
        close = self.next_fence[pos + len(CODE_FENCE)]
        if close >= self.size:
            return None
        return close + len(CODE_FENCE)

    def match_code_span(self, pos: int) -> Optional[int]:
        """Match `code` with no backtick or newline inside."""
        if self.text[pos] != "`":
            return None
        close = self.next_backtick[pos + 1]
        if close >= self.size or self.next_newline[pos + 1] < close:
            return None
        return close + 1

    def match_emphasis(self, pos: int) -> Optional[int]:
        """Match *italic*, **bold**, ***both***, _x_, __x__, ~x~, ~~x~~ runs.

        The opening run is the maximal run of one delimiter character (at
        most MAX_EMPHASIS_RUN long). The character right after it and the
        character right before the closing run must be non-whitespace, the
        content is at least two characters long and stays on one line, and
        the shortest valid closing wins. One non-whitespace character glued
        to the closing run (usually punctuation) belongs to the match.
        """
        text = self.text
        delimiter = text[pos]
        if delimiter not in EMPHASIS_DELIMITERS:
            return None

        run_end = pos
        while run_end < self.size and text[run_end] == delimiter:
            run_end += 1
            if run_end - pos > MAX_EMPHASIS_RUN:
                return None
        if run_end >= self.size or _is_space(text[run_end]):
            return None

        start = run_end + 2
        if start > self.size:
            return None
        run = text[pos:run_end]
        close = self.emphasis_closers[run][start]
        if close >= self.size or self.next_newline[run_end] < close:
            return None
        end = close + len(run)
        if end < self.size and not _is_space(text[end]):
            end += 1
        return end

    def word_end(self, pos: int) -> int:
        end = pos
        while end < self.size and not _is_space(self.text[end]):
            end += 1
        return end

    def segment_end(self, pos: int) -> int:
        """Return the index just past the segment starting at ``pos``."""
        end = pos
        while end < self.size and not _is_space(self.text[end]):
            for matcher in self.matchers:
                piece_end = matcher(end)
                if piece_end is not None:
                    end = piece_end
                    break
            else:
                end = self.word_end(end)
        return end


# =============================================================================
# Public API
# =============================================================================

def tokenize(
    text: str,
    preserve_leading_whitespace: bool = True,
    preserve_trailing_whitespace: bool = False,
) -> List[Segment]:
    """Split ``text`` into the segments a line breaker may rearrange.

    WHY: Wrapping must never break inside a code span, a link, or an
    emphasis run, and punctuation must stay glued to the word before it.

    HOW: Skips whitespace, then delegates to _segment_end() for each
    segment. Optionally glues the input's leading/trailing run of spaces
    onto the first/last segment so an existing indent survives a reflow.

    RULES:
    - Returns an empty list iff ``text`` has no non-whitespace characters.
    - Never raises.
    - Segments never contain newlines unless a construct spans one
      (bracket groups and links can).

    Args:
        text: One line (or one paragraph) of prose.
        preserve_leading_whitespace: Prefix leading spaces onto the first
            segment. Default: True.
        preserve_trailing_whitespace: Suffix trailing spaces onto the last
            segment. Default: False.

    Returns:
        Ordered list of non-empty segments.
    """
    scanner = _Scanner(text)
    segments = []  # type: List[Segment]
    pos = 0
    while True:
        while pos < len(text) and _is_space(text[pos]):
            pos += 1
        if pos >= len(text):
            break
        end = scanner.segment_end(pos)
        segments.append(text[pos:end])
        pos = end

    if not segments:
        return segments

    if preserve_leading_whitespace:
        leading = text[:len(text) - len(text.lstrip(" "))]
        segments[0] = leading + segments[0]
    if preserve_trailing_whitespace:
        trailing = text[len(text.rstrip(" ")):]
        segments[-1] = segments[-1] + trailing

    return segments
