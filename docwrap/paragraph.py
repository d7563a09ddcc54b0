"""Reflow a whole comment body, one block at a time.

WHY: Callers usually hold a full comment body rather than a single
pre-split paragraph. It can have several paragraphs, list items, block
quotes and fenced code samples. Code samples must come out byte-for-byte
unchanged, and blocks must not bleed into each other.

HOW: Walks the lines once and groups them into blocks. A blank line ends a
block. A list marker or a quote line starts a new one even without a blank
line. Fenced code blocks are collected up to their closing fence and copied
verbatim. Paragraphs are joined, tokenized and handed to breakers.wrap().
List items keep their marker and hang their continuation lines under the
item text. Quote lines are stripped of their ``>`` prefix, wrapped to the
remaining width and re-prefixed.

RULES:
- Each block is wrapped on its own; no cross-paragraph balancing.
- The leading spaces of a paragraph's first line are kept.
- A backtick fence opener has no backtick after its opening run, so
  ```inline``` code at the start of a line is prose.
- A fence closes only on a line holding nothing but a run of the same
  character at least as long as the opener.
- An unterminated fence swallows the rest of the text verbatim.
- Only bullets and "1." / "1)" start a list inside a running paragraph.
- Blocks that were separated by blank lines are re-joined with one blank
  line; adjacent blocks stay on adjacent lines.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Union

from .breakers import wrap
from .models import WrappingStyle
from .tokenizer import tokenize

PARAGRAPH = "paragraph"
LIST_ITEM = "list_item"
QUOTE = "quote"
FENCE = "fence"

FENCE_RE = re.compile(r"^[ \t]*(`{3,}|~{3,})(.*)$")
LIST_MARKER_RE = re.compile(r"^[ \t]*(?:[-*+]|\d{1,9}[.)])[ \t]+(?=\S)")
QUOTE_RE = re.compile(r"^[ \t]*>(?:[ \t]?>)*[ \t]?")


@dataclass
class Block:
    """A run of source lines that is reflowed (or copied) as one unit."""
    kind: str
    lines: List[str] = field(default_factory=list)
    separated: bool = False  # a blank line came before it


def _fence_opener(line: str) -> Optional[str]:
    """Return the opening fence run of ``line``, or None."""
    m = FENCE_RE.match(line)
    if m is None:
        return None
    fence, info = m.groups()
    if fence[0] == "`" and "`" in info:
        return None
    return fence


def _closes_fence(line: str, fence: str) -> bool:
    stripped = line.strip()
    return len(stripped) >= len(fence) and stripped == fence[0] * len(stripped)


def _starts_item(marker: str, current: Optional[Block]) -> bool:
    if current is None or current.kind == LIST_ITEM:
        return True
    marker = marker.strip()
    return marker[0] in "-*+" or marker[:-1] == "1"


def split_blocks(text: str) -> List[Block]:
    """Group the lines of ``text`` into paragraphs, list items, quotes and fences."""
    blocks = []  # type: List[Block]
    current = None  # type: Optional[Block]
    fence = None  # type: Optional[str]
    separated = False

    def start(kind: str) -> Block:
        block = Block(kind, separated=separated)
        blocks.append(block)
        return block

    for line in text.splitlines():
        if fence is not None:
            current.lines.append(line)
            if _closes_fence(line, fence):
                fence = None
                current = None
            continue

        if not line.strip():
            current = None
            separated = bool(blocks)
            continue

        opener = _fence_opener(line)
        marker = LIST_MARKER_RE.match(line)
        if opener is not None:
            current = start(FENCE)
            fence = opener
        elif QUOTE_RE.match(line):
            if current is None or current.kind != QUOTE:
                current = start(QUOTE)
        elif marker is not None and _starts_item(marker.group(), current):
            current = start(LIST_ITEM)
        elif current is None:
            current = start(PARAGRAPH)
        current.lines.append(line)
        separated = False

    return blocks


def _wrap_list_item(block, max_length, leading_indent, continuation_indent, style):
    m = LIST_MARKER_RE.match(block.lines[0])
    marker = m.group().rstrip() + " "
    body = [block.lines[0][m.end():]] + [line.strip() for line in block.lines[1:]]
    segments = tokenize(" ".join(body), preserve_leading_whitespace=False)
    return wrap(
        segments,
        max_length,
        leading_indent + marker,
        continuation_indent + " " * len(marker),
        style,
    )


def _wrap_quote(block, max_length, leading_indent, continuation_indent, style):
    prefix = "> " * QUOTE_RE.match(block.lines[0]).group().count(">")
    paragraphs = [[]]  # type: List[List[str]]
    for line in block.lines:
        m = QUOTE_RE.match(line)
        content = (line[m.end():] if m else line).strip()
        if content:
            paragraphs[-1].append(content)
        elif paragraphs[-1]:
            paragraphs.append([])
    if not paragraphs[-1]:
        paragraphs.pop()

    width = max(1, max_length - len(prefix))
    rendered = []  # type: List[str]
    for paragraph in paragraphs:
        wrapped = wrap(tokenize(" ".join(paragraph)), width, leading_indent, continuation_indent, style)
        rendered.append("\n".join(prefix + line for line in wrapped.split("\n")))
    if not rendered:
        return prefix.rstrip()
    return ("\n" + prefix.rstrip() + "\n").join(rendered)


def reflow(
    text: str,
    max_length: int,
    leading_indent: str = "",
    continuation_indent: str = "",
    style: Union[WrappingStyle, str] = WrappingStyle.MINIMUM_RAGGED,
) -> str:
    """Wrap every block of ``text`` and keep code fences as they are.

    Args:
        text: Comment body, possibly several paragraphs.
        max_length: Soft line length target, at least 1.
        leading_indent: Prefix for the first line of each paragraph.
        continuation_indent: Prefix for the other lines of each paragraph.
        style: WrappingStyle or its value ("greedy", "equal").

    Returns:
        The reflowed text. Blocks separated by blank lines in the input are
        separated by one blank line.

    Raises:
        ValueError: If max_length < 1 or style is unknown.
    """
    if max_length < 1:
        raise ValueError("max_length must be at least 1, got {}".format(max_length))

    out = []  # type: List[str]
    for block in split_blocks(text):
        if block.kind == FENCE:
            rendered = "\n".join(block.lines)
        elif block.kind == LIST_ITEM:
            rendered = _wrap_list_item(block, max_length, leading_indent, continuation_indent, style)
        elif block.kind == QUOTE:
            rendered = _wrap_quote(block, max_length, leading_indent, continuation_indent, style)
        else:
            segments = tokenize(" ".join(line.rstrip() for line in block.lines))
            rendered = wrap(segments, max_length, leading_indent, continuation_indent, style)
        if out:
            out.append("\n\n" if block.separated else "\n")
        out.append(rendered)
    return "".join(out)
