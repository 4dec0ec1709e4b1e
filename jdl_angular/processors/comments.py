"""
Comment handling for JDL text.

Block comments are removed up front; line comments are left in place and
detected per match with `is_commented`, so offsets of regex matches stay
valid against the cleaned text. `LineMap` translates those offsets back
to positions in the text as it was written.
"""

import re
from bisect import bisect_right
from typing import List, Tuple

BLOCK_COMMENT_RE = re.compile(r"/\*[\s\S]*?\*/")
LINE_COMMENT = "//"


def strip_block_comments(text: str) -> str:
    """Remove every `/* ... */` span, including ones spanning several lines."""
    return BLOCK_COMMENT_RE.sub("", text)


def is_commented(text: str, index: int) -> bool:
    """
    True when the line holding `index` starts with `//` before `index`.

    Only the characters strictly before `index` are considered, so a match
    that begins at column 0 is never commented. `  // entity Foo {...}` is
    commented; `x // entity Foo {...}` is not, since the line does not
    start with the marker.
    """
    line_start = text.rfind("\n", 0, index) + 1
    return text[line_start:index].strip().startswith(LINE_COMMENT)


def line_number(text: str, index: int) -> int:
    """1-based line number of `index` in `text`."""
    return text.count("\n", 0, index) + 1


def column_number(text: str, index: int) -> int:
    """1-based column of `index` in `text`."""
    return index - text.rfind("\n", 0, index)


class LineMap:
    """
    Source line numbers for offsets into comment-stripped text.

    Built by `strip_block_comments_mapped`; `removed` holds, for every
    removed comment, its offset in the cleaned text and the number of
    newlines it swallowed.
    """

    def __init__(self, cleaned: str, removed: List[Tuple[int, int]] = None):
        self.cleaned = cleaned
        self._offsets = []
        self._newlines_before = []
        total = 0
        for offset, newlines in removed or []:
            total += newlines
            self._offsets.append(offset)
            self._newlines_before.append(total)

    def line(self, index: int) -> int:
        """Line of `index` (an offset into the cleaned text) in the source."""
        # comments removed at or before `index` pushed it up by their newlines
        i = bisect_right(self._offsets, index)
        hidden = self._newlines_before[i - 1] if i else 0
        return line_number(self.cleaned, index) + hidden


def strip_block_comments_mapped(text: str) -> Tuple[str, LineMap]:
    """`strip_block_comments`, plus a LineMap back to lines of `text`."""
    pieces = []
    removed = []
    cleaned_len = 0
    last = 0
    for match in BLOCK_COMMENT_RE.finditer(text):
        kept = text[last:match.start()]
        pieces.append(kept)
        cleaned_len += len(kept)
        removed.append((cleaned_len, match.group(0).count("\n")))
        last = match.end()
    pieces.append(text[last:])

    cleaned = "".join(pieces)
    return cleaned, LineMap(cleaned, removed)
