"""
Candidate scanning for JDL declarations.

Extraction happens in two composable stages:

    find_candidates(pattern, text)   structural regex matches, in order
    drop_commented(candidates, text) removes matches on `//` lines

`scan` chains them. Every extractor goes through `scan`, so comment
exclusion behaves identically for enums, entities and relationships.
"""

import re
from typing import Iterable, Iterator

from ..api.gen_logging import get_logger, log_skip
from .comments import is_commented, line_number

logger = get_logger(__name__)


def find_candidates(pattern: re.Pattern, text: str) -> Iterator[re.Match]:
    """Yield every non-overlapping match of `pattern` in `text`."""
    yield from pattern.finditer(text)


def drop_commented(candidates: Iterable[re.Match], text: str, line_map=None) -> Iterator[re.Match]:
    """Yield the candidates whose first character is not on a commented line."""
    for match in candidates:
        if is_commented(text, match.start()):
            line = line_map.line(match.start()) if line_map else line_number(text, match.start())
            log_skip(logger, f"Commented declaration at line {line}")
            continue
        yield match


def scan(pattern: re.Pattern, text: str, line_map=None) -> Iterator[re.Match]:
    return drop_commented(find_candidates(pattern, text), text, line_map)
