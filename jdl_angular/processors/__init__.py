"""Text pre-processing shared by all extractors."""

from .comments import (
    LineMap,
    column_number,
    is_commented,
    line_number,
    strip_block_comments,
    strip_block_comments_mapped,
)
from .scanner import find_candidates, drop_commented, scan

__all__ = [
    "strip_block_comments",
    "strip_block_comments_mapped",
    "LineMap",
    "is_commented",
    "line_number",
    "column_number",
    "find_candidates",
    "drop_commented",
    "scan",
]
