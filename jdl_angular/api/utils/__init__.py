"""Utility functions for naming in generated code."""

from .naming import (
    split_words,
    to_kebab_case,
    to_camel_case,
    to_pascal_case,
    naive_plural,
    english_plural,
)

__all__ = [
    "split_words",
    "to_kebab_case",
    "to_camel_case",
    "to_pascal_case",
    "naive_plural",
    "english_plural",
]
