"""Identifier case conversion for generated file names and symbols."""

import re

from pluralizer import Pluralizer

# "HTTPServer2Item" -> ["HTTP", "Server", "2", "Item"]
_WORD_RE = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|\d+")

_pluralizer = Pluralizer()


def split_words(name: str) -> list[str]:
    return _WORD_RE.findall(name or "")


def to_kebab_case(name: str) -> str:
    return "-".join(w.lower() for w in split_words(name))


def to_camel_case(name: str) -> str:
    words = split_words(name)
    if not words:
        return ""
    head, *tail = words
    return head.lower() + "".join(w.capitalize() for w in tail)


def to_pascal_case(name: str) -> str:
    camel = to_camel_case(name)
    return camel[:1].upper() + camel[1:]


def naive_plural(name: str) -> str:
    """
    Lower-case and append "s": `Category` -> `categorys`.

    Generated routes and property names depend on exactly this output.
    """
    return f"{name.lower()}s"


def english_plural(name: str) -> str:
    """Lower-case and pluralize with English rules: `Category` -> `categories`."""
    return _pluralizer.pluralize(name.lower())
