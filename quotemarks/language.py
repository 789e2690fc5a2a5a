#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Language Tags - Validation and quotation mark lookup

Language tags are a simplified RFC 5646 subset: a primary subtag of two
or three letters, optionally followed by a hyphen and one region or
variant subtag ("de", "en-GB", "zh-Hant", "jbo").
"""

import re
from typing import TYPE_CHECKING, List, Optional

from .errors import MalformedTagError

if TYPE_CHECKING:
    from .glyphs import GlyphSet, GlyphTable


TAG_PATTERN = re.compile(r'^[A-Za-z]{2,3}(?:-[A-Za-z]+)?$')


def is_valid_tag(tag) -> bool:
    return isinstance(tag, str) and TAG_PATTERN.match(tag) is not None


def normalize_tag(tag: str, field: Optional[str] = None) -> str:
    """
    Validate `tag` and return its lookup key (lower case).

    Raises:
        MalformedTagError: If `tag` does not match the tag grammar.
    """
    if not is_valid_tag(tag):
        raise MalformedTagError(str(tag), field)
    return tag.lower()


def primary_subtag(tag: str) -> str:
    """'en-CA' -> 'en'"""
    return tag.split('-', 1)[0]


def resolve_tag(table: 'GlyphTable', tag: str) -> Optional['GlyphSet']:
    """
    Find the quotation marks for `tag`.

    Lookup order, first hit wins:
        1. The tag itself ("en-CA").
        2. Its primary subtag ("en").
        3. Any regional variant of the primary subtag ("en-GB"). Which
           variant wins when several exist is unspecified.

    Args:
        table: Glyph table to search.
        tag: Language tag, any capitalization.

    Returns:
        The matching GlyphSet, or None if the language is unknown.

    Raises:
        MalformedTagError: If `tag` is not a valid language tag.
    """
    key = normalize_tag(tag)
    if key in table:
        return table[key]

    primary = primary_subtag(key)
    if primary != key and primary in table:
        return table[primary]

    prefix = primary + '-'
    for candidate in table:
        if candidate.startswith(prefix):
            return table[candidate]

    return None


class LanguageContextStack:
    """
    Language tags of the ancestors enclosing the current node.

    The innermost tag is last. An optional base entry (the document
    language) sits at index 0 and is never popped.
    """

    def __init__(self, base: Optional[str] = None):
        self._tags: List[str] = [base] if base else []
        self._floor = len(self._tags)

    def push(self, tag: str):
        self._tags.append(tag)

    def pop(self) -> str:
        if len(self._tags) <= self._floor:
            raise IndexError('cannot pop the document language')
        return self._tags.pop()

    @property
    def top(self) -> Optional[str]:
        return self._tags[-1] if self._tags else None

    @property
    def base(self) -> Optional[str]:
        return self._tags[0] if self._floor else None

    def __len__(self) -> int:
        return len(self._tags)

    def __bool__(self) -> bool:
        return bool(self._tags)
