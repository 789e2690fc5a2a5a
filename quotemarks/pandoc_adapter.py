#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pandoc Adapter - Converts pandoc's JSON AST to and from the document tree

Pandoc elements are JSON objects {"t": type, "c": content}. The adapter
maps them as follows:

    {"t": "Str", "c": text}                      → Text(text)
    {"t": "Quoted", "c": [{"t": kind}, inlines]} → Quoted(kind, children)
    {"t": "Span" | "Div", "c": [attr, ...]}      → Element(language=attr's lang)
    anything else                                → Element(tag, content)

Metadata is converted with the blocks, so quotations inside metadata
(titles, abstracts) are rewritten as well.
"""

from typing import Any, Dict, List, Optional
import logging

from config.constants import LANG_ATTRIBUTE, META_LANG, META_QUOT_LANG, META_QUOT_MARKS
from .configuration import DocumentConfig, select_config
from .document_ast import Element, Node, QuoteKind, Quoted, Text
from .errors import ConfigError

logger = logging.getLogger(__name__)

QUOTE_TYPES = {
    'DoubleQuote': QuoteKind.PRIMARY,
    'SingleQuote': QuoteKind.SECONDARY,
}
QUOTE_TYPE_NAMES = {kind: name for name, kind in QUOTE_TYPES.items()}

# Elements whose content starts with an Attr [id, [classes], [[key, value]]]
ATTR_ELEMENTS = ('Span', 'Div')

ROOT_TAG = 'Pandoc'


# ============================================================================
# JSON → Tree
# ============================================================================

def _is_element(value: Any) -> bool:
    return isinstance(value, dict) and isinstance(value.get('t'), str)


def language_of(attr: Any) -> Optional[str]:
    """The `lang` key-value attribute of a pandoc Attr, if any."""
    if not isinstance(attr, list) or len(attr) != 3 or not isinstance(attr[2], list):
        return None
    for pair in attr[2]:
        if isinstance(pair, list) and len(pair) == 2 and pair[0] == LANG_ATTRIBUTE:
            return pair[1]
    return None


def to_node(value: Any) -> Any:
    """Convert a JSON value; pandoc elements become nodes, the rest is kept."""
    if _is_element(value):
        return _element_to_node(value)
    if isinstance(value, list):
        return [to_node(item) for item in value]
    if isinstance(value, dict):
        return {key: to_node(item) for key, item in value.items()}
    return value


def _element_to_node(element: Dict[str, Any]) -> Node:
    tag = element['t']
    content = element.get('c')

    if tag == 'Str':
        return Text(content)

    if tag == 'Quoted':
        quote_type, inlines = content
        type_name = quote_type.get('t') if isinstance(quote_type, dict) else quote_type
        kind = QUOTE_TYPES.get(type_name, type_name)
        return Quoted(kind, [to_node(item) for item in inlines])

    language = None
    if tag in ATTR_ELEMENTS and isinstance(content, list) and content:
        language = language_of(content[0])

    if 'c' not in element:
        return Element(tag, language=language)
    return Element(tag, to_node(content), language=language)


def from_pandoc_json(document: Dict[str, Any]) -> Node:
    """
    Convert a pandoc JSON document into a tree.

    The root Element's content is {"meta": ..., "blocks": ...}; the
    pandoc-api-version is restored by `to_pandoc_json`.
    """
    if not isinstance(document, dict) or 'blocks' not in document:
        raise ValueError('not a pandoc JSON document (pandoc >= 1.18 required)')
    return Element(ROOT_TAG, {
        'meta': to_node(document.get('meta', {})),
        'blocks': to_node(document['blocks']),
    })


# ============================================================================
# Tree → JSON
# ============================================================================

def to_json(value: Any) -> Any:
    """Inverse of `to_node`."""
    if isinstance(value, Node):
        return _node_to_json(value)
    if isinstance(value, list):
        return [to_json(item) for item in value]
    if isinstance(value, dict):
        return {key: to_json(item) for key, item in value.items()}
    return value


def _node_to_json(node: Node) -> Dict[str, Any]:
    if isinstance(node, Text):
        return {'t': 'Str', 'c': node.text}

    if isinstance(node, Quoted):
        type_name = QUOTE_TYPE_NAMES.get(node.kind, node.kind)
        return {'t': 'Quoted', 'c': [{'t': type_name}, to_json(node.children)]}

    if node.content is None:
        return {'t': node.tag}
    return {'t': node.tag, 'c': to_json(node.content)}


def to_pandoc_json(root: Element, original: Dict[str, Any]) -> Dict[str, Any]:
    """Serialize `root` back, keeping the top-level keys of `original`."""
    document = dict(original)
    document['meta'] = to_json(root.content['meta'])
    document['blocks'] = to_json(root.content['blocks'])
    return document


# ============================================================================
# Metadata
# ============================================================================

def stringify(value: Any) -> str:
    """
    Flatten a pandoc (meta) value to plain text.

    Like pandoc.utils.stringify: Str/MetaString keep their text, spaces
    and breaks become " ", formatting and quotation wrappers are dropped.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, list):
        return ''.join(stringify(item) for item in value)
    if not _is_element(value):
        return ''

    tag = value['t']
    content = value.get('c')
    if tag in ('Str', 'MetaString'):
        return content
    if tag in ('Space', 'SoftBreak', 'LineBreak'):
        return ' '
    if tag in ('Code', 'Math', 'RawInline'):
        return content[1]
    if tag in ('Span', 'Link', 'Image'):
        return stringify(content[1])
    if tag == 'Quoted':
        return stringify(content[1])
    if tag == 'MetaBool':
        return 'true' if content else 'false'
    return stringify(content)


def read_marks_field(field: Dict[str, Any]) -> List[str]:
    """
    Decode a quot-marks metadata field into glyphs.

    A string (MetaInlines/MetaString) is split into characters, a
    MetaList is stringified item by item. The count is checked later.

    Raises:
        ConfigError: The field is neither a string nor a list.
    """
    tag = field.get('t') if isinstance(field, dict) else None
    if tag in ('MetaInlines', 'MetaString'):
        return list(stringify(field))
    if tag == 'MetaList':
        return [stringify(item) for item in field['c']]
    raise ConfigError('neither a string nor a list', META_QUOT_MARKS)


def read_document_config(meta: Dict[str, Any], default_lang: Optional[str] = None) -> DocumentConfig:
    """
    Decode the document's quotation mark configuration.

    Args:
        meta: The "meta" object of a pandoc JSON document.
        default_lang: Language to assume when no field is set.

    Raises:
        ConfigError: quot-marks is neither a string nor a list.
    """
    quot_marks = None
    if META_QUOT_MARKS in meta:
        quot_marks = read_marks_field(meta[META_QUOT_MARKS])

    quot_lang = stringify(meta[META_QUOT_LANG]).strip() if META_QUOT_LANG in meta else None
    lang = stringify(meta[META_LANG]).strip() if META_LANG in meta else None
    if quot_marks is None and quot_lang is None and lang is None:
        lang = default_lang

    return select_config(quot_marks, quot_lang, lang)

