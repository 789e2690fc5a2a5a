"""
Document Tree for Quotation Mark Rewriting

A small, format-neutral tree that sits between:
- Input documents (pandoc JSON AST) - decoded by pandoc_adapter
- The rewriter - replaces Quoted nodes with literal marks

Only two properties matter to the rewriter:
1. `language` on any node opens a language scope for its subtree
2. `Quoted` nodes are rewritten into [Text(open), *children, Text(close)]

Everything else is carried through untouched in `Element.content`.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, List, Optional, Union


# ============================================================================
# Enums
# ============================================================================

class QuoteKind(Enum):
    """Quotation levels."""
    PRIMARY = "primary"  # “outer”
    SECONDARY = "secondary"  # ‘inner’


# ============================================================================
# Nodes
# ============================================================================

@dataclass
class Node:
    """Base class for all tree nodes."""
    language: Optional[str] = field(default=None, kw_only=True)

    def child_sequences(self) -> Iterator[List['Node']]:
        """Yield the mutable lists holding this node's children."""
        return iter(())

    def embedded_nodes(self) -> Iterator['Node']:
        """Yield children held outside any list (e.g. pandoc metadata values)."""
        return iter(())


@dataclass
class Text(Node):
    """Literal text."""
    text: str


@dataclass
class Quoted(Node):
    """Text to be wrapped in quotation marks."""
    # A raw string when the input used an unrecognized quote type
    kind: Union[QuoteKind, str]
    children: List[Node] = field(default_factory=list)

    def child_sequences(self) -> Iterator[List[Node]]:
        yield self.children


@dataclass
class Element(Node):
    """
    Any other node.

    `content` is either a list of child nodes or an arbitrary nesting of
    lists, dicts and scalars in which child node lists occur (as in
    pandoc's JSON, e.g. a Link's [attr, [inlines], [url, title]]).
    """
    tag: str
    content: Any = None

    def child_sequences(self) -> Iterator[List[Node]]:
        return _node_lists(self.content)

    def embedded_nodes(self) -> Iterator[Node]:
        return _embedded_nodes(self.content)

    @property
    def children(self) -> List[Node]:
        """All direct child nodes, in document order."""
        return [child for seq in self.child_sequences() for child in seq
                if isinstance(child, Node)]


def _node_lists(value: Any) -> Iterator[List[Node]]:
    if isinstance(value, list):
        if any(isinstance(item, Node) for item in value):
            yield value
        for item in value:
            if not isinstance(item, Node):
                yield from _node_lists(item)
    elif isinstance(value, dict):
        for item in value.values():
            yield from _node_lists(item)


def _embedded_nodes(value: Any) -> Iterator[Node]:
    if isinstance(value, list):
        for item in value:
            if not isinstance(item, Node):
                yield from _embedded_nodes(item)
    elif isinstance(value, dict):
        for item in value.values():
            if isinstance(item, Node):
                yield item
            else:
                yield from _embedded_nodes(item)


# ============================================================================
# Helpers
# ============================================================================

def iter_nodes(node: Node) -> Iterator[Node]:
    """Pre-order iteration over `node` and all of its descendants."""
    yield node
    for seq in node.child_sequences():
        for child in seq:
            if isinstance(child, Node):
                yield from iter_nodes(child)
    for child in node.embedded_nodes():
        yield from iter_nodes(child)


def count_quoted(node: Node) -> int:
    return sum(1 for n in iter_nodes(node) if isinstance(n, Quoted))


def plain_text(nodes: List[Node]) -> str:
    """Concatenate the Text leaves under `nodes`."""
    return ''.join(n.text for node in nodes for n in iter_nodes(node) if isinstance(n, Text))
