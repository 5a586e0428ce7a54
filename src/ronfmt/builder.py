"""``ronfmt.builder``: From syntax trees to documents
=================================================

Walks a :class:`~ronfmt.grammar.ParseNode` tree once and builds the matching
:class:`~ronfmt.document.Document`.

Comments are not values: they get folded into the :class:`~ronfmt.document.
Item` next to them:

+ A comment that starts on the same line as the end of the previous element
  becomes the ``eol`` comment of that element, unless another comment comes
  between them.
+ Other comments are attached as ``pre`` comments of the element that follows
  them.
+ Comments after the last element of a collection are the ``post`` comments of
  that element.
+ Comments in a collection with no elements are kept on the collection
  (``dangling``).

"""

from __future__ import annotations

import dataclasses
import logging
from typing import Iterable, NoReturn

from ronfmt import document
from ronfmt.grammar import Kind, ParseNode

__all__ = ("StructuralError", "build")

logger = logging.getLogger(__name__)


class StructuralError(ValueError):
    """The syntax tree doesn't have a shape the builder understands.

    This means that the grammar and the builder disagree; it is never caused
    by a malformed input (those are rejected by the parser).
    """

    node: ParseNode

    def __init__(self, node: ParseNode, message: str = "Malformed node"):
        super().__init__(
            f"{message}: {node.kind.name.lower()} at offset {node.loc}"
        )
        self.node = node


def error(node: ParseNode, message: str = "Malformed node") -> NoReturn:
    raise StructuralError(node, message)


@dataclasses.dataclass(slots=True)
class _PendingItem:
    value: document.Value
    pre: list[str]
    post: list[str] = dataclasses.field(default_factory=list)
    eol: str | None = None

    def freeze(self) -> document.Item:
        return document.Item(
            self.value, pre=tuple(self.pre), post=tuple(self.post), eol=self.eol
        )


class _Folder:
    """Accumulates the elements of a sequence, attaching comments as we go."""

    __slots__ = ("items", "comments")

    items: list[_PendingItem]
    comments: list[str]

    def __init__(self) -> None:
        self.items = []
        self.comments = []

    def comment(self, node: ParseNode) -> None:
        if (
            node.trailing
            and not self.comments
            and self.items
            and self.items[-1].eol is None
        ):
            self.items[-1].eol = node.text
        else:
            self.comments.append(node.text)

    def value(self, value: document.Value, pre: Iterable[str] = ()) -> None:
        self.items.append(_PendingItem(value, pre=[*self.comments, *pre]))
        self.comments = []

    def close(self) -> tuple[tuple[document.Item, ...], tuple[str, ...]]:
        "Returns the items and the dangling comments."
        if not self.items:
            return (), tuple(self.comments)
        self.items[-1].post.extend(self.comments)
        self.comments = []
        return tuple(item.freeze() for item in self.items), ()


def _split_name(node: ParseNode) -> tuple[str | None, list[ParseNode]]:
    match node.children:
        case [ParseNode(kind=Kind.IDENT, text=name), *rest]:
            return name, rest
        case children:
            return None, children


def _entry(
    node: ParseNode,
) -> tuple[ParseNode, document.Value, list[str]]:
    "Returns the key, value and comments of a map entry or a struct field."
    comments: list[str] = []
    operands: list[ParseNode] = []
    for child in node.children:
        if child.kind == Kind.COMMENT:
            comments.append(child.text)
        else:
            operands.append(child)
    match operands:
        case [key, value]:
            return key, build_value(value), comments
    error(node, "Expected a key and a value")


def build_value(node: ParseNode) -> document.Value:
    "Build the value represented by *node*."
    match node.kind:
        case Kind.ATOM:
            return document.Atom(node.text)
        case Kind.LIST:
            elements, dangling = _fold_values(node.children)
            return document.List(elements, dangling)
        case Kind.TUPLE:
            name, children = _split_name(node)
            elements, dangling = _fold_values(children)
            return document.TupleVariant(name, elements, dangling)
        case Kind.MAP:
            folder = _Folder()
            keys: list[document.Value] = []
            for child in node.children:
                match child.kind:
                    case Kind.COMMENT:
                        folder.comment(child)
                    case Kind.ENTRY:
                        key, value, comments = _entry(child)
                        keys.append(build_value(key))
                        folder.value(value, pre=comments)
                    case _:
                        error(child, "Unexpected node in map")
            items, dangling = folder.close()
            return document.Map(tuple(zip(keys, items)), dangling)
        case Kind.FIELDS:
            name, children = _split_name(node)
            folder = _Folder()
            names: list[str] = []
            for child in children:
                match child.kind:
                    case Kind.COMMENT:
                        folder.comment(child)
                    case Kind.FIELD:
                        key, value, comments = _entry(child)
                        if key.kind != Kind.IDENT:
                            error(key, "Field names should be identifiers")
                        names.append(key.text)
                        folder.value(value, pre=comments)
                    case _:
                        error(child, "Unexpected node in struct")
            items, dangling = folder.close()
            if not items:
                error(node, "Structs should have at least one field")
            assert not dangling
            return document.FieldsVariant(name, tuple(zip(names, items)))
    error(node)


def _fold_values(
    children: Iterable[ParseNode],
) -> tuple[tuple[document.Item, ...], tuple[str, ...]]:
    folder = _Folder()
    for child in children:
        if child.kind == Kind.COMMENT:
            folder.comment(child)
        else:
            folder.value(build_value(child))
    return folder.close()


def build(node: ParseNode) -> document.Document:
    """Build a document out of the root of a syntax tree.

    Raises:
      StructuralError: if *node* isn't a well formed syntax tree.
    """
    if node.kind != Kind.FILE:
        error(node, "Expected a file")
    extensions = set[str]()
    folder = _Folder()
    for child in node.children:
        match child.kind:
            case Kind.EXTENSION:
                if folder.items:
                    error(child, "Extensions should come before any value")
                for ident in child.children:
                    if ident.kind != Kind.IDENT:
                        error(ident, "Expected an extension name")
                    extensions.add(ident.text)
            case Kind.COMMENT:
                folder.comment(child)
            case _:
                folder.value(build_value(child))
    items, dangling = folder.close()
    if not items:
        error(node, "Expected at least one value")
    assert not dangling
    logger.debug(
        "built document: %d extension(s), %d value(s)",
        len(extensions),
        len(items),
    )
    return document.Document(tuple(sorted(extensions)), items)
