"""``ronfmt.document``: In memory documents
========================================

A parsed RON file is represented as a :class:`Document`: a set of enabled
extensions followed by one or more top level :class:`Item`. Items wrap a
:class:`Value` along with the comments attached to it.

Every value knows how wide it would be if it (and all of its descendants) were
printed on a single line::

  >>> List((Item(Atom("1")), Item(Atom("22")))).min_width
  7

The width is computed when the node is created and never changes: nodes are
immutable.

API:
----

"""

from __future__ import annotations

import dataclasses
from typing import Iterator

__all__ = (
    "Document",
    "Item",
    "Value",
    "Atom",
    "List",
    "Map",
    "TupleVariant",
    "FieldsVariant",
)

# Overhead of ", " between elements plus the surrounding brackets, amortised
# over the elements: N elements need (N - 1) * 2 + 2 extra characters.
ELEMENT_OVERHEAD = 2

# Same as above with an extra ": " between each key and its value.
ENTRY_OVERHEAD = 4


class Value:
    """Base class of all the values in a document.

    Attributes:
      min_width(int): number of characters needed to print the value on one
        line.
      has_comments(bool): whether there are comments anywhere inside of the
        value.
    """

    __slots__ = ()

    min_width: int
    has_comments: bool

    def children(self) -> Iterator[Item]:
        "The items directly contained in this value."
        return iter(())

    def _set_derived(self, min_width: int, dangling: tuple[str, ...]) -> None:
        has_comments = bool(dangling) or any(
            item.has_trivia or item.value.has_comments
            for item in self.children()
        )
        object.__setattr__(self, "min_width", min_width)
        object.__setattr__(self, "has_comments", has_comments)


@dataclasses.dataclass(slots=True, frozen=True)
class Item:
    """A value with the comments attached to it.

    Args:
      value(Value):
      pre(tuple[str, ...]): comments on the lines right before the value.
      post(tuple[str, ...]): comments on the lines right after the value.
      eol(str | None): comment at the end of the line the value ends on.
    """

    value: Value
    pre: tuple[str, ...] = ()
    post: tuple[str, ...] = ()
    eol: str | None = None

    @property
    def has_trivia(self) -> bool:
        return bool(self.pre or self.post) or self.eol is not None


@dataclasses.dataclass(slots=True, frozen=True)
class Atom(Value):
    """A literal token printed verbatim (numbers, strings, chars, booleans,
    ``()`` and bare identifiers)."""

    text: str
    min_width: int = dataclasses.field(init=False, repr=False, compare=False)
    has_comments: bool = dataclasses.field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self._set_derived(len(self.text), ())


def _elements_width(elements: tuple[Item, ...]) -> int:
    return sum(item.value.min_width + ELEMENT_OVERHEAD for item in elements)


def _name_width(name: str | None) -> int:
    return 0 if name is None else len(name)


@dataclasses.dataclass(slots=True, frozen=True)
class List(Value):
    "``[a, b, ...]``"

    elements: tuple[Item, ...]
    dangling: tuple[str, ...] = ()
    min_width: int = dataclasses.field(init=False, repr=False, compare=False)
    has_comments: bool = dataclasses.field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self._set_derived(_elements_width(self.elements), self.dangling)

    def children(self) -> Iterator[Item]:
        return iter(self.elements)


@dataclasses.dataclass(slots=True, frozen=True)
class Map(Value):
    """``{k1: v1, k2: v2, ...}``

    Entries are kept in the order they appear in the source. Keys are plain
    values: they never have comments attached to them.
    """

    entries: tuple[tuple[Value, Item], ...]
    dangling: tuple[str, ...] = ()
    min_width: int = dataclasses.field(init=False, repr=False, compare=False)
    has_comments: bool = dataclasses.field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        width = sum(
            key.min_width + item.value.min_width + ENTRY_OVERHEAD
            for key, item in self.entries
        )
        self._set_derived(width, self.dangling)

    def children(self) -> Iterator[Item]:
        for _, item in self.entries:
            yield item


@dataclasses.dataclass(slots=True, frozen=True)
class TupleVariant(Value):
    """``Name(a, b, ...)``

    A tuple struct or a tuple enum variant. Plain tuples have no *name*.
    """

    name: str | None
    elements: tuple[Item, ...]
    dangling: tuple[str, ...] = ()
    min_width: int = dataclasses.field(init=False, repr=False, compare=False)
    has_comments: bool = dataclasses.field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self._set_derived(
            _name_width(self.name) + _elements_width(self.elements),
            self.dangling,
        )

    def children(self) -> Iterator[Item]:
        return iter(self.elements)


@dataclasses.dataclass(slots=True, frozen=True)
class FieldsVariant(Value):
    """``Name(k1: v1, k2: v2, ...)``

    A struct or a struct-like enum variant. Anonymous structs have no *name*.
    """

    name: str | None
    fields: tuple[tuple[str, Item], ...]
    min_width: int = dataclasses.field(init=False, repr=False, compare=False)
    has_comments: bool = dataclasses.field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        width = sum(
            len(key) + item.value.min_width + ENTRY_OVERHEAD
            for key, item in self.fields
        )
        self._set_derived(_name_width(self.name) + width, ())

    def children(self) -> Iterator[Item]:
        for _, item in self.fields:
            yield item


@dataclasses.dataclass(slots=True, frozen=True)
class Document:
    """A whole RON file.

    Args:
      extensions(tuple[str, ...]): enabled extensions, sorted and without
        duplicates.
      items(tuple[Item, ...]): the top level values.
    """

    extensions: tuple[str, ...]
    items: tuple[Item, ...]
