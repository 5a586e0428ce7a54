"""``ronfmt.pretty``: Layout documents
===================================

A small document algebra in the spirit of Christian Lindig's "strictly pretty"
[`pdf <https://lindig.github.io/papers/strictly-pretty-2000.pdf>`_] article.

Unlike the article, documents built here never contain a choice: every line
break is a hard break. The single-line/multi-line decision is taken by
:mod:`ronfmt.layout` while the document is being built, this module only
knows how to concatenate, indent and print the result.

"""

from __future__ import annotations

import dataclasses
import io
from typing import Iterable, TextIO

__all__ = (
    "Doc",
    "EMPTY",
    "LINE",
    "text",
    "nest",
    "concat",
    "render",
    "to_string",
)


# doc =
# | DocNil
# | DocCons of doc * doc
# | DocText of string
# | DocNest of int * doc
# | DocLine


class Doc:
    """Type used to represent documents

    This constructor should never be called directly

    Documents can be concatenated via the ``+`` operator.
    """

    def __add__(self, other: Doc) -> Doc:
        return DocCons(self, other)

    def to_string(self) -> str:
        "Render this document to a string"
        return to_string(self)


@dataclasses.dataclass(slots=True)
class DocNil(Doc):
    pass


@dataclasses.dataclass(slots=True)
class DocCons(Doc):
    left: Doc
    right: Doc


@dataclasses.dataclass(slots=True)
class DocText(Doc):
    text: str


@dataclasses.dataclass(slots=True)
class DocNest(Doc):
    indent: int
    doc: Doc


@dataclasses.dataclass(slots=True)
class DocLine(Doc):
    pass


#: The empty document
EMPTY: Doc = DocNil()

#: A newline followed by the current indentation.
LINE: Doc = DocLine()


def text(s: str) -> Doc:
    """
    Turns a string into a document

    Args:
      s(str)

    Returns:
      Doc:
    """
    return DocText(s)


def nest(indentation: int, doc: Doc) -> Doc:
    """Increase the indentation of the lines started inside of *doc*.

    Args:
      indentation(int):
      doc(Doc):

    Returns:
      Doc:
    """
    return DocNest(indentation, doc)


def concat(docs: Iterable[Doc], sep: Doc = EMPTY) -> Doc:
    "Concatenate *docs*, putting *sep* between consecutive elements."
    acc = EMPTY
    first = True
    for doc in docs:
        if not first:
            acc += sep
        else:
            first = False
        acc += doc
    return acc


# NOTE: OCaml's list are linked list. The rendering loop does a lot of
# deconstructing/reconstructing of head::tail. If we used normal python lists
# we'd convert a lot of O(1) operation in O(n) operations.
@dataclasses.dataclass(slots=True)
class LL:
    indent: int
    doc: Doc
    _succ: LL | None = None


# let rec format k l post = match l with
#     | []                        -> post SNil
#     | (i,DocNil)           :: z -> format k z post
#     | (i,DocCons(x,y))     :: z -> format k ((i,x)::(i,y)::z) post
#     | (i,DocNest(j,x))     :: z -> format k ((i+j,x)::z) post
#     | (i,DocText(s))       :: z -> format (k + strlen s) z (cons s post)
#     | (i,DocLine)          :: z -> format i z (consl i post)
#
# The recursion is written as a loop since CPython doesn't do tail calls.
def render(doc: Doc, out: TextIO) -> None:
    """Write *doc* to *out*.

    Indentation is only written in front of text: empty lines never carry
    trailing whitespace.
    """
    pending = 0
    elts: LL | None = LL(0, doc)

    while elts is not None:
        match elts:
            case LL(_, DocNil(), z):
                elts = z
            case LL(i, DocCons(x, y), z):
                elts = LL(i, x, LL(i, y, z))
            case LL(i, DocNest(j, x), z):
                elts = LL(i + j, x, z)
            case LL(_, DocText(s), z):
                if s:
                    if pending:
                        out.write(" " * pending)
                        pending = 0
                    out.write(s)
                elts = z
            case LL(i, DocLine(), z):
                out.write("\n")
                pending = i
                elts = z
            case _:  # pragma: no cover
                assert False, elts


def to_string(doc: Doc) -> str:
    out = io.StringIO()
    render(doc, out)
    return out.getvalue()
