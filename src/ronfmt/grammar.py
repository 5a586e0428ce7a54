"""``ronfmt.grammar``: RON syntax
==============================

Turns source text into a tree of :class:`ParseNode`. The tree mirrors the
syntax closely (comments are kept as nodes in between the values they
separate); :mod:`ronfmt.builder` turns it into a :class:`~ronfmt.document.
Document`.

  >>> parse_tree("[1, 2]").children[0].kind
  <Kind.LIST: 4>

"""

from __future__ import annotations

import dataclasses
import enum
import re
from typing import Any, Callable

import pyparsing as pp

__all__ = ("Kind", "ParseNode", "parse_tree")

pp.ParserElement.enable_packrat()


class Kind(enum.Enum):
    "The type of a :class:`ParseNode`"
    FILE = enum.auto()
    EXTENSION = enum.auto()
    IDENT = enum.auto()
    LIST = enum.auto()
    MAP = enum.auto()
    ENTRY = enum.auto()
    TUPLE = enum.auto()
    FIELDS = enum.auto()
    FIELD = enum.auto()
    ATOM = enum.auto()
    COMMENT = enum.auto()


@dataclasses.dataclass(slots=True)
class ParseNode:
    """A node in the raw syntax tree.

    Args:
      kind(Kind):
      loc(int): offset of the node in the source text.
      text(str): source text of leaves (atoms, identifiers and comments).
      children(list[ParseNode]):
      trailing(bool): for comments, whether there is something else before the
        comment on the line it starts on.
    """

    kind: Kind
    loc: int
    text: str = ""
    children: list[ParseNode] = dataclasses.field(default_factory=list)
    trailing: bool = False


Action = Callable[[str, int, pp.ParseResults], ParseNode]


def _leaf(kind: Kind) -> Action:
    def action(s: str, loc: int, toks: pp.ParseResults) -> ParseNode:
        return ParseNode(kind, loc, text=toks[0])

    return action


def _branch(kind: Kind) -> Action:
    def action(s: str, loc: int, toks: pp.ParseResults) -> ParseNode:
        return ParseNode(kind, loc, children=list(toks))

    return action


def _comment(s: str, loc: int, toks: pp.ParseResults) -> ParseNode:
    line_start = s.rfind("\n", 0, loc) + 1
    return ParseNode(
        Kind.COMMENT,
        loc,
        text=toks[0].rstrip(),
        trailing=bool(s[line_start:loc].strip()),
    )


def _sequence(element: pp.ParserElement, *, optional: bool) -> Any:
    "Comma separated elements with an optional trailing comma and comments."
    comma = pp.Suppress(",")
    trivia = pp.ZeroOrMore(COMMENT)
    body = (
        element
        + pp.ZeroOrMore(trivia + comma + trivia + element)
        + trivia
        + pp.Optional(comma + trivia)
    )
    return trivia + (pp.Optional(body) if optional else body)


LPAR, RPAR, LBRACK, RBRACK, LBRACE, RBRACE, COLON = map(pp.Suppress, "()[]{}:")

COMMENT = pp.Regex(r"//[^\r\n]*|/\*.*?\*/", flags=re.DOTALL).set_parse_action(
    _comment
)
TRIVIA = pp.ZeroOrMore(COMMENT)

_NOT_IDENT_CHAR = r"(?![A-Za-z0-9_])"

IDENT = pp.Regex(r"(?:r#)?[A-Za-z_][A-Za-z0-9_]*").set_parse_action(
    _leaf(Kind.IDENT)
)

_EXPONENT = r"[eE][+-]?[0-9][0-9_]*"

ATOM = (
    # Strings and byte strings.
    pp.Regex(r'b?"(?:[^"\\]|\\.)*"', flags=re.DOTALL)
    | pp.Regex(r'b?r(#*)".*?"\1', flags=re.DOTALL)
    # Characters.
    | pp.Regex(
        r"'(?:\\u\{[0-9a-fA-F]{1,6}\}|\\x[0-9a-fA-F]{2}|\\.|[^'\\])'"
    )
    # Floats.
    | pp.Regex(
        r"[+-]?(?:"
        rf"(?:inf|NaN){_NOT_IDENT_CHAR}"
        rf"|[0-9][0-9_]*\.(?![.])[0-9_]*(?:{_EXPONENT})?"
        rf"|[0-9][0-9_]*{_EXPONENT}"
        rf"|\.[0-9][0-9_]*(?:{_EXPONENT})?"
        ")"
    )
    # Integers.
    | pp.Regex(
        r"[+-]?(?:0x[0-9a-fA-F_]+|0o[0-7_]+|0b[01_]+|[0-9][0-9_]*)"
        + _NOT_IDENT_CHAR
    )
    | pp.Regex(r"(?:true|false)" + _NOT_IDENT_CHAR)
    # Unit structs and unit variants (e.g.: ``None``).
    | pp.Regex(r"(?:r#)?[A-Za-z_][A-Za-z0-9_]*")
).set_parse_action(_leaf(Kind.ATOM))

UNIT = pp.Regex(r"\(\s*\)").set_parse_action(_leaf(Kind.ATOM))

VALUE = pp.Forward()

ENTRY = (VALUE + TRIVIA + COLON + TRIVIA + VALUE).set_parse_action(
    _branch(Kind.ENTRY)
)

FIELD = (IDENT + TRIVIA + COLON + TRIVIA + VALUE).set_parse_action(
    _branch(Kind.FIELD)
)

LIST = (LBRACK + _sequence(VALUE, optional=True) + RBRACK).set_parse_action(
    _branch(Kind.LIST)
)

MAP = (LBRACE + _sequence(ENTRY, optional=True) + RBRACE).set_parse_action(
    _branch(Kind.MAP)
)

FIELDS = (
    pp.Optional(IDENT + TRIVIA) + LPAR + _sequence(FIELD, optional=False) + RPAR
).set_parse_action(_branch(Kind.FIELDS))

TUPLE = (
    pp.Optional(IDENT + TRIVIA) + LPAR + _sequence(VALUE, optional=True) + RPAR
).set_parse_action(_branch(Kind.TUPLE))

# Order matters: ``Name(...)`` must be tried before the bare ``Name`` atom, and
# ``(a: 1)`` before ``(a)`` and ``()`` before the empty tuple.
VALUE <<= FIELDS | UNIT | TUPLE | LIST | MAP | ATOM

EXTENSION = (
    pp.Suppress(pp.Regex(r"#!\[\s*enable\s*\("))
    + IDENT
    + pp.ZeroOrMore(pp.Suppress(",") + IDENT)
    + pp.Optional(pp.Suppress(","))
    + RPAR
    + RBRACK
).set_parse_action(_branch(Kind.EXTENSION))

FILE = (
    (
        TRIVIA
        + pp.ZeroOrMore(EXTENSION + TRIVIA)
        + pp.OneOrMore(VALUE + TRIVIA)
        + pp.StringEnd()
    )
    .set_parse_action(_branch(Kind.FILE))
    .parse_with_tabs()
)


def parse_tree(text: str, filename: str = "<string>") -> ParseNode:
    """Parse *text*.

    Args:
      text(str): the content of a RON file.
      filename(str): only used in error messages.

    Raises:
      SyntaxError: if *text* is not valid RON.
    """
    try:
        [res] = FILE.parse_string(text, parse_all=True)
    except pp.ParseBaseException as e:
        # https://github.com/python/cpython/blob/3.10/Objects/exceptions.c#L1474
        raise SyntaxError(
            e.msg, (filename, e.lineno, e.col, e.line, e.lineno, e.col)
        ) from e
    assert isinstance(res, ParseNode), res
    return res
