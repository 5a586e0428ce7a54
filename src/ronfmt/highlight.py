from __future__ import annotations

import functools

import pygments
import pygments.formatters
from pygments.lexer import RegexLexer, bygroups, include, words
from pygments.token import (
    Comment,
    Keyword,
    Name,
    Number,
    Punctuation,
    String,
    Text,
)

__all__ = ("RonLexer", "highlight")

_ident = r"(?:r#)?[^\W\d]\w*"


class RonLexer(RegexLexer):
    name = "RON"
    aliases = ["ron"]
    filenames = ["*.ron"]

    tokens = {
        "ws": [
            (r"\s+", Text),
            (r"//.*?$", Comment.Single),
            (r"/\*(.|\n)*?\*/", Comment.Multiline),
        ],
        "root": [
            include("ws"),
            (
                r"(#!\[)(\s*)(enable)",
                bygroups(Comment.Preproc, Text, Keyword),
            ),
            (words(("true", "false"), suffix=r"\b"), Keyword.Constant),
            (r'b?r(#*)"(.|\n)*?"\1', String),
            (r'b?"(\\\\|\\"|[^"])*"', String),
            (r"'(\\u\{[0-9a-fA-F]+\}|\\.|[^'\\])'", String.Char),
            (r"[+-]?(inf|NaN)\b", Number.Float),
            (r"[+-]?0x[0-9a-fA-F_]+", Number.Hex),
            (r"[+-]?0o[0-7_]+", Number.Oct),
            (r"[+-]?0b[01_]+", Number.Bin),
            (
                r"[+-]?([0-9][0-9_]*\.[0-9_]*([eE][+-]?[0-9_]+)?"
                r"|[0-9][0-9_]*[eE][+-]?[0-9_]+)",
                Number.Float,
            ),
            (r"[+-]?[0-9][0-9_]*", Number.Integer),
            (_ident + r"(?=\s*:)", Name.Attribute),
            (_ident + r"(?=\s*\()", Name.Class),
            (_ident, Name.Constant),
            (r"[\[\](){},:]", Punctuation),
            (r".", Text),
        ],
    }


@functools.lru_cache()
def _formatter() -> pygments.formatters.TerminalFormatter:
    return pygments.formatters.TerminalFormatter()


def highlight(code: str) -> str:
    "Colorize *code* for a terminal."
    res: str = pygments.highlight(code, RonLexer(), _formatter())
    return res
