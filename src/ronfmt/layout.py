"""``ronfmt.layout``: Line breaking
================================

Every composite value is printed in one of two ways:

+ **single line**: ``Point(x: 1, y: 2)``. All of its descendants are printed
  on the same line as well.
+ **multi line**: one element per line, one indentation level deeper than the
  value, each followed by a comma::

    Point(
        x: 1,
        y: 2,
    )

  Each element then makes its own decision at its own depth.

A value goes on a single line when ``depth * indent + min_width`` is no more
than the configured width and no comment forces it to be broken up. Since
:attr:`~ronfmt.document.Value.min_width` is exactly the length of the single
line rendering, there is no need to re-check the descendants.

"""

from __future__ import annotations

from typing import Iterable, Iterator

from ronfmt import document, pretty
from ronfmt.config import Config

__all__ = ("decide", "single_line", "layout_item")


def _join(parts: Iterable[str]) -> str:
    return ", ".join(parts)


def single_line(value: document.Value) -> str:
    "Print *value* on one line."
    match value:
        case document.Atom(text):
            return text
        case document.List(elements):
            return f"[{_join(single_line(x.value) for x in elements)}]"
        case document.Map(entries):
            inner = _join(
                f"{single_line(k)}: {single_line(v.value)}" for k, v in entries
            )
            return f"{{{inner}}}"
        case document.TupleVariant(name, elements):
            inner = _join(single_line(x.value) for x in elements)
            return f"{name or ''}({inner})"
        case document.FieldsVariant(name, fields):
            inner = _join(f"{k}: {single_line(v.value)}" for k, v in fields)
            return f"{name or ''}({inner})"
    raise TypeError(f"Cannot print {type(value).__name__}")  # pragma: no cover


def fits(value: document.Value, depth: int, config: Config) -> bool:
    return depth * config.indent + value.min_width <= config.width


def _is_empty(value: document.Value) -> bool:
    return next(value.children(), None) is None and not value.has_comments


def decide(
    value: document.Value, depth: int, config: Config, *, attached: bool = False
) -> pretty.Doc:
    """Lay out *value* at indentation level *depth*.

    Args:
      value(Value):
      depth(int): indentation level of the line the value starts on.
      config(Config):
      attached(bool): whether the item wrapping *value* has comments attached
        to it (this forces composite values on multiple lines).

    Returns:
      pretty.Doc:
    """
    if isinstance(value, document.Atom) or _is_empty(value):
        return pretty.text(single_line(value))
    if not attached and not value.has_comments and fits(value, depth, config):
        return pretty.text(single_line(value))
    return _multi_line(value, depth, config)


def layout_item(
    item: document.Item,
    depth: int,
    config: Config,
    *,
    key: str = "",
    sep: str = ",",
) -> pretty.Doc:
    """Lay out *item* with its comments.

    The item starts on a fresh line at *depth*. Its ``pre`` comments come first
    (one per line), then *key*, the value and *sep*, then the ``eol`` comment
    on the same line and the ``post`` comments on the lines after.
    """
    doc = pretty.EMPTY
    for comment in item.pre:
        doc += pretty.text(comment) + pretty.LINE
    doc += (
        pretty.text(key)
        + decide(item.value, depth, config, attached=item.has_trivia)
        + pretty.text(sep)
    )
    if item.eol is not None:
        doc += pretty.text(f" {item.eol}")
    for comment in item.post:
        doc += pretty.LINE + pretty.text(comment)
    return doc


def _block(
    opening: str,
    elements: Iterator[pretty.Doc],
    dangling: tuple[str, ...],
    closing: str,
    config: Config,
) -> pretty.Doc:
    body = pretty.concat(pretty.LINE + element for element in elements)
    body += pretty.concat(pretty.LINE + pretty.text(c) for c in dangling)
    return (
        pretty.text(opening)
        + pretty.nest(config.indent, body)
        + pretty.LINE
        + pretty.text(closing)
    )


def _multi_line(
    value: document.Value, depth: int, config: Config
) -> pretty.Doc:
    inner = depth + 1
    match value:
        case document.List(elements, dangling):
            return _block(
                "[",
                (layout_item(x, inner, config) for x in elements),
                dangling,
                "]",
                config,
            )
        case document.Map(entries, dangling):
            return _block(
                "{",
                (
                    layout_item(v, inner, config, key=f"{single_line(k)}: ")
                    for k, v in entries
                ),
                dangling,
                "}",
                config,
            )
        case document.TupleVariant(name, elements, dangling):
            return _block(
                f"{name or ''}(",
                (layout_item(x, inner, config) for x in elements),
                dangling,
                ")",
                config,
            )
        case document.FieldsVariant(name, fields):
            return _block(
                f"{name or ''}(",
                (
                    layout_item(v, inner, config, key=f"{k}: ")
                    for k, v in fields
                ),
                (),
                ")",
                config,
            )
    raise TypeError(f"Cannot print {type(value).__name__}")  # pragma: no cover
