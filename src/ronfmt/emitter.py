"""``ronfmt.emitter``: Printing documents
======================================

Puts the extension header, the top level values and their comments together.

  >>> from ronfmt import parse
  >>> print(to_string(parse("#![enable(b, a)] Some(1)"), Config()), end="")
  #![enable(a, b)]
  <BLANKLINE>
  Some(1)

"""

from __future__ import annotations

from typing import TextIO

from ronfmt import document, pretty
from ronfmt.config import Config
from ronfmt.layout import layout_item

__all__ = ("layout_document", "emit", "to_string")


def layout_document(doc: document.Document, config: Config) -> pretty.Doc:
    header = pretty.EMPTY
    if doc.extensions:
        header = (
            pretty.text(f"#![enable({', '.join(doc.extensions)})]")
            + pretty.LINE
            + pretty.LINE
        )
    body = pretty.concat(
        (layout_item(item, 0, config, sep="") for item in doc.items),
        sep=pretty.LINE,
    )
    return header + body + pretty.LINE


def emit(doc: document.Document, config: Config, out: TextIO) -> None:
    """Write the formatted version of *doc* to *out*.

    Errors raised by *out* are propagated as is.
    """
    pretty.render(layout_document(doc, config), out)


def to_string(doc: document.Document, config: Config) -> str:
    return layout_document(doc, config).to_string()
