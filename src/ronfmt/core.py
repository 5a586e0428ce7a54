from __future__ import annotations

import logging

from ronfmt import builder, document, emitter, grammar
from ronfmt.config import DEFAULT, Config

__all__ = ("parse", "format_text")

logger = logging.getLogger(__name__)


def parse(text: str, filename: str = "<string>") -> document.Document:
    """Parse a RON file.

    Args:
      text(str):
      filename(str): name reported in syntax errors.

    Raises:
      SyntaxError: if *text* is not valid RON.
    """
    return builder.build(grammar.parse_tree(text, filename=filename))


def format_text(
    text: str, config: Config = DEFAULT, filename: str = "<string>"
) -> str:
    """Reformat the content of a RON file.

    The result always ends with a newline.

      >>> print(format_text("(a:1,b:[ 2 ,3 ],)"), end="")
      (a: 1, b: [2, 3])
      >>> print(format_text("[1, 2, 3]", Config(width=8)), end="")
      [
          1,
          2,
          3,
      ]

    Args:
      text(str): the content of the file.
      config(Config):
      filename(str): name reported in syntax errors.

    Raises:
      SyntaxError: if *text* is not valid RON.
    """
    doc = parse(text, filename=filename)
    logger.debug(
        "formatting %s with indent=%d, width=%d",
        filename,
        config.indent,
        config.width,
    )
    return emitter.to_string(doc, config)
