from __future__ import annotations

import dataclasses
from typing import Final

__all__ = ("Config", "DEFAULT")

#: Number of spaces per indentation level.
INDENT: Final = 4

#: Soft limit on the width of a line.
WIDTH: Final = 40


@dataclasses.dataclass(slots=True, frozen=True)
class Config:
    """Formatting parameters.

    A :class:`Config` is passed down explicitly to every function that needs
    it; there is no global formatting state.

    Args:
      indent(int): number of spaces per indentation level.
      width(int): maximum line width used to decide whether a value fits on one
        line.
    """

    indent: int = INDENT
    width: int = WIDTH

    def __post_init__(self) -> None:
        if self.indent < 0:
            raise ValueError(f"indent must be non-negative, got {self.indent}")
        if self.width < 0:
            raise ValueError(f"width must be non-negative, got {self.width}")


DEFAULT: Final = Config()
