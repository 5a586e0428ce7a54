from __future__ import annotations

import io

from ronfmt import pretty

LIST = """\
[
    1,
    2,
]\
"""


def mk_list(*elts):
    body = pretty.concat(pretty.LINE + pretty.text(f"{x},") for x in elts)
    return (
        pretty.text("[")
        + pretty.nest(4, body)
        + pretty.LINE
        + pretty.text("]")
        + pretty.EMPTY
    )


def test_nested():
    assert mk_list(1, 2).to_string() == LIST
    assert mk_list().to_string() == "[\n]"


def test_nest_accumulates():
    doc = pretty.nest(
        2,
        pretty.LINE
        + pretty.text("x")
        + pretty.nest(3, pretty.LINE + pretty.text("y"))
        + pretty.LINE
        + pretty.text("z"),
    )
    assert doc.to_string() == "\n  x\n     y\n  z"


def test_no_trailing_whitespace():
    doc = pretty.nest(
        4, pretty.text("a") + pretty.LINE + pretty.LINE + pretty.text("b")
    )
    assert doc.to_string() == "a\n\n    b"
    doc = pretty.nest(4, pretty.LINE + pretty.text("") + pretty.LINE)
    assert doc.to_string() == "\n\n"


def test_concat():
    words = [pretty.text(w) for w in ("a", "b", "c")]
    assert pretty.concat(words, sep=pretty.text(", ")).to_string() == "a, b, c"
    assert pretty.concat(words).to_string() == "abc"
    assert pretty.concat([]).to_string() == ""


def test_render():
    out = io.StringIO()
    out.write(">")
    pretty.render(mk_list("a"), out)
    assert out.getvalue() == ">[\n    a,\n]"
