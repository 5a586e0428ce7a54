from __future__ import annotations

import pytest

from ronfmt import builder, parse
from ronfmt.document import (
    Atom,
    FieldsVariant,
    Item,
    List,
    Map,
    TupleVariant,
)
from ronfmt.grammar import Kind, ParseNode


def only_value(src):
    [item] = parse(src).items
    return item.value


def test_extensions():
    doc = parse("#![enable(b)] #![enable(a)] #![enable(a)]\n1")
    assert doc.extensions == ("a", "b")
    assert parse("1").extensions == ()
    # Extension names are case sensitive
    assert parse("#![enable(a, A, a)] 1").extensions == ("A", "a")


def test_values():
    value = only_value('Point(x: 1, y: [true, "a"])')
    assert value == FieldsVariant(
        "Point",
        (
            ("x", Item(Atom("1"))),
            ("y", Item(List((Item(Atom("true")), Item(Atom('"a"')))))),
        ),
    )


def test_map_keeps_order():
    value = only_value('{"b": 1, "a": 2, "c": 3}')
    assert [k.text for k, _ in value.entries] == ['"b"', '"a"', '"c"']


SEQUENCE = """\
[
    // first
    1, // one
    2,
    // last
]
"""


def test_comment_folding():
    assert only_value(SEQUENCE) == List(
        (
            Item(Atom("1"), pre=("// first",), eol="// one"),
            Item(Atom("2"), post=("// last",)),
        )
    )


def test_only_one_eol():
    value = only_value("[1, // a\n 2, /* b */ /* c */\n 3]")
    assert value.elements == (
        Item(Atom("1"), eol="// a"),
        Item(Atom("2"), eol="/* b */"),
        Item(Atom("3"), pre=("/* c */",)),
    )


def test_comment_runs_keep_their_order():
    value = only_value("[1,\n    /* x */ // y\n    2]")
    assert value.elements == (
        Item(Atom("1")),
        Item(Atom("2"), pre=("/* x */", "// y")),
    )
    value = only_value("[\n    1,\n    2\n    /* x */ // y\n]")
    assert value.elements == (
        Item(Atom("1")),
        Item(Atom("2"), post=("/* x */", "// y")),
    )


def test_comment_after_opening_bracket():
    value = only_value("( // note\n a: 1, b: 2)")
    assert value.fields[0] == ("a", Item(Atom("1"), pre=("// note",)))


def test_comment_before_parenthesis():
    assert only_value("Some /* c */ (1)") == TupleVariant(
        "Some", (Item(Atom("1"), pre=("/* c */",)),)
    )
    value = only_value("Point // p\n(x: 1)")
    assert value.fields == (("x", Item(Atom("1"), pre=("// p",))),)
    value = only_value("Unit /* c */ ()")
    assert value == TupleVariant("Unit", (), ("/* c */",))


def test_keys_have_no_comments():
    value = only_value('{\n  // k\n  "a" /* c */ : 1,\n  "b": 2,\n}')
    assert value == Map(
        (
            (Atom('"a"'), Item(Atom("1"), pre=("// k", "/* c */"))),
            (Atom('"b"'), Item(Atom("2"))),
        )
    )


def test_dangling_comments():
    assert only_value("[\n  // nothing\n]") == List((), ("// nothing",))
    value = only_value("Unit( /* empty */ )")
    assert value.elements == ()
    assert value.dangling == ("/* empty */",)


def test_top_level():
    doc = parse("// header\n#![enable(x)]\n(a: 1) // eol\n// trailing\n")
    assert doc.extensions == ("x",)
    [item] = doc.items
    assert item.pre == ("// header",)
    assert item.eol == "// eol"
    assert item.post == ("// trailing",)

    doc = parse("1\n// between\n2")
    assert doc.items == (Item(Atom("1")), Item(Atom("2"), pre=("// between",)))


def test_structural_errors():
    with pytest.raises(builder.StructuralError, match="Expected a file"):
        builder.build(ParseNode(Kind.COMMENT, 0, text="// c"))

    with pytest.raises(builder.StructuralError, match="Expected at least one"):
        builder.build(ParseNode(Kind.FILE, 0))

    with pytest.raises(builder.StructuralError, match="ident at offset 3"):
        builder.build(
            ParseNode(Kind.FILE, 0, children=[ParseNode(Kind.IDENT, 3, "x")])
        )

    missing_value = ParseNode(
        Kind.MAP,
        0,
        children=[
            ParseNode(Kind.ENTRY, 1, children=[ParseNode(Kind.ATOM, 1, "1")])
        ],
    )
    with pytest.raises(ValueError, match="entry at offset 1"):
        builder.build_value(missing_value)

    bad_field = ParseNode(
        Kind.FIELDS,
        0,
        children=[
            ParseNode(
                Kind.FIELD,
                1,
                children=[
                    ParseNode(Kind.ATOM, 1, "1"),
                    ParseNode(Kind.ATOM, 4, "2"),
                ],
            )
        ],
    )
    with pytest.raises(builder.StructuralError, match="identifiers"):
        builder.build_value(bad_field)
