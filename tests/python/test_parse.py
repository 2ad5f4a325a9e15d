import io

import pytest

import sexpression
from sexpression import Atom, Float, Integer, List


def test_parse_str():
    t = sexpression.parse("(a b)")
    assert repr(t) == "((a b))"


def test_parse_bytes():
    t = sexpression.parse(b"(a b)")
    assert t == List([List([Atom("a"), Atom("b")])])


def test_parse_bytearray():
    t = sexpression.parse(bytearray(b"(a b)"))
    assert t == List([List([Atom("a"), Atom("b")])])


def test_parse_stream_matches_str():
    source = "(foo (bar 1 2.5) \"baz buzz\")\n(fuzz)"
    assert sexpression.parse(io.StringIO(source)) == sexpression.parse(source)


def test_parse_stream_is_left_open():
    stream = io.StringIO("(a)")
    sexpression.parse(stream)
    assert not stream.closed


def test_parse_binary_stream_raises():
    with pytest.raises(TypeError):
        sexpression.parse(io.BytesIO(b"(a)"))


def test_parse_wrong_type_raises():
    with pytest.raises(TypeError):
        sexpression.parse(42)


def test_parse_single_atom_is_unwrapped():
    assert sexpression.parse("foo") == Atom("foo")


def test_parse_single_atom_list():
    assert sexpression.parse("(foo)") == List([List([Atom("foo")])])


def test_parse_empty_string():
    t = sexpression.parse("")
    assert t == List()
    assert len(t) == 0
    assert list(t) == []


def test_parse_whitespace_only():
    assert sexpression.parse("  \n\t ") == List()


def test_parse_empty_list():
    assert sexpression.parse("()") == List([List()])


def test_parse_two_top_level_lists():
    assert sexpression.parse("(foo) (bar)") == List([List([Atom("foo")]), List([Atom("bar")])])


def test_parse_two_top_level_atoms():
    assert sexpression.parse("foo bar") == List([Atom("foo"), Atom("bar")])


def test_parse_atom_after_list_is_kept():
    assert sexpression.parse("(foo) bar") == List([List([Atom("foo")]), Atom("bar")])


def test_parse_nested_lists():
    assert sexpression.parse("(foo bar (baz))") == List([
        List([Atom("foo"), Atom("bar"), List([Atom("baz")])]),
    ])


def test_parse_unquoted_atoms():
    assert sexpression.parse("(foo bar baz buzz fuzz)") == List([
        List([Atom("foo"), Atom("bar"), Atom("baz"), Atom("buzz"), Atom("fuzz")]),
    ])


def test_parse_newline_separates_atoms():
    expected = sexpression.parse("(foo bar baz buzz fuzz)")
    assert sexpression.parse("(foo bar baz\nbuzz fuzz)") == expected


def test_parse_dos_newline():
    expected = sexpression.parse("(foo bar baz\nbuzz fuzz)")
    assert sexpression.parse("(foo bar baz\r\nbuzz fuzz)") == expected


def test_parse_tabs_and_numbers():
    parsed = sexpression.parse(
        "  (func (export \"i32_load8_s\") (param $i i32) (result i32)\n"
        "\t(i32.store8 (i32.const 8) (local.get $i))\n"
        "\t(i32.load8_s (i32.const 8))\n"
        "  )\n"
    )
    expected = List([
        List([
            Atom("func"),
            List([Atom("export"), Atom("i32_load8_s")]),
            List([Atom("param"), Atom("$i"), Atom("i32")]),
            List([Atom("result"), Atom("i32")]),
            List([
                Atom("i32.store8"),
                List([Atom("i32.const"), Integer(8)]),
                List([Atom("local.get"), Atom("$i")]),
            ]),
            List([Atom("i32.load8_s"), List([Atom("i32.const"), Integer(8)])]),
        ]),
    ])
    assert parsed == expected


def test_parse_numbers_between_atoms():
    assert sexpression.parse("(pos 12 -3.5 x)") == List([
        List([Atom("pos"), Integer(12), Float(-3.5), Atom("x")]),
    ])


def test_parse_unclosed_list_is_closed_at_end():
    assert sexpression.parse("(foo (bar baz") == List([
        List([Atom("foo"), List([Atom("bar"), Atom("baz")])]),
    ])


def test_parse_unclosed_single_atom_list():
    assert sexpression.parse("(foo") == List([List([Atom("foo")])])


def test_parse_stray_close_raises():
    with pytest.raises(ValueError):
        sexpression.parse(")")
