import sexpression
from sexpression import Atom, List


def test_quoted_string_keeps_spaces_and_parentheses():
    assert sexpression.parse('"pachyderms (elephants)"') == Atom("pachyderms (elephants)")


def test_quoted_atom_in_list():
    parsed = sexpression.parse('(foo bar "baz buzz" fuzz)')
    assert parsed == List([List([Atom("foo"), Atom("bar"), Atom("baz buzz"), Atom("fuzz")])])


def test_quoted_atom_with_leading_space():
    parsed = sexpression.parse('(foo bar " baz buzz" fuzz)')
    assert parsed == List([List([Atom("foo"), Atom("bar"), Atom(" baz buzz"), Atom("fuzz")])])


def test_empty_quoted_string():
    assert sexpression.parse('""') == Atom("")


def test_empty_quoted_string_in_list():
    assert sexpression.parse('(a "" b)') == List([List([Atom("a"), Atom(""), Atom("b")])])


def test_quoted_newline_is_kept():
    assert sexpression.parse('"line one\nline two"') == Atom("line one\nline two")


def test_quoted_carriage_return_is_dropped():
    assert sexpression.parse('"line one\r\nline two"') == Atom("line one\nline two")


def test_quoted_tab_is_kept():
    assert sexpression.parse('"a\tb"') == Atom("a\tb")


def test_quoted_comment_markers_are_literal():
    parsed = sexpression.parse('(a ";; not a comment" "(; nor this ;)")')
    assert parsed == List([List([Atom("a"), Atom(";; not a comment"), Atom("(; nor this ;)")])])


def test_quote_inside_token_joins_parts():
    assert sexpression.parse('ab"c d"e') == Atom("abc de")


def test_quoted_close_paren_does_not_end_list():
    assert sexpression.parse('(a ")" b)') == List([List([Atom("a"), Atom(")"), Atom("b")])])


def test_unterminated_quote_runs_to_end():
    assert sexpression.parse('(a "b c)') == List([List([Atom("a"), Atom("b c)")])])
