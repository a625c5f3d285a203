import pytest

from regex_vm import parser
from regex_vm.syntax import *
from regex_vm.exceptions import InvalidEscape, InvalidRightParen, NoPrev, NoRightParen, Empty

@pytest.mark.parametrize("regex,expected", [
    ("abc", Seq([Char('a'), Char('b'), Char('c')])),
    ("a.c", Seq([Char('a'), Dot(), Char('c')])),
    ("^ab$", Seq([Caret(), Char('a'), Char('b'), Dollar()])),
    ("ab+", Seq([Char('a'), Plus(Char('b'))])),
    ("ab*", Seq([Char('a'), Star(Char('b'))])),
    ("ab?", Seq([Char('a'), Question(Char('b'))])),
    ("a|b", Or(Seq([Char('a')]), Seq([Char('b')]))),
    ("a|b|c", Or(Seq([Char('a')]), Or(Seq([Char('b')]), Seq([Char('c')])))),
    ("a(bc)+", Seq([Char('a'), Plus(Seq([Char('b'), Char('c')]))])),
    ("(a|b)*", Seq([Star(Or(Seq([Char('a')]), Seq([Char('b')])))])),
    ("x(a|b)|c", Or(Seq([Char('x'), Or(Seq([Char('a')]), Seq([Char('b')]))]), Seq([Char('c')]))),
    ("()a", Seq([Char('a')])),
    (r"a\*\\", Seq([Char('a'), Char('*'), Char('\\')])),
    (r"\(\)\|\+\?", Seq([Char('('), Char(')'), Char('|'), Char('+'), Char('?')])),
])
def test_parse(regex: str, expected: Construction):
    assert parser.parse(regex) == expected

def test_quantifier_applies_to_last_item_only():
    assert parser.parse("ab+c") == Seq([Char('a'), Plus(Char('b')), Char('c')])

def test_stacked_quantifiers():
    assert parser.parse("a+?") == Seq([Question(Plus(Char('a')))])

@pytest.mark.parametrize("regex,pos", [
    ("+b", 0),
    ("*b", 0),
    ("|b", 0),
    ("?b", 0),
    ("a||b", 2),
    ("(|a)", 1),
    ("a(*)", 2),
])
def test_no_prev(regex: str, pos: int):
    with pytest.raises(NoPrev) as e:
        parser.parse(regex)
    assert e.value.position == pos

@pytest.mark.parametrize("regex", ["(abc", "((a)", "a(b|c"])
def test_no_right_paren(regex: str):
    with pytest.raises(NoRightParen):
        parser.parse(regex)

@pytest.mark.parametrize("regex,pos", [("abc)", 3), (")", 0), ("(a))", 3)])
def test_invalid_right_paren(regex: str, pos: int):
    with pytest.raises(InvalidRightParen) as e:
        parser.parse(regex)
    assert e.value.position == pos

@pytest.mark.parametrize("regex,pos,char", [(r"\a", 1, 'a'), (r"ab\.", 3, '.'), ("ab\\", 3, "")])
def test_invalid_escape(regex: str, pos: int, char: str):
    with pytest.raises(InvalidEscape) as e:
        parser.parse(regex)
    assert e.value.position == pos
    assert e.value.char == char

@pytest.mark.parametrize("regex", ["", "()", "(())"])
def test_empty(regex: str):
    with pytest.raises(Empty):
        parser.parse(regex)

def test_error_message():
    with pytest.raises(InvalidEscape, match=r"invalid escape: pos = 1, char = 'a'"):
        parser.parse(r"\a")

@pytest.mark.parametrize("regex", ["a(bc)+|c(def)*", "x?y|z", "(a|b|c)+d"])
def test_parse_is_deterministic(regex: str):
    assert parser.parse(regex) == parser.parse(regex)

def test_render():
    assert render(parser.parse("a(b|c)*")) == '\n'.join([
        "Seq",
        "  Char 'a'",
        "  Star",
        "    Or",
        "      Seq",
        "        Char 'b'",
        "      Seq",
        "        Char 'c'",
    ])
