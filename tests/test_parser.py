"""Tests for parsing with alpha-renaming of binders."""

import pytest

from lambda_calculus import (EndOfInput, FunctionApplication, Identifier,
                             InvalidSyntax, LambdaAbstraction, Parser,
                             Tokenizer, UnhandledCharacter, Variable,
                             interpret, parse, parse_all)


def _var(name, uniquifier=0):
  return Variable(Identifier(name, uniquifier))


def _abs(names, body, uniquifier=1):
  return LambdaAbstraction([Identifier(name, uniquifier) for name in names],
                           body)


def _canonical(expression, free, binders=()):
  """Render binding structure with de Bruijn indexes."""
  if isinstance(expression, Variable):
    for depth, binder in enumerate(reversed(binders)):
      if binder == expression.identifier:
        return ("bound", depth)
    return ("free", free(expression.identifier))
  if isinstance(expression, LambdaAbstraction):
    return ("lambda", len(expression.arguments),
            _canonical(expression.body, free,
                       binders + expression.arguments))
  return ("apply",
          _canonical(expression.function, free, binders),
          _canonical(expression.argument, free, binders))


class TestParse:
  def test_free_variables(self):
    assert parse("a b c") \
           == FunctionApplication(FunctionApplication(_var("a"), _var("b")),
                                  _var("c"))

  def test_parentheses(self):
    assert parse("f (g h)") \
           == FunctionApplication(_var("f"),
                                  FunctionApplication(_var("g"), _var("h")))

  def test_single_atom(self):
    assert parse("((x))") == _var("x")

  def test_abstraction(self):
    assert parse("\\x y. y x") \
           == _abs(["x", "y"], FunctionApplication(_var("y", 1),
                                                   _var("x", 1)))

  def test_abstraction_body_extends_to_the_end(self):
    assert parse("\\x. x y") \
           == _abs(["x"], FunctionApplication(_var("x", 1), _var("y")))

  def test_applied_abstraction(self):
    assert parse("(\\x. x) y") \
           == FunctionApplication(_abs(["x"], _var("x", 1)), _var("y"))

  def test_abstraction_as_bare_argument(self):
    assert parse("f \\x. x") \
           == FunctionApplication(_var("f"), _abs(["x"], _var("x", 1)))


class TestAlphaRenaming:
  def test_shadowing(self):
    expression = parse("\\x. \\x. x")
    inner = expression.body
    assert expression.arguments == (Identifier("x", 1),)
    assert inner.arguments == (Identifier("x", 2),)
    assert inner.body == _var("x", 2)

  def test_outer_binder_visible_after_inner_one(self):
    assert str(parse("\\x. (\\x. x) x")) == "\\x_1. (\\x_2. x_2) x_1"

  def test_sibling_abstractions(self):
    assert str(parse("(\\x. x) (\\x. x)")) == "(\\x_1. x_1) (\\x_1. x_1)"

  def test_lines_are_resolved_independently(self):
    assert [str(expression) for expression in parse_all("\\x. x\n\\x. x")] \
           == ["\\x_1. x_1", "\\x_1. x_1"]

  @pytest.mark.parametrize("text", [
    "\\x. \\x. x",
    "f \\x. x",
    "(\\x y. y x) (\\z. z) w",
    "a (b c) (\\d. d d) e",
    "\\f. (\\x. f (x x)) (\\x. f (x x))",
    "\\x. (\\x. x) x",
  ])
  def test_rendering_round_trips(self, text):
    expression = parse(text)
    reparsed = parse(str(expression))
    assert _canonical(reparsed, lambda identifier: identifier.name) \
           == _canonical(expression, str)


class TestSyntaxErrors:
  @pytest.mark.parametrize("text, message", [
    ("\\. x", "No identifiers"),
    ("\\x x. x", "declared twice"),
    ("\\x y", "Expected `Dot`"),
    ("\\x.", "after `Dot`"),
    ("(a", "Expected `RightParen`"),
    ("()", "after `LeftParen`"),
    ("a )", "end of a line"),
    (")", "Expected an expression"),
  ])
  def test_invalid_syntax(self, text, message):
    with pytest.raises(InvalidSyntax) as info:
      parse(text)
    assert message in str(info.value)
    assert str(info.value).startswith("lambda_calculus: ")

  def test_extra_expressions(self):
    with pytest.raises(InvalidSyntax):
      parse("a\nb")

  def test_unhandled_character_is_not_a_syntax_error(self):
    with pytest.raises(UnhandledCharacter):
      parse("a \x01")


class TestParser:
  @pytest.mark.parametrize("text", ["", "\n", " \n\t\n\r\n"])
  def test_empty_input_is_end_of_input(self, text):
    with pytest.raises(EndOfInput):
      Parser(Tokenizer(text)).parse()

  def test_one_expression_per_call(self):
    parser = Parser(Tokenizer("a b\n\n\nc\n"))
    assert parser.parse() == FunctionApplication(_var("a"), _var("b"))
    assert parser.parse() == _var("c")
    with pytest.raises(EndOfInput):
      parser.parse()

  def test_parse_all(self):
    assert len(parse_all("a\n\n\\x. x\n(f g)\n")) == 3


class TestInterpret:
  def test_beta_reduction_property(self):
    expression = parse("(\\x. f x x) (g a)")
    abstraction = expression.function
    assert expression.eval() == abstraction.body.replace(
        abstraction.arguments[0], expression.argument)

  def test_multiple_arguments(self):
    expression = parse("(\\x y. x) a b")
    assert expression.eval().eval() == _var("a")
    assert parse("(\\x. \\y. x) a b").eval().eval() == _var("a")

  def test_normalizes_every_line(self):
    assert interpret("(\\x y. x) a b\n(\\f x. f (f x)) (\\y. y) z") \
           == [_var("a"), _var("z")]
