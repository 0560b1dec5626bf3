from .error import EndOfInput, InvalidSyntax, NotFound
from .expression import (FunctionApplication, LambdaAbstraction, Variable,
                         normalize)
from .scope import ScopeTree
from .tokenizer import TokenKind, Tokenizer
from .utils import debug_parser



# classes

class Parser:
  """
  Recursive descent parser producing one expression per `parse()` call.

  Grammar, where every rule takes the scope its identifiers resolve in:

    expression          := abstraction | application
    application         := atom_or_abstraction atom_or_abstraction*
    atom_or_abstraction := atom | abstraction
    atom                := identifier | "(" expression ")"
    abstraction         := "\\" identifier+ "." expression

  Each expression, and each abstraction used as an application operand,
  opens a child scope, so binders are only visible inside the
  sub-expression that declares them. Rules that do not match raise
  `NotFound`, which the caller turns into trying the next alternative.
  """

  def __init__(self, tokenizer : Tokenizer):
    self.__tokenizer = tokenizer
    if tokenizer.peek().kind == TokenKind.START:
      tokenizer.advance()

  def parse(self):
    self.__skip_newlines()
    if self.__peek().kind == TokenKind.END_OF_INPUT:
      raise EndOfInput()

    self.__scopes = ScopeTree()

    try:
      result = self.expression(ScopeTree.ROOT)
    except NotFound:
      raise InvalidSyntax("Expected an expression but got `{}`."
                          .format(self.__peek())) from None

    if self.__peek().kind not in {TokenKind.NEWLINE, TokenKind.END_OF_INPUT}:
      raise InvalidSyntax("Expected the end of a line but got `{}`."
                          .format(self.__peek()))

    debug_parser(self.__peek(), "top expression parsed.")
    return result

  def parse_all(self):
    while True:
      try:
        yield self.parse()
      except EndOfInput:
        return

  def at_end(self):
    self.__skip_newlines()
    return self.__peek().kind == TokenKind.END_OF_INPUT

  def expression(self, scope):
    scope = self.__scopes.create_child(scope)

    try:
      result = self.abstraction(scope)
    except NotFound:
      result = self.application(scope)

    debug_parser(self.__peek(), "expression parsed.")
    return result

  def application(self, scope):
    result = self.atom_or_abstraction(scope)

    while True:
      try:
        argument = self.atom_or_abstraction(scope)
      except NotFound:
        break
      result = FunctionApplication(result, argument)

    debug_parser(self.__peek(), "application parsed.")
    return result

  def atom_or_abstraction(self, scope):
    try:
      return self.atom(scope)
    except NotFound:
      return self.abstraction(self.__scopes.create_child(scope))

  def atom(self, scope):
    token = self.__tokenizer.expect_identifier()
    if token is not None:
      debug_parser(token, "variable parsed.")
      return Variable(self.__scopes.get_ident(scope, token.text))

    if self.__peek().kind != TokenKind.LEFT_PAREN:
      debug_parser(self.__peek(), "atom failed.")
      raise NotFound("An atom is expected.")
    self.__tokenizer.advance()

    try:
      result = self.expression(scope)
    except NotFound:
      raise InvalidSyntax("Expected an expression after `{}` but got `{}`."
                          .format(TokenKind.LEFT_PAREN, self.__peek())) \
            from None

    if self.__peek().kind != TokenKind.RIGHT_PAREN:
      raise InvalidSyntax("Expected `{}` but got `{}`."
                          .format(TokenKind.RIGHT_PAREN, self.__peek()))
    self.__tokenizer.advance()

    debug_parser(self.__peek(), "bracketed parsed.")
    return result

  def abstraction(self, scope):
    if self.__peek().kind != TokenKind.BACKSLASH:
      debug_parser(self.__peek(), "lambda abstraction failed.")
      raise NotFound("A lambda abstraction is expected.")
    self.__tokenizer.advance()

    names = []
    token = self.__tokenizer.expect_identifier()
    while token is not None:
      if token.text in names:
        raise InvalidSyntax(
            "Identifier, \"{}\" is declared twice in one abstraction."
            .format(token.text))
      names.append(token.text)
      token = self.__tokenizer.expect_identifier()

    if len(names) == 0:
      raise InvalidSyntax("No identifiers found after `{}`, got `{}`."
                          .format(TokenKind.BACKSLASH, self.__peek()))

    if self.__peek().kind != TokenKind.DOT:
      raise InvalidSyntax("Expected `{}` but got `{}`."
                          .format(TokenKind.DOT, self.__peek()))
    self.__tokenizer.advance()

    arguments = [self.__scopes.create_ident(scope, name) for name in names]

    try:
      body = self.expression(scope)
    except NotFound:
      raise InvalidSyntax("Expected an expression after `{}` but got `{}`."
                          .format(TokenKind.DOT, self.__peek())) from None

    debug_parser(self.__peek(), "lambda abstraction parsed.")
    return LambdaAbstraction(arguments, body)

  def __peek(self):
    return self.__tokenizer.peek()

  def __skip_newlines(self):
    while self.__peek().kind == TokenKind.NEWLINE:
      self.__tokenizer.advance()



# functions

def parse(text):
  """Parse `text`, which must hold exactly one expression."""
  parser = Parser(Tokenizer(text))
  result = parser.parse()
  if not parser.at_end():
    raise InvalidSyntax("Extra content follows the first expression.")
  return result


def parse_all(text):
  return list(Parser(Tokenizer(text)).parse_all())


def interpret(text, max_steps=None):
  return [normalize(expression, max_steps)
          for expression in parse_all(text)]
