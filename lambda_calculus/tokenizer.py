import collections
import enum

from .error import UnhandledCharacter



# constants

SPECIAL_CHARACTERS = {".", "\\", "\n", "(", ")"}
BLANKS = {" ", "\t", "\r"}



# classes

class TokenKind(enum.Enum):
  END_OF_INPUT = "EndOfInput"
  START = "Start"
  BACKSLASH = "Backslash"
  DOT = "Dot"
  IDENTIFIER = "Identifier"
  NEWLINE = "NewLine"
  LEFT_PAREN = "LeftParen"
  RIGHT_PAREN = "RightParen"

  def __str__(self):
    return self.value


_SINGLE_CHARACTER_TOKENS = {
  "\n": TokenKind.NEWLINE,
  "\\": TokenKind.BACKSLASH,
  ".": TokenKind.DOT,
  "(": TokenKind.LEFT_PAREN,
  ")": TokenKind.RIGHT_PAREN,
}


class Token(collections.namedtuple("Token", ["kind", "text"])):
  __slots__ = ()

  def __new__(cls, kind, text=None):
    return super().__new__(cls, kind, text)

  def __str__(self):
    if self.kind == TokenKind.IDENTIFIER:
      return "{}({})".format(self.kind, self.text)
    return str(self.kind)


class Tokenizer:
  """
  Scans source text lazily, keeping a single token of lookahead.

  The lookahead starts out as a START token; the first `advance()` moves it
  onto real content.
  """

  def __init__(self, source : str):
    self.__source = source
    self.__pos = 0
    self.__token = Token(TokenKind.START)

  def peek(self):
    return self.__token

  def advance(self):
    if self.__token.kind == TokenKind.END_OF_INPUT:
      return
    self.__token = self.__scan()

  def expect_identifier(self):
    token = self.__token
    if token.kind != TokenKind.IDENTIFIER:
      return None
    self.advance()
    return token

  def __scan(self):
    self.__skip_blanks()

    if self.__pos >= len(self.__source):
      return Token(TokenKind.END_OF_INPUT)

    character = self.__source[self.__pos]

    if character in _SINGLE_CHARACTER_TOKENS:
      self.__pos += 1
      return Token(_SINGLE_CHARACTER_TOKENS[character])

    if character.isprintable():
      start = self.__pos
      while self.__pos < len(self.__source) \
            and self.__is_identifier_character(self.__source[self.__pos]):
        self.__pos += 1
      return Token(TokenKind.IDENTIFIER, self.__source[start:self.__pos])

    raise UnhandledCharacter(character)

  def __skip_blanks(self):
    while self.__pos < len(self.__source) \
          and self.__source[self.__pos] in BLANKS:
      self.__pos += 1

  @staticmethod
  def __is_identifier_character(character):
    return character.isprintable() \
           and not character.isspace() \
           and character not in SPECIAL_CHARACTERS
