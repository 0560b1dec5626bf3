from .error import (EndOfInput, Error, FatalError, InvalidSyntax, NotFound,
                    StepLimitExceeded, UnhandledCharacter)
from .expression import (AstNode, FunctionApplication, Identifier,
                         LambdaAbstraction, Variable, normalize)
from .parser import Parser, interpret, parse, parse_all
from .scope import ScopeTree
from .tokenizer import Token, TokenKind, Tokenizer
