import abc
import collections

from .error import StepLimitExceeded
from .utils import debug



# classes

class Identifier(collections.namedtuple("Identifier", ["name", "uniquifier"])):
  """
  A variable name tagged with the uniquifier of the binder it refers to.

  Two identifiers denote the same binding site iff both fields are equal.
  Free variables have uniquifier 0.
  """

  __slots__ = ()

  def __str__(self):
    return "{}_{}".format(self.name, self.uniquifier)


## AST

class AstNode(metaclass=abc.ABCMeta):
  @abc.abstractmethod
  def deep_copy(self):
    return NotImplemented

  @abc.abstractmethod
  def replace(self, target : Identifier, with_):
    """
    Return a copy of this tree with every free occurrence of `target`
    replaced by a fresh copy of `with_`.
    """
    return NotImplemented

  @abc.abstractmethod
  def eval(self):
    """Perform a single reduction pass over this tree."""
    return NotImplemented

  @abc.abstractmethod
  def __str__(self):
    return NotImplemented

  @abc.abstractmethod
  def _fields(self):
    return NotImplemented

  def __eq__(self, other):
    if type(self) is not type(other):
      return NotImplemented
    return self._fields() == other._fields()

  def __hash__(self):
    return hash((type(self).__name__, self._fields()))

  def __repr__(self):
    return "{}({})".format(type(self).__name__,
                           ", ".join(repr(field) for field in self._fields()))

  @staticmethod
  def _bracketed(string):
    return "(" + string + ")"


class Variable(AstNode):
  def __init__(self, identifier : Identifier):
    self.__identifier = identifier

  @property
  def identifier(self):
    return self.__identifier

  def __str__(self):
    return str(self.__identifier)

  def _fields(self):
    return (self.__identifier,)

  def deep_copy(self):
    return Variable(self.__identifier)

  def replace(self, target, with_):
    if self.__identifier == target:
      return with_.deep_copy()
    return self.deep_copy()

  def eval(self):
    return self.deep_copy()


class LambdaAbstraction(AstNode):
  """`\\x1 x2 ... xn. body`, the same as `\\x1. \\x2. ... \\xn. body`."""

  def __init__(self, arguments, body):
    arguments = tuple(arguments)
    if len(arguments) == 0:
      raise ValueError("A lambda abstraction needs at least one argument.")
    if len({argument.name for argument in arguments}) != len(arguments):
      raise ValueError("Arguments of a lambda abstraction must be distinct.")
    self.__arguments = arguments
    self.__body = body

  @property
  def arguments(self):
    return self.__arguments

  @property
  def body(self):
    return self.__body

  def __str__(self):
    return "\\" + " ".join(str(argument) for argument in self.__arguments) \
           + ". " + str(self.__body)

  def _fields(self):
    return (self.__arguments, self.__body)

  def deep_copy(self):
    return LambdaAbstraction(self.__arguments, self.__body.deep_copy())

  def replace(self, target, with_):
    if target in self.__arguments:
      return self.deep_copy()
    return LambdaAbstraction(self.__arguments,
                             self.__body.replace(target, with_))

  def eval(self):
    return LambdaAbstraction(self.__arguments, self.__body.eval())

  def apply(self, argument):
    """Consume the first argument, substituting `argument` for it."""
    body = self.__body.replace(self.__arguments[0], argument)
    if len(self.__arguments) == 1:
      return body
    return LambdaAbstraction(self.__arguments[1:], body)


class FunctionApplication(AstNode):
  def __init__(self, function, argument):
    self.__function = function
    self.__argument = argument

  @property
  def function(self):
    return self.__function

  @property
  def argument(self):
    return self.__argument

  def __str__(self):
    function = str(self.__function)
    if isinstance(self.__function, LambdaAbstraction):
      function = self._bracketed(function)

    argument = str(self.__argument)
    if isinstance(self.__argument, (LambdaAbstraction, FunctionApplication)):
      argument = self._bracketed(argument)

    return function + " " + argument

  def _fields(self):
    return (self.__function, self.__argument)

  def deep_copy(self):
    return FunctionApplication(self.__function.deep_copy(),
                               self.__argument.deep_copy())

  def replace(self, target, with_):
    return FunctionApplication(self.__function.replace(target, with_),
                               self.__argument.replace(target, with_))

  def eval(self):
    # Only a function that is already an abstraction is applied. A function
    # that becomes one during this pass is left for the next.
    if isinstance(self.__function, LambdaAbstraction):
      return self.__function.apply(self.__argument)

    return FunctionApplication(self.__function.eval(),
                               self.__argument.eval())



# functions

def normalize(expression, max_steps=None):
  """
  Evaluate `expression` repeatedly until its rendering stops changing.

  With `max_steps`, give up with `StepLimitExceeded` once that many passes
  have not reached a fixed point. Without it, a divergent term never
  returns.

  This is not a capture-avoiding normalizer. Substitution copies the
  argument along with its binders, so two copies of one abstraction share
  identifiers and a later reduction can capture variables between them.
  """
  steps = 0
  while True:
    result = expression.eval()
    if str(result) == str(expression):
      return result
    if max_steps is not None and steps >= max_steps:
      raise StepLimitExceeded(max_steps)
    steps += 1
    debug("step {}: {}".format(steps, result))
    expression = result
