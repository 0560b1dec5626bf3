# classes

class Error(Exception):
  def __init__(self, message):
    super().__init__(message)
    self.__message = self._format_message(message)

  def __str__(self):
    return self.__message

  @staticmethod
  def _format_message(message):
    return "lambda_calculus: " + message


class NotFound(Error):
  """A grammar rule did not match at the current token."""


class InvalidSyntax(Error):
  pass


class EndOfInput(Error):
  def __init__(self, message="End of input."):
    super().__init__(message)


class StepLimitExceeded(Error):
  def __init__(self, max_steps):
    super().__init__("Expression did not converge in {} steps."
                     .format(max_steps))
    self.max_steps = max_steps


## fatal

class FatalError(Exception):
  def __str__(self):
    return Error._format_message(super().__str__())


class UnhandledCharacter(FatalError):
  def __init__(self, character):
    super().__init__("Unhandled character: {!r}".format(character))
    self.character = character
