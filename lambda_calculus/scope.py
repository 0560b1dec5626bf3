from .expression import Identifier



# classes

class _Scope:
  __slots__ = ("bindings", "parent")

  def __init__(self, parent):
    self.bindings = {}
    self.parent = parent


class ScopeTree:
  """
  Arena of nested binding scopes.

  Scopes are addressed by their index in the arena and point at their
  parent by index. Each scope maps a variable name to the uniquifier of its
  innermost binder; `create_ident` writes only to the scope it is given, so
  a binder is never visible outside the subtree of scopes below it.

  Every binder created through the same chain of scopes gets a uniquifier
  one greater than the closest enclosing binder of that name, which makes
  two same-named binders distinguishable wherever one encloses the other.
  Free variables resolve to uniquifier 0.
  """

  ROOT = 0

  def __init__(self):
    self.__scopes = [_Scope(None)]

  def __len__(self):
    return len(self.__scopes)

  def create_child(self, parent : int):
    self.__check(parent)
    self.__scopes.append(_Scope(parent))
    return len(self.__scopes) - 1

  def parent(self, scope : int):
    self.__check(scope)
    return self.__scopes[scope].parent

  def get_uniquifier(self, scope : int, name : str):
    self.__check(scope)
    while scope is not None:
      record = self.__scopes[scope]
      if name in record.bindings:
        return record.bindings[name]
      scope = record.parent
    return 0

  def create_ident(self, scope : int, name : str):
    uniquifier = self.get_uniquifier(scope, name) + 1
    self.__scopes[scope].bindings[name] = uniquifier
    return Identifier(name, uniquifier)

  def get_ident(self, scope : int, name : str):
    return Identifier(name, self.get_uniquifier(scope, name))

  def __check(self, scope):
    if not 0 <= scope < len(self.__scopes):
      raise IndexError("Unknown scope, {}.".format(scope))
