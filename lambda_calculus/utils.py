import sys



# constants

DEBUG = False



# functions

def set_debug(flag):
  global DEBUG
  DEBUG = flag


def debug(*messages):
  if DEBUG:
    print(*messages, file=sys.stderr)


def debug_parser(token, *messages):
  if DEBUG:
    print(str(token) + ":", *messages, file=sys.stderr)
