import argparse
import sys

from . import utils
from .error import Error, FatalError
from .expression import normalize
from .parser import Parser
from .tokenizer import Tokenizer
from .utils import debug



# functions

def parse_args(argv=None):
  parser = argparse.ArgumentParser(
      prog="lambda_calculus",
      description="Evaluate untyped lambda calculus, one expression per line.")
  parser.add_argument("-d", "--debug", action="store_true")
  mode = parser.add_mutually_exclusive_group()
  mode.add_argument("-e", "--eval", action="store_true",
                    help="print each expression after one reduction pass")
  mode.add_argument("-n", "--normalize", action="store_true",
                    help="print each expression after reducing it until it "
                         "stops changing")
  parser.add_argument("--max-steps", type=int, default=None,
                      help="give up normalizing after this many passes")
  parser.add_argument("source_file", nargs="?", default=None)
  args = parser.parse_args(argv)

  if args.max_steps is not None and args.max_steps < 0:
    parser.error("--max-steps must not be negative")

  utils.set_debug(args.debug)

  return args


def read_source(source_file):
  if source_file is None:
    return sys.stdin.read()
  with open(source_file, encoding="utf-8") as f:
    return f.read()


def run(source, args):
  for expression in Parser(Tokenizer(source)).parse_all():
    debug("expression parsed:", expression)
    if args.eval:
      expression = expression.eval()
    elif args.normalize:
      expression = normalize(expression, args.max_steps)
    print(expression)



# main routine

def main(argv=None):
  args = parse_args(argv)

  try:
    source = read_source(args.source_file)
  except (OSError, UnicodeDecodeError) as error:
    print("lambda_calculus: {}".format(error), file=sys.stderr)
    return 1
  debug("source loaded:", repr(source))

  try:
    run(source, args)
  except Error as error:
    print(error, file=sys.stderr)
    return 1
  except FatalError as error:
    print(error, file=sys.stderr)
    return 2
  except RecursionError:
    print("lambda_calculus: Expression is nested too deeply.", file=sys.stderr)
    return 1

  return 0
