# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'Diagnostic printing helpers for command line tools.'

from sys import stderr
from typing import Any


def errSL(*items:Any, flush=False) -> None:
  "Write items to std err; sep=' ', end='\\n'."
  print(*items, sep=' ', end='\n', file=stderr, flush=flush)


def errLoc(path:str, line_num:int, *items:Any) -> None:
  "Write a diagnostic to std err, prefixed with `path:line_num:` (1-based line number)."
  errSL(f'{path}:{line_num}:', *items)
