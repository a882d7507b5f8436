# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Write a Graphviz DOT file from a whitespace-separated edge list.

Each line is `SRC DST [KEY=VAL ...]` (an edge) or `ID [KEY=VAL ...]` (a node).
Blank lines and lines starting with '#' are ignored.
Ids are quoted as necessary; attribute values are quoted by the attribute formatter.
'''

from argparse import ArgumentParser
from sys import stdin, stdout
from typing import Dict, Iterable, List, Optional, Tuple

from ..io import errLoc
from ..quote import dot_quote_id
from ..writer import DotWriter, GraphType


rankdirs = ('TB', 'BT', 'LR', 'RL')


def main() -> None:
  parser = ArgumentParser(description='Write a Graphviz DOT file from a whitespace-separated edge list.')
  parser.add_argument('paths', nargs='*', help='Edge list files; reads stdin if none are given.')
  parser.add_argument('-name', default='G', help='Graph name (default: G).')
  parser.add_argument('-undirected', action='store_true', help='Write an undirected graph.')
  parser.add_argument('-strict', action='store_true', help='Write a strict graph, which merges duplicate edges.')
  parser.add_argument('-indent', type=int, default=4, help='Number of spaces to indent each statement (default: 4).')
  parser.add_argument('-rankdir', choices=rankdirs, help='Graph layout direction.')
  parser.add_argument('-out', help='Output path; writes to stdout if omitted.')
  args = parser.parse_args()

  if args.indent < 0: parser.error('-indent must not be negative.')
  if not args.name: parser.error('-name must not be empty.')

  graph_type = GraphType.undirected if args.undirected else GraphType.directed
  error_count = 0
  with DotWriter(args.out or stdout, args.name, graph_type, indent=' '*args.indent, strict=args.strict) as writer:
    if args.rankdir: writer.write_graph_attrs({'rankdir': args.rankdir})
    if args.paths:
      for path in args.paths:
        with open(path) as f:
          error_count += write_edge_list(writer, f, path=path)
    else:
      error_count += write_edge_list(writer, stdin, path='<stdin>')

  if error_count: exit(f'dot-edges: skipped {error_count} malformed line(s).')


def write_edge_list(writer:DotWriter, lines:Iterable[str], path:str) -> int:
  '''
  Write a statement for each edge list line.
  Malformed lines are reported to stderr and skipped.
  Returns the number of malformed lines.
  '''
  error_count = 0
  for line_num, line in enumerate(lines, 1):
    try: parsed = parse_edge_line(line)
    except ValueError as e:
      errLoc(path, line_num, e)
      error_count += 1
      continue
    if parsed is None: continue
    ids, attrs = parsed
    quoted = [dot_quote_id(id) for id in ids]
    if len(quoted) == 1:
      writer.write_node(quoted[0], attrs)
    else:
      writer.write_edge(quoted[0], quoted[1], attrs)
  return error_count


def parse_edge_line(line:str) -> Optional[Tuple[List[str],Dict[str,str]]]:
  '''
  Parse a line into a list of one or two ids and a dictionary of attributes.
  Returns None for blank and comment lines; raises ValueError for malformed lines.
  '''
  words = line.split()
  if not words or words[0].startswith('#'): return None
  ids:List[str] = []
  attrs:Dict[str,str] = {}
  for word in words:
    key, eq, val = word.partition('=')
    if not eq:
      if attrs: raise ValueError(f'expected KEY=VAL attribute; received: {word!r}')
      if len(ids) == 2: raise ValueError(f'too many ids; expected SRC DST; received: {word!r}')
      ids.append(word)
      continue
    if not ids: raise ValueError(f'line must begin with an id; received: {word!r}')
    if not key: raise ValueError(f'attribute is missing a key: {word!r}')
    attrs[key] = val
  return ids, attrs


if __name__ == '__main__': main()
