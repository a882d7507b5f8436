# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Sequential writer for Graphviz DOT files.
Every statement is emitted on a single line, in call order.
'''

from enum import Enum
from os import PathLike
from typing import Optional, TextIO, Union

from .attrs import fmt_dot_attr_bracket, fmt_dot_attr_val
from .quote import dot_quote_id
from .typing import DotAttrs, DotEdges, OptBaseExc, OptTraceback, OptTypeBaseExc


class GraphType(Enum):
  'Type of the graph: directed or undirected.'
  undirected = 'undirected'
  directed = 'directed'

  @property
  def keyword(self) -> str:
    return 'digraph' if self is GraphType.directed else 'graph'

  @property
  def edge_op(self) -> str:
    return '->' if self is GraphType.directed else '--'


class WriterState(Enum):
  open = 'open'
  closed = 'closed'


class ClosedWriterError(ValueError):
  'Raised when a statement is written to a DotWriter that has already been closed.'


class DotWriter:
  '''
  Generator for `.dot` graph files.

  `file_or_path` is either a path, which the writer opens and closes itself,
  or an open text file, which the writer flushes on close but leaves open.
  The header line is written on construction; `close` writes the closing brace.
  Node and edge ids are written verbatim; use `dot_quote_id` to quote raw names.
  Only the graph name is quoted by the writer.

  The writer is a context manager that closes itself on exit.
  Closing is idempotent; writing any statement after close raises ClosedWriterError.
  '''

  def __init__(self, file_or_path:Union[str,PathLike,TextIO], name:str, type:GraphType=GraphType.directed, *,
   indent:str='    ', strict:bool=False) -> None:
    self._name = name
    self._type = type
    self._quoted_name = dot_quote_id(name) # Validate before the sink is created or truncated.
    self.indent = indent
    self.strict = strict
    self.state = WriterState.open
    if isinstance(file_or_path, (str, PathLike)):
      self.file:TextIO = open(file_or_path, 'w', encoding='utf8')
      self.owns_file = True
    else:
      self.file = file_or_path
      self.owns_file = False
    try: self._write_header()
    except BaseException:
      if self.owns_file: self.file.close()
      raise


  def __repr__(self) -> str:
    return f'{type(self).__name__}(name={self._name!r}, type={self._type}, state={self.state.value})'


  def __enter__(self) -> 'DotWriter':
    return self


  def __exit__(self, exc_type:OptTypeBaseExc, exc_value:OptBaseExc, traceback:OptTraceback) -> None:
    self.close()


  @property
  def name(self) -> str: return self._name

  @property
  def type(self) -> GraphType: return self._type

  @property
  def is_closed(self) -> bool: return self.state is WriterState.closed


  def _check_open(self) -> None:
    if self.state is WriterState.closed:
      raise ClosedWriterError(f'DotWriter for graph {self._name!r} is closed.')


  def write_line(self, line:str) -> None:
    self._check_open()
    self.file.write(line + '\n')


  def _write_header(self) -> None:
    strict = 'strict ' if self.strict else ''
    self.write_line(f'{strict}{self._type.keyword} {self._quoted_name} {{')


  def write_node(self, id:str, attrs:Optional[DotAttrs]=None) -> None:
    'Write a node statement.'
    self.write_line(f'{self.indent}{id}{fmt_dot_attr_bracket(attrs)};')


  def write_edge(self, src:str, dst:str, attrs:Optional[DotAttrs]=None) -> None:
    'Write an edge statement.'
    self.write_line(f'{self.indent}{src} {self._type.edge_op} {dst}{fmt_dot_attr_bracket(attrs)};')


  def write_edges(self, edges:DotEdges) -> None:
    'Write an edge statement for each `(src, dst)` or `(src, dst, attrs)` tuple.'
    self._check_open()
    for edge in edges:
      if len(edge) == 2:
        src, dst = edge # type: ignore[misc]
        self.write_edge(src, dst)
      elif len(edge) == 3:
        src, dst, attrs = edge # type: ignore[misc]
        self.write_edge(src, dst, attrs)
      else:
        raise ValueError(f'edge must be a (src, dst) or (src, dst, attrs) tuple: {edge!r}')


  def write_graph_attrs(self, attrs:DotAttrs) -> None:
    'Write a `key=value;` statement for each graph attribute.'
    self._check_open()
    for k, v in attrs.items():
      self.write_line(f'{self.indent}{k}={fmt_dot_attr_val(k, v)};')


  def write_node_defaults(self, attrs:DotAttrs) -> None:
    'Write a `node[...]` statement setting default node attributes.'
    self._check_open()
    if attrs: self.write_line(f'{self.indent}node{fmt_dot_attr_bracket(attrs)};')


  def write_edge_defaults(self, attrs:DotAttrs) -> None:
    'Write an `edge[...]` statement setting default edge attributes.'
    self._check_open()
    if attrs: self.write_line(f'{self.indent}edge{fmt_dot_attr_bracket(attrs)};')


  def close(self) -> None:
    'Write the closing brace and release the file. Subsequent calls have no effect.'
    if self.state is WriterState.closed: return
    try:
      self.write_line('}')
      self.file.flush()
    finally:
      self._release()


  def _release(self) -> None:
    self.state = WriterState.closed
    if self.owns_file: self.file.close()
