# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from io import StringIO
from os import remove
from os.path import exists, join as path_join
from tempfile import mkstemp, TemporaryDirectory
from typing import TextIO

from dotwriter.writer import ClosedWriterError, DotWriter, GraphType, WriterState
from utest import utest, utest_exc, utest_text, utest_val


utest('digraph', getattr, GraphType.directed, 'keyword')
utest('->', getattr, GraphType.directed, 'edge_op')
utest('graph', getattr, GraphType.undirected, 'keyword')
utest('--', getattr, GraphType.undirected, 'edge_op')


def write_simple(f:TextIO) -> None:
  w = DotWriter(f, 'G', GraphType.directed)
  w.write_node('a')
  w.write_node('b')
  w.write_edge('a', 'b')
  w.close()

utest_text('digraph G {\n    a;\n    b;\n    a -> b;\n}\n', write_simple)


def write_quoted_name(f:TextIO) -> None:
  with DotWriter(f, 'my graph', GraphType.undirected) as w:
    w.write_edge('x', 'y')

utest_text('graph "my graph" {\n    x -- y;\n}\n', write_quoted_name)


def write_attributed(f:TextIO) -> None:
  with DotWriter(f, 'G') as w:
    w.write_node('a', {'label': 'Node A', 'shape': 'box'})
    w.write_node('b', {})
    w.write_edge('a', 'b', {'color': 'red'})
    w.write_edge('b', 'a', None)

utest_text('digraph G {\n    a[label="Node A", shape=box];\n    b;\n    a -> b[color=red];\n    b -> a;\n}\n',
  write_attributed)


def write_ids_verbatim(f:TextIO) -> None:
  with DotWriter(f, 'G') as w:
    w.write_node('"already quoted"')
    w.write_edge('"x y"', 'z')

utest_text('digraph G {\n    "already quoted";\n    "x y" -> z;\n}\n', write_ids_verbatim)


def write_options(f:TextIO) -> None:
  with DotWriter(f, 'deps', strict=True, indent='\t') as w:
    w.write_graph_attrs({'rankdir': 'LR', 'label': 'Deps'})
    w.write_node_defaults({'shape': 'box'})
    w.write_edge_defaults({})
    w.write_edge_defaults({'arrowhead': 'vee'})
    w.write_edges([('a', 'b'), ('b', 'c', {'style': 'dashed'})])

utest_text(
  'strict digraph deps {\n\trankdir=LR;\n\tlabel="Deps";\n\tnode[shape=box];\n\tedge[arrowhead=vee];\n'
  '\ta -> b;\n\tb -> c[style=dashed];\n}\n',
  write_options)


def write_bad_edge(f:TextIO) -> None:
  with DotWriter(f, 'G') as w:
    w.write_edges([('a',)]) # type: ignore[list-item]

utest_exc(ValueError("edge must be a (src, dst) or (src, dst, attrs) tuple: ('a',)"), write_bad_edge, StringIO())


# The graph name must be nonempty.
utest_exc(ValueError('DOT identifier cannot be empty'), DotWriter, StringIO(), '')


# Writing after close fails; closing again does nothing.

closed_buffer = StringIO()
closed = DotWriter(closed_buffer, 'G')
utest_val(False, closed.is_closed, 'new writer is open')
closed.close()
utest_val(True, closed.is_closed, 'writer is closed after close()')
utest_val(WriterState.closed, closed.state, 'closed state')

closed_exc = ClosedWriterError("DotWriter for graph 'G' is closed.")
utest_exc(closed_exc, closed.write_node, 'a')
utest_exc(closed_exc, closed.write_edge, 'a', 'b')
utest_exc(closed_exc, closed.write_edges, [])
utest_exc(closed_exc, closed.write_graph_attrs, {})
utest_exc(closed_exc, closed.write_node_defaults, {})
utest_exc(closed_exc, closed.write_edge_defaults, {})
utest_exc(closed_exc, closed.write_edge_defaults, {'style': 'dashed'})
utest_exc(closed_exc, closed.write_graph_attrs, {'rankdir': 'LR'})
utest_exc(closed_exc, closed.write_node_defaults, {'shape': 'box'})
utest_exc(ValueError, closed.write_line, '}')
utest(None, closed.close)
utest_val('digraph G {\n}\n', closed_buffer.getvalue(), 'closed writer output')
utest_val(False, closed_buffer.closed, 'caller-provided file is left open')


# The context manager closes the writer when the block raises, and the exception propagates.

def raise_inside_block(f:TextIO) -> DotWriter:
  with DotWriter(f, 'G') as w:
    w.write_node('a')
    raise KeyError('boom')

aborted_buffer = StringIO()
utest_exc(KeyError('boom'), raise_inside_block, aborted_buffer)
utest_val('digraph G {\n    a;\n}\n', aborted_buffer.getvalue(), 'aborted writer output')


# A writer constructed from a path owns and closes the file.

fd, tmp_path = mkstemp(suffix='.dot')
open(fd).close()
try:
  with DotWriter(tmp_path, 'caf\xe9 graph', GraphType.undirected) as path_writer:
    path_writer.write_edge('caf\xe9', 'b', {'label': 'Ünïcode'})
  utest_val(True, path_writer.file.closed, 'path writer closes its file')
  with open(tmp_path, encoding='utf8') as f:
    utest_val('graph "caf\xe9 graph" {\n    caf\xe9 -- b[label="Ünïcode"];\n}\n', f.read(), 'path writer output')
finally:
  remove(tmp_path)


# The header is written exactly once, by the constructor; there is no public way to write another.

def write_header_once(f:TextIO) -> None:
  with DotWriter(f, 'G', strict=True) as w:
    w.write_node('a')

utest_text('strict digraph G {\n    a;\n}\n', write_header_once)
utest_val(False, hasattr(DotWriter, 'write_header'), 'DotWriter has no public write_header')


# An invalid graph name is rejected before the output path is created or truncated.

with TemporaryDirectory() as tmp_dir:
  new_path = path_join(tmp_dir, 'new.dot')
  utest_exc(ValueError('DOT identifier cannot be empty'), DotWriter, new_path, '')
  utest_val(False, exists(new_path), 'rejected writer does not create its file')

  existing_path = path_join(tmp_dir, 'existing.dot')
  with open(existing_path, 'w') as f: f.write('digraph old {\n}\n')
  utest_exc(ValueError, DotWriter, existing_path, '')
  with open(existing_path) as f:
    utest_val('digraph old {\n}\n', f.read(), 'rejected writer does not truncate its file')
