# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'dotwriter emits Graphviz DOT files one statement per line.'

from .attrs import fmt_dot_attr_bracket, fmt_dot_attrs
from .quote import dot_quote_id, is_regular_dot_id
from .writer import ClosedWriterError, DotWriter, GraphType
