# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from types import TracebackType
from typing import Iterable, Mapping, Tuple, Type, Union


DotValue = Union[int, float, str]
DotAttrs = Mapping[str,DotValue]

DotEdge = Union[Tuple[str,str], Tuple[str,str,DotAttrs]]
DotEdges = Iterable[DotEdge]

# Used when defining `__exit__`.
OptTypeBaseExc = Type[BaseException]|None
OptBaseExc = BaseException|None
OptTraceback = TracebackType|None
