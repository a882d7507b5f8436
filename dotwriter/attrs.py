# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'DOT attribute list formatting.'

from decimal import Decimal
from math import isfinite
from typing import Optional, Union

from .quote import dot_quote_str, is_regular_dot_id
from .typing import DotAttrs, DotValue


always_quoted_attr_keys = frozenset({'label'})


def fmt_dot_num(key:str, val:Union[int,float]) -> str:
  '''
  Format a number as a DOT numeral, which has no exponent form.
  Floats are written positionally from their shortest repr: 1e-05 becomes '0.00001'.
  Raises ValueError for infinities and NaN.
  '''
  if isinstance(val, int): return str(val)
  if not isfinite(val): raise ValueError(f'DOT attribute {key!r} has non-finite value: {val!r}')
  return format(Decimal(repr(val)), 'f')


def fmt_dot_attr_val(key:str, val:DotValue) -> str:
  '''
  Format a single attribute value.
  Numbers are emitted bare.
  Strings are quoted if the key is always quoted, if they contain a space,
  or if they are not otherwise valid as a bare identifier.
  '''
  if isinstance(val, bool): raise TypeError(f'DOT attribute {key!r} has unsupported value type: {val!r}')
  if isinstance(val, (int, float)): return fmt_dot_num(key, val)
  if not isinstance(val, str): raise TypeError(f'DOT attribute {key!r} has unsupported value type: {val!r}')
  if key in always_quoted_attr_keys or ' ' in val or not is_regular_dot_id(val):
    return dot_quote_str(val)
  return val


def fmt_dot_attrs(attrs:DotAttrs) -> str:
  'Format `attrs` as comma-separated `key=value` pairs, in iteration order.'
  return ', '.join(f'{k}={fmt_dot_attr_val(k, v)}' for k, v in attrs.items())


def fmt_dot_attr_bracket(attrs:Optional[DotAttrs]) -> str:
  'Format `attrs` as a bracketed attribute list, or the empty string if there are no attributes.'
  if not attrs: return ''
  return f'[{fmt_dot_attrs(attrs)}]'
