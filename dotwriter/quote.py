# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
DOT identifier quoting.

According to the Graphviz documentation (https://www.graphviz.org/doc/info/lang.html), an ID is one of:
* any string of alphabetic ([a-zA-Z\\200-\\377]) characters, underscores ('_') or digits ([0-9]), not beginning with a digit;
* a numeral [-]?(.[0-9]+ | [0-9]+(.[0-9]*)? );
* any double-quoted string ("...") possibly containing escaped quotes (\\");
* an HTML string (<...>).

Only the first and third forms are produced here.
The leading-digit rule is not enforced, and numerals and HTML strings are never recognized;
any string that is not a run of identifier characters is emitted as a double-quoted string.

Identifier characters are tested per code point, not per grapheme cluster:
'e\\u0301' (e followed by a combining acute accent) requires quoting, whereas '\\u00e9' does not.
'''

import re


dot_id_char_re = re.compile(r'[_a-zA-Z0-9\x80-\xff]')
dot_regular_id_re = re.compile(r'[_a-zA-Z0-9\x80-\xff]+')


def is_dot_id_char(char:str) -> bool:
  'True if `char` is a single code point that may appear in an unquoted DOT identifier.'
  return len(char) == 1 and dot_id_char_re.fullmatch(char) is not None


def is_regular_dot_id(string:str) -> bool:
  'True if `string` is nonempty and consists solely of identifier characters.'
  return dot_regular_id_re.fullmatch(string) is not None


def dot_escape_quotes(string:str) -> str:
  '''
  Escape every double quote in `string` with a backslash.
  Note that DOT does not treat a double backslash as an escape,
  so a string ending with a backslash cannot be represented as a quoted ID; see `dot_quote_str`.
  '''
  return string.replace('"', '\\"')


def dot_quote_str(string:str) -> str:
  '''
  Escape `string` and wrap it in double quotes.
  Raises ValueError if `string` ends with a backslash, which would escape the closing quote.
  '''
  if string.endswith('\\'): raise ValueError(f'DOT quoted string cannot end with a backslash: {string!r}')
  return f'"{dot_escape_quotes(string)}"'


def dot_quote_id(string:str) -> str:
  '''
  Return `string` unchanged if it is a regular identifier;
  otherwise return it escaped and wrapped in double quotes.
  Raises ValueError for the empty string, and for strings that `dot_quote_str` rejects.
  '''
  if not string: raise ValueError('DOT identifier cannot be empty')
  if is_regular_dot_id(string): return string
  return dot_quote_str(string)
