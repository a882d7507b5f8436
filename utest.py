'''
utest is a tiny unit testing library.

Each test file is a plain script; failures are printed to stderr as they occur,
and at exit the process status is forced to 1 if any test failed.
'''


import atexit as _atexit
import inspect as _inspect
from io import StringIO as _StringIO
from os.path import basename as _basename
from sys import stderr as _stderr
from traceback import print_exception as _print_exception


__all__ = [
  'utest',
  'utest_exc',
  'utest_text',
  'utest_val',
]


_utest_test_count = 0
_utest_failure_count = 0


def utest(exp, fn, *args, _utest_depth=0, **kwargs):
  '''
  Invoke `fn` with `args` and `kwargs`.
  Log a test failure if an exception is raised or the returned value does not equal `exp`.
  '''
  global _utest_test_count
  _utest_test_count += 1
  try: ret = fn(*args, **kwargs)
  except BaseException as exc:
    _utest_failure(_utest_depth, exp_label='value', exp=exp, exc=exc, subj=fn, args=args, kwargs=kwargs)
  else:
    if exp != ret:
      _utest_failure(_utest_depth, exp_label='value', exp=exp, ret_label='value', ret=ret, subj=fn, args=args, kwargs=kwargs)


def utest_exc(exp_exc, fn, *args, _utest_depth=0, **kwargs):
  '''
  Invoke `fn` with `args` and `kwargs`.
  Log a test failure if an exception is not raised or if the raised exception type and args do not match `exp_exc`.
  '''
  global _utest_test_count
  _utest_test_count += 1
  try: ret = fn(*args, **kwargs)
  except BaseException as exc:
    if not _compare_exceptions(exp_exc, exc):
      _utest_failure(_utest_depth, exp_label='exception', exp=exp_exc, exc=exc, subj=fn, args=args, kwargs=kwargs)
  else:
    _utest_failure(_utest_depth, exp_label='exception', exp=exp_exc, ret_label='value', ret=ret, subj=fn, args=args, kwargs=kwargs)


def utest_text(exp_text, fn, *args, _utest_depth=0, **kwargs):
  '''
  Invoke `fn` with a fresh StringIO as the first argument, followed by `args` and `kwargs`.
  Log a test failure if an exception is raised or the text written to the StringIO does not equal `exp_text`.
  '''
  global _utest_test_count
  _utest_test_count += 1
  buffer = _StringIO()
  try: fn(buffer, *args, **kwargs)
  except BaseException as exc:
    _utest_failure(_utest_depth, exp_label='text', exp=exp_text, exc=exc, subj=fn, args=args, kwargs=kwargs)
    return
  text = buffer.getvalue()
  if exp_text != text:
    _utest_failure(_utest_depth, exp_label='text', exp=exp_text, ret_label='text', ret=text, subj=fn, args=args, kwargs=kwargs)


def utest_val(exp_val, act_val, desc='<value>'):
  '''
  Log a test failure if `exp_val` does not equal `act_val`.
  Describe the test with the optional `desc`.
  '''
  global _utest_test_count
  _utest_test_count += 1
  if exp_val != act_val:
    _utest_failure(depth=0, exp_label='value', exp=exp_val, ret_label='value', ret=act_val, subj=repr(desc))


def _utest_failure(depth, exp_label, exp, ret_label=None, ret=None, exc=None, subj=None, args=(), kwargs={}):
  global _utest_failure_count
  assert subj is not None
  _utest_failure_count += 1
  frame_record = _inspect.stack()[2 + depth] # caller of caller.
  info = _inspect.getframeinfo(frame_record[0])
  try: name = subj.__qualname__
  except AttributeError: name = str(subj)
  _errL(f'{_basename(info.filename)}:{info.lineno}: utest failure: {name}')
  for i, el in enumerate(args):
    _errL(f'  arg {i} = {el!r}')
  for key, val in kwargs.items():
    _errL(f'  arg {key} = {val!r}')
  _errL(f'  expected {exp_label}: {exp!r}')
  if ret_label: # unexpected value.
    _errL(f'  returned {ret_label}: {ret!r}')
  if exc is not None: # unexpected exception.
    _errL(f'  raised exception:   {exc!r}')
    _print_exception(exc, file=_stderr)
  _errL()


def _compare_exceptions(exp, act):
  '''
  Compare two exceptions for approximate value equality.
  * if `exp` is a type, then test if `act` is an instance of `exp`.
  * otherwise, compare the types and args of `act` to `exp`.
  '''
  if isinstance(exp, type): return isinstance(act, exp)
  return type(exp) == type(act) and exp.args == act.args


def _errL(*items): print(*items, sep='', file=_stderr)


@_atexit.register
def report():
  'At process exit, if any test failures occured, print a summary and force the process to exit with status code 1.'
  from os import _exit
  if _utest_failure_count > 0:
    _errL(f'\nutest ran: {_utest_test_count}; failed: {_utest_failure_count}')
    _stderr.flush()
    _exit(1) # raising SystemExit has no effect in an atexit handler.
