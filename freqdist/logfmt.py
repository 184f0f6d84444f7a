# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
A very lightweight implementation of the logfmt logging format,
used to write one-line summaries of frequency distributions to stderr.

The escaping rules defer to the logfmt implementation in Go:
https://pkg.go.dev/github.com/kr/logfmt#section-documentation
'''

from sys import stderr
from typing import Any, Iterable, Mapping

from .distribution import FrequencyDistribution


def logfmt_key(key:str) -> str:
  '''
  Convert a key string into a valid logfmt key.
  The Go spec describes valid keys as: any byte greater than ' ', excluding '=' and '"'.
  Since we are dealing with unicode strings instead of byte strings,
  we instead use a translation table for ASCII and latin-1, based on `isprintable`.
  '''
  if not key: return '_'
  return key.translate(_logfmt_key_trans)


_latin1 = tuple(chr(i) for i in range(256))

_logfmt_key_trans = str.maketrans(dict.fromkeys([c for c in _latin1 if (not c.isprintable() or c in ' "=')], '_'))


def logfmt_val(value:Any) -> str:
  # Bools are tested first because `True == 1` and `False == 0`.
  if value is None: return ''
  if isinstance(value, bool): return 'true' if value else 'false'
  if isinstance(value, (int, float)): return str(value)
  return logfmt_escape(str(value))


def logfmt_escape(value:str) -> str:
  'Escape a string for logfmt.'
  if value == '': return '""'
  value = value.replace('"', '\\"')
  value = value.replace('\n', '\\n')
  if ' ' in value or '=' in value: value = f'"{value}"'
  return value


def logfmt_items(items:Iterable[tuple[str,Any]]|Mapping[str,Any]) -> str:
  'Format an iterable or mapping of parameters into a logfmt string.'
  if isinstance(items, Mapping): items = items.items()
  return ' '.join(f'{logfmt_key(k)}={logfmt_val(v)}' for k, v in items)


def logfmt(**kwargs:Any) -> str:
  'Format a logfmt string from keyword arguments.'
  return logfmt_items(kwargs)


def fdist_logfmt(fd:FrequencyDistribution, label:str|None=None, limit:int=8) -> str:
  '''
  Summarize a distribution as a logfmt line: the optional label, the distinct and total counts,
  then up to `limit` pairs in iteration order, formatted as `[key]=count`.
  If pairs were omitted, the line ends with `more=N`.
  '''
  items:list[tuple[str,Any]] = []
  if label is not None: items.append(('label', label))
  items.append(('distinct', len(fd)))
  items.append(('total', fd.total()))
  for i, (key, count) in enumerate(fd.pairs()):
    if i == limit:
      items.append(('more', len(fd) - limit))
      break
    items.append((f'[{key}]', count))
  return logfmt_items(items)


def err_fdist(fd:FrequencyDistribution, label:str|None=None, limit:int=8) -> None:
  'Write a `fdist_logfmt` summary line to stderr.'
  print(fdist_logfmt(fd, label=label, limit=limit), file=stderr)
