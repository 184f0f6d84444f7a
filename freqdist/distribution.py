# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
FrequencyDistribution counts how many times each distinct key has been observed.
For example, how many times each token appears in a piece of text.
'''

from typing import Any, Callable, Hashable, Iterable, Iterator, Mapping, TypeVar

from .exceptions import CountOverflow, MutatedDuringIteration


_K = TypeVar('_K')

KeyFn = Callable[[Any],Hashable]

MAX_COUNT = 2**64 - 1 # The range of an unsigned 64-bit counter.


class FrequencyDistribution(Mapping[_K,int]):
  '''
  A mapping from keys to the number of times each key has been inserted.

  Every key present has a count of at least one; a key whose count is set to zero is removed.
  Looking up or removing a key that was never inserted is not an error; its count is zero.
  The sum of all counts is maintained incrementally, so `total()` is constant time.

  `key` is an optional function that maps each key to the hashable value used for hashing and equality,
  e.g. `str.casefold` to count words case-insensitively.
  The first key inserted for a given canonical value is the one reported by iteration.

  `max_count` bounds the count of any single key;
  an insertion that would exceed it raises `CountOverflow` rather than growing without limit.

  Iteration order is unspecified.
  Mutating the distribution while one of its iterators is in progress is not allowed:
  the next step of that iterator raises `MutatedDuringIteration`.
  The distribution does no locking; concurrent writers must synchronize externally.
  '''

  def __init__(self, pairs:Iterable[tuple[_K,int]]|Mapping[_K,int]=(), *, key:KeyFn|None=None,
   max_count:int=MAX_COUNT) -> None:
    if max_count < 1: raise ValueError(f'max_count must be positive: {max_count!r}')
    self.key = key
    self.max_count = max_count
    self._counts:dict[Hashable,int] = {}
    self._originals:dict[Hashable,_K] = {} # Only populated when `key` is set.
    self._total = 0
    self._mutations = 0
    self.extend(pairs)


  @classmethod
  def from_pairs(cls, pairs:Iterable[tuple[_K,int]]|Mapping[_K,int], *, key:KeyFn|None=None,
   max_count:int=MAX_COUNT) -> 'FrequencyDistribution[_K]':
    'Create a distribution from (key, count) pairs, summing the counts of duplicate keys.'
    return cls(pairs, key=key, max_count=max_count)


  @classmethod
  def from_keys(cls, keys:Iterable[_K], *, key:KeyFn|None=None, max_count:int=MAX_COUNT) -> 'FrequencyDistribution[_K]':
    'Create a distribution by counting each item of `keys` once.'
    fd = cls(key=key, max_count=max_count)
    fd.insert_all(keys)
    return fd


  def __getitem__(self, key:_K) -> int:
    return self._counts.get(self._canon(key), 0)


  def __setitem__(self, key:_K, count:int) -> None:
    self.set(key, count)


  def __delitem__(self, key:_K) -> None:
    self.remove(key)


  def __contains__(self, key:Any) -> bool:
    return self._canon(key) in self._counts


  def __iter__(self) -> Iterator[_K]:
    return (k for k, _ in self.pairs())


  def __len__(self) -> int:
    return len(self._counts)


  def __repr__(self) -> str:
    items = ', '.join(f'{k!r}: {v!r}' for k, v in self.pairs())
    opts = ''
    if self.key is not None: opts += f', key={self.key!r}'
    if self.max_count != MAX_COUNT: opts += f', max_count={self.max_count!r}'
    return f'{type(self).__qualname__}({{{items}}}{opts})'


  def get(self, key:_K, default:int=0) -> int:
    'Return the count for `key`, or `default` (zero) if it has never been inserted.'
    return self._counts.get(self._canon(key), default)


  def contains(self, key:_K) -> bool:
    return self._canon(key) in self._counts


  def distinct_count(self) -> int:
    'The number of distinct keys.'
    return len(self._counts)


  def total(self) -> int:
    'The sum of the counts of all keys.'
    return self._total


  def pairs(self) -> Iterator[tuple[_K,int]]:
    '''
    Return a lazy iterator over (key, count) pairs, in unspecified order.
    The iterator raises `MutatedDuringIteration` if the distribution changes after this call.
    '''
    return self._iter_pairs(self._mutations)


  def _iter_pairs(self, mutations:int) -> Iterator[tuple[_K,int]]:
    it = iter(self._counts.items())
    while True:
      # Check before advancing: the dict iterator fails on its own only when the size changes.
      if self._mutations != mutations:
        raise MutatedDuringIteration(f'{type(self).__qualname__} mutated during iteration')
      try: canon, count = next(it)
      except StopIteration: return
      yield (canon if self.key is None else self._originals[canon]), count


  def insert(self, key:_K, count:int=1) -> int:
    '''
    Add `count` to the count for `key`, inserting the key if it is absent. Return the new count.
    Raise `CountOverflow` if the new count would exceed `max_count`; the distribution is then unchanged.
    '''
    _check_count(count)
    canon = self._canon(key)
    existing = self._counts.get(canon, 0)
    if count == 0: return existing
    new = existing + count
    if new > self.max_count:
      raise CountOverflow(key=key, count=existing, increment=count, max_count=self.max_count)
    if not existing and self.key is not None:
      self._originals[canon] = key
    self._counts[canon] = new
    self._total += count
    self._mutations += 1
    return new


  def insert_all(self, keys:Iterable[_K]) -> None:
    'Insert each item of `keys` once.'
    for key in keys:
      self.insert(key)


  def extend(self, pairs:Iterable[tuple[_K,int]]|Mapping[_K,int]) -> None:
    'Add the count of each (key, count) pair or mapping item.'
    if isinstance(pairs, Mapping): pairs = pairs.items()
    for key, count in pairs:
      self.insert(key, count)


  def set(self, key:_K, count:int) -> int:
    '''
    Set the count for `key`, returning the previous count. Setting a count of zero removes the key.
    Raise `CountOverflow` if `count` exceeds `max_count`.
    '''
    _check_count(count)
    canon = self._canon(key)
    existing = self._counts.get(canon, 0)
    if count > self.max_count:
      raise CountOverflow(key=key, count=existing, increment=count-existing, max_count=self.max_count)
    if count == existing: return existing
    if count == 0: return self._discard(canon)
    if not existing and self.key is not None:
      self._originals[canon] = key
    self._counts[canon] = count
    self._total += count - existing
    self._mutations += 1
    return existing


  def remove(self, key:_K) -> int:
    'Remove `key` regardless of its count. Return the count it held, or zero if it was absent.'
    return self._discard(self._canon(key))


  def clear(self) -> None:
    if not self._counts: return
    self._counts.clear()
    self._originals.clear()
    self._total = 0
    self._mutations += 1


  def copy(self) -> 'FrequencyDistribution[_K]':
    return type(self)(self.pairs(), key=self.key, max_count=self.max_count)


  def _canon(self, key:Any) -> Hashable:
    return key if self.key is None else self.key(key)


  def _discard(self, canon:Hashable) -> int:
    try: count = self._counts.pop(canon)
    except KeyError: return 0
    if self.key is not None: del self._originals[canon]
    self._total -= count
    self._mutations += 1
    return count


def _check_count(count:Any) -> None:
  if not isinstance(count, int): raise TypeError(f'count must be an int: {count!r}')
  if count < 0: raise ValueError(f'count must be non-negative: {count!r}')
