# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exceptions raised by frequency distributions.
Absence of a key is never an error; lookups and removals of unknown keys return 0.
'''

from typing import Any


class CountOverflow(OverflowError):
  '''
  Raised when adding to or setting a key's count would exceed the distribution's `max_count`.
  Like a KeyError, it is initialized with the offending key as its sole arg;
  the existing count, the attempted increment and the limit are available as attributes.
  '''
  def __init__(self, *, key:Any, count:int, increment:int, max_count:int) -> None:
    self.key = key
    self.count = count
    self.increment = increment
    self.max_count = max_count
    super().__init__(key)

  def __str__(self) -> str:
    return f'count for key {self.key!r} would overflow: {self.count} + {self.increment} > {self.max_count}'


class MutatedDuringIteration(RuntimeError):
  'Raised by a distribution iterator when the distribution was mutated after the iterator was created.'
