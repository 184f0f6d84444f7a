# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from os import makedirs
from os.path import join as path_join
from tempfile import TemporaryDirectory

from utest import _compare_exceptions, _unique_set, utest, utest_call, utest_exc, utest_seq, utest_set
from utest.__main__ import walk_ut_files


utest_set([1, 2, 3], lambda: [3, 1, 2])
utest_set([], list)
utest_seq([1, 2], iter, [1, 2])

utest({1, 2}, _unique_set, [2, 1])
utest_exc(ValueError, _unique_set, [1, 1])

utest(True, _compare_exceptions, KeyError('k'), KeyError('k'))
utest(False, _compare_exceptions, KeyError('k'), KeyError('j'))
utest(True, _compare_exceptions, LookupError, KeyError('k'))
utest(True, _compare_exceptions, "KeyError('k')", KeyError('k'))


def lazy_failure():
  yield 1
  raise ValueError('lazy')

utest_exc(ValueError('lazy'), lazy_failure)


@utest_call
def test_walk_ut_files():
  with TemporaryDirectory() as dir:
    makedirs(path_join(dir, 'b'))
    makedirs(path_join(dir, 'a'))
    for name in ['a/x.ut.py', 'a/helper.py', 'b/y.ut.py', 'z.ut.py']:
      open(path_join(dir, name), 'w').close()
    utest_seq([path_join(dir, p) for p in ['z.ut.py', 'a/x.ut.py', 'b/y.ut.py']], walk_ut_files, [dir])
    utest_seq([path_join(dir, 'a/helper.py')], walk_ut_files, [path_join(dir, 'a/helper.py')])
