# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from freqdist.distribution import FrequencyDistribution
from freqdist.logfmt import err_fdist, fdist_logfmt, logfmt, logfmt_escape, logfmt_items, logfmt_key, logfmt_val
from utest import utest


utest('_', logfmt_key, '')
utest('a_b', logfmt_key, 'a b')
utest('a_b_c', logfmt_key, 'a=b"c')
utest('a_b', logfmt_key, 'a\nb')

utest('', logfmt_val, None)
utest('true', logfmt_val, True)
utest('false', logfmt_val, False)
utest('0', logfmt_val, 0)
utest('1', logfmt_val, 1)
utest('1.5', logfmt_val, 1.5)
utest('word', logfmt_val, 'word')

utest('""', logfmt_escape, '')
utest('"a b"', logfmt_escape, 'a b')
utest('"a=b"', logfmt_escape, 'a=b')
utest('say\\"hi\\"', logfmt_escape, 'say"hi"')
utest('a\\nb', logfmt_escape, 'a\nb')

utest('a=1 b=x', logfmt_items, [('a', 1), ('b', 'x')])
utest('a=1 b=x', logfmt_items, {'a': 1, 'b': 'x'})
utest('a=1 b="x y"', logfmt, a=1, b='x y')


utest('distinct=0 total=0', fdist_logfmt, FrequencyDistribution())

utest('label=words distinct=1 total=1 [hello]=1',
  fdist_logfmt, FrequencyDistribution.from_keys(['hello']), label='words')

utest('distinct=1 total=2 [a_b]=2', fdist_logfmt, FrequencyDistribution({'a b': 2}))

utest('distinct=3 total=3 more=3', fdist_logfmt, FrequencyDistribution.from_keys('xyz'), limit=0)


def truncated_tail(fd, limit):
  return fdist_logfmt(fd, limit=limit).split(' ')[2:]

utest(2, len, truncated_tail(FrequencyDistribution.from_keys('xyz'), limit=1))
utest('more=2', lambda: truncated_tail(FrequencyDistribution.from_keys('xyz'), limit=1)[-1])

utest(None, err_fdist, FrequencyDistribution.from_keys('aab'), label='err_fdist')
