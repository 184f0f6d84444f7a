# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import freqdist
from freqdist import CountOverflow, FrequencyDistribution, MAX_COUNT, MutatedDuringIteration
from utest import utest, utest_val


utest_val(True, isinstance(freqdist.__version__, str), 'version is a string')
utest_val(2**64 - 1, MAX_COUNT, 'default counter width')
utest_val(True, issubclass(CountOverflow, OverflowError), 'CountOverflow is an OverflowError')
utest_val(True, issubclass(MutatedDuringIteration, RuntimeError), 'MutatedDuringIteration is a RuntimeError')

utest(FrequencyDistribution({'a': 1}), freqdist.FrequencyDistribution.from_keys, ['a'])
utest_val(('k',), CountOverflow(key='k', count=0, increment=2, max_count=1).args, 'overflow args hold the key')
