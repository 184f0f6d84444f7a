# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from .__about__ import __version__
from .distribution import FrequencyDistribution, MAX_COUNT
from .exceptions import CountOverflow, MutatedDuringIteration
from .logfmt import err_fdist, fdist_logfmt
