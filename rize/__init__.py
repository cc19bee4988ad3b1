# Copyright 2019 Jake Magers
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Function combinators and collection helpers."""

import logging as _logging
from .functional import (DC, CallCountError, TooFewCallsError,
                         TooManyCallsError, at_least, at_most, compose,
                         identity, memoize, negate, partial)
from .iteration import (UnequalLengthError, each_n, flatter_map, frequencies,
                        hd, hkeymap, hmap, hvalmap, lazy_repeat, map_n,
                        repeat, tl)

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__all__ = [
    'DC',
    'CallCountError',
    'TooFewCallsError',
    'TooManyCallsError',
    'UnequalLengthError',
    'at_least',
    'at_most',
    'compose',
    'each_n',
    'flatter_map',
    'frequencies',
    'hd',
    'hkeymap',
    'hmap',
    'hvalmap',
    'identity',
    'lazy_repeat',
    'map_n',
    'memoize',
    'negate',
    'partial',
    'repeat',
    'tl',
]
