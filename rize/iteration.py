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

"""Helpers for working with dictionaries and sequences.

Functions that transform a collection take the transforming function first
and the collection(s) after it, the same as :func:`map`.
"""

import itertools as _itertools
import logging as _logging
import toolz as _toolz

_log = _logging.getLogger(__name__)


class _Undefined:
    """A default parameter value that a user could never pass in."""


class UnequalLengthError(ValueError):
    """Raised when sequences that must be iterated together differ in length."""


def hmap(f, d):
    """Maps over the keys and values of a dictionary.

    Args:
        f: A function, ``f(key, value) -> (new_key, new_value)``.
        d: A dictionary.

    Returns:
        A new dictionary built from the pairs returned by `f`.

    Example:
        >>> hmap(lambda k, v: (str(k), v + 1), {1: 1, 2: 2})
        {'1': 2, '2': 3}
    """
    return _toolz.itemmap(lambda item: f(*item), d)


def hkeymap(f, d):
    """Returns a new dictionary with `f` applied to each key of `d`."""
    return _toolz.keymap(f, d)


def hvalmap(f, d):
    """Returns a new dictionary with `f` applied to each value of `d`."""
    return _toolz.valmap(f, d)


def hd(coll):
    """Returns the first element of `coll` or None if it's empty."""
    return next(iter(coll), None)


def tl(coll):
    """Returns a list of every element of `coll` but the first."""
    return list(_toolz.drop(1, coll))


def frequencies(f, coll=_Undefined):
    """
    frequencies(f, coll) -> dict
    *frequencies(coll) -> dict*

    Counts how many elements of `coll` produce each result of `f`.

    Args:
        f: An optional function, ``f(element) -> key``. If omitted, elements
            are counted as they are.
        coll: An iterable.

    Returns:
        A dictionary that maps each key to the number of elements that
        produced it.

    Example:
        >>> frequencies(lambda x: x % 2 == 0, [1, 2, 3, 1])
        {False: 3, True: 1}
    """
    if coll is _Undefined:
        return _toolz.frequencies(f)
    return _toolz.countby(f, coll)


def _check_lengths(seqs):
    if not seqs:
        return
    expected_length = len(seqs[0])
    if any(len(seq) != expected_length for seq in seqs):
        _log.debug('rejecting sequences of lengths %s',
                   [len(seq) for seq in seqs])
        raise UnequalLengthError(
            f'Expected all inputs to be of length {expected_length}')


def map_n(f, *seqs):
    """Maps over several sequences together.

    Returns ``[f(a1, b1, c1), f(a2, b2, c2), ...]`` for sequences
    ``[a1, a2, ...]``, ``[b1, b2, ...]``, and ``[c1, c2, ...]``.

    Args:
        f: A function accepting one argument per sequence.
        seqs: Sequences of equal length.

    Raises:
        UnequalLengthError: If the sequences differ in length. `f` is not
            called in that case.
    """
    _check_lengths(seqs)
    return [f(*vals) for vals in zip(*seqs)]


def each_n(f, *seqs):
    """Calls ``f(a1, b1, ...)``, then ``f(a2, b2, ...)``, etc. for side effects.

    The same as :func:`map_n` except the results of `f` are discarded.

    Returns:
        The rows that were passed to `f`, as a list of tuples. For example,
        ``[(a1, b1), (a2, b2)]`` for sequences ``[a1, a2]`` and ``[b1, b2]``.

    Raises:
        UnequalLengthError: If the sequences differ in length. `f` is not
            called in that case.
    """
    _check_lengths(seqs)
    rows = list(zip(*seqs))
    for vals in rows:
        f(*vals)
    return rows


def repeat(f, n):
    """Returns a list of the results of calling ``f()`` `n` times."""
    return [f() for _ in range(n)]


def lazy_repeat(f):
    """Returns an infinite iterator that calls ``f()`` each time it's advanced.

    Example:
        >>> import itertools, random
        >>> a, b, c = itertools.islice(lazy_repeat(random.random), 3)
    """
    return (f() for _ in _itertools.count())


def _is_nested(x):
    return isinstance(x, (list, tuple))


def _flatten(coll):
    for x in coll:
        if _is_nested(x):
            yield from _flatten(x)
        else:
            yield x


def flatter_map(f, coll):
    """Flattens `coll` completely, then maps `f` over it and concatenates.

    Lists and tuples nested at any depth within `coll` are flattened before
    `f` is applied. If `f` returns a list or tuple, its elements are spliced
    into the result (one level only).

    Example:
        >>> flatter_map(lambda x: [x, x * 10], [1, [2, [3]]])
        [1, 10, 2, 20, 3, 30]
    """
    return list(_toolz.concat(ret if _is_nested(ret) else (ret,)
                              for ret in map(f, _flatten(coll))))
