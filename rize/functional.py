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

"""Higher-order function combinators.

Every combinator in this module accepts a callable and returns a new callable
that wraps it with some additional behavior. Wrappers only rely on the
calling convention of the functions they wrap, so they compose freely::

    >>> add = partial(memoize(lambda a, b: a + b), DC, 10)
    >>> add(5)
    15

Wrappers that carry state (the cache of :func:`memoize` and the call counter
of :func:`at_least` and :func:`at_most`) own that state privately. Two
wrappers created by separate calls never share it. Each piece of state is
guarded by its own lock so a wrapper may be called from several threads, but
the wrapped function itself is always invoked outside of that lock.
"""

import functools as _functools
import threading as _threading
from numbers import Integral as _Integral
from toolz import identity


class _Undefined:
    """A default parameter value that a user could never pass in."""


class _DontCare:
    """The type of :any:`DC`. Only one instance should ever exist."""

    def __repr__(self):
        return 'DC'


DC = _DontCare()
"""A placeholder for a positional argument to be supplied later.

See :func:`partial`.
"""


class CallCountError(Exception):
    """Base class for errors raised by call-count gated functions.

    Attributes:
        calls: The number of times the wrapper had been called, including the
            call that raised.
        limit: The limit the wrapper was created with.
    """

    _message = 'called {calls} times with a limit of {limit}'

    def __init__(self, calls, limit):
        super().__init__(self._message.format(calls=calls, limit=limit))
        self.calls = calls
        self.limit = limit


class TooFewCallsError(CallCountError):
    """Raised by :func:`at_least` wrappers before their threshold is reached.

    Calling the wrapper again will eventually succeed.
    """

    _message = 'called {calls} times but requires at least {limit}'


class TooManyCallsError(CallCountError):
    """Raised by :func:`at_most` wrappers once their limit is exceeded.

    Every subsequent call to the same wrapper will raise as well.
    """

    _message = 'called {calls} times but allows at most {limit}'


def _arg_key(args, kwargs):
    """Returns a hashable key for a call or None if an argument is unhashable."""
    try:
        key = (args, frozenset(kwargs.items()))
        hash(key)
    except TypeError:
        return None
    return key


def memoize(f):
    """Returns a memoized version of `f`.

    The first call for a given set of arguments invokes `f` and caches its
    result. Every later call with equal arguments returns the cached result
    without invoking `f` again. Arguments are compared by value, and keyword
    arguments are compared regardless of order. Unhashable arguments such as
    lists are supported but are looked up with a linear scan.

    Values that compare equal share a cache entry even when their types
    differ, so calls with ``1``, ``1.0``, and ``True`` all return the result
    cached by whichever of them came first.

    If `f` raises, nothing is cached and the exception propagates, so the next
    call with the same arguments will invoke `f` again.

    The cache is never evicted. The returned function has two extra
    attributes:

    * ``cache_clear()`` drops every cached result.
    * ``cache_size()`` returns the number of cached argument sets.

    Note:
        If two threads make the first call for the same arguments at the same
        time, `f` may run in both. The first result to be stored is the one
        returned from then on.

    Args:
        f: A function to memoize.

    Example:
        >>> def expensive(x):
        ...     print('computing')
        ...     return x
        >>> memoized = memoize(expensive)
        >>> memoized(1)
        computing
        1
        >>> memoized(1)
        1
    """
    cache = {}
    unhashable = []
    lock = _threading.Lock()

    def lookup(key, args, kwargs):
        if key is not None:
            return cache.get(key, _Undefined)
        for cached_args, cached_kwargs, result in unhashable:
            if cached_args == args and cached_kwargs == kwargs:
                return result
        return _Undefined

    def store(key, args, kwargs, result):
        if key is not None:
            cache[key] = result
        else:
            unhashable.append((args, kwargs, result))

    @_functools.wraps(f)
    def wrapper(*args, **kwargs):
        key = _arg_key(args, kwargs)
        with lock:
            result = lookup(key, args, kwargs)
        if result is not _Undefined:
            return result

        result = f(*args, **kwargs)

        with lock:
            existing = lookup(key, args, kwargs)
            if existing is not _Undefined:
                return existing
            store(key, args, kwargs, result)
        return result

    def cache_clear():
        with lock:
            cache.clear()
            unhashable.clear()

    def cache_size():
        with lock:
            return len(cache) + len(unhashable)

    wrapper.cache_clear = cache_clear
    wrapper.cache_size = cache_size
    return wrapper


def partial(f, *args, **kwargs):
    """Returns `f` with some of its arguments already supplied.

    Positional arguments given to :func:`partial` may contain :any:`DC`
    placeholders. When the returned function is called, each placeholder is
    replaced, from left to right, with the next positional argument of that
    call. Positional arguments left over after every placeholder has been
    filled are appended to the end. A placeholder that is never filled is
    passed to `f` as is.

    Keyword arguments are merged, with the keywords of the call taking
    precedence over those given to :func:`partial`.

    No arity checking is done. If the merged arguments don't suit `f`, the
    error raised by `f` propagates.

    The returned function has ``func``, ``args``, and ``keywords``
    attributes, like :func:`functools.partial`.

    Args:
        f: A function.
        args: Positional arguments to prefill. May contain :any:`DC`.
        kwargs: Keyword arguments to prefill.

    Example:
        >>> f = partial(lambda a, b, c: (a - b) * c, DC, 2, 3)
        >>> f(1)
        -3
    """
    @_functools.wraps(f)
    def wrapper(*call_args, **call_kwargs):
        supplied = iter(call_args)
        merged_args = [next(supplied, DC) if arg is DC else arg
                       for arg in args]
        merged_args.extend(supplied)
        return f(*merged_args, **{**kwargs, **call_kwargs})

    wrapper.func = f
    wrapper.args = args
    wrapper.keywords = kwargs
    return wrapper


def compose(*funcs):
    """Returns the composition of `funcs`, applied from right to left.

    ``compose(f, g, h)(*args, **kwargs)`` is equivalent to
    ``f(g(h(*args, **kwargs)))``. Only the rightmost function receives the
    original arguments. Every other function receives the return value of the
    function to its right as its only argument.

    ``compose(f)`` returns `f` itself and ``compose()`` returns
    :func:`identity`.

    Args:
        funcs: Functions to compose.
    """
    if not funcs:
        return identity
    return _functools.reduce(
        lambda f, g: lambda *args, **kwargs: f(g(*args, **kwargs)),
        funcs)


def _call_count_gate(f, n, is_rejected, error):
    if not isinstance(n, _Integral) or n < 0:
        raise ValueError('n must be a non-negative int')
    calls = 0
    lock = _threading.Lock()

    @_functools.wraps(f)
    def wrapper(*args, **kwargs):
        nonlocal calls
        with lock:
            calls += 1
            count = calls
        if is_rejected(count):
            raise error(count, n)
        return f(*args, **kwargs)

    def call_count():
        with lock:
            return calls

    wrapper.call_count = call_count
    return wrapper


def at_least(f, n):
    """Returns a wrapper around `f` that only calls it from the nth call on.

    Every call to the returned function counts, including calls that raise.
    The first ``n - 1`` calls raise :class:`TooFewCallsError` without invoking
    `f`. Every call after that invokes `f` and returns its result.

    The returned function has a ``call_count()`` attribute that returns the
    number of times it has been called. The count can't be reset.

    Args:
        f: A function.
        n: A non-negative int.
    """
    return _call_count_gate(f, n, lambda count: count < n, TooFewCallsError)


def at_most(f, n):
    """Returns a wrapper around `f` that only calls it for the first `n` calls.

    Every call to the returned function counts, including calls that raise.
    The first `n` calls invoke `f` and return its result. Every call after
    that raises :class:`TooManyCallsError` without invoking `f`.

    The returned function has a ``call_count()`` attribute that returns the
    number of times it has been called. The count can't be reset.

    Args:
        f: A function.
        n: A non-negative int.
    """
    return _call_count_gate(f, n, lambda count: count > n, TooManyCallsError)


def negate(f):
    """Returns a function that returns the logical opposite of `f`.

    The return value of `f` is coerced with ``not``, so any falsy value gives
    True and any truthy value gives False. The result is always a bool.
    """
    @_functools.wraps(f)
    def wrapper(*args, **kwargs):
        return not f(*args, **kwargs)
    return wrapper
