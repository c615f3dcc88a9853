# Memoized recursion, by way of Fibonacci:
# F(0) = 0, F(1) = 1, F(n) = F(n - 1) + F(n - 2).

from typing import Callable, Dict, Optional

import numpy

from debugging import CallCounter, IllegalArgumentError

# Types

FI2I = Callable[[int], int]  # int -> int
FI2I2FI2I = Callable[[FI2I], FI2I]  # (int -> int) -> (int -> int)
SQRT_FI2I = Callable[["SQRT_FI2I"], FI2I]  # *a -> (int -> int)
MEMO = Dict[int, int]  # memo table: n -> F(n)


def _check_index(n: int) -> int:
    if n < 0:
        raise IllegalArgumentError(
            f'Fibonacci index must be non-negative, not {n}.')
    return n


def fibonacci_per_call_cache(
        n: int,
        counter: Optional[CallCounter] = None
) -> int:
    """The cache is made fresh on every invocation, recursive ones
    included, so it is always empty when consulted and never hits.
    The recursion stays exponential: 2 F(n + 1) - 1 invocations."""
    _check_index(n)
    if counter is not None:
        counter.tick()
    cache: MEMO = {}  # <~~~ the flaw: one per invocation
    if n in cache:
        return cache[n]
    elif n < 2:
        return n
    else:
        result = (fibonacci_per_call_cache(n - 1, counter) +
                  fibonacci_per_call_cache(n - 2, counter))
        cache[n] = result  # dies with this frame
        return result


def fibonacci(
        n: int,
        memo: Optional[MEMO] = None,
        counter: Optional[CallCounter] = None
) -> int:
    """One memo table for the whole recursive tree, so every distinct
    index is computed at most once. Pass your own 'memo' to keep the
    results around for the next call."""
    _check_index(n)
    memo = {} if memo is None else memo

    def fib(m: int) -> int:
        """My type is FI2I. I call myself by name and share 'memo'
        with every one of my recursive calls."""
        if counter is not None:
            counter.tick()
        if m in memo:
            return memo[m]
        if m < 2:
            return m
        result_fib: int = fib(m - 1) + fib(m - 2)
        memo[m] = result_fib
        return result_fib

    return fib(n)


# Recursion with no self-referencing names at all.
# Note that SQRT_FI2I is a SQRT_FI2I -> FI2I! They're the same type!


def self_apply(g: SQRT_FI2I) -> FI2I:
    """Square the square root of an int->int function by
    self-applying it."""
    result: FI2I = g(g)
    return result


def Y(d: FI2I2FI2I) -> FI2I:
    """I am the Y Combinator of one parameter. Return a FI2I given
    domain code d, which is a FI2I -> FI2I."""

    def lsf(sf: SQRT_FI2I) -> FI2I:
        """My type is SQRT_FI2I -> FI2I, which is SQRT_FI2I."""

        def delayed(m: int) -> int:
            """Delay the square sf(sf) until there is an m."""
            result_delay: int = (sf(sf))(m)
            return result_delay

        result_lsf: FI2I = d(delayed)
        return result_lsf

    result_y: FI2I = self_apply(lsf)
    return result_y


def memo_yc(d: FI2I2FI2I, memo: Optional[MEMO] = None) -> FI2I:
    """Y Combinator whose delayed square looks in the memo table
    before recursing, and writes the answer there afterwards. Any
    domain code of one int parameter comes out memoized."""
    memo = {} if memo is None else memo

    def lsf(sf: SQRT_FI2I) -> FI2I:

        def delayed(m: int) -> int:
            if m not in memo:
                memo[m] = (sf(sf))(m)
            return memo[m]

        return d(delayed)

    return self_apply(lsf)


def fibonacci_domain_code(f: FI2I) -> FI2I:
    """Apply a FI2I fibonacci and return a FI2I."""

    def fn(n: int) -> int:
        """My type is FI2I."""
        _check_index(n)
        return n if n < 2 else f(n - 1) + f(n - 2)

    return fn


fibonacci_slow: FI2I = Y(fibonacci_domain_code)

assert fibonacci_slow(10) == memo_yc(fibonacci_domain_code)(10) == 55


def fibonacci_matrix(n: int) -> int:
    """Closed form by repeated squaring:
    [[1, 1], [1, 0]] ** n == [[F(n+1), F(n)], [F(n), F(n-1)]].
    Object arrays keep Python's exact big ints."""
    _check_index(n)
    ρ = numpy.identity(2, dtype=object)
    q = numpy.array([[1, 1], [1, 0]], dtype=object)
    k = n
    while k:
        if k & 1:
            ρ = numpy.dot(ρ, q)
        q = numpy.dot(q, q)
        k >>= 1
    return int(ρ[0, 1])
