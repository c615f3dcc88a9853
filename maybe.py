# Maybe: a value that is either Present(value) or Absent. Chained
# computations short-circuit on Absent instead of raising, and Absent
# can never be mistaken for a number.

from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, Generic, TypeVar, Union

from debugging import TRACE

T = TypeVar('T')
U = TypeVar('U')


@dataclass(frozen=True)
class Present(Generic[T]):
    value: T


@dataclass(frozen=True)
class Absent:

    def __repr__(self):
        return 'ABSENT'


ABSENT = Absent()

Maybe = Union[Present[T], Absent]


def bind(m: Maybe, f: Callable[[T], Maybe]) -> Maybe:
    """Monadic bind: feed a present value to f; pass Absent through
    untouched, without calling f."""
    if isinstance(m, Present):
        return f(m.value)
    return m


def fmap(m: Maybe, f: Callable[[T], U]) -> Maybe:
    if isinstance(m, Present):
        return Present(f(m.value))
    return m


def chain(m: Maybe, *fs: Callable[[Any], Maybe]) -> Maybe:
    """bind each f in turn.
    ex: chain(Present(2), lambda x: divide(10, x), lambda y: divide(20, y))
    gives: Present(4.0)
    """
    return reduce(bind, fs, m)


def value_or(m: Maybe, default: T) -> T:
    if isinstance(m, Present):
        return m.value
    return default


def divide(x: float, y: float) -> Maybe:
    """Present(x / y), or Absent when y is zero."""
    if y == 0:
        return ABSENT
    return Present(x / y)


def calculate(x: float, tag: str = None) -> Maybe:
    """divide 10 by x, then 20 by that. Absent at the first step
    skips the second. Pass tag='debug' to see each step."""
    y = TRACE(tag, 'divide(10, x)', divide(10, x))
    if isinstance(y, Present):
        z = TRACE(tag, 'divide(20, y)', divide(20, y.value))
        return z
    return ABSENT


def calculate_bound(x: float) -> Maybe:
    """Same as calculate, written with bind."""
    return bind(divide(10, x),
                lambda y: divide(20, y))


def format_number(v: float) -> str:
    """Integral values without a fractional part (4.0 prints as 4);
    everything else in shortest round-trip form."""
    if isinstance(v, float) and v.is_integer() and abs(v) < 1e16:
        return str(int(v))
    return repr(v)


def describe(m: Maybe) -> str:
    if isinstance(m, Present):
        return f'Result: {format_number(m.value)}'
    return 'Error: Division by zero'


assert describe(calculate(2)) == 'Result: 4'
assert describe(calculate(0)) == 'Error: Division by zero'
