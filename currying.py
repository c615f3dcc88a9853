# Currying: a function of many arguments becomes a chain of functions
# of one argument each, so any prefix of the arguments can be bound
# ahead of time (partial application).

from typing import Any, Callable, Tuple

from debugging import IllegalArgumentError

# Types

FI2I = Callable[[int], int]  # int -> int
FI2FI2I = Callable[[int], FI2I]  # int -> (int -> int)


def add(x: int) -> FI2I:
    """I am curried addition. Give me x and I'll give you a FI2I that
    remembers x and adds it to whatever you give it next."""

    def add_x(y: int) -> int:
        """My type is FI2I. I'm a closure over the environment that
        contains the parameter x of add."""
        result_add_x: int = x + y
        return result_add_x

    return add_x


add5: FI2I = add(5)  # partial application: x is bound to 5 for good

# The same thing with no types and no names:
add_λ = lambda x: lambda y: x + y

assert add(5)(3) == add5(3) == add_λ(5)(3) == 8


def curry(f: Callable[..., Any], arity: int = 2) -> Callable[[Any], Any]:
    """Turn a function of 'arity' positional arguments into a chain
    of 'arity' unary functions.
    ex: curry(lambda a, b, c: a * b + c, 3)(6)(7)(0)
    gives: 42
    Arguments collected so far live in a tuple, never in a shared
    list, so each stage of the chain can be reused."""
    if arity < 1:
        raise IllegalArgumentError(
            f'curry: arity must be at least 1, not {arity}.')

    def collect(args: Tuple[Any, ...]) -> Callable[[Any], Any]:
        def stage(arg: Any) -> Any:
            now = args + (arg,)
            if len(now) == arity:
                return f(*now)
            return collect(now)  # recurse: one more argument to go

        return stage

    return collect(())


def uncurry(g: Callable[[Any], Any], arity: int = 2) -> Callable[..., Any]:
    """Inverse of curry: feed the curried g its arguments one at a
    time.
    ex: uncurry(add)(5, 3)
    gives: 8
    """
    if arity < 1:
        raise IllegalArgumentError(
            f'uncurry: arity must be at least 1, not {arity}.')

    def uncurried(*args: Any) -> Any:
        if len(args) != arity:
            raise IllegalArgumentError(
                f"Wrong number of arguments, "
                f"{len(args)} = len({args}), "
                f"passed to uncurried {g}, "
                f"which expects {arity}.")
        ρ = g
        for arg in args:
            ρ = ρ(arg)
        return ρ

    return uncurried


assert curry(lambda x, y: x + y)(5)(3) == uncurry(add)(5, 3) == 8
