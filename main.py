# Three functional idioms, one line of output each:
# currying, memoized recursion, and a Maybe chain.

from currying import add
from maybe import calculate, describe
from memoization import fibonacci

# Demo inputs

ADDEND = 5
AUGEND = 3
FIBONACCI_N = 10
CALCULATE_X = 2  # try 0 for the Absent branch


def main() -> None:
    add_addend = add(ADDEND)  # partially applied
    print(add_addend(AUGEND))  # 8
    print(fibonacci(FIBONACCI_N))  # 55
    print(describe(calculate(CALCULATE_X)))  # Result: 4


if __name__ == '__main__':
    main()
