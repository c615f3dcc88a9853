from dataclasses import dataclass
from pprint import pprint
from typing import Any


def ECHO(key: str, x: Any) -> Any:
    """Print {key: x} and hand x back, so I can be wrapped around
    any sub-expression without changing its value. In any Lisp, this
    would be a macro!"""
    print()
    pprint({key: x})
    return x


class IllegalArgumentError(ValueError):
    pass


def TRACE(tag: str, key: str, x: Any) -> Any:
    """ECHO only when tag is 'debug'; otherwise just return x."""
    if tag == 'debug':
        return ECHO(key, x)
    return x


@dataclass
class CallCounter:
    """Count invocations of a recursive function. Hand one of me to
    a function that accepts a 'counter' and read 'calls' afterwards."""
    calls: int = 0

    def tick(self) -> int:
        self.calls += 1
        return self.calls

    def reset(self) -> None:
        self.calls = 0

    def __repr__(self):
        """for the debugger"""
        return f'CallCounter(calls={self.calls})'
