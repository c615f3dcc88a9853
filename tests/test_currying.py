import numpy
import pytest

from currying import (
    add,
    add5,
    add_λ,
    curry,
    uncurry,
)
from debugging import IllegalArgumentError


class TestAdd:

    def test_add5(self):
        assert 8 == add5(3)

    def test_add_is_addition(self):
        for x in range(-20, 21, 7):
            for y in range(-20, 21, 3):
                assert add(x)(y) == x + y == add_λ(x)(y)

    def test_big_ints(self):
        assert add(2 ** 100)(1) == 2 ** 100 + 1

    def test_partial_reuse(self):
        add_forty = add(40)
        assert [41, 42, 43] == [add_forty(y) for y in [1, 2, 3]]

    def test_numpy_broadcast(self):
        assert numpy.all(
            numpy.array([[8, 9], [10, 11]]) ==
            add(numpy.array([[5, 6], [7, 8]]))(3))


@pytest.fixture
def saxpy():
    yield curry(lambda a, x, y: a * x + y, 3)


class TestCurry:

    def test_two(self):
        assert 8 == curry(lambda x, y: x + y)(5)(3)

    def test_three(self, saxpy):
        assert 42 == saxpy(6)(7)(0)

    def test_stages_reusable(self, saxpy):
        times_six = saxpy(6)
        assert 42 == times_six(7)(0)
        assert 43 == times_six(7)(1)
        assert 13 == times_six(2)(1)

    def test_one(self):
        assert 25 == curry(lambda x: x * x, 1)(5)

    def test_order(self):
        assert 'abc' == curry(lambda a, b, c: a + b + c, 3)('a')('b')('c')

    def test_bad_arity(self):
        with pytest.raises(IllegalArgumentError):
            curry(lambda: 42, 0)


class TestUncurry:

    def test_add(self):
        assert 8 == uncurry(add)(5, 3)

    def test_round_trip(self, saxpy):
        assert 42 == uncurry(saxpy, 3)(6, 7, 0)

    def test_wrong_number_of_arguments(self):
        with pytest.raises(IllegalArgumentError):
            uncurry(add)(5)
        with pytest.raises(IllegalArgumentError):
            uncurry(add)(5, 3, 1)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            uncurry(add, 0)
