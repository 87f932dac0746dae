import pytest

from exerunner.exercises.basics import (
    bigger,
    foo_if_fizz,
    is_even,
    sale_price,
    square,
)


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_bigger_with_equal_values():
    assert bigger(7, 7) == 7


@pytest.mark.parametrize(
    "text, expected",
    [("fizz", "foo"), ("fuzz", "bar"), ("literally anything", "baz")],
)
def test_foo_if_fizz(text, expected):
    assert foo_if_fizz(text) == expected


def test_is_true_when_even():
    assert is_even(2) is True


def test_is_false_when_odd():
    assert is_even(5) is False


@pytest.mark.parametrize("price, expected", [(51, 48), (50, 40)])
def test_sale_price(price, expected):
    assert sale_price(price) == expected


def test_square_of_three():
    assert square(3) == 9


def test_square_is_never_negative():
    assert all(square(n) >= 0 for n in range(-20, 21))