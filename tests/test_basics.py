import pytest

from rustlings.lessons.basics import (
    bigger,
    calculate_apple_price,
    fizz_if_foo,
    greet,
    is_even,
    ring_calls,
    sale_price,
    square,
    times_two,
)


@pytest.mark.parametrize("apples, price", [(35, 70), (40, 80), (65, 65)])
def test_calculate_apple_price(apples, price):
    assert calculate_apple_price(apples) == price


def test_times_two_positive():
    assert times_two(4) == 8


def test_times_two_negative():
    assert times_two(-4) == -8


def test_greet_world():
    assert greet("world!") == "Hello world!"


def test_greet_goodbye():
    assert greet("goodbye!") == "Hello goodbye!"


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


@pytest.mark.parametrize(
    "word, expected", [("fizz", "foo"), ("fuzz", "bar"), ("literally anything", "baz")]
)
def test_fizz_if_foo(word, expected):
    assert fizz_if_foo(word) == expected


def test_is_true_when_even():
    assert is_even(4) is True


def test_is_false_when_odd():
    assert is_even(5) is False


def test_ring_calls():
    assert ring_calls(3) == [
        "Ring! Call number 1",
        "Ring! Call number 2",
        "Ring! Call number 3",
    ]
    assert ring_calls(0) == []


def test_sale_price():
    assert sale_price(51) == 48
    assert sale_price(50) == 40


def test_square():
    assert square(3) == 9