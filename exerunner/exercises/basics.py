"""Functions and conditionals: sale prices, squares and simple choices."""


def is_even(num: int) -> bool:
    """True when num is divisible by two."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices get 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """The number multiplied by itself."""
    return num * num


def bigger(a: int, b: int) -> int:
    """The larger of the two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """"foo" for "fizz", "bar" for "fuzz", otherwise "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"