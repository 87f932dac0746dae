import pytest

from exerunner.exercises.options import maybe_icecream


@pytest.mark.parametrize(
    "hour, expected", [(9, 5), (10, 5), (23, 0), (22, 0), (25, None), (0, 5)]
)
def test_check_icecream(hour, expected):
    assert maybe_icecream(hour) == expected


def test_raw_value():
    assert maybe_icecream(12) == 5