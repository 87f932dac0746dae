import pytest

from exerunner.exercises.package import Package


def test_fail_creating_weightless_package():
    with pytest.raises(ValueError, match="Can not ship a weightless package."):
        Package("Spain", "Austria", -2210)


def test_zero_weight_rejected():
    with pytest.raises(ValueError):
        Package("Spain", "Austria", 0)


def test_create_international_package():
    package = Package("Spain", "Russia", 1200)
    assert package.is_international() is True


def test_create_local_package():
    package = Package("Canada", "Canada", 1200)
    assert package.is_international() is False


def test_calculate_transport_fees():
    cents_per_gram = 3
    package = Package("Spain", "Spain", 1500)
    assert package.get_fees(cents_per_gram) == 4500
    assert package.get_fees(cents_per_gram * 2) == 9000