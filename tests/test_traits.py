import pytest

from exerunner.exercises.traits import (
    Licensed,
    OtherSoftware,
    OtherStruct,
    SomeSoftware,
    SomeStruct,
    append_bar,
    compare_license_types,
    some_func,
)


def test_is_foo_bar():
    assert append_bar("Foo") == "FooBar"


def test_is_bar_bar():
    assert append_bar(append_bar("")) == "BarBar"


def test_is_vec_pop_eq_bar():
    foo = append_bar(["Foo"])
    assert foo.pop() == "Bar"
    assert foo.pop() == "Foo"


def test_append_bar_leaves_original_list_alone():
    original = ["Foo"]
    result = append_bar(original)
    assert original == ["Foo"]
    assert result == ["Foo", "Bar"]


def test_append_bar_rejects_other_types():
    with pytest.raises(TypeError):
        append_bar(42)


def test_is_licensing_info_the_same():
    licensing_info = "Some information"
    some_software = SomeSoftware(version_number=1)
    other_software = OtherSoftware(version_number="v2.0.0")
    assert some_software.licensing_info() == licensing_info
    assert other_software.licensing_info() == licensing_info


def test_base_licensing_info():
    assert Licensed().licensing_info() == "Some information"


def test_compare_license_information():
    assert compare_license_types(SomeSoftware(1), OtherSoftware("v2.0.0")) is True


def test_compare_license_information_backwards():
    assert compare_license_types(OtherSoftware("v2.0.0"), SomeSoftware(1)) is True


class _Different(Licensed):
    def licensing_info(self) -> str:
        return "other terms"


def test_compare_license_types_detects_difference():
    assert compare_license_types(SomeSoftware(1), _Different()) is False


@pytest.mark.parametrize("item", [SomeStruct(), OtherStruct()])
def test_some_func(item):
    assert some_func(item) is True