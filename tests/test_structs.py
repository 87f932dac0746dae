import dataclasses

from exerunner.exercises.structs import (
    ColorClassicStruct,
    ColorTupleStruct,
    UnitLikeStruct,
    create_order_template,
)


def test_classic_c_structs():
    green = ColorClassicStruct(red=0, green=255, blue=0)
    assert green.red == 0
    assert green.green == 255
    assert green.blue == 0


def test_tuple_structs():
    green = ColorTupleStruct(0, 255, 0)
    assert green[0] == 0
    assert green[1] == 255
    assert green[2] == 0


def test_unit_structs():
    message = f"{UnitLikeStruct()!r}s are fun!"
    assert message == "UnitLikeStructs are fun!"


def test_your_order():
    template = create_order_template()
    order = dataclasses.replace(template, name="Hacker in Rust", count=1)
    assert order.name == "Hacker in Rust"
    assert order.year == template.year
    assert order.made_by_phone == template.made_by_phone
    assert order.made_by_mobile == template.made_by_mobile
    assert order.made_by_email == template.made_by_email
    assert order.item_number == template.item_number
    assert order.count == 1


def test_order_template_values():
    template = create_order_template()
    assert (template.name, template.year, template.item_number) == ("Bob", 2019, 123)
    assert template.made_by_email is True
    assert template.count == 0