import pytest

from exerunner.exercises.from_into import Person


def test_default():
    person = Person.default()
    assert person.name == "John"
    assert person.age == 30


def test_good_convert():
    person = Person.parse("Mark,20")
    assert person.name == "Mark"
    assert person.age == 20


def test_second_good_convert():
    assert Person.parse("Gerald,70") == Person(name="Gerald", age=70)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "Mark,twenty",
        "Mark",
        "Mark,",
        ",1",
        ",",
        ",one",
        "Mike,32,",
        "Mike,32,man",
    ],
)
def test_bad_input_gives_default(text):
    person = Person.parse(text)
    assert person.name == "John"
    assert person.age == 30


def test_negative_age_gives_default():
    assert Person.parse("Mark,-1") == Person.default()