from exerunner.exercises.cons_list import Cons, create_empty_list, create_non_empty_list


def test_create_empty_list():
    assert create_empty_list() is None


def test_create_non_empty_list():
    non_empty = create_non_empty_list()
    assert non_empty != create_empty_list()
    assert isinstance(non_empty, Cons)
    assert len(list(non_empty)) >= 1


def test_iteration_follows_cells():
    cells = Cons(7, Cons(8))
    assert list(cells) == [7, 8]


def test_equal_lists_compare_equal():
    assert Cons(1, Cons(2)) == Cons(1, Cons(2))
    assert Cons(1, Cons(2)) != Cons(1)