from schedkit.adt import do_nothing


def test_do_nothing_returns_none():
    assert do_nothing(object()) is None


def test_do_nothing_leaves_value_untouched():
    items = [1, 2, 3]
    do_nothing(items)
    assert items == [1, 2, 3]


def test_do_nothing_accepts_none():
    assert do_nothing(None) is None