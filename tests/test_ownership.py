import pytest

from rustlings.lessons.ownership import (
    add_through_references,
    append_bar,
    fill_vec,
    new_filled_vec,
)


def test_fill_empty_vec():
    assert fill_vec([]) == [22, 44, 66]


def test_fill_vec_leaves_original_alone():
    vec0 = []
    vec1 = fill_vec(vec0)
    vec1.append(88)
    assert vec0 == []
    assert vec1 == [22, 44, 66, 88]


def test_fill_vec_keeps_existing_values_first():
    result = fill_vec([7])
    assert result[0] == 7
    assert result[1:] == [22, 44, 66]


def test_new_filled_vec():
    assert new_filled_vec() == [22, 44, 66]
    assert new_filled_vec() is not new_filled_vec()


def test_add_through_references():
    assert add_through_references(100) == 1200


def test_is_foo_bar():
    assert append_bar("Foo") == "FooBar"


def test_is_bar_bar():
    assert append_bar(append_bar("")) == "BarBar"


def test_is_vec_pop_eq_bar():
    foo = append_bar(["Foo"])
    assert foo.pop() == "Bar"
    assert foo.pop() == "Foo"
    assert foo == []


def test_append_bar_does_not_change_input_list():
    original = ["Foo"]
    append_bar(original)
    assert original == ["Foo"]


def test_append_bar_rejects_other_types():
    with pytest.raises(TypeError):
        append_bar(42)