import pytest

from conftest import make_appetizer, make_dessert
from kitchen.bag import Bag


def test_add_and_remove() -> None:
    bag: Bag[str] = Bag()
    assert bag.is_empty()
    assert bag.add("a") and bag.add("b") and bag.add("a")
    assert bag.size() == 3
    assert bag.count("a") == 2
    assert bag.remove("a") is True
    assert bag.count("a") == 1
    assert sorted(bag) == ["a", "b"]
    assert bag.remove("z") is False


def test_capacity() -> None:
    bag: Bag[int] = Bag(capacity=2)
    assert bag.add(1) is True
    assert bag.add(2) is True
    assert bag.add(3) is False
    assert bag.to_list() == [1, 2]
    assert bag.remove(1) is True
    assert bag.add(3) is True


def test_zero_capacity_refuses_everything() -> None:
    assert Bag(capacity=0).add("a") is False


def test_negative_capacity_is_rejected() -> None:
    with pytest.raises(ValueError):
        Bag(capacity=-1)


def test_unique_bag() -> None:
    bag = Bag(unique=True)
    assert bag.add(make_dessert()) is True
    assert bag.add(make_dessert()) is False
    assert bag.add(make_dessert(sweetness_level=1)) is True


def test_dishes_compare_by_value() -> None:
    bag = Bag()
    bag.add(make_appetizer())
    assert make_appetizer() in bag
    assert bag.contains(make_appetizer(spiciness_level=5)) is False
    assert bag.remove(make_appetizer()) is True
    assert bag.is_empty()


def test_clear() -> None:
    bag: Bag[int] = Bag()
    bag.add(1)
    bag.add(2)
    bag.clear()
    assert len(bag) == 0
