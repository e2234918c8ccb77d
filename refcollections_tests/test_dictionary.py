import pytest

from refcollections import (AnyDictionary,
                            ArrayOrderedDictionary,
                            ClassDictionary,
                            DuplicateKeyError,
                            Element,
                            Index,
                            IndexOutOfRangeError,
                            KeyCastError)


@pytest.fixture
def persons():
    return ClassDictionary.from_unique_pairs([('Person A', 1), ('Person B', 9)])


def test_matches_dict(persons):
    matching = {'Person A': 1, 'Person B': 9}

    assert not persons.is_empty
    assert persons.count == len(matching)
    assert persons == matching

    persons.merge({'Person C': 3, 'Person A': 4}, lambda lhs, rhs: lhs)
    matching.setdefault('Person C', 3)
    assert persons == matching

    assert persons.update_value(-1, 'Person E') is None
    assert persons.update_value(-2, 'Person E') == -1
    matching['Person E'] = -2
    assert persons == matching

    persons.remove_all(keep_capacity=True)
    matching.clear()
    assert persons == matching

def test_from_unique_pairs_rejects_duplicates():
    with pytest.raises(DuplicateKeyError):
        ClassDictionary.from_unique_pairs([('a', 1), ('a', 2)])

def test_from_pairs_combines():
    d = ClassDictionary.from_pairs([('a', 1), ('a', 2), ('b', 3)], lambda old, new: old + new)
    assert d == {'a': 3, 'b': 3}

def test_grouping():
    d = ClassDictionary.grouping(['apple', 'avocado', 'banana'], lambda word: word[0])
    assert d == {'a': ['apple', 'avocado'], 'b': ['banana']}

def test_equality_ignores_order():
    d = ClassDictionary({'a': 1, 'b': 2})
    ordered = ArrayOrderedDictionary.from_unique_pairs([('b', 2), ('a', 1)])

    assert d == ordered
    assert ordered == d
    assert d.equivalent(ordered)

def test_set_none_removes(persons):
    persons.set('Person A', None)
    assert 'Person A' not in persons
    persons.set('Person Z', 26)
    assert persons['Person Z'] == 26

def test_remove_value(persons):
    assert persons.remove_value('Person A') == 1
    assert persons.remove_value('Person A') is None

def test_positional_access(persons):
    assert persons.index_for_key('Person B') == Index(1)
    assert persons.index_for_key('Person Q') is None
    assert persons.item_at(0) == ('Person A', 1)
    assert persons.first == ('Person A', 1)
    assert isinstance(persons.item_at(0), Element)
    assert persons.first.key == 'Person A'
    assert persons.item_at(1).value == 9
    assert persons.element_type is Element

    assert persons.remove_at(Index(0)) == ('Person A', 1)
    assert list(persons) == ['Person B']
    with pytest.raises(IndexOutOfRangeError):
        persons.remove_at(Index(4))

def test_pop_first(persons):
    assert persons.pop_first() == ('Person A', 1)
    assert persons.pop_first() == ('Person B', 9)
    assert persons.pop_first() is None

def test_filter_and_map_values(persons):
    filtered = persons.filter(lambda element: element.value > 5)
    assert isinstance(filtered, ClassDictionary)
    assert filtered == {'Person B': 9}

    mapped = persons.map_values(str)
    assert isinstance(mapped, ClassDictionary)
    assert mapped == {'Person A': '1', 'Person B': '9'}

def test_merging_leaves_original(persons):
    merged = persons.merging({'Person A': 2}, lambda lhs, rhs: rhs)
    assert merged['Person A'] == 2
    assert persons['Person A'] == 1

def test_item_for_key_checks_type():
    d = ClassDictionary({1: 'a'}, key_type=int)
    assert isinstance(d, AnyDictionary)
    assert d.item_for_key(1) == 'a'
    with pytest.raises(KeyCastError):
        d.item_for_key('1')

def test_capacity(persons):
    persons.reserve_capacity(10)
    assert persons.capacity == 10
    persons.remove_all()
    assert persons.capacity == 0
    assert ClassDictionary(minimum_capacity=5).capacity == 5

def test_is_shared_by_reference(persons):
    alias = persons
    alias['Person C'] = 3
    assert 'Person C' in persons
    copy = persons.copy()
    copy['Person D'] = 4
    assert 'Person D' not in persons
