from refcollections import (ArrayOrderedDictionary,
                            ClassArray,
                            ClassDictionary,
                            equal,
                            equivalent)


def test_ordered_dictionaries_compare_by_position():
    ab = ArrayOrderedDictionary.from_unique_pairs([('a', 1), ('b', 2)])
    ba = ArrayOrderedDictionary.from_unique_pairs([('b', 2), ('a', 1)])

    assert not equal(ab, ba)
    assert equivalent(ab, ba)
    assert equal(ab, ab.copy())

def test_unordered_dictionaries_ignore_position():
    ab = ArrayOrderedDictionary.from_unique_pairs([('a', 1), ('b', 2)])
    assert equal(ab, {'b': 2, 'a': 1})
    assert equal(ClassDictionary({'b': 2, 'a': 1}), ab)

def test_dictionaries_with_different_values():
    assert not equivalent({'a': 1}, {'a': 2})
    assert not equivalent({'a': 1}, {'b': 1})
    assert not equivalent({'a': 1}, {'a': 1, 'b': 2})
    assert not equivalent({'a': None}, {'b': None})

def test_arrays():
    assert equal(ClassArray([1, 2]), [1, 2])
    assert equal((1, 2), ClassArray([1, 2]))
    assert not equal([1, 2], [2, 1])
    assert equivalent([1, 2], [2, 1])
    assert not equivalent([1, 2], [1, 2, 3])

def test_mixed_kinds_are_never_equal():
    assert not equal({'a': 1}, ['a'])
    assert not equivalent('ab', ['a', 'b'])
    assert not equal(1, 1)
