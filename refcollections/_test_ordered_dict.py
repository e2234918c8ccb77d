
import pytest
import random

random.seed(0)
keys = list(range(30))

from .ordered_dict import ArrayOrderedDictionary


def random_operation():
    k = random.choice(keys)
    v = random.random()

    def delete(d):
        try:
            del d[k]
        except KeyError:
            return False
        else:
            return True

    def set(d):
        d[k] = v

    def get(d):
        try:
            return d[k]
        except KeyError:
            return None

    def update(d):
        if isinstance(d, ArrayOrderedDictionary):
            return d.update_value(v, k)
        old = d.get(k)
        d[k] = v
        return old

    def pop_first(d):
        if isinstance(d, ArrayOrderedDictionary):
            return d.pop_first()
        for key in d:
            return key, d.pop(key)
        return None

    return random.choice([delete, set, get, update, pop_first])

@pytest.fixture
def random_operations():
    return [random_operation() for _ in range(500)]


def test_ops(random_operations):
    # dict keeps insertion order too, which makes it an exact reference.
    ref = {}
    dut = ArrayOrderedDictionary()

    for o in random_operations:
        assert list(dut.items()) == list(ref.items())
        r = o(dut)
        s = o(ref)
        assert r == s

    assert list(dut.items()) == list(ref.items())


def test_merge_matches_dict_update(random_operations):
    ref = {}
    dut = ArrayOrderedDictionary()
    for o in random_operations[:250]:
        o(ref)
        o(dut)

    other = {random.choice(keys): random.random() for _ in range(20)}
    ref.update(other)
    dut.merge(other, lambda old, new: new)

    assert list(dut.items()) == list(ref.items())
