'''
Capability base classes for "any array" and "any dictionary".

Generic code that only needs a count, an emptiness test and type-erased
element access can accept an `AnyArray` or `AnyDictionary` without caring
which concrete container, or which semantics, it was handed. Conformance is
nominal: a container has these capabilities because it subclasses them.
'''

import collections.abc
import logging

from .util import sentinel
from .core.errors import KeyCastError, IndexOutOfRangeError
from .index import Index, Element
from . import compare


class AnyArray(collections.abc.Sequence):
    __slots__ = ()

    element_type = object

    @property
    def count(self):
        return len(self)

    @property
    def is_empty(self):
        return len(self) == 0

    def item_at(self, index):
        return self[index]

    def equivalent(self, other):
        return compare.equivalent(self, other)


class MutableAnyArray(AnyArray, collections.abc.MutableSequence):
    __slots__ = ()

    def remove_at(self, index):
        '''
        Remove and return the element at `index`.
        '''
        return self.pop(index)

    def remove_all(self, keep_capacity=False):
        self.clear()


class AnyDictionary(collections.abc.Mapping):
    '''
    A mapping that also exposes positional access to its ``(key, value)``
    pairs in iteration order.

    Subclasses may declare `key_type` and `value_type` to have
    `item_for_key` reject keys of the wrong type.
    '''
    __slots__ = ()

    #: Set on dictionaries whose iteration order is part of their value.
    is_ordered = False

    key_type = object
    value_type = object

    @property
    def count(self):
        return len(self)

    @property
    def is_empty(self):
        return len(self) == 0

    @property
    def element_type(self):
        return Element

    @property
    def first(self):
        for key, value in self.items():
            return Element(key, value)
        return None

    def item_at(self, index):
        for i, (key, value) in enumerate(self.items()):
            if i == index:
                return Element(key, value)
        raise IndexOutOfRangeError(index, len(self))

    def item_for_key(self, key):
        if not isinstance(key, self.key_type):
            raise KeyCastError(key, self.key_type)
        return self.get(key)

    def index_for_key(self, key):
        for i, k in enumerate(self):
            if k == key:
                return Index(i)
        return None

    def equivalent(self, other):
        return compare.equivalent(self, other)

    def __eq__(self, other):
        if not isinstance(other, collections.abc.Mapping):
            return NotImplemented
        return compare.equal(self, other)

    __hash__ = None


def pairs_of(source):
    '''
    Iterate over ``(key, value)`` pairs of a mapping, or of an iterable
    that already yields pairs.
    '''
    if isinstance(source, collections.abc.Mapping):
        return iter(source.items())
    else:
        return iter(source)


class MutableAnyDictionary(AnyDictionary, collections.abc.MutableMapping):
    '''
    Dictionary operations built from the mapping primitives. Concrete
    dictionaries override the ones they can do in a single pass.
    '''
    __slots__ = ()

    @classmethod
    def from_pairs(cls, pairs, combine, **kw):
        '''
        Build a dictionary from possibly duplicated pairs, resolving each
        duplicate left to right with ``combine(existing, incoming)``.
        '''
        result = cls(**kw)
        result.merge(pairs, combine)
        return result

    def _new_like(self):
        return type(self)()

    def update_value(self, value, key):
        '''
        Set the value for `key` and return the value it replaced, or None
        if the key was newly inserted.
        '''
        old = self.get(key, sentinel)
        self[key] = value
        return None if old is sentinel else old

    def remove_value(self, key):
        return self.pop(key, None)

    def remove_at(self, index):
        key, value = self.item_at(index.offset)
        del self[key]
        return Element(key, value)

    def remove_all(self, keep_capacity=False):
        self.clear()

    def pop_first(self):
        for key in self:
            value = self[key]
            del self[key]
            return Element(key, value)
        return None

    def set(self, key, value):
        '''
        Assign `value` to `key`, or remove `key` when `value` is None.
        '''
        if value is None:
            self.pop(key, None)
        else:
            self[key] = value

    def merge(self, other, combine):
        '''
        Merge the pairs of `other` into this dictionary in `other`'s
        iteration order. Keys already present get
        ``combine(existing, incoming)``.

        The merge is not atomic: if `combine` raises, the pairs merged
        before the failure remain applied.
        '''
        count = 0
        for key, value in pairs_of(other):
            existing = self.get(key, sentinel)
            if existing is sentinel:
                self[key] = value
            else:
                try:
                    self[key] = combine(existing, value)
                except Exception:
                    logging.debug('merge stopped at key %r after %d pair(s)', key, count)
                    raise
            count += 1

    def merging(self, other, combine):
        result = self.copy()
        result.merge(other, combine)
        return result

    def filter(self, predicate):
        result = self._new_like()
        for key, value in self.items():
            if predicate(Element(key, value)):
                result[key] = value
        return result

    def map_values(self, transform):
        pairs = [(key, transform(value)) for (key, value) in self.items()]
        result = self._new_like()
        result.value_type = object
        for key, value in pairs:
            result[key] = value
        return result
