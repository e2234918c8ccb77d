
import collections.abc
import itertools

from .abc import MutableAnyArray
from . import compare


class ClassArray(MutableAnyArray):
    '''
    A list shared by reference. Every holder of a `ClassArray` sees the
    mutations of every other holder; use `copy` for an independent list.
    '''

    __slots__ = '_data', '_capacity'

    def __init__(self, items=()):
        self._data = list(items)
        self._capacity = 0

    @classmethod
    def repeating(cls, value, count):
        return cls(itertools.repeat(value, count))

    def copy(self):
        result = type(self)(self._data)
        result._capacity = self._capacity
        return result

    def __getitem__(self, slice_):
        if isinstance(slice_, slice):
            return type(self)(self._data[slice_])
        return self._data[slice_]

    def __setitem__(self, slice_, value):
        self._data[slice_] = value

    def __delitem__(self, slice_):
        del self._data[slice_]

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        return iter(self._data)

    def __contains__(self, value):
        return value in self._data

    def insert(self, index, object_):
        self._data.insert(index, object_)

    def extend(self, iterable):
        self._data.extend(iterable)

    def replace_range(self, start, stop, items):
        self._data[start:stop] = list(items)

    def clear(self):
        self._data.clear()

    def remove_all(self, keep_capacity=False):
        if keep_capacity:
            self._capacity = self.capacity
        else:
            self._capacity = 0
        self._data.clear()

    @property
    def capacity(self):
        return max(self._capacity, len(self._data))

    def reserve_capacity(self, minimum_capacity):
        self._capacity = max(self._capacity, minimum_capacity)

    def sort(self, *, key=None, reverse=False):
        self._data.sort(key=key, reverse=reverse)

    def __add__(self, other):
        if not isinstance(other, collections.abc.Iterable):
            return NotImplemented
        return type(self)(itertools.chain(self._data, other))

    def __radd__(self, other):
        if not isinstance(other, collections.abc.Iterable):
            return NotImplemented
        return type(self)(itertools.chain(other, self._data))

    def __iadd__(self, other):
        self.extend(other)
        return self

    def __eq__(self, other):
        if (not isinstance(other, collections.abc.Sequence) or
                isinstance(other, (str, bytes, bytearray))):
            return NotImplemented
        return compare.equal(self, other)

    __hash__ = None

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self._data)

    def __str__(self):
        return str(self._data)
