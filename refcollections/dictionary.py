
from .abc import MutableAnyDictionary, pairs_of
from .core.errors import DuplicateKeyError
from .util import default


class ClassDictionary(MutableAnyDictionary):
    '''
    A `dict` shared by reference.

    Equality with other dictionaries ignores order, so a `ClassDictionary`
    compares equal to any mapping holding the same pairs.
    '''

    __slots__ = '_data', '_capacity', 'key_type', 'value_type'

    def __init__(self, source=None, *, minimum_capacity=0,
                 key_type=None, value_type=None):
        self._data = {}
        self._capacity = minimum_capacity
        self.key_type = default(key_type, object)
        self.value_type = default(value_type, object)
        if source is not None:
            for key, value in pairs_of(source):
                self._data[key] = value

    @classmethod
    def from_unique_pairs(cls, pairs, **kw):
        '''
        :raise DuplicateKeyError: if a key appears more than once.
        '''
        result = cls(**kw)
        for key, value in pairs:
            if key in result._data:
                raise DuplicateKeyError(key)
            result._data[key] = value
        return result

    @classmethod
    def grouping(cls, values, key_for_value, **kw):
        '''
        Group `values` into lists keyed by ``key_for_value(value)``.
        '''
        result = cls(**kw)
        for value in values:
            result._data.setdefault(key_for_value(value), []).append(value)
        return result

    def _new_like(self):
        return type(self)(key_type=self.key_type, value_type=self.value_type)

    def copy(self):
        result = self._new_like()
        result._data = self._data.copy()
        result._capacity = self._capacity
        return result

    def __getitem__(self, key):
        return self._data[key]

    def get(self, key, default=None):
        return self._data.get(key, default)

    def __contains__(self, key):
        return key in self._data

    def __setitem__(self, key, value):
        self._data[key] = value

    def __delitem__(self, key):
        del self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self):
        return len(self._data)

    def items(self):
        return self._data.items()

    def keys(self):
        return self._data.keys()

    def values(self):
        return self._data.values()

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

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self._data)

    def __str__(self):
        return str(self._data)
