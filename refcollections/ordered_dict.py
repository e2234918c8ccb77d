'''
A dictionary that iterates in insertion order.

`ArrayOrderedDictionary` keeps its pairs in a single list instead of a hash
table. Lookup is a linear scan, which makes it a poor fit for large
dictionaries but gives a deterministic order that survives updates and
removals:

* inserting a new key appends it (it becomes the newest pair),
* assigning to an existing key replaces the value in place,
* removing a key closes the gap without reordering the rest.
'''

import collections.abc
import logging

from .abc import AnyArray, MutableAnyDictionary, pairs_of
from .index import Index, Element
from .core.config import CollectionSettings
from .core.errors import IndexOutOfRangeError, InvalidatedIndexError
from .util import default, quoted, trace


def _view_offset(index, count):
    if isinstance(index, Index):
        offset = index.offset
    else:
        offset = index
        if offset < 0:
            offset += count
    if not 0 <= offset < count:
        raise IndexOutOfRangeError(index, count)
    return offset


class KeysView(AnyArray):
    '''
    The keys of a dictionary, in order, as of the moment the view was taken.
    '''
    __slots__ = '_keys', '_version'

    def __init__(self, keys, version=None):
        self._keys = list(keys)
        self._version = version

    @property
    def start_index(self):
        return Index(0, self._version)

    @property
    def end_index(self):
        return Index(len(self._keys), self._version)

    def index_after(self, index):
        return index.advanced(1)

    def __len__(self):
        return len(self._keys)

    def __getitem__(self, index):
        return self._keys[_view_offset(index, len(self._keys))]

    def __iter__(self):
        return iter(self._keys)

    def __eq__(self, other):
        if not isinstance(other, KeysView):
            return NotImplemented
        return self._keys == other._keys

    __hash__ = None

    def __repr__(self):
        return 'KeysView({!r})'.format(self._keys)

    def __str__(self):
        return str(self._keys)


class ValuesView(AnyArray):
    '''
    The values of a dictionary, in order, as of the moment the view was taken.

    Assigning through the view also assigns the value at the same position
    of the dictionary. Writing is refused once the dictionary has gained or
    lost pairs since the view was taken.
    '''
    __slots__ = '_owner', '_values', '_version'

    def __init__(self, owner):
        self._owner = owner
        self._values = [value for (_, value) in owner._storage]
        self._version = owner._version

    @property
    def start_index(self):
        return Index(0, self._version)

    @property
    def end_index(self):
        return Index(len(self._values), self._version)

    def index_after(self, index):
        return index.advanced(1)

    def __len__(self):
        return len(self._values)

    def __getitem__(self, index):
        return self._values[_view_offset(index, len(self._values))]

    def __setitem__(self, index, value):
        offset = _view_offset(index, len(self._values))
        owner = self._owner
        if owner._version != self._version:
            raise InvalidatedIndexError(index)

        self._values[offset] = value
        key, _ = owner._storage[offset]
        owner._storage[offset] = (key, value)

    def __iter__(self):
        return iter(self._values)

    def __repr__(self):
        return 'ValuesView({!r})'.format(self._values)

    def __str__(self):
        return str(self._values)


class ArrayOrderedDictionary(MutableAnyDictionary):
    '''
    A reference-semantics dictionary whose iteration order is the order in
    which its keys were first inserted.

    :param source:
        A mapping, or an iterable of ``(key, value)`` pairs, to copy. The
        source's iteration order is kept. Repeated keys keep their first
        position and take their last value, as with `dict`.
    :param minimum_capacity: Reserve at least this much capacity.
    :param key_type: The type `item_for_key` accepts as a key.
    :param value_type: Informational; used by decoders.
    :param config: The `~refcollections.core.config.Config` to read
                   `CollectionSettings` from. Defaults to ``Config.root``.
    '''

    __slots__ = ('_storage', '_capacity', '_config', '_version',
                 'key_type', 'value_type')

    is_ordered = True

    def __init__(self, source=None, *, minimum_capacity=None,
                 key_type=None, value_type=None, config=None):
        super().__init__()
        self._storage = []
        self._config = config
        self._version = 0
        self.key_type = default(key_type, object)
        self.value_type = default(value_type, object)
        self._capacity = self._settings.initial_capacity

        if minimum_capacity is not None:
            self.reserve_capacity(minimum_capacity)

        if source is not None:
            if isinstance(source, collections.abc.Sized):
                self.reserve_capacity(len(source))
            for key, value in pairs_of(source):
                self[key] = value

    @classmethod
    def from_unique_pairs(cls, pairs, **kw):
        '''
        Build a dictionary from pairs whose keys are known to be distinct.
        The keys are not checked.
        '''
        result = cls(**kw)
        result._storage = [(key, value) for (key, value) in pairs]
        return result

    @property
    def _settings(self):
        return CollectionSettings.from_config(self._config)

    def _new_like(self):
        return type(self)(key_type=self.key_type,
                          value_type=self.value_type,
                          config=self._config)

    def copy(self):
        result = self._new_like()
        result._storage = list(self._storage)
        result._capacity = self._capacity
        return result

    def _find(self, key):
        for offset, (k, _) in enumerate(self._storage):
            if k == key:
                return offset
        return None

    def _mutated(self):
        self._version += 1

    def _checked_offset(self, index):
        if not isinstance(index, Index):
            raise TypeError('Expected an Index, got {!r}.'.format(index))
        if index._version is not None and index._version != self._version:
            raise InvalidatedIndexError(index)
        if not 0 <= index.offset < len(self._storage):
            raise IndexOutOfRangeError(index, len(self._storage))
        return index.offset

    # Positions

    @property
    def start_index(self):
        return Index(0, self._version)

    @property
    def end_index(self):
        return Index(len(self._storage), self._version)

    def index_after(self, index):
        return index.advanced(1)

    def index_for_key(self, key):
        offset = self._find(key)
        if offset is None:
            return None
        return Index(offset, self._version)

    def at(self, index):
        return Element(*self._storage[self._checked_offset(index)])

    def set_at(self, index, element):
        '''
        Replace the pair at `index`. The caller is responsible for not
        introducing a key that is already present elsewhere.
        '''
        key, value = element
        self._storage[self._checked_offset(index)] = (key, value)

    def item_at(self, index):
        return Element(*self._storage[_view_offset(index, len(self._storage))])

    @property
    def first(self):
        if self._storage:
            return Element(*self._storage[0])
        return None

    # Mapping protocol

    def __getitem__(self, key):
        offset = self._find(key)
        if offset is None:
            raise KeyError(key)
        return self._storage[offset][1]

    def get(self, key, default=None):
        offset = self._find(key)
        if offset is None:
            return default
        return self._storage[offset][1]

    def __contains__(self, key):
        return self._find(key) is not None

    def __setitem__(self, key, value):
        offset = self._find(key)
        if offset is None:
            self._storage.append((key, value))
            self._mutated()
        else:
            existing_key, _ = self._storage[offset]
            self._storage[offset] = (existing_key, value)

    def __delitem__(self, key):
        offset = self._find(key)
        if offset is None:
            raise KeyError(key)
        del self._storage[offset]
        self._mutated()

    def __len__(self):
        return len(self._storage)

    def __iter__(self):
        for key, _ in self._storage:
            yield key

    def keys(self):
        return KeysView((key for (key, _) in self._storage), self._version)

    def values(self):
        return ValuesView(self)

    def set_values(self, values):
        '''
        Assign `values` position by position, like writing every element of
        a `ValuesView` back.
        '''
        for offset, value in enumerate(values):
            if offset >= len(self._storage):
                raise IndexOutOfRangeError(offset, len(self._storage))
            key, _ = self._storage[offset]
            self._storage[offset] = (key, value)

    def items(self):
        for key, value in self._storage:
            yield Element(key, value)

    # Dictionary operations

    def set(self, key, value):
        offset = self._find(key)
        if value is None:
            if offset is not None:
                del self._storage[offset]
                self._mutated()
        elif offset is None:
            self._storage.append((key, value))
            self._mutated()
        else:
            existing_key, _ = self._storage[offset]
            self._storage[offset] = (existing_key, value)

    def update_value(self, value, key):
        offset = self._find(key)
        if offset is None:
            self._storage.append((key, value))
            self._mutated()
            return None

        existing_key, old = self._storage[offset]
        self._storage[offset] = (existing_key, value)
        return old

    def remove_value(self, key):
        offset = self._find(key)
        if offset is None:
            return None
        _, old = self._storage.pop(offset)
        self._mutated()
        return old

    def remove_at(self, index):
        key, value = self._storage.pop(self._checked_offset(index))
        self._mutated()
        return Element(key, value)

    def pop_first(self):
        if not self._storage:
            return None
        key, value = self._storage.pop(0)
        self._mutated()
        return Element(key, value)

    def popitem(self):
        if not self._storage:
            raise KeyError('popitem(): dictionary is empty')
        key, value = self._storage.pop()
        self._mutated()
        return key, value

    def clear(self):
        self._storage.clear()
        self._mutated()

    def remove_all(self, keep_capacity=False):
        self.clear()
        if not keep_capacity:
            self._capacity = 0

    @property
    def capacity(self):
        return max(self._capacity, len(self._storage))

    def reserve_capacity(self, minimum_capacity):
        '''
        Reserve room for at least `minimum_capacity` pairs. Requests below
        ``CollectionSettings.minimum_capacity`` reserve that floor instead.
        Capacity never shrinks.
        '''
        floor = self._settings.minimum_capacity
        if minimum_capacity < floor:
            logging.debug('reserve_capacity(%d) raised to the floor of %d',
                          minimum_capacity, floor)
            minimum_capacity = floor
        self._capacity = max(self._capacity, minimum_capacity)

    @trace
    def merge(self, other, combine):
        '''
        Merge the pairs of `other` (a mapping or an iterable of pairs) into
        this dictionary in `other`'s order. An existing key keeps its
        position and takes ``combine(existing, incoming)``; a new key is
        appended.

        The merge is not atomic: if `combine` raises, the pairs merged
        before the failure remain applied.
        '''
        count = 0
        for key, value in pairs_of(other):
            offset = self._find(key)
            if offset is None:
                self._storage.append((key, value))
                self._mutated()
            else:
                existing_key, existing = self._storage[offset]
                try:
                    combined = combine(existing, value)
                except Exception:
                    logging.debug('merge stopped at key %r after %d pair(s)', key, count)
                    raise
                self._storage[offset] = (existing_key, combined)
            count += 1

    def filter(self, predicate):
        result = self._new_like()
        result._storage = [pair for pair in self._storage
                           if predicate(Element(*pair))]
        return result

    def map_values(self, transform):
        result = type(self)(key_type=self.key_type, config=self._config)
        result._storage = [(key, transform(value))
                           for (key, value) in self._storage]
        return result

    def __repr__(self):
        prefix = type(self).__name__ + '({'
        suffix = '})'
        content = ', '.join('{!r}: {!r}'.format(k, v) for (k, v) in self._storage)
        return prefix + content + suffix

    def __str__(self):
        return '[' + ', '.join(quoted(k) + ': ' + quoted(v)
                               for (k, v) in self._storage) + ']'
