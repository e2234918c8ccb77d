'''
Convert nested arrays and dictionaries from one container family to another.

>>> data = {'b': [1, 2], 'a': {'x': (3,)}}
>>> result = reencapsulate(data, dictionaries=DictionaryKind.array_ordered_dictionary,
...                        arrays=ArrayKind.class_array)
>>> result['b']
ClassArray([1, 2])

The shape of the data and the order of every dictionary are kept; only the
container types change.
'''

import collections.abc
import enum

from .array import ClassArray
from .dictionary import ClassDictionary
from .ordered_dict import ArrayOrderedDictionary
from .util import trace


class DictionaryKind(enum.Enum):
    dictionary = 'dictionary'
    class_dictionary = 'class_dictionary'
    array_ordered_dictionary = 'array_ordered_dictionary'

    @property
    def container_type(self):
        return _dictionary_types[self]

    @classmethod
    def for_type(cls, ty):
        for kind, kind_type in _dictionary_types.items():
            if issubclass(ty, kind_type):
                return kind
        raise TypeError('{} is not a known dictionary type.'.format(ty.__name__))

class ArrayKind(enum.Enum):
    array = 'array'
    class_array = 'class_array'

    @property
    def container_type(self):
        return _array_types[self]

    @classmethod
    def for_type(cls, ty):
        for kind, kind_type in _array_types.items():
            if issubclass(ty, kind_type):
                return kind
        raise TypeError('{} is not a known array type.'.format(ty.__name__))

_dictionary_types = {
    DictionaryKind.dictionary: dict,
    DictionaryKind.class_dictionary: ClassDictionary,
    DictionaryKind.array_ordered_dictionary: ArrayOrderedDictionary,
}

_array_types = {
    ArrayKind.array: list,
    ArrayKind.class_array: ClassArray,
}


class NodeKind(enum.Enum):
    scalar = 0
    sequence = 1
    mapping = 2

def node_kind(value):
    if isinstance(value, collections.abc.Mapping):
        return NodeKind.mapping
    elif (isinstance(value, collections.abc.Sequence) and
          not isinstance(value, (str, bytes, bytearray))):
        return NodeKind.sequence
    else:
        return NodeKind.scalar


def _coerce(kind_type, target):
    if target is None or isinstance(target, kind_type):
        return target
    return kind_type.for_type(target)

def _own_dictionary_type(value):
    try:
        return DictionaryKind.for_type(type(value)).container_type
    except TypeError:
        return dict

def _own_array_type(value):
    if isinstance(value, tuple):
        return tuple
    try:
        return ArrayKind.for_type(type(value)).container_type
    except TypeError:
        return list

@trace
def reencapsulate(value, dictionaries=None, arrays=None):
    '''
    Rebuild `value` with every nested dictionary turned into the
    `dictionaries` family and every nested array into the `arrays` family.

    :param dictionaries: A `DictionaryKind`, a dictionary class, or None to
                         keep each dictionary's own family. Mappings of
                         unknown type become dicts.
    :param arrays: An `ArrayKind`, an array class, or None to keep each
                   array's own family. Sequences of unknown type become
                   lists; tuples stay tuples.
    '''
    dictionaries = _coerce(DictionaryKind, dictionaries)
    arrays = _coerce(ArrayKind, arrays)

    kind = node_kind(value)
    if kind is NodeKind.mapping:
        # Staged in an ordered dictionary so the source order survives.
        staged = ArrayOrderedDictionary()
        for key, item in value.items():
            staged[key] = reencapsulate(item, dictionaries, arrays)

        if dictionaries is None:
            target = _own_dictionary_type(value)
        else:
            target = dictionaries.container_type

        if target is ArrayOrderedDictionary:
            return staged
        return target(staged.items())

    elif kind is NodeKind.sequence:
        items = [reencapsulate(item, dictionaries, arrays) for item in value]
        if arrays is None:
            target = _own_array_type(value)
        else:
            target = arrays.container_type
        return target(items)

    else:
        return value

def reencapsulate_to_builtins(value):
    return reencapsulate(value,
                         dictionaries=DictionaryKind.dictionary,
                         arrays=ArrayKind.array)
