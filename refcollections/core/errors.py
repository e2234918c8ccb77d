from ..util import type_name


class CollectionError(Exception):
    '''
    Base class for misuse of a collection that the caller can recover from.
    '''

class IndexOutOfRangeError(CollectionError, IndexError):
    '''
    An index did not refer to an element of the collection.
    '''

    def __init__(self, index, count):
        super().__init__('Index {!r} out of range for collection of {} element(s).'
                         .format(index, count))
        self.index = index
        self.count = count

class UnsupportedKeyTypeError(CollectionError, TypeError):
    '''
    Only ``int`` and ``str`` keys can be turned into coding keys.
    '''

    def __init__(self, key_type):
        super().__init__('Unsupported encoding key type of: {}'
                         .format(type_name(key_type)))
        self.key_type = key_type

class KeyCastError(CollectionError, TypeError):
    '''
    A type-erased key could not be used as a key of the container.
    '''

    def __init__(self, key, key_type):
        super().__init__('Unable to cast {!r} to {}'.format(key, type_name(key_type)))
        self.key = key
        self.key_type = key_type

class InvalidatedIndexError(CollectionError, IndexError):
    '''
    An index was used after the dictionary it came from was structurally
    modified (a pair was inserted or removed).
    '''

    def __init__(self, index):
        super().__init__('Index {!r} was invalidated by a mutation of its dictionary.'
                         .format(index))
        self.index = index

class DuplicateKeyError(CollectionError, ValueError):
    '''
    A key appeared more than once in pairs that were required to be unique.
    '''

    def __init__(self, key):
        super().__init__('Duplicate key {!r}.'.format(key))
        self.key = key

class DecodingError(CollectionError, ValueError):
    '''
    Serialized data did not have the shape of a keyed container.
    '''

class EncodingError(CollectionError, ValueError):
    '''
    Two keys of a dictionary encode to the same coding key, as ``1`` and
    ``'1'`` do.
    '''

    def __init__(self, first, second):
        super().__init__('Keys {!r} and {!r} encode to the same coding key.'
                         .format(first, second))
        self.keys = first, second
