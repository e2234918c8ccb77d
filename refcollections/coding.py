'''
Order-preserving encoding of dictionaries to keyed maps.

Every key goes through a `CodingKey`: ``int`` keys become ordinal coding
keys that remember their integer value, ``str`` keys become string coding
keys, and anything else raises
`~refcollections.core.errors.UnsupportedKeyTypeError`.

Pairs are encoded in dictionary order, and decoding keeps the order in
which the parsed document presents its keys. Whether that is the original
order depends on the format, so compare decoded data with
`~refcollections.compare.equivalent` rather than ``==``.
'''

import collections.abc
import json
import re

import yaml

from .abc import AnyArray, AnyDictionary
from .ordered_dict import ArrayOrderedDictionary
from .core.errors import UnsupportedKeyTypeError, DecodingError, EncodingError

_INTEGER = re.compile(r'-?[0-9]+\Z')


class CodingKey(object):
    __slots__ = 'string_value', 'int_value'

    def __init__(self, string_value, int_value=None):
        self.string_value = string_value
        self.int_value = int_value

    @classmethod
    def for_key(cls, key):
        '''
        Return the coding key for a dictionary key.

        :raise UnsupportedKeyTypeError: unless `key` is an ``int`` or a ``str``.
        '''
        if isinstance(key, bool):
            raise UnsupportedKeyTypeError(type(key))
        elif isinstance(key, int):
            return cls(str(key), key)
        elif isinstance(key, str):
            return cls(key)
        else:
            raise UnsupportedKeyTypeError(type(key))

    @classmethod
    def parse(cls, raw):
        '''
        Return the coding key for a key read from serialized data. String
        keys that spell an integer also carry the integer value.
        '''
        if isinstance(raw, str) and _INTEGER.match(raw):
            return cls(raw, int(raw))
        return cls.for_key(raw)

    def to_key(self, key_type):
        if key_type is int:
            if self.int_value is None:
                raise DecodingError('Coding key {!r} is not an integer.'.format(self.string_value))
            return self.int_value
        elif key_type is str:
            return self.string_value
        else:
            raise UnsupportedKeyTypeError(key_type)

    def __eq__(self, other):
        if not isinstance(other, CodingKey):
            return NotImplemented
        return (self.string_value, self.int_value) == (other.string_value, other.int_value)

    def __hash__(self):
        return hash((self.string_value, self.int_value))

    def __repr__(self):
        return 'CodingKey({!r}, {!r})'.format(self.string_value, self.int_value)


def _check_key_type(key_type):
    if key_type not in (int, str):
        raise UnsupportedKeyTypeError(key_type)


def _encode_value(value):
    if isinstance(value, collections.abc.Mapping):
        return encode(value)
    elif isinstance(value, (AnyArray, list, tuple)):
        return [_encode_value(v) for v in value]
    else:
        return value

def _coded_items(dictionary):
    seen = {}
    for key, value in dictionary.items():
        string_value = CodingKey.for_key(key).string_value
        if string_value in seen:
            raise EncodingError(seen[string_value], key)
        seen[string_value] = key
        yield string_value, key, value

def encode(dictionary):
    '''
    Return a plain `dict` with the pairs of `dictionary` in order, keyed by
    the string form of each coding key. Nested dictionaries and arrays are
    encoded too.

    :raise EncodingError: if two keys share a coding key, as ``1`` and
                          ``'1'`` do.
    '''
    result = {}
    for string_value, _, value in _coded_items(dictionary):
        result[string_value] = _encode_value(value)
    return result


def decode(mapping, key_type=str, value_type=None, into=ArrayOrderedDictionary):
    '''
    Build a dictionary of type `into` from a keyed map, keeping the map's
    key order.

    :param key_type: ``int`` or ``str``.
    :param value_type: Optional conversion applied to every value.
    :raise UnsupportedKeyTypeError: for any other `key_type`.
    :raise DecodingError: if `mapping` is not a map, a key does not
                          convert to `key_type`, two keys convert to
                          the same key, or `value_type` rejects
                          a value.
    '''
    _check_key_type(key_type)
    if not isinstance(mapping, collections.abc.Mapping):
        raise DecodingError('Expected a keyed container, got {}.'
                            .format(type(mapping).__name__))

    pairs = []
    raw_keys = {}
    for raw, value in mapping.items():
        key = CodingKey.parse(raw).to_key(key_type)
        if key in raw_keys:
            raise DecodingError('Keys {!r} and {!r} both decode to {!r}.'
                                .format(raw_keys[key], raw, key))
        raw_keys[key] = raw
        if value_type is not None:
            try:
                value = value_type(value)
            except (TypeError, ValueError) as exc:
                raise DecodingError('Cannot decode value for key {!r}: {}'
                                    .format(key, exc)) from exc
        pairs.append((key, value))

    return into.from_unique_pairs(pairs, key_type=key_type, value_type=value_type)


def to_json(dictionary, **kw):
    return json.dumps(encode(dictionary), **kw)

def from_json(text, key_type=str, value_type=None, into=ArrayOrderedDictionary):
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise DecodingError(str(exc)) from exc
    return decode(data, key_type, value_type, into)


class Dumper(yaml.SafeDumper):
    '''
    Safe YAML dumper that writes collections as plain YAML maps and
    sequences.
    '''

def _represent_dictionary(dumper, data):
    pairs = [(key, value) for (_, key, value) in _coded_items(data)]
    return dumper.represent_mapping('tag:yaml.org,2002:map', pairs)

def _represent_array(dumper, data):
    return dumper.represent_list(list(data))

Dumper.add_multi_representer(AnyDictionary, _represent_dictionary)
Dumper.add_multi_representer(AnyArray, _represent_array)


def to_yaml(dictionary, stream=None, **kw):
    kw.setdefault('sort_keys', False)
    kw.setdefault('default_flow_style', False)
    return yaml.dump(dictionary, stream, Dumper=Dumper, **kw)

def from_yaml(source, key_type=str, value_type=None, into=ArrayOrderedDictionary):
    try:
        data = yaml.safe_load(source)
    except yaml.YAMLError as exc:
        raise DecodingError(str(exc)) from exc
    return decode(data, key_type, value_type, into)
