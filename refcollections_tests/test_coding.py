import json

import pytest
import yaml

from refcollections import (ArrayOrderedDictionary,
                            ClassArray,
                            ClassDictionary,
                            CodingKey,
                            DecodingError,
                            EncodingError,
                            UnsupportedKeyTypeError,
                            decode,
                            encode,
                            from_json,
                            from_yaml,
                            to_json,
                            to_yaml)


@pytest.fixture
def persons():
    return ArrayOrderedDictionary.from_unique_pairs([('Person A', 1), ('Person B', 9)])


def test_json_round_trip_is_equivalent(persons):
    decoded = from_json(to_json(persons), key_type=str, value_type=int)

    assert isinstance(decoded, ArrayOrderedDictionary)
    assert decoded.equivalent(persons)

def test_json_keeps_order(persons):
    persons['Person 0'] = 3
    text = to_json(persons)

    assert list(json.loads(text)) == ['Person A', 'Person B', 'Person 0']
    assert list(from_json(text)) == ['Person A', 'Person B', 'Person 0']

def test_integer_keys_round_trip():
    d = ArrayOrderedDictionary.from_unique_pairs([(3, 'c'), (1, 'a'), (2, 'b')])

    encoded = encode(d)
    assert list(encoded.items()) == [('3', 'c'), ('1', 'a'), ('2', 'b')]

    decoded = decode(encoded, key_type=int)
    assert list(decoded.items()) == [(3, 'c'), (1, 'a'), (2, 'b')]
    assert decoded == d

def test_decoded_dictionary_records_types():
    decoded = from_json('{"1": "2"}', key_type=int, value_type=int)
    assert decoded.key_type is int
    assert decoded.value_type is int
    assert decoded[1] == 2

def test_coding_keys():
    assert CodingKey.for_key(5) == CodingKey('5', 5)
    assert CodingKey.for_key('x') == CodingKey('x')
    assert CodingKey.for_key('x').int_value is None
    assert CodingKey.parse('-12').int_value == -12
    assert CodingKey.parse('1.5').int_value is None
    assert CodingKey.parse(7) == CodingKey('7', 7)

@pytest.mark.parametrize('key', [1.5, (1, 2), None, True])
def test_unsupported_key_types_fail_on_encode(key):
    d = ArrayOrderedDictionary()
    d[key] = 1
    with pytest.raises(UnsupportedKeyTypeError):
        encode(d)
    with pytest.raises(UnsupportedKeyTypeError):
        to_json(d)

def test_unsupported_key_types_fail_on_decode():
    with pytest.raises(UnsupportedKeyTypeError):
        decode({'a': 1}, key_type=float)
    with pytest.raises(UnsupportedKeyTypeError):
        from_json('{}', key_type=bytes)

def test_unsupported_key_type_is_a_type_error():
    with pytest.raises(TypeError):
        decode({}, key_type=tuple)

def test_decode_rejects_non_integer_keys_for_int():
    with pytest.raises(DecodingError):
        decode({'a': 1}, key_type=int)

def test_decode_rejects_malformed_input():
    with pytest.raises(DecodingError):
        from_json('[1, 2]')
    with pytest.raises(DecodingError):
        from_json('{not json')
    with pytest.raises(DecodingError):
        from_yaml('- 1\n- 2\n')

def test_decode_wraps_value_errors():
    with pytest.raises(DecodingError):
        decode({'a': 'x'}, value_type=int)

def test_nested_containers_encode():
    inner = ArrayOrderedDictionary.from_unique_pairs([('b', 1), ('a', 2)])
    d = ArrayOrderedDictionary.from_unique_pairs([('list', ClassArray([1, 2])),
                                                  ('dict', inner)])

    encoded = encode(d)
    assert encoded == {'list': [1, 2], 'dict': {'b': 1, 'a': 2}}
    assert list(encoded['dict']) == ['b', 'a']

def test_decode_into_class_dictionary():
    decoded = from_json('{"b": 1, "a": 2}', into=ClassDictionary)
    assert isinstance(decoded, ClassDictionary)
    assert decoded == {'a': 2, 'b': 1}


def test_yaml_keeps_order(persons):
    persons['Person 0'] = 3
    text = to_yaml(persons)

    assert text == 'Person A: 1\nPerson B: 9\nPerson 0: 3\n'
    assert from_yaml(text) == persons

def test_yaml_nested_containers():
    d = ArrayOrderedDictionary.from_unique_pairs([('b', ClassArray([1, 2])),
                                                  ('a', ClassDictionary({'x': 1}))])
    assert yaml.safe_load(to_yaml(d)) == {'b': [1, 2], 'a': {'x': 1}}

def test_yaml_integer_keys():
    d = ArrayOrderedDictionary.from_unique_pairs([(2, 'b'), (1, 'a')])
    decoded = from_yaml(to_yaml(d), key_type=int)
    assert list(decoded.items()) == [(2, 'b'), (1, 'a')]

def test_yaml_rejects_unsupported_keys():
    d = ArrayOrderedDictionary({1.5: 'x'})
    with pytest.raises(UnsupportedKeyTypeError):
        to_yaml(d)


def test_decode_rejects_keys_that_collide_as_integers():
    with pytest.raises(DecodingError):
        from_json('{"1": "a", "01": "b"}', key_type=int)

def test_decode_rejects_keys_that_collide_as_strings():
    with pytest.raises(DecodingError):
        from_yaml("1: a\n'1': b\n", key_type=str)

def test_decode_keeps_one_pair_per_key():
    decoded = from_yaml("1: a\n'2': b\n", key_type=str)
    assert list(decoded.items()) == [('1', 'a'), ('2', 'b')]

    decoded.remove_value('1')
    assert '1' not in decoded

@pytest.mark.parametrize('encoder', [encode, to_json, to_yaml])
def test_encode_rejects_keys_sharing_a_coding_key(encoder):
    d = ArrayOrderedDictionary.from_unique_pairs([(1, 'a'), ('1', 'b')])
    with pytest.raises(EncodingError):
        encoder(d)

def test_nested_key_collisions_are_rejected():
    inner = ArrayOrderedDictionary.from_unique_pairs([('2', 'x'), (2, 'y')])
    with pytest.raises(EncodingError):
        encode(ArrayOrderedDictionary({'inner': inner}))
