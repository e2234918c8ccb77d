'''
Cross-container comparison.

`equal` is the strict comparison: element-wise for arrays, and
position-sensitive for two dictionaries that both keep an order.
`equivalent` ignores position: arrays must have the same length and the
same members, dictionaries the same keys mapped to equal values.
'''

import collections.abc

from .util import sentinel


def _is_array(x):
    return (isinstance(x, collections.abc.Sequence) and
            not isinstance(x, (str, bytes, bytearray)))

def _is_dictionary(x):
    return isinstance(x, collections.abc.Mapping)

def _is_ordered(x):
    return getattr(x, 'is_ordered', False)


def _dictionaries_equivalent(lhs, rhs):
    if len(lhs) != len(rhs):
        return False
    for key, value in lhs.items():
        other = rhs.get(key, sentinel)
        if other is sentinel or other != value:
            return False
    return True

def _dictionaries_equal(lhs, rhs):
    if not (_is_ordered(lhs) and _is_ordered(rhs)):
        return _dictionaries_equivalent(lhs, rhs)
    if len(lhs) != len(rhs):
        return False
    for (lk, lv), (rk, rv) in zip(lhs.items(), rhs.items()):
        if not (lk == rk and lv == rv):
            return False
    return True


def _arrays_equal(lhs, rhs):
    if len(lhs) != len(rhs):
        return False
    return all(a == b for (a, b) in zip(lhs, rhs))

def _arrays_equivalent(lhs, rhs):
    if len(lhs) != len(rhs):
        return False
    return all(a in rhs for a in lhs)


def equal(lhs, rhs):
    if _is_dictionary(lhs) and _is_dictionary(rhs):
        return _dictionaries_equal(lhs, rhs)
    elif _is_array(lhs) and _is_array(rhs):
        return _arrays_equal(lhs, rhs)
    else:
        return False

def equivalent(lhs, rhs):
    if _is_dictionary(lhs) and _is_dictionary(rhs):
        return _dictionaries_equivalent(lhs, rhs)
    elif _is_array(lhs) and _is_array(rhs):
        return _arrays_equivalent(lhs, rhs)
    else:
        return False
