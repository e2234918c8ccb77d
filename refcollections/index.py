import collections
import functools


Element = collections.namedtuple('Element', 'key value')


@functools.total_ordering
class Index(object):
    '''
    An opaque position in a dictionary's pair storage.

    An index is only meaningful for the dictionary state it was obtained
    from. Dictionaries stamp the indices they hand out and reject a stamped
    index once they have been structurally modified (see
    `~refcollections.core.errors.InvalidatedIndexError`). Equality,
    ordering and hashing only consider the offset.
    '''
    __slots__ = '_offset', '_version'

    def __init__(self, offset, version=None):
        self._offset = offset
        self._version = version

    @property
    def offset(self):
        return self._offset

    def distance(self, other):
        '''
        Return the signed number of steps from this index to `other`, so that
        ``i.advanced(i.distance(j)) == j``.
        '''
        return other._offset - self._offset

    def advanced(self, n):
        return Index(self._offset + n, self._version)

    def __eq__(self, other):
        if not isinstance(other, Index):
            return NotImplemented
        return self._offset == other._offset

    def __lt__(self, other):
        if not isinstance(other, Index):
            return NotImplemented
        return self._offset < other._offset

    def __hash__(self):
        return hash(self._offset)

    def __repr__(self):
        return 'Index({!r})'.format(self._offset)
