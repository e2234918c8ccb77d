'''
Reference-semantics collections.

`ClassArray` and `ClassDictionary` are a list and a dict shared by
reference; `ArrayOrderedDictionary` is a dictionary that keeps its pairs in
insertion order. `AnyArray` and `AnyDictionary` let generic code accept any
of them.
'''

from .index import Index, Element

from .abc import (AnyArray,
                  MutableAnyArray,
                  AnyDictionary,
                  MutableAnyDictionary)

from .ordered_dict import (ArrayOrderedDictionary,
                           KeysView,
                           ValuesView)

from .array import ClassArray
from .dictionary import ClassDictionary

from .compare import equal, equivalent

from .coding import (CodingKey,
                     encode,
                     decode,
                     to_json,
                     from_json,
                     to_yaml,
                     from_yaml)

from .reencapsulate import (DictionaryKind,
                            ArrayKind,
                            NodeKind,
                            node_kind,
                            reencapsulate,
                            reencapsulate_to_builtins)

from .core.errors import (CollectionError,
                          IndexOutOfRangeError,
                          InvalidatedIndexError,
                          UnsupportedKeyTypeError,
                          KeyCastError,
                          DuplicateKeyError,
                          DecodingError,
                          EncodingError)

from .core.config import Config, CollectionSettings

__version__ = '0.1.0'
