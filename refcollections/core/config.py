'''
Collection defaults, read from YAML.

Each `Settings` subclass names a top-level YAML key (its `_ns_`) and
declares its fields. A `Config` holds one instance of every settings class
that has been asked for, and a derived `Config` falls back to its parent
for any field it does not set itself:

.. code-block:: yaml

    refcollections.CollectionSettings:
        minimum_capacity: 32

Only PyYAML's safe loader is used; a settings file can hold plain YAML
scalars, lists and maps, nothing else.
'''

import warnings

import yaml


def capacity(value):
    '''
    Convert a capacity setting to a non-negative ``int``.

    :raise TypeError: if `value` is not a number.
    :raise ValueError: if `value` is negative or has a fractional part.
    '''
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError('Capacity must be a number, got {!r}.'.format(value))
    if value < 0 or value != int(value):
        raise ValueError('Capacity must be a whole number of pairs, got {!r}.'.format(value))
    return int(value)


class Field(object):
    '''
    One setting of a `Settings` group.

    :param convert: Applied to the default and to every assigned value.
                    Raises `TypeError` or `ValueError` to reject a value.
    :param default: Used when neither the settings group nor any of its
                    parents assigns the field.
    '''

    def __init__(self, convert, default, docs=None):
        self.convert = convert
        self.default = convert(default)
        self.name = None
        self.__doc__ = docs

    def __repr__(self):
        return 'Field({!r}, {!r})'.format(self.name, self.default)

    def __get__(self, instance, owner):
        if instance is None:
            return self
        if self.name in instance._values_:
            return instance._values_[self.name]
        if instance._parent_ is not None:
            return getattr(instance._parent_, self.name)
        return self.default

    def __set__(self, instance, value):
        instance._values_[self.name] = self.convert(value)


_settings_classes = {}

class _SettingsMeta(type):
    def __new__(cls, name, bases, classdict):
        fields = {}
        for key, val in classdict.items():
            if isinstance(val, Field):
                val.name = key
                fields[key] = val
        classdict['_fields_'] = fields

        result = super().__new__(cls, name, bases, classdict)
        if '_ns_' in classdict:
            _settings_classes[result._ns_] = result
        return result


class Config(object):
    '''
    A set of settings groups, optionally layered over a parent `Config`.
    '''

    #: The configuration used when none is given.
    root = None

    def __init__(self, parent=None):
        self.parent = parent
        self.groups = {}

    def derive(self):
        '''
        Return a child configuration. Values set here show through in the
        child until the child sets its own.
        '''
        return Config(self)

    def load_yaml(self, source):
        '''
        Read settings from a YAML document or stream. Unknown groups and
        unknown fields are reported with a warning and skipped.
        '''
        data = yaml.safe_load(source)
        if data is None:
            return
        if not isinstance(data, dict):
            warnings.warn(UserWarning('The top level of a settings file must be a map, not {}.'
                                      .format(type(data).__name__)))
            return

        for ns, values in data.items():
            try:
                settings_class = _settings_classes[ns]
            except KeyError:
                warnings.warn(UserWarning('Unknown settings group {!r}.'.format(ns)))
            else:
                settings_class.from_config(self).update(values)

    def dump_yaml(self, stream=None, **kw):
        '''
        Write the values set directly on this configuration, leaving out
        inherited ones.
        '''
        data = {type(group)._ns_: group.to_dict()
                for group in self.groups.values()
                if group.to_dict()}
        return yaml.safe_dump(data, stream, **kw)

Config.root = Config()


class Settings(metaclass=_SettingsMeta):
    '''
    A group of settings stored in a `Config`.

    >>> config = Config()
    >>> child = config.derive()
    >>> CollectionSettings.from_config(config).minimum_capacity = 20
    >>> CollectionSettings.from_config(child).minimum_capacity
    20
    '''

    def __init__(self, parent=None):
        self._values_ = {}
        self._parent_ = parent

    @classmethod
    def from_config(cls, config=None):
        '''
        Return this group's settings in `config` (``Config.root`` by
        default), creating them on first use.
        '''
        if config is None:
            config = Config.root

        try:
            return config.groups[cls]
        except KeyError:
            pass

        parent = None
        if config.parent is not None:
            parent = cls.from_config(config.parent)
        result = config.groups[cls] = cls(parent)
        return result

    def to_dict(self):
        return dict(self._values_)

    def update(self, mapping):
        if not isinstance(mapping, dict):
            warnings.warn(UserWarning('Settings for {!r} must be a map.'.format(self._ns_)))
            return

        for key, value in mapping.items():
            if key in self._fields_:
                setattr(self, key, value)
            else:
                warnings.warn(UserWarning('Unknown setting {!r} in {!r}.'.format(key, self._ns_)))


class CollectionSettings(Settings):
    _ns_ = 'refcollections.CollectionSettings'

    initial_capacity = Field(capacity, 3,
                             docs='Capacity reserved by a newly created ordered dictionary.')
    minimum_capacity = Field(capacity, 12,
                             docs='Floor applied to every capacity reservation.')
