# Copyright (c) 2009-2010 Six Apart Ltd.
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# * Redistributions of source code must retain the above copyright notice,
#   this list of conditions and the following disclaimer.
#
# * Redistributions in binary form must reproduce the above copyright notice,
#   this list of conditions and the following disclaimer in the documentation
#   and/or other materials provided with the distribution.
#
# * Neither the name of Six Apart Ltd. nor the names of its contributors may
#   be used to endorse or promote products derived from this software without
#   specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

"""

`DataObject` is the local representation of an API object: a store of the
object's field values, and a record of which of them were changed locally.

Values decoded from an API response are the server's state. Values set on
the object afterwards are "unsaved", and only those are sent when the object
is saved. Objects found inside an API response are decoded into `DataObject`
instances too, choosing the class by the response's ``object`` field, so a
charge's card is a ``Card`` and a list of charges holds ``Charge`` instances.

"""

import simplejson as json

import paymentobjects.fields


classes_by_name = {}
classes_by_constant_field = {}


def find_by_name(name):
    """Finds and returns the DataObject subclass with the given name.

    Parameter `name` should be a bare class name with no module. If there is
    no class by that name, raises `KeyError`.

    """
    return classes_by_name[name]


def convert_to_object(value, api_key=None, cls=None):
    """Decodes a value from an API response, turning every dictionary in it
    into a `DataObject` instance.

    Dictionaries with an ``object`` field naming a known kind of object are
    decoded into instances of the class declared for that kind. Other
    dictionaries become instances of `cls` if given, or plain `DataObject`
    instances. Lists are decoded item by item, and any other value is
    returned unchanged.

    All the decoded objects are bound to `api_key`.

    """
    if isinstance(value, list):
        return [convert_to_object(item, api_key) for item in value]
    if not isinstance(value, dict):
        return value

    obj_cls = cls or DataObject
    kind = value.get('object')
    if isinstance(kind, str):
        try:
            obj_cls = DataObject.subclass_with_constant_field('object', kind)
        except ValueError:
            pass
    return obj_cls.construct_from(value, api_key)


def _plain(value):
    if isinstance(value, DataObject):
        return dict((k, _plain(v)) for k, v in value._values.items())
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value


class DataObjectMetaclass(type):
    """Metaclass for `DataObject` classes.

    This metaclass installs all `paymentobjects.fields.Property` instances
    declared as attributes of the new class, including all `Field` and
    `Listing` instances.

    This metaclass also makes the new class findable through the
    `dataobject.find_by_name()` function.

    """

    def __new__(cls, name, bases, attrs):
        """Creates and returns a new `DataObject` class with its declared
        fields and name."""
        fields = {}
        new_fields = {}
        new_properties = {}

        # Inherit all the parent DataObject classes' fields.
        for base in bases:
            if isinstance(base, DataObjectMetaclass):
                fields.update(base.fields)

        # Move all the class's attributes that are Fields to the fields set.
        for attrname, field in attrs.items():
            if isinstance(field, paymentobjects.fields.Property):
                new_properties[attrname] = field
                if isinstance(field, paymentobjects.fields.Field):
                    new_fields[attrname] = field
            elif attrname in fields:
                # Throw out any parent fields that the subclass defined as
                # something other than a Field.
                del fields[attrname]

        fields.update(new_fields)
        attrs['fields'] = fields
        obj_cls = super(DataObjectMetaclass, cls).__new__(cls, name, bases,
                                                          attrs)

        for attrname, prop in new_properties.items():
            prop.install(attrname, obj_cls)

        # Register the new class so fields can forward-reference it.
        classes_by_name[name] = obj_cls

        return obj_cls


class DataObject(object, metaclass=DataObjectMetaclass):

    """An object decoded from the API, holding its values in a field store.

    Fields are read and set either as attributes or as items, so
    ``charge.amount`` and ``charge['amount']`` are the same value. Setting a
    field only changes the local object and marks the field as unsaved; no
    request is made.

    Reading a field the object doesn't have raises `AttributeError` (or
    `KeyError` through item access).

    """

    id = paymentobjects.fields.Field(default=None)

    def __init__(self, id=None, api_key=None, **params):
        """Initializes a new object.

        Parameter `id` is the object's ID, or a dictionary of the object's
        values. Optional parameter `api_key` is the API key to use for any
        requests about the object, instead of the process-wide key. Other
        keyword parameters are kept as parameters for fetching the object.

        """
        self._values = {}
        self._unsaved = []
        self._dropped = set()
        self._api_key = api_key
        self._retrieve_params = params
        if isinstance(id, dict):
            self.refresh_from(id, api_key)
        elif id is not None:
            self._values['id'] = id

    @classmethod
    def construct_from(cls, values, api_key=None):
        """Decodes a dictionary of API values into a new instance.

        Nested dictionaries are decoded into objects as well. The new
        instance has no unsaved fields.

        """
        self = cls(values.get('id'), api_key=api_key)
        self.refresh_from(values, api_key)
        return self

    @classmethod
    def subclass_with_constant_field(cls, fieldname, value):
        """Returns the subclass of this class declared with a `Constant`
        field of the given name and value.

        Use this method in combination with the `fields.Constant` field class
        to find the class for an object from the API by its ``object`` field.

        """
        try:
            clsname = classes_by_constant_field[fieldname][value]
        except KeyError:
            # No matching classes, then.
            pass
        else:
            found = find_by_name(clsname)
            if issubclass(found, cls):
                return found

        raise ValueError('No such subclass of %s with field %r equivalent to %r'
            % (cls.__name__, fieldname, value))

    @property
    def api_key(self):
        """The API key bound to this object, if any."""
        return self._api_key

    def refresh_from(self, values, api_key=None, partial=False):
        """Replaces the object's values with the given API values.

        Values are decoded with `convert_to_object()`, and fields given in
        `values` are no longer unsaved. Unless `partial` is true, fields not
        given in `values` are dropped from the object; reading them afterward
        raises an error saying the value is no longer available.

        Use this only for values from the API. Data from inside your
        application should be set as attributes of the object, so that it's
        marked unsaved.

        """
        if not isinstance(values, dict):
            raise TypeError("Cannot update %r from non-dictionary data source %r"
                % (self, values))
        if api_key is not None:
            self._api_key = api_key

        if not partial:
            for key in [k for k in self._values if k not in values]:
                del self._values[key]
                self._dropped.add(key)

        for key, value in values.items():
            self._values[key] = convert_to_object(value, self._api_key)
            self._dropped.discard(key)

        self._unsaved = [k for k in self._unsaved
                         if k in self._values and k not in values]

    def _require_delivery(self, key=None):
        """Makes the object's values available before field `key` is read.

        Every read of the field store goes through this check. Plain
        `DataObject` instances always have their values, so this
        implementation does nothing.

        """
        pass

    def is_dropped(self, key):
        """Returns whether field `key` was dropped by the last refresh."""
        return key in self._dropped

    def unsaved_changes(self):
        """Returns a dictionary of the fields set since the object was last
        refreshed or saved, in the order they were first set."""
        return dict((k, self._values[k]) for k in self._unsaved)

    def __getitem__(self, key):
        self._require_delivery(key)
        try:
            return self._values[key]
        except KeyError:
            if key in self._dropped:
                raise KeyError(
                    'You tried to access the %r attribute but it is no longer '
                    'available on this %s. It was dropped when the object was '
                    'last refreshed from the API, such as when it was deleted.'
                    % (key, type(self).__name__))
            raise

    def __setitem__(self, key, value):
        self._values[key] = value
        self._dropped.discard(key)
        # The ID is the object's identity, not a field to save.
        if key != 'id' and key not in self._unsaved:
            self._unsaved.append(key)

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError(name)
        try:
            return self[name]
        except KeyError as exc:
            raise AttributeError(*exc.args)

    def __setattr__(self, name, value):
        if name.startswith('_') or name in type(self).fields:
            return super(DataObject, self).__setattr__(name, value)
        self[name] = value

    def __contains__(self, key):
        self._require_delivery(key)
        return key in self._values

    def __iter__(self):
        return iter(self.keys())

    def get(self, key, default=None):
        try:
            return self[key]
        except KeyError:
            return default

    def keys(self):
        self._require_delivery()
        return list(self._values.keys())

    def values(self):
        self._require_delivery()
        return list(self._values.values())

    def items(self):
        self._require_delivery()
        return list(self._values.items())

    def to_dict(self):
        """Encodes the object and the objects in it as a dictionary."""
        self._require_delivery()
        return _plain(self)

    def to_param(self):
        """Returns the value to send for the object when it is a request
        parameter."""
        return self.to_dict()

    def __repr__(self):
        ident = ''
        if self._values.get('id') is not None:
            ident = ' id=%s' % (self._values['id'],)
        return '<%s%s at %#x> JSON: %s' % (type(self).__name__, ident,
            id(self), json.dumps(_plain(self), sort_keys=True, default=str))

    def __str__(self):
        return json.dumps(self.to_dict(), sort_keys=True, indent=2)
