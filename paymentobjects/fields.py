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

Fields are class attributes for `DataObject` subclasses that declare the
attributes a kind of resource is known to have.

Declared fields don't hold any data themselves. Every value lives in the
object's field store, so reading and writing a declared field is the same as
using the object's item interface, including the lazy delivery and change
tracking that go with it. Undeclared attributes work too; declaring them
gives a kind of resource its documented shape and default values.

This module also provides functionality for other field-like properties
through the `Property` class, and a `Property` subclass that lists a
resource's related objects, `Listing`.

"""

import paymentobjects.dataobject


# Marks a field declared without a default value.
NOT_GIVEN = object()


class Property(object):

    """An attribute that can be installed declaratively on a `DataObject` to
    provide data loading behavior.

    The primary kinds of `Property` objects are `Field` (and its subclasses)
    and `Listing` objects.

    """

    def install(self, attrname, cls):
        """Signals to the `Property` that it has been installed on the given
        class as an attribute with the given name."""
        self.attrname = attrname
        self.of_cls = cls


class Field(Property):

    """A property that reads and writes one value of the object's field
    store."""

    def __init__(self, api_name=None, default=NOT_GIVEN):
        """Sets the field's key in the field store and default value.

        Optional parameter `api_name` is the key of this field's value in the
        API's representation of the object. If not given, the attribute name
        of the field when its class was defined is used.

        Optional parameter `default` is the value to return when the object
        has no value for the field. `default` can be a value or a callable,
        in which case it is called with the object to produce the value. If
        no default is given, reading a missing field raises `AttributeError`
        like any other missing attribute. Fields dropped from the object by
        a refresh always raise.

        """
        self.api_name = api_name
        self.default = default

    def install(self, attrname, cls):
        super(Field, self).install(attrname, cls)
        if self.api_name is None:
            self.api_name = attrname

    def __get__(self, obj, cls):
        if obj is None:
            # Yield the real field instance when gotten through the class.
            return self

        try:
            return obj[self.api_name]
        except KeyError as exc:
            if self.default is NOT_GIVEN or obj.is_dropped(self.api_name):
                raise AttributeError(*exc.args)
        if callable(self.default):
            return self.default(obj)
        return self.default

    def __set__(self, obj, value):
        obj[self.api_name] = value


class Constant(Field):

    """A field for data that always has a certain value for all instances of
    the owning class.

    The ``object`` field of each kind of resource is a `Constant` naming the
    kind, such as ``charge`` or ``customer``. Declaring it registers the
    class, so that objects of that kind found in API responses are decoded
    into instances of the class.

    """

    def __init__(self, value, **kwargs):
        """Sets the field's constant value to parameter `value`."""
        super(Constant, self).__init__(**kwargs)
        self.value = value

    def install(self, attrname, cls):
        """Records the class that owns this field.

        This implementation also registers the owning class by this constant
        field's value, so that `DataObject.subclass_with_constant_field()`
        will find this field's class.

        """
        super(Constant, self).install(attrname, cls)

        cf = paymentobjects.dataobject.classes_by_constant_field
        cf.setdefault(self.api_name, {})[self.value] = cls.__name__

    def __get__(self, obj, cls):
        if obj is None:
            return self
        # Since it's a constant, always return the same value.
        return self.value

    def __set__(self, obj, value):
        if value != self.value:
            raise ValueError('Value %r is not expected value %r'
                % (value, self.value))


class Listing(Property):

    """A property listing the resources of another kind that belong to the
    owning resource.

    For example, a customer's charges are the charges listed with a
    ``customer`` filter of the customer's ID:

    >>> class Customer(PromiseObject):
    ...     charges = Listing('Charge', 'customer')
    ...
    >>> c = Customer('cus_123')
    >>> page = c.charges  # same as Charge.all(customer='cus_123')

    The list is requested with the owning object's API key.

    """

    def __init__(self, cls, filter_name):
        """Sets the class of the listed resources and the name of the filter
        that selects those belonging to the owner.

        `cls` may be a class or the name of one, to allow forward references.

        """
        self.cls = cls
        self.filter_name = filter_name

    def get_cls(self):
        cls = self.__dict__['cls']
        if not callable(cls):
            cls = paymentobjects.dataobject.find_by_name(cls)
        return cls

    def set_cls(self, cls):
        self.__dict__['cls'] = cls

    cls = property(get_cls, set_cls)

    def __get__(self, obj, owner):
        if obj is None:
            return self
        filters = {self.filter_name: obj.id}
        return self.cls.all(api_key=obj.api_key, **filters)
