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

`ListObject` represents a page of a collection of resources, as returned when
listing resources such as ``Charge.all()``.

A list remembers the filters it was requested with, so a list can be
requested again with more filters:

>>> invoices = Invoice.all(customer='cus_123')
>>> paid = invoices.all(paid=True)  # customer=cus_123&paid=true

"""

from paymentobjects import fields, http
from paymentobjects.dataobject import DataObject, convert_to_object
from paymentobjects.promise import quote_id


class SequenceProxy(object):

    """An abstract class implementing the sequence protocol by proxying it to
    an instance attribute.

    `SequenceProxy` instances act like sequences by forwarding all sequence
    method calls to their `data` attributes. The `data` attribute should be a
    list or some other that implements the sequence protocol.

    """

    def make_sequence_method(methodname):
        """Makes a new function that proxies calls to `methodname` to the
        `data` attribute of the instance on which the function is called as an
        instance method."""
        def seqmethod(self, *args, **kwargs):
            # Proxy these methods to self.data.
            return getattr(self.data, methodname)(*args, **kwargs)
        seqmethod.__name__ = methodname
        return seqmethod

    __len__      = make_sequence_method('__len__')
    __getitem__  = make_sequence_method('__getitem__')
    __iter__     = make_sequence_method('__iter__')
    __reversed__ = make_sequence_method('__reversed__')
    __contains__ = make_sequence_method('__contains__')


class ListObject(SequenceProxy, DataObject):

    """A `DataObject` representing a page of other API objects.

    The objects in the page are decoded into instances of their kind's class,
    and are available as the list's `data` field or through the list's
    sequence interface.

    Slicing a `ListObject` instance requests a new page, translating the
    slice into ``offset`` and ``count`` filter parameters.

    """

    object = fields.Constant('list')
    data = fields.Field(default=lambda obj: [])
    url = fields.Field(default=None)
    count = fields.Field()

    def __init__(self, id=None, api_key=None, **params):
        self._url = None
        self._filters = {}
        self._config = None
        super(ListObject, self).__init__(id, api_key, **params)

    @classmethod
    def from_response(cls, response, api_key=None, url=None, filters=None,
                      config=None):
        """Decodes a list response into a new `ListObject` instance.

        Parameters `url` and `filters` are the API path and the filters the
        list was requested with. A response that is a bare JSON array is
        taken as the list's data.

        """
        if isinstance(response, list):
            response = {'data': response}
        self = cls.construct_from(response, api_key)
        self._url = url
        self._filters = dict(filters or {})
        self._config = config
        return self

    @property
    def filters(self):
        """The filters this list was requested with."""
        return dict(self._filters)

    def list_url(self):
        """Returns the API path of the listed collection."""
        return self._values.get('url') or self._url

    def _request(self, method, url, api_key, params, listing=False):
        if api_key is None:
            api_key = self._api_key
        return http.request(method, url, api_key, params, self._config,
                            listing=listing)

    def all(self, api_key=None, **filters):
        """Requests the collection again with additional filters.

        The given filters are added to the filters this list was requested
        with, replacing any filters of the same name.

        """
        params = dict(self._filters)
        params.update(filters)
        url = self.list_url()
        response, api_key = self._request('get', url, api_key, params,
                                          listing=True)
        return type(self).from_response(response, api_key, url=url,
                                        filters=params, config=self._config)

    def retrieve(self, id, api_key=None, **params):
        """Fetches the object with the given ID from this collection."""
        url = '%s/%s' % (self.list_url(), quote_id(id))
        response, api_key = self._request('get', url, api_key, params)
        return convert_to_object(response, api_key)

    def create(self, api_key=None, **params):
        """Adds a new object to this collection, such as a new card to a
        customer's cards."""
        response, api_key = self._request('post', self.list_url(), api_key,
                                          params)
        return convert_to_object(response, api_key)

    def __getitem__(self, key):
        if isinstance(key, slice):
            args = dict()
            if key.start is not None:
                args['offset'] = key.start
                if key.stop is not None:
                    args['count'] = key.stop - key.start
            elif key.stop is not None:
                args['count'] = key.stop
            return self.all(**args)
        if isinstance(key, int):
            return self.data[key]
        return DataObject.__getitem__(self, key)
