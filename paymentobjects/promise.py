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

`PromiseObject` is the base class of the API's resources: objects with their
own URL that can be fetched, and that delay fetching until they're used.

An instance made with only an ID is "promised" to the caller. Reading its ID
makes no request, but as soon as the caller reads any other field, only
*then* is the resource actually fetched.

"""

import logging
from urllib.parse import quote

from paymentobjects import config as configuration
from paymentobjects import errors, http
from paymentobjects.dataobject import DataObject

log = logging.getLogger('paymentobjects.promise')


def quote_id(id):
    """Escapes an object ID for use as one segment of a URL path.

    The ID is converted to a string and percent-encoded as UTF-8, including
    any slashes, so numbers and non-ASCII IDs are requested as given.

    """
    return quote(str(id), safe='')


class PromiseObject(DataObject):

    """A `DataObject` that can be fetched over HTTP, and that delays actual
    retrieval of the remote resource until required by the use of its data.

    Subclasses declare which kind of resource they represent with an
    ``object`` `Constant` field. Their collection lives at the kind's plural
    below the API version, such as ``/v1/charges``; set `plural` when the
    plural isn't the kind with an "s" added.

    """

    plural = None
    config = None

    def __init__(self, id=None, api_key=None, **params):
        """Initializes an undelivered object with the given ID.

        No request is made until a field other than ``id`` is read. If `id`
        is a dictionary of values instead, the object is delivered with
        those values.

        """
        self._delivered = False
        super(PromiseObject, self).__init__(id, api_key, **params)

    @classmethod
    def kind(cls):
        """Returns the API's name for this kind of resource."""
        field = cls.fields.get('object')
        if field is not None and hasattr(field, 'value'):
            return field.value
        return cls.__name__.lower()

    @classmethod
    def class_url(cls):
        """Returns the API path of the collection of this kind of resource."""
        config = configuration.resolve(cls.config)
        plural = cls.plural or '%ss' % cls.kind()
        return '/%s/%s' % (config.api_version, quote(plural))

    def instance_url(self):
        """Returns the API path of this resource.

        If the object has no ID, raises `InvalidRequestError` instead.

        """
        id = self._values.get('id')
        if id is None or id == '':
            raise errors.InvalidRequestError(
                'Could not determine which URL to request: %s instance has '
                'invalid ID: %r' % (type(self).__name__, id), 'id')
        return '%s/%s' % (self.class_url(), quote_id(id))

    @classmethod
    def _api_request(cls, method, url, api_key=None, params=None,
                     listing=False):
        return http.request(method, url, api_key, params, cls.config,
                            listing=listing)

    @classmethod
    def retrieve(cls, id, api_key=None, **params):
        """Fetches the resource with the given ID.

        Optional parameter `api_key` is used for this request and for every
        later request about the returned object.

        """
        instance = cls(id, api_key, **params)
        instance.refresh()
        return instance

    def refresh(self):
        """Fetches the resource again, replacing all the object's values.

        Any unsaved changes to the object are discarded.

        """
        response, api_key = self._api_request('get', self.instance_url(),
                                              self._api_key,
                                              self._retrieve_params)
        self.update_from_response(response, api_key)
        return self

    def deliver(self):
        """Fills the instance with the data it represents.

        Unlike `refresh()`, fields set on the object before delivery keep
        their local values and are still unsaved afterward.

        """
        log.debug('Delivering %s %r', type(self).__name__,
                  self._values.get('id'))
        unsaved = self.unsaved_changes()
        self.refresh()
        for key, value in unsaved.items():
            self[key] = value

    def to_param(self):
        """Returns the resource's ID, which is how the API refers to other
        resources in request parameters.

        The resource is not delivered to find it.

        """
        return self._values.get('id')

    def _require_delivery(self, key=None):
        if key != 'id' and not self._delivered:
            self.deliver()

    def refresh_from(self, values, api_key=None, partial=False):
        super(PromiseObject, self).refresh_from(values, api_key, partial)
        # A complete set of values constitutes delivery.
        if not partial:
            self._delivered = True

    def update_from_response(self, response, api_key=None, merge=False):
        """Adds the content of an API response about this resource to the
        object.

        If `merge` is true, the response's values are added to the object's
        existing values instead of replacing them. Either way the object is
        delivered afterward.

        """
        self.refresh_from(response, api_key, partial=merge)
        self._delivered = True
