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

Mixins adding API operations to `PromiseObject` resource classes.

Each kind of resource declares the operations the API supports for it by
listing these mixins among its base classes:

>>> class Plan(Creatable, Listable, Savable, Deletable, PromiseObject):
...     object = fields.Constant('plan')

Every resource can be retrieved and refreshed through `PromiseObject`.

"""

import logging

from paymentobjects.dataobject import convert_to_object
from paymentobjects.listobject import ListObject

log = logging.getLogger('paymentobjects.operations')


class Creatable(object):

    @classmethod
    def create(cls, api_key=None, **params):
        """Creates a new resource with the given parameters through an HTTP
        ``POST`` request, and returns it.

        Optional parameter `api_key` is used for this request and for every
        later request about the new resource.

        """
        response, api_key = cls._api_request('post', cls.class_url(), api_key,
                                             params)
        return convert_to_object(response, api_key, cls)


class Listable(object):

    @classmethod
    def all(cls, api_key=None, **filters):
        """Lists the resources matching the given filters, returning a
        `ListObject` of them."""
        url = cls.class_url()
        response, api_key = cls._api_request('get', url, api_key, filters,
                                             listing=True)
        return ListObject.from_response(response, api_key, url=url,
                                        filters=filters, config=cls.config)


class Savable(object):

    def save(self):
        """Saves the fields set on the object since it was last refreshed or
        saved, through an HTTP ``POST`` request.

        Only the unsaved fields are sent. The values in the response are
        merged into the object. If no fields were set, no request is made.

        """
        changes = self.unsaved_changes()
        if not changes:
            log.debug('Not saving %r with no unsaved changes', self)
            return self

        response, api_key = self._api_request('post', self.instance_url(),
                                              self._api_key, changes)
        self.update_from_response(response, api_key, merge=True)
        self._unsaved = [k for k in self._unsaved if k not in changes]
        return self


class Deletable(object):

    def delete(self, **params):
        """Deletes the remote resource through an HTTP ``DELETE`` request.

        Afterward the object has only the values in the API's response,
        generally its ``id`` and ``deleted``. Reading any of its other fields
        raises an error.

        """
        response, api_key = self._api_request('delete', self.instance_url(),
                                              self._api_key, params)
        self.update_from_response(response, api_key)
        return self
