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

import paymentobjects
from paymentobjects import errors, fields, promise
from tests import utils


class Gizmo(promise.PromiseObject):
    object = fields.Constant('gizmo')
    name   = fields.Field()


class Gadget(promise.PromiseObject):
    object = fields.Constant('gadget')
    plural = 'gadgetry'


class TestPromiseObjects(utils.HttpTestCase):

    cls = Gizmo

    def gizmo_data(self, **kwargs):
        data = {'id': 'gz_1', 'object': 'gizmo', 'name': 'Mollifred',
                'color': 'blue'}
        data.update(kwargs)
        return data

    def test_package_exports(self):
        self.assertTrue(paymentobjects.PromiseObject is promise.PromiseObject)
        for name in paymentobjects.__all__:
            self.assertTrue(hasattr(paymentobjects, name),
                            'paymentobjects exports %s' % name)

    def test_urls(self):
        self.assertEqual('/v1/gizmos', Gizmo.class_url())
        self.assertEqual('/v1/gadgetry', Gadget.class_url())
        self.assertEqual('/v1/gizmos/gz_1', Gizmo('gz_1').instance_url())
        self.assertEqual('gizmo', Gizmo.kind())

    def test_construct_makes_no_request(self):
        g = self.cls('gz_1')
        self.assertEqual('gz_1', g.id)
        self.assertEqual('gizmo', g.object)
        self.cls.construct_from(self.gizmo_data())
        self.cls(self.gizmo_data())
        self.assertNoRequests()

    def test_set_makes_no_request(self):
        g = self.cls('gz_1')
        g.name = 'New name'
        g['color'] = 'red'
        self.assertNoRequests()

    def test_deliver_on_use(self):
        h = self.respond(self.gizmo_data())
        g = self.cls('gz_1')
        self.assertEqual([], h.method_calls)

        self.assertEqual(g.name, 'Mollifred')
        self.assertEqual(g.color, 'blue')
        self.assertEqual(1, h.request.call_count, 'object was fetched once')
        req = utils.request_args(h)
        self.assertEqual('GET', req['method'])
        self.assertEqual('https://api.example.com/v1/gizmos/gz_1', req['uri'])

    def test_deliver_on_item_use(self):
        h = self.respond(self.gizmo_data())
        g = self.cls('gz_1')
        self.assertEqual(g['color'], 'blue')
        self.assertEqual(1, h.request.call_count)

    def test_deliver_for_missing_field(self):
        h = self.respond(self.gizmo_data())
        g = self.cls('gz_1')
        self.assertRaises(AttributeError, lambda: g.size)
        self.assertEqual(1, h.request.call_count)

    def test_set_before_delivery(self):
        self.respond(self.gizmo_data())
        g = self.cls('gz_1')
        g.name = 'New name'

        self.assertEqual(g.color, 'blue')
        self.assertEqual(g.name, 'New name',
            'local changes survive delivery')
        self.assertEqual({'name': 'New name'}, g.unsaved_changes())

    def test_no_id(self):
        g = self.cls()
        self.assertRaises(errors.InvalidRequestError, lambda: g.name)
        self.assertRaises(errors.InvalidRequestError, lambda: g['color'])
        self.assertRaises(errors.InvalidRequestError, g.refresh)
        try:
            g.refresh()
        except errors.InvalidRequestError as exc:
            self.assertEqual('id', exc.param)
            self.assertTrue(exc.http_status is None)
        self.assertNoRequests()

    def test_no_id_without_api_key(self):
        from paymentobjects import config
        config.default.api_key = None
        self.assertRaises(errors.InvalidRequestError, self.cls().refresh)
        self.assertRaises(errors.AuthenticationError, self.cls('gz_1').refresh)
        self.assertNoRequests()

    def test_refresh(self):
        h = self.respond(self.gizmo_data(), self.gizmo_data(name='Renamed'))
        g = self.cls('gz_1')
        self.assertEqual(g.name, 'Mollifred')

        g.name = 'Local'
        g.refresh()
        self.assertEqual(g.name, 'Renamed')
        self.assertEqual({}, g.unsaved_changes(),
            'refreshing discards unsaved changes')
        self.assertEqual(2, h.request.call_count)

    def test_refresh_materialized(self):
        h = self.respond(self.gizmo_data(color='green'))
        g = self.cls.construct_from(self.gizmo_data())
        self.assertEqual(g.color, 'blue')
        g.refresh()
        self.assertEqual(g.color, 'green')
        self.assertEqual(1, h.request.call_count)

    def test_retrieve(self):
        h = self.respond(self.gizmo_data())
        g = self.cls.retrieve('gz_1')
        self.assertTrue(isinstance(g, Gizmo))
        self.assertEqual(1, h.request.call_count)
        self.assertEqual(g.name, 'Mollifred')
        self.assertEqual(self.api_key, g.api_key)
        self.assertEqual(1, h.request.call_count)

    def test_retrieve_params(self):
        h = self.respond(self.gizmo_data())
        self.cls.retrieve('gz_1', expand=['owner'])
        self.assertEqual('https://api.example.com/v1/gizmos/gz_1?expand%5B%5D=owner',
                         utils.request_args(h)['uri'])

    def test_ids_are_escaped(self):
        self.assertEqual('/v1/gizmos/12', Gizmo(12).instance_url())
        self.assertEqual('/v1/gizmos/a%2Fb%20c', Gizmo('a/b c').instance_url())
        self.assertEqual('/v1/gizmos/%E2%98%83', Gizmo(u'☃').instance_url())
        self.assertRaises(errors.InvalidRequestError, Gizmo('').instance_url)

    def test_unicode_id_requests(self):
        h = self.respond({'status': 404, 'content': utils.api_error_data(
            u'No such gizmo: ☃', param='id')})
        g = self.cls(u'☃')
        self.assertRaises(errors.InvalidRequestError, g.refresh)
        self.assertEqual('https://api.example.com/v1/gizmos/%E2%98%83',
                         utils.request_args(h)['uri'])

    def test_failed_refresh_keeps_state(self):
        self.respond({'status': 500, 'content': utils.api_error_data('Oops')})
        g = self.cls.construct_from(self.gizmo_data())
        g.name = 'Local'
        self.assertRaises(errors.APIError, g.refresh)
        self.assertEqual(g.name, 'Local')
        self.assertEqual({'name': 'Local'}, g.unsaved_changes())

    def test_repr_makes_no_request(self):
        g = self.cls('gz_1')
        self.assertTrue('id=gz_1' in repr(g))
        self.assertNoRequests()
