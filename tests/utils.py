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

import unittest

import httplib2
import mock
import simplejson as json

from paymentobjects import config


def make_response(response):
    """Returns the ``(response, content)`` pair a user agent would return.

    `response` is either the content of a successful response (a string, or
    a structure to encode as JSON), or a dictionary with a ``status`` and the
    response ``content``.

    """
    default_response = {
        'status':       200,
        'content-type': 'application/json',
    }

    if isinstance(response, dict) and 'status' in response:
        response = dict(response)
        content = response.pop('content', '')
        response_info = dict(default_response)
        response_info.update(response)
    else:
        response_info = dict(default_response)
        content = response

    if not isinstance(content, (str, bytes)):
        content = json.dumps(content)
    return httplib2.Response(response_info), content


def mock_http(*responses):
    """Returns a mock user agent that answers its requests with the given
    responses, in order."""
    http = mock.NonCallableMock(spec_set=httplib2.Http)
    http.request.side_effect = [make_response(r) for r in responses]
    return http


def request_args(http, index=0):
    """Returns the keyword arguments of one request made through `http`."""
    return http.request.call_args_list[index][1]


class HttpTestCase(unittest.TestCase):

    """A test case whose requests go to a mock user agent, with a known
    process-wide API key."""

    api_key = 'sk_test_global'

    def setUp(self):
        config.default.reset()
        config.default.api_key = self.api_key
        config.default.api_base = 'https://api.example.com'
        self.http = mock.NonCallableMock(spec_set=httplib2.Http)
        config.default.http = self.http

    def tearDown(self):
        config.default.reset()

    def respond(self, *responses):
        self.http = mock_http(*responses)
        config.default.http = self.http
        return self.http

    def assertNoRequests(self):
        self.assertEqual([], self.http.method_calls, 'no requests were made')


def customer_data(**kwargs):
    data = {
        'id': 'cus_test_customer',
        'object': 'customer',
        'livemode': False,
        'created': 1304114758,
        'email': 'fred@example.com',
        'description': 'a test customer',
        'active_card': None,
        'cards': {
            'object': 'list',
            'url': '/v1/customers/cus_test_customer/cards',
            'count': 0,
            'data': [],
        },
    }
    data.update(kwargs)
    return data


def card_data(**kwargs):
    data = {
        'id': 'card_test',
        'object': 'card',
        'type': 'Visa',
        'last4': '4242',
        'exp_month': 11,
        'exp_year': 2012,
        'fingerprint': 'ZOkQxgGnHUpH8Ekp',
        'country': 'US',
    }
    data.update(kwargs)
    return data


def charge_data(**kwargs):
    data = {
        'id': 'ch_test_charge',
        'object': 'charge',
        'livemode': False,
        'amount': 100,
        'currency': 'usd',
        'paid': True,
        'refunded': False,
        'created': 1304114826,
        'card': card_data(),
        'fee': 0,
    }
    data.update(kwargs)
    return data


def charge_list_data(count=3, url='/v1/charges'):
    return {
        'object': 'list',
        'url': url,
        'count': count,
        'data': [charge_data(id='ch_test_%d' % i) for i in range(count)],
    }


def invoice_data(**kwargs):
    data = {
        'id': 'in_test_invoice',
        'object': 'invoice',
        'livemode': False,
        'customer': 'cus_test_customer',
        'amount_due': 1000,
        'total': 1000,
        'subtotal': 1000,
        'paid': False,
        'closed': False,
        'attempted': False,
        'date': 1349738950,
        'lines': {
            'object': 'list',
            'url': '/v1/invoices/in_test_invoice/lines',
            'count': 1,
            'data': [{'id': 'ii_test', 'object': 'invoiceitem',
                      'amount': 1000, 'currency': 'usd'}],
        },
    }
    data.update(kwargs)
    return data


def api_error_data(message='Missing id', param=None, type='invalid_request_error',
                   code=None):
    error = {'type': type, 'message': message}
    if param is not None:
        error['param'] = param
    if code is not None:
        error['code'] = code
    return {'error': error}
