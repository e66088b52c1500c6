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

paymentobjects are real subclassable Python objects representing the
resources of a payment processing API: customers, charges, invoices and so
on.

paymentobjects have:

* lazy objects that make no request until their data is used

* change tracking, so saving an object sends only the fields that were set

* decoding of the objects nested in API responses into instances of their
  kind's class

* a typed exception for each kind of API failure, carrying the HTTP status
  and response body


Example
=======

    >>> import paymentobjects
    >>> from paymentobjects import Charge, Customer
    >>> paymentobjects.config.default.api_key = 'sk_test_abc123'
    >>> customer = Customer.create(email='fred@example.com')
    >>> customer.description = 'Fred'
    >>> customer.save()   # sends only description=Fred
    >>> charge = Charge.create(amount=400, currency='usd',
    ...                        customer=customer.id)
    >>> charge.card.last4
    '4242'
    >>> Customer('cus_123').email   # fetched here, not when constructed


Per-request API keys
====================

Every operation that makes a request takes an optional `api_key` parameter.
An object made by such an operation keeps using that key for its own
requests, instead of the process-wide key:

    >>> charge = Charge.retrieve('ch_123', api_key='sk_test_other')
    >>> charge.refund()   # also uses sk_test_other


Errors
======

API failures are raised as the exceptions in `paymentobjects.errors`:

    >>> from paymentobjects.errors import CardError
    >>> try:
    ...     Charge.create(amount=400, currency='usd', card=card_params)
    ... except CardError as exc:
    ...     print(exc.code, exc.http_status)
    card_declined 402

"""

__version__ = '1.0'
__author__ = 'Six Apart Ltd.'

import paymentobjects.dataobject
import paymentobjects.fields as fields
import paymentobjects.config as config
import paymentobjects.errors as errors
import paymentobjects.http
from paymentobjects.promise import PromiseObject
from paymentobjects.listobject import ListObject
from paymentobjects.resources import (Account, Card, Charge, Coupon, Customer,
    Event, Invoice, InvoiceItem, Plan, Token)

__all__ = ('PromiseObject', 'fields', 'config', 'errors', 'ListObject',
           'Account', 'Card', 'Charge', 'Coupon', 'Customer', 'Event',
           'Invoice', 'InvoiceItem', 'Plan', 'Token')
