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

The kinds of resources the API provides.

"""

from paymentobjects import fields
from paymentobjects.dataobject import DataObject, convert_to_object
from paymentobjects.operations import Creatable, Deletable, Listable, Savable
from paymentobjects.promise import PromiseObject


class Account(PromiseObject):

    """The account the API key belongs to.

    There is only one account per API key, so it's retrieved without an ID.

    """

    object = fields.Constant('account')
    plural = 'account'

    email = fields.Field()
    charge_enabled = fields.Field()
    transfer_enabled = fields.Field()
    details_submitted = fields.Field()
    currencies_supported = fields.Field()

    @classmethod
    def retrieve(cls, id=None, api_key=None, **params):
        return super(Account, cls).retrieve(id, api_key, **params)

    def instance_url(self):
        return self.class_url()


class Card(DataObject):

    object = fields.Constant('card')

    last4 = fields.Field()
    type = fields.Field()
    exp_month = fields.Field()
    exp_year = fields.Field()
    fingerprint = fields.Field()
    country = fields.Field()
    name = fields.Field()


class Charge(Creatable, Listable, Savable, PromiseObject):

    object = fields.Constant('charge')

    livemode = fields.Field()
    amount = fields.Field()
    currency = fields.Field()
    paid = fields.Field()
    refunded = fields.Field()
    amount_refunded = fields.Field()
    captured = fields.Field()
    card = fields.Field()
    customer = fields.Field()
    invoice = fields.Field()
    description = fields.Field()
    failure_message = fields.Field()
    dispute = fields.Field()
    created = fields.Field()

    def refund(self, **params):
        """Refunds the charge, or part of it if an ``amount`` is given."""
        response, api_key = self._api_request(
            'post', self.instance_url() + '/refund', self._api_key, params)
        self.update_from_response(response, api_key)
        return self

    def capture(self, **params):
        """Captures a charge that was created uncaptured."""
        response, api_key = self._api_request(
            'post', self.instance_url() + '/capture', self._api_key, params)
        self.update_from_response(response, api_key)
        return self

    def update_dispute(self, **params):
        """Submits evidence for the charge's dispute, returning the updated
        dispute."""
        response, api_key = self._api_request(
            'post', self.instance_url() + '/dispute', self._api_key, params)
        self.refresh_from({'dispute': response}, api_key, partial=True)
        return self['dispute']


class Customer(Creatable, Listable, Savable, Deletable, PromiseObject):

    object = fields.Constant('customer')

    livemode = fields.Field()
    email = fields.Field()
    description = fields.Field()
    active_card = fields.Field()
    cards = fields.Field()
    subscription = fields.Field()
    discount = fields.Field()
    account_balance = fields.Field()
    delinquent = fields.Field()
    created = fields.Field()

    charges = fields.Listing('Charge', 'customer')
    invoices = fields.Listing('Invoice', 'customer')
    invoice_items = fields.Listing('InvoiceItem', 'customer')

    def add_invoice_item(self, **params):
        """Creates a new invoice item for this customer."""
        params['customer'] = self.id
        return InvoiceItem.create(api_key=self._api_key, **params)

    def upcoming_invoice(self, **params):
        """Returns the invoice that would next be billed to this customer."""
        params['customer'] = self.id
        return Invoice.upcoming(api_key=self._api_key, **params)

    def update_subscription(self, **params):
        """Subscribes the customer to a plan, returning the new
        subscription."""
        response, api_key = self._api_request(
            'post', self.instance_url() + '/subscription', self._api_key,
            params)
        self.refresh_from({'subscription': response}, api_key, partial=True)
        return self['subscription']

    def cancel_subscription(self, **params):
        """Cancels the customer's subscription, returning the canceled
        subscription."""
        response, api_key = self._api_request(
            'delete', self.instance_url() + '/subscription', self._api_key,
            params)
        self.refresh_from({'subscription': response}, api_key, partial=True)
        return self['subscription']

    def delete_discount(self):
        """Removes the customer's discount."""
        response, api_key = self._api_request(
            'delete', self.instance_url() + '/discount', self._api_key)
        self.refresh_from({'discount': None}, api_key, partial=True)


class Invoice(Creatable, Listable, Savable, PromiseObject):

    object = fields.Constant('invoice')

    livemode = fields.Field()
    customer = fields.Field()
    amount_due = fields.Field()
    total = fields.Field()
    subtotal = fields.Field()
    paid = fields.Field()
    closed = fields.Field()
    attempted = fields.Field()
    lines = fields.Field()
    date = fields.Field()

    @classmethod
    def upcoming(cls, api_key=None, **params):
        """Returns the upcoming invoice for the customer given as the
        ``customer`` parameter."""
        response, api_key = cls._api_request(
            'get', cls.class_url() + '/upcoming', api_key, params)
        return convert_to_object(response, api_key, cls)

    def pay(self):
        """Attempts payment of the invoice now, instead of waiting for the
        automatic attempt."""
        response, api_key = self._api_request(
            'post', self.instance_url() + '/pay', self._api_key)
        self.update_from_response(response, api_key)
        return self


class InvoiceItem(Creatable, Listable, Savable, Deletable, PromiseObject):

    object = fields.Constant('invoiceitem')
    plural = 'invoiceitems'

    livemode = fields.Field()
    customer = fields.Field()
    invoice = fields.Field()
    amount = fields.Field()
    currency = fields.Field()
    description = fields.Field()
    date = fields.Field()


class Plan(Creatable, Listable, Savable, Deletable, PromiseObject):

    object = fields.Constant('plan')

    livemode = fields.Field()
    name = fields.Field()
    amount = fields.Field()
    currency = fields.Field()
    interval = fields.Field()
    interval_count = fields.Field()
    trial_period_days = fields.Field()


class Coupon(Creatable, Listable, Deletable, PromiseObject):

    object = fields.Constant('coupon')

    livemode = fields.Field()
    duration = fields.Field()
    percent_off = fields.Field()
    amount_off = fields.Field()
    max_redemptions = fields.Field()
    times_redeemed = fields.Field()
    redeem_by = fields.Field()


class Token(Creatable, PromiseObject):

    object = fields.Constant('token')

    livemode = fields.Field()
    used = fields.Field()
    card = fields.Field()
    created = fields.Field()


class Event(Listable, PromiseObject):

    object = fields.Constant('event')

    livemode = fields.Field()
    type = fields.Field()
    data = fields.Field()
    pending_webhooks = fields.Field()
    created = fields.Field()
