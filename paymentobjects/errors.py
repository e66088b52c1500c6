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

Exceptions raised by `paymentobjects`.

Every failure of an API call is raised as one of the `Error` subclasses here,
so callers can branch on the kind of failure: a `CardError` for a declined
payment, an `AuthenticationError` for a bad or missing API key, and so on.

Errors built from an HTTP response carry the response's status code, its raw
body, and its body as decoded JSON (or `None` if it wasn't JSON).

"""


class Error(Exception):

    """Base class of all the errors raised for API requests."""

    def __init__(self, message=None, http_status=None, http_body=None,
                 json_body=None):
        super(Error, self).__init__(message)
        self.message = message
        self.http_status = http_status
        self.http_body = http_body
        self.json_body = json_body

    def __str__(self):
        message = self.message or '<empty message>'
        if self.http_status is not None:
            return '(Status %d) %s' % (self.http_status, message)
        return message


class APIError(Error):
    """An error thrown when the API reports an unexpected failure, or returns
    a response that can't be understood.

    This is the error for 5xx responses and for any response body that is
    not the expected JSON.

    """
    pass


class TransportError(Error):
    """An error thrown when the request could not be completed at all, such
    as when the API host can't be reached or the connection times out."""
    pass


class AuthenticationError(Error):
    """An error thrown when the API key is missing or malformed, or when the
    API rejects it (HTTP status 401)."""
    pass


class InvalidRequestError(Error):

    """An error thrown when a request is invalid (HTTP status 400) or names a
    resource that does not exist (HTTP status 404).

    This error is also raised without making any request when the request
    can't be built, such as when fetching an object that has no ID.

    """

    def __init__(self, message=None, param=None, http_status=None,
                 http_body=None, json_body=None):
        super(InvalidRequestError, self).__init__(message, http_status,
                                                  http_body, json_body)
        self.param = param


class CardError(Error):

    """An error thrown when a charge fails because of the card (HTTP status
    402).

    Attribute `code` is the API's machine readable reason, such as
    ``card_declined`` or ``expired_card``, and `param` names the parameter
    at fault, when the API supplies them.

    """

    def __init__(self, message=None, param=None, code=None, http_status=None,
                 http_body=None, json_body=None):
        super(CardError, self).__init__(message, http_status, http_body,
                                        json_body)
        self.param = param
        self.code = code
