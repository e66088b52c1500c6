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

The request pipeline: builds API requests, sends them through the user agent
(an `httplib2.Http` compatible object) and decodes the responses.

`request()` is the one entry point. It resolves the API key, encodes the
parameters into a query string or a form body depending on the HTTP method,
and either returns the decoded JSON response or raises one of the errors in
`paymentobjects.errors`.

"""

from collections.abc import Mapping
import logging
import re
from urllib.parse import urlencode

import httplib2
import simplejson as json

from paymentobjects import config as configuration
from paymentobjects import errors

userAgent = httplib2.Http()

log = logging.getLogger('paymentobjects.http')

# Methods whose parameters go in the query string instead of the body.
query_methods = ('GET', 'DELETE')


def encode_value(value):
    """Encodes a scalar parameter value as it should appear on the wire."""
    if value is True:
        return 'true'
    if value is False:
        return 'false'
    return value


def flatten_params(params, parent_key=None):
    """Flattens a possibly nested dictionary of parameters into a list of
    ``(key, value)`` pairs.

    Nested dictionaries are flattened into ``parent[child]`` keys and lists
    into repeated ``parent[]`` keys. Parameters with `None` values are left
    out entirely, at any depth. Objects with a ``to_param()`` method are
    encoded as what it returns: the dictionary of a `DataObject`, or the ID
    of a resource.

    """
    pairs = []
    for key, value in params.items():
        if parent_key is not None:
            key = '%s[%s]' % (parent_key, key)
        pairs.extend(_flatten_value(key, value))
    return pairs


def _flatten_value(key, value):
    if value is None:
        return []
    if hasattr(value, 'to_param'):
        return _flatten_value(key, value.to_param())
    if isinstance(value, Mapping):
        return flatten_params(value, key)
    if isinstance(value, (list, tuple)):
        pairs = []
        for item in value:
            pairs.extend(_flatten_value('%s[]' % key, item))
        return pairs
    return [(key, encode_value(value))]


def encode_params(params):
    """Encodes a dictionary of parameters as an ``x-www-form-urlencoded``
    string, in the order the parameters were given."""
    if not params:
        return ''
    return urlencode(flatten_params(params))


def check_api_key(api_key):
    """Raises `AuthenticationError` if `api_key` can't possibly be valid."""
    if not api_key:
        raise errors.AuthenticationError(
            'No API key provided. (HINT: set your API key using '
            '"paymentobjects.config.default.api_key = <API-KEY>". You can '
            'generate API keys from the web interface of your account.)')
    if re.search(r'\s', api_key):
        raise errors.AuthenticationError(
            'Your API key is invalid, as it contains whitespace. (HINT: you '
            'can double-check your API key from the web interface of your '
            'account.)')


def get_request(method, url, api_key, params=None, config=None):
    """Returns the parameters for an API request as a dictionary of keyword
    arguments suitable for passing to `httplib2.Http.request()`.

    Parameter `url` is the API path to request, such as ``/v1/charges``.
    Parameters with `None` values are omitted from the request.

    """
    config = configuration.resolve(config)
    method = method.upper()
    uri = config.api_url(url)
    headers = {
        'accept': 'application/json',
        'authorization': 'Bearer %s' % api_key,
        'user-agent': config.user_agent,
    }

    encoded = encode_params(params)
    body = None
    if method in query_methods:
        if encoded:
            uri = '%s%s%s' % (uri, '&' if '?' in uri else '?', encoded)
    else:
        body = encoded
        headers['content-type'] = 'application/x-www-form-urlencoded'

    # Use 'uri' because httplib2.request does.
    return dict(uri=uri, method=method, body=body, headers=headers)


def decode_body(content):
    """Decodes a response body as JSON, returning the raw text body and the
    decoded data (or `None` if the body isn't JSON)."""
    if isinstance(content, bytes):
        # Bad characters are replaced with the unicode Replacement Character.
        content = content.decode('utf-8', 'replace')
    try:
        return content, json.loads(content)
    except (TypeError, ValueError):
        return content, None


def raise_for_response(status, body, json_body):
    """Raises the error corresponding to a non-successful API response.

    The error's kind is determined by the HTTP status. If the body has no
    ``error`` object to describe the failure, an `APIError` is raised
    regardless of status.

    """
    error = None
    if isinstance(json_body, dict):
        error = json_body.get('error')
    if not isinstance(error, dict):
        raise errors.APIError(
            'Invalid response object from API: %r (HTTP response code was %d)'
            % (body, status), status, body, json_body)

    message = error.get('message')
    if status in (400, 404):
        raise errors.InvalidRequestError(message, error.get('param'), status,
                                         body, json_body)
    if status == 401:
        raise errors.AuthenticationError(message, status, body, json_body)
    if status == 402:
        raise errors.CardError(message, error.get('param'), error.get('code'),
                               status, body, json_body)
    raise errors.APIError(message, status, body, json_body)


def request(method, url, api_key=None, params=None, config=None,
            listing=False):
    """Makes an API request and returns the decoded response along with the
    API key used to make it.

    Parameter `api_key` overrides the configuration's API key for this
    request only. The returned key lets callers bind it to the objects made
    from the response, so their later requests use it too.

    The key is checked before anything is sent: a missing or malformed key
    raises `AuthenticationError` without a request being made.

    A successful response must be a JSON object, or else `APIError` is
    raised. If `listing` is true, a bare JSON array is accepted too.

    """
    config = configuration.resolve(config)
    if api_key is None:
        api_key = config.api_key
    check_api_key(api_key)

    req = get_request(method, url, api_key, params, config)
    http = config.http
    if http is None:
        http = userAgent

    log.debug('Requesting %s %s', req['method'], req['uri'])
    try:
        response, content = http.request(**req)
    except (httplib2.HttpLib2Error, OSError) as exc:
        raise errors.TransportError(
            'Unexpected error communicating with the API at %s. If this '
            'problem persists, let us know. (Network error: %s)'
            % (config.api_base, exc)) from exc

    status = int(response.status)
    body, json_body = decode_body(content)
    log.debug('Received %d response to %s %s', status, req['method'],
              req['uri'])

    if not 200 <= status < 300:
        raise_for_response(status, body, json_body)
    if not (isinstance(json_body, dict)
            or (listing and isinstance(json_body, list))):
        raise errors.APIError(
            'Invalid response object from API: %r (HTTP response code was %d)'
            % (body, status), status, body, json_body)

    return json_body, api_key
