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

Process-wide settings for talking to the API: the default API key, the base
URL, the versioned path segment and the user agent that performs requests.

A single `Configuration` instance, `default`, is shared by every resource
class unless a class binds its own through its ``config`` attribute:

>>> from paymentobjects import config
>>> config.default.api_key = 'sk_test_abc123'

"""


DEFAULT_API_BASE = 'https://api.stripe.com'
DEFAULT_API_VERSION = 'v1'
DEFAULT_USER_AGENT = 'paymentobjects/1.0 (python)'


class Configuration(object):

    """The credential and endpoint settings used by the request pipeline.

    Only one API key is held at a time. Setting it takes effect for every
    later request that doesn't supply its own key.

    """

    def __init__(self, api_key=None, api_base=None, api_version=None,
                 http=None, user_agent=None):
        self.reset()
        if api_key is not None:
            self.api_key = api_key
        if api_base is not None:
            self.api_base = api_base
        if api_version is not None:
            self.api_version = api_version
        if http is not None:
            self.http = http
        if user_agent is not None:
            self.user_agent = user_agent

    def reset(self):
        """Restores every setting to its default value."""
        self.api_key = None
        self.api_base = DEFAULT_API_BASE
        self.api_version = DEFAULT_API_VERSION
        # None means the shared httplib2 user agent in paymentobjects.http.
        self.http = None
        self.user_agent = DEFAULT_USER_AGENT

    def api_url(self, path):
        """Returns the absolute URL for an API path such as ``/v1/charges``."""
        return self.api_base.rstrip('/') + path

    def __repr__(self):
        return '<%s api_base=%r api_version=%r has_key=%r>' % (
            type(self).__name__, self.api_base, self.api_version,
            self.api_key is not None)


default = Configuration()


def resolve(config=None):
    """Returns `config`, or the process-wide default when it is `None`."""
    if config is None:
        return default
    return config
