#!/usr/bin/env python
# Software License Agreement (BSD License)
#
# Copyright (c) 2010, Willow Garage, Inc.
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions
# are met:
#
#  * Redistributions of source code must retain the above copyright
#    notice, this list of conditions and the following disclaimer.
#  * Redistributions in binary form must reproduce the above
#    copyright notice, this list of conditions and the following
#    disclaimer in the documentation and/or other materials provided
#    with the distribution.
#  * Neither the name of Willow Garage, Inc. nor the names of its
#    contributors may be used to endorse or promote products derived
#    from this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS
# 'AS IS' AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT
# LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS
# FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL THE
# COPYRIGHT OWNER OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING,
# BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES;
# LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER
# CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT
# LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN
# ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.
#

'''
.. module:: jenkins_remote.decoders
    :platform: Unix, Windows
    :synopsis: Response body decoders selected by the caller

A decoder is handed a :class:`jenkins_remote.requester.ResponseEnvelope`
whose body has already been read in full, and fills in ``data``. The call
site picks the decoder: :class:`RawDecoder` for documents such as
``config.xml`` or console text, :class:`JSONDecoder` for ``api/json``
records.
'''

import json

from jenkins_remote.exceptions import DecodeError

DECODED_STATUSES = (200, 201)


class RawDecoder(object):
    '''Copy the body verbatim into a text value.'''

    def decode(self, envelope):
        envelope.data = envelope.text
        return envelope


class JSONDecoder(object):
    '''Parse the body as JSON.

    Decoding is best effort by default: a malformed body leaves
    ``envelope.data`` at the default value and records the failure in
    ``envelope.decode_error``, so an unparseable record can be told apart
    from a genuinely empty one. With ``strict=True`` the
    :class:`DecodeError` is raised instead.

    Only successful responses are parsed; error pages and synthesized
    transport failures get the default value and no decode error.

    :param default: factory for the value used when nothing was decoded
    :param strict: raise :class:`DecodeError` on malformed bodies, ``bool``
    '''

    def __init__(self, default=dict, strict=False):
        self.default = default
        self.strict = strict

    def empty(self):
        return self.default()

    def decode(self, envelope):
        if envelope.status_code not in DECODED_STATUSES:
            envelope.data = self.empty()
            return envelope
        try:
            envelope.data = json.loads(envelope.content)
        except ValueError as e:
            error = DecodeError(
                'Could not parse JSON response from %s: %s'
                % (envelope.url, e), envelope.content)
            if self.strict:
                raise error
            envelope.data = self.empty()
            envelope.decode_error = error
        return envelope


RAW = RawDecoder()
JSON = JSONDecoder()
