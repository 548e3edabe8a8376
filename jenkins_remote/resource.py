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
.. module:: jenkins_remote.resource
    :platform: Unix, Windows
    :synopsis: Handle over a single server-side resource
'''


class RemoteResource(object):
    '''A named proxy over one server-side resource.

    ``raw`` is the last snapshot fetched with :meth:`poll` and starts out
    empty. A handle belongs to the caller that built it; build a fresh one
    per operation rather than sharing it.

    :param jenkins: owning :class:`jenkins_remote.Jenkins` client
    :param base: resource path relative to the server, ``str``
    '''

    def __init__(self, jenkins, base):
        self.jenkins = jenkins
        self.base = base
        self.raw = {}
        self.last_response = None

    @property
    def requester(self):
        return self.jenkins.requester

    def poll_params(self):
        '''Query parameters sent with every poll.'''
        return None

    def poll(self):
        '''Refresh the snapshot.

        The snapshot is replaced only when the server answers 200 and the
        body decodes. The status code is returned as-is: 200 means the
        resource exists and was refreshed, anything else that it does not
        exist or can't be reached. Inspect ``last_response`` to tell a
        transport failure or a decode failure apart.

        :returns: HTTP status code, ``int``
        '''
        response = self.requester.get_json(self.base,
                                           params=self.poll_params())
        self.last_response = response
        if response.status_code == 200:
            if response.decode_error is None:
                self.raw = response.data
            else:
                self.jenkins.logger.warning(
                    'Keeping previous snapshot of %s: %s',
                    self.base, response.decode_error)
        return response.status_code

    @property
    def name(self):
        return self.raw.get('name')

    def get_name(self):
        return self.name

    def get_details(self):
        return self.raw

    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__, self.base)
