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
.. module:: jenkins_remote.build
    :platform: Unix, Windows
    :synopsis: Build handles
'''

from jenkins_remote import endpoints
from jenkins_remote.exceptions import response_error
from jenkins_remote.resource import RemoteResource


class Build(RemoteResource):
    '''Handle over one build of a job.

    Accessors read the last snapshot; call :meth:`poll` to refresh it.
    '''

    def __init__(self, jenkins, base, job=None, depth=1):
        super(Build, self).__init__(jenkins, base)
        self.job = job
        self.depth = depth

    def poll_params(self):
        return {'depth': self.depth}

    def get_number(self):
        return self.raw.get('number')

    def get_result(self):
        return self.raw.get('result')

    def get_duration(self):
        return self.raw.get('duration')

    def is_running(self):
        return bool(self.raw.get('building'))

    def is_good(self):
        return not self.is_running() and self.get_result() == 'SUCCESS'

    def get_parameters(self):
        '''Build parameters as ``{name: value}``.'''
        parameters = {}
        for action in self.raw.get('actions', []):
            if not action:
                continue
            for parameter in action.get('parameters', []):
                parameters[parameter['name']] = parameter.get('value')
        return parameters

    def get_console_output(self):
        response = self.requester.get_raw(
            endpoints.CONSOLE_TEXT % {'base': self.base})
        if response.status_code != 200:
            raise response_error(response)
        return response.data

    def stop(self):
        '''Stop the build if it is running.'''
        response = self.requester.post(endpoints.STOP % {'base': self.base})
        if response.status_code != 200:
            raise response_error(response)
        return True
