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
.. module:: jenkins_remote.view
    :platform: Unix, Windows
    :synopsis: View handles
'''

from urllib.parse import quote

from jenkins_remote import endpoints
from jenkins_remote.exceptions import response_error
from jenkins_remote.resource import RemoteResource


def view_path(name):
    return endpoints.VIEW % {'name': quote(name)}


class View(RemoteResource):

    def get_description(self):
        return self.raw.get('description')

    def get_url(self):
        return self.raw.get('url')

    def get_jobs(self):
        return self.raw.get('jobs', [])

    def _post_job(self, endpoint, name):
        response = self.requester.post(endpoint % {'base': self.base},
                                       params={'name': quote(name, safe='')})
        if response.status_code != 200:
            raise response_error(response)
        return True

    def add_job(self, name):
        return self._post_job(endpoints.ADD_JOB_TO_VIEW, name)

    def delete_job(self, name):
        return self._post_job(endpoints.REMOVE_JOB_FROM_VIEW, name)

    def delete(self):
        outcome = self.jenkins.reconciler.delete(
            lambda: self.requester.post(
                endpoints.DO_DELETE % {'base': self.base}),
            lambda: View(self.jenkins, self.base))
        if not outcome:
            raise outcome.exception()
        return True
