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
.. module:: jenkins_remote.folder
    :platform: Unix, Windows
    :synopsis: Folder handles (see cloudbees folder plugin)

The top level of the server behaves like a folder with an empty base, so
the client runs its job operations through a root :class:`Folder`.
'''

from urllib.parse import quote

from jenkins_remote import endpoints
from jenkins_remote.exceptions import response_error
from jenkins_remote.job import Job
from jenkins_remote.job import job_path
from jenkins_remote.resource import RemoteResource


class Folder(RemoteResource):

    def get_description(self):
        return self.raw.get('description')

    def get_all_jobs(self):
        '''Jobs directly inside the folder; polls the folder first.

        :returns: ``[{'name': str, 'url': str, 'color': str}]``
        '''
        self.poll()
        return self.raw.get('jobs', [])

    def job(self, name):
        '''Unpolled handle for job ``name`` in this folder.'''
        return Job(self.jenkins, job_path(self.base, name))

    def get_job(self, name):
        job = self.job(name)
        if job.poll() != 200:
            raise response_error(job.last_response)
        return job

    def create_job(self, config_xml, name):
        '''Create a new job from its XML configuration.

        :param config_xml: config file text, ``str``
        :param name: Name of the job, ``str``
        :returns: :class:`jenkins_remote.job.Job`
        '''
        outcome = self.jenkins.reconciler.create(
            lambda: self.requester.post_xml(
                endpoints.CREATE_ITEM % {'folder': self.base}, config_xml,
                params={'name': quote(name, safe='')}),
            lambda: self.job(name),
            name)
        if not outcome:
            raise outcome.exception()
        return outcome.resource

    def copy_job(self, copy_from, new_name):
        return self.job(copy_from).copy(new_name)

    def delete_job(self, name):
        return self.job(name).delete()

    def build_job(self, name, parameters=None):
        return self.job(name).invoke_simple(parameters)

    def get_build(self, job_name, number):
        return self.get_job(job_name).get_build(number)

    def get_all_build_ids(self, job_name):
        return self.get_job(job_name).get_all_build_ids()
