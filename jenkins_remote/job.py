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
.. module:: jenkins_remote.job
    :platform: Unix, Windows
    :synopsis: Job handles
'''

from urllib.parse import quote
from urllib.parse import unquote

from jenkins_remote.build import Build
from jenkins_remote import endpoints
from jenkins_remote.exceptions import JenkinsException
from jenkins_remote.exceptions import response_error
from jenkins_remote.resource import RemoteResource

INVOKED_STATUSES = (200, 201)


def job_path(folder_base, name):
    '''Path of job ``name`` below ``folder_base`` ('' for the top level).'''
    return folder_base + endpoints.JOB % {'name': quote(name)}


def split_job_path(base):
    '''Return ``(folder_base, short_name)`` for a job path.'''
    folder_base, _, short_name = base.rpartition('/job/')
    return folder_base, unquote(short_name)


class Job(RemoteResource):
    '''Handle over a job, a freestyle project or pipeline.'''

    @property
    def folder_base(self):
        return split_job_path(self.base)[0]

    @property
    def short_name(self):
        return split_job_path(self.base)[1]

    def get_description(self):
        return self.raw.get('description')

    def is_enabled(self):
        return self.raw.get('color') != 'disabled'

    def is_queued(self):
        return bool(self.raw.get('inQueue'))

    def is_running(self):
        '''Whether the last build is still running; polls the job first.'''
        self.poll()
        last_build = self.raw.get('lastBuild')
        if not last_build:
            return False
        build = self.get_build(last_build['number'])
        return build.is_running()

    def get_config(self):
        '''Get configuration of the job.

        :returns: job configuration (XML format)
        '''
        response = self.requester.get_raw(
            endpoints.CONFIG % {'base': self.base})
        if response.status_code != 200:
            raise response_error(response)
        return response.data

    def update_config(self, config_xml):
        '''Change configuration of the job.

        :param config_xml: New XML configuration, ``str``
        '''
        response = self.requester.post_xml(
            endpoints.CONFIG % {'base': self.base}, config_xml)
        if response.status_code != 200:
            raise response_error(response)
        return True

    def _toggle(self, endpoint):
        response = self.requester.post(endpoint % {'base': self.base})
        # enabling an enabled job is answered with 400
        if response.transport_failed or \
                response.status_code not in (200, 400):
            raise response_error(response)
        return True

    def enable(self):
        return self._toggle(endpoints.ENABLE)

    def disable(self):
        return self._toggle(endpoints.DISABLE)

    def _invoke_endpoint(self, parameters):
        if parameters:
            return endpoints.BUILD_WITH_PARAMS % {'base': self.base}
        return endpoints.BUILD % {'base': self.base}

    def _queue_item(self, response):
        # location is a queue item, eg. "http://jenkins/queue/item/25/"
        location = response.headers.get('Location')
        if not location:
            return None
        return int(location.rstrip('/').split('/')[-1])

    def invoke_simple(self, parameters=None):
        '''Trigger a build.

        :param parameters: build parameters, ``dict``
        :returns: queue item number if the server reported one, ``int``
        '''
        response = self.requester.post(self._invoke_endpoint(parameters),
                                       payload=parameters or None)
        if response.status_code not in INVOKED_STATUSES:
            raise JenkinsException('Could not invoke job[%s]: %d'
                                   % (self.short_name, response.status_code))
        return self._queue_item(response)

    def invoke(self, files=None, parameters=None, skip_if_running=False,
               cause=None, token=None):
        '''Trigger a build, uploading file parameters.

        Each file is sent as a multipart part named ``file``; the build
        parameters travel as form fields after the files.

        :param files: paths of files to upload, ``list``
        :param parameters: build parameters, ``dict``
        :param skip_if_running: don't trigger while a build runs, ``bool``
        :param cause: text recorded as the build cause, ``str``
        :param token: remote trigger token, ``str``
        :returns: ``False`` if skipped, the queue item number otherwise
        '''
        if skip_if_running and self.is_running():
            return False
        query = {}
        if token:
            query['token'] = quote(token, safe='')
        if cause:
            query['cause'] = quote(cause, safe='')
        endpoint = self._invoke_endpoint(parameters or files)
        if files:
            response = self.requester.post_files(endpoint, files,
                                                 payload=parameters,
                                                 params=query)
        else:
            response = self.requester.post(endpoint, payload=parameters,
                                           params=query)
        if response.status_code not in INVOKED_STATUSES:
            raise JenkinsException('Could not invoke job[%s]: %d'
                                   % (self.short_name, response.status_code))
        return self._queue_item(response)

    def get_build(self, number):
        build = Build(self.jenkins,
                      endpoints.BUILD_NUMBER % {'base': self.base,
                                                'number': number},
                      job=self)
        if build.poll() != 200:
            raise response_error(build.last_response)
        return build

    def get_last_build(self):
        if not self.raw:
            self.poll()
        last_build = self.raw.get('lastBuild')
        if not last_build:
            raise JenkinsException('job[%s] has no builds' % self.short_name)
        return self.get_build(last_build['number'])

    def get_all_build_ids(self):
        '''Numbers and URLs of every build, not only the last hundred.

        :returns: ``[{'number': int, 'url': str}]``
        '''
        response = self.requester.get_json(
            self.base, params={'tree': 'allBuilds[number,url]'})
        if response.status_code != 200:
            raise response_error(response)
        return response.data.get('allBuilds', [])

    def rename(self, new_name):
        '''Rename the job within its folder.

        On success the handle points at the new name.
        '''
        target = job_path(self.folder_base, new_name)
        outcome = self.jenkins.reconciler.rename(
            lambda: self.requester.post(
                endpoints.DO_RENAME % {'base': self.base},
                params={'newName': quote(new_name, safe='')}),
            lambda: Job(self.jenkins, target),
            new_name)
        if not outcome:
            raise outcome.exception()
        self.base = target
        self.raw = outcome.resource.raw
        return self

    def copy(self, new_name):
        '''Copy the job to ``new_name`` in the same folder.

        :returns: :class:`Job` for the copy
        '''
        folder_base = self.folder_base
        outcome = self.jenkins.reconciler.copy(
            lambda: self.requester.post(
                endpoints.CREATE_ITEM % {'folder': folder_base},
                params={'name': quote(new_name, safe=''), 'mode': 'copy',
                        'from': quote(self.short_name, safe='')}),
            lambda: Job(self.jenkins, job_path(folder_base, new_name)),
            new_name)
        if not outcome:
            raise outcome.exception()
        return outcome.resource

    def delete(self):
        '''Delete the job permanently.

        :returns: ``True``
        '''
        outcome = self.jenkins.reconciler.delete(
            lambda: self.requester.post(
                endpoints.DO_DELETE % {'base': self.base}),
            lambda: Job(self.jenkins, self.base))
        if not outcome:
            raise outcome.exception()
        return True
