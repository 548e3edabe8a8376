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
.. module:: jenkins_remote.node
    :platform: Unix, Windows
    :synopsis: Build agent (node) handles and creation options
'''

from urllib.parse import quote

from jenkins_remote import endpoints
from jenkins_remote.exceptions import JenkinsException
from jenkins_remote.exceptions import response_error
from jenkins_remote.resource import RemoteResource


def node_path(name):
    return endpoints.NODE % {'name': quote(name)}


class SSHNodeOptions(object):
    '''Settings for an agent launched over SSH.

    :param name: name of node to create, ``str``
    :param host: host the agent runs on, ``str``
    :param credential_id: id of the SSH credentials on the server, ``str``
    :param port: SSH port, ``str``
    :param description: Description of node, ``str``
    :param executors: number of executors for node, ``int``
    :param remote_fs: Remote filesystem location to use, ``str``
    :param label_string: space separated labels, ``str``
    :param mode: ``NORMAL`` or ``EXCLUSIVE``
    '''

    def __init__(self, name, host, credential_id, port='22', description='',
                 executors=1, remote_fs='/var/lib/jenkins', label_string='',
                 mode='NORMAL'):
        self.name = name
        self.host = host
        self.credential_id = credential_id
        self.port = port
        self.description = description
        self.executors = executors
        self.remote_fs = remote_fs
        self.label_string = label_string
        self.mode = mode or 'NORMAL'

    def launcher(self):
        return {
            'stapler-class': endpoints.LAUNCHER_SSH,
            '$class': endpoints.LAUNCHER_SSH,
            'host': self.host,
            'credentialsId': self.credential_id,
            'port': self.port,
            'launchTimeoutSeconds': '900',
            'maxNumRetries': '30',
            'retryWaitTime': '30',
        }


class Node(RemoteResource):
    '''Handle over a build agent. Its identity is the display name.'''

    @property
    def name(self):
        return self.raw.get('displayName')

    def is_online(self):
        return not self.raw.get('offline', True)

    def is_temporarily_offline(self):
        return bool(self.raw.get('temporarilyOffline'))

    def is_idle(self):
        return bool(self.raw.get('idle'))

    def get_num_executors(self):
        return self.raw.get('numExecutors')

    def toggle_temporarily_offline(self, message=''):
        '''Flip the temporarily-offline flag and confirm the new state.

        :param message: Offline message, ``str``
        '''
        before = self.is_temporarily_offline()
        response = self.requester.post(
            endpoints.TOGGLE_OFFLINE % {'base': self.base},
            params={'offlineMessage': quote(message, safe='')})
        if response.status_code != 200:
            raise response_error(response)
        self.poll()
        if self.is_temporarily_offline() == before:
            raise JenkinsException('node[%s] state not changed' % self.name)
        return True

    def set_online(self):
        self.poll()
        if self.is_temporarily_offline():
            return self.toggle_temporarily_offline()
        return True

    def set_offline(self, message=''):
        self.poll()
        if not self.is_temporarily_offline():
            return self.toggle_temporarily_offline(message)
        return True

    def delete(self):
        '''Delete the node permanently.

        :returns: ``True``
        '''
        outcome = self.jenkins.reconciler.delete(
            lambda: self.requester.post(
                endpoints.DO_DELETE % {'base': self.base}),
            lambda: Node(self.jenkins, self.base))
        if not outcome:
            raise outcome.exception()
        return True
