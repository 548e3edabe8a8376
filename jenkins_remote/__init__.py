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
# Authors:
# Ken Conley <kwc@willowgarage.com>
# James Page <james.page@canonical.com>
# Tully Foote <tfoote@willowgarage.com>
# Matthew Gertner <matthew.gertner@gmail.com>

'''
.. module:: jenkins_remote
    :platform: Unix, Windows
    :synopsis: Python API to drive a Jenkins server over its REST API
    :noindex:

A :class:`Jenkins` client hands out handles (:class:`Job`,
:class:`Folder`, :class:`Node`, :class:`View`, :class:`Build`, ...) that
mirror server-side resources. Handles are refreshed with ``poll()`` and
are never cached by the client. Create, copy, rename and delete calls go
through :class:`MutationReconciler`, which settles ambiguous answers with
one existence check.
'''

import json
import logging
from urllib.parse import quote

from jenkins_remote import endpoints
from jenkins_remote.build import Build  # noqa
from jenkins_remote.decoders import JSONDecoder  # noqa
from jenkins_remote.decoders import RawDecoder  # noqa
from jenkins_remote.endpoints import DASHBOARD_VIEW  # noqa
from jenkins_remote.endpoints import LIST_VIEW  # noqa
from jenkins_remote.endpoints import MY_VIEW  # noqa
from jenkins_remote.endpoints import NESTED_VIEW  # noqa
from jenkins_remote.endpoints import PIPELINE_VIEW  # noqa
from jenkins_remote.exceptions import DecodeError  # noqa
from jenkins_remote.exceptions import JenkinsException
from jenkins_remote.exceptions import NotFoundException  # noqa
from jenkins_remote.exceptions import StatusError  # noqa
from jenkins_remote.exceptions import TransportError
from jenkins_remote.exceptions import response_error
from jenkins_remote.fingerprint import Fingerprint
from jenkins_remote.folder import Folder
from jenkins_remote.job import Job
from jenkins_remote.job import job_path
from jenkins_remote.node import Node
from jenkins_remote.node import node_path
from jenkins_remote.node import SSHNodeOptions  # noqa
from jenkins_remote.plugins import Plugins
from jenkins_remote.queue import Queue
from jenkins_remote.reconcile import MutationOutcome  # noqa
from jenkins_remote.reconcile import MutationReconciler
from jenkins_remote.requester import Requester
from jenkins_remote.requester import ResponseEnvelope  # noqa
from jenkins_remote.view import View
from jenkins_remote.view import view_path

# Set default logging handler to avoid "No handler found" warnings.
logging.getLogger(__name__).addHandler(logging.NullHandler())

MASTER_NODE = 'master'
MASTER_DISPLAY = '(master)'


def _quote_json(data):
    return quote(json.dumps(data, separators=(',', ':')), safe='')


def _item_path(name):
    '''Path of a job or folder given as ``a/b/c`` through folders.'''
    base = ''
    for part in name.split('/'):
        base = job_path(base, part)
    return base


class Jenkins(object):
    '''Create handle to Jenkins instance.

    All methods will raise :class:`JenkinsException` on failure.

    :param url: URL of Jenkins server, ``str``
    :param username: Server username, ``str``
    :param password: Server password, ``str``
    :param timeout: Server connection timeout in secs, ``None`` keeps the
        transport default
    :param ssl_verify: verify the server certificate, ``bool``
    :param use_crumb: send a CSRF crumb on mutating requests, ``bool``
    :param logger: ``logging.Logger`` used by the client and its helpers,
        defaults to the ``jenkins_remote`` logger
    '''

    def __init__(self, url, username=None, password=None, timeout=None,
                 ssl_verify=True, use_crumb=False, logger=None):
        self.server = url.rstrip('/')
        self.logger = logger or logging.getLogger(__name__)
        self.requester = Requester(self.server, username, password,
                                   timeout=timeout, ssl_verify=ssl_verify,
                                   use_crumb=use_crumb, logger=self.logger)
        self.reconciler = MutationReconciler(self.logger)
        self.version = None
        self.raw = {}
        self._root = Folder(self, '')

    def init(self):
        '''Check the connection and record the server version.

        :returns: the client itself
        :throws: :class:`TransportError` if the server can't be reached,
            :class:`StatusError` on any other non-200 answer
        '''
        response = self.requester.get_json(endpoints.ROOT)
        if response.transport_failed:
            raise TransportError(
                'Error communicating with server[%s]' % self.server,
                response.error)
        if response.status_code != 200:
            raise response_error(response)
        self.raw = response.data
        self.version = response.headers.get('X-Jenkins')
        return self

    def poll(self):
        response = self.requester.get_json(endpoints.ROOT)
        if response.status_code == 200 and response.decode_error is None:
            self.raw = response.data
        return response.status_code

    def info(self):
        '''Get information on this Master.

        :returns: dictionary of information about Master, ``dict``
        '''
        self.poll()
        return self.raw

    def get_version(self):
        return self.version

    # Jobs

    def _job_folder(self, name):
        '''Return ``(folder, short_name)`` for a job path such as ``a/b``.'''
        parent, _, short_name = name.rpartition('/')
        if not parent:
            return self._root, short_name
        return Folder(self, _item_path(parent)), short_name

    def create_job(self, config_xml, name):
        '''Create a job, inside folders when ``name`` is a path like ``a/b``.

        :param config_xml: config file text, ``str``
        :param name: Name of the job, ``str``
        :returns: :class:`Job`
        '''
        folder, short_name = self._job_folder(name)
        return folder.create_job(config_xml, short_name)

    def _same_folder(self, action, from_name, to_name):
        from_folder, _ = self._job_folder(from_name)
        to_folder, to_short_name = self._job_folder(to_name)
        if from_folder.base != to_folder.base:
            raise JenkinsException('%s[%s to %s] failed, source and '
                                   'destination folder must be the same'
                                   % (action, from_name, to_name))
        return to_short_name

    def rename_job(self, from_name, to_name):
        to_short_name = self._same_folder('rename', from_name, to_name)
        return self.job(from_name).rename(to_short_name)

    def copy_job(self, from_name, to_name):
        to_short_name = self._same_folder('copy', from_name, to_name)
        return self.job(from_name).copy(to_short_name)

    def delete_job(self, name):
        return self.job(name).delete()

    def build_job(self, name, parameters=None):
        '''Trigger build job.

        :param name: name of job
        :param parameters: parameters for job, or ``None``, ``dict``
        :returns: queue item number if the server reported one, ``int``
        '''
        return self.job(name).invoke_simple(parameters)

    def job(self, name):
        '''Unpolled handle for job ``name``, a path such as ``a/b`` allowed.'''
        return Job(self, _item_path(name))

    def get_job(self, name):
        '''Job handle, polled.

        ``name`` may be a full path through folders such as ``a/b``.
        '''
        job = self.job(name)
        if job.poll() != 200:
            raise response_error(job.last_response)
        return job

    def get_folder(self, name):
        folder = Folder(self, _item_path(name))
        if folder.poll() != 200:
            raise response_error(folder.last_response)
        return folder

    def get_all_jobs(self):
        '''Top level jobs as ``name``, ``url`` and ``color`` records.'''
        return self._root.get_all_jobs()

    def get_all_job_names(self):
        return [job['name'] for job in self.get_all_jobs()]

    def get_build(self, job_name, number):
        return self.get_job(job_name).get_build(number)

    def get_all_build_ids(self, job_name):
        return self.get_job(job_name).get_all_build_ids()

    # Nodes

    def get_node(self, name):
        '''Node handle, polled, or ``None`` if there is no such node.'''
        node = Node(self, node_path(name))
        if node.poll() == 200:
            return node
        return None

    def get_all_nodes(self):
        response = self.requester.get_json(endpoints.COMPUTER)
        if response.status_code != 200:
            raise response_error(response)
        nodes = []
        for computer in response.data.get('computer', []):
            name = computer['displayName']
            if name == MASTER_NODE:
                name = MASTER_DISPLAY
            node = self.get_node(name)
            if node is not None:
                nodes.append(node)
        return nodes

    def _create_node(self, name, form, verify_exists=False):
        existing = self.get_node(name)
        if existing is not None:
            if verify_exists:
                raise JenkinsException('node[%s] already exists' % name)
            return existing

        params = {
            'name': quote(name, safe=''),
            'type': quote(endpoints.NODE_TYPE, safe=''),
            'json': _quote_json(form),
        }
        outcome = self.reconciler.create(
            lambda: self.requester.post(endpoints.CREATE_NODE,
                                        params=params),
            lambda: Node(self, node_path(name)),
            name)
        if not outcome:
            raise outcome.exception()
        return outcome.resource

    def create_node(self, name, num_executors=2, description='',
                    remote_fs='/var/lib/jenkins', labels=None,
                    exclusive=False):
        '''Create a node launched through JNLP.

        An existing node of that name is returned as it is.

        :param name: name of node to create, ``str``
        :param num_executors: number of executors for node, ``int``
        :param description: Description of node, ``str``
        :param remote_fs: Remote filesystem location to use, ``str``
        :param labels: Labels to associate with node, ``str``
        :param exclusive: Use this node for tied jobs only, ``bool``
        :returns: :class:`Node`
        '''
        form = {
            'name': name,
            'nodeDescription': description,
            'numExecutors': num_executors,
            'remoteFS': remote_fs,
            'labelString': labels or '',
            'mode': 'EXCLUSIVE' if exclusive else 'NORMAL',
            'type': endpoints.NODE_TYPE,
            'retentionStrategy': {
                'stapler-class': endpoints.RETENTION_ALWAYS},
            'nodeProperties': {'stapler-class-bag': 'true'},
            'launcher': {'stapler-class': endpoints.LAUNCHER_JNLP},
        }
        return self._create_node(name, form)

    def create_ssh_node(self, options):
        '''Create a node launched over SSH.

        :param options: :class:`SSHNodeOptions`
        :returns: :class:`Node`
        :throws: :class:`JenkinsException` if the node already exists
        '''
        form = {
            'name': options.name,
            'nodeDescription': options.description,
            'numExecutors': options.executors,
            'remoteFS': options.remote_fs,
            'labelString': options.label_string,
            'mode': options.mode,
            'type': endpoints.NODE_TYPE,
            'retentionStrategy': {
                'stapler-class': endpoints.RETENTION_ALWAYS},
            'nodeProperties': {'stapler-class-bag': 'true'},
            'launcher': options.launcher(),
        }
        return self._create_node(options.name, form, verify_exists=True)

    def delete_node(self, name):
        return Node(self, node_path(name)).delete()

    # Views

    def get_view(self, name):
        '''View handle, polled, or ``None`` if there is no such view.'''
        view = View(self, view_path(name))
        if view.poll() == 200:
            return view
        return None

    def get_all_views(self):
        self.poll()
        return [View(self, view_path(view['name']))
                for view in self.raw.get('views', [])]

    def create_view(self, name, view_type=LIST_VIEW):
        '''Create a view.

        :param name: Name of view, ``str``
        :param view_type: one of the ``*_VIEW`` constants, ``str``
        :returns: :class:`View`
        :throws: :class:`JenkinsException` if the view already exists
        '''
        if self.get_view(name) is not None:
            raise JenkinsException('view[%s] already exists' % name)
        params = {
            'name': quote(name, safe=''),
            'type': quote(view_type, safe=''),
            'Submit': 'OK',
            'json': _quote_json({'name': name, 'mode': view_type}),
        }
        outcome = self.reconciler.create(
            lambda: self.requester.post(endpoints.CREATE_VIEW,
                                        params=params),
            lambda: View(self, view_path(name)),
            name)
        if not outcome:
            raise outcome.exception()
        return outcome.resource

    def delete_view(self, name):
        return View(self, view_path(name)).delete()

    # Queue, plugins, fingerprints

    def get_queue(self):
        queue = Queue(self)
        if queue.poll() != 200:
            raise response_error(queue.last_response)
        return queue

    def get_plugins(self, depth=1):
        plugins = Plugins(self, depth)
        if plugins.poll() != 200:
            raise response_error(plugins.last_response)
        return plugins

    def has_plugin(self, name):
        '''Plugin named ``name`` (short or long name) or ``None``.'''
        return self.get_plugins().contains(name)

    def get_artifact_data(self, id):
        fingerprint = Fingerprint(self, id)
        if fingerprint.poll() != 200:
            raise response_error(fingerprint.last_response)
        return fingerprint.raw

    def validate_fingerprint(self, id):
        return Fingerprint(self, id).valid()
