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
.. module:: jenkins_remote.endpoints
    :platform: Unix, Windows
    :synopsis: Path fragments for Jenkins REST endpoints

Every path is relative to the server base URL and starts with ``/``. The
requester appends the trailing separator and, for structured requests,
the ``api/json`` suffix.
'''

API_SUFFIX = 'api/json'
CRUMB_URL = '/crumbIssuer'

ROOT = '/'
JOB = '/job/%(name)s'
CREATE_ITEM = '%(folder)s/createItem'
DO_DELETE = '%(base)s/doDelete'
DO_RENAME = '%(base)s/doRename'
CONFIG = '%(base)s/config.xml'
ENABLE = '%(base)s/enable'
DISABLE = '%(base)s/disable'
BUILD = '%(base)s/build'
BUILD_WITH_PARAMS = '%(base)s/buildWithParameters'
BUILD_NUMBER = '%(base)s/%(number)d'
CONSOLE_TEXT = '%(base)s/consoleText'
STOP = '%(base)s/stop'

COMPUTER = '/computer'
NODE = '/computer/%(name)s'
CREATE_NODE = '/computer/doCreateItem'
TOGGLE_OFFLINE = '%(base)s/toggleOffline'

VIEW = '/view/%(name)s'
CREATE_VIEW = '/createView'
ADD_JOB_TO_VIEW = '%(base)s/addJobToView'
REMOVE_JOB_FROM_VIEW = '%(base)s/removeJobFromView'

QUEUE = '/queue'
CANCEL_QUEUE = '/queue/cancelItem'
PLUGIN_MANAGER = '/pluginManager'
FINGERPRINT = '/fingerprint/%(id)s'

NODE_TYPE = 'hudson.slaves.DumbSlave$DescriptorImpl'
RETENTION_ALWAYS = 'hudson.slaves.RetentionStrategy$Always'
LAUNCHER_SSH = 'hudson.plugins.sshslaves.SSHLauncher'
LAUNCHER_JNLP = 'hudson.slaves.JNLPLauncher'

LIST_VIEW = 'hudson.model.ListView'
NESTED_VIEW = 'hudson.plugins.nested_view.NestedView'
MY_VIEW = 'hudson.model.MyView'
DASHBOARD_VIEW = 'hudson.plugins.view.dashboard.Dashboard'
PIPELINE_VIEW = 'au.com.centrumsystems.hudson.plugin.buildpipeline.BuildPipelineView'
