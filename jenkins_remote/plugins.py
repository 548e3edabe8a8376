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
.. module:: jenkins_remote.plugins
    :platform: Unix, Windows
    :synopsis: Installed plugins and version comparison
'''

import operator
import re

import multi_key_dict
from packaging.version import InvalidVersion
from packaging.version import Version

from jenkins_remote import endpoints
from jenkins_remote.resource import RemoteResource


def parse_version(version):
    '''Parse a plugin version, keeping only its numbers if it isn't PEP 440.'''
    try:
        return Version(version)
    except InvalidVersion:
        numbers = re.findall(r'\d+', version)
        return Version('.'.join(numbers) if numbers else '0')


class Plugin(dict):
    '''Dictionary object containing plugin metadata.'''

    def __init__(self, *args, **kwargs):
        '''Populates dictionary using json object input.

        accepts same arguments as python `dict` class.
        '''
        version = kwargs.pop('version', None)

        super(Plugin, self).__init__(*args, **kwargs)
        self['version'] = version

    def __setitem__(self, key, value):
        '''Overrides default setter to ensure that the version key is always
        a PluginVersion class to abstract and simplify version comparisons
        '''
        if key == 'version':
            value = PluginVersion(value)
        super(Plugin, self).__setitem__(key, value)


class PluginVersion(str):
    '''Class providing comparison capabilities for plugin versions.'''

    _VERSION_RE = re.compile(r'(.*)-(?:SNAPSHOT|BETA)')

    def __init__(self, version):
        self._version = version
        self.parsed_version = parse_version(self._convert(version))

    def _convert(self, version):
        return self._VERSION_RE.sub(r'\g<1>.preview', str(version))

    def _compare(self, op, version):
        return op(self.parsed_version, parse_version(self._convert(version)))

    def __le__(self, version):
        return self._compare(operator.le, version)

    def __lt__(self, version):
        return self._compare(operator.lt, version)

    def __ge__(self, version):
        return self._compare(operator.ge, version)

    def __gt__(self, version):
        return self._compare(operator.gt, version)

    def __eq__(self, version):
        return self._compare(operator.eq, version)

    def __ne__(self, version):
        return self._compare(operator.ne, version)

    __hash__ = str.__hash__

    def __str__(self):
        return str(self._version)

    def __repr__(self):
        return str(self._version)


class Plugins(RemoteResource):
    '''Handle over the plugin manager.

    :param depth: JSON depth, ``int``
    '''

    def __init__(self, jenkins, depth=1, base=endpoints.PLUGIN_MANAGER):
        super(Plugins, self).__init__(jenkins, base)
        self.depth = depth

    def poll_params(self):
        return {'depth': self.depth}

    def count(self):
        return len(self.raw.get('plugins', []))

    def by_name(self):
        '''Plugins keyed by both their short and long names.

        :returns: ``multi_key_dict`` of :class:`Plugin`
        '''
        plugins = multi_key_dict.multi_key_dict()
        for plugin_data in self.raw.get('plugins', []):
            keys = (str(plugin_data['shortName']),
                    str(plugin_data['longName']))
            plugins[keys] = Plugin(**plugin_data)
        return plugins

    def contains(self, name):
        '''Return the plugin named ``name`` (short or long), or ``None``.'''
        try:
            return self.by_name()[name]
        except KeyError:
            return None
