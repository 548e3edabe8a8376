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
.. module:: jenkins_remote.reconcile
    :platform: Unix, Windows
    :synopsis: Settle the outcome of create, copy, rename and delete calls

Jenkins may answer a mutation with an error after having applied it, for
instance it emits an error page for ``doDelete`` before the deletion is
committed. Whenever the immediate status is not a success,
:class:`MutationReconciler` polls a fresh handle for the target once and
lets the server state decide. A single check is the whole retry budget.
'''

import logging

from jenkins_remote.exceptions import status_error

CREATE = 'create'
COPY = 'copy'
RENAME = 'rename'
DELETE = 'delete'

SUCCESS_STATUSES = (200, 201)
BAD_REQUEST = 400
NOT_FOUND = 404


class MutationOutcome(object):
    '''Final word on one mutating call.

    :param succeeded: the mutation took effect, ``bool``
    :param reconciled: the immediate status was inconclusive and the
        result comes from the follow-up poll, ``bool``
    :param final_status: status that decided the outcome; on failure this
        is always the status of the mutation itself, ``int``
    :param original_status: status of the mutation request, ``int``
    :param resource: the handle that was polled, if any
    :param error: :class:`jenkins_remote.exceptions.TransportError` when
        the server could not be reached, ``None`` otherwise
    '''

    def __init__(self, succeeded, reconciled, final_status,
                 original_status=None, resource=None, error=None):
        self.succeeded = succeeded
        self.reconciled = reconciled
        self.final_status = final_status
        self.original_status = (final_status if original_status is None
                                else original_status)
        self.resource = resource
        self.error = error

    def exception(self):
        '''Exception to raise for a failed outcome.'''
        if self.error is not None:
            return self.error
        return status_error(self.final_status)

    def __bool__(self):
        return self.succeeded

    def __repr__(self):
        return ('<MutationOutcome succeeded=%s reconciled=%s status=%s>'
                % (self.succeeded, self.reconciled, self.final_status))


class MutationReconciler(object):
    '''Issue a mutation and reconcile an ambiguous answer.

    ``issue`` is a callable returning the
    :class:`jenkins_remote.requester.ResponseEnvelope` of the mutation.
    ``verify`` is a callable building a fresh, unpolled
    :class:`jenkins_remote.resource.RemoteResource` for the expected
    target.

    :param logger: ``logging.Logger`` to report decisions on
    '''

    def __init__(self, logger=None):
        self.logger = logger or logging.getLogger('jenkins_remote')

    def _immediate_success(self, response, accept_bad_request):
        if response.error is not None:
            return False
        if response.status_code in SUCCESS_STATUSES:
            return True
        return accept_bad_request and response.status_code == BAD_REQUEST

    def _run(self, kind, issue, verify, name=None, accept_bad_request=False):
        response = issue()
        status = response.status_code
        if self._immediate_success(response, accept_bad_request):
            resource = None
            if kind != DELETE:
                resource = verify()
                resource.poll()
            return MutationOutcome(True, False, status, resource=resource)

        self.logger.info('%s returned [%d], verifying %s', kind, status,
                         name if name is not None else 'target')
        resource = verify()
        verified = resource.poll()
        if resource.last_response is not None and \
                resource.last_response.transport_failed:
            self.logger.warning('Could not verify %s: server unreachable',
                                kind)
            return MutationOutcome(False, False, status, resource=resource,
                                   error=response.error)

        if kind == DELETE:
            succeeded = verified == NOT_FOUND
        else:
            succeeded = verified == 200 and resource.name == name

        if succeeded:
            self.logger.info('%s took effect despite status [%d]', kind,
                             status)
            return MutationOutcome(True, True, verified, status, resource)
        return MutationOutcome(False, True, status, status, resource,
                               error=response.error)

    def create(self, issue, verify, name, accept_bad_request=False):
        return self._run(CREATE, issue, verify, name, accept_bad_request)

    def copy(self, issue, verify, name):
        return self._run(COPY, issue, verify, name)

    def rename(self, issue, verify, name):
        return self._run(RENAME, issue, verify, name)

    def delete(self, issue, verify):
        return self._run(DELETE, issue, verify)
