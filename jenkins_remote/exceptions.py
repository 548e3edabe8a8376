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
.. module:: jenkins_remote.exceptions
    :platform: Unix, Windows
    :synopsis: Error types raised by the Jenkins remote API client
'''


class JenkinsException(Exception):
    '''General exception type for jenkins-API-related failures.'''
    pass


class TransportError(JenkinsException):
    '''The server could not be reached or closed without a response.

    A failed request still yields a 404 envelope; this error rides along
    in its ``error`` attribute and is not a :class:`NotFoundException`.
    '''

    def __init__(self, message, cause=None):
        super(TransportError, self).__init__(message)
        self.cause = cause


class StatusError(JenkinsException):
    '''A request completed with a non-success HTTP status.

    The numeric status is the whole error payload: ``str()`` of the
    exception is the code itself.
    '''

    def __init__(self, status_code, message=None):
        super(StatusError, self).__init__(
            message if message is not None else str(status_code))
        self.status_code = status_code


class NotFoundException(StatusError):
    '''A special exception to call out the case of receiving a 404.'''

    def __init__(self, message=None):
        super(NotFoundException, self).__init__(404, message)


class DecodeError(JenkinsException, ValueError):
    '''A structured response body could not be parsed.'''

    def __init__(self, message, content=None):
        super(DecodeError, self).__init__(message)
        self.content = content


def status_error(status_code):
    '''Build the exception matching ``status_code``.'''
    if status_code == 404:
        return NotFoundException()
    return StatusError(status_code)


def response_error(response):
    '''Build the exception for a failed response envelope.

    A transport failure surfaces as its :class:`TransportError`, never as
    the 404 of the synthesized envelope.
    '''
    if response.error is not None:
        return response.error
    return status_error(response.status_code)
