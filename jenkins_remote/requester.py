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
.. module:: jenkins_remote.requester
    :platform: Unix, Windows
    :synopsis: Request dispatch for the Jenkins REST API

:class:`Requester` turns a :class:`RequestDescriptor` into a wire request,
sends it through a :class:`requests.Session` and returns a
:class:`ResponseEnvelope` decoded by the decoder the caller picked. It
never raises on an HTTP status, and a failed transport comes back as a
synthesized 404 envelope that carries the :class:`TransportError`.
'''

import json
import logging
import os

import requests
import requests.exceptions as req_exc
from requests.structures import CaseInsensitiveDict
import urllib3
from urllib3.exceptions import InsecureRequestWarning
from urllib3.filepost import encode_multipart_formdata

from jenkins_remote import decoders
from jenkins_remote import endpoints
from jenkins_remote.exceptions import TransportError

STRUCTURED = 'structured'
RAW = 'raw'

BODY_NONE = 'none'
BODY_RAW = 'raw'
BODY_MULTIPART = 'multipart'

DEFAULT_HEADERS = {'Content-Type': 'text/xml; charset=utf-8'}
TRANSPORT_FAILURE_STATUS = 404
# 400 is returned by Jenkins for some idempotent calls that did succeed
QUIET_STATUSES = (200, 400)
MUTATING_METHODS = ('POST', 'PUT', 'DELETE')
# anything requests raises before a full response has been read
TRANSPORT_ERRORS = (req_exc.RequestException,)


def encode_query(params):
    '''Serialize query parameters as ``?k=v&k=v``.

    Values are not escaped: callers quote free-form text (labels, offline
    messages, JSON blobs) before handing it over.
    '''
    if not params:
        return ''
    return '?' + '&'.join('%s=%s' % (k, v) for k, v in params.items())


def _side_fields(payload):
    if payload is None:
        return []
    if isinstance(payload, bytes):
        payload = payload.decode('utf-8')
    if isinstance(payload, str):
        payload = json.loads(payload) if payload.strip() else {}
    if not isinstance(payload, dict):
        raise TypeError('Multipart side fields must be a dict or a JSON '
                        'object, got %s' % type(payload).__name__)
    return [(key, value if isinstance(value, str) else str(value))
            for key, value in payload.items()]


def encode_multipart(files, payload=None):
    '''Build a multipart body from file paths plus scalar side fields.

    Each file becomes a part named ``file`` carrying its base name and its
    bytes unmodified, in the order given. Side fields from ``payload`` (a
    dict or a JSON object) follow the file parts.

    Files are opened one at a time and closed before the next one is
    read, but the whole body is assembled in memory before it is sent, so
    an upload needs about as much memory as its files add up to.

    :returns: ``(body, content_type)``
    :throws: :class:`TransportError` on the first file that can't be read,
        ``TypeError`` if ``payload`` is not an object
    '''
    fields = []
    for path in files:
        try:
            with open(path, 'rb') as fp:
                fields.append(('file', (os.path.basename(path), fp.read())))
        except (IOError, OSError) as e:
            raise TransportError('Could not read file[%s]: %s' % (path, e), e)
    fields.extend(_side_fields(payload))
    return encode_multipart_formdata(fields)


class RequestDescriptor(object):
    '''Everything needed to issue one request.

    :param method: HTTP method, ``str``
    :param endpoint: path relative to the server base, ``str``
    :param params: query parameters, ``dict``; duplicate keys in a list of
        pairs collapse to the last value
    :param payload: request body (``bytes``, ``str`` or form ``dict``), or
        the side fields of a multipart upload
    :param files: file paths to upload as multipart parts, ``list``
    :param dialect: :data:`STRUCTURED` to target ``api/json``, :data:`RAW`
        otherwise
    :param headers: extra headers for this request, ``dict``
    '''

    def __init__(self, method, endpoint, params=None, payload=None,
                 files=None, dialect=RAW, headers=None):
        self.method = method
        self.endpoint = endpoint
        self.params = dict(params or {})
        self.payload = payload
        self.files = list(files or [])
        self.dialect = dialect
        self.headers = dict(headers or {})

    @property
    def body_kind(self):
        if self.files:
            return BODY_MULTIPART
        if self.payload is not None:
            return BODY_RAW
        return BODY_NONE

    def path(self):
        endpoint = self.endpoint
        if not endpoint.endswith('/'):
            endpoint += '/'
        if self.dialect == STRUCTURED:
            endpoint += endpoints.API_SUFFIX
        return endpoint + encode_query(self.params)

    def __repr__(self):
        return '<RequestDescriptor %s %s>' % (self.method, self.path())


class ResponseEnvelope(object):
    '''Status, body and headers of one response, plus its decoded value.

    ``error`` holds the :class:`TransportError` when the envelope was
    synthesized because no response arrived; ``decode_error`` holds the
    :class:`jenkins_remote.exceptions.DecodeError` of a best-effort decode.
    '''

    def __init__(self, status_code, content=b'', headers=None, url=None,
                 encoding=None, error=None):
        self.status_code = status_code
        self.content = content
        self.headers = headers if headers is not None else CaseInsensitiveDict()
        self.url = url
        self.encoding = encoding
        self.error = error
        self.data = None
        self.decode_error = None

    @classmethod
    def from_response(cls, response):
        try:
            content = response.content
        finally:
            response.close()
        return cls(response.status_code, content or b'', response.headers,
                   response.url, response.encoding)

    @classmethod
    def transport_failure(cls, url, error):
        return cls(TRANSPORT_FAILURE_STATUS, b'', url=url, error=error)

    @property
    def text(self):
        return self.content.decode(self.encoding or 'utf-8', 'replace')

    @property
    def transport_failed(self):
        return self.error is not None

    @property
    def ok(self):
        return self.error is None and self.status_code == 200

    def __repr__(self):
        return '<ResponseEnvelope [%s] %s>' % (self.status_code, self.url)


class WrappedSession(requests.Session):
    """A wrapper for requests.Session to override 'verify' property, ignoring REQUESTS_CA_BUNDLE environment variable.

    This is a workaround for https://github.com/kennethreitz/requests/issues/3829
    """

    def merge_environment_settings(self, url, proxies, stream, verify,
                                   *args, **kwargs):
        if self.verify is False:
            verify = False

        return super(WrappedSession, self).merge_environment_settings(
            url, proxies, stream, verify, *args, **kwargs)


class Requester(object):
    '''Send requests to one Jenkins server.

    Responses are scoped to the call that issued them; nothing about the
    last exchange is kept on the instance.

    :param base: server URL, ``str``
    :param username: Server username, ``str``
    :param password: Server password, ``str``
    :param timeout: transport timeout in secs, ``None`` leaves the
        transport default in place
    :param ssl_verify: verify TLS certificates, ``bool``
    :param use_crumb: fetch a CSRF crumb and send it on mutating
        requests, ``bool``
    :param logger: ``logging.Logger`` to report on, defaults to the
        ``jenkins_remote`` logger
    '''

    def __init__(self, base, username=None, password=None, timeout=None,
                 ssl_verify=True, use_crumb=False, logger=None, session=None):
        self.base = base.rstrip('/')
        self.timeout = timeout
        self.use_crumb = use_crumb
        self.crumb = None
        self.logger = logger or logging.getLogger('jenkins_remote')
        self.session = session if session is not None else WrappedSession()

        if username is not None and password is not None:
            self.session.auth = requests.auth.HTTPBasicAuth(
                username.encode('utf-8'), password.encode('utf-8'))

        extra_headers = os.environ.get('JENKINS_API_EXTRA_HEADERS', '')
        if extra_headers:
            self.logger.warning(
                'JENKINS_API_EXTRA_HEADERS adds these HTTP headers: %s',
                extra_headers.split('\n'))
        for token in extra_headers.split('\n'):
            if ':' in token:
                header, value = token.split(':', 1)
                self.session.headers[header] = value.strip()

        if not ssl_verify or os.getenv('PYTHONHTTPSVERIFY', '1') == '0':
            self.logger.debug('Disabling SSL verification for %s', self.base)
            urllib3.disable_warnings(InsecureRequestWarning)
            self.session.verify = False

    @property
    def auth(self):
        return self.session.auth

    def url_for(self, descriptor):
        return self.base + descriptor.path()

    def _request(self, req):
        r = self.session.prepare_request(req)
        # requests.Session.send() does not honor env settings by design
        # see https://github.com/requests/requests/issues/2807
        _settings = self.session.merge_environment_settings(
            r.url, {}, None, self.session.verify, None)
        _settings['timeout'] = self.timeout
        return self.session.send(r, **_settings)

    def _maybe_add_crumb(self, headers):
        if self.crumb is None:
            response = self.get_json(endpoints.CRUMB_URL)
            if response.ok and 'crumb' in response.data:
                self.crumb = response.data
            else:
                self.crumb = False
        if self.crumb:
            headers[self.crumb['crumbRequestField']] = self.crumb['crumb']

    def do(self, descriptor, decoder=decoders.RAW):
        '''Send ``descriptor`` and decode the response with ``decoder``.

        :returns: :class:`ResponseEnvelope`
        :throws: :class:`TransportError` if a file to upload can't be read,
            ``TypeError`` if multipart side fields are not an object
        '''
        url = self.url_for(descriptor)
        headers = dict(descriptor.headers)
        data = descriptor.payload
        if descriptor.body_kind == BODY_MULTIPART:
            data, headers['Content-Type'] = encode_multipart(
                descriptor.files, descriptor.payload)
        elif isinstance(data, str):
            data = data.encode('utf-8')

        if self.use_crumb and descriptor.method in MUTATING_METHODS:
            self._maybe_add_crumb(headers)

        self.logger.debug('%s %s', descriptor.method, url)
        req = requests.Request(descriptor.method, url, data=data,
                               headers=headers)
        try:
            response = ResponseEnvelope.from_response(self._request(req))
        except TRANSPORT_ERRORS as e:
            self.logger.warning('Error communicating with server[%s]: %s',
                                self.base, e)
            response = ResponseEnvelope.transport_failure(
                url, TransportError('Error in request: %s' % e, e))

        if response.status_code not in QUIET_STATUSES:
            self.logger.debug('%s %s returned [%d]: %s', descriptor.method,
                              url, response.status_code, response.text)
        return decoder.decode(response)

    def get_json(self, endpoint, params=None, decoder=decoders.JSON):
        return self.do(RequestDescriptor('GET', endpoint, params=params,
                                         dialect=STRUCTURED), decoder)

    def get_raw(self, endpoint, params=None):
        return self.do(RequestDescriptor('GET', endpoint, params=params),
                       decoders.RAW)

    def post(self, endpoint, payload=None, params=None, decoder=decoders.RAW,
             dialect=RAW):
        return self.do(RequestDescriptor('POST', endpoint, params=params,
                                         payload=payload, dialect=dialect),
                       decoder)

    def post_json(self, endpoint, payload=None, params=None,
                  decoder=decoders.JSON):
        return self.post(endpoint, payload=payload, params=params,
                         decoder=decoder, dialect=STRUCTURED)

    def post_xml(self, endpoint, xml, params=None):
        return self.do(RequestDescriptor('POST', endpoint, params=params,
                                         payload=xml,
                                         headers=DEFAULT_HEADERS),
                       decoders.RAW)

    def post_files(self, endpoint, files, payload=None, params=None):
        return self.do(RequestDescriptor('POST', endpoint, params=params,
                                         payload=payload, files=files),
                       decoders.RAW)
