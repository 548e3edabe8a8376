import json
import socketserver

from mock import Mock
import requests


class NullServer(socketserver.TCPServer):

    request_queue_size = 1

    def __init__(self, server_address, *args, **kwargs):
        # simply init'ing is sufficient to open the port, which
        # with the server not started creates a black hole server
        super(NullServer, self).__init__(
            server_address, socketserver.BaseRequestHandler,
            *args, **kwargs)


def closed_port_url():
    '''URL of a local port nothing listens on.'''
    server = NullServer(("127.0.0.1", 0))
    address = server.server_address
    server.server_close()
    return "http://%s:%s" % address


def build_response_mock(status_code, json_body=None, headers=None,
                        add_content_length=True, **kwargs):
    real_response = requests.Response()
    real_response.status_code = status_code
    real_response._content_consumed = True

    text = None
    if json_body is not None:
        text = json.dumps(json_body)
        if add_content_length and headers is not {}:
            real_response.headers['content-length'] = str(len(text))

    if headers is not None:
        for k, v in headers.items():
            real_response.headers[k] = v

    for k, v in kwargs.items():
        setattr(real_response, k, v)

    response = Mock(wraps=real_response, autospec=True)
    if text:
        response.text = text

    # for some reason, wraps cannot handle attributes which are dicts
    # and accessed by key
    response.headers = real_response.headers
    response.content = text.encode('utf-8') if text else b''
    response.status_code = status_code
    response.url = kwargs.get('url')
    response.encoding = 'utf-8'

    return response
