import unittest
from urllib.parse import unquote
from urllib.parse import urlsplit

from testscenarios import TestWithScenarios

import jenkins_remote


class JenkinsTestBase(TestWithScenarios, unittest.TestCase):

    crumb_data = {
        "crumb": "dab177f483b3dd93483ef6716d8e792d",
        "crumbRequestField": ".crumb",
    }

    scenarios = [
        ('base_url1', dict(base_url='http://example.com')),
        ('base_url2', dict(base_url='http://example.com/jenkins'))
    ]

    # used when the module is collected without scenario expansion
    base_url = 'http://example.com'

    def setUp(self):
        super(JenkinsTestBase, self).setUp()

        self.j = jenkins_remote.Jenkins(self.base_url, 'test', 'test')

    def make_url(self, path):
        return u'{0}/{1}'.format(self.base_url, path)

    def query_of(self, request):
        return dict((key, unquote(value)) for key, _, value in (
            pair.partition('=')
            for pair in urlsplit(request.url).query.split('&') if pair))

    def got_request_urls(self, req_mock):
        return [
            request.url.split('?')[0]
            for request in req_mock.request_history
        ]
