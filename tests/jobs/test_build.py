import os
import shutil
import tempfile

import requests_mock

import jenkins_remote
from tests.jobs.base import JenkinsJobsTestBase


class JenkinsBuildJobTest(JenkinsJobsTestBase):

    @requests_mock.Mocker()
    def test_simple(self, req_mock):
        req_mock.post(self.make_url('job/Test%20Job/build/'),
                      status_code=201,
                      headers={'Location': 'http://example.com/queue/item/25/'})

        queue_id = self.j.build_job(u'Test Job')

        self.assertEqual(queue_id, 25)
        self.assertEqual(req_mock.last_request.url,
                         self.make_url('job/Test%20Job/build/'))

    @requests_mock.Mocker()
    def test_with_parameters(self, req_mock):
        req_mock.post(self.make_url('job/TestJob/buildWithParameters/'),
                      status_code=201,
                      headers={'Location': 'http://example.com/queue/item/7'})

        queue_id = self.j.build_job(u'TestJob', {'when': 'now'})

        self.assertEqual(queue_id, 7)
        self.assertEqual(req_mock.last_request.body, 'when=now')

    @requests_mock.Mocker()
    def test_no_location(self, req_mock):
        req_mock.post(self.make_url('job/TestJob/build/'))

        self.assertIsNone(self.j.build_job(u'TestJob'))

    @requests_mock.Mocker()
    def test_failed(self, req_mock):
        req_mock.post(self.make_url('job/TestJob/build/'), status_code=500)

        with self.assertRaises(jenkins_remote.JenkinsException) as \
                context_manager:
            self.j.build_job(u'TestJob')
        self.assertEqual(str(context_manager.exception),
                         'Could not invoke job[TestJob]: 500')

    @requests_mock.Mocker()
    def test_folder_build_job(self, req_mock):
        req_mock.get(self.make_url('job/a/api/json'), json={'name': 'a'})
        req_mock.post(self.make_url('job/a/job/TestJob/build/'),
                      status_code=201)

        self.j.get_folder(u'a').build_job(u'TestJob')

        self.assertEqual(req_mock.last_request.url,
                         self.make_url('job/a/job/TestJob/build/'))


class JenkinsInvokeJobTest(JenkinsJobsTestBase):

    def setUp(self):
        super(JenkinsInvokeJobTest, self).setUp()
        self.tmpdir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.tmpdir)
        self.artifact = os.path.join(self.tmpdir, 'artifact.zip')
        with open(self.artifact, 'wb') as fp:
            fp.write(b'PK\x03\x04')

    @requests_mock.Mocker()
    def test_files_and_parameters(self, req_mock):
        req_mock.post(self.make_url('job/TestJob/buildWithParameters/'),
                      status_code=201,
                      headers={'Location': 'http://example.com/queue/item/3/'})

        queue_id = self.j.job(u'TestJob').invoke(
            files=[self.artifact], parameters={'BRANCH': 'main'},
            cause=u'nightly run', token=u'secret')

        self.assertEqual(queue_id, 3)
        request = req_mock.last_request
        self.assertEqual(self.query_of(request),
                         {'token': u'secret', 'cause': u'nightly run'})
        body = request.body
        self.assertLess(body.index(b'filename="artifact.zip"'),
                        body.index(b'name="BRANCH"'))
        self.assertIn(b'PK\x03\x04', body)

    @requests_mock.Mocker()
    def test_skip_if_running(self, req_mock):
        req_mock.get(self.make_url('job/TestJob/api/json'),
                     json=self.job_info(u'TestJob',
                                        lastBuild={'number': 4}))
        req_mock.get(self.make_url('job/TestJob/4/api/json'),
                     json={'number': 4, 'building': True})

        self.assertFalse(self.j.job(u'TestJob').invoke(skip_if_running=True))

        self.assertNotIn('POST', [r.method for r in req_mock.request_history])
