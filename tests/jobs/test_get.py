import requests_mock

import jenkins_remote
from tests.jobs.base import JenkinsJobsTestBase


class JenkinsGetJobTest(JenkinsJobsTestBase):

    @requests_mock.Mocker()
    def test_simple(self, req_mock):
        req_mock.get(self.make_url('job/Test%20Job/api/json'),
                     json=self.job_info(u'Test Job', inQueue=True))

        job = self.j.get_job(u'Test Job')

        self.assertEqual(job.get_name(), u'Test Job')
        self.assertEqual(job.get_description(), u'Foo')
        self.assertTrue(job.is_enabled())
        self.assertTrue(job.is_queued())
        self.assertEqual(job.get_details()['color'], u'blue')

    @requests_mock.Mocker()
    def test_missing(self, req_mock):
        req_mock.get(self.make_url('job/TestJob/api/json'),
                     status_code=404)

        with self.assertRaises(jenkins_remote.NotFoundException):
            self.j.get_job(u'TestJob')

    @requests_mock.Mocker()
    def test_in_nested_folders(self, req_mock):
        req_mock.get(self.make_url('job/a/job/b/job/c/api/json'),
                     json=self.job_info(u'c'))

        job = self.j.get_job(u'a/b/c')

        self.assertEqual(job.folder_base, '/job/a/job/b')
        self.assertEqual(job.short_name, u'c')


class JenkinsJobConfigTest(JenkinsJobsTestBase):

    @requests_mock.Mocker()
    def test_get_config(self, req_mock):
        req_mock.get(self.make_url('job/Test%20Job/config.xml/'),
                     text=self.config_xml)

        config = self.j.job(u'Test Job').get_config()

        self.assertEqual(config, self.config_xml)

    @requests_mock.Mocker()
    def test_get_config_missing(self, req_mock):
        req_mock.get(self.make_url('job/TestJob/config.xml/'),
                     status_code=404)

        with self.assertRaises(jenkins_remote.NotFoundException):
            self.j.job(u'TestJob').get_config()

    @requests_mock.Mocker()
    def test_update_config(self, req_mock):
        req_mock.post(self.make_url('job/TestJob/config.xml/'))

        self.assertTrue(self.j.job(u'TestJob').update_config(self.config_xml))

        self.assertEqual(req_mock.last_request.body,
                         self.config_xml.encode('utf-8'))
