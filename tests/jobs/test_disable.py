import requests_mock

import jenkins_remote
from tests.jobs.base import JenkinsJobsTestBase


class JenkinsDisableJobTest(JenkinsJobsTestBase):

    @requests_mock.Mocker()
    def test_simple(self, req_mock):
        req_mock.get(self.make_url('job/Test%20Job/api/json'), [
            {'json': self.job_info(u'Test Job')},
            {'json': self.job_info(u'Test Job', color=u'disabled')},
        ])
        req_mock.post(self.make_url('job/Test%20Job/disable/'))

        job = self.j.get_job(u'Test Job')
        self.assertTrue(job.is_enabled())
        self.assertTrue(job.disable())
        job.poll()

        self.assertFalse(job.is_enabled())

    @requests_mock.Mocker()
    def test_already_disabled(self, req_mock):
        req_mock.post(self.make_url('job/TestJob/disable/'), status_code=400)

        self.assertTrue(self.j.job(u'TestJob').disable())

    @requests_mock.Mocker()
    def test_not_found(self, req_mock):
        req_mock.post(self.make_url('job/TestJob/disable/'), status_code=404)

        with self.assertRaises(jenkins_remote.NotFoundException):
            self.j.job(u'TestJob').disable()
