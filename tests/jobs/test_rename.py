import requests_mock

import jenkins_remote
from tests.jobs.base import JenkinsJobsTestBase


class JenkinsRenameJobTest(JenkinsJobsTestBase):

    @requests_mock.Mocker()
    def test_simple(self, req_mock):
        req_mock.post(self.make_url('job/Test%20Job/doRename/'))
        req_mock.get(self.make_url('job/Test%20Job_2/api/json'),
                     json=self.job_info(u'Test Job_2'))

        job = self.j.rename_job(u'Test Job', u'Test Job_2')

        rename = req_mock.request_history[0]
        self.assertEqual(
            rename.url,
            self.make_url('job/Test%20Job/doRename/?newName=Test%20Job_2'))
        self.assertEqual(job.base, '/job/Test%20Job_2')
        self.assertEqual(job.name, u'Test Job_2')

    @requests_mock.Mocker()
    def test_reconciled(self, req_mock):
        req_mock.post(self.make_url('job/TestJob/doRename/'),
                      status_code=500)
        req_mock.get(self.make_url('job/TestJob_2/api/json'),
                     json=self.job_info(u'TestJob_2'))

        job = self.j.rename_job(u'TestJob', u'TestJob_2')

        self.assertEqual(job.short_name, u'TestJob_2')

    @requests_mock.Mocker()
    def test_failed(self, req_mock):
        req_mock.post(self.make_url('job/TestJob/doRename/'),
                      status_code=500)
        req_mock.get(self.make_url('job/TestJob_2/api/json'),
                     status_code=404)

        with self.assertRaises(jenkins_remote.StatusError) as \
                context_manager:
            self.j.rename_job(u'TestJob', u'TestJob_2')
        self.assertEqual(str(context_manager.exception), '500')

    @requests_mock.Mocker()
    def test_in_folder(self, req_mock):
        req_mock.get(self.make_url('job/a%20folder/job/TestJob/api/json'),
                     json=self.job_info(u'TestJob'))
        req_mock.post(
            self.make_url('job/a%20folder/job/TestJob/doRename/'))
        req_mock.get(self.make_url('job/a%20folder/job/Renamed/api/json'),
                     json=self.job_info(u'Renamed'))

        job = self.j.get_job(u'a folder/TestJob')
        job.rename(u'Renamed')

        self.assertEqual(job.base, '/job/a%20folder/job/Renamed')
        self.assertEqual(job.folder_base, '/job/a%20folder')

    @requests_mock.Mocker()
    def test_full_paths_in_folder(self, req_mock):
        req_mock.post(self.make_url('job/a/job/TestJob/doRename/'))
        req_mock.get(self.make_url('job/a/job/Renamed/api/json'),
                     json=self.job_info(u'Renamed'))

        job = self.j.rename_job(u'a/TestJob', u'a/Renamed')

        self.assertEqual(job.base, '/job/a/job/Renamed')
        self.assertEqual(self.query_of(req_mock.request_history[0]),
                         {'newName': u'Renamed'})

    def test_across_folders_refused(self):
        with self.assertRaises(jenkins_remote.JenkinsException):
            self.j.rename_job(u'a/TestJob', u'TestJob')
