import requests_mock

import jenkins_remote
from tests.base import JenkinsTestBase


class JenkinsFingerprintTest(JenkinsTestBase):

    fingerprint_id = u'0f5c9a6bd2e0d3d6a5b1f0c1a2d3e4f5'

    def fingerprint_info(self, hash):
        return {
            u'hash': hash,
            u'fileName': u'artifact.zip',
            u'original': {u'name': u'TestJob', u'number': 3},
        }

    @requests_mock.Mocker()
    def test_valid(self, req_mock):
        req_mock.get(
            self.make_url('fingerprint/%s/api/json' % self.fingerprint_id),
            json=self.fingerprint_info(self.fingerprint_id))

        self.assertTrue(self.j.validate_fingerprint(self.fingerprint_id))

    @requests_mock.Mocker()
    def test_hash_mismatch(self, req_mock):
        req_mock.get(
            self.make_url('fingerprint/%s/api/json' % self.fingerprint_id),
            json=self.fingerprint_info(u'deadbeef'))

        self.assertFalse(self.j.validate_fingerprint(self.fingerprint_id))

    @requests_mock.Mocker()
    def test_unknown(self, req_mock):
        req_mock.get(
            self.make_url('fingerprint/%s/api/json' % self.fingerprint_id),
            status_code=404)

        self.assertFalse(self.j.validate_fingerprint(self.fingerprint_id))
        with self.assertRaises(jenkins_remote.NotFoundException):
            self.j.get_artifact_data(self.fingerprint_id)

    @requests_mock.Mocker()
    def test_artifact_data(self, req_mock):
        info = self.fingerprint_info(self.fingerprint_id)
        req_mock.get(
            self.make_url('fingerprint/%s/api/json' % self.fingerprint_id),
            json=info)

        self.assertEqual(self.j.get_artifact_data(self.fingerprint_id), info)
