from mock import Mock

from jenkins_remote.exceptions import NotFoundException
from jenkins_remote.exceptions import StatusError
from jenkins_remote.exceptions import TransportError
from jenkins_remote.reconcile import MutationReconciler
from jenkins_remote.requester import ResponseEnvelope
from tests.base import JenkinsTestBase


def handle(status, name=None, transport_failed=False):
    resource = Mock()
    resource.name = name
    if transport_failed:
        resource.last_response = ResponseEnvelope.transport_failure(
            'http://example.com', Exception('refused'))
    else:
        resource.last_response = ResponseEnvelope(status)
    resource.poll.return_value = status
    return resource


class MutationReconcilerTest(JenkinsTestBase):

    def setUp(self):
        super(MutationReconcilerTest, self).setUp()
        self.reconciler = MutationReconciler(Mock())

    def test_delete_error_then_gone(self):
        outcome = self.reconciler.delete(lambda: ResponseEnvelope(500),
                                         lambda: handle(404))

        self.assertTrue(outcome)
        self.assertTrue(outcome.reconciled)
        self.assertEqual(outcome.original_status, 500)

    def test_delete_error_then_still_there(self):
        outcome = self.reconciler.delete(lambda: ResponseEnvelope(500),
                                         lambda: handle(200, 'x'))

        self.assertFalse(outcome)
        self.assertEqual(outcome.final_status, 500)

    def test_delete_verify_forbidden_reports_original(self):
        outcome = self.reconciler.delete(lambda: ResponseEnvelope(500),
                                         lambda: handle(403))

        self.assertFalse(outcome)
        self.assertEqual(outcome.final_status, 500)

    def test_delete_verify_unreachable_is_not_deleted(self):
        outcome = self.reconciler.delete(
            lambda: ResponseEnvelope(500),
            lambda: handle(404, transport_failed=True))

        self.assertFalse(outcome)
        self.assertFalse(outcome.reconciled)
        self.assertEqual(outcome.final_status, 500)

    def test_delete_immediate_success_skips_verify(self):
        verify = Mock()

        outcome = self.reconciler.delete(lambda: ResponseEnvelope(200),
                                         verify)

        self.assertTrue(outcome)
        self.assertFalse(outcome.reconciled)
        self.assertFalse(verify.called)

    def test_create_error_then_present(self):
        outcome = self.reconciler.create(lambda: ResponseEnvelope(500),
                                         lambda: handle(200, 'y'), 'y')

        self.assertTrue(outcome)
        self.assertTrue(outcome.reconciled)
        self.assertEqual(outcome.final_status, 200)
        self.assertEqual(outcome.resource.name, 'y')

    def test_create_error_then_other_name(self):
        outcome = self.reconciler.create(lambda: ResponseEnvelope(500),
                                         lambda: handle(200, 'z'), 'y')

        self.assertFalse(outcome)
        self.assertEqual(outcome.final_status, 500)

    def test_create_error_then_absent(self):
        outcome = self.reconciler.create(lambda: ResponseEnvelope(500),
                                         lambda: handle(404), 'y')

        self.assertFalse(outcome)
        self.assertEqual(outcome.final_status, 500)

    def test_create_immediate_success_populates_handle(self):
        resource = handle(200, 'y')

        outcome = self.reconciler.create(lambda: ResponseEnvelope(201),
                                         lambda: resource, 'y')

        self.assertTrue(outcome)
        self.assertFalse(outcome.reconciled)
        self.assertIs(outcome.resource, resource)
        resource.poll.assert_called_once_with()

    def test_copy_and_rename(self):
        self.assertTrue(self.reconciler.copy(
            lambda: ResponseEnvelope(502), lambda: handle(200, 'y'), 'y'))
        self.assertTrue(self.reconciler.rename(
            lambda: ResponseEnvelope(500), lambda: handle(200, 'y'), 'y'))

    def test_bad_request_accepted_when_asked(self):
        outcome = self.reconciler.create(lambda: ResponseEnvelope(400),
                                         lambda: handle(200, 'y'), 'y',
                                         accept_bad_request=True)

        self.assertTrue(outcome)
        self.assertFalse(outcome.reconciled)

    def test_bad_request_verified_by_default(self):
        outcome = self.reconciler.create(lambda: ResponseEnvelope(400),
                                         lambda: handle(404), 'y')

        self.assertFalse(outcome)
        self.assertEqual(outcome.final_status, 400)

    def test_single_verification(self):
        resource = handle(404)
        verify = Mock(return_value=resource)

        self.reconciler.create(lambda: ResponseEnvelope(500), verify, 'y')

        verify.assert_called_once_with()
        resource.poll.assert_called_once_with()

    def test_unreachable_server_raises_transport_error(self):
        refused = TransportError('refused')
        outcome = self.reconciler.delete(
            lambda: ResponseEnvelope.transport_failure('http://x/', refused),
            lambda: handle(404, transport_failed=True))

        self.assertFalse(outcome)
        self.assertIs(outcome.exception(), refused)

    def test_failed_status_raises_status_error(self):
        outcome = self.reconciler.delete(
            lambda: ResponseEnvelope(500),
            lambda: handle(404, transport_failed=True))

        self.assertIsNone(outcome.error)
        self.assertIsInstance(outcome.exception(), StatusError)
        self.assertEqual(str(outcome.exception()), '500')

    def test_failed_create_not_found_exception(self):
        outcome = self.reconciler.create(lambda: ResponseEnvelope(404),
                                         lambda: handle(404), 'y')

        self.assertIsInstance(outcome.exception(), NotFoundException)
