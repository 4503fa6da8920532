import json
import socket
import unittest
from unittest import mock

import requests

from faceapp.errors import (
    DecodingError,
    HTTPError,
    InvalidResponse,
    InvalidURL,
    NetworkError,
    Unauthorized,
)
from faceapp.models.approval import ApprovalType
from faceapp.models.payloads import ApprovalRequest, CreateApprovalRequest, ProfileUpdateRequest
from faceapp.models.responses import (
    ApprovalResponse,
    ApprovalsResponse,
    MessageResponse,
    UserResponse,
    VenuesResponse,
)
from faceapp.routes import Endpoint
from faceapp.services.api_client import APIClient, encode_body
from faceapp.services.credential_store import ACCESS_TOKEN_KEY, CredentialStore
from tests.base import FakeAPITestCase


def make_response(status_code, body=b'', url='http://api.test/api/profile'):
    response = requests.models.Response()
    response.status_code = status_code
    response._content = body if isinstance(body, bytes) else json.dumps(body).encode()
    response.url = url
    return response


def free_port():
    with socket.socket() as sock:
        sock.bind(('127.0.0.1', 0))
        return sock.getsockname()[1]


class TestEncodeBody(unittest.TestCase):
    def test_omits_absent_fields_and_flattens_enums(self):
        body = CreateApprovalRequest(approval=ApprovalRequest(venue_id=7, approval_type=ApprovalType.GLOBAL))
        self.assertEqual(encode_body(body), {'approval': {'venue_id': 7, 'approval_type': 'global'}})

    def test_partial_profile_update(self):
        body = ProfileUpdateRequest.build(last_name='Beridze', social_links={'linkedin': 'https://linkedin.com/in/g'})
        self.assertEqual(encode_body(body), {
            'profile': {'last_name': 'Beridze', 'linkedin_url': 'https://linkedin.com/in/g'},
        })


class TestClassification(unittest.TestCase):
    """Status handling against canned responses; no socket involved."""

    def setUp(self):
        self.store = CredentialStore(url='sqlite://', namespace='test')
        self.store.save(ACCESS_TOKEN_KEY, 'tok-a')
        self.session = mock.Mock(spec=requests.Session)
        self.api = APIClient(self.store, base_url='http://api.test', session=self.session)

    def test_request_line_and_headers(self):
        self.session.request.return_value = make_response(200, {'message': 'ok'})

        self.api.request(Endpoint.LOGIN.route(), MessageResponse, method='POST',
                         body={'phone_number': '+995555000111', 'device_info': None})

        args, kwargs = self.session.request.call_args
        self.assertEqual(args, ('POST', 'http://api.test/api/auth/login'))
        self.assertEqual(kwargs['json'], {'phone_number': '+995555000111'})
        self.assertEqual(kwargs['timeout'], 30)
        self.assertEqual(kwargs['headers']['Content-Type'], 'application/json')
        self.assertEqual(kwargs['headers']['Accept'], 'application/json')
        self.assertNotIn('Authorization', kwargs['headers'])

    def test_bearer_header_when_authenticated(self):
        self.session.request.return_value = make_response(200, {'approvals': []})
        self.api.request(Endpoint.APPROVALS.route(), ApprovalsResponse, authenticated=True)
        headers = self.session.request.call_args.kwargs['headers']
        self.assertEqual(headers['Authorization'], 'Bearer tok-a')

    def test_missing_token_fails_before_any_network_call(self):
        self.store.clear_all()
        with self.assertRaises(Unauthorized):
            self.api.request(Endpoint.PROFILE.route(), UserResponse, authenticated=True)
        with self.assertRaises(Unauthorized):
            self.api.upload_file(Endpoint.UPLOAD_PHOTO.route(), b'\xff\xd8', 'photo.jpg', 'photo', 'image/jpeg')
        self.session.request.assert_not_called()

    def test_401_is_unauthorized_whatever_the_body(self):
        self.session.request.return_value = make_response(401, {'error': 'Signature has expired'})
        with self.assertRaises(Unauthorized) as ctx:
            self.api.request(Endpoint.PROFILE.route(), UserResponse, authenticated=True)
        self.assertEqual(str(ctx.exception), 'Session expired. Please login again.')

    def test_error_status_never_returns_a_value(self):
        for status in (400, 403, 404, 409, 422, 500, 503):
            with self.subTest(status=status):
                # body happens to look like a valid payload
                self.session.request.return_value = make_response(status, {'venues': []})
                with self.assertRaises(HTTPError) as ctx:
                    self.api.request(Endpoint.VENUES.route(), VenuesResponse, authenticated=True)
                self.assertEqual(ctx.exception.status_code, status)
                self.assertEqual(ctx.exception.message, 'Request failed')

    def test_structured_error_message(self):
        self.session.request.return_value = make_response(422, {'error': 'Invalid verification code'})
        with self.assertRaises(HTTPError) as ctx:
            self.api.request(Endpoint.CONFIRM_LOGIN.route(), MessageResponse, method='POST')
        self.assertEqual(str(ctx.exception), 'Invalid verification code')

    def test_non_json_error_body_falls_back(self):
        self.session.request.return_value = make_response(502, b'<html>Bad Gateway</html>')
        with self.assertRaises(HTTPError) as ctx:
            self.api.request(Endpoint.VENUES.route(), VenuesResponse)
        self.assertEqual(ctx.exception.message, 'Request failed')

    def test_upload_error_fallback_message(self):
        self.session.request.return_value = make_response(413, b'')
        with self.assertRaises(HTTPError) as ctx:
            self.api.upload_file(Endpoint.UPLOAD_PHOTO.route(), b'x' * 10, 'photo.jpg', 'photo', 'image/jpeg')
        self.assertEqual(ctx.exception.message, 'Upload failed')

    def test_shape_mismatch_is_decoding_error(self):
        self.session.request.return_value = make_response(200, {'user': {'id': 1}})
        with self.assertRaises(DecodingError):
            self.api.request(Endpoint.PROFILE.route(), UserResponse, authenticated=True)

        self.session.request.return_value = make_response(200, b'not json')
        with self.assertRaises(DecodingError):
            self.api.request(Endpoint.PROFILE.route(), UserResponse, authenticated=True)

    def test_bad_date_is_decoding_error(self):
        self.session.request.return_value = make_response(200, {'approvals': [{
            'id': 1, 'venue': {'id': 7, 'name': 'Bassiani'}, 'event': None,
            'approval_type': 'global', 'status': 'pending', 'active': False,
            'qr_used': False, 'created_at': '01/03/2026',
        }]})
        with self.assertRaises(DecodingError) as ctx:
            self.api.request(Endpoint.APPROVALS.route(), ApprovalsResponse, authenticated=True)
        self.assertIn('Cannot decode date: 01/03/2026', str(ctx.exception))

    def test_event_specific_approval_without_event_is_decoding_error(self):
        self.session.request.return_value = make_response(200, {'approval': {
            'id': 3, 'venue': {'id': 7, 'name': 'Bassiani'}, 'event': None,
            'approval_type': 'event_specific', 'status': 'pending', 'active': False,
            'qr_used': False, 'created_at': '2026-03-01T17:30:00Z',
        }})
        with self.assertRaises(DecodingError):
            self.api.request(Endpoint.APPROVAL.route(id=3), ApprovalResponse, authenticated=True)

    def test_transport_failures_are_wrapped(self):
        self.session.request.side_effect = requests.exceptions.Timeout('read timed out')
        with self.assertRaises(NetworkError) as ctx:
            self.api.request(Endpoint.VENUES.route(), VenuesResponse)
        self.assertIsInstance(ctx.exception.cause, requests.exceptions.Timeout)

        self.session.request.side_effect = requests.exceptions.SSLError('bad certificate')
        with self.assertRaises(NetworkError):
            self.api.request(Endpoint.VENUES.route(), VenuesResponse)

        self.session.request.side_effect = requests.exceptions.ChunkedEncodingError('truncated')
        with self.assertRaises(InvalidResponse):
            self.api.request(Endpoint.VENUES.route(), VenuesResponse)

    def test_malformed_base_url(self):
        api = APIClient(self.store, base_url='not a url')
        with self.assertRaises(InvalidURL):
            api.request(Endpoint.VENUES.route(), VenuesResponse)

    def test_upload_builds_single_file_part(self):
        self.session.request.return_value = make_response(200, {'message': 'photo uploaded'})

        result = self.api.upload_file(Endpoint.UPLOAD_PHOTO.route(), b'\xff\xd8jpeg', 'photo.jpg', 'photo', 'image/jpeg')

        self.assertEqual(result.message, 'photo uploaded')
        args, kwargs = self.session.request.call_args
        self.assertEqual(args, ('POST', 'http://api.test/api/profile/upload_photo'))
        self.assertEqual(kwargs['files'], {'photo': ('photo.jpg', b'\xff\xd8jpeg', 'image/jpeg')})
        self.assertEqual(kwargs['headers']['Authorization'], 'Bearer tok-a')
        # requests sets the multipart Content-Type and boundary itself
        self.assertNotIn('Content-Type', kwargs['headers'])


class TestAgainstFakeAPI(FakeAPITestCase):
    def test_authenticated_round_trip(self):
        self.sign_in(self.create_member())
        response = self.api.request(Endpoint.VENUES.route(), VenuesResponse, authenticated=True)
        self.assertEqual([v.name for v in response.venues], ['Bassiani', 'KHIDI'])
        self.assertEqual(self.backend.calls, [('GET', '/api/venues')])

    def test_server_error_message_surfaces(self):
        with self.assertRaises(HTTPError) as ctx:
            self.api.request(Endpoint.LOGIN.route(), MessageResponse, method='POST',
                             body={'phone_number': '+995000000000'})
        self.assertEqual(ctx.exception.status_code, 404)
        self.assertEqual(ctx.exception.message, 'User not found')

    def test_fake_api_rejects_missing_bearer(self):
        response = requests.get(f"{self.server.url}/api/profile")
        self.assertEqual(response.status_code, 401)

    def test_multipart_upload_reaches_server(self):
        user = self.create_member()
        self.sign_in(user)
        result = self.api.upload_file(Endpoint.UPLOAD_ID_CARD.route(), b'\x89PNG', 'id.png', 'id_card', 'image/png')
        self.assertEqual(result.message, 'id_card uploaded')
        self.assertTrue(user['id_card_image_url'].endswith('/id.png'))

    def test_connection_refused_is_network_error(self):
        api = APIClient(self.store, base_url=f"http://127.0.0.1:{free_port()}", timeout=2)
        with self.assertRaises(NetworkError):
            api.request(Endpoint.LOGIN.route(), MessageResponse, method='POST', body={'phone_number': '+1'})


if __name__ == '__main__':
    unittest.main()
