"""
Session Manager: phone/OTP authentication and the current user's profile.

Registration and login are both two round trips: the first asks the server to
send an SMS code, the second exchanges that code for tokens. The client keeps
no state between the two steps; the OTP window is enforced server-side.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from faceapp.errors import APIError, Unauthorized
from faceapp.models.payloads import (
    ConfirmLoginRequest,
    ConfirmRegistrationRequest,
    LoginRequest,
    LogoutRequest,
    ProfileUpdateRequest,
    RegisterRequest,
)
from faceapp.models.responses import AuthResponse, MessageResponse, UserResponse
from faceapp.models.user import User
from faceapp.routes import Endpoint
from faceapp.services.credential_store import ACCESS_TOKEN_KEY, REFRESH_TOKEN_KEY
from faceapp.services.observable import ObservableService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionState:
    authenticated: bool = False
    current_user: Optional[User] = None
    loading: bool = False
    error: Optional[str] = None


class SessionManager(ObservableService):
    def __init__(self, api, credential_store):
        self.api = api
        self.credential_store = credential_store
        # A stored access token is trusted until the server says otherwise
        has_token = credential_store.get(ACCESS_TOKEN_KEY) is not None
        super().__init__(SessionState(authenticated=has_token))

    @property
    def is_authenticated(self):
        return self._state.authenticated

    @property
    def current_user(self):
        return self._state.current_user

    def restore(self):
        """Refresh the profile of a persisted session. No network call without a token."""
        if self._state.authenticated:
            self.fetch_profile()

    # Registration

    def register(self, phone_number, first_name, last_name):
        """Step 1: submit name and phone, the server texts an OTP."""
        with self._busy():
            return self.api.request(
                Endpoint.REGISTER.route(),
                MessageResponse,
                method='POST',
                body=RegisterRequest(phone_number=phone_number, first_name=first_name, last_name=last_name),
            )

    def confirm_registration(self, phone_number, sms_code):
        """Step 2: submit the OTP, the account is activated and tokens are returned."""
        with self._busy():
            response = self.api.request(
                Endpoint.CONFIRM_REGISTRATION.route(),
                AuthResponse,
                method='POST',
                body=ConfirmRegistrationRequest(phone_number=phone_number, sms_code=sms_code),
            )
            self.handle_auth_response(response)
            return response

    # Login

    def login(self, phone_number):
        with self._busy():
            return self.api.request(
                Endpoint.LOGIN.route(),
                MessageResponse,
                method='POST',
                body=LoginRequest(phone_number=phone_number),
            )

    def confirm_login(self, phone_number, sms_code, device_info=None):
        with self._busy():
            response = self.api.request(
                Endpoint.CONFIRM_LOGIN.route(),
                AuthResponse,
                method='POST',
                body=ConfirmLoginRequest(phone_number=phone_number, sms_code=sms_code, device_info=device_info),
            )
            self.handle_auth_response(response)
            return response

    def handle_auth_response(self, response):
        """Completes both flows. Only tokens present in the response are written."""
        if response.access_token is not None:
            self.credential_store.save(ACCESS_TOKEN_KEY, response.access_token)
        if response.refresh_token is not None:
            self.credential_store.save(REFRESH_TOKEN_KEY, response.refresh_token)

        changes = {'authenticated': True}
        if response.user is not None:
            changes['current_user'] = response.user
        self._update(**changes)
        logger.info("Authenticated%s", f" as user {response.user.id}" if response.user else "")

    # Session

    def logout(self):
        """Best-effort server logout, then local teardown regardless of the outcome."""
        with self._busy():
            try:
                refresh_token = self.credential_store.get(REFRESH_TOKEN_KEY)
                if refresh_token:
                    try:
                        self.api.request(
                            Endpoint.LOGOUT.route(),
                            MessageResponse,
                            method='DELETE',
                            body=LogoutRequest(refresh_token=refresh_token),
                        )
                    except APIError as e:
                        logger.warning("Server logout failed, clearing local session anyway: %s", e)
            finally:
                self.credential_store.clear_all()
                self._update(authenticated=False, current_user=None)
                logger.info("Logged out")

    # Profile

    def fetch_profile(self):
        """Replace current_user from /profile. An Unauthorized response ends the session."""
        try:
            response = self.api.request(Endpoint.PROFILE.route(), UserResponse, authenticated=True)
        except Unauthorized:
            logger.info("Profile refresh unauthorized, logging out")
            self.logout()
            return None
        except APIError as e:
            self._update(error=str(e))
            return None

        self._update(current_user=response.user)
        return response.user

    def update_profile(self, first_name=None, last_name=None, social_links=None):
        """
        Partial update; omitted fields keep their server-side value.
        social_links may carry 'facebook', 'instagram' and 'linkedin' URLs.
        """
        with self._busy():
            response = self.api.request(
                Endpoint.PROFILE.route(),
                UserResponse,
                method='PATCH',
                body=ProfileUpdateRequest.build(first_name, last_name, social_links),
                authenticated=True,
            )
            self._update(current_user=response.user)
            return response.user

    def upload_profile_photo(self, image_data, file_name='photo.jpg', mime_type='image/jpeg'):
        with self._busy():
            response = self.api.upload_file(
                Endpoint.UPLOAD_PHOTO.route(), image_data, file_name, 'photo', mime_type
            )
            # Completeness flags are computed server-side
            self.fetch_profile()
            return response

    def upload_id_card(self, image_data, file_name='id_card.jpg', mime_type='image/jpeg'):
        with self._busy():
            response = self.api.upload_file(
                Endpoint.UPLOAD_ID_CARD.route(), image_data, file_name, 'id_card', mime_type
            )
            self.fetch_profile()
            return response
