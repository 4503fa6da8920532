"""
Transport Client: the single path from the managers to the FaceApp API.

JSON requests and multipart uploads against BASE_URL + API_VERSION. Every
failure surfaces as a faceapp.errors.APIError; nothing is retried. Apart from
the underlying requests.Session, no attribute changes after construction.
"""

import dataclasses
import logging
from enum import Enum

import requests

from faceapp import config
from faceapp.errors import (
    DecodingError,
    HTTPError,
    InvalidResponse,
    InvalidURL,
    NetworkError,
    Unauthorized,
)
from faceapp.models.responses import ErrorResponse, MessageResponse
from faceapp.services.credential_store import ACCESS_TOKEN_KEY

logger = logging.getLogger(__name__)

JSON_HEADERS = {
    'Content-Type': 'application/json',
    'Accept': 'application/json',
}


def encode_body(value):
    """Plain JSON-ready structure for a request body; None-valued keys are dropped."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if isinstance(value, dict):
        return {k: encode_body(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [encode_body(v) for v in value]
    if isinstance(value, Enum):
        return value.value
    return value


class APIClient:
    def __init__(self, credential_store, base_url=None, api_version=None, timeout=None, session=None):
        self.credential_store = credential_store
        self.base_url = (base_url or config.BASE_URL).rstrip('/')
        self.api_version = config.API_VERSION if api_version is None else api_version
        self.timeout = config.REQUEST_TIMEOUT if timeout is None else timeout
        self._session = session or requests.Session()

    def url_for(self, route):
        return f"{self.base_url}{self.api_version}{route.path}"

    def _bearer_headers(self):
        token = self.credential_store.get(ACCESS_TOKEN_KEY)
        if not token:
            raise Unauthorized()
        return {'Authorization': f"Bearer {token}"}

    def request(self, route, response_model, method='GET', body=None, authenticated=False):
        """
        Send a JSON request and decode a successful body with response_model.from_dict.

        Raises Unauthorized before any I/O when authenticated is set and no access
        token is stored.
        """
        headers = dict(JSON_HEADERS)
        if authenticated:
            headers.update(self._bearer_headers())

        payload = encode_body(body) if body is not None else None
        url = self.url_for(route)

        logger.debug("%s %s", method, route.path)
        response = self._send(method, url, headers=headers, json=payload)
        return self._handle_response(response, response_model, fallback_message="Request failed")

    def upload_file(self, route, file_data, file_name, field_name, mime_type):
        """Authenticated single-part multipart/form-data POST."""
        headers = {'Accept': 'application/json'}
        headers.update(self._bearer_headers())

        # requests generates a fresh random boundary per body
        files = {field_name: (file_name, file_data, mime_type)}
        url = self.url_for(route)

        logger.debug("POST %s (upload %s, %d bytes)", route.path, field_name, len(file_data))
        response = self._send('POST', url, headers=headers, files=files)
        return self._handle_response(response, MessageResponse, fallback_message="Upload failed")

    def _send(self, method, url, **kwargs):
        try:
            return self._session.request(method, url, timeout=self.timeout, **kwargs)
        except (requests.exceptions.MissingSchema,
                requests.exceptions.InvalidSchema,
                requests.exceptions.InvalidURL) as e:
            raise InvalidURL() from e
        except (requests.exceptions.ContentDecodingError,
                requests.exceptions.ChunkedEncodingError,
                requests.exceptions.InvalidHeader) as e:
            raise InvalidResponse() from e
        except requests.RequestException as e:
            logger.warning("Network error calling %s %s: %s", method, url, e)
            raise NetworkError(e) from e

    def _handle_response(self, response, response_model, fallback_message):
        status_code = response.status_code
        if not isinstance(status_code, int):
            raise InvalidResponse()

        if status_code == 401:
            raise Unauthorized()

        if status_code >= 400:
            message = self._error_message(response) or fallback_message
            logger.warning("HTTP %s from %s: %s", status_code, response.url, message)
            raise HTTPError(status_code, message)

        try:
            data = response.json()
        except ValueError as e:
            raise DecodingError(e) from e

        try:
            return response_model.from_dict(data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise DecodingError(e) from e

    @staticmethod
    def _error_message(response):
        try:
            return ErrorResponse.from_dict(response.json()).error
        except (ValueError, KeyError, TypeError, AttributeError):
            return None
