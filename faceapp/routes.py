"""
Endpoint catalogue for the FaceApp API.

Each Endpoint member is a path template; Endpoint.route(**params) binds exactly
the parameters the template names and yields an immutable Route.
"""

from enum import Enum
from string import Formatter
from typing import NamedTuple

from faceapp.errors import InvalidURL


class Route(NamedTuple):
    endpoint: "Endpoint"
    path: str


class Endpoint(Enum):
    # Auth
    REGISTER = "/auth/register"
    CONFIRM_REGISTRATION = "/auth/confirm_registration"
    LOGIN = "/auth/login"
    CONFIRM_LOGIN = "/auth/confirm_login"
    LOGOUT = "/auth/logout"

    # Profile
    PROFILE = "/profile"
    UPLOAD_PHOTO = "/profile/upload_photo"
    UPLOAD_ID_CARD = "/profile/upload_id_card"

    # Venues
    VENUES = "/venues"
    VENUE = "/venues/{id}"
    VENUE_EVENTS = "/venues/{id}/events"

    # Approvals
    APPROVALS = "/approvals"
    APPROVAL = "/approvals/{id}"
    APPROVAL_QR_CODE = "/approvals/{id}/qr_code"

    # Admin venues
    ADMIN_VENUES = "/admin/venues"
    ADMIN_VENUE = "/admin/venues/{id}"

    # Admin approvals
    ADMIN_APPROVALS = "/admin/venues/{venue_id}/approvals"
    ADMIN_PENDING_APPROVALS = "/admin/venues/{venue_id}/approvals/pending"
    ADMIN_APPROVAL = "/admin/venues/{venue_id}/approvals/{id}"
    ADMIN_APPROVE_APPROVAL = "/admin/venues/{venue_id}/approvals/{id}/approve"
    ADMIN_REJECT_APPROVAL = "/admin/venues/{venue_id}/approvals/{id}/reject"

    @property
    def params(self):
        return frozenset(name for _, name, _, _ in Formatter().parse(self.value) if name)

    def route(self, **params):
        expected = self.params
        if set(params) != expected:
            raise InvalidURL(
                f"Invalid URL: {self.name} takes {sorted(expected)}, got {sorted(params)}"
            )
        for name, value in params.items():
            # Path segments are numeric ids; anything else would change the path shape
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidURL(f"Invalid URL: {name} must be an integer id, got {value!r}")
        return Route(self, self.value.format(**params))
