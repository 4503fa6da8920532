"""
Response envelopes. The transport client decodes every successful body
through one of these from_dict constructors.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from faceapp.models.admin import AdminApproval, AdminVenue
from faceapp.models.approval import Approval
from faceapp.models.event import Event
from faceapp.models.user import User
from faceapp.models.venue import Venue


@dataclass(frozen=True)
class MessageResponse:
    message: str

    @classmethod
    def from_dict(cls, data):
        return cls(message=data['message'])


@dataclass(frozen=True)
class ErrorResponse:
    error: str

    @classmethod
    def from_dict(cls, data):
        error = data['error']
        if not isinstance(error, str):
            raise TypeError("error must be a string")
        return cls(error=error)


@dataclass(frozen=True)
class AuthResponse:
    # Every field is optional: a confirmation may return only part of the session
    message: Optional[str] = None
    user: Optional[User] = None
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        user = data.get('user')
        return cls(
            message=data.get('message'),
            user=User.from_dict(user) if user is not None else None,
            access_token=data.get('access_token'),
            refresh_token=data.get('refresh_token'),
        )


@dataclass(frozen=True)
class UserResponse:
    user: User

    @classmethod
    def from_dict(cls, data):
        return cls(user=User.from_dict(data['user']))


@dataclass(frozen=True)
class VenuesResponse:
    venues: Tuple[Venue, ...]

    @classmethod
    def from_dict(cls, data):
        return cls(venues=tuple(Venue.from_dict(v) for v in data['venues']))


@dataclass(frozen=True)
class VenueResponse:
    venue: Venue

    @classmethod
    def from_dict(cls, data):
        return cls(venue=Venue.from_dict(data['venue']))


@dataclass(frozen=True)
class EventsResponse:
    events: Tuple[Event, ...]

    @classmethod
    def from_dict(cls, data):
        return cls(events=tuple(Event.from_dict(e) for e in data['events']))


@dataclass(frozen=True)
class ApprovalsResponse:
    approvals: Tuple[Approval, ...]

    @classmethod
    def from_dict(cls, data):
        return cls(approvals=tuple(Approval.from_dict(a) for a in data['approvals']))


@dataclass(frozen=True)
class ApprovalResponse:
    approval: Approval
    message: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        return cls(approval=Approval.from_dict(data['approval']), message=data.get('message'))


@dataclass(frozen=True)
class QRCodeResponse:
    qr_code_svg: Optional[str] = None
    qr_code_data: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        return cls(qr_code_svg=data.get('qr_code_svg'), qr_code_data=data.get('qr_code_data'))


@dataclass(frozen=True)
class AdminVenuesResponse:
    venues: Tuple[AdminVenue, ...]

    @classmethod
    def from_dict(cls, data):
        return cls(venues=tuple(AdminVenue.from_dict(v) for v in data['venues']))


@dataclass(frozen=True)
class AdminVenueResponse:
    venue: AdminVenue

    @classmethod
    def from_dict(cls, data):
        return cls(venue=AdminVenue.from_dict(data['venue']))


@dataclass(frozen=True)
class AdminApprovalsResponse:
    approvals: Tuple[AdminApproval, ...]

    @classmethod
    def from_dict(cls, data):
        return cls(approvals=tuple(AdminApproval.from_dict(a) for a in data['approvals']))


@dataclass(frozen=True)
class AdminApprovalResponse:
    approval: AdminApproval
    message: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        return cls(approval=AdminApproval.from_dict(data['approval']), message=data.get('message'))
