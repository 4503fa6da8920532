from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from faceapp.models.approval import ApprovalStatus, ApprovalType
from faceapp.models.fields import format_datetime, parse_datetime, parse_optional_datetime


@dataclass(frozen=True)
class VenueStats:
    total_events: int
    upcoming_events: int
    pending_approvals: int
    approved_users: int

    @classmethod
    def from_dict(cls, data):
        return cls(
            total_events=data['total_events'],
            upcoming_events=data['upcoming_events'],
            pending_approvals=data['pending_approvals'],
            approved_users=data['approved_users'],
        )

    def to_dict(self):
        return {
            'total_events': self.total_events,
            'upcoming_events': self.upcoming_events,
            'pending_approvals': self.pending_approvals,
            'approved_users': self.approved_users,
        }


@dataclass(frozen=True)
class AdminVenue:
    """Venue administered by the current user, with a read-only stats snapshot."""
    id: int
    name: str
    description: Optional[str] = None
    address: Optional[str] = None
    stats: Optional[VenueStats] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data):
        stats = data.get('stats')
        return cls(
            id=data['id'],
            name=data['name'],
            description=data.get('description'),
            address=data.get('address'),
            stats=VenueStats.from_dict(stats) if stats is not None else None,
            created_at=parse_optional_datetime(data.get('created_at')),
            updated_at=parse_optional_datetime(data.get('updated_at')),
        )

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'address': self.address,
            'stats': self.stats.to_dict() if self.stats else None,
            'created_at': format_datetime(self.created_at),
            'updated_at': format_datetime(self.updated_at),
        }


@dataclass(frozen=True)
class AdminApprovalUser:
    id: int
    full_name: str
    phone_number: str

    @classmethod
    def from_dict(cls, data):
        return cls(id=data['id'], full_name=data['full_name'], phone_number=data['phone_number'])

    def to_dict(self):
        return {'id': self.id, 'full_name': self.full_name, 'phone_number': self.phone_number}


@dataclass(frozen=True)
class AdminApprovalEvent:
    id: int
    name: str
    date_time: datetime

    @classmethod
    def from_dict(cls, data):
        return cls(id=data['id'], name=data['name'], date_time=parse_datetime(data['date_time']))

    def to_dict(self):
        return {'id': self.id, 'name': self.name, 'date_time': format_datetime(self.date_time)}


@dataclass(frozen=True)
class AdminApproval:
    id: int
    user: AdminApprovalUser
    approval_type: ApprovalType
    status: ApprovalStatus
    active: bool
    qr_used: bool
    created_at: datetime
    event: Optional[AdminApprovalEvent] = None
    expires_at: Optional[datetime] = None

    @property
    def is_pending(self):
        return self.status is ApprovalStatus.PENDING

    @property
    def is_approved(self):
        return self.status is ApprovalStatus.APPROVED

    @property
    def is_rejected(self):
        return self.status is ApprovalStatus.REJECTED

    @property
    def status_display_name(self):
        if self.status is ApprovalStatus.APPROVED:
            return "Approved"
        if self.status is ApprovalStatus.REJECTED:
            return "Rejected"
        return "Pending"

    @property
    def approval_type_label(self):
        if self.approval_type is ApprovalType.EVENT_SPECIFIC:
            return "Event Access"
        return "Global Access"

    @classmethod
    def from_dict(cls, data):
        event = data.get('event')
        return cls(
            id=data['id'],
            user=AdminApprovalUser.from_dict(data['user']),
            event=AdminApprovalEvent.from_dict(event) if event is not None else None,
            approval_type=ApprovalType(data['approval_type']),
            status=ApprovalStatus(data['status']),
            active=data['active'],
            qr_used=data['qr_used'],
            expires_at=parse_optional_datetime(data.get('expires_at')),
            created_at=parse_datetime(data['created_at']),
        )

    def to_dict(self):
        return {
            'id': self.id,
            'user': self.user.to_dict(),
            'event': self.event.to_dict() if self.event else None,
            'approval_type': self.approval_type.value,
            'status': self.status.value,
            'active': self.active,
            'qr_used': self.qr_used,
            'expires_at': format_datetime(self.expires_at),
            'created_at': format_datetime(self.created_at),
        }
