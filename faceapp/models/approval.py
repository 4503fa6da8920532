"""
Approval: a request for venue entry, venue-wide (global) or tied to one event.

Lifecycle, all transitions server-side:
    pending -> approved | rejected   (once, by a venue admin)
    qr_used False -> True            (once, when the pass is scanned at the door)

active is supplied by the server and is not a function of status.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from faceapp.models.fields import format_datetime, parse_datetime, parse_optional_datetime


class ApprovalType(str, Enum):
    GLOBAL = "global"
    EVENT_SPECIFIC = "event_specific"


class ApprovalStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


@dataclass(frozen=True)
class ApprovalVenue:
    id: int
    name: str

    @classmethod
    def from_dict(cls, data):
        return cls(id=data['id'], name=data['name'])

    def to_dict(self):
        return {'id': self.id, 'name': self.name}


@dataclass(frozen=True)
class ApprovalEvent:
    id: int
    name: str
    date_time: datetime

    @classmethod
    def from_dict(cls, data):
        return cls(id=data['id'], name=data['name'], date_time=parse_datetime(data['date_time']))

    def to_dict(self):
        return {'id': self.id, 'name': self.name, 'date_time': format_datetime(self.date_time)}


@dataclass(frozen=True)
class Approval:
    id: int
    venue: ApprovalVenue
    approval_type: ApprovalType
    status: ApprovalStatus
    active: bool
    qr_used: bool
    created_at: datetime
    event: Optional[ApprovalEvent] = None
    qr_code_data: Optional[str] = None
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

    @classmethod
    def from_dict(cls, data):
        event = data.get('event')
        approval_type = ApprovalType(data['approval_type'])
        if approval_type is ApprovalType.EVENT_SPECIFIC and event is None:
            raise ValueError(f"Approval {data['id']} is event_specific but has no event")
        return cls(
            id=data['id'],
            venue=ApprovalVenue.from_dict(data['venue']),
            event=ApprovalEvent.from_dict(event) if event is not None else None,
            approval_type=approval_type,
            status=ApprovalStatus(data['status']),
            active=data['active'],
            qr_used=data['qr_used'],
            qr_code_data=data.get('qr_code_data'),
            expires_at=parse_optional_datetime(data.get('expires_at')),
            created_at=parse_datetime(data['created_at']),
        )

    def to_dict(self):
        return {
            'id': self.id,
            'venue': self.venue.to_dict(),
            'event': self.event.to_dict() if self.event else None,
            'approval_type': self.approval_type.value,
            'status': self.status.value,
            'active': self.active,
            'qr_used': self.qr_used,
            'qr_code_data': self.qr_code_data,
            'expires_at': format_datetime(self.expires_at),
            'created_at': format_datetime(self.created_at),
        }
