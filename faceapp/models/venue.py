from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from faceapp.models.event import Event
from faceapp.models.fields import format_datetime, parse_optional_datetime


@dataclass(frozen=True)
class Venue:
    id: int
    name: str
    description: Optional[str] = None
    address: Optional[str] = None
    upcoming_events: Optional[Tuple[Event, ...]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data):
        events = data.get('upcoming_events')
        return cls(
            id=data['id'],
            name=data['name'],
            description=data.get('description'),
            address=data.get('address'),
            upcoming_events=tuple(Event.from_dict(e) for e in events) if events is not None else None,
            created_at=parse_optional_datetime(data.get('created_at')),
            updated_at=parse_optional_datetime(data.get('updated_at')),
        )

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'address': self.address,
            'upcoming_events': (
                [e.to_dict() for e in self.upcoming_events]
                if self.upcoming_events is not None else None
            ),
            'created_at': format_datetime(self.created_at),
            'updated_at': format_datetime(self.updated_at),
        }
