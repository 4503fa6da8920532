from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from faceapp.models.fields import format_datetime, parse_datetime


@dataclass(frozen=True)
class Event:
    id: int
    name: str
    date_time: datetime
    allow_global_approval: bool
    description: Optional[str] = None
    upcoming: Optional[bool] = None

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data['id'],
            name=data['name'],
            description=data.get('description'),
            date_time=parse_datetime(data['date_time']),
            allow_global_approval=data['allow_global_approval'],
            upcoming=data.get('upcoming'),
        )

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'date_time': format_datetime(self.date_time),
            'allow_global_approval': self.allow_global_approval,
            'upcoming': self.upcoming,
        }
