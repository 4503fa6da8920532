from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from faceapp.models.fields import format_datetime, parse_optional_datetime


@dataclass(frozen=True)
class SocialLinks:
    facebook: Optional[str] = None
    instagram: Optional[str] = None
    linkedin: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        return cls(
            facebook=data.get('facebook'),
            instagram=data.get('instagram'),
            linkedin=data.get('linkedin'),
        )

    def to_dict(self):
        return {
            'facebook': self.facebook,
            'instagram': self.instagram,
            'linkedin': self.linkedin,
        }


@dataclass(frozen=True)
class User:
    """
    Account as returned by /profile and the auth confirmation endpoints.
    phone_verified and profile_complete are computed by the server and are
    never derived locally.
    """
    id: int
    first_name: str
    last_name: str
    phone_number: str
    phone_verified: bool
    role: str
    profile_complete: Optional[bool] = None
    social_links: Optional[SocialLinks] = None
    profile_photo_url: Optional[str] = None
    id_card_image_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"

    @property
    def is_venue_admin(self):
        return self.role == 'venue_admin'

    @classmethod
    def from_dict(cls, data):
        social_links = data.get('social_links')
        return cls(
            id=data['id'],
            first_name=data['first_name'],
            last_name=data['last_name'],
            phone_number=data['phone_number'],
            phone_verified=data['phone_verified'],
            role=data['role'],
            profile_complete=data.get('profile_complete'),
            social_links=SocialLinks.from_dict(social_links) if social_links is not None else None,
            profile_photo_url=data.get('profile_photo_url'),
            id_card_image_url=data.get('id_card_image_url'),
            created_at=parse_optional_datetime(data.get('created_at')),
            updated_at=parse_optional_datetime(data.get('updated_at')),
        )

    def to_dict(self):
        return {
            'id': self.id,
            'first_name': self.first_name,
            'last_name': self.last_name,
            'phone_number': self.phone_number,
            'phone_verified': self.phone_verified,
            'role': self.role,
            'profile_complete': self.profile_complete,
            'social_links': self.social_links.to_dict() if self.social_links else None,
            'profile_photo_url': self.profile_photo_url,
            'id_card_image_url': self.id_card_image_url,
            'created_at': format_datetime(self.created_at),
            'updated_at': format_datetime(self.updated_at),
        }
