"""
Request bodies. Fields are already snake_case; the transport client drops
None-valued keys so absent optionals never reach the wire.
"""

from dataclasses import dataclass
from typing import Optional

from faceapp.models.approval import ApprovalType


@dataclass(frozen=True)
class RegisterRequest:
    phone_number: str
    first_name: str
    last_name: str


@dataclass(frozen=True)
class ConfirmRegistrationRequest:
    phone_number: str
    sms_code: str


@dataclass(frozen=True)
class LoginRequest:
    phone_number: str


@dataclass(frozen=True)
class ConfirmLoginRequest:
    phone_number: str
    sms_code: str
    device_info: Optional[str] = None


@dataclass(frozen=True)
class LogoutRequest:
    refresh_token: str


@dataclass(frozen=True)
class ProfileData:
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    facebook_url: Optional[str] = None
    instagram_url: Optional[str] = None
    linkedin_url: Optional[str] = None


@dataclass(frozen=True)
class ProfileUpdateRequest:
    profile: ProfileData

    @classmethod
    def build(cls, first_name=None, last_name=None, social_links=None):
        social_links = social_links or {}
        return cls(profile=ProfileData(
            first_name=first_name,
            last_name=last_name,
            facebook_url=social_links.get('facebook'),
            instagram_url=social_links.get('instagram'),
            linkedin_url=social_links.get('linkedin'),
        ))


@dataclass(frozen=True)
class ApprovalRequest:
    venue_id: int
    approval_type: ApprovalType
    event_id: Optional[int] = None


@dataclass(frozen=True)
class CreateApprovalRequest:
    approval: ApprovalRequest
