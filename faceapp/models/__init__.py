from faceapp.models.user import User, SocialLinks
from faceapp.models.event import Event
from faceapp.models.venue import Venue
from faceapp.models.approval import (
    Approval,
    ApprovalEvent,
    ApprovalStatus,
    ApprovalType,
    ApprovalVenue,
)
from faceapp.models.admin import (
    AdminApproval,
    AdminApprovalEvent,
    AdminApprovalUser,
    AdminVenue,
    VenueStats,
)

__all__ = [
    "User", "SocialLinks", "Event", "Venue",
    "Approval", "ApprovalEvent", "ApprovalStatus", "ApprovalType", "ApprovalVenue",
    "AdminApproval", "AdminApprovalEvent", "AdminApprovalUser", "AdminVenue", "VenueStats",
]
