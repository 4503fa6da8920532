"""
Admin Approval Manager: venue administrators reviewing entry requests.

Transitions handled here:
    pending --approve--> approved
    pending --reject-->  rejected
The pending precondition is enforced by the server; a refused transition
surfaces as HTTPError to the caller.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from faceapp.errors import APIError
from faceapp.models.admin import AdminApproval, AdminVenue
from faceapp.models.responses import (
    AdminApprovalResponse,
    AdminApprovalsResponse,
    AdminVenueResponse,
    AdminVenuesResponse,
)
from faceapp.routes import Endpoint
from faceapp.services.observable import ObservableService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdminState:
    venues: Tuple[AdminVenue, ...] = ()
    approvals: Tuple[AdminApproval, ...] = ()
    loading: bool = False
    error: Optional[str] = None


class AdminApprovalManager(ObservableService):
    def __init__(self, api):
        self.api = api
        super().__init__(AdminState())

    @property
    def venues(self):
        return self._state.venues

    @property
    def approvals(self):
        return self._state.approvals

    def fetch_venues(self):
        with self._busy():
            ticket = self._begin_fetch('venues')
            try:
                response = self.api.request(Endpoint.ADMIN_VENUES.route(), AdminVenuesResponse, authenticated=True)
            except APIError as e:
                if self._is_latest_fetch('venues', ticket):
                    self._update(error=str(e))
                return
            if self._is_latest_fetch('venues', ticket):
                self._update(venues=tuple(response.venues))

    def fetch_venue_detail(self, venue_id):
        response = self.api.request(
            Endpoint.ADMIN_VENUE.route(id=venue_id), AdminVenueResponse, authenticated=True
        )
        return response.venue

    def fetch_approvals(self, venue_id, pending_only=False):
        endpoint = Endpoint.ADMIN_PENDING_APPROVALS if pending_only else Endpoint.ADMIN_APPROVALS
        with self._busy():
            ticket = self._begin_fetch('approvals')
            try:
                response = self.api.request(
                    endpoint.route(venue_id=venue_id), AdminApprovalsResponse, authenticated=True
                )
            except APIError as e:
                if self._is_latest_fetch('approvals', ticket):
                    self._update(error=str(e))
                return
            if self._is_latest_fetch('approvals', ticket):
                self._update(approvals=tuple(response.approvals))

    def fetch_approval(self, venue_id, approval_id):
        response = self.api.request(
            Endpoint.ADMIN_APPROVAL.route(venue_id=venue_id, id=approval_id),
            AdminApprovalResponse,
            authenticated=True,
        )
        return response.approval

    def approve_approval(self, venue_id, approval_id):
        return self._transition(Endpoint.ADMIN_APPROVE_APPROVAL, venue_id, approval_id)

    def reject_approval(self, venue_id, approval_id):
        return self._transition(Endpoint.ADMIN_REJECT_APPROVAL, venue_id, approval_id)

    def _transition(self, endpoint, venue_id, approval_id):
        with self._busy():
            response = self.api.request(
                endpoint.route(venue_id=venue_id, id=approval_id),
                AdminApprovalResponse,
                method='POST',
                authenticated=True,
            )
            logger.info("Approval %s at venue %s is now %s", approval_id, venue_id, response.approval.status.value)
            return response.approval
