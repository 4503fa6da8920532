"""
Approval Manager: the current user's entry requests and their QR passes.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from faceapp.errors import APIError
from faceapp.models.approval import Approval, ApprovalType
from faceapp.models.payloads import ApprovalRequest, CreateApprovalRequest
from faceapp.models.responses import ApprovalResponse, ApprovalsResponse, QRCodeResponse
from faceapp.routes import Endpoint
from faceapp.services.observable import ObservableService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApprovalState:
    approvals: Tuple[Approval, ...] = ()
    active_approvals: Tuple[Approval, ...] = ()
    loading: bool = False
    error: Optional[str] = None


class ApprovalManager(ObservableService):
    def __init__(self, api):
        self.api = api
        super().__init__(ApprovalState())

    @property
    def approvals(self):
        return self._state.approvals

    @property
    def active_approvals(self):
        return self._state.active_approvals

    def fetch_approvals(self):
        """
        Replace approvals from the list endpoint. active_approvals is always
        the subset flagged active by the server in that same response.
        On error the previous collections are kept and the message is stored.
        """
        with self._busy():
            ticket = self._begin_fetch('approvals')
            try:
                response = self.api.request(Endpoint.APPROVALS.route(), ApprovalsResponse, authenticated=True)
            except APIError as e:
                if self._is_latest_fetch('approvals', ticket):
                    self._update(error=str(e))
                return

            if not self._is_latest_fetch('approvals', ticket):
                return
            approvals = tuple(response.approvals)
            self._update(
                approvals=approvals,
                active_approvals=tuple(a for a in approvals if a.active),
            )

    def fetch_approval(self, approval_id):
        response = self.api.request(
            Endpoint.APPROVAL.route(id=approval_id), ApprovalResponse, authenticated=True
        )
        return response.approval

    def request_approval(self, venue_id, event_id=None, approval_type=ApprovalType.GLOBAL):
        """
        Ask for entry to a venue. event_id is required for event_specific
        requests and left out for global ones; callers guarantee this.

        Returns the approval as created. The published list is refreshed
        afterwards, so status and active come from the list endpoint.
        """
        approval_type = ApprovalType(approval_type)
        with self._busy():
            response = self.api.request(
                Endpoint.APPROVALS.route(),
                ApprovalResponse,
                method='POST',
                body=CreateApprovalRequest(approval=ApprovalRequest(
                    venue_id=venue_id,
                    event_id=event_id,
                    approval_type=approval_type,
                )),
                authenticated=True,
            )
            logger.info("Requested %s approval %s for venue %s", approval_type.value, response.approval.id, venue_id)
            self.fetch_approvals()
            return response.approval

    def get_qr_code(self, approval_id):
        """QR payload for an approved, unused approval; None when the server has none."""
        response = self.api.request(
            Endpoint.APPROVAL_QR_CODE.route(id=approval_id), QRCodeResponse, authenticated=True
        )
        return response.qr_code_data
