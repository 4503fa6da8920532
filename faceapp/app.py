"""
Client assembly: one credential store and one transport client shared by
every manager.
"""

import logging
from dataclasses import dataclass

from faceapp import config
from faceapp.services.admin_service import AdminApprovalManager
from faceapp.services.api_client import APIClient
from faceapp.services.approval_service import ApprovalManager
from faceapp.services.credential_store import CredentialStore
from faceapp.services.session_service import SessionManager
from faceapp.services.venue_service import VenueCatalog

logger = logging.getLogger(__name__)


@dataclass
class FaceApp:
    credential_store: CredentialStore
    api: APIClient
    session: SessionManager
    venues: VenueCatalog
    approvals: ApprovalManager
    admin: AdminApprovalManager


def create_app(base_url=None, credentials_url=None, namespace=None, credential_store=None, restore=True):
    store = credential_store or CredentialStore(url=credentials_url, namespace=namespace)
    api = APIClient(store, base_url=base_url)

    app = FaceApp(
        credential_store=store,
        api=api,
        session=SessionManager(api, store),
        venues=VenueCatalog(api),
        approvals=ApprovalManager(api),
        admin=AdminApprovalManager(api),
    )

    if restore:
        app.session.restore()
    return app


if __name__ == '__main__':
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    app = create_app()
    user = app.session.current_user
    if app.session.is_authenticated and user:
        logger.info("Signed in as %s (%s) against %s", user.full_name, user.role, app.api.base_url)
    elif app.session.is_authenticated:
        logger.info("Stored session present but profile unavailable: %s", app.session.error)
    else:
        logger.info("Not signed in (%s)", app.api.base_url)
