"""
Credential Store: durable bearer-token storage for this application.

Backed by a SQLAlchemy database (SQLite file by default). Failures never reach
callers: they are logged and read as "absent".
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from faceapp import config
from faceapp.db import make_engine, make_session_factory
from faceapp.models.credential import Credential

logger = logging.getLogger(__name__)

ACCESS_TOKEN_KEY = "accessToken"
REFRESH_TOKEN_KEY = "refreshToken"


class CredentialStore:
    def __init__(self, url=None, namespace=None, engine=None):
        self.namespace = namespace or config.CREDENTIALS_NAMESPACE
        self.engine = engine
        self._session_factory = None
        try:
            if self.engine is None:
                self.engine = make_engine(url or config.CREDENTIALS_URL)
            self._session_factory = make_session_factory(self.engine)
        except (SQLAlchemyError, OSError) as e:
            logger.error("Credential store unavailable: %s", e)

    def save(self, key, value):
        if self._session_factory is None:
            return
        session = self._session_factory()
        try:
            # Replace: drop any previous value for the key in the same transaction
            session.query(Credential).filter_by(namespace=self.namespace, key=key).delete()
            session.add(Credential(namespace=self.namespace, key=key, value=value))
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.error("Failed to save credential %s: %s", key, e)
        finally:
            session.close()

    def get(self, key):
        if self._session_factory is None:
            return None
        session = self._session_factory()
        try:
            row = session.query(Credential).filter_by(namespace=self.namespace, key=key).first()
            return row.value if row else None
        except SQLAlchemyError as e:
            logger.error("Failed to read credential %s: %s", key, e)
            return None
        finally:
            session.close()

    def delete(self, key):
        if self._session_factory is None:
            return
        session = self._session_factory()
        try:
            session.query(Credential).filter_by(namespace=self.namespace, key=key).delete()
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.error("Failed to delete credential %s: %s", key, e)
        finally:
            session.close()

    def clear_all(self):
        """Remove every credential in this namespace in one transaction."""
        if self._session_factory is None:
            return
        session = self._session_factory()
        try:
            session.query(Credential).filter_by(namespace=self.namespace).delete()
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.error("Failed to clear credentials: %s", e)
        finally:
            session.close()

    # Convenience accessors for the two tokens the client persists

    @property
    def access_token(self):
        return self.get(ACCESS_TOKEN_KEY)

    @property
    def refresh_token(self):
        return self.get(REFRESH_TOKEN_KEY)
