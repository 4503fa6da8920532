from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func
from faceapp.db import Base


class Credential(Base):
    """
    One stored secret. Rows are scoped by namespace so several applications
    can share a database file without seeing each other's tokens.
    """
    __tablename__ = "credentials"

    namespace  = Column(String(255), primary_key=True)
    key        = Column(String(255), primary_key=True)
    value      = Column(Text,        nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
