"""App version model."""
import uuid

from sqlalchemy import Column, DateTime, String, Uuid
from sqlalchemy.sql import func

from server_helpers.db.base import Base


class AppVersion(Base):
    """A saved version of an application definition.

    Components, queries and pages hang off a version; editing any of them
    bumps ``updated_at`` so caches keyed on it are invalidated.
    """

    __tablename__ = "app_versions"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
