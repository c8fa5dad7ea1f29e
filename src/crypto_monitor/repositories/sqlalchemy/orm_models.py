"""SQLAlchemy ORM model definitions."""

from datetime import datetime

from sqlalchemy import Column, String, DateTime, Text

from crypto_monitor.repositories.sqlalchemy.database import Base


class PreferenceORM(Base):
    """SQLAlchemy model for a namespaced preference entry."""

    __tablename__ = "preferences"

    namespace = Column(String(64), primary_key=True)
    key = Column(String(64), primary_key=True)
    value = Column(Text, nullable=True)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
