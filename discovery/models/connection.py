from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey

from .base import Base


class ContactConnection(Base):
    """Directed edge: contact_id knows connected_contact_id."""
    __tablename__ = "contact_connections"

    id = Column(Integer, primary_key=True, autoincrement=True)
    contact_id = Column(
        String(36), ForeignKey("professional_contacts.id", ondelete="CASCADE"), index=True, nullable=False
    )
    connected_contact_id = Column(String(36), index=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
