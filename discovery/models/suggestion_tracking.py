from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime

from .base import Base


class ContactSuggestionTracking(Base):
    __tablename__ = "contact_suggestions_tracking"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(36), index=True, nullable=False)
    suggested_contact_id = Column(String(36), index=True, nullable=False)
    action = Column(String(16), nullable=False)
    notes = Column(Text)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
