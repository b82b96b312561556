import uuid
from datetime import datetime
from sqlalchemy import Column, String, Text, DateTime, ForeignKey

from .base import Base


class ProfessionalContact(Base):
    __tablename__ = "professional_contacts"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)

    # Profile
    full_name = Column(String(255), nullable=False)
    headline = Column(Text)
    company = Column(String(255))
    role = Column(String(255))
    industry = Column(String(255))

    # Channels
    linkedin_profile_url = Column(String(512))
    email = Column(String(255))
    phone = Column(String(64))

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
