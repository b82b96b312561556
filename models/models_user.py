import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime
from db import Base

class User(Base):
    __tablename__ = "users"
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(255), unique=True, index=True, nullable=False)
    full_name = Column(String(255))
    # Declared industry, compared against candidate contacts when ranking suggestions
    industry = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=False), default=datetime.utcnow, nullable=False)
