from sqlalchemy import Column, Integer, String, ForeignKey

from .base import Base


class UserTargetCompany(Base):
    __tablename__ = "user_target_companies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    company_name = Column(String(255), nullable=False)
