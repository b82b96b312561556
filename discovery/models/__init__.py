# Export all discovery models for easy imports
from models.models_user import User

from .base import Base
from .contact import ProfessionalContact
from .connection import ContactConnection
from .target_company import UserTargetCompany
from .suggestion_tracking import ContactSuggestionTracking

__all__ = [
    "Base",
    "User",
    "ProfessionalContact",
    "ContactConnection",
    "UserTargetCompany",
    "ContactSuggestionTracking",
]
