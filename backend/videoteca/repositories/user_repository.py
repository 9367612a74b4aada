from typing import Optional
from sqlalchemy.orm import Session
from videoteca.repositories.base_repository import BaseRepository
from videoteca.models.user import User

class UserRepository(BaseRepository[User]):
    """User repository with user-specific operations"""

    def __init__(self, db: Session):
        super().__init__(User, db)

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email"""
        return self.find_first({"email": email})

    def email_exists(self, email: str) -> bool:
        """Check if email exists"""
        return self.exists(email=email)

    def create_user(self, email: str, hashed_password: str, name: Optional[str] = None) -> User:
        """Create new user"""
        return self.create({
            "email": email,
            "name": name,
            "hashed_password": hashed_password,
        })
