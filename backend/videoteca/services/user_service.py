import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from videoteca.schemas.user import UserCreate
from videoteca.core.auth import get_password_hash, verify_password
from videoteca.core.exceptions import (
    UserNotFoundException, UserAlreadyExistsException, InvalidCredentialsException
)
from videoteca.repositories.user_repository import UserRepository
from videoteca.models.user import User

logger = logging.getLogger(__name__)

class UserService:
    """Registration and credential checks"""

    def __init__(self, db: Session):
        self.db = db
        self.user_repository = UserRepository(db)

    def get_user_by_email(self, email: str) -> Optional[User]:
        """Get user by email"""
        return self.user_repository.get_by_email(email)

    def get_user_by_id(self, user_id: str) -> User:
        """Get user by ID"""
        user = self.user_repository.find_unique(user_id)
        if not user:
            raise UserNotFoundException()
        return user

    def create_user(self, user_data: UserCreate) -> User:
        """Create a new user"""
        try:
            logger.info(f"Creating user with email: {user_data.email}")

            if self.user_repository.email_exists(user_data.email):
                raise UserAlreadyExistsException()

            hashed_password = get_password_hash(user_data.password)

            user = self.user_repository.create_user(
                email=user_data.email,
                hashed_password=hashed_password,
                name=user_data.name
            )

            logger.info(f"User created successfully with ID: {user.id}")
            return user

        except IntegrityError:
            # concurrent registration won the unique index
            self.db.rollback()
            raise UserAlreadyExistsException()
        except Exception as e:
            logger.error(f"Error creating user: {str(e)}")
            self.db.rollback()
            raise

    def authenticate_user(self, email: str, password: str) -> User:
        """Return the user for valid credentials.

        Unknown email and wrong password raise the same exception so the
        response does not reveal which accounts exist.
        """
        user = self.get_user_by_email(email)
        if not user or not verify_password(password, user.hashed_password):
            logger.info(f"Failed login attempt for email: {email}")
            raise InvalidCredentialsException()
        return user
